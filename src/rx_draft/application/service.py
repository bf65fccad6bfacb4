"""Edit-session entry points: copy a committed event into a draft store."""

import logging

from src.rx_common.datetime_utils import truncate_to_minute
from src.rx_draft.application.schemas import EventSnapshot
from src.rx_draft.domain.categories import collapse_to_single_category
from src.rx_draft.domain.models import DraftCategory, DraftEventSettings
from src.rx_draft.domain.store import DraftSettingsStore

logger = logging.getLogger(__name__)


def draft_from_snapshot(snapshot: EventSnapshot) -> DraftEventSettings:
    """Copy-in: the draft shares no mutable state with the snapshot."""
    categories = [
        DraftCategory(
            id=c.id,
            name=c.name,
            is_enabled=c.is_enabled,
            sort_order=c.sort_order,
        )
        for c in sorted(snapshot.categories, key=lambda c: c.sort_order)
    ]
    closing = snapshot.closing_date
    return DraftEventSettings(
        name=snapshot.name,
        event_date=snapshot.date,
        currency_code=snapshot.currency_code,
        categories_enabled=snapshot.are_categories_enabled,
        promos_enabled=snapshot.are_promos_enabled,
        round_up_enabled=snapshot.is_total_round_up,
        closing_timestamp=truncate_to_minute(closing) if closing else None,
        categories=categories,
    )


def open_draft(snapshot: EventSnapshot) -> DraftSettingsStore:
    store = DraftSettingsStore(draft_from_snapshot(snapshot))
    logger.debug("Draft opened: event=%s", snapshot.name)
    return store


def switch_category_mode(store: DraftSettingsStore, enabled: bool, locked: bool) -> bool:
    """Set category mode; collapse to the first category when going single."""
    return store.set_category_mode(
        enabled,
        locked,
        on_category_mode_change=lambda: collapse_to_single_category(store.draft.categories),
    )
