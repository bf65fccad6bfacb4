"""Draft settings store — the mutable edit buffer behind the setup screen.

The presentation layer reads ``store.draft`` and calls the mutators below;
nothing is propagated implicitly. The lock flag is owned by the caller and
passed per call.
"""

import copy
import dataclasses
import logging
from collections.abc import Callable
from datetime import date, datetime, time

from src.rx_common.datetime_utils import local_now
from src.rx_draft.domain.closing_date import (
    default_closing_timestamp,
    merge_date_keep_time,
    merge_time_keep_date,
)
from src.rx_draft.domain.models import DraftEventSettings

logger = logging.getLogger(__name__)


class DraftSettingsStore:
    def __init__(self, draft: DraftEventSettings) -> None:
        self._draft = draft
        self._baseline = copy.deepcopy(draft)

    @property
    def draft(self) -> DraftEventSettings:
        return self._draft

    @property
    def auto_finalize_enabled(self) -> bool:
        return self._draft.auto_finalize_enabled

    def has_changes(self) -> bool:
        """True if the draft differs from the values the session started with."""
        return self._draft != self._baseline

    def reset(self) -> None:
        """Discard every edit made since the session started.

        Restores in place: references to ``store.draft`` stay live.
        """
        restored = copy.deepcopy(self._baseline)
        for f in dataclasses.fields(restored):
            setattr(self._draft, f.name, getattr(restored, f.name))

    # --- General ---

    def set_name(self, text: str) -> None:
        self._draft.name = text

    def set_currency_code(self, code: str) -> None:
        self._draft.currency_code = code

    def set_category_mode(
        self,
        enabled: bool,
        locked: bool,
        on_category_mode_change: Callable[[], None] | None = None,
    ) -> bool:
        """Switch between multiple (True) and single (False) category mode.

        Returns True when the switch to single mode fired the notification.
        Fires only on a True -> False transition; locked calls change nothing.
        """
        if locked:
            logger.debug("Category mode change ignored: draft is locked")
            return False
        was_enabled = self._draft.categories_enabled
        self._draft.categories_enabled = enabled
        if was_enabled and not enabled:
            if on_category_mode_change is not None:
                on_category_mode_change()
            return True
        return False

    def set_promos_enabled(self, enabled: bool) -> None:
        self._draft.promos_enabled = enabled

    def set_round_up_enabled(self, enabled: bool) -> None:
        self._draft.round_up_enabled = enabled

    # --- Auto-finalize ---

    def set_auto_finalize(self, enabled: bool, now: datetime | None = None) -> None:
        """Enable (end of today, unless already set) or disable auto-finalize.

        ``now`` defaults to the local clock.
        """
        if not enabled:
            self._draft.closing_timestamp = None
            return
        if self._draft.closing_timestamp is None:
            if now is None:
                now = local_now()
            self._draft.closing_timestamp = default_closing_timestamp(now)

    def set_closing_date_part(self, date_value: date) -> None:
        current = self._draft.closing_timestamp
        if current is None:
            logger.debug("Closing date edit ignored: auto-finalize is off")
            return
        self._draft.closing_timestamp = merge_date_keep_time(date_value, current)

    def set_closing_time_part(self, time_value: time | datetime) -> None:
        current = self._draft.closing_timestamp
        if current is None:
            logger.debug("Closing time edit ignored: auto-finalize is off")
            return
        self._draft.closing_timestamp = merge_time_keep_date(time_value, current)
