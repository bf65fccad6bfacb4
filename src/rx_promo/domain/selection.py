"""Item selection mapping: selected catalog item id -> Decimal weight.

Used for a promo's star products (product id -> surcharge). Presence of a key
is the selection; a fresh selection starts at weight 0. ``toggle`` is the only
way in or out of the map.
"""

import logging
from collections.abc import Hashable, Iterable, Iterator, Mapping
from decimal import Decimal, InvalidOperation

from src.rx_common.errors import InvalidWeightError, ItemNotSelectedError, UnknownItemError

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


class SelectionMap:
    def __init__(self, seed: Mapping[Hashable, Decimal | int | str] | None = None) -> None:
        self._weights: dict[Hashable, Decimal] = {}
        self._catalog: frozenset[Hashable] | None = None
        for item_id, value in (seed or {}).items():
            self._weights[item_id] = _to_weight(value)

    def __len__(self) -> int:
        return len(self._weights)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._weights)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._weights

    def is_selected(self, item_id: Hashable) -> bool:
        return item_id in self._weights

    def weight_of(self, item_id: Hashable) -> Decimal | None:
        return self._weights.get(item_id)

    def as_dict(self) -> dict[Hashable, Decimal]:
        return dict(self._weights)

    def toggle(self, item_id: Hashable) -> bool:
        """Select or deselect ``item_id``. Returns True if it is now selected."""
        if item_id in self._weights:
            del self._weights[item_id]
            return False
        if self._catalog is not None and item_id not in self._catalog:
            raise UnknownItemError(item_id)
        self._weights[item_id] = ZERO
        return True

    def set_weight(self, item_id: Hashable, value: Decimal | int | str) -> None:
        if item_id not in self._weights:
            raise ItemNotSelectedError(item_id)
        self._weights[item_id] = _to_weight(value)

    def sync_catalog(self, item_ids: Iterable[Hashable]) -> list[Hashable]:
        """Adopt a new catalog snapshot and drop selections no longer in it."""
        self._catalog = frozenset(item_ids)
        removed = [item_id for item_id in self._weights if item_id not in self._catalog]
        for item_id in removed:
            del self._weights[item_id]
        if removed:
            logger.debug("Dropped %d selections missing from catalog", len(removed))
        return removed

    def remap(self, id_map: Mapping[Hashable, Hashable]) -> "SelectionMap":
        """Translate keys through ``id_map`` (old id -> new id).

        Entries without a mapping are dropped; weights carry over unchanged.
        When two old ids map to the same new id the first entry wins. A known
        catalog snapshot is translated the same way.
        """
        remapped = SelectionMap()
        for old_id, weight in self._weights.items():
            new_id = id_map.get(old_id)
            if new_id is None:
                continue
            if new_id in remapped._weights:
                logger.debug("Remap collision on %s: keeping first selection", new_id)
                continue
            remapped._weights[new_id] = weight
        if self._catalog is not None:
            remapped._catalog = frozenset(
                id_map[item_id] for item_id in self._catalog if item_id in id_map
            )
        return remapped


def _to_weight(value: Decimal | int | str) -> Decimal:
    if isinstance(value, float | bool):
        raise InvalidWeightError(value)
    try:
        weight = Decimal(value)
    except (InvalidOperation, TypeError, ValueError) as exc:
        raise InvalidWeightError(value) from exc
    if not weight.is_finite() or weight < 0:
        raise InvalidWeightError(value)
    return weight
