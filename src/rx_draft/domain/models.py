"""Domain models for rx_draft — pure dataclasses, no business logic."""

import uuid
from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class DraftCategory:
    name: str
    is_enabled: bool = True
    sort_order: int = 0
    id: uuid.UUID = field(default_factory=uuid.uuid4)


@dataclass
class DraftEventSettings:
    name: str
    event_date: datetime | None = None  # seeded from the committed event
    currency_code: str = "USD"
    categories_enabled: bool = True    # False = single-category mode
    promos_enabled: bool = True
    round_up_enabled: bool = True
    closing_timestamp: datetime | None = None  # None = auto-finalize off
    categories: list[DraftCategory] = field(default_factory=list)

    @property
    def auto_finalize_enabled(self) -> bool:
        return self.closing_timestamp is not None
