"""Pydantic schemas for the committed event record an edit session starts from."""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field


class CategorySnapshot(BaseModel):
    id: uuid.UUID = Field(default_factory=uuid.uuid4)
    name: str
    is_enabled: bool = True
    sort_order: int = 0


class EventSnapshot(BaseModel):
    """Committed event settings. Copied into a draft; never bound live."""

    name: str
    date: datetime
    currency_code: str = Field(default="USD", min_length=3, max_length=3)
    is_total_round_up: bool = True
    are_categories_enabled: bool = True
    are_promos_enabled: bool = True
    closing_date: datetime | None = None
    categories: list[CategorySnapshot] = Field(default_factory=list)
