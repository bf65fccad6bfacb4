"""Shared test fixtures."""

import uuid
from datetime import datetime

import pytest

from src.rx_draft.application.schemas import CategorySnapshot, EventSnapshot
from src.rx_draft.domain.models import DraftCategory, DraftEventSettings
from src.rx_draft.domain.store import DraftSettingsStore


@pytest.fixture
def draft() -> DraftEventSettings:
    return DraftEventSettings(
        name="Summer Fair",
        currency_code="EUR",
        categories=[
            DraftCategory(name="Drinks", sort_order=0),
            DraftCategory(name="Food", sort_order=1),
            DraftCategory(name="Merch", sort_order=2),
        ],
    )


@pytest.fixture
def store(draft: DraftEventSettings) -> DraftSettingsStore:
    return DraftSettingsStore(draft)


@pytest.fixture
def snapshot() -> EventSnapshot:
    return EventSnapshot(
        name="Summer Fair",
        date=datetime(2024, 3, 1, 9, 0),
        currency_code="EUR",
        categories=[
            CategorySnapshot(name="Food", sort_order=1),
            CategorySnapshot(name="Drinks", sort_order=0),
        ],
    )


@pytest.fixture
def product_ids() -> list[uuid.UUID]:
    return [uuid.uuid4() for _ in range(3)]
