from src.rx_draft.domain.models import DraftCategory


def collapse_to_single_category(categories: list[DraftCategory]) -> None:
    """Keep only the first category enabled (single-category mode)."""
    for index, category in enumerate(categories):
        category.is_enabled = index == 0
