"""Unified error codes and custom exceptions.

Error code ranges:
  2xxx: Item selection
"""


class AppError(Exception):
    """Base application error."""

    def __init__(self, code: int, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(message)


# --- 2xxx: Item selection ---

class ItemNotSelectedError(AppError):
    def __init__(self, item_id: object) -> None:
        super().__init__(2001, f"Item is not selected: {item_id}")


class InvalidWeightError(AppError):
    def __init__(self, value: object) -> None:
        super().__init__(2002, f"Weight must be a non-negative number, got {value!r}")


class UnknownItemError(AppError):
    def __init__(self, item_id: object) -> None:
        super().__init__(2003, f"Item not in catalog: {item_id}")
