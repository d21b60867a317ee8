"""Domain-level exceptions.

All inventory rule violations are expressed as subclasses of
DomainException so the CLI layer can catch them uniformly.  Each
InventoryError also carries an ``ErrorKind`` so callers can dispatch on
the kind of failure rather than on the exception class.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    DUPLICATE_ITEM = "DUPLICATE_ITEM"
    ITEM_NOT_FOUND = "ITEM_NOT_FOUND"
    INVALID_QUANTITY = "INVALID_QUANTITY"
    ARITHMETIC_OVERFLOW = "ARITHMETIC_OVERFLOW"


class DomainException(Exception):
    """Base class for all domain errors."""


class InventoryError(DomainException):
    """A repository or stock operation failed.

    Subclasses pin ``kind``; the message is the human-readable part.
    """

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class DuplicateItemError(InventoryError):
    """An item with the same ID is already stored."""

    kind = ErrorKind.DUPLICATE_ITEM

    def __init__(self, item_id: int, message: str | None = None) -> None:
        super().__init__(message or f"Item with ID {item_id} already exists.")
        self.item_id = item_id


class ItemNotFoundError(InventoryError):
    """No item with the requested ID exists."""

    kind = ErrorKind.ITEM_NOT_FOUND

    def __init__(self, item_id: int, message: str | None = None) -> None:
        super().__init__(message or f"Item with ID {item_id} not found.")
        self.item_id = item_id


class InvalidQuantityError(InventoryError):
    """A target quantity or adjustment amount was negative."""

    kind = ErrorKind.INVALID_QUANTITY


class ArithmeticOverflowError(InventoryError):
    """A stock adjustment would exceed the representable quantity range."""

    kind = ErrorKind.ARITHMETIC_OVERFLOW
