"""Quantity arithmetic shared across the domain.

Python integers are unbounded, so the representable range of a stock
quantity is stated explicitly.  The upper bound matches a signed 32-bit
counter.
"""

from __future__ import annotations

from warehouse.domain.exceptions import ArithmeticOverflowError, InvalidQuantityError

MIN_QUANTITY = 0
MAX_QUANTITY = 2**31 - 1


def check_quantity(quantity: int) -> None:
    """Raise InvalidQuantityError unless ``quantity`` is a storable stock level.

    The sign is checked first, so a negative value is always reported as
    negative.
    """
    if quantity < MIN_QUANTITY:
        raise InvalidQuantityError("Quantity cannot be negative.")
    if quantity > MAX_QUANTITY:
        raise InvalidQuantityError(f"Quantity cannot exceed {MAX_QUANTITY}.")


def checked_add(quantity: int, delta: int) -> int:
    """Add ``delta`` to ``quantity``, refusing to leave the quantity range.

    Raises ArithmeticOverflowError if the sum exceeds MAX_QUANTITY.
    """
    result = quantity + delta
    if result > MAX_QUANTITY:
        raise ArithmeticOverflowError(
            f"Arithmetic operation resulted in an overflow "
            f"({quantity} + {delta} exceeds {MAX_QUANTITY})."
        )
    return result
