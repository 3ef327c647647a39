"""Error kinds raised by inventory mutations.

Callers can catch `InventoryError` for any engine failure and read `kind`
to tell the three cases apart without matching on message text.
"""

from __future__ import annotations

from typing import Optional


class InventoryError(Exception):
    """Base class for all engine failures."""

    kind: str = "InventoryError"

    def __init__(self, message: Optional[str] = None) -> None:
        if message is None:
            message = "Inventory operation failed"
        super().__init__(message)


class NotFoundError(InventoryError):
    """The referenced product row does not exist in the requested warehouse."""

    kind = "NotFound"


class InvalidArgumentError(InventoryError):
    """Malformed or out-of-range mutation input."""

    kind = "InvalidArgument"


class InsufficientStockError(InventoryError):
    """Transfer quantity exceeds the stock available at the source."""

    kind = "InsufficientStock"
