"""Input checks shared by the mutating components."""

from __future__ import annotations


def is_quantity(value: object) -> bool:
    """True for plain ints; bools and floats are not quantities."""
    return isinstance(value, int) and not isinstance(value, bool)
