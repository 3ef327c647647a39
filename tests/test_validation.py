"""Input check unit tests."""

import pytest

from stockview.engine.validation import is_quantity


class TestIsQuantity:
    @pytest.mark.parametrize("value", [0, 1, -3, 10**12])
    def test_ints(self, value):
        assert is_quantity(value) is True

    @pytest.mark.parametrize("value", [True, False, 1.0, 7.9, "5", None])
    def test_non_ints(self, value):
        assert is_quantity(value) is False
