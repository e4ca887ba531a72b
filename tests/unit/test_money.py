"""Unit tests for integer-cent money helpers."""

from decimal import Decimal

import pytest

from dvc_pricing.utils.money import (
    cents_to_dollars,
    dollars_to_cents,
    format_dollars_from_cents,
    mean_cents,
    percent_of_cents,
)


class TestCentArithmetic:
    """Tests for rounding and conversion."""

    def test_percent_rounds_half_up(self) -> None:
        assert percent_of_cents(10001, 70) == 7001  # 7000.7
        assert percent_of_cents(5, 70) == 4  # 3.5

    def test_dollars_to_cents_accepts_negative_decimal(self) -> None:
        assert dollars_to_cents(Decimal("-2")) == -200
        assert dollars_to_cents("4.005") == 401

    def test_cents_to_dollars_is_exact(self) -> None:
        assert cents_to_dollars(3500) == Decimal("35")
        assert cents_to_dollars(2801) == Decimal("28.01")

    def test_mean_rounds_half_up(self) -> None:
        assert mean_cents([4200, 3900]) == 4050
        assert mean_cents([1, 2]) == 2

    def test_mean_of_empty_list_raises(self) -> None:
        with pytest.raises(ValueError):
            mean_cents([])


class TestFormatDollars:
    """Tests for format_dollars_from_cents."""

    def test_whole_dollars_with_thousands_separator(self) -> None:
        assert format_dollars_from_cents(310000) == "$3,100"

    def test_with_cents(self) -> None:
        assert format_dollars_from_cents(7001, whole=False) == "$70.01"

    def test_none_is_zero(self) -> None:
        assert format_dollars_from_cents(None) == "$0"

    def test_negative_amount(self) -> None:
        assert format_dollars_from_cents(-150, whole=False) == "-$1.50"
