"""KPI Window Generator unit tests."""

from datetime import date, timedelta

import pytest

from stockview.data.generators import generate_kpi_series
from stockview.engine.kpi_window import KpiWindowGenerator, parse_range, summarize
from stockview.models.inventory import ProductRow, StockStatus

END = date(2024, 3, 15)


def _create_generator() -> KpiWindowGenerator:
    return KpiWindowGenerator(generate_kpi_series(45, end_date=END, seed=7))


class TestRangeParsing:
    @pytest.mark.parametrize("text,expected", [("7d", 7), ("30d", 30), ("14D", 14), ("1d", 1)])
    def test_valid(self, text, expected):
        assert parse_range(text) == expected

    @pytest.mark.parametrize("text", ["all", "bogus", "0d", "d", "7", "-7d", "7dd", "", None, 7])
    def test_fallback(self, text):
        assert parse_range(text) is None


class TestWindow:
    def test_seven_days(self):
        generator = _create_generator()
        points = generator.window("7d")
        assert [p.date for p in points] == [date(2024, 3, 9) + timedelta(days=i) for i in range(7)]

    def test_single_day(self):
        generator = _create_generator()
        points = generator.window("1d")
        assert [p.date for p in points] == [END]

    def test_range_longer_than_series(self):
        generator = _create_generator()
        assert len(generator.window("90d")) == 45

    @pytest.mark.parametrize("text", ["45d", "46d", "1000000d", "99999999999d"])
    def test_huge_range_returns_full_series(self, text):
        generator = _create_generator()
        assert generator.window(text) == list(generator.series)

    def test_one_day_short_of_span(self):
        generator = _create_generator()
        points = generator.window("44d")
        assert len(points) == 44
        assert points[0].date == date(2024, 2, 1)

    @pytest.mark.parametrize("text", ["all", "bogus", "0d", None])
    def test_lenient_fallback_returns_full_series(self, text):
        generator = _create_generator()
        assert generator.window(text) == list(generator.series)

    def test_window_does_not_mutate_series(self):
        generator = _create_generator()
        before = generator.series
        window = generator.window("7d")
        window.clear()
        assert generator.series == before
        assert len(generator.series) == 45

    def test_empty_series(self):
        assert KpiWindowGenerator([]).window("7d") == []


class TestSummary:
    def _row(self, stock, demand):
        return ProductRow("P", "n", "s", "W", stock, demand, StockStatus.LOW)

    def test_totals_and_fill_rate(self):
        summary = summarize([self._row(180, 120), self._row(50, 80)])
        assert summary.total_stock == 230
        assert summary.total_demand == 200
        # served = 120 + 50
        assert summary.fill_rate == pytest.approx(85.0)

    def test_zero_demand_is_full_fill(self):
        summary = summarize([self._row(10, 0)])
        assert summary.fill_rate == 100.0

    def test_empty(self):
        summary = summarize([])
        assert (summary.total_stock, summary.total_demand, summary.fill_rate) == (0, 0, 100.0)
