"""KPI Window Generator - trailing-day slices of the daily KPI series.

Range specifiers are "all" or "<N>d". Anything malformed falls back to the
full series rather than failing.
"""

from __future__ import annotations

import re
from datetime import timedelta
from typing import Iterable, Optional, Sequence

from stockview.models.inventory import KpiPoint, KpiSummary, ProductRow

RANGE_PATTERN = re.compile(r"(\d+)d", re.IGNORECASE)


def parse_range(range_spec: object) -> Optional[int]:
    """Number of trailing days, or None when the whole series is wanted."""
    if not isinstance(range_spec, str):
        return None
    match = RANGE_PATTERN.fullmatch(range_spec.strip())
    if not match:
        return None
    days = int(match.group(1))
    return days if days > 0 else None


class KpiWindowGenerator:
    """Serves windows over a fixed, ascending daily series."""

    def __init__(self, series: Sequence[KpiPoint]) -> None:
        self._series: tuple[KpiPoint, ...] = tuple(series)

    @property
    def series(self) -> tuple[KpiPoint, ...]:
        return self._series

    def window(self, range_spec: object) -> list[KpiPoint]:
        days = parse_range(range_spec)
        if days is None or not self._series:
            return list(self._series)

        last_date = self._series[-1].date
        # A window covering the whole span needs no date arithmetic (and
        # very large N would overflow timedelta / date.min).
        if days > (last_date - self._series[0].date).days:
            return list(self._series)
        start_date = last_date - timedelta(days=days - 1)
        return [p for p in self._series if start_date <= p.date <= last_date]


def summarize(rows: Iterable[ProductRow]) -> KpiSummary:
    """Totals for the KPI cards; fill rate is demand covered by stock, in percent."""
    total_stock = 0
    total_demand = 0
    served = 0
    for row in rows:
        total_stock += row.stock
        total_demand += row.demand
        served += min(row.stock, row.demand)

    fill_rate = 100.0 if total_demand == 0 else served / total_demand * 100
    return KpiSummary(total_stock=total_stock, total_demand=total_demand, fill_rate=fill_rate)
