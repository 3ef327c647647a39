"""Query Resolver - filters catalog rows and derives their health status.

- Warehouse filter: exact code match, "all" disables it
- Search: case-insensitive substring over name, sku and id
- Status filter: "healthy" / "low" / "critical", anything else disables it
- Result keeps catalog insertion order
"""

from __future__ import annotations

import logging
from typing import Optional

from stockview.engine.catalog import CatalogStore
from stockview.models.inventory import Product, ProductRow, StockStatus

logger = logging.getLogger(__name__)

ALL = "all"


def classify_status(stock: int, demand: int) -> StockStatus:
    """Healthy above demand, Low at exactly demand (0/0 included), Critical below."""
    if stock > demand:
        return StockStatus.HEALTHY
    if stock == demand:
        return StockStatus.LOW
    return StockStatus.CRITICAL


def to_row(product: Product) -> ProductRow:
    return ProductRow(
        id=product.id,
        name=product.name,
        sku=product.sku,
        warehouse_code=product.warehouse_code,
        stock=product.stock,
        demand=product.demand,
        status=classify_status(product.stock, product.demand),
    )


def _status_filter(status: object) -> Optional[StockStatus]:
    # Case-significant: only the lower-case enum values are recognized.
    if not isinstance(status, str) or status == ALL:
        return None
    try:
        return StockStatus(status)
    except ValueError:
        logger.debug("Ignoring unknown status filter: %r", status)
        return None


def _active(value: object) -> bool:
    return isinstance(value, str) and value != "" and value != ALL


class QueryResolver:
    """Read-only product row queries over a catalog."""

    def __init__(self, catalog: CatalogStore) -> None:
        self._catalog = catalog

    def resolve(
        self,
        search: Optional[str] = None,
        status: Optional[str] = None,
        warehouse: Optional[str] = None,
    ) -> list[ProductRow]:
        products = self._catalog.all_rows()

        if _active(warehouse):
            products = [p for p in products if p.warehouse_code == warehouse]

        if isinstance(search, str) and search:
            q = search.lower()
            products = [
                p for p in products
                if q in p.name.lower() or q in p.sku.lower() or q in p.id.lower()
            ]

        rows = [to_row(p) for p in products]

        wanted = _status_filter(status)
        if wanted is not None:
            rows = [r for r in rows if r.status == wanted]

        return rows
