"""Catalog Store - the canonical in-memory collection of rows and warehouses.

Rows are keyed by (product_id, warehouse_code) and kept in insertion order.
This layer does no validation; mutating components check their inputs
before calling `upsert_row` / `upsert_rows`.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import replace
from typing import Iterable, Optional

from stockview.models.inventory import Product, Warehouse

logger = logging.getLogger(__name__)


class CatalogStore:
    """Keyed store of product rows plus the fixed warehouse reference set."""

    def __init__(
        self,
        warehouses: Iterable[Warehouse] = (),
        products: Iterable[Product] = (),
    ) -> None:
        # {(product_id, warehouse_code): Product}
        self._rows: dict[tuple[str, str], Product] = {}
        self._warehouses: dict[str, Warehouse] = {w.code: w for w in warehouses}
        self._lock = threading.Lock()
        for product in products:
            self.upsert_row(product)

    def __len__(self) -> int:
        with self._lock:
            return len(self._rows)

    # --- Reads: every returned row is a copy ---

    def find_row(self, product_id: str, warehouse_code: str) -> Optional[Product]:
        with self._lock:
            row = self._rows.get((product_id, warehouse_code))
            return replace(row) if row else None

    def find_any_row_by_id(self, product_id: str) -> Optional[Product]:
        """First row for the product id in insertion order."""
        with self._lock:
            for (pid, _), row in self._rows.items():
                if pid == product_id:
                    return replace(row)
        return None

    def rows_for_product(self, product_id: str) -> list[Product]:
        with self._lock:
            return [replace(row) for (pid, _), row in self._rows.items() if pid == product_id]

    def all_rows(self) -> list[Product]:
        with self._lock:
            return [replace(row) for row in self._rows.values()]

    def warehouses(self) -> list[Warehouse]:
        return list(self._warehouses.values())

    def has_warehouse(self, code: str) -> bool:
        return code in self._warehouses

    # --- Writes ---

    def upsert_row(self, row: Product) -> None:
        """Insert the row, or overwrite stock/demand of the existing one."""
        with self._lock:
            self._upsert(row)

    def upsert_rows(self, *rows: Product) -> None:
        """Apply several upserts as one step, invisible to readers until done."""
        with self._lock:
            for row in rows:
                self._upsert(row)

    def _upsert(self, row: Product) -> None:
        existing = self._rows.get(row.key)
        if existing is None:
            self._rows[row.key] = replace(row)
            logger.debug("Row created: %s/%s", row.id, row.warehouse_code)
            return
        existing.stock = row.stock
        existing.demand = row.demand
