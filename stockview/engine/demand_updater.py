"""Demand Updater - sets a product row's forecast demand."""

from __future__ import annotations

import logging
from typing import Optional

from stockview.engine.audit import AuditTrail
from stockview.engine.catalog import CatalogStore
from stockview.engine.errors import InvalidArgumentError, NotFoundError
from stockview.engine.locking import RowLocks
from stockview.engine.query_resolver import to_row
from stockview.engine.validation import is_quantity
from stockview.models.inventory import Product, ProductRow

logger = logging.getLogger(__name__)


class DemandUpdater:
    """Validates and applies demand changes to single product rows."""

    def __init__(
        self,
        catalog: CatalogStore,
        locks: RowLocks,
        audit: Optional[AuditTrail] = None,
    ) -> None:
        self._catalog = catalog
        self._locks = locks
        self._audit = audit or AuditTrail()

    def _resolve_row(self, product_id: str, warehouse_code: Optional[str]) -> Product:
        """Finds the target row.

        With a warehouse code the (id, warehouse) row is used. Without one the
        id must be held in exactly one warehouse, otherwise the caller has to
        say which row it means.
        """
        if not isinstance(product_id, str):
            raise NotFoundError(f"Product not found: {product_id!r}")

        if warehouse_code is not None:
            row = (
                self._catalog.find_row(product_id, warehouse_code)
                if isinstance(warehouse_code, str) else None
            )
            if row is None:
                raise NotFoundError(f"Product {product_id} not found in warehouse {warehouse_code}")
            return row

        rows = self._catalog.rows_for_product(product_id)
        if not rows:
            raise NotFoundError(f"Product not found: {product_id}")
        if len(rows) > 1:
            codes = ", ".join(r.warehouse_code for r in rows)
            raise InvalidArgumentError(
                f"Product {product_id} is held in several warehouses ({codes}); specify the warehouse"
            )
        return rows[0]

    def update(
        self,
        product_id: str,
        demand: int,
        warehouse_code: Optional[str] = None,
    ) -> ProductRow:
        target = self._resolve_row(product_id, warehouse_code)

        with self._locks.hold(target.key):
            if warehouse_code is None:
                # A transfer may have created another row for this id meanwhile.
                self._resolve_row(product_id, None)
            row = self._catalog.find_row(*target.key)
            if not is_quantity(demand) or demand < 0:
                logger.warning("Demand update rejected for %s/%s: %r", row.id, row.warehouse_code, demand)
                raise InvalidArgumentError(f"Demand must be a non-negative integer, got {demand!r}")

            before = row.demand
            row.demand = demand
            self._catalog.upsert_row(row)

        self._audit.log_change(
            operation_type="demand_update",
            product_id=row.id,
            warehouse_code=row.warehouse_code,
            field_name="demand",
            value_before=before,
            value_after=demand,
        )
        logger.info("Demand updated: %s/%s %d -> %d", row.id, row.warehouse_code, before, demand)
        return to_row(row)
