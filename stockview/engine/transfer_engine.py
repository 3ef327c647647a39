"""Transfer Engine - moves stock of a product between warehouses.

- Validates the request before touching any row (first failing check wins)
- Decrements the source row and increments or creates the destination row
- A newly created destination row inherits the source row's demand
- Total stock of the product across its rows is conserved
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from typing import Optional

from stockview.engine.audit import AuditTrail
from stockview.engine.catalog import CatalogStore
from stockview.engine.errors import (
    InsufficientStockError,
    InvalidArgumentError,
    InventoryError,
    NotFoundError,
)
from stockview.engine.locking import RowLocks
from stockview.engine.query_resolver import to_row
from stockview.engine.validation import is_quantity
from stockview.models.inventory import Product, ProductRow

logger = logging.getLogger(__name__)


class TransferEngine:
    """Validates and applies stock transfers between warehouse rows."""

    def __init__(
        self,
        catalog: CatalogStore,
        locks: RowLocks,
        audit: Optional[AuditTrail] = None,
        enforce_known_destination: bool = True,
    ) -> None:
        self._catalog = catalog
        self._locks = locks
        self._audit = audit or AuditTrail()
        self._enforce_known_destination = enforce_known_destination

    def validate_transfer(
        self,
        source: Optional[Product],
        product_id: str,
        from_code: str,
        to_code: str,
        qty: int,
    ) -> Product:
        """Checks a transfer request against the current source row.

        Order: missing source row, bad quantity, same warehouse, unknown
        destination (when enforced), insufficient stock.
        """
        if source is None:
            raise NotFoundError(f"Product {product_id} not found in source warehouse {from_code}")

        if not is_quantity(qty) or qty <= 0:
            raise InvalidArgumentError(f"Transfer quantity must be a positive integer, got {qty!r}")

        if to_code == from_code:
            raise InvalidArgumentError("Source and destination warehouse must differ")

        if not isinstance(to_code, str) or not to_code:
            raise InvalidArgumentError(f"Invalid destination warehouse: {to_code!r}")

        if self._enforce_known_destination and not self._catalog.has_warehouse(to_code):
            raise InvalidArgumentError(f"Unknown destination warehouse: {to_code}")

        if qty > source.stock:
            raise InsufficientStockError(
                f"Insufficient stock: {product_id}/{from_code} "
                f"available={source.stock}, requested={qty}"
            )

        return source

    def transfer(self, product_id: str, from_code: str, to_code: str, qty: int) -> ProductRow:
        """Moves `qty` units and returns the source row after the move."""
        if not isinstance(product_id, str) or not isinstance(from_code, str):
            raise NotFoundError(f"Product {product_id!r} not found in source warehouse {from_code!r}")

        src_key = (product_id, from_code)
        keys = [src_key]
        if isinstance(to_code, str):
            keys.append((product_id, to_code))

        with self._locks.hold(*keys):
            source = self._catalog.find_row(*src_key)
            try:
                self.validate_transfer(source, product_id, from_code, to_code, qty)
            except InventoryError as e:
                logger.warning("Transfer rejected %s %s -> %s x%r: %s", product_id, from_code, to_code, qty, e)
                raise

            destination = self._catalog.find_row(product_id, to_code)
            created = destination is None

            source_after = replace(source, stock=source.stock - qty)
            if created:
                destination_before = 0
                destination_after = Product(
                    id=source.id,
                    name=source.name,
                    sku=source.sku,
                    warehouse_code=to_code,
                    stock=qty,
                    demand=source.demand,
                )
            else:
                destination_before = destination.stock
                destination_after = replace(destination, stock=destination.stock + qty)

            self._catalog.upsert_rows(source_after, destination_after)

        transfer_id = f"TRF-{uuid.uuid4().hex[:8].upper()}"
        details = {"transfer_id": transfer_id, "from": from_code, "to": to_code, "quantity": qty}
        self._audit.log_change(
            "transfer_out", product_id, from_code, "stock",
            source.stock, source_after.stock, details=details,
        )
        self._audit.log_change(
            "transfer_in", product_id, to_code, "stock",
            destination_before, destination_after.stock,
            details={**details, "created": created},
        )
        logger.info(
            "Transfer completed %s: %s %s -> %s x%d (destination %s)",
            transfer_id, product_id, from_code, to_code, qty,
            "created" if created else "updated",
        )
        return to_row(source_after)

    def total_stock(self, product_id: str) -> int:
        """Stock of a product summed over all its warehouse rows."""
        return sum(row.stock for row in self._catalog.rows_for_product(product_id))
