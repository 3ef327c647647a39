"""Inventory service - the operations exposed to dashboards and tool clients.

Reads (products, warehouses, KPIs) never fail on bad filters. Mutations
raise NotFoundError, InvalidArgumentError or InsufficientStockError.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Optional, Sequence

from stockview.config import Settings
from stockview.data.generators import (
    WAREHOUSES,
    generate_kpi_series,
    generate_products,
    load_catalog_file,
)
from stockview.engine.audit import AuditTrail
from stockview.engine.catalog import CatalogStore
from stockview.engine.demand_updater import DemandUpdater
from stockview.engine.kpi_window import KpiWindowGenerator, summarize
from stockview.engine.locking import RowLocks
from stockview.engine.query_resolver import QueryResolver
from stockview.engine.transfer_engine import TransferEngine
from stockview.models.inventory import (
    AuditLogEntry,
    KpiPoint,
    KpiSummary,
    ProductRow,
    Warehouse,
)

logger = logging.getLogger(__name__)


class InventoryService:
    """Wires the engine components around one catalog."""

    def __init__(
        self,
        catalog: CatalogStore,
        kpi_series: Sequence[KpiPoint] = (),
        enforce_known_destination: bool = True,
    ) -> None:
        self.catalog = catalog
        self.audit = AuditTrail()
        locks = RowLocks()
        self._resolver = QueryResolver(catalog)
        self._demand = DemandUpdater(catalog, locks, self.audit)
        self._transfers = TransferEngine(
            catalog, locks, self.audit, enforce_known_destination=enforce_known_destination
        )
        self._kpis = KpiWindowGenerator(kpi_series)

    @classmethod
    def from_settings(cls, settings: Settings, end_date: Optional[date] = None) -> "InventoryService":
        if settings.catalog_path:
            warehouses, products = load_catalog_file(settings.catalog_path)
            logger.info("Catalog loaded from %s: %d rows", settings.catalog_path, len(products))
        else:
            warehouses, products = WAREHOUSES, generate_products()

        series = generate_kpi_series(settings.kpi_days, end_date=end_date, seed=settings.kpi_seed)
        return cls(
            CatalogStore(warehouses, products),
            series,
            enforce_known_destination=settings.strict_warehouses,
        )

    # --- Reads ---

    def list_products(
        self,
        search: Optional[str] = None,
        status: Optional[str] = None,
        warehouse: Optional[str] = None,
    ) -> list[ProductRow]:
        return self._resolver.resolve(search=search, status=status, warehouse=warehouse)

    def list_warehouses(self) -> list[Warehouse]:
        return self.catalog.warehouses()

    def list_kpis(self, range_spec: object = "all") -> list[KpiPoint]:
        return self._kpis.window(range_spec)

    def kpi_summary(
        self,
        search: Optional[str] = None,
        status: Optional[str] = None,
        warehouse: Optional[str] = None,
    ) -> KpiSummary:
        return summarize(self.list_products(search=search, status=status, warehouse=warehouse))

    def audit_log(
        self,
        product_id: Optional[str] = None,
        warehouse: Optional[str] = None,
    ) -> list[AuditLogEntry]:
        return self.audit.entries(product_id=product_id, warehouse_code=warehouse)

    # --- Mutations ---

    def update_demand(
        self,
        product_id: str,
        demand: int,
        warehouse: Optional[str] = None,
    ) -> ProductRow:
        return self._demand.update(product_id, demand, warehouse_code=warehouse)

    def transfer_stock(self, product_id: str, from_code: str, to_code: str, qty: int) -> ProductRow:
        return self._transfers.transfer(product_id, from_code, to_code, qty)

    def total_stock(self, product_id: str) -> int:
        return self._transfers.total_stock(product_id)


def build_service(
    warehouses: Iterable[Warehouse] = WAREHOUSES,
    products: Optional[Iterable] = None,
    kpi_series: Sequence[KpiPoint] = (),
    enforce_known_destination: bool = True,
) -> InventoryService:
    """Service over an explicit catalog; defaults to the sample products."""
    products = generate_products() if products is None else products
    return InventoryService(
        CatalogStore(warehouses, products),
        kpi_series,
        enforce_known_destination=enforce_known_destination,
    )
