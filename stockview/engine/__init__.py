from stockview.engine.audit import AuditTrail
from stockview.engine.catalog import CatalogStore
from stockview.engine.demand_updater import DemandUpdater
from stockview.engine.errors import (
    InsufficientStockError,
    InvalidArgumentError,
    InventoryError,
    NotFoundError,
)
from stockview.engine.kpi_window import KpiWindowGenerator
from stockview.engine.locking import RowLocks
from stockview.engine.query_resolver import QueryResolver, classify_status
from stockview.engine.transfer_engine import TransferEngine

__all__ = [
    "AuditTrail",
    "CatalogStore",
    "DemandUpdater",
    "InsufficientStockError",
    "InvalidArgumentError",
    "InventoryError",
    "KpiWindowGenerator",
    "NotFoundError",
    "QueryResolver",
    "RowLocks",
    "TransferEngine",
    "classify_status",
]
