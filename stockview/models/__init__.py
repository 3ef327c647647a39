from stockview.models.inventory import (
    AuditLogEntry,
    KpiPoint,
    KpiSummary,
    Product,
    ProductRow,
    StockStatus,
    Warehouse,
)

__all__ = [
    "AuditLogEntry",
    "KpiPoint",
    "KpiSummary",
    "Product",
    "ProductRow",
    "StockStatus",
    "Warehouse",
]
