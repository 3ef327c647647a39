"""Inventory data models: warehouses, product rows, KPI points."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum
from typing import Optional


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


class StockStatus(str, Enum):
    HEALTHY = "healthy"
    LOW = "low"
    CRITICAL = "critical"

    @property
    def label(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True)
class Warehouse:
    code: str
    name: str
    city: str
    country: str

    def to_dict(self) -> dict:
        return {
            "code": self.code,
            "name": self.name,
            "city": self.city,
            "country": self.country,
        }


@dataclass
class Product:
    """A product's holding at one warehouse."""

    id: str
    name: str
    sku: str
    warehouse_code: str
    stock: int
    demand: int

    @property
    def key(self) -> tuple[str, str]:
        return (self.id, self.warehouse_code)


@dataclass(frozen=True)
class ProductRow:
    """Read-only view of a product row with its derived health status."""

    id: str
    name: str
    sku: str
    warehouse_code: str
    stock: int
    demand: int
    status: StockStatus

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "sku": self.sku,
            "warehouse": self.warehouse_code,
            "stock": self.stock,
            "demand": self.demand,
            "status": self.status.label,
        }


@dataclass(frozen=True)
class KpiPoint:
    date: date
    stock: int
    demand: int

    def to_dict(self) -> dict:
        return {"date": self.date.isoformat(), "stock": self.stock, "demand": self.demand}


@dataclass(frozen=True)
class KpiSummary:
    total_stock: int
    total_demand: int
    fill_rate: float

    def to_dict(self) -> dict:
        return {
            "total_stock": self.total_stock,
            "total_demand": self.total_demand,
            "fill_rate": round(self.fill_rate, 1),
        }


@dataclass
class AuditLogEntry:
    entry_id: str
    operation_type: str
    product_id: str
    warehouse_code: str
    field_name: str
    value_before: int
    value_after: int
    change_amount: int
    timestamp: str = field(default_factory=_utc_now)
    details: Optional[dict] = None

    def to_dict(self) -> dict:
        return {
            "entry_id": self.entry_id,
            "operation_type": self.operation_type,
            "product_id": self.product_id,
            "warehouse": self.warehouse_code,
            "field": self.field_name,
            "before": self.value_before,
            "after": self.value_after,
            "change": self.change_amount,
            "timestamp": self.timestamp,
            "details": self.details or {},
        }
