"""Sample catalog and KPI series generation.

3 warehouses, 20 product rows cycling four items, and a daily aggregate
stock/demand series with a weekend demand dip and a mid-series trend turn.
"""
from __future__ import annotations

import json
import random
from datetime import date, timedelta
from typing import List, Optional, Tuple

from stockview.engine.validation import is_quantity
from stockview.models.inventory import KpiPoint, Product, Warehouse


# --- CONSTANTS ---

WAREHOUSES = [
    Warehouse("BLR-A", "Bangalore - A", "Bangalore", "India"),
    Warehouse("PNQ-C", "Pune - C", "Pune", "India"),
    Warehouse("DEL-B", "Delhi - B", "Delhi", "India"),
]

# (name, sku, warehouse, stock, demand)
SAMPLE_ITEMS = [
    ("12mm Hex Bolt", "HEX-12-100", "BLR-A", 180, 120),
    ("Steel Washer", "WSR-08-500", "BLR-A", 50, 80),
    ("M8 Nut", "NUT-08-200", "PNQ-C", 80, 80),
    ("Bearing 608ZZ", "BRG-608-50", "DEL-B", 24, 120),
]

SAMPLE_PRODUCT_COUNT = 20
KPI_SERIES_DAYS = 45

KPI_START_STOCK = 420
KPI_START_DEMAND = 440
KPI_DEMAND_FLOOR = 350
WEEKEND_DEMAND_FACTOR = 0.75


# --- GENERATION ---

def generate_products(count: int = SAMPLE_PRODUCT_COUNT) -> List[Product]:
    """P-1001, P-1002, ... cycling through SAMPLE_ITEMS."""
    products = []
    for i in range(count):
        name, sku, warehouse, stock, demand = SAMPLE_ITEMS[i % len(SAMPLE_ITEMS)]
        products.append(Product(f"P-{1001 + i}", name, sku, warehouse, stock, demand))
    return products


def generate_kpi_series(
    days: int = KPI_SERIES_DAYS,
    end_date: Optional[date] = None,
    seed: Optional[int] = None,
) -> List[KpiPoint]:
    """Daily aggregate stock/demand points, ascending, ending at end_date.

    end_date defaults to yesterday. Stock drifts down and demand up over the
    first half of the series, then the trend reverses.
    """
    rng = random.Random(seed)
    end_date = end_date or date.today() - timedelta(days=1)
    stock = KPI_START_STOCK
    demand = KPI_START_DEMAND

    points = []
    for i in range(days):
        day = end_date - timedelta(days=days - 1 - i)
        weekend_factor = WEEKEND_DEMAND_FACTOR if day.weekday() >= 5 else 1.0

        stock += rng.randint(-10, 9)
        demand = max(KPI_DEMAND_FLOOR, int((demand + rng.randint(-5, 4)) * weekend_factor))

        if i < days / 2:
            stock -= 2
            demand += 1
        else:
            stock += 1
            demand -= 2

        stock = max(0, stock)
        points.append(KpiPoint(date=day, stock=stock, demand=demand))
    return points


# --- LOADING ---

def load_catalog_file(filepath: str) -> Tuple[List[Warehouse], List[Product]]:
    """Reads {"warehouses": [...], "products": [...]} from a JSON file.

    Product entries use the "warehouse" key for the warehouse code.
    """
    with open(filepath, "r", encoding="utf-8") as f:
        data = json.load(f)

    warehouses = [
        Warehouse(w["code"], w["name"], w.get("city", ""), w.get("country", ""))
        for w in data.get("warehouses", [])
    ]
    codes = {w.code for w in warehouses}

    products: List[Product] = []
    seen = set()
    for p in data.get("products", []):
        key = (p["id"], p["warehouse"])
        if p["warehouse"] not in codes:
            raise ValueError(f"Unknown warehouse in catalog file: {key[0]}/{key[1]}")
        for name in ("stock", "demand"):
            if not is_quantity(p[name]) or p[name] < 0:
                raise ValueError(f"Invalid {name} in catalog file for {key[0]}/{key[1]}: {p[name]!r}")
        if key in seen:
            raise ValueError(f"Duplicate product row in catalog file: {key[0]}/{key[1]}")
        seen.add(key)
        products.append(Product(
            id=p["id"],
            name=p["name"],
            sku=p["sku"],
            warehouse_code=p["warehouse"],
            stock=p["stock"],
            demand=p["demand"],
        ))
    return warehouses, products
