"""
Inventory engine walkthrough.

Runs the sample catalog through a filter query, the KPI windows, a demand
update and a pair of transfers (one accepted, one rejected).

Usage:
    python demo.py
"""

import logging

from stockview.config import load_settings
from stockview.engine.errors import InventoryError
from stockview.service import InventoryService

logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(name)s] %(levelname)s: %(message)s")
logger = logging.getLogger("demo")


def show_rows(title, rows):
    print(f"\n--- {title} ({len(rows)}) ---")
    for r in rows:
        print(f"   {r.id:<8} {r.warehouse_code:<6} {r.name:<16} stock={r.stock:<4} demand={r.demand:<4} {r.status.label}")


def main():
    service = InventoryService.from_settings(load_settings())

    show_rows("Critical rows", service.list_products(status="critical"))
    show_rows("Search 'hex' in BLR-A", service.list_products(search="hex", warehouse="BLR-A"))

    summary = service.kpi_summary()
    print(f"\nTotal stock: {summary.total_stock}  Total demand: {summary.total_demand}  "
          f"Fill rate: {summary.fill_rate:.1f}%")

    for range_spec in ("7d", "30d", "all"):
        points = service.list_kpis(range_spec)
        print(f"KPIs {range_spec}: {len(points)} points, {points[0].date} .. {points[-1].date}")

    print("\n--- Transfer P-1001 BLR-A -> DEL-B x50 ---")
    source = service.transfer_stock("P-1001", "BLR-A", "DEL-B", 50)
    print(f"✅ Source now stock={source.stock} demand={source.demand}")
    show_rows("P-1001 rows", service.list_products(search="P-1001"))

    print("\n--- Transfer P-1001 BLR-A -> DEL-B x200 ---")
    try:
        service.transfer_stock("P-1001", "BLR-A", "DEL-B", 200)
    except InventoryError as e:
        print(f"❌ {e.kind}: {e}")

    print("\n--- Update demand P-1002 -> 40 ---")
    row = service.update_demand("P-1002", 40)
    print(f"✅ {row.id} demand={row.demand} status={row.status.label}")

    print(f"\nAudit entries: {len(service.audit_log())}")


if __name__ == "__main__":
    main()
