"""
Inventory Visibility MCP Server

Provides tools for listing products, warehouses and KPI windows, and for the
two inventory mutations (demand update, stock transfer).

Mutation failures come back as {"success": false, "error": <kind>, "message": ...}
where kind is NotFound, InvalidArgument or InsufficientStock.
"""

import json
import logging
from typing import Callable, Dict, List, Optional

from mcp.server import Server
from mcp.types import TextContent, Tool

from stockview.config import load_settings
from stockview.engine.errors import InventoryError
from stockview.service import InventoryService

logger = logging.getLogger(__name__)

app = Server("inventory-visibility")

_service: Optional[InventoryService] = None


def get_service() -> InventoryService:
    global _service
    if _service is None:
        _service = InventoryService.from_settings(load_settings())
    return _service


def _result(data):
    return [TextContent(type="text", text=json.dumps(data, indent=2, ensure_ascii=False))]


_FILTER_PROPERTIES = {
    "search": {"type": "string", "description": "Substring of name, SKU or product id"},
    "status": {"type": "string", "enum": ["all", "healthy", "low", "critical"]},
    "warehouse": {"type": "string", "description": "Warehouse code or 'all'"},
}


@app.list_tools()
async def list_tools() -> List[Tool]:
    return [
        Tool(name="list_products", description="List product rows matching the filters, with health status",
             inputSchema={"type": "object", "properties": _FILTER_PROPERTIES}),
        Tool(name="list_warehouses", description="List all warehouses",
             inputSchema={"type": "object", "properties": {}}),
        Tool(name="list_kpis", description="Daily stock/demand KPIs for a trailing range ('7d', '30d', 'all')",
             inputSchema={"type": "object", "properties": {"range": {"type": "string", "default": "all"}}}),
        Tool(name="get_kpi_summary", description="Total stock, total demand and fill rate for the filtered rows",
             inputSchema={"type": "object", "properties": _FILTER_PROPERTIES}),
        Tool(name="update_demand", description="Set the demand forecast of a product row",
             inputSchema={"type": "object", "properties": {
                 "id": {"type": "string"}, "demand": {"type": "integer", "minimum": 0},
                 "warehouse": {"type": "string", "description": "Required when the product is held in several warehouses"}
             }, "required": ["id", "demand"]}),
        Tool(name="transfer_stock", description="Move stock of a product from one warehouse to another",
             inputSchema={"type": "object", "properties": {
                 "id": {"type": "string"}, "from": {"type": "string"}, "to": {"type": "string"},
                 "qty": {"type": "integer", "minimum": 1}
             }, "required": ["id", "from", "to", "qty"]}),
        Tool(name="get_audit_log", description="Committed inventory changes, optionally filtered by product or warehouse",
             inputSchema={"type": "object", "properties": {
                 "product_id": {"type": "string"}, "warehouse": {"type": "string"}
             }}),
    ]


@app.call_tool()
async def call_tool(name: str, arguments: dict) -> List[TextContent]:
    return _result(handle_tool(name, arguments))


def handle_tool(name: str, arguments: Optional[dict], service: Optional[InventoryService] = None) -> Dict:
    svc = service or get_service()
    a = arguments or {}
    handlers: Dict[str, Callable[[dict], Dict]] = {
        "list_products": lambda a: list_products(svc, a.get("search"), a.get("status"), a.get("warehouse")),
        "list_warehouses": lambda a: list_warehouses(svc),
        "list_kpis": lambda a: list_kpis(svc, a.get("range", "all")),
        "get_kpi_summary": lambda a: get_kpi_summary(svc, a.get("search"), a.get("status"), a.get("warehouse")),
        "update_demand": lambda a: update_demand(svc, a.get("id"), a.get("demand"), a.get("warehouse")),
        "transfer_stock": lambda a: transfer_stock(svc, a.get("id"), a.get("from"), a.get("to"), a.get("qty")),
        "get_audit_log": lambda a: get_audit_log(svc, a.get("product_id"), a.get("warehouse")),
    }
    handler = handlers.get(name)
    if not handler:
        raise ValueError(f"Unknown tool: {name}")
    return handler(a)


# --- Implementation ---

def list_products(svc: InventoryService, search=None, status=None, warehouse=None) -> Dict:
    rows = svc.list_products(search=search, status=status, warehouse=warehouse)
    return {"success": True, "count": len(rows), "data": [r.to_dict() for r in rows]}


def list_warehouses(svc: InventoryService) -> Dict:
    warehouses = svc.list_warehouses()
    return {"success": True, "count": len(warehouses), "data": [w.to_dict() for w in warehouses]}


def list_kpis(svc: InventoryService, range_spec="all") -> Dict:
    points = svc.list_kpis(range_spec)
    return {"success": True, "count": len(points), "data": [p.to_dict() for p in points]}


def get_kpi_summary(svc: InventoryService, search=None, status=None, warehouse=None) -> Dict:
    summary = svc.kpi_summary(search=search, status=status, warehouse=warehouse)
    return {"success": True, "data": summary.to_dict()}


def update_demand(svc: InventoryService, product_id, demand, warehouse=None) -> Dict:
    try:
        row = svc.update_demand(product_id, demand, warehouse=warehouse)
        return {"success": True, "data": row.to_dict()}
    except InventoryError as e:
        return {"success": False, "error": e.kind, "message": str(e)}


def transfer_stock(svc: InventoryService, product_id, from_code, to_code, qty) -> Dict:
    try:
        row = svc.transfer_stock(product_id, from_code, to_code, qty)
        return {"success": True, "data": row.to_dict()}
    except InventoryError as e:
        return {"success": False, "error": e.kind, "message": str(e)}


def get_audit_log(svc: InventoryService, product_id=None, warehouse=None) -> Dict:
    entries = svc.audit_log(product_id=product_id, warehouse=warehouse)
    return {"success": True, "count": len(entries), "data": [e.to_dict() for e in entries]}


def main():
    import asyncio
    from mcp.server.stdio import stdio_server

    settings = load_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )
    logging.getLogger("mcp").setLevel(logging.WARNING)

    global _service
    _service = InventoryService.from_settings(settings)
    logger.info("Inventory server starting: %d rows, %d KPI points",
                len(_service.catalog), len(_service.list_kpis("all")))

    async def run():
        async with stdio_server() as (read, write):
            await app.run(read, write, app.create_initialization_options())

    asyncio.run(run())


if __name__ == "__main__":
    main()
