"""MCP tool handler tests."""

import asyncio
import json
from datetime import date

import pytest

from mcp_servers import inventory_server
from stockview.data.generators import generate_kpi_series
from stockview.service import build_service


def _create_service():
    return build_service(kpi_series=generate_kpi_series(45, end_date=date(2024, 3, 15), seed=2))


class TestReadTools:
    def test_list_products(self):
        result = inventory_server.handle_tool(
            "list_products", {"status": "critical", "warehouse": "all"}, service=_create_service()
        )
        assert result["success"] is True
        assert result["count"] == 10
        assert result["data"][0] == {
            "id": "P-1002", "name": "Steel Washer", "sku": "WSR-08-500",
            "warehouse": "BLR-A", "stock": 50, "demand": 80, "status": "Critical",
        }

    def test_list_warehouses(self):
        result = inventory_server.handle_tool("list_warehouses", {}, service=_create_service())
        assert result["data"][0] == {"code": "BLR-A", "name": "Bangalore - A", "city": "Bangalore", "country": "India"}

    def test_list_kpis(self):
        result = inventory_server.handle_tool("list_kpis", {"range": "7d"}, service=_create_service())
        assert result["count"] == 7
        assert result["data"][0]["date"] == "2024-03-09"
        assert result["data"][-1]["date"] == "2024-03-15"

    def test_list_kpis_default_range(self):
        result = inventory_server.handle_tool("list_kpis", None, service=_create_service())
        assert result["count"] == 45

    def test_kpi_summary(self):
        result = inventory_server.handle_tool("get_kpi_summary", {"search": "bearing"}, service=_create_service())
        assert result["data"] == {"total_stock": 120, "total_demand": 600, "fill_rate": 20.0}


class TestMutationTools:
    def test_transfer_success_and_error_kinds(self):
        service = _create_service()
        ok = inventory_server.handle_tool(
            "transfer_stock", {"id": "P-1001", "from": "BLR-A", "to": "DEL-B", "qty": 50}, service=service
        )
        assert ok["success"] is True
        assert ok["data"]["stock"] == 130

        too_much = inventory_server.handle_tool(
            "transfer_stock", {"id": "P-1001", "from": "BLR-A", "to": "DEL-B", "qty": 200}, service=service
        )
        assert too_much == {"success": False, "error": "InsufficientStock", "message": too_much["message"]}

        missing = inventory_server.handle_tool(
            "transfer_stock", {"id": "P-1001", "from": "PNQ-C", "to": "DEL-B", "qty": 1}, service=service
        )
        assert missing["error"] == "NotFound"

        bad = inventory_server.handle_tool(
            "transfer_stock", {"id": "P-1001", "from": "BLR-A", "to": "DEL-B"}, service=service
        )
        assert bad["error"] == "InvalidArgument"

    def test_update_demand(self):
        service = _create_service()
        ok = inventory_server.handle_tool("update_demand", {"id": "P-1002", "demand": 40}, service=service)
        assert ok["data"]["status"] == "Healthy"

        bad = inventory_server.handle_tool("update_demand", {"id": "P-1002", "demand": -3}, service=service)
        assert bad["error"] == "InvalidArgument"

        missing = inventory_server.handle_tool("update_demand", {"id": "P-0000", "demand": 3}, service=service)
        assert missing["error"] == "NotFound"

    def test_audit_log_tool(self):
        service = _create_service()
        inventory_server.handle_tool("update_demand", {"id": "P-1002", "demand": 40}, service=service)
        result = inventory_server.handle_tool("get_audit_log", {"product_id": "P-1002"}, service=service)
        assert result["count"] == 1
        assert result["data"][0]["field"] == "demand"


class TestDispatch:
    def test_unknown_tool(self):
        with pytest.raises(ValueError):
            inventory_server.handle_tool("drop_tables", {}, service=_create_service())

    def test_result_is_json_text(self):
        content = inventory_server._result({"success": True})
        assert json.loads(content[0].text) == {"success": True}

    def test_tool_listing(self):
        tools = asyncio.run(inventory_server.list_tools())
        assert {t.name for t in tools} == {
            "list_products", "list_warehouses", "list_kpis", "get_kpi_summary",
            "update_demand", "transfer_stock", "get_audit_log",
        }
