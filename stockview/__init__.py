from stockview.service import InventoryService, build_service

__all__ = ["InventoryService", "build_service"]
