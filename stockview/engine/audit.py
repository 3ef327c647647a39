"""Audit trail of committed inventory mutations."""

from __future__ import annotations

import logging
import threading
import uuid
from typing import Optional

from stockview.models.inventory import AuditLogEntry

logger = logging.getLogger(__name__)


class AuditTrail:
    """Append-only, in-memory record of every committed row change."""

    def __init__(self) -> None:
        self._entries: list[AuditLogEntry] = []
        self._lock = threading.Lock()

    def log_change(
        self,
        operation_type: str,
        product_id: str,
        warehouse_code: str,
        field_name: str,
        value_before: int,
        value_after: int,
        details: Optional[dict] = None,
    ) -> AuditLogEntry:
        entry = AuditLogEntry(
            entry_id=str(uuid.uuid4()),
            operation_type=operation_type,
            product_id=product_id,
            warehouse_code=warehouse_code,
            field_name=field_name,
            value_before=value_before,
            value_after=value_after,
            change_amount=value_after - value_before,
            details=details,
        )
        with self._lock:
            self._entries.append(entry)
        logger.debug(
            "Audit: %s %s/%s %s %d -> %d",
            operation_type, product_id, warehouse_code, field_name, value_before, value_after,
        )
        return entry

    def entries(
        self,
        product_id: Optional[str] = None,
        warehouse_code: Optional[str] = None,
    ) -> list[AuditLogEntry]:
        with self._lock:
            entries = list(self._entries)
        if product_id:
            entries = [e for e in entries if e.product_id == product_id]
        if warehouse_code:
            entries = [e for e in entries if e.warehouse_code == warehouse_code]
        return entries
