"""Runtime settings from the environment, with .env support."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class Settings:
    kpi_days: int = 45
    kpi_seed: Optional[int] = None
    strict_warehouses: bool = True
    catalog_path: Optional[str] = None
    log_level: str = "INFO"


def _int_env(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Invalid integer for %s=%r, using %r", name, raw, default)
        return default


def load_settings(env_file: Optional[str] = None) -> Settings:
    """Loads the .env file (project root by default) without overriding real env vars."""
    env_path = Path(env_file) if env_file else Path.cwd() / ".env"
    load_dotenv(env_path, override=False)

    kpi_days = _int_env("STOCKVIEW_KPI_DAYS", 45)
    if kpi_days is None or kpi_days <= 0:
        logger.warning("STOCKVIEW_KPI_DAYS must be positive, using 45")
        kpi_days = 45

    strict = os.environ.get("STOCKVIEW_STRICT_WAREHOUSES", "true").strip().lower()

    return Settings(
        kpi_days=kpi_days,
        kpi_seed=_int_env("STOCKVIEW_KPI_SEED", None),
        strict_warehouses=strict not in _FALSE_VALUES,
        catalog_path=os.environ.get("STOCKVIEW_CATALOG_PATH") or None,
        log_level=os.environ.get("STOCKVIEW_LOG_LEVEL", "INFO").upper(),
    )
