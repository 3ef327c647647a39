from stockview.data.generators import (
    WAREHOUSES,
    generate_kpi_series,
    generate_products,
    load_catalog_file,
)

__all__ = [
    "WAREHOUSES",
    "generate_kpi_series",
    "generate_products",
    "load_catalog_file",
]
