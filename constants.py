APP_TITLE = "Shipment Lateness & Bottlenecks"
DEFAULT_CSV_PATH = "data/shipments.csv"

EXPECTED_DATE_COLS = ["planned_delivery", "actual_delivery"]
EXPECTED_BASE_COLS = ["shipment_id", "po", "supplier", "carrier", "status", "handoff_point"]
EXPECTED_COLS = EXPECTED_BASE_COLS + EXPECTED_DATE_COLS

UNKNOWN_LABEL = "Unknown"
TOP_LATE_LIMIT = 25
EMPTY_CELL = "—"

LATE_TABLE_COLS = [
    "shipment_id", "po", "supplier", "carrier", "status",
    "planned_delivery", "actual_delivery", "days_late", "handoff_point",
]

KPI_FORMATS = {
    "total_count": "{:,}",
    "late_count": "{:,}",
    "on_time_percent": "{:d}%",
    "avg_late_days": "{:.1f}",
}

LOAD_ERROR_HINT = "Check that the shipments CSV exists and is readable."
