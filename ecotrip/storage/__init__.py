"""History persistence and export."""

from .history import HistoryStore
from .export import history_to_csv, history_series, CSV_HEADERS

__all__ = [
    "HistoryStore",
    "history_to_csv",
    "history_series",
    "CSV_HEADERS",
]
