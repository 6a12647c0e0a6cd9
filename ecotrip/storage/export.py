"""CSV export and chart series for the history log."""

import csv
import io
from typing import Iterable

from ..models.history import HistoryEntry

CSV_HEADERS = ["Date", "City", "Emissions (g/km)", "Score"]


def history_to_csv(entries: Iterable[HistoryEntry]) -> str:
    """
    Serialize history entries as CSV text.

    Every field is quoted, embedded quotes are doubled and emissions are
    written with one decimal. Rows are separated by a bare newline with
    no trailing newline.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for entry in entries:
        writer.writerow([entry.date, entry.city or "", f"{entry.emissions:.1f}", entry.score])
    return buffer.getvalue().rstrip("\n")


def history_series(entries: Iterable[HistoryEntry]) -> dict[str, list]:
    """Parallel lists for a two-axis chart: emissions (g/km) and score (0-100)."""
    entries = list(entries)
    return {
        "labels": [e.date for e in entries],
        "emissions": [e.emissions for e in entries],
        "scores": [e.score for e in entries],
    }
