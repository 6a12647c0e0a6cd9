"""History log models."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from ..constants import TIMESTAMP_FORMAT


def format_timestamp(ts: Optional[datetime] = None) -> str:
    """Format a local timestamp as ``YYYY-MM-DD HH:MM`` (now if omitted)."""
    if ts is None:
        ts = datetime.now()
    return ts.strftime(TIMESTAMP_FORMAT)


class HistoryEntry(BaseModel):
    """One past estimate as stored in the history log."""
    date: str = Field(description="Local time, YYYY-MM-DD HH:MM")
    city: str = Field(default="", description="Location label at estimate time")
    emissions: float = Field(description="Estimated emissions in g/km", ge=0)
    score: int = Field(description="Sustainability score", ge=0, le=100)
