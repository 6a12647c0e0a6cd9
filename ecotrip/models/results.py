"""Estimate response models."""

from typing import Optional
from pydantic import BaseModel, Field

from .history import HistoryEntry


class EstimateResult(BaseModel):
    """Everything produced for one estimate, ready for rendering."""
    profile: dict = Field(description="The vehicle profile that was estimated")
    emissions: float = Field(description="Estimated emissions in g/km", ge=0)
    score: int = Field(description="0-100, higher = cleaner", ge=0, le=100)
    tips: list[str] = Field(description="Advisory tips in rule order, never empty")

    # Goal status (150 g/km target)
    goal_g_per_km: float
    goal_progress: int = Field(description="0-100, share of the goal still unused", ge=0, le=100)
    meets_goal: bool
    summary: str = Field(description="One-line status message for the goal")

    history_entry: Optional[HistoryEntry] = Field(
        default=None,
        description="Entry appended to the history log, if recorded"
    )
