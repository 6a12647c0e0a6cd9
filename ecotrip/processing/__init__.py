"""Emissions estimation, advisory and pipeline."""

from .estimator import base_emission, correction_factor, estimate_emissions
from .advisory import (
    Advisory,
    evaluate,
    generate_tips,
    goal_progress,
    meets_goal,
    summary_message,
    sustainability_score,
)
from .pipeline import EstimationPipeline

__all__ = [
    "base_emission",
    "correction_factor",
    "estimate_emissions",
    "Advisory",
    "evaluate",
    "generate_tips",
    "goal_progress",
    "meets_goal",
    "summary_message",
    "sustainability_score",
    "EstimationPipeline",
]
