"""Data models for the emissions estimator service."""

from .vehicles import (
    VehicleProfile,
    BASE_EMISSIONS,
    AERO_FACTORS,
    LOAD_FACTORS,
    NETWORK_FACTORS,
    POP_DENSITY_BANDS,
    VEHICLE_TYPES,
    FUEL_TYPES,
    AERO_LEVELS,
    LOAD_LEVELS,
    NETWORK_TYPES,
)
from .requests import EstimateRequest, LocateRequest
from .history import HistoryEntry, format_timestamp
from .results import EstimateResult

__all__ = [
    "VehicleProfile",
    "BASE_EMISSIONS",
    "AERO_FACTORS",
    "LOAD_FACTORS",
    "NETWORK_FACTORS",
    "POP_DENSITY_BANDS",
    "VEHICLE_TYPES",
    "FUEL_TYPES",
    "AERO_LEVELS",
    "LOAD_LEVELS",
    "NETWORK_TYPES",
    "EstimateRequest",
    "LocateRequest",
    "HistoryEntry",
    "format_timestamp",
    "EstimateResult",
]
