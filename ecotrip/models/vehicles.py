"""Vehicle profile model and emission lookup tables."""

from dataclasses import dataclass, asdict
from typing import Optional


@dataclass(frozen=True)
class VehicleProfile:
    """Vehicle and trip context for one estimate.

    Categorical fields are plain strings: values outside the known
    vocabularies are kept as given and treated as neutral by the estimator.
    """
    vehicle_type: str = "car"
    fuel_type: str = "petrol"
    engine_size: Optional[float] = None  # liters
    vehicle_age: Optional[float] = None  # years
    aero: Optional[str] = None  # poor / average / good
    load: Optional[str] = None  # light / medium / heavy
    temp: Optional[float] = None  # °C
    gradient: Optional[float] = None  # % grade
    network: Optional[str] = None  # urban_dense ... highway
    pop_density: Optional[float] = None  # people/km²
    city: Optional[str] = None  # label only, never used in calculations

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return asdict(self)


# Baseline g/km per vehicle type and fuel (placeholder heuristic values)
BASE_EMISSIONS: dict[str, dict[str, float]] = {
    "car": {"petrol": 180, "diesel": 170, "cng": 140, "hybrid": 120, "electric": 0},
    "motorcycle": {"petrol": 90, "diesel": 100, "cng": 80, "hybrid": 70, "electric": 0},
    "truck": {"petrol": 300, "diesel": 280, "cng": 220, "hybrid": 200, "electric": 0},
    "bus": {"petrol": 260, "diesel": 240, "cng": 200, "hybrid": 180, "electric": 0},
    "auto": {"petrol": 130, "diesel": 140, "cng": 110, "hybrid": 100, "electric": 0},
    "lcv": {"petrol": 220, "diesel": 210, "cng": 180, "hybrid": 160, "electric": 0},
}

AERO_FACTORS: dict[str, float] = {
    "poor": 1.10,
    "average": 1.05,
    "good": 0.98,
}

LOAD_FACTORS: dict[str, float] = {
    "heavy": 1.12,
    "medium": 1.06,
    "light": 1.00,
}

# Road network type
NETWORK_FACTORS: dict[str, float] = {
    "urban_dense": 1.12,
    "urban_moderate": 1.08,
    "peri_urban": 1.03,
    "rural": 0.98,
    "highway": 0.92,
}

# Population density bands (people/km², factor), highest threshold first.
# Density is a congestion proxy.
POP_DENSITY_BANDS: tuple[tuple[float, float], ...] = (
    (20000, 1.10),
    (8000, 1.06),
    (3000, 1.03),
)

VEHICLE_TYPES: list[str] = list(BASE_EMISSIONS)
FUEL_TYPES: list[str] = list(BASE_EMISSIONS["car"])
AERO_LEVELS: list[str] = list(AERO_FACTORS)
LOAD_LEVELS: list[str] = list(LOAD_FACTORS)
NETWORK_TYPES: list[str] = list(NETWORK_FACTORS)
