"""
Per-kilometer emissions estimate for a vehicle trip.

A base rate looked up by vehicle and fuel type is scaled by a chain of
multiplicative corrections (engine size, age, aerodynamics, load,
temperature, gradient, road network, population density). Unknown
categorical values never raise: they fall back to the car row, the
row's petrol column, or a neutral factor.
"""

import math
import sys

from ..models.vehicles import (
    VehicleProfile,
    BASE_EMISSIONS,
    AERO_FACTORS,
    LOAD_FACTORS,
    NETWORK_FACTORS,
    POP_DENSITY_BANDS,
)


def base_emission(vehicle_type: str, fuel_type: str) -> float:
    """Baseline g/km for a vehicle/fuel pair before any correction."""
    row = BASE_EMISSIONS.get(vehicle_type) or BASE_EMISSIONS["car"]
    # Fuel fallback is row-local: an unknown fuel uses this vehicle's petrol rate
    return row.get(fuel_type, row["petrol"])


def correction_factor(profile: VehicleProfile) -> float:
    """
    Combined multiplier for all secondary attributes of a profile.

    Every correction is applied; none short-circuits. The result is not
    clamped and can be negative for implausibly small engines.
    """
    factor = 1.0

    # Engine size: +5% per liter above 1.5 L, -5% below.
    # A zero value counts as "not given", same as the age and density fields.
    if profile.engine_size:
        factor *= 1 + (profile.engine_size - 1.5) * 0.05

    # Vehicle age: +2% per year above 5 years, -2% below
    if profile.vehicle_age:
        factor *= 1 + (profile.vehicle_age - 5) * 0.02

    if profile.aero in AERO_FACTORS:
        factor *= AERO_FACTORS[profile.aero]

    if profile.load in LOAD_FACTORS:
        factor *= LOAD_FACTORS[profile.load]

    # Extreme temperatures: cold and hot bands are exclusive
    if profile.temp is not None:
        if profile.temp < 10:
            factor *= 1.05
        elif profile.temp > 32:
            factor *= 1.07

    # Gradient: +1.5% per % grade, downhill counts as flat
    if profile.gradient is not None:
        factor *= 1 + max(0, profile.gradient) * 0.015

    factor *= NETWORK_FACTORS.get(profile.network, 1.0)

    if profile.pop_density:
        for threshold, band_factor in POP_DENSITY_BANDS:
            if profile.pop_density > threshold:
                factor *= band_factor
                break

    return factor


def estimate_emissions(profile: VehicleProfile) -> float:
    """
    Estimated emissions in g/km, never negative and always finite.

    Huge inputs can overflow the product to infinity; that is capped at the
    largest float so the result stays JSON-encodable.
    """
    base = base_emission(profile.vehicle_type, profile.fuel_type)
    emissions = base * correction_factor(profile)
    if math.isnan(emissions) or emissions < 0:
        return 0.0
    return min(emissions, sys.float_info.max)
