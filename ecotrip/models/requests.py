"""API request models."""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from .vehicles import VehicleProfile


class EstimateRequest(BaseModel):
    """Request body for an emissions estimate.

    Accepts both snake_case names and the camelCase keys sent by the web form.
    """
    model_config = ConfigDict(populate_by_name=True)

    vehicle_type: str = Field(default="car", alias="vehicleType", description="Vehicle type key")
    fuel_type: str = Field(default="petrol", alias="fuelType", description="Fuel type key")
    engine_size: Optional[float] = Field(default=None, allow_inf_nan=False, alias="engineSize", description="Engine size in liters")
    vehicle_age: Optional[float] = Field(default=None, allow_inf_nan=False, alias="vehicleAge", description="Vehicle age in years")
    aero: Optional[str] = Field(default=None, description="poor, average or good")
    load: Optional[str] = Field(default=None, description="light, medium or heavy")
    temp: Optional[float] = Field(default=None, allow_inf_nan=False, description="Ambient temperature in °C")
    gradient: Optional[float] = Field(default=None, allow_inf_nan=False, description="Road gradient in % grade")
    network: Optional[str] = Field(default=None, description="Road network type")
    pop_density: Optional[float] = Field(default=None, allow_inf_nan=False, alias="popDensity", description="People per km²")
    city: Optional[str] = Field(default=None, description="Free-text location label")
    record: bool = Field(default=True, description="Append the result to the history log")

    def to_profile(self) -> VehicleProfile:
        """Build the immutable profile handed to the estimator."""
        return VehicleProfile(
            vehicle_type=self.vehicle_type,
            fuel_type=self.fuel_type,
            engine_size=self.engine_size,
            vehicle_age=self.vehicle_age,
            aero=self.aero,
            load=self.load,
            temp=self.temp,
            gradient=self.gradient,
            network=self.network,
            pop_density=self.pop_density,
            city=self.city,
        )


class LocateRequest(BaseModel):
    """Coordinates to resolve into a city label."""
    lat: float = Field(description="Latitude in decimal degrees", ge=-90, le=90)
    lon: float = Field(description="Longitude in decimal degrees", ge=-180, le=180)
