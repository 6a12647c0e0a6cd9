"""
Estimate pipeline.

profile -> emissions -> score/tips -> history entry

The estimator and advisory engine are pure; this class owns the history
log and the geocoder and is the only place results meet storage.
"""

import logging
from datetime import datetime
from typing import Optional

from ..config import Config
from ..constants import GOAL_G_PER_KM
from ..clients.nominatim import NominatimGeocoder
from ..models.history import HistoryEntry, format_timestamp
from ..models.results import EstimateResult
from ..models.vehicles import VehicleProfile
from ..storage.history import HistoryStore
from .advisory import evaluate, goal_progress, meets_goal, summary_message
from .estimator import estimate_emissions

logger = logging.getLogger(__name__)


class EstimationPipeline:
    """
    Runs estimates and records them in the history log.
    """

    def __init__(
        self,
        history: HistoryStore,
        geocoder: Optional[NominatimGeocoder] = None,
    ):
        self.history = history
        self.geocoder = geocoder

    @classmethod
    def from_config(cls, config: Config) -> "EstimationPipeline":
        """Build the pipeline and its collaborators from configuration."""
        history = HistoryStore(
            path=config.history_path,
            max_entries=config.history_max_entries,
        )

        # Optional collaborator
        geocoder = (
            NominatimGeocoder(
                base_url=config.geocoding_base_url,
                user_agent=config.geocoding_user_agent,
                timeout=config.geocoding_timeout,
            )
            if config.geocoding_base_url
            else None
        )

        return cls(history=history, geocoder=geocoder)

    async def close(self):
        """Close all HTTP clients."""
        if self.geocoder:
            await self.geocoder.close()

    async def test_all_apis(self) -> dict[str, bool]:
        """Test connectivity to external services."""
        return {
            "nominatim": await self.geocoder.test_connection() if self.geocoder else False,
        }

    def estimate(self, profile: VehicleProfile) -> EstimateResult:
        """
        Estimate emissions for a profile without touching the history log.

        Args:
            profile: Vehicle and trip context

        Returns:
            Emissions, score, tips and goal status
        """
        emissions = estimate_emissions(profile)
        advisory = evaluate(profile, emissions)

        logger.debug(
            f"{profile.vehicle_type}/{profile.fuel_type}: "
            f"{emissions:.1f} g/km, score {advisory.score}"
        )

        return EstimateResult(
            profile=profile.to_dict(),
            emissions=emissions,
            score=advisory.score,
            tips=list(advisory.tips),
            goal_g_per_km=GOAL_G_PER_KM,
            goal_progress=goal_progress(emissions),
            meets_goal=meets_goal(emissions),
            summary=summary_message(emissions),
        )

    def run(
        self,
        profile: VehicleProfile,
        record: bool = True,
        timestamp: Optional[datetime] = None,
    ) -> EstimateResult:
        """
        Estimate a profile and append the outcome to the history log.

        Args:
            profile: Vehicle and trip context
            record: Append a history entry for this estimate
            timestamp: Entry time (defaults to now)

        Returns:
            The estimate, with ``history_entry`` set when recorded
        """
        result = self.estimate(profile)

        if record:
            entry = HistoryEntry(
                date=format_timestamp(timestamp),
                city=profile.city or "",
                emissions=result.emissions,
                score=result.score,
            )
            self.history.add_entry(entry)
            result.history_entry = entry
            logger.info(
                f"Recorded estimate for {entry.city or 'unknown city'}: "
                f"{entry.emissions:.1f} g/km (score {entry.score})"
            )

        return result

    async def resolve_city(self, lat: float, lon: float) -> Optional[str]:
        """City label for coordinates, or None if geocoding is unavailable."""
        if self.geocoder is None:
            logger.info("Geocoding not configured, city must be entered manually")
            return None
        return await self.geocoder.resolve_city(lat, lon)
