"""
Test the estimate pipeline: estimate, advisory and history recording.
"""

import asyncio
import math
from datetime import datetime

import httpx

from ..clients.nominatim import NominatimGeocoder
from ..config import Config
from ..models.vehicles import VehicleProfile
from ..processing.advisory import TIP_SWITCH_FUEL, TIP_KEEP_GOING
from ..processing.pipeline import EstimationPipeline
from ..storage.history import HistoryStore

REFERENCE = VehicleProfile(
    vehicle_type="car",
    fuel_type="petrol",
    engine_size=1.5,
    vehicle_age=5,
    aero="average",
    load="light",
    network="urban_moderate",
    city="Pune",
)


def test_estimate_does_not_record():
    """Test estimate() leaves the history untouched."""
    print("\n=== Testing Estimate Only ===")

    pipeline = EstimationPipeline(history=HistoryStore())
    result = pipeline.estimate(REFERENCE)

    assert math.isclose(result.emissions, 204.12)
    assert result.score == 32
    assert result.tips == [TIP_SWITCH_FUEL]
    assert result.goal_g_per_km == 150
    assert result.goal_progress == 0
    assert result.meets_goal is False
    assert "Above target" in result.summary
    assert result.profile["city"] == "Pune"
    assert result.history_entry is None
    assert pipeline.history.count() == 0

    print("✓ Estimate computes without recording")


def test_run_records_history():
    """Test run() appends one entry built from the result."""
    print("\n=== Testing Run and Record ===")

    pipeline = EstimationPipeline(history=HistoryStore())
    result = pipeline.run(REFERENCE, timestamp=datetime(2024, 3, 7, 18, 5))

    entry = result.history_entry
    assert entry is not None
    assert entry.date == "2024-03-07 18:05"
    assert entry.city == "Pune"
    assert entry.emissions == result.emissions
    assert entry.score == 32
    assert pipeline.history.list_entries() == [entry]

    print("✓ Run records a history entry")


def test_run_without_record():
    """Test record=False skips the history."""
    print("\n=== Testing Run Without Record ===")

    pipeline = EstimationPipeline(history=HistoryStore())
    result = pipeline.run(REFERENCE, record=False)

    assert result.history_entry is None
    assert pipeline.history.count() == 0

    print("✓ record=False skips the history")


def test_missing_city_recorded_as_empty():
    """Test a profile without a city stores an empty label."""
    print("\n=== Testing Missing City ===")

    pipeline = EstimationPipeline(history=HistoryStore())
    result = pipeline.run(VehicleProfile(fuel_type="electric"))

    assert result.history_entry.city == ""
    assert result.emissions == 0
    assert result.score == 100
    assert result.goal_progress == 100
    assert result.meets_goal is True
    assert result.tips == [TIP_KEEP_GOING]

    print("✓ Missing city stored as empty string")


def test_history_order_across_runs():
    """Test successive runs append in order."""
    print("\n=== Testing Run Order ===")

    pipeline = EstimationPipeline(history=HistoryStore())
    for city in ("A", "B", "C"):
        pipeline.run(VehicleProfile(city=city))

    assert [e.city for e in pipeline.history.list_entries()] == ["A", "B", "C"]

    print("✓ Runs append in order")


def test_resolve_city_without_geocoder():
    """Test city resolution degrades to None when not configured."""
    print("\n=== Testing Resolve City (No Geocoder) ===")

    pipeline = EstimationPipeline(history=HistoryStore())
    assert asyncio.run(pipeline.resolve_city(18.52, 73.85)) is None
    assert asyncio.run(pipeline.test_all_apis()) == {"nominatim": False}

    print("✓ No geocoder gives None")


def test_resolve_city_with_geocoder():
    """Test city resolution through the geocoder."""
    print("\n=== Testing Resolve City ===")

    def handler(request):
        return httpx.Response(200, json={"address": {"town": "Lonavala"}})

    async def resolve():
        pipeline = EstimationPipeline(
            history=HistoryStore(),
            geocoder=NominatimGeocoder(transport=httpx.MockTransport(handler)),
        )
        try:
            return await pipeline.resolve_city(18.75, 73.41)
        finally:
            await pipeline.close()

    assert asyncio.run(resolve()) == "Lonavala"

    print("✓ Geocoder resolves the city")


def test_from_config():
    """Test building the pipeline from configuration."""
    print("\n=== Testing From Config ===")

    config = Config(
        backend_port=8000,
        backend_host="127.0.0.1",
        cors_origins=["*"],
        history_path=None,
        history_max_entries=7,
        geocoding_base_url=None,
        geocoding_user_agent="ecotrip-tests/1.0",
        geocoding_timeout=1.0,
    )
    pipeline = EstimationPipeline.from_config(config)

    assert pipeline.history.max_entries == 7
    assert pipeline.history.path is None
    assert pipeline.geocoder is None
    assert config.validate_apis() == {"nominatim": False, "history_file": False}

    print("✓ Pipeline built from config")


def run_all_tests():
    """Run all pipeline tests."""
    print("\n" + "=" * 60)
    print("ESTIMATION PIPELINE - COMPREHENSIVE TEST SUITE")
    print("=" * 60)

    test_estimate_does_not_record()
    test_run_records_history()
    test_run_without_record()
    test_missing_city_recorded_as_empty()
    test_history_order_across_runs()
    test_resolve_city_without_geocoder()
    test_resolve_city_with_geocoder()
    test_from_config()

    print("\n" + "=" * 60)
    print("✅ ALL PIPELINE TESTS PASSED!")
    print("=" * 60)


if __name__ == "__main__":
    run_all_tests()
