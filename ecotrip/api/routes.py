"""FastAPI route definitions."""

import logging
from typing import Annotated, Optional

from fastapi import APIRouter, HTTPException, Depends, Query
from fastapi.responses import Response

from ..config import get_yaml_setting
from ..constants import GOAL_G_PER_KM, SCORE_CEILING_G_PER_KM
from ..models.history import HistoryEntry
from ..models.requests import EstimateRequest, LocateRequest
from ..models.results import EstimateResult
from ..models.vehicles import (
    VEHICLE_TYPES,
    FUEL_TYPES,
    AERO_LEVELS,
    LOAD_LEVELS,
    NETWORK_TYPES,
)
from ..processing.pipeline import EstimationPipeline
from ..storage.export import history_to_csv, history_series

logger = logging.getLogger(__name__)

router = APIRouter()


# Dependency to get pipeline instance (set in main.py)
_pipeline: Optional[EstimationPipeline] = None


def get_pipeline() -> EstimationPipeline:
    """Get the pipeline instance."""
    if _pipeline is None:
        raise HTTPException(status_code=503, detail="Pipeline not initialized")
    return _pipeline


def set_pipeline(pipeline: Optional[EstimationPipeline]):
    """Set the pipeline instance (called from main.py)."""
    global _pipeline
    _pipeline = pipeline


@router.get("/health")
async def health_check(pipeline: Annotated[EstimationPipeline, Depends(get_pipeline)]):
    """Health check endpoint - does NOT call the geocoder."""
    return {
        "status": "ok",
        "message": "Pipeline initialized",
        "history_entries": pipeline.history.count(),
    }


@router.get("/options")
async def list_options():
    """List the accepted categorical values and the emissions goal."""
    return {
        "vehicle_types": VEHICLE_TYPES,
        "fuel_types": FUEL_TYPES,
        "aero": AERO_LEVELS,
        "load": LOAD_LEVELS,
        "network": NETWORK_TYPES,
        "goal_g_per_km": GOAL_G_PER_KM,
        "score_ceiling_g_per_km": SCORE_CEILING_G_PER_KM,
    }


@router.post("/estimate", response_model=EstimateResult)
async def estimate(
    request: EstimateRequest,
    pipeline: Annotated[EstimationPipeline, Depends(get_pipeline)],
) -> EstimateResult:
    """Estimate emissions, score and tips; record the result unless ``record`` is false."""
    try:
        return pipeline.run(request.to_profile(), record=request.record)
    except Exception as e:
        logger.exception("Estimate failed")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/history", response_model=list[HistoryEntry])
async def list_history(
    pipeline: Annotated[EstimationPipeline, Depends(get_pipeline)],
    limit: Annotated[Optional[int], Query(ge=1)] = None,
    offset: Annotated[int, Query(ge=0)] = 0,
):
    """History entries, oldest first."""
    return pipeline.history.list_entries(limit=limit, offset=offset)


@router.delete("/history")
async def clear_history(pipeline: Annotated[EstimationPipeline, Depends(get_pipeline)]):
    """Remove every history entry."""
    removed = pipeline.history.count()
    pipeline.history.clear()
    logger.info(f"Cleared {removed} history entries")
    return {"status": "ok", "removed": removed}


@router.get("/history/series")
async def history_chart_series(pipeline: Annotated[EstimationPipeline, Depends(get_pipeline)]):
    """History as chart series (labels, emissions, scores)."""
    return history_series(pipeline.history.list_entries())


@router.get("/history/export.csv")
async def export_history(pipeline: Annotated[EstimationPipeline, Depends(get_pipeline)]):
    """Download the history log as CSV."""
    filename = get_yaml_setting("export", "csv_filename", default="emissions_history.csv")
    return Response(
        content=history_to_csv(pipeline.history.list_entries()),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("/locate")
async def locate(
    request: LocateRequest,
    pipeline: Annotated[EstimationPipeline, Depends(get_pipeline)],
):
    """Resolve coordinates into a city label (null when unavailable)."""
    city = await pipeline.resolve_city(request.lat, request.lon)
    return {"lat": request.lat, "lon": request.lon, "city": city}
