"""FastAPI main application."""

import logging
from contextlib import asynccontextmanager
from typing import Any, Dict, List, Optional
from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel, Field
from ...application.bootstrap import build_monitoring_service
from ...application.services.refresh_scheduler import PeriodicRefresher
from ...application.services.water_monitoring_service import WaterMonitoringService
from config.settings import API_SETTINGS, LOG_SETTINGS, MONITOR_SETTINGS

logging.basicConfig(level=LOG_SETTINGS["level"], format=LOG_SETTINGS["format"])
logger = logging.getLogger(__name__)


# Request/Response models
class ScoreRequest(BaseModel):
    """Request model for direct scoring."""

    precipitation: float = Field(..., description="Precipitation in mm/day")
    temperature: float = Field(..., description="Temperature in Celsius")
    humidity: float = Field(0.0, description="Relative humidity in percent")
    population_millions: float = Field(..., description="Population served, in millions")


class ScoreResponse(BaseModel):
    """Response model for a stress assessment."""

    index: float
    severity: str
    severity_color: str
    components: Dict[str, float]


class LocationResponse(BaseModel):
    """Response model for a monitored location."""

    name: str
    latitude: float
    longitude: float
    country: Optional[str] = None
    population_millions: Optional[float] = None


class RefreshResponse(BaseModel):
    """Response model for a refresh run."""

    status: str
    updated: int
    unavailable: List[str]
    skipped: List[str]
    started_at: Optional[str] = None
    finished_at: Optional[str] = None


def create_app(
    service: Optional[WaterMonitoringService] = None,
    start_scheduler: Optional[bool] = None,
) -> FastAPI:
    """
    Build the API around a monitoring service.

    The default service exports to MONITOR_SETTINGS['export_file'] only when
    WATER_STRESS_EXPORT_FILE is set.

    Args:
        service: Service to expose (defaults to the live-provider service)
        start_scheduler: Run periodic refreshes for the lifetime of the app
            (defaults to MONITOR_SETTINGS['refresh_on_startup'])

    Returns:
        FastAPI application
    """
    if service is None:
        service = build_monitoring_service(export_file=MONITOR_SETTINGS["export_file"])
    if start_scheduler is None:
        start_scheduler = MONITOR_SETTINGS["refresh_on_startup"]

    refresher = PeriodicRefresher(
        service.refresh_all, interval_seconds=MONITOR_SETTINGS["update_interval"]
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if start_scheduler:
            refresher.start()
        yield
        if refresher.is_running:
            refresher.stop()

    app = FastAPI(
        title=API_SETTINGS["title"],
        description=API_SETTINGS["description"],
        version=API_SETTINGS["version"],
        lifespan=lifespan,
    )
    app.state.service = service
    app.state.refresher = refresher

    # API endpoints
    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "message": API_SETTINGS["title"],
            "version": API_SETTINGS["version"],
            "endpoints": {
                "locations": "/locations",
                "assessments": "/assessments",
                "summary": "/summary",
                "ticker": "/ticker",
                "cards": "/cards",
                "map": "/map/markers",
                "water_levels": "/water-levels",
                "reference": "/reference",
                "refresh": "/refresh",
                "score": "/score",
                "health": "/health",
            },
        }

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "scheduler_running": refresher.is_running}

    @app.get("/locations", response_model=List[LocationResponse])
    def locations() -> List[LocationResponse]:
        return [
            LocationResponse(
                name=loc.name,
                latitude=loc.latitude,
                longitude=loc.longitude,
                country=loc.country,
                population_millions=loc.population_millions,
            )
            for loc in service.locations.values()
        ]

    @app.get("/assessments")
    def assessments() -> List[Dict[str, Any]]:
        return [s.to_dict() for s in service.snapshots()]

    @app.get("/assessments/{name}")
    def assessment(name: str) -> Dict[str, Any]:
        try:
            snapshot = service.get_snapshot(name)
        except KeyError as e:
            raise HTTPException(status_code=404, detail=str(e.args[0]))
        result = snapshot.to_dict()
        result["components"] = snapshot.assessment.to_dict()["components"]
        return result

    @app.get("/summary")
    def summary() -> Dict[str, Any]:
        return service.summary()

    @app.get("/ticker")
    def ticker() -> Dict[str, Any]:
        line = service.next_ticker_line()
        if line is None:
            line = {"text": "Loading...", "status": "normal", "name": None}
        line["rotate_seconds"] = MONITOR_SETTINGS["ticker_interval"]
        return line

    @app.get("/cards")
    def cards(limit: int = Query(MONITOR_SETTINGS["top_n"], ge=1, le=100)) -> List[Dict[str, Any]]:
        return service.top_stressed(limit)

    @app.get("/map/markers")
    def map_markers() -> List[Dict[str, Any]]:
        return service.map_markers()

    @app.get("/water-levels")
    def water_levels() -> List[Dict[str, Any]]:
        try:
            readings = service.water_levels()
        except RuntimeError as e:
            raise HTTPException(status_code=503, detail=str(e))
        return [
            {
                "site_id": r.site_id,
                "site_name": r.site_name,
                "parameter_code": r.parameter_code,
                "value": r.value,
                "unit": r.unit,
                "timestamp": r.timestamp,
                "latitude": r.latitude,
                "longitude": r.longitude,
            }
            for r in readings
        ]

    @app.get("/reference")
    def reference(name: Optional[List[str]] = Query(None)) -> List[Dict[str, Any]]:
        """Soil moisture and evapotranspiration at the reference points."""
        try:
            readings = service.reference_readings(name)
        except ValueError as e:
            raise HTTPException(status_code=404, detail=str(e))
        except RuntimeError as e:
            raise HTTPException(status_code=503, detail=str(e))
        return [r.to_dict() for r in readings]

    @app.post("/refresh", response_model=RefreshResponse)
    def refresh() -> RefreshResponse:
        """
        Fetch fresh observations for every location.

        Returns:
            Counts of updated, unavailable and skipped locations
        """
        try:
            logger.info("Starting refresh via API")
            report = service.refresh_all()
        except Exception as e:
            logger.error(f"Refresh error: {e}", exc_info=True)
            raise HTTPException(status_code=500, detail=str(e))
        return RefreshResponse(status="success", **report.to_dict())

    @app.post("/score", response_model=ScoreResponse)
    def score(request: ScoreRequest) -> ScoreResponse:
        """
        Score readings without fetching any data.

        Args:
            request: Precipitation, temperature, humidity and population

        Returns:
            Stress index, severity and component breakdown
        """
        assessment = service.score(
            precipitation=request.precipitation,
            temperature=request.temperature,
            humidity=request.humidity,
            population_millions=request.population_millions,
        )
        return ScoreResponse(**assessment.to_dict())

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
