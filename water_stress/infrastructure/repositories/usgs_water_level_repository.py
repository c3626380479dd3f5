"""USGS Water Services water level repository implementation."""

import logging
from typing import Any, Dict, List, Optional
import requests
from ...domain.entities.water_level_reading import WaterLevelReading
from ...domain.repositories.water_level_repository import WaterLevelRepository

logger = logging.getLogger(__name__)

USGS_IV_URL = "https://waterservices.usgs.gov/nwis/iv/"

# USGS reports unavailable instantaneous values with this sentinel
NO_DATA = "-999999"

DEFAULT_PARAMETER_CODES = ["00065", "00060"]  # gauge height, discharge


class USGSWaterLevelRepository(WaterLevelRepository):
    """Repository for real-time gauge readings from USGS instantaneous values."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        url: str = USGS_IV_URL,
        timeout: float = 15.0,
        parameter_codes: Optional[List[str]] = None,
    ):
        self.session = session or requests.Session()
        self.url = url
        self.parameter_codes = list(parameter_codes or DEFAULT_PARAMETER_CODES)
        self.timeout = timeout

    def get_latest_readings(
        self,
        site_ids: List[str],
        parameter_codes: Optional[List[str]] = None,
    ) -> List[WaterLevelReading]:
        """Retrieve the latest reading per site and parameter."""
        if not site_ids:
            return []

        params = {
            "format": "json",
            "sites": ",".join(site_ids),
            "parameterCd": ",".join(parameter_codes or self.parameter_codes),
        }
        logger.info(f"Fetching USGS instantaneous values for {params['sites']}")

        try:
            response = self.session.get(self.url, params=params, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.warning(f"USGS request failed: {e}")
            return []

        try:
            time_series = data["value"]["timeSeries"]
        except (KeyError, TypeError):
            logger.warning("USGS response has no timeSeries")
            return []

        result = []
        for series in time_series:
            try:
                reading = self._parse_series(series)
            except (KeyError, IndexError, TypeError, ValueError) as e:
                logger.warning(f"Skipping malformed USGS series: {e}")
                continue
            if reading is not None:
                result.append(reading)

        logger.info(f"Loaded {len(result)} USGS readings")
        return result

    @staticmethod
    def _parse_series(series: Dict[str, Any]) -> Optional[WaterLevelReading]:
        source_info = series["sourceInfo"]
        values = series["values"][0]["value"]
        if not values:
            return None
        latest = values[-1]
        if latest["value"] == NO_DATA:
            return None

        geo = source_info.get("geoLocation", {}).get("geogLocation", {})
        return WaterLevelReading(
            site_id=source_info["siteCode"][0]["value"],
            site_name=source_info["siteName"],
            parameter_code=series["variable"]["variableCode"][0]["value"],
            value=float(latest["value"]),
            unit=series["variable"]["unit"]["unitCode"],
            timestamp=latest["dateTime"],
            latitude=geo.get("latitude"),
            longitude=geo.get("longitude"),
        )
