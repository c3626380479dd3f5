"""NASA POWER soil moisture repository implementation."""

import logging
from datetime import date, timedelta
from typing import Any, Callable, Dict, Optional
import numpy as np
import pandas as pd
import requests
from ...domain.entities.location import Location
from ...domain.entities.satellite_reading import SatelliteReading
from ...domain.repositories.satellite_repository import SatelliteRepository
from .nasa_power_observation_source import FILL_VALUE, NASA_POWER_URL

logger = logging.getLogger(__name__)

# Reading field -> POWER parameter
PARAMETER_FIELDS = {
    "precipitation_mm_per_day": "PRECTOTCORR",
    "root_zone_soil_wetness": "GWETROOT",
    "profile_soil_wetness": "GWETPROF",
    "evapotranspiration_mm_per_day": "EVPTRNS",
}


class NASAPowerSatelliteRepository(SatelliteRepository):
    """Repository for daily soil wetness and evapotranspiration from NASA POWER."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        url: str = NASA_POWER_URL,
        lookback_days: int = 30,
        community: str = "AG",
        timeout: float = 30.0,
        today: Callable[[], date] = date.today,
    ):
        self.session = session or requests.Session()
        self.url = url
        self.lookback_days = lookback_days
        self.community = community
        self.timeout = timeout
        self.today = today

    def get_latest_reading(self, location: Location) -> Optional[SatelliteReading]:
        """Latest day in the window that has at least one valid value."""
        end_date = self.today()
        start_date = end_date - timedelta(days=self.lookback_days)
        params = {
            "parameters": ",".join(PARAMETER_FIELDS.values()),
            "community": self.community,
            "longitude": location.longitude,
            "latitude": location.latitude,
            "start": start_date.strftime("%Y%m%d"),
            "end": end_date.strftime("%Y%m%d"),
            "format": "JSON",
        }
        logger.info(f"Fetching NASA POWER soil moisture for {location.name}")

        try:
            response = self.session.get(self.url, params=params, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.warning(f"NASA POWER request failed for {location.name}: {e}")
            return None

        try:
            return self._parse_reading(data, location)
        except (KeyError, TypeError, AttributeError, ValueError) as e:
            logger.warning(f"Malformed NASA POWER response for {location.name}: {e}")
            return None

    def _parse_reading(self, data: Dict[str, Any], location: Location) -> Optional[SatelliteReading]:
        parameters = (data.get("properties") or {}).get("parameter")
        if not parameters:
            logger.warning(f"NASA POWER returned no parameters for {location.name}")
            return None

        # Rows are dates, columns are POWER parameters
        df = pd.DataFrame(
            {name: pd.Series(parameters.get(name) or {}, dtype="object") for name in PARAMETER_FIELDS.values()}
        )
        df = df.apply(pd.to_numeric, errors="coerce").replace(FILL_VALUE, np.nan)
        df = df.dropna(how="all").sort_index()
        if df.empty:
            logger.warning(f"NASA POWER returned only fill values for {location.name}")
            return None

        latest_date = df.index[-1]
        row = df.loc[latest_date]
        values = {
            field: (None if pd.isna(row[name]) else round(float(row[name]), 2))
            for field, name in PARAMETER_FIELDS.items()
        }
        return SatelliteReading(
            location_name=location.name,
            latitude=location.latitude,
            longitude=location.longitude,
            date=str(latest_date),
            **values,
        )
