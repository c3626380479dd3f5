"""NASA POWER API observation source implementation."""

import logging
from datetime import date, timedelta
from typing import Any, Callable, Dict, List, Optional, Sequence
import numpy as np
import pandas as pd
import requests
from ...domain.entities.location import Location
from ...domain.entities.observation import Observation
from ...domain.repositories.observation_source import ObservationSource

logger = logging.getLogger(__name__)

NASA_POWER_URL = "https://power.larc.nasa.gov/api/temporal/daily/point"

# NASA POWER marks missing days with this fill value
FILL_VALUE = -999

# Precipitation (mm/day), 2 m temperature (C), 2 m relative humidity (%)
DEFAULT_PARAMETERS = ("PRECTOTCORR", "T2M", "RH2M")


class NASAPowerObservationSource(ObservationSource):
    """Observation source backed by NASA POWER daily satellite data."""

    name = "NASA POWER"

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        url: str = NASA_POWER_URL,
        parameters: Sequence[str] = DEFAULT_PARAMETERS,
        lookback_days: int = 30,
        community: str = "RE",
        timeout: float = 30.0,
        today: Callable[[], date] = date.today,
    ):
        """
        Initialize source.

        Args:
            session: HTTP session to reuse (a new one is created if omitted)
            url: Daily point endpoint
            parameters: POWER parameter names to request
            lookback_days: Number of days averaged into one observation
            community: NASA POWER user community
            timeout: Request timeout in seconds
            today: Clock used to compute the request window
        """
        self.session = session or requests.Session()
        self.url = url
        self.parameters = list(parameters)
        self.lookback_days = lookback_days
        self.community = community
        self.timeout = timeout
        self.today = today

    def _build_params(self, location: Location) -> Dict[str, Any]:
        end_date = self.today()
        start_date = end_date - timedelta(days=self.lookback_days)
        return {
            "parameters": ",".join(self.parameters),
            "community": self.community,
            "longitude": location.longitude,
            "latitude": location.latitude,
            "start": start_date.strftime("%Y%m%d"),
            "end": end_date.strftime("%Y%m%d"),
            "format": "JSON",
        }

    def get_observation(self, location: Location) -> Optional[Observation]:
        """Fetch and average the last ``lookback_days`` of daily data."""
        params = self._build_params(location)
        logger.info(
            f"Fetching NASA POWER data for {location.name} "
            f"from {params['start']} to {params['end']}"
        )

        try:
            response = self.session.get(self.url, params=params, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.warning(f"NASA POWER request failed for {location.name}: {e}")
            return None

        try:
            return self._parse_observation(data, location)
        except (KeyError, TypeError, AttributeError, ValueError) as e:
            logger.warning(f"Malformed NASA POWER response for {location.name}: {e}")
            return None

    def _parse_observation(self, data: Dict[str, Any], location: Location) -> Optional[Observation]:
        parameters = (data.get("properties") or {}).get("parameter")
        if not parameters:
            logger.warning(f"NASA POWER returned no parameters for {location.name}")
            return None

        temperature = self._average(parameters.get("T2M"), decimals=1)
        if temperature is None:
            logger.warning(f"NASA POWER returned no valid temperature for {location.name}")
            return None

        return Observation(
            precipitation_mm_per_day=self._average(parameters.get("PRECTOTCORR"), decimals=2),
            temperature_celsius=temperature,
            relative_humidity_percent=self._average(parameters.get("RH2M"), decimals=1),
            source=self.name,
        )

    @staticmethod
    def _average(series: Optional[Dict[str, Any]], decimals: int) -> Optional[float]:
        """Mean of a date-keyed series, ignoring fill values and nulls."""
        if not series:
            return None
        values: List[Any] = list(series.values())
        s = pd.to_numeric(pd.Series(values, dtype="object"), errors="coerce")
        s = s.replace(FILL_VALUE, np.nan).dropna()
        if s.empty:
            return None
        return round(float(s.mean()), decimals)
