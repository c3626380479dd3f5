"""Open-Meteo API observation source implementation."""

import logging
from typing import Any, Dict, Optional
import pandas as pd
import requests
from ...domain.entities.location import Location
from ...domain.entities.observation import Observation
from ...domain.repositories.observation_source import ObservationSource

logger = logging.getLogger(__name__)

OPEN_METEO_URL = "https://api.open-meteo.com/v1/forecast"


class OpenMeteoObservationSource(ObservationSource):
    """Observation source backed by the Open-Meteo forecast API (past days)."""

    name = "Open-Meteo"

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        url: str = OPEN_METEO_URL,
        past_days: int = 30,
        timeout: float = 15.0,
    ):
        self.session = session or requests.Session()
        self.url = url
        self.past_days = past_days
        self.timeout = timeout

    def get_observation(self, location: Location) -> Optional[Observation]:
        """Fetch daily history plus current weather for a location."""
        params = {
            "latitude": location.latitude,
            "longitude": location.longitude,
            "current_weather": "true",
            "daily": "precipitation_sum,temperature_2m_mean,relative_humidity_2m_mean",
            "past_days": self.past_days,
            "timezone": "auto",
        }
        logger.info(f"Fetching Open-Meteo data for {location.name}")

        try:
            response = self.session.get(self.url, params=params, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.warning(f"Open-Meteo request failed for {location.name}: {e}")
            return None

        try:
            return self._parse_observation(data, location)
        except (KeyError, TypeError, AttributeError, ValueError) as e:
            logger.warning(f"Malformed Open-Meteo response for {location.name}: {e}")
            return None

    def _parse_observation(self, data: Dict[str, Any], location: Location) -> Optional[Observation]:
        daily = data.get("daily")
        if not daily:
            logger.warning(f"Open-Meteo returned no daily data for {location.name}")
            return None

        precipitation = _mean(daily.get("precipitation_sum"), decimals=2)
        temperature = _current_temperature(data)
        if temperature is None:
            temperature = _mean(daily.get("temperature_2m_mean"), decimals=1)
        if temperature is None:
            logger.warning(f"Open-Meteo returned no temperature for {location.name}")
            return None

        return Observation(
            precipitation_mm_per_day=precipitation,
            temperature_celsius=temperature,
            relative_humidity_percent=_mean(daily.get("relative_humidity_2m_mean"), decimals=1),
            source=self.name,
        )


def _current_temperature(data: Dict[str, Any]) -> Optional[float]:
    current = data.get("current_weather") or {}
    value = current.get("temperature")
    return float(value) if value is not None else None


def _mean(values: Optional[list], decimals: int) -> Optional[float]:
    if not values:
        return None
    s = pd.to_numeric(pd.Series(values, dtype="object"), errors="coerce").dropna()
    if s.empty:
        return None
    return round(float(s.mean()), decimals)
