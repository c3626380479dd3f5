"""Use case for computing the composite water stress index."""

import logging
import math
from typing import Optional
from ..entities.location import Location
from ..entities.missing_data_policy import MissingDataPolicy
from ..entities.observation import Observation
from ..entities.severity_level import SeverityLevel
from ..entities.stress_assessment import StressAssessment

logger = logging.getLogger(__name__)

# Below this magnitude PET is treated as zero
PET_EPSILON = 1e-9

# (upper bound, contribution) pairs, checked in ascending order
ARIDITY_THRESHOLDS = [(0.05, 40.0), (0.20, 30.0), (0.50, 20.0), (0.65, 10.0)]
PER_CAPITA_THRESHOLDS = [(500.0, 30.0), (1000.0, 20.0), (1700.0, 10.0)]


def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))


def _band(value: float, thresholds) -> float:
    for upper, contribution in thresholds:
        if value < upper:
            return contribution
    return 0.0


def potential_evapotranspiration(temperature: float) -> float:
    """Temperature-only PET estimate (mm/day)."""
    return 0.0023 * (temperature + 17.8) * math.sqrt(abs(25 - temperature)) * 5


def aridity_ratio(precipitation: float, temperature: float) -> float:
    """
    Ratio of precipitation to potential evapotranspiration.

    No precipitation gives 0 (most arid). A vanishing PET with positive
    precipitation gives +inf (wettest).
    """
    if precipitation <= 0:
        return 0.0
    pet = potential_evapotranspiration(temperature)
    if abs(pet) < PET_EPSILON:
        return math.inf
    return precipitation / pet


def aridity_component(precipitation: float, temperature: float) -> float:
    """Contribution of aridity, 0 to 40."""
    return _band(aridity_ratio(precipitation, temperature), ARIDITY_THRESHOLDS)


def per_capita_water(precipitation: float, population_millions: float) -> float:
    """
    Rough per-capita water availability (m3 per person).

    Served area is estimated as sqrt(population * 10) km2 and 1 mm over
    1 km2 is taken as 1000 m3.
    """
    area_km2 = math.sqrt(population_millions * 10)
    water_volume = precipitation * area_km2 * 1000
    return water_volume / (population_millions * 1_000_000)


def per_capita_component(precipitation: float, population_millions: float) -> float:
    """Contribution of per-capita water scarcity, 0 to 30."""
    if population_millions <= 0:
        return 0.0
    return _band(per_capita_water(precipitation, population_millions), PER_CAPITA_THRESHOLDS)


def temperature_component(temperature: float) -> float:
    """Contribution of heat, 0 to 20."""
    return clamp((temperature - 15) * 3, 0.0, 100.0) * 0.2


def humidity_component(humidity: float) -> float:
    """Contribution of dry air, 0 to 10."""
    return clamp((60 - humidity) * 2, 0.0, 100.0) * 0.1


def compute_stress(
    precipitation: float,
    temperature: float,
    humidity: float,
    population_millions: float,
) -> StressAssessment:
    """
    Compute the water stress index for one set of readings.

    Args:
        precipitation: Precipitation in mm/day
        temperature: Temperature in Celsius
        humidity: Relative humidity in percent
        population_millions: Population served, in millions

    Returns:
        StressAssessment with the index clamped to [0, 100]
    """
    aridity = aridity_component(precipitation, temperature)
    per_capita = per_capita_component(precipitation, population_millions)
    heat = temperature_component(temperature)
    dryness = humidity_component(humidity)

    total = aridity + per_capita + heat + dryness
    if math.isnan(total):
        total = 0.0
    index = clamp(total, 0.0, 100.0)

    return StressAssessment(
        index=index,
        severity_level=SeverityLevel.from_index(index),
        aridity=aridity,
        per_capita=per_capita,
        temperature=heat,
        humidity=dryness,
    )


class ComputeWaterStressUseCase:
    """Use case to score a location's observation."""

    def __init__(self, missing_data_policy: MissingDataPolicy = MissingDataPolicy.ZERO):
        """
        Initialize use case.

        Args:
            missing_data_policy: What to do with observations lacking values
        """
        self.missing_data_policy = MissingDataPolicy(missing_data_policy)

    def execute(
        self, location: Location, observation: Observation
    ) -> Optional[StressAssessment]:
        """
        Execute the use case.

        Args:
            location: Location the observation belongs to
            observation: Observation to score

        Returns:
            StressAssessment, or None when the observation is incomplete and
            the policy is SKIP
        """
        if not observation.is_complete:
            missing = ", ".join(observation.missing_fields)
            if self.missing_data_policy is MissingDataPolicy.SKIP:
                logger.info(f"Skipping {location.name}: missing {missing}")
                return None
            logger.debug(f"Substituting 0 for missing {missing} at {location.name}")

        assessment = compute_stress(
            precipitation=_or_zero(observation.precipitation_mm_per_day),
            temperature=_or_zero(observation.temperature_celsius),
            humidity=_or_zero(observation.relative_humidity_percent),
            population_millions=location.population_millions or 0.0,
        )
        logger.debug(f"Scored {location.name}: {assessment}")
        return assessment


def _or_zero(value: Optional[float]) -> float:
    return 0.0 if value is None else float(value)
