"""Use cases - core business operations."""

from .compute_water_stress import ComputeWaterStressUseCase, compute_stress
from .collect_observation import CollectObservationUseCase
from .collect_water_levels import CollectWaterLevelsUseCase
from .collect_satellite_readings import CollectSatelliteReadingsUseCase

__all__ = [
    "ComputeWaterStressUseCase",
    "compute_stress",
    "CollectObservationUseCase",
    "CollectWaterLevelsUseCase",
    "CollectSatelliteReadingsUseCase",
]
