"""Observation source that tries several providers in order."""

import logging
from typing import List, Optional
from ...domain.entities.location import Location
from ...domain.entities.observation import Observation
from ...domain.repositories.observation_source import ObservationSource

logger = logging.getLogger(__name__)


class FallbackObservationSource(ObservationSource):
    """
    Returns the first observation any of its sources can produce.

    Fields are never merged across providers: an observation always comes
    whole from one source.
    """

    name = "fallback"

    def __init__(self, sources: List[ObservationSource]):
        if not sources:
            raise ValueError("FallbackObservationSource needs at least one source")
        self.sources = list(sources)

    def get_observation(self, location: Location) -> Optional[Observation]:
        for source in self.sources:
            observation = source.get_observation(location)
            if observation is not None:
                return observation
            logger.info(f"{source.name} unavailable for {location.name}, trying next source")
        logger.warning(f"All sources failed for {location.name}")
        return None
