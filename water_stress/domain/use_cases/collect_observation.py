"""Use case for collecting an observation for a location."""

import logging
from typing import Optional
from ..entities.location import Location
from ..entities.observation import Observation
from ..repositories.observation_source import ObservationSource

logger = logging.getLogger(__name__)


class CollectObservationUseCase:
    """Use case to collect the latest observation from a source."""

    def __init__(self, source: ObservationSource):
        """
        Initialize use case.

        Args:
            source: Provider of observations
        """
        self.source = source

    def execute(self, location: Location) -> Optional[Observation]:
        """
        Execute the use case.

        Args:
            location: Location to observe

        Returns:
            Observation, or None if the source declined
        """
        logger.info(
            f"Collecting observation: location={location.name}, "
            f"lat={location.latitude}, lon={location.longitude}"
        )
        observation = self.source.get_observation(location)
        if observation is None:
            logger.warning(f"No observation available for {location.name}")
        else:
            logger.info(f"Collected observation for {location.name} from {observation.source}")
        return observation
