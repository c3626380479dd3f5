"""File-based presentation sink implementation."""

import logging
from pathlib import Path
from typing import List
import pandas as pd
from ...domain.entities.location_snapshot import LocationSnapshot
from ...domain.repositories.presentation_sink import PresentationSink

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".csv", ".xlsx")


class FileSnapshotSink(PresentationSink):
    """Writes the full set of current snapshots to a CSV or Excel file."""

    def __init__(self, output_file: str):
        """
        Initialize sink.

        Args:
            output_file: Destination path, ending in .csv or .xlsx
        """
        self.output_file = Path(output_file)
        if self.output_file.suffix not in SUPPORTED_SUFFIXES:
            raise ValueError(
                f"Unsupported export format '{self.output_file.suffix}', "
                f"expected one of {SUPPORTED_SUFFIXES}"
            )

    def publish(self, snapshot: LocationSnapshot) -> None:
        # Written in bulk by flush()
        pass

    def flush(self, snapshots: List[LocationSnapshot]) -> None:
        """Save all snapshots, most stressed first."""
        logger.info(f"Saving {len(snapshots)} snapshots to {self.output_file}")
        self.output_file.parent.mkdir(parents=True, exist_ok=True)

        df = pd.DataFrame([s.to_dict() for s in snapshots])
        if not df.empty:
            df = df.sort_values("water_stress", ascending=False)

        if self.output_file.suffix == ".xlsx":
            df.to_excel(self.output_file, index=False, engine="openpyxl")
        else:
            df.to_csv(self.output_file, index=False)

        logger.info("Snapshots saved successfully")
