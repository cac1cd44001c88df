import logging
from abc import ABC, abstractmethod
from typing import Any

from .schemas import SyncSummary

logger = logging.getLogger(__name__)


class DataPipeline(ABC):
    """
    Abstract base class for sync pipelines.
    Follows an Extract -> Transform -> Load (ETL) pattern, with a preflight
    check before anything is read. Each stage may end the run early by
    returning a SyncSummary instead of data.
    """

    def __init__(self, job_name: str, dry_run: bool = False):
        self.job_name = job_name
        self.dry_run = dry_run

    def run(self) -> SyncSummary:
        """
        Orchestrates the pipeline execution.
        Errors are not caught here; they propagate to the caller.
        """
        logger.info(f"🚀 STEP: {self.job_name.upper()}")
        logger.info("-" * 30)

        # --- 0. PREFLIGHT ---
        self.preflight()

        # --- 1. EXTRACT ---
        raw_data = self.extract()
        if isinstance(raw_data, SyncSummary):
            return raw_data

        # --- 2. TRANSFORM ---
        prepared = self.transform(raw_data)
        if isinstance(prepared, SyncSummary):
            return prepared

        # --- 3. LOAD ---
        summary = self.load(prepared)

        logger.info(f"✅ {self.job_name.capitalize()} pipeline finished ({summary.status}).")
        logger.info("=" * 60)
        return summary

    def preflight(self) -> None:
        """Hook for connectivity checks. Raise to abort the run."""

    @abstractmethod
    def extract(self) -> Any:
        """Reads the source data."""

    @abstractmethod
    def transform(self, raw_data: Any) -> Any:
        """Turns source data into the payload that `load` writes."""

    @abstractmethod
    def load(self, prepared: Any) -> SyncSummary:
        """Writes the payload and reports what happened."""
