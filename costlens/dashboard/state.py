"""
Dashboard state and the load/aggregate boundary.

The state is a plain immutable value. Callers own it and replace it
wholesale after every load; nothing here keeps a reference to it.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Optional

import structlog

from costlens.errors import DecodeFailure
from costlens.ingest.csv_reader import CsvSource, decode_usage_csv, read_usage_csv
from costlens.see.aggregator import aggregate
from costlens.see.models import CostSummary

logger = structlog.get_logger(__name__)


class DashboardStatus(str, Enum):
    """Where the dashboard is in its load cycle."""
    EMPTY = "empty"
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


@dataclass(frozen=True)
class DashboardState:
    """What the dashboard currently shows."""
    status: DashboardStatus
    summary: Optional[CostSummary] = None
    error: Optional[str] = None
    source: Optional[str] = None

    @classmethod
    def initial(cls) -> "DashboardState":
        return cls(status=DashboardStatus.EMPTY)

    @classmethod
    def loading(cls, source: Optional[str] = None) -> "DashboardState":
        return cls(status=DashboardStatus.LOADING, source=source)

    @classmethod
    def ready(cls, summary: CostSummary, source: Optional[str] = None) -> "DashboardState":
        return cls(status=DashboardStatus.READY, summary=summary, source=source)

    @classmethod
    def failed(
        cls,
        message: str,
        summary: Optional[CostSummary] = None,
        source: Optional[str] = None,
    ) -> "DashboardState":
        return cls(status=DashboardStatus.ERROR, summary=summary, error=message, source=source)

    @property
    def has_summary(self) -> bool:
        return self.summary is not None


def summarize(rows: Iterable[Any], source: Optional[str] = None) -> DashboardState:
    """
    Aggregate decoded rows into a dashboard state.

    A fault during aggregation does not propagate: the state carries the
    zero-value summary and an error message instead.
    """
    try:
        summary = aggregate(rows)
    except Exception as e:
        logger.exception("aggregation_failed", source=source, error=str(e))
        return DashboardState.failed(
            f"Error processing data: {e}",
            summary=CostSummary.empty(),
            source=source,
        )

    return DashboardState.ready(summary, source=source)


def load_csv(
    source: CsvSource,
    delimiter: Optional[str] = None,
    encoding: Optional[str] = None,
) -> DashboardState:
    """
    Decode a usage CSV and summarize it.

    Decode failures skip aggregation entirely and leave no summary.
    """
    label = str(source) if isinstance(source, (str, Path)) else getattr(source, "name", None)
    try:
        rows = read_usage_csv(source, delimiter=delimiter, encoding=encoding)
    except DecodeFailure as e:
        return DashboardState.failed(f"Error parsing CSV: {e.message}", source=label)

    return summarize(rows, source=label)


def load_upload(data: bytes, filename: Optional[str] = None) -> DashboardState:
    """Same as load_csv for an in-memory upload."""
    try:
        rows = decode_usage_csv(data)
    except DecodeFailure as e:
        return DashboardState.failed(f"Error parsing CSV: {e.message}", source=filename)

    return summarize(rows, source=filename)
