"""
Settings and reference constants.

Runtime settings come from the environment (a local .env file is loaded
first). Aggregation constants are fixed and shared by the engine and the
dashboard.
"""

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

# Display names are cut to this many characters
NAME_MAX_LENGTH = 30

# Resource groups kept in the summary
TOP_RESOURCE_GROUPS = 5

# Services shown in the dashboard breakdown
TOP_SERVICES_CHART = 5

# Labels used when a grouping key is missing
UNKNOWN_DATE = "Unknown"
OTHER_SERVICE = "Others"
UNNAMED_RESOURCE = "Unnamed"
UNASSIGNED_GROUP = "Unassigned"
NOT_AVAILABLE = "N/A"

# Upstream decoders sometimes stringify missing values
NULL_LITERALS = frozenset({"null", "undefined"})

# Columns of the Azure usage export read by the engine
DATE_FIELD = "date"
COST_FIELD = "costInBillingCurrency"
SERVICE_FIELD = "serviceFamily"
RESOURCE_FIELD = "resourceId"
RESOURCE_GROUP_FIELD = "resourceGroupName"

EXPECTED_COLUMNS = (
    DATE_FIELD,
    COST_FIELD,
    SERVICE_FIELD,
    RESOURCE_FIELD,
    RESOURCE_GROUP_FIELD,
)

LOG_FORMATS = ("console", "json")


@dataclass(frozen=True)
class Settings:
    """Runtime settings read from COSTLENS_* environment variables."""
    log_level: str = "INFO"
    log_format: str = "console"
    csv_delimiter: str = ","
    csv_encoding: str = "utf-8-sig"
    max_upload_mb: int = 50

    @property
    def max_upload_bytes(self) -> int:
        return self.max_upload_mb * 1024 * 1024

    @classmethod
    def from_env(cls) -> "Settings":
        log_format = os.getenv("COSTLENS_LOG_FORMAT", "console").lower()
        if log_format not in LOG_FORMATS:
            raise ValueError(
                f"COSTLENS_LOG_FORMAT must be one of {', '.join(LOG_FORMATS)}, got {log_format!r}"
            )

        max_upload = os.getenv("COSTLENS_MAX_UPLOAD_MB", "50")
        try:
            max_upload_mb = int(max_upload)
        except ValueError:
            raise ValueError(f"COSTLENS_MAX_UPLOAD_MB must be an integer, got {max_upload!r}")
        if max_upload_mb <= 0:
            raise ValueError("COSTLENS_MAX_UPLOAD_MB must be positive")

        return cls(
            log_level=os.getenv("COSTLENS_LOG_LEVEL", "INFO").upper(),
            log_format=log_format,
            csv_delimiter=os.getenv("COSTLENS_CSV_DELIMITER", ","),
            csv_encoding=os.getenv("COSTLENS_CSV_ENCODING", "utf-8-sig"),
            max_upload_mb=max_upload_mb,
        )


@lru_cache
def get_settings() -> Settings:
    """Load settings once per process."""
    load_dotenv()
    return Settings.from_env()
