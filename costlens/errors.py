"""
Exception types for CostLens.
"""

from typing import Any, Optional


class CostLensError(Exception):
    """Base exception for all CostLens errors."""

    def __init__(
        self,
        message: str,
        code: str = "internal_error",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}


class DecodeFailure(CostLensError):
    """Raised when a usage file cannot be read or parsed."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message, code="decode_error", details=details)


class AggregationFault(CostLensError):
    """Raised when the aggregation engine is handed input it cannot coerce."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message, code="aggregation_error", details=details)
