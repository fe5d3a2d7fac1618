"""
Configuration module for CostLens.
"""

from costlens.config.settings import (
    NAME_MAX_LENGTH,
    TOP_RESOURCE_GROUPS,
    TOP_SERVICES_CHART,
    Settings,
    get_settings,
)
from costlens.config.logging import setup_logging

__all__ = [
    "NAME_MAX_LENGTH",
    "TOP_RESOURCE_GROUPS",
    "TOP_SERVICES_CHART",
    "Settings",
    "get_settings",
    "setup_logging",
]
