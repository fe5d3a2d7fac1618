"""
Dashboard Module - State and Rendering

Hold the current summary as an explicit value and draw it to a console.
"""

from costlens.dashboard.state import (
    DashboardState,
    DashboardStatus,
    load_csv,
    load_upload,
    summarize,
)
from costlens.dashboard.render import render, render_json

__all__ = [
    "DashboardState",
    "DashboardStatus",
    "load_csv",
    "load_upload",
    "summarize",
    "render",
    "render_json",
]
