"""
CostLens REST API - FastAPI application for Azure cost analysis.
"""

from contextlib import asynccontextmanager
from datetime import datetime
from typing import Any, Optional

from fastapi import FastAPI, File, HTTPException, Query, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from costlens import __version__
from costlens.config import get_settings, setup_logging
from costlens.dashboard import DashboardStatus, load_upload, render_json, summarize
from costlens.ingest import demo_rows


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    yield


# FastAPI app
app = FastAPI(
    lifespan=lifespan,
    title="CostLens API",
    description="Azure Cost Analysis Dashboard - Summarize an exported usage-cost CSV",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Response models
class RecommendationOut(BaseModel):
    """One optimization recommendation."""
    type: str
    title: str
    message: str
    actionable: bool


class AnalysisResponse(BaseModel):
    """Dashboard state after analyzing a file."""
    status: str = Field(..., description="ready, or error when aggregation failed")
    error: Optional[str] = Field(None, description="User-facing error message")
    source: Optional[str] = Field(None, description="Uploaded file name")
    summary: Optional[dict[str, Any]] = Field(None, description="Cost summary")
    recommendations: list[RecommendationOut] = Field(default_factory=list)


# Routes
@app.get("/")
async def root():
    """API root - health check and info."""
    return {
        "name": "CostLens API",
        "version": __version__,
        "description": "Azure Cost Analysis Dashboard",
        "endpoints": {
            "analyze": "/analyze",
            "demo": "/demo",
            "health": "/health",
        },
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy", "timestamp": datetime.now().isoformat()}


@app.post("/analyze", response_model=AnalysisResponse)
async def analyze(file: UploadFile = File(..., description="Azure usage CSV export")):
    """Summarize an uploaded usage-cost CSV."""
    settings = get_settings()
    data = await file.read()

    if len(data) > settings.max_upload_bytes:
        raise HTTPException(
            status_code=413,
            detail=f"File exceeds the {settings.max_upload_mb} MB upload limit",
        )

    state = load_upload(data, filename=file.filename)

    # Decode failures have nothing to show; aggregation faults still return the zero summary
    if state.status == DashboardStatus.ERROR and not state.has_summary:
        raise HTTPException(status_code=400, detail=state.error)

    return render_json(state)


@app.get("/demo", response_model=AnalysisResponse)
async def demo(days: int = Query(30, ge=1, le=366, description="Number of days of demo data")):
    """Summarize generated demo data."""
    state = summarize(demo_rows(days), source="demo")
    return render_json(state)


# Run with: uvicorn api.main:app --reload
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
