"""
Tests for the FastAPI upload surface.
"""

import pytest
from fastapi.testclient import TestClient

import api.main
from api.main import app
from costlens.config import Settings

client = TestClient(app)


class TestInfo:
    """Root and health endpoints."""

    def test_root(self):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["name"] == "CostLens API"

    def test_health(self):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestAnalyze:
    """POST /analyze."""

    def test_upload(self, sample_csv_bytes):
        response = client.post(
            "/analyze",
            files={"file": ("usage.csv", sample_csv_bytes, "text/csv")},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ready"
        assert data["source"] == "usage.csv"
        assert data["summary"]["totalCost"] == 35
        assert data["summary"]["resourceCosts"] == {"name": "vm-two", "cost": 20}
        assert [r["type"] for r in data["recommendations"]] == [
            "resource_group",
            "service_usage",
            "peak_usage",
        ]

    def test_empty_upload(self):
        response = client.post(
            "/analyze",
            files={"file": ("empty.csv", b"", "text/csv")},
        )
        assert response.status_code == 400
        assert response.json()["detail"].startswith("Error parsing CSV:")

    def test_upload_too_large(self, monkeypatch, sample_csv_bytes):
        monkeypatch.setattr(api.main, "get_settings", lambda: Settings(max_upload_mb=1))
        payload = sample_csv_bytes + b"2024-01-03,1,Compute,,rg1\n" * 60000
        response = client.post(
            "/analyze",
            files={"file": ("big.csv", payload, "text/csv")},
        )
        assert response.status_code == 413

    def test_overflowing_cost_is_zero(self):
        payload = (
            b"date,costInBillingCurrency,serviceFamily,resourceId,resourceGroupName\n"
            b"2024-01-01,1e400,Compute,/a/vm,rg1\n"
            b"2024-01-02,2.5,Storage,/a/store,rg2\n"
        )
        response = client.post(
            "/analyze",
            files={"file": ("overflow.csv", payload, "text/csv")},
        )
        assert response.status_code == 200
        summary = response.json()["summary"]
        assert summary["totalCost"] == 2.5
        assert summary["dailyAverage"] == 1.25
        assert [d["cost"] for d in summary["dailyCosts"]] == [0, 2.5]
        assert summary["peakUsage"] == {"date": "2024-01-02", "cost": 2.5}

    def test_missing_file_field(self):
        response = client.post("/analyze")
        assert response.status_code == 422


class TestDemo:
    """GET /demo."""

    def test_demo(self):
        response = client.get("/demo", params={"days": 3})
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ready"
        assert len(data["summary"]["dailyCosts"]) == 3
        assert data["summary"]["topService"]["name"] == "Compute"

    def test_demo_rejects_zero_days(self):
        response = client.get("/demo", params={"days": 0})
        assert response.status_code == 422


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
