"""Unit tests for ready-stay API routes.

Tests for:
- GET /api/ready-stays/pricing-band - Season band for a date
- GET /api/ready-stays/caps - Per-night caps for a stay
- GET /api/ready-stays/owner-payouts - Owner payout options
"""

import pytest
from fastapi.testclient import TestClient
from starlette.status import HTTP_200_OK, HTTP_400_BAD_REQUEST

from dvc_pricing.api.main import app


@pytest.fixture
def client() -> TestClient:
    """Create test client for API."""
    return TestClient(app)


class TestPricingBand:
    """Tests for GET /api/ready-stays/pricing-band endpoint."""

    def test_christmas_band(self, client: TestClient) -> None:
        response = client.get("/api/ready-stays/pricing-band", params={"check_in": "2026-12-20"})
        assert response.status_code == HTTP_200_OK
        assert response.json() == {
            "season_type": "christmas",
            "min_owner_cents": 2800,
            "suggested_owner_cents": 3000,
            "max_owner_cents": 3100,
            "guest_cap_cents": 3800,
            "fee_cents": 700,
        }

    def test_invalid_date_returns_400(self, client: TestClient) -> None:
        response = client.get("/api/ready-stays/pricing-band", params={"check_in": "20/12/2026"})
        assert response.status_code == HTTP_400_BAD_REQUEST
        assert response.json()["error_code"] == "ERR_PRICING_004"


class TestCaps:
    """Tests for GET /api/ready-stays/caps endpoint."""

    def test_vgf_new_year_stay(self, client: TestClient) -> None:
        response = client.get(
            "/api/ready-stays/caps",
            params={"check_in": "2026-12-30", "check_out": "2027-01-10", "resort_code": "VGF"},
        )
        assert response.status_code == HTTP_200_OK

        data = response.json()
        assert len(data["nights"]) == 11
        assert data["strictest_cap_cents"] == 3900
        assert data["strictest_season_type"] == "marathon"
        assert data["max_owner_payout_strictest_cents"] == 3200
        assert data["average_cap_cents"] >= data["strictest_cap_cents"]

    def test_overlong_stay_returns_400(self, client: TestClient) -> None:
        response = client.get(
            "/api/ready-stays/caps",
            params={"check_in": "2026-01-01", "check_out": "9999-12-31"},
        )
        assert response.status_code == HTTP_400_BAD_REQUEST
        assert response.json()["error_code"] == "ERR_PRICING_004"

    def test_without_check_out_is_one_night(self, client: TestClient) -> None:
        response = client.get("/api/ready-stays/caps", params={"check_in": "2026-09-15"})
        assert response.status_code == HTTP_200_OK
        assert len(response.json()["nights"]) == 1


class TestOwnerPayouts:
    """Tests for GET /api/ready-stays/owner-payouts endpoint."""

    def test_max_and_suggestions(self, client: TestClient) -> None:
        response = client.get(
            "/api/ready-stays/owner-payouts",
            params={"check_in": "2026-12-30", "check_out": "2027-01-10"},
        )
        assert response.status_code == HTTP_200_OK

        data = response.json()
        assert float(data["max_owner_payout_dollars"]) == 28
        assert data["suggested_payouts_dollars"] == [26, 27, 28]
        assert data["season_type"] == "marathon"
