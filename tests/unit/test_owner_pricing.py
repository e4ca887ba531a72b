"""Unit tests for OwnerPricingService owner payouts and guest rates."""

from dvc_pricing.services.owner_pricing import OwnerPricingService


class TestComputeOwnerPayout:
    """Tests for compute_owner_payout."""

    def test_base_rate_only(self) -> None:
        result = OwnerPricingService().compute_owner_payout(100, "AKV", "BLT")

        assert result.owner_base_rate_per_point_cents == 1600
        assert result.owner_premium_per_point_cents == 0
        assert result.owner_rate_per_point_cents == 1600
        assert result.owner_total_cents == 160000
        assert result.owner_home_resort_premium_applied is False

    def test_home_resort_premium(self) -> None:
        result = OwnerPricingService().compute_owner_payout(100, "blt", "BLT")

        assert result.owner_premium_per_point_cents == 200
        assert result.owner_rate_per_point_cents == 1800
        assert result.owner_total_cents == 180000
        assert result.owner_home_resort_premium_applied is True

    def test_missing_resorts_never_get_premium(self) -> None:
        result = OwnerPricingService().compute_owner_payout(100, None, None)
        assert result.owner_home_resort_premium_applied is False

    def test_missing_points_pay_nothing(self) -> None:
        result = OwnerPricingService().compute_owner_payout(None, "BLT", "BLT")
        assert result.owner_total_cents == 0
        assert result.owner_rate_per_point_cents == 1800

    def test_resort_override(self) -> None:
        service = OwnerPricingService(
            resort_overrides={
                "vgf": {"base_rate_per_point_cents": 1900, "premium_per_point_cents": 300}
            }
        )

        home = service.compute_owner_payout(10, "VGF", "VGF")
        away = service.compute_owner_payout(10, "BLT", "VGF")

        assert home.owner_rate_per_point_cents == 2200
        assert away.owner_rate_per_point_cents == 1900
        assert service.compute_owner_payout(10, "BLT", "BLT").owner_rate_per_point_cents == 1800


class TestComputeGuestPrice:
    """Tests for compute_guest_price."""

    def test_rate_rounds_half_up(self) -> None:
        result = OwnerPricingService().compute_guest_price(3, 7000)
        assert result.guest_rate_per_point_cents == 2333
        assert result.guest_total_cents == 7000

    def test_missing_points(self) -> None:
        result = OwnerPricingService().compute_guest_price(None, 7000)
        assert result.guest_rate_per_point_cents is None
        assert result.guest_total_cents == 7000

    def test_missing_total(self) -> None:
        result = OwnerPricingService().compute_guest_price(10, None)
        assert result.guest_rate_per_point_cents is None
        assert result.guest_total_cents is None
