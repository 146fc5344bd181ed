"""Tests for affiliate, hybrid and performance pricing."""

from decimal import Decimal

import pytest

from ratecard.domain.errors import PricingConfigurationError
from ratecard.domain.models import (
    AffiliateConfig,
    CreatorProfile,
    ParsedBrief,
    PerformanceConfig,
)
from ratecard.domain.types import PricingModel
from ratecard.pricing.affiliate import (
    apply_hybrid_pricing,
    apply_performance_pricing,
    calculate_affiliate_earnings,
    calculate_affiliate_pricing,
    calculate_hybrid_price,
    calculate_performance_price,
)
from ratecard.pricing.standard import calculate_standard_sponsored_price
from ratecard.scoring.models import FitScoreResult


@pytest.fixture
def affiliate_config() -> AffiliateConfig:
    return AffiliateConfig(
        affiliate_rate=Decimal("20"),
        estimated_sales=500,
        average_order_value=Decimal("85"),
    )


class TestAffiliateEarnings:
    """Projected commission: sales x AOV x rate, rounded to the nearest 5."""

    @pytest.mark.parametrize(
        ("rate", "sales", "aov", "expected"),
        [
            (Decimal("20"), 500, Decimal("85"), Decimal("8500")),
            (Decimal("12"), 333, Decimal("19.99"), Decimal("800")),
            (Decimal("10"), 0, Decimal("50"), Decimal("0")),
            (Decimal("7.5"), 40, Decimal("33"), Decimal("100")),
        ],
        ids=["even_earnings", "rounded_earnings", "no_sales", "fractional_rate"],
    )
    def test_estimated_earnings(
        self, rate: Decimal, sales: int, aov: Decimal, expected: Decimal
    ) -> None:
        config = AffiliateConfig(affiliate_rate=rate, estimated_sales=sales, average_order_value=aov)

        result = calculate_affiliate_earnings(config)

        assert result.estimated_earnings == expected
        assert result.estimated_earnings % 5 == 0

    def test_category_range_included_when_given(self) -> None:
        config = AffiliateConfig(affiliate_rate=18, category="beauty_skincare")

        result = calculate_affiliate_earnings(config)

        assert result.category_rate_range is not None
        assert result.category_rate_range.min == Decimal("15")
        assert result.category_rate_range.max == Decimal("25")

    def test_no_category_range_without_category(self, affiliate_config: AffiliateConfig) -> None:
        assert calculate_affiliate_earnings(affiliate_config).category_rate_range is None

    def test_float_rate_is_converted_exactly(self) -> None:
        config = AffiliateConfig(affiliate_rate=12.5, estimated_sales=100, average_order_value=40.0)

        assert config.affiliate_rate == Decimal("12.5")
        assert calculate_affiliate_earnings(config).estimated_earnings == Decimal("500")


class TestAffiliatePricing:
    """Commission-only quotes."""

    def test_result_shape(self, affiliate_config: AffiliateConfig) -> None:
        brief = ParsedBrief(pricing_model="affiliate", affiliate_config=affiliate_config)

        result = calculate_affiliate_pricing(brief, CreatorProfile())

        assert result.price_per_deliverable == Decimal("0")
        assert result.total_price == Decimal("8500")
        assert result.pricing_model == PricingModel.AFFILIATE
        assert result.formula == "500 sales × $85 AOV × 20% = $8500"
        assert [layer.name for layer in result.layers] == [
            "Commission Rate",
            "Estimated Sales",
            "Average Order Value",
            "Estimated Earnings",
        ]
        assert result.layers[0].description == "20% commission on sales"
        assert result.layers[0].multiplier == Decimal("0.2")
        assert result.layers[3].description == "Other category (typical: 10-15%)"
        assert result.layers[3].adjustment == Decimal("8500")

    def test_missing_config_raises(self) -> None:
        brief = ParsedBrief(pricing_model="affiliate")

        with pytest.raises(PricingConfigurationError) as exc_info:
            calculate_affiliate_pricing(brief, CreatorProfile())

        assert exc_info.value.missing == "affiliate_config"
        assert str(exc_info.value) == (
            "affiliate_config is required for the 'affiliate' pricing model"
        )


class TestHybridPricing:
    """Half the flat fee plus commission."""

    def test_breakdown_rounds_each_part(self) -> None:
        config = AffiliateConfig(
            affiliate_rate=Decimal("10"), estimated_sales=100, average_order_value=Decimal("50")
        )

        breakdown = calculate_hybrid_price(Decimal("1234"), config)

        assert breakdown.base_fee == Decimal("615")
        assert breakdown.full_rate == Decimal("1235")
        assert breakdown.base_discount == Decimal("50")
        assert breakdown.affiliate_earnings.estimated_earnings == Decimal("500")
        assert breakdown.combined_estimate == Decimal("1115")

    def test_float_full_rate(self) -> None:
        config = AffiliateConfig(
            affiliate_rate=Decimal("10"), estimated_sales=100, average_order_value=Decimal("50")
        )

        breakdown = calculate_hybrid_price(1234.0, config)

        assert breakdown.base_fee == Decimal("615")
        assert breakdown.combined_estimate == Decimal("1115")

    def test_overlay_builds_on_standard_result(
        self,
        micro_profile: CreatorProfile,
        standard_brief: ParsedBrief,
        medium_fit: FitScoreResult,
    ) -> None:
        brief = standard_brief.model_copy(
            update={
                "pricing_model": PricingModel.HYBRID,
                "affiliate_config": AffiliateConfig(
                    affiliate_rate=Decimal("10"),
                    estimated_sales=100,
                    average_order_value=Decimal("50"),
                ),
            }
        )
        base = calculate_standard_sponsored_price(micro_profile, brief, medium_fit)

        result = apply_hybrid_pricing(base, brief, micro_profile)

        assert result.formula == "($400 × 50%) + (100 × $50 × 10%) = $700"
        assert result.layers[:11] == base.layers
        discount = result.layers[11]
        assert discount.description == "Base fee reduced to 50% for hybrid model"
        assert discount.base_value == "-50%"
        assert discount.adjustment == Decimal("-200.00")
        assert result.layers[12].description == "10% on 100 est. sales"
        assert base.pricing_model is None


class TestPerformancePricing:
    """Guaranteed flat fee plus a bonus at a threshold."""

    def test_breakdown(self) -> None:
        config = PerformanceConfig(bonus_threshold=5000, bonus_metric="views", bonus_amount=99.0)

        breakdown = calculate_performance_price(Decimal("400"), config)

        assert breakdown.base_fee == Decimal("400")
        assert breakdown.bonus_amount == Decimal("100")
        assert breakdown.potential_total == Decimal("500")

    def test_float_base_fee(self) -> None:
        config = PerformanceConfig(bonus_threshold=5000, bonus_amount=100)

        breakdown = calculate_performance_price(400.0, config)

        assert breakdown.base_fee == Decimal("400")
        assert breakdown.potential_total == Decimal("500")

    def test_overlay_reports_bonus_layer(
        self,
        micro_profile: CreatorProfile,
        standard_brief: ParsedBrief,
        medium_fit: FitScoreResult,
    ) -> None:
        brief = standard_brief.model_copy(
            update={
                "pricing_model": PricingModel.PERFORMANCE,
                "performance_config": PerformanceConfig(
                    bonus_threshold=1000, bonus_metric="clicks", bonus_amount=Decimal("250")
                ),
            }
        )
        base = calculate_standard_sponsored_price(micro_profile, brief, medium_fit)

        result = apply_performance_pricing(base, brief, micro_profile)

        bonus = result.layers[-1]
        assert bonus.name == "Performance Bonus"
        assert bonus.description == "+$250 if 1,000 clicks reached"
        assert bonus.base_value == "1000 clicks"
        assert result.formula == "$400 base + $250 bonus (at 1000 clicks) = $650 potential"
        assert result.price_per_deliverable == Decimal("400")
        assert result.total_price == Decimal("400")

    def test_missing_config_raises(
        self,
        micro_profile: CreatorProfile,
        standard_brief: ParsedBrief,
        medium_fit: FitScoreResult,
    ) -> None:
        base = calculate_standard_sponsored_price(micro_profile, standard_brief, medium_fit)

        with pytest.raises(PricingConfigurationError, match="performance"):
            apply_performance_pricing(base, standard_brief, micro_profile)
