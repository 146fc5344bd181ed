"""Tests for the pricing router: route selection, overlays, and invariants."""

from datetime import date
from decimal import Decimal

import pytest
import structlog

from ratecard.domain.errors import PricingConfigurationError, PricingError
from ratecard.domain.models import (
    AffiliateConfig,
    AmbassadorPerks,
    CreatorProfile,
    MonthlyDeliverables,
    ParsedBrief,
    PerformanceConfig,
    PlatformMetrics,
    RetainerConfig,
)
from ratecard.domain.types import DealType, PricingModel
from ratecard.pricing.engine import calculate_price
from ratecard.pricing.layers import replay_layers
from ratecard.scoring.models import DealQualityResult, FitScoreResult


def _with_engagement(profile: CreatorProfile, rate: float) -> CreatorProfile:
    return profile.model_copy(update={"avg_engagement_rate": rate})


class TestFlatFeeRoute:
    """Briefs without a special pricing model price as a standard flat fee."""

    def test_micro_static_post_scenario(
        self,
        micro_profile: CreatorProfile,
        standard_brief: ParsedBrief,
        medium_fit: FitScoreResult,
    ) -> None:
        """35K followers, Instagram, US, 2%, lifestyle, static, off season -> 400."""
        result = calculate_price(micro_profile, standard_brief, medium_fit)

        assert result.price_per_deliverable == Decimal("400")
        assert result.quantity == 1
        assert result.total_price == Decimal("400")
        assert result.pricing_model == PricingModel.FLAT_FEE
        assert result.currency == "USD"
        assert result.currency_symbol == "$"
        assert result.valid_days == 14
        assert len(result.layers) == 11

    def test_deal_quality_score_is_accepted(
        self,
        micro_profile: CreatorProfile,
        standard_brief: ParsedBrief,
        fair_quality: DealQualityResult,
    ) -> None:
        result = calculate_price(micro_profile, standard_brief, fair_quality)

        assert result.total_price == Decimal("400")
        assert result.layers[6].name == "Deal Quality"

    def test_serialized_score_is_parsed_by_kind(
        self, micro_profile: CreatorProfile, standard_brief: ParsedBrief
    ) -> None:
        score = {"kind": "deal_quality", "total_score": 90, "quality_level": "excellent"}

        result = calculate_price(micro_profile, standard_brief, score)

        assert result.layers[6].name == "Deal Quality"
        assert result.price_per_deliverable == Decimal("500")

    def test_explicit_flat_fee_model(
        self,
        micro_profile: CreatorProfile,
        standard_brief: ParsedBrief,
        medium_fit: FitScoreResult,
    ) -> None:
        brief = standard_brief.model_copy(update={"pricing_model": PricingModel.FLAT_FEE})

        result = calculate_price(micro_profile, brief, medium_fit)

        assert result.pricing_model == PricingModel.FLAT_FEE
        assert result.total_price == Decimal("400")

    def test_quantity_multiplies_total(
        self, micro_profile: CreatorProfile, medium_fit: FitScoreResult
    ) -> None:
        brief = ParsedBrief.model_validate(
            {
                "content": {"platform": "instagram", "format": "static", "quantity": 4},
                "campaign_date": "2025-03-15",
            }
        )

        result = calculate_price(micro_profile, brief, medium_fit)

        assert result.quantity == 4
        assert result.total_price == Decimal("1600")


class TestUGCRoute:
    """UGC deals ignore audience metrics entirely."""

    def test_ugc_video_scenario(
        self, micro_profile: CreatorProfile, medium_fit: FitScoreResult
    ) -> None:
        """Video UGC: 175 x 1.15 = 201.25 -> 200 each, 600 for three."""
        brief = ParsedBrief(
            deal_type=DealType.UGC,
            ugc_format="video",
            content={"quantity": 3},
            campaign_date=date(2025, 3, 15),
        )

        result = calculate_price(micro_profile, brief, medium_fit)

        assert result.price_per_deliverable == Decimal("200")
        assert result.total_price == Decimal("600")
        assert result.pricing_model is None
        assert [layer.name for layer in result.layers] == [
            "UGC Base Rate",
            "Usage Rights",
            "Whitelisting",
            "Complexity",
            "Seasonal",
        ]

    @pytest.mark.parametrize(
        "profile_data",
        [
            {"instagram": {"followers": 500, "engagement_rate": 0.5}},
            {"instagram": {"followers": 2_000_000, "engagement_rate": 9.0}},
            {"tiktok": {"followers": 80_000, "engagement_rate": 4.0}, "niches": ["finance"]},
            {"youtube": {"followers": 300_000, "engagement_rate": 6.0}, "region": "india"},
        ],
        ids=["tiny_low_engagement", "celebrity_high_engagement", "finance_niche", "india_region"],
    )
    def test_ugc_price_is_independent_of_audience(
        self, profile_data: dict, medium_fit: FitScoreResult
    ) -> None:
        brief = ParsedBrief(
            deal_type="ugc",
            ugc_format="photo",
            usage_rights={"duration_days": 30},
            campaign_date=date(2025, 3, 15),
        )
        baseline = calculate_price(CreatorProfile(), brief, medium_fit)

        result = calculate_price(CreatorProfile.model_validate(profile_data), brief, medium_fit)

        assert result.price_per_deliverable == baseline.price_per_deliverable
        assert result.layers == baseline.layers


class TestAffiliateRoute:
    """Commission-only deals."""

    def test_affiliate_scenario(
        self, micro_profile: CreatorProfile, medium_fit: FitScoreResult
    ) -> None:
        """20% of 500 sales at $85 AOV = $8,500 with no flat fee."""
        brief = ParsedBrief(
            pricing_model=PricingModel.AFFILIATE,
            affiliate_config=AffiliateConfig(
                affiliate_rate=Decimal("20"),
                estimated_sales=500,
                average_order_value=Decimal("85"),
            ),
        )

        result = calculate_price(micro_profile, brief, medium_fit)

        assert result.price_per_deliverable == Decimal("0")
        assert result.total_price == Decimal("8500")
        assert result.pricing_model == PricingModel.AFFILIATE

    def test_affiliate_without_config_raises(
        self, micro_profile: CreatorProfile, medium_fit: FitScoreResult
    ) -> None:
        brief = ParsedBrief(pricing_model=PricingModel.AFFILIATE)

        with pytest.raises(PricingConfigurationError, match="affiliate_config") as exc_info:
            calculate_price(micro_profile, brief, medium_fit)

        assert exc_info.value.pricing_model == PricingModel.AFFILIATE
        assert isinstance(exc_info.value, PricingError)


class TestOverlayRoutes:
    """Hybrid, performance and retainer deals build on the flat fee."""

    def test_hybrid_halves_base_and_adds_commission(
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

        result = calculate_price(micro_profile, brief, medium_fit)

        assert result.pricing_model == PricingModel.HYBRID
        assert result.price_per_deliverable == Decimal("200")
        assert result.total_price == Decimal("700")
        assert result.hybrid_breakdown is not None
        assert result.hybrid_breakdown.full_rate == Decimal("400")
        assert result.layers[-2].name == "Hybrid Discount"
        assert result.layers[-1].name == "Affiliate Commission"

    def test_hybrid_without_config_raises(
        self,
        micro_profile: CreatorProfile,
        standard_brief: ParsedBrief,
        medium_fit: FitScoreResult,
    ) -> None:
        brief = standard_brief.model_copy(update={"pricing_model": PricingModel.HYBRID})

        with pytest.raises(PricingConfigurationError) as exc_info:
            calculate_price(micro_profile, brief, medium_fit)

        assert exc_info.value.pricing_model == PricingModel.HYBRID
        assert exc_info.value.missing == "affiliate_config"

    def test_performance_keeps_guaranteed_fee(
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

        result = calculate_price(micro_profile, brief, medium_fit)

        assert result.pricing_model == PricingModel.PERFORMANCE
        assert result.total_price == Decimal("400")
        assert result.performance_breakdown is not None
        assert result.performance_breakdown.potential_total == Decimal("650")

    def test_performance_without_config_raises(
        self,
        micro_profile: CreatorProfile,
        standard_brief: ParsedBrief,
        medium_fit: FitScoreResult,
    ) -> None:
        brief = standard_brief.model_copy(update={"pricing_model": PricingModel.PERFORMANCE})

        with pytest.raises(PricingConfigurationError, match="performance_config"):
            calculate_price(micro_profile, brief, medium_fit)

    def test_retainer_config_selects_retainer(
        self,
        micro_profile: CreatorProfile,
        standard_brief: ParsedBrief,
        medium_fit: FitScoreResult,
    ) -> None:
        brief = standard_brief.model_copy(
            update={
                "retainer_config": RetainerConfig(
                    deal_length="3_month",
                    monthly_deliverables=MonthlyDeliverables(posts=2, stories=4, reels=1),
                )
            }
        )

        result = calculate_price(micro_profile, brief, medium_fit)

        assert result.pricing_model == PricingModel.FLAT_FEE
        assert result.quantity == 3
        assert result.total_price == Decimal("4515")
        assert result.retainer_breakdown is not None

    def test_hybrid_takes_precedence_over_retainer(
        self,
        micro_profile: CreatorProfile,
        standard_brief: ParsedBrief,
        medium_fit: FitScoreResult,
    ) -> None:
        brief = standard_brief.model_copy(
            update={
                "pricing_model": PricingModel.HYBRID,
                "affiliate_config": AffiliateConfig(affiliate_rate=Decimal("10")),
                "retainer_config": RetainerConfig(
                    deal_length="12_month",
                    ambassador_perks=AmbassadorPerks(events_included=1),
                ),
            }
        )

        result = calculate_price(micro_profile, brief, medium_fit)

        assert result.pricing_model == PricingModel.HYBRID
        assert result.retainer_breakdown is None


class TestPricingInvariants:
    """Properties that hold for every standard quote."""

    @pytest.mark.parametrize(
        "brief_data",
        [
            {"content": {"platform": "tiktok", "format": "reel"}},
            {"content": {"platform": "youtube", "format": "video", "quantity": 2}},
            {"content": {"platform": "linkedin", "format": "carousel"}},
            {"usage_rights": {"duration_days": 90, "exclusivity": "category"}},
            {"usage_rights": {"duration_days": 400, "whitelisting_type": "paid_social"}},
            {"content": {"format": "live"}, "campaign_date": "2025-11-20"},
            {"content": {"format": "story"}, "campaign_date": "2025-08-10"},
        ],
        ids=[
            "tiktok_reel",
            "youtube_video",
            "linkedin_carousel",
            "category_exclusivity",
            "perpetual_paid_social",
            "live_q4",
            "story_back_to_school",
        ],
    )
    def test_layers_replay_to_price_in_multiples_of_five(
        self, micro_profile: CreatorProfile, brief_data: dict, medium_fit: FitScoreResult
    ) -> None:
        brief = ParsedBrief.model_validate({"campaign_date": "2025-03-15", **brief_data})

        result = calculate_price(micro_profile, brief, medium_fit)

        assert result.price_per_deliverable % 5 == 0
        assert replay_layers(result.layers) == result.price_per_deliverable
        assert result.total_price == result.price_per_deliverable * result.quantity

    def test_repeated_calls_are_identical(
        self,
        micro_profile: CreatorProfile,
        standard_brief: ParsedBrief,
        medium_fit: FitScoreResult,
    ) -> None:
        first = calculate_price(micro_profile, standard_brief, medium_fit)
        second = calculate_price(micro_profile, standard_brief, medium_fit)

        assert first == second
        assert first.model_dump() == second.model_dump()

    def test_higher_engagement_never_lowers_price(
        self,
        micro_profile: CreatorProfile,
        standard_brief: ParsedBrief,
        medium_fit: FitScoreResult,
    ) -> None:
        rates = [0.0, 0.5, 1.0, 2.9, 3.0, 4.5, 5.0, 7.9, 8.0, 12.0]
        prices = [
            calculate_price(
                _with_engagement(micro_profile, rate), standard_brief, medium_fit
            ).price_per_deliverable
            for rate in rates
        ]

        assert prices == sorted(prices)

    def test_missing_campaign_date_uses_today(
        self, micro_profile: CreatorProfile, medium_fit: FitScoreResult
    ) -> None:
        brief = ParsedBrief(content={"platform": "instagram", "format": "static"})

        result = calculate_price(micro_profile, brief, medium_fit, today=date(2025, 12, 1))

        assert result.layers[-1].multiplier == Decimal("1.25")
        assert result.price_per_deliverable == Decimal("500")


class TestRouterLogging:
    """The router reports its route and configuration problems via structlog."""

    def test_logs_selected_route(
        self,
        micro_profile: CreatorProfile,
        standard_brief: ParsedBrief,
        medium_fit: FitScoreResult,
    ) -> None:
        with structlog.testing.capture_logs() as captured:
            calculate_price(micro_profile, standard_brief, medium_fit)

        events = [entry for entry in captured if entry["event"] == "pricing_route_selected"]
        assert len(events) == 1
        assert events[0]["route"] == "flat_fee"
        assert events[0]["log_level"] == "debug"

    def test_logs_warning_for_missing_configuration(
        self, micro_profile: CreatorProfile, medium_fit: FitScoreResult
    ) -> None:
        brief = ParsedBrief(pricing_model="performance")

        with structlog.testing.capture_logs() as captured:
            with pytest.raises(PricingConfigurationError):
                calculate_price(micro_profile, brief, medium_fit)

        warnings = [e for e in captured if e["event"] == "pricing_configuration_missing"]
        assert len(warnings) == 1
        assert warnings[0]["log_level"] == "warning"
        assert warnings[0]["missing"] == "performance_config"


def test_profile_without_platforms_prices_as_nano(
    standard_brief: ParsedBrief, medium_fit: FitScoreResult
) -> None:
    """An empty profile is a nano creator with 0% engagement (150 x 0.8 = 120)."""
    result = calculate_price(CreatorProfile(), standard_brief, medium_fit)

    assert result.price_per_deliverable == Decimal("120")


def test_platform_metrics_drive_derived_tier(
    standard_brief: ParsedBrief, medium_fit: FitScoreResult
) -> None:
    profile = CreatorProfile(
        instagram=PlatformMetrics(followers=60_000, engagement_rate=2.5),
        tiktok=PlatformMetrics(followers=20_000, engagement_rate=2.5),
    )

    result = calculate_price(profile, standard_brief, medium_fit)

    assert result.layers[0].description == "Mid tier creator rate"
    assert result.price_per_deliverable == Decimal("800")
