"""Tests for ParsedBrief normalization, pricing configs and PricingOptions."""

from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError

from ratecard.domain.models import (
    AffiliateConfig,
    AmbassadorPerks,
    ContentRequirements,
    MonthlyDeliverables,
    ParsedBrief,
    PerformanceConfig,
    PricingOptions,
    RetainerConfig,
    UsageRights,
)
from ratecard.domain.types import DealLength, DealType, PricingModel


class TestParsedBrief:
    """Upstream values are normalized rather than rejected."""

    def test_defaults(self) -> None:
        brief = ParsedBrief()

        assert brief.deal_type == DealType.SPONSORED
        assert brief.pricing_model is None
        assert brief.content.platform == "instagram"
        assert brief.content.format == "static"
        assert brief.content.quantity == 1
        assert brief.usage_rights.duration_days == 0
        assert brief.usage_rights.exclusivity == "none"
        assert brief.campaign_date is None

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("ugc", DealType.UGC), ("barter", DealType.SPONSORED), (None, DealType.SPONSORED)],
        ids=["ugc", "unknown", "missing"],
    )
    def test_deal_type(self, value: str | None, expected: DealType) -> None:
        assert ParsedBrief(deal_type=value).deal_type == expected

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("hybrid", PricingModel.HYBRID), ("equity", None), ("", None)],
        ids=["hybrid", "unknown", "blank"],
    )
    def test_pricing_model(self, value: str, expected: PricingModel | None) -> None:
        assert ParsedBrief(pricing_model=value).pricing_model == expected

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("2025-11-20", date(2025, 11, 20)),
            ("2025-11-20T10:00:00Z", date(2025, 11, 20)),
            ("2025-11-20 10:00:00", date(2025, 11, 20)),
            ("2025-11-20 garbage", None),
            ("whenever", None),
            (date(2025, 2, 1), date(2025, 2, 1)),
        ],
        ids=["iso_date", "iso_datetime", "space_separated", "trailing_text", "unparseable", "date"],
    )
    def test_campaign_date(self, value: object, expected: date | None) -> None:
        assert ParsedBrief(campaign_date=value).campaign_date == expected

    @pytest.mark.parametrize("quantity", [0, -2, None], ids=["zero", "negative", "missing"])
    def test_quantity_at_least_one(self, quantity: int | None) -> None:
        assert ContentRequirements(quantity=quantity).quantity == 1

    def test_negative_usage_duration_is_content_only(self) -> None:
        assert UsageRights(duration_days=-30).duration_days == 0

    @pytest.mark.parametrize(
        ("section", "key", "value", "expected"),
        [
            ("content", "platform", None, "instagram"),
            ("content", "platform", "  ", "instagram"),
            ("content", "format", None, "static"),
            ("content", "format", "", "static"),
            ("usage_rights", "exclusivity", None, "none"),
            ("usage_rights", "exclusivity", " ", "none"),
        ],
        ids=[
            "null_platform",
            "blank_platform",
            "null_format",
            "empty_format",
            "null_exclusivity",
            "blank_exclusivity",
        ],
    )
    def test_missing_categorical_keys_use_defaults(
        self, section: str, key: str, value: str | None, expected: str
    ) -> None:
        brief = ParsedBrief.model_validate({section: {key: value}})

        assert getattr(getattr(brief, section), key) == expected

    @pytest.mark.parametrize(
        ("days", "expected"),
        [(45.5, 46), (30.5, 31), (30.0, 30), (-0.5, 0), (float("nan"), 0)],
        ids=["mid_day", "just_over_30", "whole_float", "negative", "nan"],
    )
    def test_fractional_duration_rounds_up(self, days: float, expected: int) -> None:
        brief = ParsedBrief.model_validate({"usage_rights": {"duration_days": days}})

        assert brief.usage_rights.duration_days == expected

    @pytest.mark.parametrize(
        ("quantity", "expected"),
        [(2.7, 2), (0.5, 1), (float("inf"), 1)],
        ids=["floored", "below_one", "inf"],
    )
    def test_fractional_quantity_is_floored(self, quantity: float, expected: int) -> None:
        brief = ParsedBrief.model_validate({"content": {"quantity": quantity}})

        assert brief.content.quantity == expected


class TestPricingConfigs:
    def test_affiliate_requires_rate(self) -> None:
        with pytest.raises(ValidationError):
            AffiliateConfig()

    def test_affiliate_negative_sales_become_zero(self) -> None:
        config = AffiliateConfig(affiliate_rate=10, estimated_sales=-3, average_order_value=19.99)

        assert config.estimated_sales == 0
        assert config.average_order_value == Decimal("19.99")

    def test_performance_defaults_to_sales_metric(self) -> None:
        config = PerformanceConfig(bonus_threshold=100, bonus_amount=50.5)

        assert config.bonus_metric == "sales"
        assert config.bonus_amount == Decimal("50.5")

    def test_retainer_defaults(self) -> None:
        config = RetainerConfig(deal_length=None)

        assert config.deal_length == DealLength.ONE_TIME
        assert config.monthly_deliverables == MonthlyDeliverables()
        assert config.ambassador_perks is None

    def test_negative_deliverables_become_zero(self) -> None:
        deliverables = MonthlyDeliverables(posts=-1, stories=None, reels=2)

        assert (deliverables.posts, deliverables.stories, deliverables.reels) == (0, 0, 2)

    def test_fractional_counts_are_floored(self) -> None:
        deliverables = MonthlyDeliverables(posts=2.9, videos=1.0)
        config = AffiliateConfig(affiliate_rate=10, estimated_sales=10.5)
        perks = AmbassadorPerks(events_included=1.5)

        assert (deliverables.posts, deliverables.videos) == (2, 1)
        assert config.estimated_sales == 10
        assert perks.events_included == 1

    def test_perks_normalization(self) -> None:
        perks = AmbassadorPerks(events_included=-1, event_day_rate=None, product_value=99.9)

        assert perks.events_included == 0
        assert perks.event_day_rate == Decimal("0")
        assert perks.product_value == Decimal("99.9")


class TestPricingOptions:
    """Defaultable inputs resolved once per quote."""

    def test_from_brief_with_date(self) -> None:
        brief = ParsedBrief(
            campaign_date="2025-12-01",
            usage_rights=UsageRights(whitelisting_type=" organic "),
        )

        options = PricingOptions.from_brief(brief, today=date(2025, 3, 1))

        assert options.campaign_date == date(2025, 12, 1)
        assert options.whitelisting_type == "organic"
        assert options.seasonal_pricing_enabled is True

    @pytest.mark.parametrize("whitelisting", [None, "", "   "], ids=["none", "empty", "blank"])
    def test_missing_whitelisting_is_none(self, whitelisting: str | None) -> None:
        brief = ParsedBrief(usage_rights=UsageRights(whitelisting_type=whitelisting))

        assert PricingOptions.from_brief(brief, today=date(2025, 3, 1)).whitelisting_type == "none"

    def test_missing_date_uses_today(self) -> None:
        options = PricingOptions.from_brief(ParsedBrief(), today=date(2025, 7, 4))

        assert options.campaign_date == date(2025, 7, 4)

    def test_missing_date_and_today_uses_current_date(self) -> None:
        options = PricingOptions.from_brief(ParsedBrief())

        assert options.campaign_date == date.today()

    def test_disabled_seasonal_pricing(self) -> None:
        brief = ParsedBrief(disable_seasonal_pricing=True)

        assert PricingOptions.from_brief(brief, today=date(2025, 3, 1)).seasonal_pricing_enabled is False
