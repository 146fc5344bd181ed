"""Score result models and the tagged union consumed by pricing.

Two scorer families coexist: the legacy five-component fit score and the
six-dimension deal quality score. Both results carry a ``kind``
discriminator so ``ScoreInput`` validates to exactly one variant.
"""

from collections.abc import Mapping
from decimal import Decimal
from types import MappingProxyType
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field, TypeAdapter, field_validator

from ratecard.domain.models import to_decimal
from ratecard.domain.types import (
    ApprovalProcess,
    BrandTier,
    DealQualityLevel,
    DealRecommendation,
    FitLevel,
    PaymentTerms,
)

FIT_ADJUSTMENTS: Mapping[FitLevel, Decimal] = MappingProxyType(
    {
        FitLevel.PERFECT: Decimal("0.25"),
        FitLevel.HIGH: Decimal("0.15"),
        FitLevel.MEDIUM: Decimal("0"),
        FitLevel.LOW: Decimal("-0.10"),
    }
)

QUALITY_TO_FIT_LEVEL: Mapping[DealQualityLevel, FitLevel] = MappingProxyType(
    {
        DealQualityLevel.EXCELLENT: FitLevel.PERFECT,
        DealQualityLevel.GOOD: FitLevel.HIGH,
        DealQualityLevel.FAIR: FitLevel.MEDIUM,
        DealQualityLevel.CAUTION: FitLevel.LOW,
    }
)


# ---------------------------------------------------------------------------
# Legacy fit score
# ---------------------------------------------------------------------------


class FitScoreComponent(BaseModel, frozen=True):
    """One weighted fit component scored 0-100."""

    score: int
    weight: Decimal
    insight: str


class FitScoreBreakdown(BaseModel, frozen=True):
    """The five fit components."""

    niche_match: FitScoreComponent
    demographic_match: FitScoreComponent
    platform_match: FitScoreComponent
    engagement_quality: FitScoreComponent
    content_capability: FitScoreComponent

    def components(self) -> tuple[FitScoreComponent, ...]:
        return (
            self.niche_match,
            self.demographic_match,
            self.platform_match,
            self.engagement_quality,
            self.content_capability,
        )


class FitScoreResult(BaseModel, frozen=True):
    """Creator-brand fit score.

    Attributes:
        kind: Union discriminator, always ``"fit"``.
        total_score: Weighted total, 0-100.
        fit_level: Discrete fit level.
        price_adjustment: Fractional price adjustment for the level.
        breakdown: Per-component scores, when computed by the scorer.
        insights: Summary plus actionable component insights.
    """

    kind: Literal["fit"] = "fit"
    total_score: int
    fit_level: FitLevel
    price_adjustment: Decimal = Decimal("0")
    breakdown: FitScoreBreakdown | None = None
    insights: tuple[str, ...] = ()

    @field_validator("price_adjustment", mode="before")
    @classmethod
    def coerce_decimal(cls, v: object) -> object:
        """Convert float inputs to Decimal."""
        return to_decimal(v)


# ---------------------------------------------------------------------------
# Deal quality score
# ---------------------------------------------------------------------------


class DealQualityComponent(BaseModel, frozen=True):
    """One deal quality dimension scored out of ``max_points``."""

    name: str
    score: int
    max_points: int
    weight: Decimal
    insight: str
    tips: tuple[str, ...] = ()

    @property
    def percentage(self) -> Decimal:
        """Score as a percentage of the dimension's maximum."""
        return Decimal(self.score) / Decimal(self.max_points) * 100


class DealQualityBreakdown(BaseModel, frozen=True):
    """The six deal quality dimensions."""

    rate_fairness: DealQualityComponent
    brand_legitimacy: DealQualityComponent
    portfolio_value: DealQualityComponent
    growth_potential: DealQualityComponent
    terms_fairness: DealQualityComponent
    creative_freedom: DealQualityComponent

    def components(self) -> tuple[DealQualityComponent, ...]:
        return (
            self.rate_fairness,
            self.brand_legitimacy,
            self.portfolio_value,
            self.growth_potential,
            self.terms_fairness,
            self.creative_freedom,
        )


class DealQualityResult(BaseModel, frozen=True):
    """Creator-centric assessment of how good a deal is for the creator."""

    kind: Literal["deal_quality"] = "deal_quality"
    total_score: int
    quality_level: DealQualityLevel
    price_adjustment: Decimal = Decimal("0")
    recommendation: DealRecommendation = DealRecommendation.NEGOTIATE
    recommendation_text: str = ""
    breakdown: DealQualityBreakdown | None = None
    insights: tuple[str, ...] = ()
    red_flags: tuple[str, ...] = ()
    green_flags: tuple[str, ...] = ()

    @field_validator("price_adjustment", mode="before")
    @classmethod
    def coerce_decimal(cls, v: object) -> object:
        """Convert float inputs to Decimal."""
        return to_decimal(v)


ScoreInput = Annotated[FitScoreResult | DealQualityResult, Field(discriminator="kind")]

_SCORE_INPUT_ADAPTER: TypeAdapter[FitScoreResult | DealQualityResult] = TypeAdapter(ScoreInput)


def parse_score_input(data: Any) -> FitScoreResult | DealQualityResult:
    """Validate a raw mapping into the matching score variant by its ``kind``."""
    return _SCORE_INPUT_ADAPTER.validate_python(data)


# ---------------------------------------------------------------------------
# Deal signals
# ---------------------------------------------------------------------------


class DealQualityInput(BaseModel, frozen=True):
    """Optional deal signals gathered from the brief or the creator.

    ``None`` means unknown; unknown signals earn partial credit. Unrecognized
    enum values are treated as unknown.
    """

    brand_followers: int | None = None
    brand_has_website: bool | None = None
    brand_has_creator_history: bool | None = None
    payment_terms: PaymentTerms | None = None
    mentions_ongoing_partnership: bool = False
    has_strict_script: bool | None = None
    revision_rounds: int | None = None
    approval_process: ApprovalProcess | None = None
    offered_rate: Decimal | None = None
    is_category_leader: bool = False
    brand_tier: BrandTier | None = None

    @field_validator("payment_terms", mode="before")
    @classmethod
    def unknown_payment_terms(cls, v: object) -> object:
        if v is not None and str(v) not in PaymentTerms._value2member_map_:
            return None
        return v

    @field_validator("approval_process", mode="before")
    @classmethod
    def unknown_approval_process(cls, v: object) -> object:
        if v is not None and str(v) not in ApprovalProcess._value2member_map_:
            return None
        return v

    @field_validator("brand_tier", mode="before")
    @classmethod
    def unknown_brand_tier(cls, v: object) -> object:
        if v is not None and str(v) not in BrandTier._value2member_map_:
            return None
        return v

    @field_validator("offered_rate", mode="before")
    @classmethod
    def coerce_decimal(cls, v: object) -> object:
        """Convert float inputs to Decimal."""
        return to_decimal(v)
