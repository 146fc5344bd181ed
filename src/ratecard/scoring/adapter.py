"""Normalize either score variant into the adjustment pricing applies."""

from dataclasses import dataclass
from decimal import Decimal

from ratecard.domain.types import FitLevel
from ratecard.scoring.models import (
    FIT_ADJUSTMENTS,
    QUALITY_TO_FIT_LEVEL,
    DealQualityResult,
    FitScoreResult,
)


@dataclass(frozen=True)
class ScoreAdjustment:
    """The single level/adjustment pair derived from a score.

    Attributes:
        fit_level: Legacy fit level used for the price adjustment.
        adjustment: Fractional price adjustment for the level.
        total_score: The score's 0-100 total.
        layer_name: ``"Deal Quality"`` or ``"Fit Score"``.
        display_level: Capitalized level as shown to the creator.
        descriptor: ``"opportunity"`` for deal quality, ``"alignment"`` for fit.
    """

    fit_level: FitLevel
    adjustment: Decimal
    total_score: int
    layer_name: str
    display_level: str
    descriptor: str

    @property
    def description(self) -> str:
        return f"{self.total_score}/100 - {self.display_level} {self.descriptor}"


def resolve_fit_level(score: FitScoreResult | DealQualityResult) -> FitLevel:
    """Map a score to the legacy fit level (deal quality levels are translated)."""
    if isinstance(score, DealQualityResult):
        return QUALITY_TO_FIT_LEVEL[score.quality_level]
    return score.fit_level


def resolve_score_adjustment(score: FitScoreResult | DealQualityResult) -> ScoreAdjustment:
    """Derive the price adjustment and display labels for either score variant.

    Args:
        score: A legacy fit result or a deal quality result.

    Returns:
        The fit level, its adjustment (perfect +0.25, high +0.15, medium 0,
        low -0.10) and the labels for the pricing layer.
    """
    fit_level = resolve_fit_level(score)
    if isinstance(score, DealQualityResult):
        return ScoreAdjustment(
            fit_level=fit_level,
            adjustment=FIT_ADJUSTMENTS[fit_level],
            total_score=score.total_score,
            layer_name="Deal Quality",
            display_level=score.quality_level.capitalize(),
            descriptor="opportunity",
        )
    return ScoreAdjustment(
        fit_level=fit_level,
        adjustment=FIT_ADJUSTMENTS[fit_level],
        total_score=score.total_score,
        layer_name="Fit Score",
        display_level=fit_level.capitalize(),
        descriptor="alignment",
    )
