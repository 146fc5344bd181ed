"""Creator-brand fit and deal quality scoring.

Re-exports key functions and types for convenient access:
    from ratecard.scoring import calculate_deal_quality, resolve_score_adjustment
"""

from ratecard.scoring.adapter import (
    ScoreAdjustment,
    resolve_fit_level,
    resolve_score_adjustment,
)
from ratecard.scoring.deal_quality import calculate_deal_quality, deal_quality_to_fit_score
from ratecard.scoring.fit import calculate_fit_score
from ratecard.scoring.models import (
    DealQualityInput,
    DealQualityResult,
    FitScoreResult,
    ScoreInput,
    parse_score_input,
)

__all__ = [
    "DealQualityInput",
    "DealQualityResult",
    "FitScoreResult",
    "ScoreAdjustment",
    "ScoreInput",
    "calculate_deal_quality",
    "calculate_fit_score",
    "deal_quality_to_fit_score",
    "parse_score_input",
    "resolve_fit_level",
    "resolve_score_adjustment",
]
