"""Shared pytest fixtures for the rate card engine test suite."""

from datetime import date

import pytest

from ratecard.domain.models import (
    BrandInfo,
    ContentRequirements,
    CreatorProfile,
    ParsedBrief,
    PlatformMetrics,
)
from ratecard.domain.types import DealQualityLevel, FitLevel
from ratecard.scoring.models import DealQualityResult, FitScoreResult


@pytest.fixture
def off_season_date() -> date:
    """A campaign date outside every seasonal period."""
    return date(2025, 3, 15)


@pytest.fixture
def micro_profile() -> CreatorProfile:
    """A 35K-follower US lifestyle creator on Instagram with 2% engagement."""
    return CreatorProfile(
        display_name="Test Creator",
        handle="@testcreator",
        niches=["lifestyle"],
        instagram=PlatformMetrics(
            followers=35_000,
            engagement_rate=2.0,
            avg_likes=700,
            avg_comments=40,
            avg_views=12_000,
        ),
    )


@pytest.fixture
def standard_brief(off_season_date: date) -> ParsedBrief:
    """A single static Instagram post with no usage rights, off season."""
    return ParsedBrief(
        brand=BrandInfo(name="Glow Co", industry="beauty", product="Serum"),
        content=ContentRequirements(platform="instagram", format="static", quantity=1),
        campaign_date=off_season_date,
    )


@pytest.fixture
def medium_fit() -> FitScoreResult:
    """A legacy fit score with no price adjustment."""
    return FitScoreResult(total_score=60, fit_level=FitLevel.MEDIUM)


@pytest.fixture
def fair_quality() -> DealQualityResult:
    """A deal quality score with no price adjustment."""
    return DealQualityResult(total_score=60, quality_level=DealQualityLevel.FAIR)
