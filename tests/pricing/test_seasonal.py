"""Tests for seasonal period resolution."""

from datetime import date, datetime
from decimal import Decimal

import pytest

from ratecard.domain.types import SeasonalPeriod
from ratecard.pricing.seasonal import get_seasonal_premium, resolve_seasonal_period


class TestResolveSeasonalPeriod:
    """Calendar boundaries for each demand period."""

    @pytest.mark.parametrize(
        ("target", "expected"),
        [
            (date(2025, 1, 31), SeasonalPeriod.DEFAULT),
            (date(2025, 2, 1), SeasonalPeriod.VALENTINES),
            (date(2025, 2, 14), SeasonalPeriod.VALENTINES),
            (date(2025, 2, 15), SeasonalPeriod.DEFAULT),
            (date(2025, 5, 31), SeasonalPeriod.DEFAULT),
            (date(2025, 6, 1), SeasonalPeriod.SUMMER),
            (date(2025, 7, 31), SeasonalPeriod.SUMMER),
            (date(2025, 8, 1), SeasonalPeriod.BACK_TO_SCHOOL),
            (date(2025, 8, 31), SeasonalPeriod.BACK_TO_SCHOOL),
            (date(2025, 9, 15), SeasonalPeriod.BACK_TO_SCHOOL),
            (date(2025, 9, 16), SeasonalPeriod.DEFAULT),
            (date(2025, 10, 31), SeasonalPeriod.DEFAULT),
            (date(2025, 11, 1), SeasonalPeriod.Q4_HOLIDAY),
            (date(2025, 12, 31), SeasonalPeriod.Q4_HOLIDAY),
        ],
        ids=lambda value: value.isoformat() if isinstance(value, date) else str(value),
    )
    def test_boundaries(self, target: date, expected: SeasonalPeriod) -> None:
        assert resolve_seasonal_period(target) == expected


class TestGetSeasonalPremium:
    """Premiums, display names and date parsing."""

    @pytest.mark.parametrize(
        ("value", "premium", "display_name"),
        [
            (date(2025, 12, 5), Decimal("0.25"), "Q4 Holiday Season (Nov-Dec)"),
            (date(2025, 8, 20), Decimal("0.15"), "Back to School (Aug-Sep)"),
            (date(2025, 2, 10), Decimal("0.10"), "Valentine's Day (Feb)"),
            (date(2025, 7, 4), Decimal("0.05"), "Summer Season (Jun-Aug)"),
            (date(2025, 4, 1), Decimal("0"), "Standard Period"),
        ],
        ids=["q4", "back_to_school", "valentines", "summer", "default"],
    )
    def test_premiums(self, value: date, premium: Decimal, display_name: str) -> None:
        seasonal = get_seasonal_premium(value)

        assert seasonal.premium == premium
        assert seasonal.display_name == display_name

    @pytest.mark.parametrize(
        "value",
        ["2025-11-20", "2025-11-20T09:30:00Z", datetime(2025, 11, 20, 9, 30)],
        ids=["iso_date", "iso_datetime_utc", "datetime"],
    )
    def test_accepts_strings_and_datetimes(self, value: object) -> None:
        assert get_seasonal_premium(value).period == SeasonalPeriod.Q4_HOLIDAY

    @pytest.mark.parametrize("value", [None, "", "next tuesday"], ids=["none", "blank", "unparseable"])
    def test_falls_back_to_today(self, value: object) -> None:
        seasonal = get_seasonal_premium(value, today=date(2025, 6, 15))

        assert seasonal.period == SeasonalPeriod.SUMMER
