"""Calendar-based seasonal demand periods.

Periods are checked in priority order: Q4 holiday, back to school,
Valentine's, summer, then the default period. August belongs to back to
school, so the summer premium only applies in June and July.
"""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from ratecard.domain.models import coerce_date
from ratecard.domain.types import SeasonalPeriod
from ratecard.pricing.tables import SEASONAL_DISPLAY_NAMES, SEASONAL_PREMIUMS


@dataclass(frozen=True)
class SeasonalPremium:
    """Resolved seasonal adjustment for a campaign date."""

    premium: Decimal
    period: SeasonalPeriod
    display_name: str


def resolve_seasonal_period(target: date) -> SeasonalPeriod:
    """Map a calendar date to its seasonal demand period.

    Args:
        target: The campaign date.

    Returns:
        ``q4_holiday`` for Nov 1 - Dec 31, ``back_to_school`` for Aug 1 -
        Sep 15, ``valentines`` for Feb 1 - 14, ``summer`` for Jun 1 - Jul 31,
        otherwise ``default``.
    """
    month, day = target.month, target.day

    if month in (11, 12):
        return SeasonalPeriod.Q4_HOLIDAY
    if month == 8 or (month == 9 and day <= 15):
        return SeasonalPeriod.BACK_TO_SCHOOL
    if month == 2 and day <= 14:
        return SeasonalPeriod.VALENTINES
    if month in (6, 7):
        return SeasonalPeriod.SUMMER
    return SeasonalPeriod.DEFAULT


def seasonal_premium_for(period: SeasonalPeriod) -> SeasonalPremium:
    """Look up the premium and display name for a period."""
    return SeasonalPremium(
        premium=SEASONAL_PREMIUMS[period],
        period=period,
        display_name=SEASONAL_DISPLAY_NAMES[period],
    )


def get_seasonal_premium(
    value: date | datetime | str | None = None,
    today: date | None = None,
) -> SeasonalPremium:
    """Resolve the seasonal premium for a campaign date.

    Args:
        value: The campaign date as a ``date``, ``datetime`` or ISO string.
        today: Fallback date used when ``value`` is missing or unparseable.
            Defaults to the current date.

    Returns:
        The seasonal premium, period and display name.
    """
    target = coerce_date(value) or today or date.today()
    return seasonal_premium_for(resolve_seasonal_period(target))
