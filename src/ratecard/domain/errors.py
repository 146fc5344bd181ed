"""Domain-specific exception classes for the rate card engine."""

from ratecard.domain.types import PricingModel


class RateCardError(Exception):
    """Base class for all domain errors in the rate card engine."""


class PricingError(RateCardError):
    """Raised when a pricing calculation fails."""


class PricingConfigurationError(PricingError):
    """Raised when a pricing model is requested without its configuration.

    Attributes:
        pricing_model: The pricing model that was requested.
        missing: Name of the brief field that was required but absent.
    """

    def __init__(self, pricing_model: PricingModel, missing: str) -> None:
        self.pricing_model = pricing_model
        self.missing = missing
        super().__init__(
            f"{missing} is required for the '{pricing_model}' pricing model"
        )
