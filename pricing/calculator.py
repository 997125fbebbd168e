"""Effort-day and price calculation.

Days come from the project type, features and bundles, scaled by the
complexity, risk and speed multipliers (plus compliance and real-time when
requested) and the calibration factor. Prices apply the day rates, project
management overhead, discovery and contingency to those days.

Factors are returned to the caller rather than stored on the calculator, so
one instance can serve concurrent requests.
"""

import logging
import math
from typing import Any, Mapping, Tuple, Union

from contracts import (
    EstimateRequest,
    Factors,
    MultiplierCategory,
    PriceRange,
    REQUIRED_CATEGORIES,
    OPTIONAL_CATEGORIES,
    DAY_CATEGORIES,
)
from pricing.input_validator import coerce_request
from pricing.rounding import round_half_up
from config import settings

logger = logging.getLogger(__name__)

DEFAULT_MULTIPLIER_FACTOR = 1.0

# Rate keys paired with the bound each produces
RATE_BOUNDS = (("min", "low"), ("max", "high"))


class PricingCalculator:
    """Converts a request into effort days and days into a price range."""

    def __init__(self, config: Mapping[str, Any]):
        self.config = config
        self.rates = {
            "min": config["day_rate"]["min"],
            "max": config["day_rate"]["max"],
        }

    def resolve_factors(self, request: Union[EstimateRequest, Mapping[str, Any]]) -> Factors:
        """Resolve every multiplier the request selects.

        Unknown options fall back to a neutral factor; the input validator
        rejects them before this point in the engine.
        """
        request = coerce_request(request)
        multipliers = self.config["multipliers"]

        values = {
            "project_management": self.config["project_management"],
            "contingency": self.config["contingency"],
            "calibration_factor": self.config["calibration_factor"],
        }
        for category in REQUIRED_CATEGORIES:
            values[category.value] = self._factor(category, request.option_for(category))

        for category in OPTIONAL_CATEGORIES:
            option = request.option_for(category)
            if option is not None and multipliers.get(category.value) is not None:
                values[category.value] = self._factor(category, option)

        return Factors(**values)

    def calculate_base_days(self, request: EstimateRequest) -> float:
        """Project type days (floored) plus feature and bundle days."""
        project_type = self.config["project_types"].get(request.project_type) or {}
        days = float(math.floor(project_type.get("days", 0)))

        for feature in request.features:
            days += (self.config["features"].get(feature) or {}).get("days", 0)

        if request.bundles > 0:
            bundles = self.config.get("bundles") or {}
            days_per_bundle = bundles.get("days_per_bundle", settings.default_days_per_bundle)
            days += request.bundles * days_per_bundle

        return days

    def calculate_days(self, request: Union[EstimateRequest, Mapping[str, Any]]) -> Tuple[float, Factors]:
        """Calculate total effort days for a request.

        Returns:
            (days rounded to 1 decimal place, factors resolved for the request)
        """
        request = coerce_request(request)
        factors = self.resolve_factors(request)

        days = self.calculate_base_days(request)
        base_days = days
        for category in DAY_CATEGORIES:
            factor = factors.for_category(category)
            if factor is not None:
                days *= factor
        days *= factors.calibration_factor

        rounded = round_half_up(days, 1)
        logger.debug("Base days %.2f -> %.4f -> %.1f days", base_days, days, rounded)
        return rounded, factors

    def calculate_pricing(self, days: float, factors: Factors) -> PriceRange:
        """Calculate the low/high price for ``days``.

        The low bound uses the minimum day rate and the high bound the maximum;
        both apply the same overheads.
        """
        bounds = {
            bound: round_half_up(self._estimate(days, self.rates[rate], factors))
            for rate, bound in RATE_BOUNDS
        }
        return PriceRange(**bounds)

    @staticmethod
    def _estimate(days: float, rate: float, factors: Factors) -> float:
        estimate = days * rate
        estimate *= 1 + factors.project_management
        estimate *= factors.discovery
        estimate *= 1 + factors.contingency
        return estimate

    def _factor(self, category: MultiplierCategory, option: Any) -> float:
        options = self.config["multipliers"].get(category.value) or {}
        return options.get(option, DEFAULT_MULTIPLIER_FACTOR)
