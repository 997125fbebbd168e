"""Monthly support cost estimation."""

import logging
from typing import Any, Dict, Mapping

from pricing.rounding import round_half_up

logger = logging.getLogger(__name__)

DEFAULT_COEFFICIENTS: Dict[str, float] = {
    "small": 0.04,
    "medium": 0.03,
    "large": 0.02,
}

DEFAULT_THRESHOLDS: Dict[str, float] = {
    "small": 5000,
    "medium": 15000,
}

DEFAULT_MAX_MONTHLY = 900


class SupportEstimator:
    """Derives a capped monthly support cost from the low estimate."""

    def __init__(self, config: Mapping[str, Any]):
        support = config.get("support") or {}
        self.coefficients = {**DEFAULT_COEFFICIENTS, **(support.get("coefficients") or {})}
        self.thresholds = {**DEFAULT_THRESHOLDS, **(support.get("thresholds") or {})}
        self.max_monthly = support.get("max_monthly", DEFAULT_MAX_MONTHLY)

    def select_coefficient(self, low: float) -> float:
        if low < self.thresholds["small"]:
            return self.coefficients["small"]
        if low < self.thresholds["medium"]:
            return self.coefficients["medium"]
        return self.coefficients["large"]

    def calculate_support(self, low: float, support_factor: float, complexity_factor: float) -> float:
        """Monthly support: low x coefficient x support x complexity, capped at max_monthly."""
        coefficient = self.select_coefficient(low)
        cost = round_half_up(low * (coefficient * support_factor) * complexity_factor)

        if cost > self.max_monthly:
            logger.debug("Support cost %.0f capped at %s", cost, self.max_monthly)
            return float(self.max_monthly)
        return cost
