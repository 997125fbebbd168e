"""Milestone payment schedules selected by project size."""

import logging
from typing import Any, Dict, List, Mapping

from contracts import PaymentInstalment
from pricing.rounding import round_half_up

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLDS: Dict[str, float] = {
    "small_project": 500,
    "medium_project": 3000,
}

# The large schedule front-loads the low estimate and back-loads the high one.
DEFAULT_SCHEDULES: Dict[str, List[Dict[str, Any]]] = {
    "small": [
        {"label": "Full payment on completion", "low_percent": 1.0, "high_percent": 1.0},
    ],
    "medium": [
        {"label": "Deposit (50%)", "low_percent": 0.5, "high_percent": 0.5},
        {"label": "Final payment (50%)", "low_percent": 0.5, "high_percent": 0.5},
    ],
    "large": [
        {"label": "Deposit (40%)", "low_percent": 0.4, "high_percent": 0.4},
        {"label": "Design Sign Off (25%)", "low_percent": 0.25, "high_percent": 0.2},
        {"label": "Initial Build Completed (25%)", "low_percent": 0.25, "high_percent": 0.2},
        {"label": "Go Live (10%)", "low_percent": 0.1, "high_percent": 0.2},
    ],
}


class PaymentScheduler:
    """Builds the payment plan for an estimate."""

    def __init__(self, config: Mapping[str, Any]):
        self.payment_config: Mapping[str, Any] = config.get("payment_schedules") or {}
        self.thresholds = {**DEFAULT_THRESHOLDS, **(self.payment_config.get("thresholds") or {})}

    def select_bracket(self, high: float) -> str:
        """small below small_project, medium up to medium_project inclusive, else large."""
        if high < self.thresholds["small_project"]:
            return "small"
        if high <= self.thresholds["medium_project"]:
            return "medium"
        return "large"

    def schedule_for(self, bracket: str) -> List[Mapping[str, Any]]:
        """Configured schedule for a bracket, or the default one."""
        schedule = self.payment_config.get(bracket)
        return DEFAULT_SCHEDULES[bracket] if schedule is None else schedule

    def calculate_payment_schedule(self, low: float, high: float) -> List[PaymentInstalment]:
        bracket = self.select_bracket(high)
        logger.debug("Payment bracket %s for high estimate %.0f", bracket, high)

        return [
            PaymentInstalment(
                label=payment["label"],
                low=round_half_up(low * payment["low_percent"]),
                high=round_half_up(high * payment["high_percent"]),
            )
            for payment in self.schedule_for(bracket)
        ]
