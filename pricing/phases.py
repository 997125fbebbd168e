"""Phase allocation of the low/high totals."""

import logging
from typing import Any, Dict, Mapping

from contracts import PhaseCost
from pricing.rounding import round_half_up

logger = logging.getLogger(__name__)

# Shares of the space left after discovery; they sum to 0.95 and the
# Deployment phase takes the remainder.
DEFAULT_BASE_PERCENTAGES: Dict[str, float] = {
    "project_management": 0.15,
    "design": 0.10,
    "build": 0.55,
    "qa": 0.15,
}

DISCOVERY_PHASE = "discovery"
DEPLOYMENT_PHASE = "Deployment"


class PhaseAllocator:
    """Splits an estimate into discovery, configured phases and deployment."""

    def __init__(self, config: Mapping[str, Any]):
        phases = config.get("phases") or {}
        self.base_percentages: Mapping[str, float] = (
            phases.get("base_percentages") or DEFAULT_BASE_PERCENTAGES
        )

    def calculate_percentages(self, discovery_factor: float) -> Dict[str, float]:
        """Phase name -> share of the total, each to 3 decimal places.

        Discovery takes the uplift of its factor (1.05 -> 0.05); every base
        phase is scaled to the space that remains; Deployment absorbs the
        rounding remainder so the shares sum to 1.0.
        """
        discovery = discovery_factor - 1
        remaining = 1.0 - discovery

        percentages = {DISCOVERY_PHASE: round_half_up(discovery, 3)}
        for phase, base in self.base_percentages.items():
            percentages[phase] = round_half_up(base * remaining, 3)

        percentages[DEPLOYMENT_PHASE] = round_half_up(1.0 - sum(percentages.values()), 3)
        return percentages

    def calculate_phases(self, low: float, high: float, discovery_factor: float) -> Dict[str, PhaseCost]:
        """Cost every phase; each bound is rounded independently."""
        percentages = self.calculate_percentages(discovery_factor)
        logger.debug("Phase percentages: %s", percentages)

        return {
            phase: PhaseCost(
                percentage=percent,
                low=round_half_up(low * percent),
                high=round_half_up(high * percent),
            )
            for phase, percent in percentages.items()
        }
