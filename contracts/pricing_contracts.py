"""Pricing contracts: multiplier categories and the per-request factor set."""

from pydantic import BaseModel, Field
from typing import Dict, Optional
from enum import Enum


class MultiplierCategory(str, Enum):
    """A named axis whose selected option contributes a multiplicative factor."""
    COMPLEXITY = "complexity"
    RISK = "risk"
    SPEED = "speed"
    DISCOVERY = "discovery"
    SUPPORT = "support"
    COMPLIANCE = "compliance"  # optional
    REAL_TIME = "real_time"  # optional

    @property
    def is_required(self) -> bool:
        """Required categories must be configured and answered on every request."""
        return self not in OPTIONAL_CATEGORIES

    @property
    def request_field(self) -> str:
        """Name of the request field (as sent by the presentation layer)."""
        return "realTime" if self is MultiplierCategory.REAL_TIME else self.value


REQUIRED_CATEGORIES = (
    MultiplierCategory.COMPLEXITY,
    MultiplierCategory.RISK,
    MultiplierCategory.SPEED,
    MultiplierCategory.DISCOVERY,
    MultiplierCategory.SUPPORT,
)

OPTIONAL_CATEGORIES = (
    MultiplierCategory.COMPLIANCE,
    MultiplierCategory.REAL_TIME,
)

# Categories that scale effort days; discovery and support only affect price and support cost
DAY_CATEGORIES = (
    MultiplierCategory.COMPLEXITY,
    MultiplierCategory.RISK,
    MultiplierCategory.SPEED,
    MultiplierCategory.COMPLIANCE,
    MultiplierCategory.REAL_TIME,
)


class Factors(BaseModel):
    """Multipliers resolved for a single request.

    Built fresh per estimate and passed explicitly to every calculator that
    needs it. ``compliance`` and ``real_time`` are only set when the request
    supplied them and the configuration defines the category.
    """
    project_management: float = Field(..., ge=0, le=1, description="Project management overhead")
    contingency: float = Field(..., ge=0, le=1, description="Contingency allowance")
    calibration_factor: float = Field(..., gt=0, description="Global effort calibration")
    complexity: float = Field(1.0, gt=0)
    risk: float = Field(1.0, gt=0)
    speed: float = Field(1.0, gt=0)
    discovery: float = Field(1.0, gt=0)
    support: float = Field(1.0, gt=0)
    compliance: Optional[float] = Field(None, gt=0)
    real_time: Optional[float] = Field(None, gt=0)

    model_config = {"frozen": True}

    def for_category(self, category: MultiplierCategory) -> Optional[float]:
        """Factor for a multiplier category, None when an optional one is absent."""
        return getattr(self, category.value)

    def as_dict(self) -> Dict[str, float]:
        """Factor name -> value, omitting optional factors that were not applied."""
        return self.model_dump(exclude_none=True)
