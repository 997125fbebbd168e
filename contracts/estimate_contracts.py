"""Estimate contracts: the request handed in and the result handed back.

Field aliases follow the camelCase keys the presentation layer sends
(``projectType``, ``realTime``, ``paymentSchedule``); snake_case names are
accepted as well.
"""

from pydantic import BaseModel, Field, field_validator
from typing import Any, Dict, List, Optional

from .pricing_contracts import MultiplierCategory


class EstimateRequest(BaseModel):
    """One estimate request.

    Presence and membership of values are checked by the input validator
    against the pricing configuration, so every selection may be missing here.
    """
    project_type: Optional[str] = Field(None, alias="projectType", description="Key into project_types")
    features: List[str] = Field(default_factory=list, description="Keys into features")
    bundles: int = Field(0, description="Number of additional scope bundles")
    complexity: Optional[str] = None
    risk: Optional[str] = None
    speed: Optional[str] = None
    discovery: Optional[str] = None
    support: Optional[str] = None
    compliance: Optional[str] = None
    real_time: Optional[str] = Field(None, alias="realTime")

    model_config = {"populate_by_name": True, "extra": "ignore"}

    @field_validator("features", mode="before")
    @classmethod
    def dedupe_features(cls, value: Any) -> Any:
        """Features are a set; keep first-seen order."""
        if value is None:
            return []
        if isinstance(value, (list, tuple, set, frozenset)):
            if all(isinstance(feature, str) for feature in value):
                return list(dict.fromkeys(value))
            # left for the List[str] check to reject
            return list(value)
        return value

    @field_validator("bundles", mode="before")
    @classmethod
    def default_bundles(cls, value: Any) -> Any:
        return 0 if value is None else value

    def option_for(self, category: MultiplierCategory) -> Optional[str]:
        """Selected option key for a multiplier category."""
        return getattr(self, category.value)


class PriceRange(BaseModel):
    """Low/high monetary bounds."""
    low: float = Field(..., description="Estimate at the minimum day rate")
    high: float = Field(..., description="Estimate at the maximum day rate")


class PhaseCost(BaseModel):
    """Cost of one project phase."""
    percentage: float = Field(..., description="Share of the total, 3 decimal places")
    low: float
    high: float


class PaymentInstalment(BaseModel):
    """One milestone payment."""
    label: str
    low: float
    high: float


class EstimateResult(BaseModel):
    """Complete output of the pricing engine."""
    days: float = Field(..., ge=0, description="Total effort days, 1 decimal place")
    low: float
    high: float
    phases: Dict[str, PhaseCost] = Field(default_factory=dict, description="Phase name -> cost, in delivery order")
    payment_schedule: List[PaymentInstalment] = Field(default_factory=list, alias="paymentSchedule")
    support: float = Field(..., ge=0, description="Monthly support cost")

    model_config = {"populate_by_name": True}

    @property
    def price_range(self) -> PriceRange:
        return PriceRange(low=self.low, high=self.high)
