"""Pydantic contracts for the project estimator.

Every value crossing a pipeline stage is typed through these contracts.
"""

from .pricing_contracts import (
    MultiplierCategory,
    REQUIRED_CATEGORIES,
    OPTIONAL_CATEGORIES,
    DAY_CATEGORIES,
    Factors,
)

from .estimate_contracts import (
    EstimateRequest,
    PriceRange,
    PhaseCost,
    PaymentInstalment,
    EstimateResult,
)

from .warning_contracts import (
    WarningType,
    CompatibilityWarning,
)

__all__ = [
    # Pricing
    "MultiplierCategory",
    "REQUIRED_CATEGORIES",
    "OPTIONAL_CATEGORIES",
    "DAY_CATEGORIES",
    "Factors",
    # Estimate
    "EstimateRequest",
    "PriceRange",
    "PhaseCost",
    "PaymentInstalment",
    "EstimateResult",
    # Warnings
    "WarningType",
    "CompatibilityWarning",
]
