"""Advisory business rules for estimate requests."""

from .business_rules import BusinessRuleValidator, RISKY_COMBINATIONS

__all__ = [
    "BusinessRuleValidator",
    "RISKY_COMBINATIONS",
]
