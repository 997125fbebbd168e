"""Pricing pipeline: validation and the individual calculators."""

from .errors import ConfigurationError, InputValidationError
from .config_validator import ConfigurationValidator
from .input_validator import InputValidator, coerce_request
from .calculator import PricingCalculator
from .phases import PhaseAllocator
from .payment_schedule import PaymentScheduler
from .support import SupportEstimator
from .rounding import round_half_up

__all__ = [
    "ConfigurationError",
    "InputValidationError",
    "ConfigurationValidator",
    "InputValidator",
    "coerce_request",
    "PricingCalculator",
    "PhaseAllocator",
    "PaymentScheduler",
    "SupportEstimator",
    "round_half_up",
]
