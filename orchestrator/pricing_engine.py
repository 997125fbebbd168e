"""Pricing Engine - orchestrator for a complete project estimate.

The Pricing Engine is the single entry point that:
1. Validates the pricing configuration once, when it is built
2. Validates each request against that configuration
3. Runs the day, price, phase, payment and support calculators in order
4. Returns the assembled estimate, with advisory warnings on request
"""

import copy
import logging
from typing import Any, List, Mapping, Optional, Tuple, Union

from contracts import EstimateRequest, EstimateResult
from pricing import (
    ConfigurationValidator,
    InputValidator,
    PricingCalculator,
    PhaseAllocator,
    PaymentScheduler,
    SupportEstimator,
    coerce_request,
)
from rules import BusinessRuleValidator

logger = logging.getLogger(__name__)

RequestInput = Union[EstimateRequest, Mapping[str, Any]]


class PricingEngine:
    """Wires the pricing calculators into one estimate call.

    The engine holds no per-request state: factors are passed explicitly
    from the day calculation to the calculators that need them, so an
    instance may be shared between concurrent callers.
    """

    def __init__(
        self,
        config: Mapping[str, Any],
        config_validator: Optional[ConfigurationValidator] = None,
        input_validator: Optional[InputValidator] = None,
        calculator: Optional[PricingCalculator] = None,
        phase_allocator: Optional[PhaseAllocator] = None,
        payment_scheduler: Optional[PaymentScheduler] = None,
        support_estimator: Optional[SupportEstimator] = None,
        business_rules: Optional[BusinessRuleValidator] = None,
    ):
        """Initialize the engine.

        Args:
            config: Pricing configuration; a private copy is kept
            config_validator: Optional custom configuration validator
            input_validator: Optional custom input validator
            calculator: Optional custom day/price calculator
            phase_allocator: Optional custom phase allocator
            payment_scheduler: Optional custom payment scheduler
            support_estimator: Optional custom support estimator
            business_rules: Optional custom business rule validator

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        self.config_validator = config_validator or ConfigurationValidator()
        self.config_validator.validate(config)
        self.config = copy.deepcopy(dict(config))

        self.input_validator = input_validator or InputValidator(self.config)
        self.calculator = calculator or PricingCalculator(self.config)
        self.phase_allocator = phase_allocator or PhaseAllocator(self.config)
        self.payment_scheduler = payment_scheduler or PaymentScheduler(self.config)
        self.support_estimator = support_estimator or SupportEstimator(self.config)
        self.business_rules = business_rules or BusinessRuleValidator(self.config)

        logger.info(
            "Pricing engine ready: day rate %s-%s, %d project types, %d features",
            self.config["day_rate"]["min"],
            self.config["day_rate"]["max"],
            len(self.config["project_types"]),
            len(self.config["features"]),
        )

    def estimate(self, request: RequestInput) -> EstimateResult:
        """Generate a complete estimate.

        Args:
            request: EstimateRequest or a mapping with the request fields

        Returns:
            EstimateResult with days, price range, phases, payments and support

        Raises:
            InputValidationError: If the request does not match the configuration
        """
        # Step 1: Validate the request
        request = coerce_request(request)
        self.input_validator.validate(request)

        # Step 2: Days, and the factors every later step reads
        days, factors = self.calculator.calculate_days(request)

        # Step 3: Price range
        pricing = self.calculator.calculate_pricing(days, factors)

        # Step 4: Breakdowns
        phases = self.phase_allocator.calculate_phases(pricing.low, pricing.high, factors.discovery)
        payment_schedule = self.payment_scheduler.calculate_payment_schedule(pricing.low, pricing.high)
        support = self.support_estimator.calculate_support(pricing.low, factors.support, factors.complexity)

        logger.info(
            "Estimate for %s: %.1f days, %.0f-%.0f",
            request.project_type, days, pricing.low, pricing.high,
        )

        return EstimateResult(
            days=days,
            low=pricing.low,
            high=pricing.high,
            phases=phases,
            payment_schedule=payment_schedule,
            support=support,
        )

    def check(self, request: RequestInput) -> List[str]:
        """Advisory business rule warnings; never raises for incomplete requests."""
        return self.business_rules.validate_business_rules(request)

    def estimate_with_warnings(self, request: RequestInput) -> Tuple[EstimateResult, List[str]]:
        """Estimate plus advisory warnings. Warnings never change the numbers."""
        warnings = self.check(request)
        return self.estimate(request), warnings


def estimate(config: Mapping[str, Any], request: RequestInput) -> Tuple[EstimateResult, List[str]]:
    """Convenience function for a one-off estimate.

    Args:
        config: Pricing configuration
        request: Estimate request

    Returns:
        (EstimateResult, advisory warning messages)
    """
    engine = PricingEngine(config)
    return engine.estimate_with_warnings(request)
