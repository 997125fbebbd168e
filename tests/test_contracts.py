"""Tests for the Pydantic contracts.

Verifies aliases, defaults and validation of the request, factor and
result models.
"""

import pytest
from pydantic import ValidationError

from contracts import (
    MultiplierCategory,
    REQUIRED_CATEGORIES,
    OPTIONAL_CATEGORIES,
    DAY_CATEGORIES,
    Factors,
    EstimateRequest,
    EstimateResult,
    PhaseCost,
    PaymentInstalment,
    WarningType,
    CompatibilityWarning,
)


class TestMultiplierCategory:
    """Test multiplier category metadata."""

    def test_required_and_optional_partition(self):
        assert set(REQUIRED_CATEGORIES) | set(OPTIONAL_CATEGORIES) == set(MultiplierCategory)
        assert not set(REQUIRED_CATEGORIES) & set(OPTIONAL_CATEGORIES)

    def test_is_required(self):
        assert MultiplierCategory.SUPPORT.is_required
        assert not MultiplierCategory.COMPLIANCE.is_required

    def test_request_field(self):
        assert MultiplierCategory.REAL_TIME.request_field == "realTime"
        assert MultiplierCategory.RISK.request_field == "risk"

    def test_discovery_and_support_do_not_scale_days(self):
        assert MultiplierCategory.DISCOVERY not in DAY_CATEGORIES
        assert MultiplierCategory.SUPPORT not in DAY_CATEGORIES


class TestEstimateRequest:
    """Test request parsing."""

    def test_camel_case_aliases(self):
        request = EstimateRequest(projectType="api", realTime="yes")
        assert request.project_type == "api"
        assert request.real_time == "yes"

    def test_snake_case_names(self):
        request = EstimateRequest(project_type="api", real_time="no")
        assert request.project_type == "api"
        assert request.real_time == "no"

    def test_defaults(self):
        request = EstimateRequest()
        assert request.project_type is None
        assert request.features == []
        assert request.bundles == 0
        assert request.compliance is None

    def test_null_features_and_bundles(self):
        request = EstimateRequest(features=None, bundles=None)
        assert request.features == []
        assert request.bundles == 0

    def test_features_deduplicated_in_order(self):
        request = EstimateRequest(features=["seo", "cms", "seo", "reporting", "cms"])
        assert request.features == ["seo", "cms", "reporting"]

    def test_unknown_keys_ignored(self):
        request = EstimateRequest(projectType="api", colour="blue")
        assert not hasattr(request, "colour")

    def test_fractional_bundles_rejected(self):
        with pytest.raises(ValidationError):
            EstimateRequest(bundles=1.5)

    def test_option_for(self):
        request = EstimateRequest(complexity="high", realTime="yes")
        assert request.option_for(MultiplierCategory.COMPLEXITY) == "high"
        assert request.option_for(MultiplierCategory.REAL_TIME) == "yes"
        assert request.option_for(MultiplierCategory.COMPLIANCE) is None


class TestFactors:
    """Test the per-request factor set."""

    def _factors(self, **overrides):
        values = {"project_management": 0.15, "contingency": 0.1, "calibration_factor": 1.05}
        values.update(overrides)
        return Factors(**values)

    def test_neutral_defaults(self):
        factors = self._factors()
        assert factors.complexity == factors.discovery == factors.support == 1.0
        assert factors.compliance is None

    def test_frozen(self):
        factors = self._factors()
        with pytest.raises(ValidationError):
            factors.risk = 2.0

    def test_percentage_bounds(self):
        with pytest.raises(ValidationError):
            self._factors(contingency=1.5)

    def test_as_dict_omits_absent_optional_factors(self):
        data = self._factors(real_time=1.1).as_dict()
        assert data["real_time"] == 1.1
        assert "compliance" not in data

    def test_for_category(self):
        factors = self._factors(speed=1.2)
        assert factors.for_category(MultiplierCategory.SPEED) == 1.2
        assert factors.for_category(MultiplierCategory.REAL_TIME) is None


class TestEstimateResult:
    """Test the result model."""

    def test_payment_schedule_alias(self):
        result = EstimateResult(
            days=1.0,
            low=450,
            high=650,
            phases={"build": PhaseCost(percentage=1.0, low=450, high=650)},
            paymentSchedule=[PaymentInstalment(label="Full payment on completion", low=450, high=650)],
            support=18,
        )
        assert result.payment_schedule[0].label == "Full payment on completion"
        assert "paymentSchedule" in result.model_dump(by_alias=True)
        assert "payment_schedule" in result.model_dump()

    def test_negative_days_rejected(self):
        with pytest.raises(ValidationError):
            EstimateResult(days=-1, low=0, high=0, support=0)


class TestCompatibilityWarning:
    def test_warning_type_values(self):
        warning = CompatibilityWarning(type="conflict", message="A and B conflict", features=["a", "b"])
        assert warning.type == WarningType.CONFLICT
        assert warning.model_dump(mode="json")["type"] == "conflict"
