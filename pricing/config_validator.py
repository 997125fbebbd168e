"""Static pricing configuration validation.

Runs once when the pricing engine is built. The first violation found raises
a ConfigurationError; an engine is never built from a configuration that
could fail part way through an estimate.
"""

import logging
import math
from typing import Any, Mapping

from contracts import MultiplierCategory
from pricing.errors import ConfigurationError

logger = logging.getLogger(__name__)

REQUIRED_KEYS = (
    "day_rate",
    "contingency",
    "project_management",
    "calibration_factor",
    "multipliers",
    "project_types",
    "features",
)

PHASE_PERCENTAGE_TOTAL = 0.95
PHASE_PERCENTAGE_TOLERANCE = 0.001

SCHEDULE_BRACKETS = ("small", "medium", "large")


def is_number(value: Any) -> bool:
    """True for finite ints and floats; bools, NaN and numeric strings are rejected."""
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


class ConfigurationValidator:
    """Validates the complete pricing configuration."""

    def validate(self, config: Mapping[str, Any]) -> None:
        """Validate ``config``, raising ConfigurationError on the first problem.

        Checks run in a fixed order: required keys, day rates, percentages,
        calibration factor, multipliers, project types, features, then the
        optional phase, payment schedule, support and bundle sections.
        """
        if not isinstance(config, Mapping):
            raise ConfigurationError(
                f"Pricing configuration must be a mapping, got {type(config).__name__}"
            )

        self._validate_required_keys(config)
        self._validate_day_rates(config)
        self._validate_percentage("contingency", config["contingency"])
        self._validate_percentage("project_management", config["project_management"])
        self._validate_calibration_factor(config)
        self._validate_multipliers(config)
        self._validate_priced_items("project_types", config["project_types"])
        self._validate_priced_items("features", config["features"])
        self._validate_phases(config)
        self._validate_payment_schedules(config)
        self._validate_support(config)
        self._validate_bundles(config)

        logger.debug(
            "Pricing configuration valid: %d project types, %d features",
            len(config["project_types"]),
            len(config["features"]),
        )

    def _validate_required_keys(self, config: Mapping[str, Any]) -> None:
        for key in REQUIRED_KEYS:
            if config.get(key) is None:
                raise ConfigurationError.missing_required_config(key)

        for key in ("day_rate", "multipliers", "project_types", "features"):
            if not isinstance(config[key], Mapping):
                raise ConfigurationError(
                    f"Pricing configuration {key} must be a mapping", key=key, value=config[key]
                )

    def _validate_day_rates(self, config: Mapping[str, Any]) -> None:
        day_rate = config["day_rate"]
        if day_rate.get("min") is None or day_rate.get("max") is None:
            raise ConfigurationError.missing_required_config("day_rate.min or day_rate.max")

        for rate_type in ("min", "max"):
            value = day_rate[rate_type]
            if not is_number(value) or value <= 0:
                raise ConfigurationError.invalid_day_rate(rate_type, value)

        if day_rate["min"] > day_rate["max"]:
            raise ConfigurationError(
                "Day rate min cannot be greater than max",
                key="day_rate",
                value={"min": day_rate["min"], "max": day_rate["max"]},
            )

    def _validate_calibration_factor(self, config: Mapping[str, Any]) -> None:
        value = config["calibration_factor"]
        if not is_number(value) or value <= 0:
            raise ConfigurationError(
                f"Invalid calibration factor: {value!r}. Must be a positive number.",
                key="calibration_factor",
                value=value,
            )

    def _validate_multipliers(self, config: Mapping[str, Any]) -> None:
        multipliers = config["multipliers"]
        for category in MultiplierCategory:
            options = multipliers.get(category.value)
            if options is None:
                # Required categories are enforced per request by the input validator
                continue
            if not isinstance(options, Mapping):
                raise ConfigurationError(
                    f"Multiplier category {category.value} must map options to factors",
                    key=f"multipliers.{category.value}",
                    value=options,
                )
            for option, value in options.items():
                if not is_number(value) or value <= 0:
                    raise ConfigurationError.invalid_multiplier(category.value, option, value)

    def _validate_priced_items(self, section: str, items: Mapping[str, Any]) -> None:
        """Project types and features share one shape: key -> {days, title, description}."""
        if section == "project_types":
            error = ConfigurationError.invalid_project_type_configuration
        else:
            error = ConfigurationError.invalid_feature_configuration

        for key, item in items.items():
            if not isinstance(item, Mapping) or item.get("days") is None:
                raise error(key, "Missing days configuration")
            days = item["days"]
            if not is_number(days):
                raise error(key, "Days must be a number", days)
            if days < 0:
                raise error(key, "Days cannot be negative", days)

    def _validate_phases(self, config: Mapping[str, Any]) -> None:
        phases = config.get("phases")
        if not phases:
            return
        self._require_mapping("phases", phases)
        if phases.get("base_percentages") is None:
            return

        percentages = self._require_mapping("phases.base_percentages", phases["base_percentages"])
        for phase, value in percentages.items():
            if not is_number(value):
                raise ConfigurationError.invalid_percentage(f"phases.base_percentages.{phase}", value)

        total = sum(percentages.values())
        if abs(total - PHASE_PERCENTAGE_TOTAL) > PHASE_PERCENTAGE_TOLERANCE:
            raise ConfigurationError.phase_percentages_mismatch(total, PHASE_PERCENTAGE_TOTAL)

    def _validate_payment_schedules(self, config: Mapping[str, Any]) -> None:
        schedules = config.get("payment_schedules")
        if not schedules:
            return

        self._require_mapping("payment_schedules", schedules)
        thresholds = schedules.get("thresholds")
        if thresholds is not None:
            self._require_mapping("payment_schedules.thresholds", thresholds)
            for name in ("small_project", "medium_project"):
                if name in thresholds:
                    value = thresholds[name]
                    if not is_number(value) or value <= 0:
                        raise ConfigurationError.invalid_payment_threshold(name, value)

        for bracket in SCHEDULE_BRACKETS:
            schedule = schedules.get(bracket)
            if schedule is None:
                continue
            if isinstance(schedule, (str, bytes, Mapping)):
                raise ConfigurationError.invalid_payment_schedule(bracket, "Schedule must be a list of payments")
            for payment in schedule:
                if not isinstance(payment, Mapping) or any(
                    payment.get(field) is None for field in ("label", "low_percent", "high_percent")
                ):
                    raise ConfigurationError.invalid_payment_schedule(
                        bracket, "Missing required fields (label, low_percent, high_percent)"
                    )
                self._validate_percentage(f"payment_schedules.{bracket}.low_percent", payment["low_percent"])
                self._validate_percentage(f"payment_schedules.{bracket}.high_percent", payment["high_percent"])

    def _validate_support(self, config: Mapping[str, Any]) -> None:
        support = config.get("support")
        if not support:
            return

        self._require_mapping("support", support)
        coefficients = self._require_mapping("support.coefficients", support.get("coefficients") or {})
        for tier, coefficient in coefficients.items():
            self._validate_percentage(f"support.coefficients.{tier}", coefficient)

        thresholds = support.get("thresholds")
        if thresholds is not None:
            self._require_mapping("support.thresholds", thresholds)
            for name in ("small", "medium"):
                value = thresholds.get(name)
                if value is None:
                    continue
                if not is_number(value) or value <= 0:
                    raise ConfigurationError.invalid_support_threshold(name, value)

        if "max_monthly" in support:
            value = support["max_monthly"]
            if not is_number(value) or value <= 0:
                raise ConfigurationError.invalid_support_threshold("max_monthly", value)

    def _validate_bundles(self, config: Mapping[str, Any]) -> None:
        bundles = config.get("bundles")
        if not bundles:
            return

        self._require_mapping("bundles", bundles)
        if "days_per_bundle" in bundles:
            value = bundles["days_per_bundle"]
            if not is_number(value) or value < 0:
                raise ConfigurationError.invalid_bundle_configuration("days_per_bundle", value)

        if "max_quantity" in bundles:
            value = bundles["max_quantity"]
            if not is_number(value) or value < 0 or int(value) != value:
                raise ConfigurationError.invalid_bundle_configuration("max_quantity", value)

    @staticmethod
    def _require_mapping(key: str, value: Any) -> Mapping[str, Any]:
        if not isinstance(value, Mapping):
            raise ConfigurationError(
                f"Pricing configuration {key} must be a mapping", key=key, value=value
            )
        return value

    @staticmethod
    def _validate_percentage(key: str, value: Any) -> None:
        if not is_number(value) or value < 0 or value > 1:
            raise ConfigurationError.invalid_percentage(key, value)
