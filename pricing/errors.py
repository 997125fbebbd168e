"""Errors raised by the pricing pipeline."""

from typing import Any, Optional


class ConfigurationError(ValueError):
    """The pricing configuration, or a request against it, is invalid.

    Attributes:
        key: Dotted path of the offending configuration key or request field
        value: The offending value, when there is one
    """

    def __init__(self, message: str, key: Optional[str] = None, value: Any = None):
        super().__init__(message)
        self.message = message
        self.key = key
        self.value = value

    @classmethod
    def missing_required_config(cls, key: str) -> "ConfigurationError":
        return cls(f"Missing required pricing configuration: {key}", key=key)

    @classmethod
    def invalid_day_rate(cls, rate_type: str, value: Any) -> "ConfigurationError":
        return cls(
            f"Invalid day rate for {rate_type}: {value!r}. Must be a positive number.",
            key=f"day_rate.{rate_type}",
            value=value,
        )

    @classmethod
    def invalid_percentage(cls, key: str, value: Any) -> "ConfigurationError":
        return cls(
            f"Invalid percentage for {key}: {value!r}. Must be a number between 0 and 1.",
            key=key,
            value=value,
        )

    @classmethod
    def invalid_multiplier(cls, category: str, option: str, value: Any) -> "ConfigurationError":
        return cls(
            f"Invalid multiplier for {category}[{option}]: {value!r}. Must be a positive number.",
            key=f"multipliers.{category}.{option}",
            value=value,
        )

    @classmethod
    def invalid_project_type_configuration(cls, project_type: str, reason: str, value: Any = None) -> "ConfigurationError":
        return cls(
            f"Invalid project type configuration for {project_type}: {reason}",
            key=f"project_types.{project_type}.days",
            value=value,
        )

    @classmethod
    def invalid_feature_configuration(cls, feature: str, reason: str, value: Any = None) -> "ConfigurationError":
        return cls(
            f"Invalid feature configuration for {feature}: {reason}",
            key=f"features.{feature}.days",
            value=value,
        )

    @classmethod
    def phase_percentages_mismatch(cls, total: float, expected: float = 0.95) -> "ConfigurationError":
        return cls(
            f"Phase base percentages total {total:f}, expected {expected:f} "
            "(95% of remaining space after discovery). Check phase configuration.",
            key="phases.base_percentages",
            value=total,
        )

    @classmethod
    def invalid_payment_threshold(cls, threshold: str, value: Any) -> "ConfigurationError":
        return cls(
            f"Invalid payment threshold for {threshold}: {value!r}. Must be a positive number.",
            key=f"payment_schedules.thresholds.{threshold}",
            value=value,
        )

    @classmethod
    def invalid_payment_schedule(cls, schedule: str, reason: str) -> "ConfigurationError":
        return cls(
            f"Invalid payment schedule for {schedule}: {reason}",
            key=f"payment_schedules.{schedule}",
        )

    @classmethod
    def invalid_support_threshold(cls, threshold: str, value: Any) -> "ConfigurationError":
        key = "support.max_monthly" if threshold == "max_monthly" else f"support.thresholds.{threshold}"
        return cls(
            f"Invalid support threshold for {threshold}: {value!r}. Must be a positive number.",
            key=key,
            value=value,
        )

    @classmethod
    def invalid_bundle_configuration(cls, field: str, value: Any) -> "ConfigurationError":
        return cls(
            f"Invalid bundle configuration for {field}: {value!r}. Must be a non-negative number.",
            key=f"bundles.{field}",
            value=value,
        )


class InputValidationError(ConfigurationError):
    """An estimate request references unknown or out-of-range values."""

    @classmethod
    def missing_required_field(cls, field: str) -> "InputValidationError":
        label = field[:1].upper() + field[1:]
        return cls(f"{label} is required", key=field)

    @classmethod
    def invalid_project_type(cls, project_type: Any) -> "InputValidationError":
        return cls(f"Invalid project type: {project_type}", key="projectType", value=project_type)

    @classmethod
    def invalid_feature(cls, feature: Any) -> "InputValidationError":
        return cls(f"Invalid feature: {feature}", key="features", value=feature)

    @classmethod
    def invalid_bundle_quantity(cls, message: str, value: Any = None) -> "InputValidationError":
        return cls(message, key="bundles", value=value)

    @classmethod
    def missing_required_multiplier(cls, field: str) -> "InputValidationError":
        return cls(f"Multiplier {field} is required", key=field)

    @classmethod
    def invalid_multiplier_option(cls, field: str, option: Any) -> "InputValidationError":
        return cls(f"Invalid option for {field}: {option!r}", key=field, value=option)
