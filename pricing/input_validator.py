"""Validation of a single estimate request against the pricing configuration."""

import logging
from typing import Any, Mapping, Union

from pydantic import ValidationError

from contracts import EstimateRequest, MultiplierCategory, REQUIRED_CATEGORIES, OPTIONAL_CATEGORIES
from pricing.errors import InputValidationError
from config import settings

logger = logging.getLogger(__name__)


def coerce_request(data: Union[EstimateRequest, Mapping[str, Any]]) -> EstimateRequest:
    """Build an EstimateRequest from a raw mapping.

    Type errors (for example a fractional bundle count) are reported as
    InputValidationError so callers only ever handle one error family.
    """
    if isinstance(data, EstimateRequest):
        return data

    try:
        return EstimateRequest.model_validate(data)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ())) or "request"
        raise InputValidationError(
            f"Invalid value for {field}: {first.get('msg', 'invalid value')}",
            key=field,
            value=first.get("input"),
        ) from e


class InputValidator:
    """Validates estimate requests against the allowed configuration values."""

    def __init__(self, config: Mapping[str, Any]):
        """Initialize the validator.

        Args:
            config: A pricing configuration that already passed ConfigurationValidator
        """
        self.config = config

    def validate(self, request: Union[EstimateRequest, Mapping[str, Any]]) -> None:
        """Validate a request, raising InputValidationError on the first problem."""
        request = coerce_request(request)

        self._validate_project_type(request)
        self._validate_features(request)
        self._validate_bundles(request)
        self._validate_required_multipliers(request)
        self._validate_optional_multipliers(request)
        logger.debug(
            "Request valid: %s with %d feature(s), %d bundle(s)",
            request.project_type, len(request.features), request.bundles,
        )

    @property
    def max_bundle_quantity(self) -> int:
        bundles = self.config.get("bundles") or {}
        return int(bundles.get("max_quantity", settings.max_bundle_quantity))

    def _validate_project_type(self, request: EstimateRequest) -> None:
        if not request.project_type:
            raise InputValidationError.missing_required_field("projectType")
        if request.project_type not in self.config["project_types"]:
            raise InputValidationError.invalid_project_type(request.project_type)

    def _validate_features(self, request: EstimateRequest) -> None:
        for feature in request.features:
            if feature not in self.config["features"]:
                raise InputValidationError.invalid_feature(feature)

    def _validate_bundles(self, request: EstimateRequest) -> None:
        quantity = request.bundles
        if quantity < 0:
            raise InputValidationError.invalid_bundle_quantity(
                "Bundle quantity cannot be negative", quantity
            )
        maximum = self.max_bundle_quantity
        if quantity > maximum:
            raise InputValidationError.invalid_bundle_quantity(
                f"Bundle quantity cannot exceed {maximum}", quantity
            )

    def _validate_required_multipliers(self, request: EstimateRequest) -> None:
        for category in REQUIRED_CATEGORIES:
            option = request.option_for(category)
            if option is None or option == "":
                raise InputValidationError.missing_required_multiplier(category.request_field)
            if option not in self._options(category):
                raise InputValidationError.invalid_multiplier_option(category.request_field, option)

    def _validate_optional_multipliers(self, request: EstimateRequest) -> None:
        for category in OPTIONAL_CATEGORIES:
            option = request.option_for(category)
            if option is None or category.value not in self.config["multipliers"]:
                continue
            if option not in self._options(category):
                raise InputValidationError.invalid_multiplier_option(category.request_field, option)

    def _options(self, category: MultiplierCategory) -> Mapping[str, Any]:
        return self.config["multipliers"].get(category.value) or {}
