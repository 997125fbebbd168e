"""Business rules: advisory compatibility checks for an estimate request.

Nothing here blocks an estimate. Rules come from the ``compatibility``
section of the pricing configuration, plus a few combinations of multiplier
options that are flagged regardless of configuration.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Union

from contracts import CompatibilityWarning, EstimateRequest, WarningType

logger = logging.getLogger(__name__)

# (field, option, field, option, message) combinations flagged for every configuration
RISKY_COMBINATIONS = [
    (
        "complexity", "very_high", "speed", "urgent",
        "Very high complexity with urgent timeline may not be realistic. "
        "Consider extending the timeline or reducing complexity.",
    ),
    (
        "risk", "very_high", "support", "high",
        "Very high risk with high support requirements may significantly impact long-term costs.",
    ),
    (
        "compliance", "very_high", "realTime", "very_high",
        "Very high compliance requirements with very high real-time requirements may "
        "significantly increase project complexity and cost.",
    ),
]


class BusinessRuleValidator:
    """Advisory checks on feature, project type and multiplier combinations."""

    def __init__(self, config: Mapping[str, Any]):
        self.compatibility: Mapping[str, Any] = config.get("compatibility") or {}

    def validate_business_rules(self, request: Union[EstimateRequest, Mapping[str, Any]]) -> List[str]:
        """
        Apply every business rule to the request.
        Returns the warning messages, project type incompatibility first,
        then multiplier combinations, then feature conflicts and dependencies.
        """
        data = self._as_mapping(request)
        warnings: List[str] = []

        # ── Project type / feature compatibility ─────────
        incompatibility = self._check_project_type(data)
        if incompatibility is not None:
            warnings.append(incompatibility.message)

        # ── Risky multiplier combinations ────────────────
        for field_a, option_a, field_b, option_b, message in RISKY_COMBINATIONS:
            if data.get(field_a) == option_a and data.get(field_b) == option_b:
                warnings.append(message)

        # ── Feature conflicts and dependencies ───────────
        for issue in self._check_feature_combinations(data):
            warnings.append(issue.message)

        if warnings:
            logger.info("%d business rule warning(s) for %s", len(warnings), data.get("projectType"))
        return warnings

    def get_compatibility_warnings(
        self, request: Union[EstimateRequest, Mapping[str, Any]]
    ) -> List[CompatibilityWarning]:
        """Structured incompatibility, conflict and dependency warnings."""
        data = self._as_mapping(request)
        warnings: List[CompatibilityWarning] = []

        incompatibility = self._check_project_type(data)
        if incompatibility is not None:
            warnings.append(incompatibility)

        warnings.extend(self._check_feature_combinations(data))
        return warnings

    @staticmethod
    def _as_mapping(request: Union[EstimateRequest, Mapping[str, Any]]) -> Dict[str, Any]:
        if isinstance(request, EstimateRequest):
            return request.model_dump(by_alias=True)
        data = dict(request)
        # snake_case callers
        if "project_type" in data and "projectType" not in data:
            data["projectType"] = data["project_type"]
        if "real_time" in data and "realTime" not in data:
            data["realTime"] = data["real_time"]
        return data

    @staticmethod
    def _features(data: Mapping[str, Any]) -> List[str]:
        features = data.get("features")
        if not isinstance(features, (list, tuple, set, frozenset)):
            return []
        return list(features)

    def _check_project_type(self, data: Mapping[str, Any]) -> CompatibilityWarning | None:
        project_type = data.get("projectType")
        features = self._features(data)
        if not project_type or not features:
            return None

        rule = (self.compatibility.get("project_type_incompatibilities") or {}).get(project_type)
        if not rule:
            return None

        incompatible = [f for f in features if f in rule.get("incompatible_features", [])]
        if not incompatible:
            return None

        return CompatibilityWarning(
            type=WarningType.INCOMPATIBILITY,
            message=rule.get("message", f"Features not suited to {project_type}: {', '.join(incompatible)}"),
            features=incompatible,
        )

    def _check_feature_combinations(self, data: Mapping[str, Any]) -> List[CompatibilityWarning]:
        features = self._features(data)
        if not features:
            return []

        issues: List[CompatibilityWarning] = []

        for name, rule in (self.compatibility.get("feature_incompatibilities") or {}).items():
            conflicting = rule.get("conflicting_features")
            if not conflicting:
                continue
            selected = [f for f in features if f in conflicting]
            if len(selected) > 1:
                issues.append(CompatibilityWarning(
                    type=WarningType.CONFLICT,
                    message=rule.get("message", f"Conflicting features ({name}): {', '.join(selected)}"),
                    features=selected,
                ))

        for feature, rule in (self.compatibility.get("feature_dependencies") or {}).items():
            required = rule.get("required_features")
            if not required or feature not in features:
                continue
            missing = [f for f in required if f not in features]
            if missing:
                issues.append(CompatibilityWarning(
                    type=WarningType.DEPENDENCY,
                    message=rule.get("message", f"{feature} requires: {', '.join(missing)}"),
                    features=missing,
                ))

        return issues
