"""Advisory warning contracts produced by the business rule checker."""

from pydantic import BaseModel, Field
from typing import List
from enum import Enum


class WarningType(str, Enum):
    """Kind of compatibility problem."""
    INCOMPATIBILITY = "incompatibility"  # feature not suited to the project type
    CONFLICT = "conflict"  # two or more mutually exclusive features
    DEPENDENCY = "dependency"  # feature selected without its prerequisites


class CompatibilityWarning(BaseModel):
    """A non-blocking warning about the selected scope."""
    type: WarningType = Field(..., description="Kind of compatibility problem")
    message: str = Field(..., description="Message configured for the rule")
    features: List[str] = Field(
        default_factory=list,
        description="Offending features, or the missing prerequisites for a dependency",
    )
