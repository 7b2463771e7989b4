"""Policy configuration for default weights of new endpoints.

This is the validation layer in front of ``compute_default_weight``: the
algorithm itself trusts its inputs, so out-of-range percentiles and inverted
bounds must be rejected here. Fields are strict, so a YAML ``true`` or a
``"50"`` string never turns into a percentile.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, Field, ValidationInfo, field_validator
from pydantic import ValidationError as PydanticValidationError

from .domain.weighting.default_weight import MAX_WEIGHT
from .errors import ConfigurationError, PolicyProblem
from .metrics.registry import REGISTRY

logger = logging.getLogger(__name__)

DEFAULT_PERCENTILE = 10
DEFAULT_MINIMUM_WEIGHT = 1
DEFAULT_MAXIMUM_WEIGHT = 100

# environment variable -> configuration field
ENVIRONMENT_VARIABLES = {
    "NEW_ENDPOINTS_PERCENTILE_WEIGHT": ("NewEndpointsPercentileWeight", DEFAULT_PERCENTILE),
    "MINIMUM_WEIGHT": ("MinimumWeight", DEFAULT_MINIMUM_WEIGHT),
    "MAXIMUM_WEIGHT": ("MaximumWeight", DEFAULT_MAXIMUM_WEIGHT),
}


class WeightPolicy(BaseModel):
    """Percentile and bounds used to weight newly admitted endpoints."""

    model_config = {"populate_by_name": True, "frozen": True}

    percentile: int = Field(
        default=DEFAULT_PERCENTILE, ge=0, le=100, strict=True, alias="NewEndpointsPercentileWeight"
    )
    minimum_weight: int = Field(default=DEFAULT_MINIMUM_WEIGHT, ge=0, le=MAX_WEIGHT, strict=True, alias="MinimumWeight")
    maximum_weight: int = Field(
        default=DEFAULT_MAXIMUM_WEIGHT, ge=0, le=MAX_WEIGHT, strict=True, validate_default=True, alias="MaximumWeight"
    )

    @field_validator("maximum_weight")
    @classmethod
    def _not_below_minimum(cls, v: int, info: ValidationInfo) -> int:
        minimum = info.data.get("minimum_weight")
        if minimum is not None and minimum > v:
            raise ValueError(f"must not be below MinimumWeight ({minimum})")
        return v

    @classmethod
    def from_environment(cls) -> WeightPolicy:
        """Create policy from environment variables."""
        parsed: dict[str, Any] = {}
        problems = []
        for env_name, (field, default) in ENVIRONMENT_VARIABLES.items():
            raw = os.getenv(env_name, str(default))
            try:
                parsed[field] = int(raw)
            except ValueError:
                problems.append(PolicyProblem(env_name, raw, "must be an integer"))
        if problems:
            raise _rejected(problems)
        return load_policy(parsed)


def load_policy(data: Mapping[str, Any]) -> WeightPolicy:
    """
    Validate a raw policy mapping, e.g. a section of a parsed config file.

    Keys may use either the field names or the configuration aliases.

    Raises:
        ConfigurationError: If the policy is out of range or malformed
    """
    try:
        return WeightPolicy.model_validate(dict(data))
    except PydanticValidationError as e:
        raise _rejected(
            PolicyProblem(
                field=".".join(str(p) for p in err["loc"]) or "policy",
                value=err.get("input"),
                message=err["msg"],
            )
            for err in e.errors()
        ) from e


def _rejected(problems: Iterable[PolicyProblem]) -> ConfigurationError:
    error = ConfigurationError(problems)
    REGISTRY.counter("weight_policy_rejected_total").inc()
    logger.warning(f"Rejected weight policy: {error}")
    return error
