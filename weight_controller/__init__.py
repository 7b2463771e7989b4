# Copyright 2025 ATP Project Contributors
# Licensed under the Apache License, Version 2.0

"""Default weight policy for endpoints joining a weighted routing pool."""

from .domain.weighting import (
    MAX_WEIGHT,
    EndpointWeightsProvider,
    WeightAssignmentService,
    compute_default_weight,
)
from .errors import ConfigurationError, PolicyProblem
from .weight_policy import WeightPolicy, load_policy

__all__ = [
    "MAX_WEIGHT",
    "EndpointWeightsProvider",
    "WeightAssignmentService",
    "compute_default_weight",
    "ConfigurationError",
    "PolicyProblem",
    "WeightPolicy",
    "load_policy",
]
