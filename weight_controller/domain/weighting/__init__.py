# Copyright 2025 ATP Project Contributors
# Licensed under the Apache License, Version 2.0

"""Weighting domain - starting weights for endpoints joining a service."""

from .default_weight import MAX_WEIGHT, compute_default_weight, selection_size
from .service import EndpointWeightsProvider, WeightAssignmentService

__all__ = [
    "MAX_WEIGHT",
    "compute_default_weight",
    "selection_size",
    "EndpointWeightsProvider",
    "WeightAssignmentService",
]
