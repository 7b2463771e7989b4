# Copyright 2025 ATP Project Contributors
# Licensed under the Apache License, Version 2.0

"""Weight assignment service - default weights for endpoints joining a service."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Protocol

from ...metrics.registry import REGISTRY
from .default_weight import compute_default_weight

if TYPE_CHECKING:
    from ...weight_policy import WeightPolicy

logger = logging.getLogger(__name__)

DEFAULT_WEIGHT_BUCKETS = [1, 5, 10, 25, 50, 100, 250, 500, 1000, 10_000]


class EndpointWeightsProvider(Protocol):
    """Read access to the weights currently routed for a managed service.

    Implemented by the reconciler on top of whatever cache it keeps.
    """

    def current_weights(self, service: str) -> Mapping[str, int]: ...


class WeightAssignmentService:
    """
    Assigns starting weights to endpoints newly joining a managed service.

    Holds only the validated policy, so one instance can be shared by
    reconciliation workers handling different services.
    """

    __slots__ = ("_policy",)

    def __init__(self, policy: WeightPolicy):
        """
        Initialize weight assignment service.

        Args:
            policy: Validated percentile and bounds policy
        """
        self._policy = policy

    @property
    def policy(self) -> WeightPolicy:
        return self._policy

    def default_weight(self, weights: Mapping[str, int]) -> int:
        """Default weight for new endpoints given the established ``weights``."""
        policy = self._policy
        weight = compute_default_weight(
            weights,
            policy.percentile,
            policy.minimum_weight,
            policy.maximum_weight,
        )

        REGISTRY.counter("default_weight_computations_total").inc()
        if not weights:
            REGISTRY.counter("default_weight_empty_pool_total").inc()
        REGISTRY.histogram("default_weight_value", DEFAULT_WEIGHT_BUCKETS).observe(weight)

        logger.debug(
            f"Default weight {weight} from {len(weights)} established endpoints "
            f"(percentile={policy.percentile}, bounds={policy.minimum_weight}..{policy.maximum_weight})"
        )
        return weight

    def weights_for_new_endpoints(
        self,
        existing: Mapping[str, int],
        new_endpoints: Iterable[str],
    ) -> dict[str, int]:
        """
        Starting weights for endpoints that are not weighted yet.

        Args:
            existing: Weights of established endpoints
            new_endpoints: Endpoint ids observed in the latest membership

        Returns:
            Fresh mapping of each new endpoint id to the default weight.
            Ids already present in ``existing`` are left out.
        """
        fresh = [endpoint for endpoint in dict.fromkeys(new_endpoints) if endpoint not in existing]
        if not fresh:
            return {}

        weight = self.default_weight(existing)
        return {endpoint: weight for endpoint in fresh}

    def default_weight_for_service(self, provider: EndpointWeightsProvider, service: str) -> int:
        """Default weight for ``service`` using the provider's current weights."""
        return self.default_weight(provider.current_weights(service))
