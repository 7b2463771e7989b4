# Copyright 2025 ATP Project Contributors
# Licensed under the Apache License, Version 2.0

"""Default weight for endpoints joining a weighted pool.

New endpoints start at a low percentile of the weights already carried by
established endpoints (slow start), so an unvalidated instance neither takes
a full share of traffic nor starves at zero.
"""

from __future__ import annotations

from collections.abc import Mapping

# Weights are carried as unsigned 32-bit values in the generated routing config.
MAX_WEIGHT = 2**32 - 1


def selection_size(total: int, percentile: int) -> int:
    """Number of lowest weights averaged for ``total`` endpoints.

    Always at least one and never more than ``total``.
    """
    k = total * percentile // 100
    return max(1, min(k, total))


def compute_default_weight(
    weights: Mapping[str, int],
    percentile: int,
    minimum_weight: int,
    maximum_weight: int,
) -> int:
    """
    Compute the weight to assign to newly discovered endpoints.

    With no established endpoints the midpoint of the configured bounds is
    used and ``percentile`` is ignored. Otherwise the lowest ``percentile``
    percent of the existing weights (at least one) are averaged, truncating
    toward zero.

    Args:
        weights: Endpoint id to weight for established endpoints. Not modified.
        percentile: Share of the lowest weights to average, 0-100
        minimum_weight: Lower bound of the configured weight range
        maximum_weight: Upper bound of the configured weight range

    Returns:
        The default weight for new endpoints
    """
    if not weights:
        return (minimum_weight + maximum_weight) // 2

    # private ascending copy of the values; keys are irrelevant
    ordered = sorted(weights.values())
    k = selection_size(len(ordered), percentile)
    return sum(ordered[:k]) // k
