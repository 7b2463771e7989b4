# Copyright 2025 ATP Project Contributors
# Licensed under the Apache License, Version 2.0

"""In-process metrics for the weight controller."""

from .registry import REGISTRY, Counter, Histogram, MetricsRegistry

__all__ = ["REGISTRY", "Counter", "Histogram", "MetricsRegistry"]
