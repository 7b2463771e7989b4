# Copyright 2025 ATP Project Contributors
# Licensed under the Apache License, Version 2.0

"""Domain layer for the weight controller."""
