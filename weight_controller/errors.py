"""Errors raised when a weight policy cannot be accepted."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class PolicyProblem:
    """One rejected policy setting."""

    field: str
    value: Any
    message: str

    def __str__(self) -> str:
        return f"{self.field}={self.value!r}: {self.message}"


class ConfigurationError(Exception):
    """Weight policy rejected before it could reach the weight computation.

    ``problems`` lists every offending setting so the reconciler can surface
    them in the resource status.
    """

    def __init__(self, problems: Iterable[PolicyProblem]) -> None:
        self.problems = list(problems)
        super().__init__("; ".join(str(p) for p in self.problems) or "invalid weight policy")

    @property
    def fields(self) -> list[str]:
        return [p.field for p in self.problems]
