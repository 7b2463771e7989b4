"""Tests for package-wide conventions."""

import inspect
import re
from pathlib import Path

import weight_controller
from weight_controller import errors

PACKAGE_DIR = Path(weight_controller.__file__).parent
LICENSE_HEADER = "# Copyright 2025 ATP Project Contributors\n# Licensed under the Apache License, Version 2.0\n"


def _package_sources() -> dict[Path, str]:
    return {path: path.read_text(encoding="utf-8") for path in PACKAGE_DIR.rglob("*.py")}


def test_every_exception_is_raised_somewhere():
    """Each exception type in ``errors`` is constructed by package code outside its own module."""
    sources = {p: s for p, s in _package_sources().items() if p.name != "errors.py"}
    exception_types = [
        name for name, obj in vars(errors).items() if inspect.isclass(obj) and issubclass(obj, Exception)
    ]
    assert exception_types == ["ConfigurationError"]
    for name in exception_types:
        pattern = re.compile(rf"\b{name}\(")
        assert any(pattern.search(s) for s in sources.values()), f"{name} is never raised"


def test_public_api_exports_resolve():
    for name in weight_controller.__all__:
        assert hasattr(weight_controller, name)
    assert not hasattr(weight_controller, "ValidationError")


def test_package_inits_carry_license_header():
    inits = [p for p in PACKAGE_DIR.rglob("__init__.py")]
    assert inits
    for path in inits:
        assert path.read_text(encoding="utf-8").startswith(LICENSE_HEADER), path
