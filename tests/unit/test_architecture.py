"""Tests to verify hexagonal architecture structure."""

from pathlib import Path

import pytest

# Compute project root relative to this test file
PROJECT_ROOT = Path(__file__).parent.parent.parent


@pytest.fixture
def package_path() -> Path:
    """Return the signboard package directory path."""
    return PROJECT_ROOT / "signboard"


def _import_lines(py_file: Path, prefix: str) -> list[str]:
    return [
        line
        for line in py_file.read_text().split("\n")
        if line.strip().startswith((f"from {prefix}", f"import {prefix}"))
    ]


def test_main_layers_exist(package_path: Path) -> None:
    """Verify all main layer directories exist."""
    layers = ["domain", "application", "infrastructure", "config", "bootstrap"]
    for layer in layers:
        assert (package_path / layer).is_dir(), f"Missing layer: {layer}"
        assert (package_path / layer / "__init__.py").is_file(), (
            f"Missing {layer}/__init__.py"
        )


def test_domain_has_no_external_layer_imports(package_path: Path) -> None:
    """Verify domain layer imports nothing from outer layers.

    Domain is the innermost layer: models, errors and the lifecycle
    policy stay pure.
    """
    for py_file in (package_path / "domain").rglob("*.py"):
        for layer in ("application", "infrastructure", "config", "bootstrap"):
            offending = _import_lines(py_file, f"signboard.{layer}")
            assert not offending, f"{py_file} contains forbidden import: {offending}"


def test_application_has_no_infrastructure_imports(package_path: Path) -> None:
    """Verify application layer reaches infrastructure only through ports."""
    for py_file in (package_path / "application").rglob("*.py"):
        for layer in ("infrastructure", "bootstrap"):
            offending = _import_lines(py_file, f"signboard.{layer}")
            assert not offending, f"{py_file} contains forbidden import: {offending}"


def test_signboard_error_importable_from_domain() -> None:
    """Verify SignboardError is exported from domain __init__."""
    from signboard.domain import SignboardError

    assert issubclass(SignboardError, Exception)


def test_error_taxonomy_shares_root() -> None:
    """Every domain error derives from SignboardError."""
    from signboard.domain.errors import (
        AnnouncementNotFoundError,
        AuthenticationError,
        AuthorizationError,
        NotFoundError,
        ValidationError,
    )
    from signboard.domain.exceptions import SignboardError

    for error in (
        AnnouncementNotFoundError,
        AuthenticationError,
        AuthorizationError,
        NotFoundError,
        ValidationError,
    ):
        assert issubclass(error, SignboardError)


def test_project_version(project_version: str) -> None:
    assert project_version == "0.1.0"
