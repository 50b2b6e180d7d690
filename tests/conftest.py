"""
Shared test fixtures and configuration.
"""

from pathlib import Path

import pytest

from zedunity.core import context
from zedunity.core.models.assembly import AssemblyDescriptor


@pytest.fixture(autouse=True)
def _reset_context():
    """Each test starts with no registered project root."""
    context.set_project_root(None)
    yield
    context.set_project_root(None)


@pytest.fixture
def unity_project(tmp_path: Path) -> Path:
    """A minimal Unity project root: MyGame/Assets/Scripts."""
    root = tmp_path / "MyGame"
    (root / "Assets" / "Scripts").mkdir(parents=True)
    return root


@pytest.fixture
def make_assembly(unity_project: Path):
    """Factory for AssemblyDescriptors with sources under the test project."""

    def _make(name: str, sources: tuple[str, ...] = (), **kwargs) -> AssemblyDescriptor:
        return AssemblyDescriptor(
            name=name,
            source_files=[str(unity_project / s) for s in sources],
            **kwargs,
        )

    return _make


@pytest.fixture
def prefs_path(tmp_path: Path) -> Path:
    """Preferences file location outside the project."""
    return tmp_path / "config" / "preferences.json"
