"""
Static assembly source — a fixed, in-memory assembly set.

Used by embedders that already hold the descriptors, and by tests.
"""

from __future__ import annotations

from zedunity.adapters.base import AssemblySource
from zedunity.core.models.assembly import AssemblyDescriptor


class StaticAssemblySource(AssemblySource):
    """Returns the assemblies it was given; counts how often it is asked."""

    def __init__(self, assemblies: list[AssemblyDescriptor] | None = None):
        self._assemblies = list(assemblies or [])
        self._call_count = 0

    @property
    def name(self) -> str:
        return "static"

    @property
    def call_count(self) -> int:
        """Number of times get_assemblies has been called."""
        return self._call_count

    def set_assemblies(self, assemblies: list[AssemblyDescriptor]) -> None:
        """Replace the assembly set (e.g. after a simulated recompile)."""
        self._assemblies = list(assemblies)

    def get_assemblies(self) -> list[AssemblyDescriptor]:
        self._call_count += 1
        return list(self._assemblies)
