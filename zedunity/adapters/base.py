"""
Assembly source — the contract between the generator and the host's
compilation pipeline.

The generator never asks Unity directly; it asks an AssemblySource.
The host (or a manifest it exported) supplies names, sources, defines
and references. Nothing is resolved or computed here.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from zedunity.core.models.assembly import AssemblyDescriptor


class AssemblySource(ABC):
    """Abstract provider of the current assembly set.

    To add a source:
        1. Subclass AssemblySource
        2. Implement name and get_assemblies
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Source identifier (e.g. 'manifest', 'static')."""

    @abstractmethod
    def get_assemblies(self) -> list[AssemblyDescriptor]:
        """Current assemblies, in the host's enumeration order.

        Queried afresh on every generation pass.
        """

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
