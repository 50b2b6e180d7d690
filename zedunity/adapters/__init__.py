"""Adapters — where the assembly set comes from.

Public re-exports for convenient access.
"""

from zedunity.adapters.base import AssemblySource
from zedunity.adapters.manifest import ManifestAssemblySource
from zedunity.adapters.static import StaticAssemblySource

__all__ = [
    "AssemblySource",
    "ManifestAssemblySource",
    "StaticAssemblySource",
]
