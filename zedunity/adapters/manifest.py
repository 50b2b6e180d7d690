"""
Manifest assembly source — reads the assembly list the host exported.
"""

from __future__ import annotations

from pathlib import Path

from zedunity.adapters.base import AssemblySource
from zedunity.core.config.loader import load_manifest
from zedunity.core.models.assembly import AssemblyDescriptor


class ManifestAssemblySource(AssemblySource):
    """Assemblies from a YAML/JSON manifest, re-read on every query.

    Raises ConfigError from get_assemblies() when the manifest is
    missing or invalid.
    """

    def __init__(self, path: Path):
        self.path = path

    @property
    def name(self) -> str:
        return "manifest"

    def get_assemblies(self) -> list[AssemblyDescriptor]:
        return load_manifest(self.path)
