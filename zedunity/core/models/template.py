"""
Generated file model — used by all generators.
"""

from __future__ import annotations

from pydantic import BaseModel


class GeneratedFile(BaseModel):
    """A file produced by a generator, not yet written.

    Attributes:
        path:      Relative path from project root (forward slashes).
        content:   Full file content.
        overwrite: Whether to overwrite if already exists.
        bom:       Prefix the UTF-8 byte-order mark when writing.
        reason:    Why this file was generated.
    """

    path: str
    content: str
    overwrite: bool = False
    bom: bool = False
    reason: str = ""
