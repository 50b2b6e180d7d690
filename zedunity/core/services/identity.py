"""
Deterministic identity — stable GUIDs derived from names.

Project files reference each other (and the solution references them)
by GUID. Deriving the GUID from the assembly name keeps those references
consistent across regenerations and machines without storing a table.

MD5 is used purely as a well-distributed 128-bit hash, not for security.
The digest is laid out the way .NET's ``new Guid(byte[])`` reads it
(first three fields little-endian) so the values match what other
Unity tooling derives from the same names.
"""

from __future__ import annotations

import hashlib
import uuid

# Label the solution's own GUID is derived from
SOLUTION_GUID_LABEL = "Solution"


def deterministic_guid(name: str) -> str:
    """Uppercase, hyphenated 36-character GUID for *name*."""
    digest = hashlib.md5(name.encode("utf-8"), usedforsecurity=False).digest()
    return str(uuid.UUID(bytes_le=digest)).upper()
