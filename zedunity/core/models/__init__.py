"""
Domain models — Pydantic types for the Zed integration.

All models are re-exported here for convenient access:

    from zedunity.core.models import AssemblyDescriptor, GeneratedFile
"""

from zedunity.core.models.assembly import AssemblyDescriptor, ProjectRecord
from zedunity.core.models.preferences import EditorPreferences
from zedunity.core.models.template import GeneratedFile

__all__ = [
    # assembly.py
    "AssemblyDescriptor",
    "ProjectRecord",
    # preferences.py
    "EditorPreferences",
    # template.py
    "GeneratedFile",
]
