"""
Editor preferences — the small key/value state kept between sessions.
"""

from __future__ import annotations

from pydantic import BaseModel


class EditorPreferences(BaseModel):
    """Per-user preferences for the Zed integration.

    Every field has a default, so an empty or missing store is valid.
    """

    enabled: bool = True
    editor_path: str = ""          # explicitly configured executable
    current_editor_path: str = ""  # host-wide external editor, last seen
