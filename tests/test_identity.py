"""
Tests for deterministic GUID derivation.
"""

import re

from zedunity.core.services.identity import SOLUTION_GUID_LABEL, deterministic_guid

_GUID_RE = re.compile(r"^[0-9A-F]{8}-[0-9A-F]{4}-[0-9A-F]{4}-[0-9A-F]{4}-[0-9A-F]{12}$")


class TestDeterministicGuid:
    def test_canonical_uppercase_format(self):
        guid = deterministic_guid("Assembly-CSharp")
        assert len(guid) == 36
        assert _GUID_RE.match(guid)

    def test_same_name_same_guid(self):
        assert deterministic_guid("Game.Core") == deterministic_guid("Game.Core")

    def test_distinct_names_distinct_guids(self):
        names = ["Assembly-CSharp", "Assembly-CSharp-Editor", "Game.Core", "game.core", ""]
        guids = {deterministic_guid(n) for n in names}
        assert len(guids) == len(names)

    def test_matches_dotnet_byte_layout(self):
        """MD5 digest read the way .NET's Guid(byte[]) reads it."""
        assert deterministic_guid("Assembly-CSharp") == "06DD3D54-16BF-43EA-368C-C39FF96E6D5A"

    def test_solution_label(self):
        assert deterministic_guid(SOLUTION_GUID_LABEL) == "D01AB249-89D3-F642-3587-7E7BBC5D7A1E"

    def test_unicode_name(self):
        assert _GUID_RE.match(deterministic_guid("Spiel.Kern.Ü"))
