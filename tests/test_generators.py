"""
Tests for generators — .csproj, .sln and workspace configuration.

Pure unit tests: assembly descriptors in → GeneratedFile out.
Nothing is written to disk.
"""

import json
import os
import xml.etree.ElementTree as ET
from pathlib import Path

import pytest
from pydantic import ValidationError

from zedunity.core.models.assembly import AssemblyDescriptor, ProjectRecord
from zedunity.core.services.generators.csproj import (
    generate_csproj,
    project_file_name,
    relative_path,
    xml_escape,
)
from zedunity.core.services.generators.solution import generate_solution, solution_file_name
from zedunity.core.services.generators.workspace_config import (
    generate_omnisharp_json,
    generate_zed_settings,
    zed_settings_path,
)
from zedunity.core.services.identity import deterministic_guid

_NS = {"m": "http://schemas.microsoft.com/developer/msbuild/2003"}


def _parse(content: str) -> ET.Element:
    return ET.fromstring(content.encode("utf-8"))


# ═══════════════════════════════════════════════════════════════════
#  xml_escape / relative_path
# ═══════════════════════════════════════════════════════════════════


class TestXmlEscape:
    def test_all_markup_characters(self):
        assert xml_escape("""a<b>&"c'""") == "a&lt;b&gt;&amp;&quot;c&apos;"

    def test_plain_text_unchanged(self):
        assert xml_escape("UNITY_2022_3_OR_NEWER") == "UNITY_2022_3_OR_NEWER"


class TestRelativePath:
    def test_inside_root(self, unity_project: Path):
        src = str(unity_project / "Assets" / "Scripts" / "Player.cs")
        assert relative_path(unity_project, src) == os.path.join("Assets", "Scripts", "Player.cs")

    def test_outside_root(self, unity_project: Path):
        src = str(unity_project.parent / "Shared" / "Util.cs")
        assert relative_path(unity_project, src) == os.path.join("..", "Shared", "Util.cs")


# ═══════════════════════════════════════════════════════════════════
#  generate_csproj
# ═══════════════════════════════════════════════════════════════════


class TestGenerateCsproj:
    def test_file_metadata(self, unity_project: Path, make_assembly):
        asm = make_assembly("Game.Core", ("Assets/Scripts/Player.cs",))
        generated, record = generate_csproj(unity_project, asm)

        assert generated.path == "Game.Core.csproj"
        assert generated.overwrite is True
        assert generated.bom is True
        assert record.name == "Game.Core"
        assert record.guid == deterministic_guid("Game.Core")
        assert record.path == str(unity_project / "Game.Core.csproj")

    def test_property_group(self, unity_project: Path, make_assembly):
        asm = make_assembly("Game.Core", defines=["DEBUG", "UNITY_EDITOR", "DEBUG"])
        generated, record = generate_csproj(unity_project, asm)
        root = _parse(generated.content)
        props = root.find("m:PropertyGroup", _NS)
        assert props is not None

        def prop(tag: str) -> str:
            el = props.find(f"m:{tag}", _NS)
            assert el is not None, tag
            return el.text or ""

        assert prop("LangVersion") == "9.0"
        assert prop("ProductVersion") == "10.0.20506"
        assert prop("SchemaVersion") == "2.0"
        assert prop("RootNamespace") == "Game.Core"
        assert prop("AssemblyName") == "Game.Core"
        assert prop("ProjectGuid") == "{" + record.guid + "}"
        assert prop("OutputType") == "Library"
        assert prop("TargetFrameworkVersion") == "v4.7.1"
        assert prop("Deterministic") == "true"
        assert prop("Nullable") == "enable"
        assert prop("DefineConstants") == "DEBUG;UNITY_EDITOR"

    def test_sources_relative_to_root(self, unity_project: Path, make_assembly):
        asm = make_assembly(
            "Game.Core",
            ("Assets/Scripts/Player.cs", "Assets/Scripts/Enemy.cs"),
        )
        generated, _ = generate_csproj(unity_project, asm)
        root = _parse(generated.content)
        includes = [c.get("Include") for c in root.iter(f"{{{_NS['m']}}}Compile")]
        assert includes == [
            os.path.join("Assets", "Scripts", "Player.cs"),
            os.path.join("Assets", "Scripts", "Enemy.cs"),
        ]

    def test_project_references(self, unity_project: Path, make_assembly):
        asm = make_assembly("Game.UI", assembly_references=["Game.Core"])
        generated, _ = generate_csproj(unity_project, asm)
        root = _parse(generated.content)
        refs = root.findall(".//m:ProjectReference", _NS)
        assert len(refs) == 1
        assert refs[0].get("Include") == "Game.Core.csproj"
        assert refs[0].find("m:Project", _NS).text == "{" + deterministic_guid("Game.Core") + "}"
        assert refs[0].find("m:Name", _NS).text == "Game.Core"

    def test_compiled_references(self, unity_project: Path, make_assembly):
        dll = "/opt/Unity/Editor/Data/Managed/UnityEngine/UnityEngine.CoreModule.dll"
        asm = make_assembly("Game.Core", compiled_assembly_references=[dll])
        generated, _ = generate_csproj(unity_project, asm)
        root = _parse(generated.content)
        refs = root.findall(".//m:Reference", _NS)
        assert len(refs) == 1
        assert refs[0].get("Include") == "UnityEngine.CoreModule"
        assert refs[0].find("m:HintPath", _NS).text == dll
        assert refs[0].find("m:Private", _NS).text == "False"

    def test_windows_dll_path_stem(self, unity_project: Path, make_assembly):
        dll = "C:\\Program Files\\Unity\\Managed\\UnityEditor.dll"
        asm = make_assembly("Game.Editor", compiled_assembly_references=[dll])
        generated, _ = generate_csproj(unity_project, asm)
        assert '<Reference Include="UnityEditor">' in generated.content

    def test_escapes_markup_in_name_and_defines(self, unity_project: Path, make_assembly):
        asm = make_assembly(
            'Odd<Name>&"Co"',
            ("Assets/Scripts/A&B.cs",),
            defines=["A<B", "C&D"],
            assembly_references=["Dep<1>"],
        )
        generated, _ = generate_csproj(unity_project, asm)

        assert "Odd&lt;Name&gt;&amp;&quot;Co&quot;" in generated.content
        assert "A&lt;B;C&amp;D" in generated.content

        # Still well-formed, values round-trip
        root = _parse(generated.content)
        assert root.find(".//m:AssemblyName", _NS).text == 'Odd<Name>&"Co"'
        assert root.find(".//m:DefineConstants", _NS).text == "A<B;C&D"
        assert root.find(".//m:ProjectReference", _NS).get("Include") == "Dep<1>.csproj"
        compile_item = root.find(".//m:Compile", _NS)
        assert compile_item.get("Include").endswith("A&B.cs")

    def test_empty_assembly(self, unity_project: Path):
        generated, _ = generate_csproj(unity_project, AssemblyDescriptor(name="Empty"))
        root = _parse(generated.content)
        assert root.find(".//m:DefineConstants", _NS).text is None
        assert root.findall(".//m:Compile", _NS) == []

    def test_deterministic_content(self, unity_project: Path, make_assembly):
        asm = make_assembly("Game.Core", ("Assets/Scripts/Player.cs",), defines=["X"])
        first, _ = generate_csproj(unity_project, asm)
        second, _ = generate_csproj(unity_project, asm)
        assert first.content == second.content

    def test_project_file_name(self):
        assert project_file_name("Assembly-CSharp") == "Assembly-CSharp.csproj"


# ═══════════════════════════════════════════════════════════════════
#  generate_solution
# ═══════════════════════════════════════════════════════════════════


def _records(root: Path, *names: str) -> list[ProjectRecord]:
    return [
        ProjectRecord(name=n, guid=deterministic_guid(n), path=str(root / f"{n}.csproj"))
        for n in names
    ]


class TestGenerateSolution:
    def test_file_metadata(self, unity_project: Path):
        generated = generate_solution(unity_project, _records(unity_project, "A"))
        assert generated.path == "MyGame.sln"
        assert generated.overwrite is True
        assert generated.bom is False

    def test_header(self, unity_project: Path):
        content = generate_solution(unity_project, []).content
        lines = content.split("\n")
        assert lines[0] == ""
        assert lines[1] == "Microsoft Visual Studio Solution File, Format Version 12.00"

    def test_project_entries_in_input_order(self, unity_project: Path):
        records = _records(unity_project, "Zeta", "Alpha")
        content = generate_solution(unity_project, records).content

        zeta = (
            'Project("{FAE04EC0-301F-11D3-BF4B-00C04F79EFBC}") = "Zeta", '
            f'"Zeta.csproj", "{{{records[0].guid}}}"'
        )
        alpha = (
            'Project("{FAE04EC0-301F-11D3-BF4B-00C04F79EFBC}") = "Alpha", '
            f'"Alpha.csproj", "{{{records[1].guid}}}"'
        )
        assert zeta in content
        assert alpha in content
        assert content.index(zeta) < content.index(alpha)
        assert content.count("EndProject") == 2

    def test_configuration_matrix(self, unity_project: Path):
        records = _records(unity_project, "A", "B")
        content = generate_solution(unity_project, records).content

        assert "    Debug|Any CPU = Debug|Any CPU" in content
        assert "    Release|Any CPU = Release|Any CPU" in content
        for rec in records:
            for cfg in ("Debug", "Release"):
                assert f"{{{rec.guid}}}.{cfg}|Any CPU.ActiveCfg = {cfg}|Any CPU" in content
                assert f"{{{rec.guid}}}.{cfg}|Any CPU.Build.0 = {cfg}|Any CPU" in content

    def test_solution_guid_is_fixed(self, unity_project: Path):
        a = generate_solution(unity_project, _records(unity_project, "A")).content
        b = generate_solution(unity_project, _records(unity_project, "B", "C")).content
        marker = "SolutionGuid = {D01AB249-89D3-F642-3587-7E7BBC5D7A1E}"
        assert marker in a
        assert marker in b

    def test_ends_with_global(self, unity_project: Path):
        content = generate_solution(unity_project, []).content
        assert content.rstrip("\n").endswith("EndGlobal")

    def test_solution_file_name(self, tmp_path: Path):
        assert solution_file_name(tmp_path / "Space Game") == "Space Game.sln"

    def test_rejects_double_quote_in_project_name(self, unity_project: Path):
        with pytest.raises(ValidationError, match="double quote"):
            ProjectRecord(name='Bad"Name', guid="X", path=str(unity_project / "Bad.csproj"))

    def test_rejects_double_quote_in_assembly_name(self):
        with pytest.raises(ValidationError, match="double quote"):
            AssemblyDescriptor(name='Game"Core')

    def test_project_lines_have_four_quoted_fields(self, unity_project: Path):
        records = _records(unity_project, "Game.Core", "Game's Editor")
        content = generate_solution(unity_project, records).content
        project_lines = [ln for ln in content.split("\n") if ln.startswith("Project(")]
        assert len(project_lines) == 2
        assert all(ln.count('"') == 8 for ln in project_lines)


# ═══════════════════════════════════════════════════════════════════
#  workspace configuration
# ═══════════════════════════════════════════════════════════════════


class TestWorkspaceConfig:
    def test_omnisharp_json(self):
        generated = generate_omnisharp_json()
        assert generated.path == "omnisharp.json"
        assert generated.overwrite is False
        data = json.loads(generated.content)
        assert data["RoslynExtensionsOptions"]["enableImportCompletion"] is True
        assert data["RoslynExtensionsOptions"]["enableDecompilationSupport"] is False
        assert data["FormattingOptions"]["tabSize"] == 4
        assert data["FormattingOptions"]["useTabs"] is False
        assert data["MsBuildOptions"]["loadProjectsOnDemand"] is False
        assert data["Plugins"]["locationPaths"] == []

    def test_zed_settings(self):
        generated = generate_zed_settings()
        assert generated.path == zed_settings_path() == ".zed/settings.json"
        assert generated.overwrite is False
        data = json.loads(generated.content)
        csharp = data["languages"]["C#"]
        assert csharp["language_servers"] == ["omnisharp"]
        assert csharp["format_on_save"] == "off"
        opts = data["lsp"]["omnisharp"]["initialization_options"]
        assert opts["RoslynExtensionsOptions"]["enableImportCompletion"] is True

    @pytest.mark.parametrize("factory", [generate_omnisharp_json, generate_zed_settings])
    def test_defaults_are_stable(self, factory):
        assert factory().content == factory().content
