"""
.csproj generator — one MSBuild project file per Unity assembly.

The layout mirrors what Unity's own IDE packages emit (old-style,
ToolsVersion 4.0, .NET Framework target), which is what OmniSharp
expects to find next to a Unity project.

All free text (assembly names, paths, define symbols) passes through
``xml_escape`` before it is inserted, in element text and attributes
alike.
"""

from __future__ import annotations

import os
from pathlib import Path, PurePath
from xml.sax.saxutils import escape

from zedunity.core.models.assembly import AssemblyDescriptor, ProjectRecord
from zedunity.core.models.template import GeneratedFile
from zedunity.core.services.identity import deterministic_guid

PROJECT_EXTENSION = ".csproj"

# Unity 2021+ targets net48; v4.7.1 keeps older editors working too.
TARGET_FRAMEWORK = "v4.7.1"
LANG_VERSION = "9.0"
PRODUCT_VERSION = "10.0.20506"
SCHEMA_VERSION = "2.0"

DEFINE_SEPARATOR = ";"

_XML_ENTITIES = {'"': "&quot;", "'": "&apos;"}


def xml_escape(value: str) -> str:
    """Escape ``& < > " '`` so *value* is safe in text and attributes."""
    return escape(value, _XML_ENTITIES)


def project_file_name(assembly_name: str) -> str:
    """``Assembly-CSharp`` → ``Assembly-CSharp.csproj``."""
    return assembly_name + PROJECT_EXTENSION


def relative_path(project_root: Path, path: str) -> str:
    """*path* relative to *project_root*, native separators.

    Falls back to the path unchanged when no relative form exists
    (a different drive on Windows).
    """
    try:
        return os.path.relpath(path, project_root)
    except ValueError:
        return path


def generate_csproj(
    project_root: Path,
    assembly: AssemblyDescriptor,
) -> tuple[GeneratedFile, ProjectRecord]:
    """Build the project file for *assembly*.

    Returns:
        The file to write (always overwritten, UTF-8 with BOM) and the
        record the solution writer needs.
    """
    guid = deterministic_guid(assembly.name)
    name = xml_escape(assembly.name)
    defines = DEFINE_SEPARATOR.join(xml_escape(d) for d in assembly.defines)

    lines = [
        '<?xml version="1.0" encoding="utf-8"?>',
        '<Project ToolsVersion="4.0" DefaultTargets="Build" '
        'xmlns="http://schemas.microsoft.com/developer/msbuild/2003">',
        "  <PropertyGroup>",
        f"    <LangVersion>{LANG_VERSION}</LangVersion>",
        "    <Configuration Condition=\" '$(Configuration)' == '' \">Debug</Configuration>",
        "    <Platform Condition=\" '$(Platform)' == '' \">AnyCPU</Platform>",
        f"    <ProductVersion>{PRODUCT_VERSION}</ProductVersion>",
        f"    <SchemaVersion>{SCHEMA_VERSION}</SchemaVersion>",
        f"    <RootNamespace>{name}</RootNamespace>",
        f"    <ProjectGuid>{{{guid}}}</ProjectGuid>",
        "    <OutputType>Library</OutputType>",
        f"    <AssemblyName>{name}</AssemblyName>",
        f"    <TargetFrameworkVersion>{TARGET_FRAMEWORK}</TargetFrameworkVersion>",
        "    <BaseIntermediateOutputPath>Temp\\obj\\</BaseIntermediateOutputPath>",
        "    <BaseOutputPath>Temp\\bin\\</BaseOutputPath>",
        "    <Deterministic>true</Deterministic>",
        "    <Nullable>enable</Nullable>",
        f"    <DefineConstants>{defines}</DefineConstants>",
        "  </PropertyGroup>",
    ]

    # ── Sources ─────────────────────────────────────────────────
    lines.append("  <ItemGroup>")
    for src in assembly.source_files:
        rel = relative_path(project_root, src)
        lines.append(f'    <Compile Include="{xml_escape(rel)}" />')
    lines.append("  </ItemGroup>")

    # ── References ──────────────────────────────────────────────
    lines.append("  <ItemGroup>")
    for ref_name in assembly.assembly_references:
        lines += [
            f'    <ProjectReference Include="{xml_escape(project_file_name(ref_name))}">',
            f"      <Project>{{{deterministic_guid(ref_name)}}}</Project>",
            f"      <Name>{xml_escape(ref_name)}</Name>",
            "    </ProjectReference>",
        ]
    for dll in assembly.compiled_assembly_references:
        stem = PurePath(dll.replace("\\", "/")).stem
        lines += [
            f'    <Reference Include="{xml_escape(stem)}">',
            f"      <HintPath>{xml_escape(dll)}</HintPath>",
            "      <Private>False</Private>",
            "    </Reference>",
        ]
    lines.append("  </ItemGroup>")

    lines += [
        '  <Import Project="$(MSBuildToolsPath)\\Microsoft.CSharp.targets" />',
        "</Project>",
    ]

    file_name = project_file_name(assembly.name)
    generated = GeneratedFile(
        path=file_name,
        content="\n".join(lines) + "\n",
        overwrite=True,
        bom=True,
        reason=f"Project file for assembly {assembly.name}",
    )
    record = ProjectRecord(
        name=assembly.name,
        guid=guid,
        path=str(project_root / file_name),
    )
    return generated, record
