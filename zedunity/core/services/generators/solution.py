"""
.sln generator — the aggregate solution over every generated project.

Projects appear in the order the records arrive (the host's enumeration
order). The solution's own GUID comes from a fixed label, so it stays
the same for as long as that label does.
"""

from __future__ import annotations

from pathlib import Path

from zedunity.core.models.assembly import ProjectRecord
from zedunity.core.models.template import GeneratedFile
from zedunity.core.services.generators.csproj import relative_path
from zedunity.core.services.identity import SOLUTION_GUID_LABEL, deterministic_guid

SOLUTION_EXTENSION = ".sln"

# Project type GUID for C# projects
CSHARP_PROJECT_TYPE = "FAE04EC0-301F-11D3-BF4B-00C04F79EFBC"

CONFIGURATIONS = ("Debug", "Release")
PLATFORM = "Any CPU"

_HEADER = """\

Microsoft Visual Studio Solution File, Format Version 12.00
# Visual Studio Version 16
VisualStudioVersion = 16.0.28729.10
MinimumVisualStudioVersion = 10.0.40219.1
"""


def solution_file_name(project_root: Path) -> str:
    """``/work/MyGame`` → ``MyGame.sln``."""
    return project_root.name + SOLUTION_EXTENSION


def generate_solution(project_root: Path, records: list[ProjectRecord]) -> GeneratedFile:
    """Build the solution file for *records* (UTF-8, no BOM, overwritten)."""
    lines: list[str] = []

    for rec in records:
        rel = relative_path(project_root, rec.path)
        lines.append(
            f'Project("{{{CSHARP_PROJECT_TYPE}}}") = "{rec.name}", "{rel}", "{{{rec.guid}}}"'
        )
        lines.append("EndProject")

    lines.append("Global")

    lines.append("  GlobalSection(SolutionConfigurationPlatforms) = preSolution")
    for cfg in CONFIGURATIONS:
        lines.append(f"    {cfg}|{PLATFORM} = {cfg}|{PLATFORM}")
    lines.append("  EndGlobalSection")

    lines.append("  GlobalSection(ProjectConfigurationPlatforms) = postSolution")
    for rec in records:
        for cfg in CONFIGURATIONS:
            lines.append(f"    {{{rec.guid}}}.{cfg}|{PLATFORM}.ActiveCfg = {cfg}|{PLATFORM}")
            lines.append(f"    {{{rec.guid}}}.{cfg}|{PLATFORM}.Build.0 = {cfg}|{PLATFORM}")
    lines.append("  EndGlobalSection")

    lines += [
        "  GlobalSection(SolutionProperties) = preSolution",
        "    HideSolutionNode = FALSE",
        "  EndGlobalSection",
        "  GlobalSection(ExtensibilityGlobals) = postSolution",
        f"    SolutionGuid = {{{deterministic_guid(SOLUTION_GUID_LABEL)}}}",
        "  EndGlobalSection",
        "EndGlobal",
    ]

    return GeneratedFile(
        path=solution_file_name(project_root),
        content=_HEADER + "\n".join(lines) + "\n",
        overwrite=True,
        bom=False,
        reason=f"Solution over {len(records)} project(s)",
    )
