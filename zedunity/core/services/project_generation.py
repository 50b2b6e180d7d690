"""
Project generation — write every project file, the solution and the
workspace configuration for one Unity project.

Every call regenerates everything: project and solution files are
overwritten unconditionally, configuration files are created only when
missing. An I/O error stops the pass and propagates to the caller;
files written before the failure stay on disk.
"""

from __future__ import annotations

import codecs
import logging
from collections.abc import Iterable
from pathlib import Path

from zedunity.core.models.assembly import AssemblyDescriptor, ProjectRecord
from zedunity.core.models.template import GeneratedFile
from zedunity.core.services.generators.csproj import generate_csproj
from zedunity.core.services.generators.solution import generate_solution
from zedunity.core.services.generators.workspace_config import (
    generate_omnisharp_json,
    generate_zed_settings,
)

logger = logging.getLogger(__name__)

# Changes to these asset types alter the assembly set
SYNC_EXTENSIONS = (".cs", ".asmdef", ".asmref")


def write_generated(project_root: Path, generated: GeneratedFile) -> bool:
    """Write *generated* under *project_root*.

    Returns:
        True if the file was written, False if it already existed and
        ``generated.overwrite`` is False.

    Raises:
        OSError: On any filesystem failure.
    """
    target = project_root / generated.path

    if not generated.overwrite and target.exists():
        logger.debug("Keeping existing %s", target)
        return False

    target.parent.mkdir(parents=True, exist_ok=True)

    data = generated.content.encode("utf-8")
    if generated.bom:
        data = codecs.BOM_UTF8 + data
    target.write_bytes(data)

    logger.debug("Wrote %s (%s)", target, generated.reason or "generated")
    return True


def generate_all(assemblies: Iterable[AssemblyDescriptor], project_root: Path) -> int:
    """Regenerate all project files for *project_root*.

    Writes ``{name}.csproj`` per assembly (in the given order), then
    ``{root-name}.sln``, then ``omnisharp.json`` and ``.zed/settings.json``
    if they are absent.

    Returns:
        Number of project files written.

    Raises:
        OSError: If any write fails.
    """
    records: list[ProjectRecord] = []

    for assembly in assemblies:
        generated, record = generate_csproj(project_root, assembly)
        write_generated(project_root, generated)
        records.append(record)

    write_generated(project_root, generate_solution(project_root, records))
    write_generated(project_root, generate_omnisharp_json())
    write_generated(project_root, generate_zed_settings())

    logger.info(
        "Generated %d .csproj file(s), .sln, and Zed settings in %s",
        len(records), project_root,
    )
    return len(records)


def needs_sync(
    added: Iterable[str] = (),
    deleted: Iterable[str] = (),
    moved: Iterable[str] = (),
    moved_from: Iterable[str] = (),
    imported: Iterable[str] = (),
) -> bool:
    """True if any changed path is a script or assembly definition."""
    for group in (added, deleted, moved, moved_from, imported):
        for path in group:
            if path.lower().endswith(SYNC_EXTENSIONS):
                return True
    return False
