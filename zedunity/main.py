"""
ZedUnity — CLI entrypoint.

Usage:
    python -m zedunity.main --help
    zedunity sync
    zedunity sync-if-needed --added Assets/Scripts/Player.cs
    zedunity editor open Assets/Scripts/Player.cs --line 12
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from zedunity import __version__
from zedunity.core.observability.logging_config import (
    ENV_FILE,
    ENV_FILE_LEVEL,
    level_from_flags,
    setup_logging,
)


@click.group()
@click.version_option(version=__version__, prog_name="zedunity")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--project",
    "-p",
    "project_path",
    type=click.Path(file_okay=False),
    default=None,
    help="Unity project root (default: auto-detect from cwd).",
)
@click.option(
    "--prefs",
    "prefs_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Preferences file (default: $ZEDUNITY_PREFS or ~/.config/zedunity).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    project_path: str | None,
    prefs_path: str | None,
) -> None:
    """ZedUnity — use Zed as Unity's external script editor."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["project_root"] = Path(project_path).resolve() if project_path else None
    ctx.obj["prefs_path"] = Path(prefs_path) if prefs_path else None

    from zedunity.core.config.loader import find_project_root
    from zedunity.core.context import set_project_root as _set_ctx_root
    _set_ctx_root(ctx.obj["project_root"] or find_project_root())

    setup_logging(
        level=level_from_flags(debug=debug, verbose=verbose, quiet=quiet),
        log_file=os.environ.get(ENV_FILE),
        log_file_level=os.environ.get(ENV_FILE_LEVEL),
        quiet_third_party=not debug,
    )


def _manifest_option(fn):
    return click.option(
        "--manifest",
        "-m",
        "manifest_path",
        type=click.Path(dir_okay=False),
        default=None,
        help="Assembly manifest (default: Library/ZedUnity/assemblies.yml).",
    )(fn)


def _echo_sync_result(result, as_json: bool) -> None:
    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        if result.error:
            sys.exit(1)
        return

    if result.error:
        click.secho(f"❌ {result.error}", fg="red")
        sys.exit(1)

    if result.regenerated:
        click.secho(
            f"✅ Generated {result.project_count} .csproj file(s), .sln, and Zed settings",
            fg="green",
        )
        click.echo(f"   Project: {result.project_root}")
    else:
        click.echo("⊘ No script or assembly definition changes — nothing regenerated")


@cli.command()
@_manifest_option
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def sync(ctx: click.Context, manifest_path: str | None, as_json: bool) -> None:
    """Regenerate every .csproj, the .sln and missing Zed/OmniSharp settings."""
    from zedunity.core.use_cases.sync import run_sync

    result = run_sync(
        project_root=ctx.obj.get("project_root"),
        manifest_path=Path(manifest_path) if manifest_path else None,
        prefs_path=ctx.obj.get("prefs_path"),
    )
    _echo_sync_result(result, as_json)


@cli.command("sync-if-needed")
@click.option("--added", multiple=True, help="Added asset path (repeatable).")
@click.option("--deleted", multiple=True, help="Deleted asset path (repeatable).")
@click.option("--moved", multiple=True, help="Moved asset path, new location (repeatable).")
@click.option("--moved-from", multiple=True, help="Moved asset path, old location (repeatable).")
@click.option("--imported", multiple=True, help="Imported asset path (repeatable).")
@_manifest_option
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def sync_if_needed(
    ctx: click.Context,
    added: tuple[str, ...],
    deleted: tuple[str, ...],
    moved: tuple[str, ...],
    moved_from: tuple[str, ...],
    imported: tuple[str, ...],
    manifest_path: str | None,
    as_json: bool,
) -> None:
    """Regenerate only if scripts (.cs) or assembly definitions changed.

    Examples:

        zedunity sync-if-needed --added Assets/Scripts/Enemy.cs

        zedunity sync-if-needed --imported Assets/Art/logo.png
    """
    from zedunity.core.use_cases.sync import ChangeSet, run_sync

    changes = ChangeSet(
        added=list(added),
        deleted=list(deleted),
        moved=list(moved),
        moved_from=list(moved_from),
        imported=list(imported),
    )
    if ctx.obj.get("verbose") and not as_json:
        click.echo(f"   {changes.total} changed path(s)")

    result = run_sync(
        project_root=ctx.obj.get("project_root"),
        manifest_path=Path(manifest_path) if manifest_path else None,
        prefs_path=ctx.obj.get("prefs_path"),
        changes=changes,
    )
    _echo_sync_result(result, as_json)


@cli.command()
@_manifest_option
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def status(ctx: click.Context, manifest_path: str | None, as_json: bool) -> None:
    """Show project, preferences, Zed installations and generated files."""
    from zedunity.core.use_cases.status import get_status

    result = get_status(
        project_root=ctx.obj.get("project_root"),
        manifest_path=Path(manifest_path) if manifest_path else None,
        prefs_path=ctx.obj.get("prefs_path"),
    )

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        if result.error:
            sys.exit(1)
        return

    if result.error:
        click.secho(f"❌ {result.error}", fg="red")
        sys.exit(1)

    prefs = result.preferences
    assert prefs is not None

    click.secho("\n📋 Zed Editor Settings", fg="cyan", bold=True)
    click.echo(f"   Project root: {result.project_root}")
    manifest_state = "✓" if result.manifest_path and result.manifest_path.is_file() else "✗ missing"
    click.echo(f"   Manifest:     {result.manifest_path} {manifest_state}")
    click.echo(f"   Enabled:      {'yes' if prefs.enabled else 'no'}")
    click.echo(f"   Editor path:  {prefs.editor_path or '(auto)'}")
    click.echo(f"   Launches:     {result.resolved_editor or '(none found)'}")
    click.echo()

    click.secho(f"   Installations: {len(result.installations)}", fg="white", bold=True)
    for inst in result.installations:
        note = ""
        if "on_path" in inst:
            note = f"  → {inst['on_path']}" if inst["on_path"] else "  (not on PATH)"
        click.echo(f"     • {inst['path']}{note}")
    click.echo()

    click.secho(f"   Project files: {result.project_files} .csproj", fg="white", bold=True)
    for name, exists in result.files.items():
        marker = "✓" if exists else "✗"
        click.echo(f"     {marker} {name}")
    click.echo()


# ── Register sub-command groups from zedunity/ui/cli/ ─────────────

from zedunity.ui.cli.editor import editor
from zedunity.ui.cli.prefs import prefs

cli.add_command(editor)
cli.add_command(prefs)


if __name__ == "__main__":
    cli()
