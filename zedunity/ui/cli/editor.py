"""
CLI commands for the Zed editor — discovery, opening files, language server.

Thin wrappers over ``zedunity.core.services.code_editor`` and
``zedunity.core.services.omnisharp``.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click


def _resolve_project_root(ctx: click.Context) -> Path:
    """Project root from context, discovery, or exit with an error."""
    from zedunity.core.config.loader import ConfigError
    from zedunity.core.use_cases.sync import resolve_project_root

    try:
        return resolve_project_root(ctx.obj.get("project_root"))
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)


@click.group()
def editor() -> None:
    """Zed editor — installations, open files, OmniSharp command."""


# ── Discover ────────────────────────────────────────────────────


@editor.command("installations")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
def installations(as_json: bool) -> None:
    """List Zed executables found on this machine."""
    from zedunity.core.services.zed_discovery import list_installations, select_probe
    from zedunity.core.use_cases.status import describe_installation

    probe = select_probe()
    found = [describe_installation(p) for p in list_installations(probe)]

    if as_json:
        click.echo(json.dumps({"platform": probe.name, "installations": found}, indent=2))
        return

    click.secho(f"🔍 Zed installations ({probe.name}):", fg="cyan", bold=True)
    for inst in found:
        if "on_path" not in inst:
            click.secho(f"   ✅ {inst['path']}", fg="green")
        elif inst["on_path"]:
            click.secho(f"   ✅ {inst['path']}  → {inst['on_path']}", fg="green")
        else:
            click.secho(f"   ⚠️  {inst['path']}  (not on PATH, checked at launch)", fg="yellow")


# ── Open ────────────────────────────────────────────────────────


@editor.command("open")
@click.argument("file_path", required=False, default="")
@click.option("--line", "-l", type=int, default=-1, help="Line to jump to (1-based).")
@click.option("--column", "-c", type=int, default=-1, help="Column to jump to (1-based).")
@click.option(
    "--editor",
    "editor_path",
    default=None,
    help="Zed executable to use (overrides preferences and discovery).",
)
@click.pass_context
def open_(
    ctx: click.Context,
    file_path: str,
    line: int,
    column: int,
    editor_path: str | None,
) -> None:
    """Open the Unity project in Zed, optionally at FILE_PATH:LINE:COLUMN.

    Examples:

        zedunity editor open

        zedunity editor open Assets/Scripts/Player.cs --line 42 --column 7
    """
    from zedunity.core.use_cases.sync import make_editor

    project_root = _resolve_project_root(ctx)
    code_editor = make_editor(project_root, prefs_path=ctx.obj.get("prefs_path"))
    if editor_path:
        code_editor.initialize(editor_path)

    if not code_editor.open_project(file_path, line, column):
        click.secho("❌ Could not launch Zed — see the log above", fg="red")
        sys.exit(1)

    target = file_path or str(project_root)
    click.secho(f"✅ Opened {target} in Zed", fg="green")


# ── Language server ─────────────────────────────────────────────


@editor.command("lsp-command")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def lsp_command(ctx: click.Context, as_json: bool) -> None:
    """Show the OmniSharp command Zed should run for this project."""
    from zedunity.core.services.omnisharp import language_server_command

    project_root = _resolve_project_root(ctx)
    result = language_server_command(project_root)

    if as_json:
        click.echo(json.dumps(result, indent=2))
        return

    click.secho("🧠 OmniSharp:", fg="cyan", bold=True)
    click.echo(f"   {result['command']} {' '.join(result['args'])}")
    if not result["solution"]:
        click.secho("   ⚠️  No .sln yet — run 'zedunity sync' first", fg="yellow")
