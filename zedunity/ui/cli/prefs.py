"""
CLI commands for integration preferences.

Thin wrappers over ``zedunity.core.persistence.preferences_file``.
"""

from __future__ import annotations

import json
import sys

import click

from zedunity.core.models.preferences import EditorPreferences


def _store(ctx: click.Context):
    from zedunity.core.config.loader import default_preferences_path
    from zedunity.core.persistence.preferences_file import PreferencesStore

    return PreferencesStore(ctx.obj.get("prefs_path") or default_preferences_path())


@click.group()
def prefs() -> None:
    """Preferences — enabled flag and Zed executable path."""


@prefs.command("show")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def show(ctx: click.Context, as_json: bool) -> None:
    """Show current preferences."""
    store = _store(ctx)
    current = store.load()

    if as_json:
        click.echo(json.dumps({"path": str(store.path), **current.model_dump()}, indent=2))
        return

    click.secho(f"⚙️  Preferences ({store.path}):", fg="cyan", bold=True)
    for key, value in current.model_dump().items():
        click.echo(f"   {key}: {value!r}")


@prefs.command("set")
@click.argument("key", type=click.Choice(sorted(EditorPreferences.model_fields)))
@click.argument("value")
@click.pass_context
def set_(ctx: click.Context, key: str, value: str) -> None:
    """Set KEY to VALUE (booleans accept true/false, yes/no, 1/0)."""
    from pydantic import ValidationError

    store = _store(ctx)
    try:
        updated = store.set(key, value)
    except ValidationError as e:
        click.secho(f"❌ Invalid value for {key}: {e.errors()[0]['msg']}", fg="red")
        sys.exit(1)

    click.secho(f"✅ {key} = {getattr(updated, key)!r}", fg="green")


@prefs.command("reset")
@click.pass_context
def reset(ctx: click.Context) -> None:
    """Forget all preferences (back to defaults)."""
    store = _store(ctx)
    store.reset()
    click.secho("✅ Preferences reset", fg="green")
