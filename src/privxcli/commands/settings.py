"""Settings and settings schema commands."""

from pathlib import Path
from typing import Any

import typer

from privxcli.api.settings import SettingsService
from privxcli.client import connect
from privxcli.commands.common import file_argument
from privxcli.utils import decode_json, print_json

app = typer.Typer(help="Get and update PrivX settings")
schemas_app = typer.Typer(help="Get settings schemas")


def scope_option(default: Any = "GLOBAL"):
    return typer.Option(default, "--scope", help="settings scope, GLOBAL or a service name")


def section_option(default: Any = ""):
    return typer.Option(default, "--section", help="settings section name")


@app.command("show")
def settings_show(
    scope: str = scope_option(),
    section: str = section_option(),
    merge: str = typer.Option(
        "", "--merge", help="merge service settings with shared settings, scope settings only"
    ),
):
    """Get the settings of a scope or a scope section."""
    if section and merge:
        raise typer.BadParameter("--merge flag is compatible with scope settings only", param_hint="--merge")

    api = SettingsService(connect())
    if section:
        print_json(api.section_settings(scope.upper(), section.lower()))
    else:
        print_json(api.scope_settings(scope.upper(), merge))


@app.command("update")
def settings_update(
    scope: str = scope_option(),
    section: str = section_option(),
    file: Path = file_argument(),
):
    """Update the settings of a scope or a scope section."""
    settings = decode_json(file)
    api = SettingsService(connect())
    if section:
        api.update_section_settings(scope.upper(), section.lower(), settings)
    else:
        api.update_scope_settings(scope.upper(), settings)


@app.command("list-schema")
def settings_list_schema(scope: str = scope_option()):
    """Get the settings schema of a scope."""
    print_json(SettingsService(connect()).scope_schema(scope.upper()))


@app.command("show-schema")
def settings_show_schema(
    scope: str = scope_option(),
    section: str = typer.Option(..., "--section", help="settings section name"),
):
    """Get the settings schema of a scope section."""
    print_json(SettingsService(connect()).section_schema(scope.upper(), section.lower()))


@schemas_app.callback(invoke_without_command=True)
def schemas_scope(ctx: typer.Context, scope: str = scope_option("")):
    """Get the settings schema of a scope."""
    if ctx.invoked_subcommand is not None:
        return
    if not scope:
        raise typer.BadParameter("--scope is required", param_hint="--scope")

    print_json(SettingsService(connect()).scope_schema(scope.upper()))


@schemas_app.command("scope-section")
def schemas_scope_section(
    scope: str = scope_option(...),
    section: str = section_option(...),
):
    """Get the settings schema of a scope section."""
    print_json(SettingsService(connect()).section_schema(scope.upper(), section.lower()))
