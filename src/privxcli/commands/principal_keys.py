"""Role principal key commands."""

from pathlib import Path

import typer

from privxcli.api.rolestore import RoleStore
from privxcli.client import connect
from privxcli.commands.common import file_argument
from privxcli.utils import apply_each, decode_json, print_json

app = typer.Typer(help="List and manage the principal keys of a role")


@app.callback(invoke_without_command=True)
def principal_keys_list(
    ctx: typer.Context,
    role_id: str = typer.Option("", "--role-id", help="role ID"),
):
    """List the principal keys of a role."""
    if ctx.invoked_subcommand is not None:
        return
    if not role_id:
        raise typer.BadParameter("--role-id is required", param_hint="--role-id")

    print_json(RoleStore(connect()).principal_keys(role_id))


@app.command("generate")
def principal_key_generate(role_id: str = typer.Option(..., "--role-id", help="role ID")):
    """Generate a principal key for a role."""
    print_json(RoleStore(connect()).generate_principal_key(role_id))


@app.command("import")
def principal_key_import(
    role_id: str = typer.Option(..., "--role-id", help="role ID"),
    file: Path = file_argument(),
):
    """Import a principal key for a role."""
    key = decode_json(file)
    print_json(RoleStore(connect()).import_principal_key(role_id, key))


@app.command("show")
def principal_key_show(
    role_id: str = typer.Option(..., "--role-id", help="role ID"),
    key_id: str = typer.Option(..., "--id", help="principal key ID"),
):
    """Get a principal key of a role."""
    print_json(RoleStore(connect()).principal_key(role_id, key_id))


@app.command("delete")
def principal_key_delete(
    role_id: str = typer.Option(..., "--role-id", help="role ID"),
    key_id: str = typer.Option(..., "--id", help="principal key ID, comma separated"),
):
    """Delete principal keys of a role."""
    api = RoleStore(connect())
    apply_each(key_id, lambda item: api.delete_principal_key(role_id, item))
