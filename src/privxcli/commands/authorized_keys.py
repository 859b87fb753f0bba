"""Authorized key commands."""

from pathlib import Path

import typer

from privxcli.api.rolestore import RoleStore
from privxcli.client import connect
from privxcli.commands.common import (
    file_argument,
    limit_option,
    offset_option,
    sortdir_option,
    sortkey_option,
)
from privxcli.utils import apply_each, decode_json, print_json

app = typer.Typer(help="List and manage user authorized keys")


@app.callback(invoke_without_command=True)
def authorized_keys_list(
    ctx: typer.Context,
    offset: int = offset_option(),
    limit: int = limit_option(),
    sortkey: str = sortkey_option(),
    sortdir: str = sortdir_option(),
):
    """List all authorized keys."""
    if ctx.invoked_subcommand is None:
        api = RoleStore(connect())
        print_json(api.all_authorized_keys(offset, limit, sortkey, sortdir.upper()))


@app.command("show")
def authorized_keys_show(user_id: str = typer.Option(..., "--user-id", help="user ID")):
    """List the authorized keys of a user."""
    print_json(RoleStore(connect()).authorized_keys(user_id))


@app.command("create")
def authorized_key_create(
    user_id: str = typer.Option(..., "--user-id", help="user ID"),
    file: Path = file_argument(),
):
    """Register an authorized key for a user."""
    key = decode_json(file)
    print_json(RoleStore(connect()).create_authorized_key(user_id, key))


@app.command("update")
def authorized_key_update(
    user_id: str = typer.Option(..., "--user-id", help="user ID"),
    key_id: str = typer.Option(..., "--id", help="authorized key ID"),
    file: Path = file_argument(),
):
    """Update an authorized key of a user."""
    key = decode_json(file)
    RoleStore(connect()).update_authorized_key(user_id, key_id, key)


@app.command("delete")
def authorized_key_delete(
    user_id: str = typer.Option(..., "--user-id", help="user ID"),
    key_id: str = typer.Option(..., "--id", help="authorized key ID, comma separated"),
):
    """Delete authorized keys of a user."""
    api = RoleStore(connect())
    apply_each(key_id, lambda item: api.delete_authorized_key(user_id, item))


@app.command("resolve")
def authorized_key_resolve(file: Path = file_argument()):
    """Resolve an authorized key to its owner."""
    request = decode_json(file)
    print_json(RoleStore(connect()).resolve_authorized_key(request))
