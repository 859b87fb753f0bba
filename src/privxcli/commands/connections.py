"""Connection commands."""

from pathlib import Path
from typing import Optional

import typer

from privxcli.api.connectionmanager import ConnectionManager
from privxcli.client import connect
from privxcli.commands.common import (
    fuzzycount_option,
    limit_option,
    offset_option,
    optional_file_argument,
    optional_json,
    sortdir_option,
    sortkey_option,
)
from privxcli.utils import print_json, show_each

app = typer.Typer(help="List, search and manage connections")


@app.callback(invoke_without_command=True)
def connections_list(
    ctx: typer.Context,
    offset: int = offset_option(),
    limit: int = limit_option(),
    sortkey: str = sortkey_option(),
    sortdir: str = sortdir_option(),
    fuzzycount: bool = fuzzycount_option(),
):
    """List connections."""
    if ctx.invoked_subcommand is None:
        api = ConnectionManager(connect())
        print_json(api.connections(offset, limit, sortkey, sortdir.upper(), fuzzycount))


@app.command("search")
def connection_search(
    offset: int = offset_option(),
    limit: int = limit_option(),
    sortkey: str = sortkey_option(),
    sortdir: str = sortdir_option(),
    fuzzycount: bool = fuzzycount_option(),
    file: Optional[Path] = optional_file_argument(),
):
    """Search connections."""
    api = ConnectionManager(connect())
    result = api.search_connections(
        offset, limit, sortkey, sortdir.upper(), fuzzycount, optional_json(file)
    )
    print_json(result)


@app.command("show")
def connection_show(conn_id: str = typer.Option(..., "--conn-id", help="connection ID, comma separated")):
    """Get connections by ID."""
    api = ConnectionManager(connect())
    print_json(show_each(conn_id, api.connection))


@app.command("download-file")
def connection_download_file(
    conn_id: str = typer.Option(..., "--conn-id", help="connection ID"),
    channel_id: str = typer.Option(..., "--channel-id", help="channel ID"),
    file_id: str = typer.Option(..., "--file-id", help="transferred file ID"),
    name: str = typer.Option(..., "--name", help="file name to save the file to"),
):
    """Download a file transferred during a connection."""
    ConnectionManager(connect()).download_file(conn_id, channel_id, file_id, name)


@app.command("download-log")
def connection_download_log(
    conn_id: str = typer.Option(..., "--conn-id", help="connection ID"),
    channel_id: str = typer.Option(..., "--channel-id", help="channel ID"),
    name: str = typer.Option(..., "--name", help="file name to save the log to"),
    format_: str = typer.Option("", "--format", help="log format, hex or jsonl"),
    filter_: str = typer.Option("", "--filter", help="event filter, e.g. stdin or stdout"),
):
    """Download the trail log of a connection channel."""
    api = ConnectionManager(connect())
    api.download_trail_log(conn_id, channel_id, name, format_, filter_)


@app.command("access-roles")
def connection_access_roles(conn_id: str = typer.Option(..., "--conn-id", help="connection ID")):
    """List the access roles of a connection."""
    print_json(ConnectionManager(connect()).access_roles(conn_id))


@app.command("grant-access-role")
def connection_grant_access_role(
    conn_id: str = typer.Option(..., "--conn-id", help="connection ID"),
    role_id: str = typer.Option(..., "--role-id", help="role ID"),
):
    """Grant a role access to a connection."""
    ConnectionManager(connect()).grant_access_role(conn_id, role_id)


@app.command("revoke-access-role")
def connection_revoke_access_role(
    role_id: str = typer.Option(..., "--role-id", help="role ID"),
    conn_id: str = typer.Option("", "--conn-id", help="connection ID"),
    force: bool = typer.Option(
        False, "--force", "-f", help="revoke the role from every connection"
    ),
):
    """Revoke a role's access to one or every connection."""
    if conn_id and force:
        raise typer.BadParameter("--conn-id and --force are mutually exclusive")
    if not conn_id and not force:
        raise typer.BadParameter("either --conn-id or --force is required")

    api = ConnectionManager(connect())
    if force:
        api.revoke_access_role_from_all(role_id)
    else:
        api.revoke_access_role(conn_id, role_id)


@app.command("terminate")
def connection_terminate(
    conn_id: str = typer.Option("", "--conn-id", help="connection ID"),
    by_target: str = typer.Option("", "--by-target", help="terminate all connections to a host ID"),
    by_user: str = typer.Option("", "--by-user", help="terminate all connections of a user ID"),
):
    """Terminate connections by ID, target host or user."""
    selected = [value for value in (conn_id, by_target, by_user) if value]
    if len(selected) != 1:
        raise typer.BadParameter("exactly one of --conn-id, --by-target or --by-user is required")

    api = ConnectionManager(connect())
    if conn_id:
        api.terminate_connection(conn_id)
    elif by_target:
        api.terminate_by_target_host(by_target)
    else:
        api.terminate_by_user(by_user)
