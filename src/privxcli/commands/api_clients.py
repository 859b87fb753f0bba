"""API client commands."""

from pathlib import Path

import typer

from privxcli.api.userstore import UserStore
from privxcli.client import connect
from privxcli.commands.common import file_argument
from privxcli.utils import apply_each, decode_json, print_json, show_each, split_ids

app = typer.Typer(help="List and manage API clients")


@app.callback(invoke_without_command=True)
def api_clients_list(ctx: typer.Context):
    """List API clients."""
    if ctx.invoked_subcommand is None:
        print_json(UserStore(connect()).api_clients())


@app.command("create")
def api_client_create(
    name: str = typer.Option(..., "--name", help="API client name"),
    roles: str = typer.Option("", "--roles", help="role IDs held by the client, comma separated"),
):
    """Create an API client."""
    print_json(UserStore(connect()).create_api_client(name, split_ids(roles)))


@app.command("show")
def api_client_show(client_id: str = typer.Option(..., "--id", help="API client ID, comma separated")):
    """Get API clients by ID."""
    api = UserStore(connect())
    print_json(show_each(client_id, api.api_client))


@app.command("update")
def api_client_update(
    client_id: str = typer.Option(..., "--id", help="API client ID"),
    file: Path = file_argument(),
):
    """Update an API client."""
    client = decode_json(file)
    UserStore(connect()).update_api_client(client_id, client)


@app.command("delete")
def api_client_delete(client_id: str = typer.Option(..., "--id", help="API client ID, comma separated")):
    """Delete API clients."""
    api = UserStore(connect())
    apply_each(client_id, api.delete_api_client)
