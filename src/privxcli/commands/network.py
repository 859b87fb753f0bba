"""Network access manager commands."""

from pathlib import Path

import typer

from privxcli.api.networkaccess import NetworkAccessManager
from privxcli.client import connect
from privxcli.commands.common import file_argument, limit_option, offset_option, sortdir_option, sortkey_option
from privxcli.utils import apply_each, decode_json, print_json, show_each

app = typer.Typer(help="List and manage network targets")


@app.callback(invoke_without_command=True)
def network_targets_list(
    ctx: typer.Context,
    offset: int = offset_option(),
    limit: int = limit_option(),
    sortkey: str = sortkey_option("id"),
    sortdir: str = sortdir_option("ASC"),
    name: str = typer.Option("", "--name", help="network target name"),
    target_id: str = typer.Option("", "--id", help="network target ID"),
):
    """List network targets."""
    if ctx.invoked_subcommand is None:
        api = NetworkAccessManager(connect())
        print_json(api.network_targets(offset, limit, sortkey, sortdir.upper(), name, target_id))


@app.command("status")
def network_status():
    """Get the network access manager status."""
    print_json(NetworkAccessManager(connect()).status())


@app.command("create")
def network_target_create(file: Path = file_argument()):
    """Create a network target."""
    target = decode_json(file)
    print_json(NetworkAccessManager(connect()).create_network_target(target))


@app.command("search")
def network_target_search(
    offset: int = offset_option(),
    limit: int = limit_option(),
    sortkey: str = sortkey_option("id"),
    sortdir: str = sortdir_option("ASC"),
    filter_: str = typer.Option("", "--filter", help="network target filter"),
    keywords: str = typer.Option("", "--keywords", help="search keywords"),
):
    """Search network targets."""
    api = NetworkAccessManager(connect())
    print_json(api.search_network_targets(offset, limit, sortkey, sortdir.upper(), filter_, keywords))


@app.command("get")
def network_target_get(target_id: str = typer.Option(..., "--id", help="network target ID, comma separated")):
    """Get network targets by ID."""
    api = NetworkAccessManager(connect())
    print_json(show_each(target_id, api.network_target))


@app.command("update")
def network_target_update(
    target_id: str = typer.Option(..., "--id", help="network target ID"),
    file: Path = file_argument(),
):
    """Update a network target."""
    target = decode_json(file)
    NetworkAccessManager(connect()).update_network_target(target_id, target)


@app.command("delete")
def network_target_delete(target_id: str = typer.Option(..., "--id", help="network target ID, comma separated")):
    """Delete network targets."""
    api = NetworkAccessManager(connect())
    apply_each(target_id, api.delete_network_target)


@app.command("disable")
def network_target_disable(
    target_id: str = typer.Option(..., "--id", help="network target ID"),
    disable: bool = typer.Option(True, "--disable/--enable", help="disable or enable the target"),
):
    """Disable or enable a network target."""
    NetworkAccessManager(connect()).disable_network_target(target_id, disable)
