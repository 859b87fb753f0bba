"""Host commands."""

from pathlib import Path
from typing import Optional

import typer

from privxcli.api.authorizer import Authorizer
from privxcli.api.hoststore import HostStore
from privxcli.api.userstore import UserStore, host_provisioning
from privxcli.client import connect
from privxcli.commands.common import (
    file_argument,
    limit_option,
    offset_option,
    optional_file_argument,
    optional_json,
    sortdir_option,
    sortkey_option,
)
from privxcli.utils import apply_each, decode_json, print_json, show_each

app = typer.Typer(help="List and manage hosts")


@app.callback(invoke_without_command=True)
def hosts_list(
    ctx: typer.Context,
    offset: int = offset_option(),
    limit: int = limit_option(),
    sortkey: str = sortkey_option(),
    sortdir: str = sortdir_option(),
    filter_: str = typer.Option("", "--filter", help="filter hosts, e.g. deployable or ignored"),
):
    """List hosts."""
    if ctx.invoked_subcommand is not None:
        return

    api = HostStore(connect())
    print_json(api.hosts(offset, limit, sortkey, sortdir.upper(), filter_))


@app.command("search")
def hosts_search(
    offset: int = offset_option(),
    limit: int = limit_option(),
    sortkey: str = sortkey_option(),
    sortdir: str = sortdir_option(),
    filter_: str = typer.Option("", "--filter", help="filter hosts, e.g. deployable or ignored"),
    file: Optional[Path] = optional_file_argument(),
):
    """Search hosts."""
    api = HostStore(connect())
    result = api.search_hosts(sortkey, sortdir.upper(), filter_, offset, limit, optional_json(file))
    print_json(result)


@app.command("create")
def host_create(file: Path = file_argument()):
    """Create a host."""
    host = decode_json(file)
    print_json(HostStore(connect()).create_host(host))


@app.command("show")
def host_show(host_id: str = typer.Option(..., "--id", help="host ID, comma separated")):
    """Get hosts by ID."""
    api = HostStore(connect())
    print_json(show_each(host_id, api.host))


@app.command("update")
def host_update(
    host_id: str = typer.Option(..., "--id", help="host ID"),
    file: Path = file_argument(),
):
    """Update a host."""
    host = decode_json(file)
    HostStore(connect()).update_host(host_id, host)


@app.command("delete")
def host_delete(host_id: str = typer.Option(..., "--id", help="host ID, comma separated")):
    """Delete hosts."""
    api = HostStore(connect())
    apply_each(host_id, api.delete_host)


@app.command("resolve")
def host_resolve(file: Path = file_argument()):
    """Resolve a service and address to a single host."""
    service = decode_json(file)
    print_json(HostStore(connect()).resolve_host(service))


@app.command("deployable")
def host_deployable(
    host_id: str = typer.Option(..., "--id", help="host ID, comma separated"),
    status: bool = typer.Option(..., "--status/--no-status", help="host deploy status"),
):
    """Set hosts deployable or undeployable."""
    api = HostStore(connect())
    apply_each(host_id, lambda item: api.update_deploy_status(item, status))


@app.command("disabled")
def host_disabled(
    host_id: str = typer.Option(..., "--id", help="host ID, comma separated"),
    status: bool = typer.Option(..., "--status/--no-status", help="host disabled status"),
):
    """Enable or disable hosts."""
    api = HostStore(connect())
    apply_each(host_id, lambda item: api.update_disabled_status(item, status))


@app.command("settings")
def host_settings():
    """Get the default service options."""
    print_json(HostStore(connect()).service_options())


@app.command("deploy")
def host_deploy(name: str = typer.Argument(..., help="deployment configuration name")):
    """Write the target host deployment script to standard output.

    The host-provisioning trusted client called NAME is created when it
    does not exist yet.
    """
    client = connect()
    store = UserStore(client)

    trusted_client_id = next(
        (tc["id"] for tc in store.trusted_clients() if tc.get("name") == name),
        None,
    )
    if trusted_client_id is None:
        trusted_client_id = store.create_trusted_client(host_provisioning(name))

    typer.echo(Authorizer(client).deploy_script(trusted_client_id), nl=False)
