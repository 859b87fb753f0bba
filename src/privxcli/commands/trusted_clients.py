"""Trusted client and pre-configuration commands."""

from pathlib import Path
from typing import Callable, Optional

import typer

from privxcli.api import userstore
from privxcli.api.authorizer import Authorizer
from privxcli.api.userstore import UserStore
from privxcli.client import PrivXClient, connect
from privxcli.commands.common import CAType, ClientType, file_argument
from privxcli.utils import apply_each, decode_json, print_json, show_each

app = typer.Typer(help="List and manage trusted clients")

# Trusted client type as stored by PrivX
_STORED_TYPES = {
    ClientType.extender: userstore.EXTENDER,
    ClientType.webproxy: userstore.WEBPROXY,
    ClientType.carrier: userstore.CARRIER,
}

_CONFIG_DOWNLOADS: dict[ClientType, Callable[[Authorizer], Callable[[str, str], None]]] = {
    ClientType.extender: lambda api: api.download_extender_config,
    ClientType.webproxy: lambda api: api.download_webproxy_config,
    ClientType.carrier: lambda api: api.download_carrier_config,
}

_CA_LISTS = {
    CAType.extender: lambda api: api.extender_ca_certificates,
    CAType.webproxy: lambda api: api.webproxy_ca_certificates,
}

_CA_SHOW = {
    CAType.extender: lambda api: api.extender_ca_certificate,
    CAType.webproxy: lambda api: api.webproxy_ca_certificate,
}

_CRL_DOWNLOADS = {
    CAType.extender: lambda api: api.download_extender_crl,
    CAType.webproxy: lambda api: api.download_webproxy_crl,
}


def download_pre_configuration(
    client: PrivXClient, client_type: ClientType, trusted_client_id: str, filename: str
) -> None:
    """Download the pre-configuration of a trusted client into ``filename``."""
    download = _CONFIG_DOWNLOADS[client_type](Authorizer(client))
    download(trusted_client_id, filename)


@app.command("list")
def trusted_clients_list(
    client_type: Optional[ClientType] = typer.Option(None, "--type", help="trusted client type"),
):
    """List trusted clients, optionally of one type."""
    clients = UserStore(connect()).trusted_clients()
    if client_type is not None:
        stored = _STORED_TYPES[client_type]
        clients = [tc for tc in clients if tc.get("type") == stored]
    print_json(clients)


@app.command("show")
def trusted_client_show(
    client_id: str = typer.Option(..., "--client-id", help="trusted client ID, comma separated"),
):
    """Get trusted clients by ID."""
    api = UserStore(connect())
    print_json(show_each(client_id, api.trusted_client))


@app.command("create")
def trusted_client_create(file: Path = file_argument()):
    """Create a trusted client."""
    client = decode_json(file)
    print_json(UserStore(connect()).create_trusted_client(client))


@app.command("update")
def trusted_client_update(
    client_id: str = typer.Option(..., "--client-id", help="trusted client ID"),
    file: Path = file_argument(),
):
    """Update a trusted client."""
    client = decode_json(file)
    UserStore(connect()).update_trusted_client(client_id, client)


@app.command("delete")
def trusted_client_delete(
    client_id: str = typer.Option(..., "--client-id", help="trusted client ID, comma separated"),
):
    """Delete trusted clients."""
    api = UserStore(connect())
    apply_each(client_id, api.delete_trusted_client)


@app.command("list-ca")
def trusted_client_list_ca(
    ca_type: CAType = typer.Option(..., "--type", help="trusted client type"),
    group_id: str = typer.Option("", "--group-id", help="access group ID filter"),
):
    """List extender or web proxy CA certificates."""
    list_cas = _CA_LISTS[ca_type](Authorizer(connect()))
    print_json(list_cas(group_id))


@app.command("show-ca")
def trusted_client_show_ca(
    ca_id: str = typer.Option(..., "--client-id", help="CA certificate ID"),
    ca_type: CAType = typer.Option(..., "--type", help="trusted client type"),
):
    """Get an extender or web proxy CA certificate."""
    show_ca = _CA_SHOW[ca_type](Authorizer(connect()))
    print_json(show_ca(ca_id))


@app.command("show-crl")
def trusted_client_show_crl(
    ca_id: str = typer.Option(..., "--client-id", help="CA certificate ID"),
    ca_type: CAType = typer.Option(..., "--type", help="trusted client type"),
    name: str = typer.Option(..., "--name", help="file name to save the CRL to"),
):
    """Download an extender or web proxy certificate revocation list."""
    download = _CRL_DOWNLOADS[ca_type](Authorizer(connect()))
    download(ca_id, name)


@app.command("pre-config")
def trusted_client_pre_config(
    client_id: str = typer.Option(..., "--client-id", help="trusted client ID"),
    client_type: ClientType = typer.Option(..., "--type", help="trusted client type"),
    name: str = typer.Option(..., "--name", help="file name to save the configuration to"),
):
    """Download a trusted client pre-configuration."""
    download_pre_configuration(connect(), client_type, client_id, name)


def pre_configurations(
    client_id: str = typer.Option(..., "--id", help="trusted client ID"),
    client_type: ClientType = typer.Option(..., "--type", help="trusted client type"),
    name: str = typer.Option(..., "--name", help="file name to save the configuration to"),
):
    """Download an extender, web proxy or carrier pre-configuration."""
    download_pre_configuration(connect(), client_type, client_id, name)
