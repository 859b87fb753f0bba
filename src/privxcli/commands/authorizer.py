"""Authorizer, access group and principal commands."""

from pathlib import Path
from typing import Optional

import typer

from privxcli.api.authorizer import Authorizer
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

app = typer.Typer(help="Authorizer certificates, scripts and trust anchors")
access_groups_app = typer.Typer(help="List and manage access groups")
principals_app = typer.Typer(help="List and manage principal keys of role based access groups")


# ─────────────────────────────────────────────────────────────────────────────
# Authorizer
# ─────────────────────────────────────────────────────────────────────────────


@app.callback(invoke_without_command=True)
def authorizer_ca_list(
    ctx: typer.Context,
    access_group_id: str = typer.Option("", "--access-group-id", help="access group ID filter"),
):
    """List authorizer CA certificates."""
    if ctx.invoked_subcommand is None:
        print_json(Authorizer(connect()).ca_certificates(access_group_id))


@app.command("show")
def authorizer_ca_show(
    ca_id: str = typer.Option(..., "--id", help="CA ID"),
    name: str = typer.Option(..., "--name", help="file name to save the certificate to"),
):
    """Download an authorizer CA certificate."""
    Authorizer(connect()).download_ca_certificate(ca_id, name)


@app.command("show-crl")
def authorizer_crl(
    ca_id: str = typer.Option(..., "--id", help="CA ID"),
    name: str = typer.Option(..., "--name", help="file name to save the CRL to"),
):
    """Download an authorizer certificate revocation list."""
    Authorizer(connect()).download_crl(ca_id, name)


@app.command("target-host-credentials")
def authorizer_target_host_credentials(file: Path = file_argument()):
    """Get credentials for accessing a target host."""
    request = decode_json(file)
    print_json(Authorizer(connect()).target_host_credentials(request))


@app.command("deployment-script")
def authorizer_deployment_script(
    trusted_client_id: str = typer.Option(..., "--trusted-client-id", help="trusted client ID"),
    name: str = typer.Option(..., "--name", help="file name to save the script to"),
):
    """Download the target host deployment script."""
    Authorizer(connect()).download_deploy_script(trusted_client_id, name)


@app.command("principal-cmd-script")
def authorizer_principal_command_script(
    name: str = typer.Option(..., "--name", help="file name to save the script to"),
):
    """Download the principals command script."""
    Authorizer(connect()).download_principal_command_script(name)


@app.command("ssl-trust-anchor")
def authorizer_ssl_trust_anchor():
    """Get the trust anchor of the PrivX SSL certificate."""
    print_json(Authorizer(connect()).ssl_trust_anchor())


@app.command("extender-trust-anchor")
def authorizer_extender_trust_anchor():
    """Get the trust anchor extenders use to verify PrivX."""
    print_json(Authorizer(connect()).extender_trust_anchor())


@app.command("search")
def authorizer_cert_search(
    offset: int = offset_option(),
    limit: int = limit_option(),
    sortkey: str = sortkey_option(),
    sortdir: str = sortdir_option(),
    file: Optional[Path] = optional_file_argument(),
):
    """Search certificates."""
    api = Authorizer(connect())
    print_json(api.search_certificates(offset, limit, sortkey, sortdir.upper(), optional_json(file)))


@app.command("cert-list")
def authorizer_cert_list():
    """List all certificates."""
    print_json(Authorizer(connect()).certificates())


@app.command("get-cert")
def authorizer_cert_get(cert_id: str = typer.Option(..., "--id", help="certificate ID, comma separated")):
    """Get certificates by ID."""
    api = Authorizer(connect())
    print_json(show_each(cert_id, api.certificate))


# ─────────────────────────────────────────────────────────────────────────────
# Access groups
# ─────────────────────────────────────────────────────────────────────────────


@access_groups_app.callback(invoke_without_command=True)
def access_groups_list(
    ctx: typer.Context,
    offset: int = offset_option(),
    limit: int = limit_option(),
    sortkey: str = sortkey_option(),
    sortdir: str = sortdir_option(),
):
    """List access groups."""
    if ctx.invoked_subcommand is None:
        api = Authorizer(connect())
        print_json(api.access_groups(offset, limit, sortkey, sortdir.upper()))


@access_groups_app.command("create")
def access_group_create(file: Path = file_argument()):
    """Create an access group."""
    group = decode_json(file)
    print_json(Authorizer(connect()).create_access_group(group))


@access_groups_app.command("search")
def access_group_search(
    offset: int = offset_option(),
    limit: int = limit_option(),
    sortkey: str = sortkey_option(),
    sortdir: str = sortdir_option(),
    file: Optional[Path] = optional_file_argument(),
):
    """Search access groups."""
    api = Authorizer(connect())
    print_json(api.search_access_groups(offset, limit, sortkey, sortdir.upper(), optional_json(file)))


@access_groups_app.command("show")
def access_group_show(group_id: str = typer.Option(..., "--id", help="access group ID, comma separated")):
    """Get access groups by ID."""
    api = Authorizer(connect())
    print_json(show_each(group_id, api.access_group))


@access_groups_app.command("update")
def access_group_update(
    group_id: str = typer.Option(..., "--id", help="access group ID"),
    file: Path = file_argument(),
):
    """Update an access group."""
    group = decode_json(file)
    Authorizer(connect()).update_access_group(group_id, group)


@access_groups_app.command("renew-ca")
def access_group_renew_ca(group_id: str = typer.Option(..., "--id", help="access group ID")):
    """Create a new CA key for an access group."""
    print_json(Authorizer(connect()).renew_access_group_ca(group_id))


@access_groups_app.command("revoke-ca")
def access_group_revoke_ca(
    group_id: str = typer.Option(..., "--id", help="access group ID"),
    ca_id: str = typer.Option(..., "--ca-id", help="CA ID"),
):
    """Revoke a CA key of an access group."""
    Authorizer(connect()).revoke_access_group_ca(group_id, ca_id)


# ─────────────────────────────────────────────────────────────────────────────
# Principals
# ─────────────────────────────────────────────────────────────────────────────


@principals_app.callback(invoke_without_command=True)
def principals_list(ctx: typer.Context):
    """List principal keys of all groups."""
    if ctx.invoked_subcommand is None:
        print_json(Authorizer(connect()).principals())


@principals_app.command("show")
def principal_show(
    group_id: str = typer.Option(..., "--id", help="group ID"),
    key_id: str = typer.Option("", "--key-id", help="principal key ID"),
    filter_: str = typer.Option("", "--filter", help="key filter, e.g. ssh or x509"),
):
    """Get the principal keys of a group."""
    print_json(Authorizer(connect()).principal(group_id, key_id, filter_))


@principals_app.command("delete")
def principal_delete(
    group_id: str = typer.Option(..., "--id", help="group ID, comma separated"),
    key_id: str = typer.Option("", "--key-id", help="principal key ID"),
):
    """Delete the principal keys of groups."""
    api = Authorizer(connect())
    apply_each(group_id, lambda item: api.delete_principal_key(item, key_id))


@principals_app.command("create")
def principal_create(group_id: str = typer.Option(..., "--id", help="group ID")):
    """Create a principal key for a group."""
    print_json(Authorizer(connect()).create_principal_key(group_id))


@principals_app.command("import")
def principal_import(
    group_id: str = typer.Option(..., "--id", help="group ID"),
    file: Path = file_argument(),
):
    """Import a principal key for a group."""
    request = decode_json(file)
    print_json(Authorizer(connect()).import_principal_key(group_id, request))


@principals_app.command("sign")
def principal_sign(
    group_id: str = typer.Option(..., "--id", help="group ID"),
    key_id: str = typer.Option("", "--key-id", help="principal key ID"),
    file: Path = file_argument(),
):
    """Sign credentials with a group principal key."""
    credential = decode_json(file)
    print_json(Authorizer(connect()).sign_principal_key(group_id, key_id, credential))
