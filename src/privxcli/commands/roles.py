"""Role and identity provider commands."""

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
from privxcli.utils import apply_each, decode_json, print_json, show_each, split_ids

app = typer.Typer(help="List and manage roles")
idp_app = typer.Typer(help="List and manage identity providers")


# ─────────────────────────────────────────────────────────────────────────────
# Roles
# ─────────────────────────────────────────────────────────────────────────────


@app.callback(invoke_without_command=True)
def roles_list(ctx: typer.Context):
    """List roles."""
    if ctx.invoked_subcommand is None:
        print_json(RoleStore(connect()).roles())


@app.command("create")
def role_create(file: Path = file_argument()):
    """Create a role."""
    role = decode_json(file)
    print_json(RoleStore(connect()).create_role(role))


@app.command("show")
def role_show(role_id: str = typer.Option(..., "--id", help="role ID, comma separated")):
    """Get roles by ID."""
    api = RoleStore(connect())
    print_json(show_each(role_id, api.role))


@app.command("update")
def role_update(
    role_id: str = typer.Option(..., "--id", help="role ID"),
    file: Path = file_argument(),
):
    """Update a role."""
    role = decode_json(file)
    RoleStore(connect()).update_role(role_id, role)


@app.command("delete")
def role_delete(role_id: str = typer.Option(..., "--id", help="role ID, comma separated")):
    """Delete roles."""
    api = RoleStore(connect())
    apply_each(role_id, api.delete_role)


@app.command("members")
def role_members(role_id: str = typer.Option(..., "--id", help="role ID, comma separated")):
    """List the members of roles."""
    api = RoleStore(connect())
    print_json(show_each(role_id, api.role_members))


@app.command("resolve")
def role_resolve(names: str = typer.Option(..., "--name", help="role name, comma separated")):
    """Resolve role names to IDs."""
    print_json(RoleStore(connect()).resolve_roles(split_ids(names)))


@app.command("aws-token")
def role_aws_token(
    role_id: str = typer.Option(..., "--id", help="AWS-linked role ID"),
    mfa: str = typer.Option("", "--mfa", help="MFA token code"),
    ttl: int = typer.Option(50, "--ttl", help="credential lifetime in minutes"),
):
    """Get temporary AWS credentials for a role."""
    print_json(RoleStore(connect()).aws_token(role_id, mfa, ttl))


# ─────────────────────────────────────────────────────────────────────────────
# Identity providers
# ─────────────────────────────────────────────────────────────────────────────


@idp_app.callback(invoke_without_command=True)
def identity_providers_list(
    ctx: typer.Context,
    offset: int = offset_option(),
    limit: int = limit_option(),
):
    """List identity providers."""
    if ctx.invoked_subcommand is None:
        print_json(RoleStore(connect()).identity_providers(offset, limit))


@idp_app.command("create")
def identity_provider_create(file: Path = file_argument()):
    """Create an identity provider."""
    provider = decode_json(file)
    print_json(RoleStore(connect()).create_identity_provider(provider))


@idp_app.command("show")
def identity_provider_show(
    provider_id: str = typer.Option(..., "--id", help="identity provider ID, comma separated"),
):
    """Get identity providers by ID."""
    api = RoleStore(connect())
    print_json(show_each(provider_id, api.identity_provider))


@idp_app.command("update")
def identity_provider_update(
    provider_id: str = typer.Option(..., "--id", help="identity provider ID"),
    file: Path = file_argument(),
):
    """Update an identity provider."""
    provider = decode_json(file)
    RoleStore(connect()).update_identity_provider(provider_id, provider)


@idp_app.command("delete")
def identity_provider_delete(
    provider_id: str = typer.Option(..., "--id", help="identity provider ID, comma separated"),
):
    """Delete identity providers."""
    api = RoleStore(connect())
    apply_each(provider_id, api.delete_identity_provider)


@idp_app.command("search")
def identity_provider_search(
    offset: int = offset_option(),
    limit: int = limit_option(),
    sortkey: str = sortkey_option(),
    sortdir: str = sortdir_option("ASC"),
    keywords: str = typer.Option("", "--keywords", help="search keywords"),
):
    """Search identity providers."""
    api = RoleStore(connect())
    print_json(api.search_identity_providers(offset, limit, sortkey, sortdir.upper(), keywords))
