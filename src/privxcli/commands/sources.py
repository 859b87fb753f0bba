"""User source, AWS role and log collector commands."""

from pathlib import Path

import typer

from privxcli.api.rolestore import RoleStore
from privxcli.client import connect
from privxcli.commands.common import file_argument
from privxcli.utils import apply_each, decode_json, print_json, show_each, split_ids

app = typer.Typer(help="List and manage user and host sources")
aws_roles_app = typer.Typer(help="List and manage AWS role links")
collectors_app = typer.Typer(help="List and manage log collector configurations")


# ─────────────────────────────────────────────────────────────────────────────
# Sources
# ─────────────────────────────────────────────────────────────────────────────


@app.callback(invoke_without_command=True)
def sources_list(ctx: typer.Context):
    """List sources."""
    if ctx.invoked_subcommand is None:
        print_json(RoleStore(connect()).sources())


@app.command("create")
def source_create(file: Path = file_argument()):
    """Create a source."""
    source = decode_json(file)
    print_json(RoleStore(connect()).create_source(source))


@app.command("show")
def source_show(source_id: str = typer.Option(..., "--id", help="source ID, comma separated")):
    """Get sources by ID."""
    api = RoleStore(connect())
    print_json(show_each(source_id, api.source))


@app.command("update")
def source_update(
    source_id: str = typer.Option(..., "--id", help="source ID"),
    file: Path = file_argument(),
):
    """Update a source."""
    source = decode_json(file)
    RoleStore(connect()).update_source(source_id, source)


@app.command("delete")
def source_delete(source_id: str = typer.Option(..., "--id", help="source ID, comma separated")):
    """Delete sources."""
    api = RoleStore(connect())
    apply_each(source_id, api.delete_source)


@app.command("refresh")
def source_refresh(source_id: str = typer.Option(..., "--id", help="source ID, comma separated")):
    """Refresh sources."""
    RoleStore(connect()).refresh_sources(split_ids(source_id))


# ─────────────────────────────────────────────────────────────────────────────
# AWS roles
# ─────────────────────────────────────────────────────────────────────────────


@aws_roles_app.callback(invoke_without_command=True)
def aws_roles_list(
    ctx: typer.Context,
    refresh: bool = typer.Option(False, "--refresh", help="refresh the roles from AWS first"),
):
    """List AWS role links."""
    if ctx.invoked_subcommand is None:
        print_json(RoleStore(connect()).aws_role_links(refresh))


@aws_roles_app.command("show")
def aws_role_show(aws_role_id: str = typer.Option(..., "--id", help="AWS role ID, comma separated")):
    """Get AWS role links by ID."""
    api = RoleStore(connect())
    print_json(show_each(aws_role_id, api.aws_role_link))


@aws_roles_app.command("update")
def aws_role_update(
    aws_role_id: str = typer.Option(..., "--id", help="AWS role ID"),
    file: Path = file_argument(),
):
    """Update the PrivX roles linked to an AWS role."""
    link = decode_json(file)
    RoleStore(connect()).update_aws_role_link(aws_role_id, link)


@aws_roles_app.command("delete")
def aws_role_delete(aws_role_id: str = typer.Option(..., "--id", help="AWS role ID, comma separated")):
    """Delete AWS role links."""
    api = RoleStore(connect())
    apply_each(aws_role_id, api.delete_aws_role_link)


@aws_roles_app.command("linked-roles")
def aws_role_linked_roles(aws_role_id: str = typer.Option(..., "--id", help="AWS role ID")):
    """List the PrivX roles linked to an AWS role."""
    print_json(RoleStore(connect()).linked_roles(aws_role_id))


# ─────────────────────────────────────────────────────────────────────────────
# Log collectors
# ─────────────────────────────────────────────────────────────────────────────


@collectors_app.callback(invoke_without_command=True)
def collectors_list(ctx: typer.Context):
    """List log collector configurations."""
    if ctx.invoked_subcommand is None:
        print_json(RoleStore(connect()).logconf_collectors())


@collectors_app.command("create")
def collector_create(file: Path = file_argument()):
    """Create a log collector configuration."""
    collector = decode_json(file)
    print_json(RoleStore(connect()).create_logconf_collector(collector))


@collectors_app.command("show")
def collector_show(
    collector_id: str = typer.Option(..., "--collector-id", help="collector ID, comma separated"),
):
    """Get log collector configurations by ID."""
    api = RoleStore(connect())
    print_json(show_each(collector_id, api.logconf_collector))


@collectors_app.command("update")
def collector_update(
    collector_id: str = typer.Option(..., "--collector-id", help="collector ID"),
    file: Path = file_argument(),
):
    """Update a log collector configuration."""
    collector = decode_json(file)
    RoleStore(connect()).update_logconf_collector(collector_id, collector)


@collectors_app.command("delete")
def collector_delete(
    collector_id: str = typer.Option(..., "--collector-id", help="collector ID, comma separated"),
):
    """Delete log collector configurations."""
    api = RoleStore(connect())
    apply_each(collector_id, api.delete_logconf_collector)
