"""privx-cli - PrivX command line client.

Usage:
    privx-cli login                          # Print an OAuth access token
    privx-cli hosts --limit 10               # List hosts
    privx-cli hosts show --id <ID>,<ID>      # Get hosts by ID
    privx-cli secrets create --name db FILE  # Create a vault secret

Credentials and the PrivX URL are read from the root flags, then the
PRIVX_API_* environment variables, then the TOML config file.
"""
from pathlib import Path
from typing import Any, Optional

import click
import typer
from rich.console import Console
from rich.markup import escape
from typer.core import TyperGroup

from privxcli import __version__
from privxcli.client import GlobalOptions, PrivXError, connect
from privxcli.commands import (
    api_clients,
    authorized_keys,
    authorizer,
    connections,
    dbproxy,
    extender,
    hosts,
    licensing,
    local_users,
    monitor,
    network,
    principal_keys,
    roles,
    secrets,
    sessions,
    settings,
    sources,
    tags,
    trailindex,
    trusted_clients,
    ueba,
    users,
    workflows,
)
from privxcli.utils import configure_logging

err_console = Console(stderr=True)


def _fail(error: Exception) -> None:
    """Print an error the way the command line reports it and exit 1."""
    message = getattr(error, "message", None) or str(error) or error.__class__.__name__
    message = message[:1].upper() + message[1:]
    err_console.print(f"[red]✗[/red] {escape(message)}", soft_wrap=True)
    raise typer.Exit(1)


class PrivXGroup(TyperGroup):
    """Root group: one error policy for every command.

    Usage errors exit with status 1 instead of click's 2. API, file and
    decoding errors are printed to standard error and exit with status 1.
    """

    def make_context(self, info_name: Optional[str], args: list[str], parent: Any = None, **extra: Any):
        try:
            return super().make_context(info_name, args, parent=parent, **extra)
        except click.UsageError as e:
            e.exit_code = 1
            raise

    def invoke(self, ctx: click.Context) -> Any:
        try:
            return super().invoke(ctx)
        except click.UsageError as e:
            e.exit_code = 1
            raise
        except (PrivXError, OSError, ValueError) as e:
            _fail(e)
        finally:
            options = ctx.find_object(GlobalOptions)
            if options is not None and options.client is not None:
                options.client.close()
                options.client = None


app = typer.Typer(
    name="privx-cli",
    cls=PrivXGroup,
    help="PrivX command line client",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Hosts and certificates
app.add_typer(hosts.app, name="hosts")
app.command("tags")(tags.tags_list)
app.add_typer(trusted_clients.app, name="trusted-clients")
app.command("pre-configurations")(trusted_clients.pre_configurations)
app.add_typer(extender.extender_app, name="extender")
app.add_typer(extender.webproxy_app, name="web-proxy")
app.add_typer(authorizer.app, name="authorizer")
app.add_typer(authorizer.access_groups_app, name="access-groups")
app.add_typer(authorizer.principals_app, name="principals")

# Roles and users
app.add_typer(roles.app, name="roles")
app.add_typer(roles.idp_app, name="identity-providers")
app.add_typer(users.app, name="users")
app.add_typer(local_users.app, name="local-users")
app.add_typer(api_clients.app, name="api-clients")
app.add_typer(principal_keys.app, name="principal-keys")
app.add_typer(authorized_keys.app, name="authorized-keys")
app.add_typer(sources.app, name="sources")
app.add_typer(sources.aws_roles_app, name="aws-roles")
app.add_typer(sources.collectors_app, name="collectors")

# Vault
app.add_typer(secrets.app, name="secrets")
app.add_typer(secrets.user_secrets_app, name="user-secrets")

# Connections
app.add_typer(connections.app, name="connections")
app.add_typer(ueba.app, name="ueba")
app.add_typer(trailindex.app, name="index")

# Workflows, settings and sessions
app.add_typer(workflows.app, name="workflows")
app.add_typer(workflows.requests_app, name="requests")
app.add_typer(settings.app, name="settings")
app.add_typer(settings.schemas_app, name="schemas")
app.add_typer(sessions.app, name="sessions")
app.add_typer(sessions.idp_clients_app, name="idp-clients")

# Platform
app.add_typer(licensing.app, name="license")
app.add_typer(licensing.mobilegw_app, name="mobilegw")
app.add_typer(monitor.components_app, name="components")
app.add_typer(monitor.instance_app, name="instance")
app.add_typer(monitor.auditevents_app, name="auditevents")
app.add_typer(network.app, name="nam")
app.add_typer(dbproxy.app, name="db-proxy")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="path to config file"),
    url: Optional[str] = typer.Option(
        None, "--url", help="PrivX absolute URL (e.g. https://your-instance.privx.io)"
    ),
    access: Optional[str] = typer.Option(
        None, "--access", "-a", help="either access key of api client or username"
    ),
    secret: Optional[str] = typer.Option(
        None, "--secret", "-s", help="either secret key of api client or password"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="log HTTP requests to stderr"),
    version: bool = typer.Option(False, "--version", help="Show version"),
):
    """PrivX command line client.

    \b
    Examples:
        privx-cli --url https://privx.example.com -a <ACCESS> -s <SECRET> hosts
        privx-cli roles show --id <ROLE-ID>
        privx-cli secrets delete --name <NAME>,<NAME>
    """
    if version:
        typer.echo(f"privx-cli {__version__}")
        raise typer.Exit(0)

    options = ctx.ensure_object(GlobalOptions)
    options.config = config
    options.url = url
    options.access = access
    options.secret = secret
    configure_logging(verbose)

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())


@app.command("login")
def login():
    """Print an OAuth access token for the configured credentials."""
    typer.echo(connect().access_token(), nl=False)
