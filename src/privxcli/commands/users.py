"""User commands."""

from typing import Optional

import typer

from privxcli.api.rolestore import RoleStore
from privxcli.client import connect
from privxcli.utils import print_json, show_each

app = typer.Typer(help="Search users and manage their roles")


@app.callback(invoke_without_command=True)
def users_search(
    ctx: typer.Context,
    query: Optional[list[str]] = typer.Option(None, "--query", "-q", help="search keyword, repeatable"),
    source: str = typer.Option("", "--source", help="user source ID"),
):
    """Search users."""
    if ctx.invoked_subcommand is not None:
        return

    keywords = " ".join(query or [])
    print_json(RoleStore(connect()).search_users(keywords, source))


@app.command("show")
def user_show(user_id: str = typer.Option(..., "--id", help="user ID, comma separated")):
    """Get users by ID."""
    api = RoleStore(connect())
    print_json(show_each(user_id, api.user))


@app.command("roles")
def user_roles(
    user_id: str = typer.Option(..., "--id", help="user ID"),
    grant: Optional[list[str]] = typer.Option(None, "--grant", help="role ID to grant, repeatable"),
    revoke: Optional[list[str]] = typer.Option(None, "--revoke", help="role ID to revoke, repeatable"),
):
    """List, grant or revoke the roles of a user."""
    api = RoleStore(connect())

    for role_id in grant or []:
        api.grant_user_role(user_id, role_id)
    for role_id in revoke or []:
        api.revoke_user_role(user_id, role_id)

    print_json(api.user_roles(user_id))
