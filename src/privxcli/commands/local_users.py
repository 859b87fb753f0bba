"""Local user commands."""

from pathlib import Path

import typer

from privxcli.api.userstore import UserStore
from privxcli.client import connect
from privxcli.commands.common import file_argument, limit_option, offset_option
from privxcli.utils import apply_each, decode_json, print_json, show_each

app = typer.Typer(help="List and manage local users")


@app.callback(invoke_without_command=True)
def local_users_list(
    ctx: typer.Context,
    offset: int = offset_option(),
    limit: int = limit_option(),
    username: str = typer.Option("", "--name", help="local user name"),
    user_id: str = typer.Option("", "--id", help="local user ID"),
):
    """List local users."""
    if ctx.invoked_subcommand is None:
        print_json(UserStore(connect()).local_users(offset, limit, user_id, username))


@app.command("show")
def local_user_show(user_id: str = typer.Option(..., "--id", help="local user ID, comma separated")):
    """Get local users by ID."""
    api = UserStore(connect())
    print_json(show_each(user_id, api.local_user))


@app.command("create")
def local_user_create(file: Path = file_argument()):
    """Create a local user."""
    user = decode_json(file)
    print_json(UserStore(connect()).create_local_user(user))


@app.command("update")
def local_user_update(
    user_id: str = typer.Option(..., "--id", help="local user ID"),
    file: Path = file_argument(),
):
    """Update a local user."""
    user = decode_json(file)
    UserStore(connect()).update_local_user(user_id, user)


@app.command("delete")
def local_user_delete(user_id: str = typer.Option(..., "--id", help="local user ID, comma separated")):
    """Delete local users."""
    api = UserStore(connect())
    apply_each(user_id, api.delete_local_user)


@app.command("update-password")
def local_user_update_password(
    user_id: str = typer.Option(..., "--id", help="local user ID"),
    password: str = typer.Option(..., "--password", help="new password"),
):
    """Change the password of a local user."""
    UserStore(connect()).update_local_user_password(user_id, password)
