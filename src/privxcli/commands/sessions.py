"""Session storage and IdP client commands."""

from pathlib import Path

import typer

from privxcli.api.auth import Auth
from privxcli.client import connect
from privxcli.commands.common import file_argument, limit_option, offset_option, sortdir_option, sortkey_option
from privxcli.utils import apply_each, decode_json, print_json, show_each

app = typer.Typer(help="List, search and terminate sessions")
idp_clients_app = typer.Typer(help="List and manage IdP clients")


# ─────────────────────────────────────────────────────────────────────────────
# Sessions
# ─────────────────────────────────────────────────────────────────────────────


@app.command("show")
def sessions_show(
    user_id: str = typer.Option("", "--user-id", help="user ID"),
    source_id: str = typer.Option("", "--source-id", help="source ID"),
    offset: int = offset_option(),
    limit: int = limit_option(),
    sortkey: str = sortkey_option("expires"),
    sortdir: str = sortdir_option("ASC"),
):
    """List the sessions of a user or a source."""
    if not user_id and not source_id:
        raise typer.BadParameter("either --user-id or --source-id is required")
    if user_id and source_id:
        raise typer.BadParameter("only one of --user-id or --source-id is allowed")

    api = Auth(connect())
    if user_id:
        print_json(api.user_sessions(user_id, offset, limit, sortkey, sortdir.upper()))
    else:
        print_json(api.source_sessions(source_id, offset, limit, sortkey, sortdir.upper()))


@app.command("search")
def sessions_search(
    offset: int = offset_option(),
    limit: int = limit_option(),
    sortkey: str = sortkey_option("expires"),
    sortdir: str = sortdir_option("ASC"),
    file: Path = file_argument(),
):
    """Search sessions."""
    search = decode_json(file)
    print_json(Auth(connect()).search_sessions(offset, limit, sortkey, sortdir.upper(), search))


@app.command("terminate")
def session_terminate(session_id: str = typer.Option(..., "--id", help="session ID")):
    """Terminate a session."""
    Auth(connect()).terminate_session(session_id)


@app.command("terminate-all")
def sessions_terminate_all(user_id: str = typer.Option(..., "--id", help="user ID")):
    """Terminate all sessions of a user."""
    Auth(connect()).terminate_user_sessions(user_id)


# ─────────────────────────────────────────────────────────────────────────────
# IdP clients
# ─────────────────────────────────────────────────────────────────────────────


@idp_clients_app.command("create")
def idp_client_create(file: Path = file_argument()):
    """Create an IdP client."""
    client = decode_json(file)
    print_json(Auth(connect()).create_idp_client(client))


@idp_clients_app.command("update")
def idp_client_update(
    client_id: str = typer.Option(..., "--id", help="IdP client ID"),
    file: Path = file_argument(),
):
    """Update an IdP client."""
    client = decode_json(file)
    Auth(connect()).update_idp_client(client_id, client)


@idp_clients_app.command("show")
def idp_client_show(client_id: str = typer.Option(..., "--id", help="IdP client ID, comma separated")):
    """Get IdP clients by ID."""
    api = Auth(connect())
    print_json(show_each(client_id, api.idp_client))


@idp_clients_app.command("delete")
def idp_client_delete(client_id: str = typer.Option(..., "--id", help="IdP client ID, comma separated")):
    """Delete IdP clients."""
    api = Auth(connect())
    apply_each(client_id, api.delete_idp_client)


@idp_clients_app.command("regenerate")
def idp_client_regenerate(client_id: str = typer.Option(..., "--id", help="IdP client ID")):
    """Regenerate the credentials of an IdP client."""
    print_json(Auth(connect()).regenerate_idp_client_config(client_id))
