"""Trail index commands."""

from pathlib import Path
from typing import Optional

import typer

from privxcli.api.trailindex import TrailIndex
from privxcli.client import connect
from privxcli.commands.common import limit_option, offset_option, optional_file_argument, optional_json, sortdir_option
from privxcli.utils import print_json, split_ids

app = typer.Typer(help="Index and search connection trails")


@app.command("status")
def index_status(conn_id: str = typer.Option(..., "--conn-id", help="connection ID, comma separated")):
    """Get the indexing status of connections."""
    print_json(TrailIndex(connect()).indexing_status(split_ids(conn_id)))


@app.command("search")
def index_search(
    offset: int = offset_option(),
    limit: int = limit_option(),
    sortdir: str = sortdir_option(),
    file: Optional[Path] = optional_file_argument(),
):
    """Search indexed trail content."""
    api = TrailIndex(connect())
    print_json(api.search_content(offset, limit, sortdir.upper(), optional_json(file)))


@app.command("start")
def index_start(conn_id: str = typer.Option(..., "--conn-id", help="connection ID, comma separated")):
    """Start indexing connections."""
    print_json(TrailIndex(connect()).start_indexing(split_ids(conn_id)))
