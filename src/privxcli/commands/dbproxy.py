"""DB proxy commands."""

import typer

from privxcli.api.dbproxy import DBProxy
from privxcli.client import connect
from privxcli.utils import print_json

app = typer.Typer(help="DB proxy configuration")


@app.command("config")
def db_proxy_config():
    """Get the DB proxy configuration."""
    print_json(DBProxy(connect()).config())
