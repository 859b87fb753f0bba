"""Extender and web proxy CA commands."""

import typer

from privxcli.api.authorizer import Authorizer
from privxcli.client import connect
from privxcli.utils import print_json


def ca_app(kind: str, prefix: str) -> typer.Typer:
    """Command group listing one trusted client kind's CA certificates.

    Args:
        kind: Human readable trusted client kind
        prefix: Authorizer method prefix, ``extender`` or ``webproxy``
    """
    app = typer.Typer(help=f"List and get {kind} CA certificates")

    @app.callback(invoke_without_command=True)
    def ca_list(
        ctx: typer.Context,
        group_id: str = typer.Option("", "--group-id", help="access group ID filter"),
    ):
        """List CA certificates."""
        if ctx.invoked_subcommand is None:
            api = Authorizer(connect())
            print_json(getattr(api, f"{prefix}_ca_certificates")(group_id))

    @app.command("show")
    def ca_show(ca_id: str = typer.Option(..., "--id", help=f"{kind} CA ID")):
        """Get a CA certificate."""
        api = Authorizer(connect())
        print_json(getattr(api, f"{prefix}_ca_certificate")(ca_id))

    @app.command("revocation-list")
    def ca_revocation_list(
        ca_id: str = typer.Option(..., "--id", help=f"{kind} CA ID"),
        name: str = typer.Option(..., "--name", help="file name to save the CRL to"),
    ):
        """Download a certificate revocation list."""
        api = Authorizer(connect())
        getattr(api, f"download_{prefix}_crl")(ca_id, name)

    return app


extender_app = ca_app("extender", "extender")
webproxy_app = ca_app("web proxy", "webproxy")
