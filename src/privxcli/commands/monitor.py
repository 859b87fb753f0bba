"""Component, instance and audit event commands."""

from pathlib import Path
from typing import Optional

import typer

from privxcli.api.monitor import Monitor
from privxcli.client import connect
from privxcli.commands.common import (
    fuzzycount_option,
    limit_option,
    offset_option,
    optional_file_argument,
    optional_json,
    sortdir_option,
    sortkey_option,
)
from privxcli.utils import print_json, show_each

components_app = typer.Typer(help="Show PrivX component status")
instance_app = typer.Typer(help="Show and terminate PrivX instances")
auditevents_app = typer.Typer(help="List and search audit events")


@components_app.callback(invoke_without_command=True)
def components_list(ctx: typer.Context):
    """List the status of all components."""
    if ctx.invoked_subcommand is None:
        print_json(Monitor(connect()).components())


@components_app.command("show")
def component_show(name: str = typer.Option(..., "--name", help="component host name, comma separated")):
    """Get component status by host name."""
    api = Monitor(connect())
    print_json(show_each(name, api.component))


@instance_app.callback(invoke_without_command=True)
def instance_status(ctx: typer.Context):
    """Show the instance status."""
    if ctx.invoked_subcommand is None:
        print_json(Monitor(connect()).instance_status())


@instance_app.command("terminate")
def instance_terminate():
    """Terminate all PrivX instances."""
    Monitor(connect()).terminate_instances()


@auditevents_app.callback(invoke_without_command=True)
def auditevents_list(
    ctx: typer.Context,
    offset: int = offset_option(),
    limit: int = limit_option(),
    sortkey: str = sortkey_option(),
    sortdir: str = sortdir_option(),
    fuzzycount: bool = fuzzycount_option(),
):
    """List audit events."""
    if ctx.invoked_subcommand is None:
        api = Monitor(connect())
        print_json(api.audit_events(offset, limit, sortkey, sortdir.upper(), fuzzycount))


@auditevents_app.command("search")
def auditevents_search(
    offset: int = offset_option(),
    limit: int = limit_option(),
    sortkey: str = sortkey_option(),
    sortdir: str = sortdir_option(),
    fuzzycount: bool = fuzzycount_option(),
    file: Optional[Path] = optional_file_argument(),
):
    """Search audit events."""
    api = Monitor(connect())
    result = api.search_audit_events(
        offset, limit, sortkey, sortdir.upper(), fuzzycount, optional_json(file)
    )
    print_json(result)


@auditevents_app.command("codes")
def auditevents_codes():
    """List the audit event codes."""
    print_json(Monitor(connect()).audit_event_codes())
