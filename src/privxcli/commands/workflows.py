"""Workflow and access request commands."""

from pathlib import Path
from typing import Optional

import typer

from privxcli.api.workflow import WorkflowEngine
from privxcli.client import connect
from privxcli.commands.common import (
    file_argument,
    limit_option,
    offset_option,
    optional_file_argument,
    optional_json,
    sortdir_option,
    sortkey_option,
)
from privxcli.utils import apply_each, decode_json, print_json, show_each

app = typer.Typer(help="List and manage workflows")
requests_app = typer.Typer(help="List and manage access requests")


# ─────────────────────────────────────────────────────────────────────────────
# Workflows
# ─────────────────────────────────────────────────────────────────────────────


@app.callback(invoke_without_command=True)
def workflows_list(
    ctx: typer.Context,
    offset: int = offset_option(),
    limit: int = limit_option(),
):
    """List workflows."""
    if ctx.invoked_subcommand is None:
        print_json(WorkflowEngine(connect()).workflows(offset, limit))


@app.command("create")
def workflow_create(file: Path = file_argument()):
    """Create a workflow."""
    workflow = decode_json(file)
    print_json(WorkflowEngine(connect()).create_workflow(workflow))


@app.command("show")
def workflow_show(workflow_id: str = typer.Option(..., "--id", help="workflow ID, comma separated")):
    """Get workflows by ID."""
    api = WorkflowEngine(connect())
    print_json(show_each(workflow_id, api.workflow))


@app.command("update")
def workflow_update(
    workflow_id: str = typer.Option(..., "--id", help="workflow ID"),
    file: Path = file_argument(),
):
    """Update a workflow."""
    workflow = decode_json(file)
    WorkflowEngine(connect()).update_workflow(workflow_id, workflow)


@app.command("delete")
def workflow_delete(workflow_id: str = typer.Option(..., "--id", help="workflow ID, comma separated")):
    """Delete workflows."""
    api = WorkflowEngine(connect())
    apply_each(workflow_id, api.delete_workflow)


@app.command("settings")
def workflow_settings():
    """Get the workflow engine settings."""
    print_json(WorkflowEngine(connect()).settings())


@app.command("update-settings")
def workflow_update_settings(file: Path = file_argument()):
    """Update the workflow engine settings."""
    settings = decode_json(file)
    WorkflowEngine(connect()).update_settings(settings)


@app.command("testsmtp")
def workflow_test_smtp(file: Path = file_argument()):
    """Send a test email with the given SMTP settings."""
    smtp = decode_json(file)
    print_json(WorkflowEngine(connect()).test_email_notification(smtp))


# ─────────────────────────────────────────────────────────────────────────────
# Requests
# ─────────────────────────────────────────────────────────────────────────────


@requests_app.callback(invoke_without_command=True)
def requests_list(
    ctx: typer.Context,
    offset: int = offset_option(),
    limit: int = limit_option(),
    filter_: str = typer.Option("", "--filter", help="request filter, e.g. incoming or outgoing"),
):
    """List access requests."""
    if ctx.invoked_subcommand is None:
        print_json(WorkflowEngine(connect()).requests(offset, limit, filter_))


@requests_app.command("create")
def request_create(file: Path = file_argument()):
    """Create an access request."""
    request = decode_json(file)
    print_json(WorkflowEngine(connect()).create_request(request))


@requests_app.command("show")
def request_show(request_id: str = typer.Option(..., "--id", help="request ID, comma separated")):
    """Get access requests by ID."""
    api = WorkflowEngine(connect())
    print_json(show_each(request_id, api.request))


@requests_app.command("delete")
def request_delete(request_id: str = typer.Option(..., "--id", help="request ID, comma separated")):
    """Delete access requests."""
    api = WorkflowEngine(connect())
    apply_each(request_id, api.delete_request)


@requests_app.command("decision-request")
def request_decision(
    request_id: str = typer.Option(..., "--id", help="request ID"),
    file: Path = file_argument(),
):
    """Approve or deny an access request."""
    decision = decode_json(file)
    WorkflowEngine(connect()).make_decision(request_id, decision)


@requests_app.command("search")
def request_search(
    offset: int = offset_option(),
    limit: int = limit_option(),
    sortkey: str = sortkey_option(),
    sortdir: str = sortdir_option(),
    filter_: str = typer.Option("", "--filter", help="request filter, e.g. incoming or outgoing"),
    file: Optional[Path] = optional_file_argument(),
):
    """Search access requests."""
    api = WorkflowEngine(connect())
    result = api.search_requests(
        offset, limit, sortkey, sortdir.upper(), filter_.upper(), optional_json(file)
    )
    print_json(result)
