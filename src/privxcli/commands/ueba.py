"""UEBA commands."""

from pathlib import Path
from typing import Optional

import typer

from privxcli.api.connectionmanager import ConnectionManager
from privxcli.client import connect
from privxcli.commands.common import file_argument, optional_file_argument, optional_json
from privxcli.utils import apply_each, decode_json, print_json

app = typer.Typer(help="User and entity behavior analytics")
config_app = typer.Typer(help="Get or set the UEBA configuration")
anomaly_app = typer.Typer(help="Get or create UEBA anomaly settings")
datasets_app = typer.Typer(help="List and manage UEBA datasets")

app.add_typer(config_app, name="config")
app.add_typer(anomaly_app, name="anomaly-settings")
app.add_typer(datasets_app, name="datasets")


@config_app.callback(invoke_without_command=True)
def ueba_config(ctx: typer.Context):
    """Get the UEBA configuration."""
    if ctx.invoked_subcommand is None:
        print_json(ConnectionManager(connect()).ueba_configurations())


@config_app.command("set")
def ueba_config_set(file: Path = file_argument()):
    """Set the UEBA configuration."""
    config = decode_json(file)
    ConnectionManager(connect()).set_ueba_configurations(config)


@anomaly_app.callback(invoke_without_command=True)
def ueba_anomaly_settings(ctx: typer.Context):
    """Get the UEBA anomaly settings."""
    if ctx.invoked_subcommand is None:
        print_json(ConnectionManager(connect()).ueba_anomaly_settings())


@anomaly_app.command("create")
def ueba_anomaly_settings_create(file: Path = file_argument()):
    """Create UEBA anomaly settings."""
    settings = decode_json(file)
    ConnectionManager(connect()).create_ueba_anomaly_settings(settings)


@app.command("start-analysis")
def ueba_start_analysis(dataset_id: str = typer.Option(..., "--id", help="dataset ID")):
    """Start anomaly analysis with a trained dataset."""
    ConnectionManager(connect()).start_analyzing(dataset_id)


@app.command("stop-analysis")
def ueba_stop_analysis():
    """Stop anomaly analysis."""
    ConnectionManager(connect()).stop_analyzing()


@app.command("download-script")
def ueba_download_script(
    name: str = typer.Option("ueba-setup.sh", "--name", help="file name to save the script to"),
):
    """Download the UEBA setup script."""
    ConnectionManager(connect()).download_ueba_script(name)


@app.command("connection-count")
def ueba_connection_count(file: Optional[Path] = optional_file_argument()):
    """Count connections in a time range."""
    api = ConnectionManager(connect())
    print_json(api.ueba_connection_counts(optional_json(file)))


@app.command("status")
def ueba_status():
    """Get the UEBA microservice status."""
    print_json(ConnectionManager(connect()).ueba_status())


@app.command("internal-status")
def ueba_internal_status():
    """Get the internal UEBA status."""
    print_json(ConnectionManager(connect()).ueba_internal_status())


# ─────────────────────────────────────────────────────────────────────────────
# Datasets
# ─────────────────────────────────────────────────────────────────────────────


@datasets_app.callback(invoke_without_command=True)
def ueba_datasets(
    ctx: typer.Context,
    bin_count: int = typer.Option(50, "--bin-count", help="number of histogram bins"),
    logs: bool = typer.Option(False, "--logs", "-l", help="include training logs"),
):
    """List UEBA datasets."""
    if ctx.invoked_subcommand is None:
        print_json(ConnectionManager(connect()).ueba_datasets(logs, bin_count))


@datasets_app.command("create")
def ueba_dataset_create(file: Path = file_argument()):
    """Create a UEBA dataset."""
    dataset = decode_json(file)
    print_json(ConnectionManager(connect()).create_ueba_dataset(dataset))


@datasets_app.command("show")
def ueba_dataset_show(
    dataset_id: str = typer.Option(..., "--id", help="dataset ID"),
    bin_count: int = typer.Option(50, "--bin-count", help="number of histogram bins"),
    logs: bool = typer.Option(False, "--logs", "-l", help="include training logs"),
):
    """Get a UEBA dataset."""
    print_json(ConnectionManager(connect()).ueba_dataset(dataset_id, logs, bin_count))


@datasets_app.command("update")
def ueba_dataset_update(
    dataset_id: str = typer.Option(..., "--id", help="dataset ID"),
    file: Path = file_argument(),
):
    """Update a UEBA dataset."""
    dataset = decode_json(file)
    ConnectionManager(connect()).update_ueba_dataset(dataset_id, dataset)


@datasets_app.command("delete")
def ueba_dataset_delete(dataset_id: str = typer.Option(..., "--id", help="dataset ID, comma separated")):
    """Delete UEBA datasets."""
    api = ConnectionManager(connect())
    apply_each(dataset_id, api.delete_ueba_dataset)


@datasets_app.command("train")
def ueba_dataset_train(
    dataset_id: str = typer.Option(..., "--id", help="dataset ID"),
    set_active: bool = typer.Option(
        False, "--set-active", "-a", help="make the dataset active after training"
    ),
):
    """Train a UEBA dataset."""
    print_json(ConnectionManager(connect()).train_ueba_dataset(dataset_id, set_active))
