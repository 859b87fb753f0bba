"""Helper functions shared by the commands."""

import json
import logging
from pathlib import Path
from typing import Any, Callable, TypeVar, Union

import typer
from rich.console import Console
from rich.logging import RichHandler

T = TypeVar("T")


def print_json(data: Any) -> None:
    """Write ``data`` as compact JSON to standard output."""
    typer.echo(json.dumps(data), nl=False)


def decode_json(path: Union[str, Path]) -> Any:
    """Load a JSON request body from a file."""
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def split_ids(value: str) -> list[str]:
    """Split a comma separated ID list, keeping order."""
    return [item.strip() for item in value.split(",") if item.strip()]


def show_each(ids: str, fetch: Callable[[str], T]) -> list[T]:
    """Fetch every ID in turn; the first failure aborts the rest."""
    return [fetch(item) for item in split_ids(ids)]


def apply_each(ids: str, action: Callable[[str], Any]) -> None:
    """Run ``action`` for every ID in turn, echoing each one that succeeded."""
    for item in split_ids(ids):
        action(item)
        typer.echo(item)


def configure_logging(verbose: bool) -> None:
    """Route privxcli debug logging to standard error."""
    logger = logging.getLogger("privxcli")
    if not verbose:
        logger.setLevel(logging.WARNING)
        return

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(console=Console(stderr=True), show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
