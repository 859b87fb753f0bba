"""Options, value sets and helpers shared by the command modules."""

from enum import Enum
from pathlib import Path
from typing import Any, Optional

import typer

from privxcli.utils import decode_json


class ClientType(str, Enum):
    """Trusted client kinds with a downloadable pre-configuration."""

    extender = "extender"
    webproxy = "webproxy"
    carrier = "carrier"


class CAType(str, Enum):
    """Trusted client kinds with their own certificate authority."""

    extender = "extender"
    webproxy = "webproxy"


# ─────────────────────────────────────────────────────────────────────────────
# Options
# ─────────────────────────────────────────────────────────────────────────────


def offset_option(default: int = 0):
    return typer.Option(default, "--offset", help="where to start fetching the items")


def limit_option(default: int = 50):
    return typer.Option(default, "--limit", help="number of items to return")


def sortkey_option(default: str = "", help: str = "sort by specific object property"):
    return typer.Option(default, "--sortkey", help=help)


def sortdir_option(default: str = ""):
    return typer.Option(default, "--sortdir", help="sort direction, ASC or DESC")


def fuzzycount_option():
    return typer.Option(False, "--fuzzycount", help="return an approximate item count")


def file_argument():
    return typer.Argument(..., metavar="JSON-FILE", help="JSON file with the request body")


def optional_file_argument():
    return typer.Argument(None, metavar="[JSON-FILE]", help="JSON file with the request body")


def optional_json(path: Optional[Path]) -> Any:
    """Decode an optional JSON file argument."""
    return decode_json(path) if path is not None else None
