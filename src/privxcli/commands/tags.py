"""Tag commands."""

from enum import Enum

import typer

from privxcli.api.hoststore import HostStore
from privxcli.api.userstore import UserStore
from privxcli.client import connect
from privxcli.commands.common import limit_option, offset_option, sortdir_option
from privxcli.utils import print_json


class TagType(str, Enum):
    user = "user"
    host = "host"


_TAG_LISTS = {
    TagType.user: lambda client: UserStore(client).local_user_tags,
    TagType.host: lambda client: HostStore(client).host_tags,
}


def tags_list(
    tag_type: TagType = typer.Option(..., "--type", help="tag type, user or host"),
    offset: int = offset_option(),
    limit: int = limit_option(),
    sortdir: str = sortdir_option(),
    query: str = typer.Option("", "--query", help="query string matching the tags"),
):
    """List local user or host tags."""
    list_tags = _TAG_LISTS[tag_type](connect())
    print_json(list_tags(offset, limit, sortdir.upper(), query))
