from types import MappingProxyType
from typing import List, Mapping, Optional

from botocore.exceptions import BotoCoreError, ClientError

from .config import log


class TailError(Exception):
    """Fatal startup error; printed and the process exits with status 1."""


def parse_groups(value: Optional[str]) -> List[str]:
    """
    Split the -g flag value on commas. Empty segments are rejected, nothing is stripped.
    """
    if not value:
        raise TailError("-g log groups flag is not set")

    groups = value.split(",")
    for group in groups:
        if group == "":
            raise TailError("log group cannot be empty")
    return groups


def resolve_stream(client, group: str) -> str:
    try:
        resp = client.describe_log_streams(
            logGroupName=group,
            orderBy="LastEventTime",
            descending=True,
            limit=1,
        )
    except (ClientError, BotoCoreError) as e:
        raise TailError(f"failed to describe log group streams: {e}") from e

    streams = resp.get("logStreams", [])
    if not streams:
        raise TailError(f"no log streams found for group: {group}")

    return streams[0]["logStreamName"]


def resolve_streams(client, groups: List[str]) -> Mapping[str, str]:
    """
    Resolve every group in order, stopping at the first failure.
    The result is read-only; streams are never re-resolved.
    """
    streams = {}
    for group in groups:
        stream = resolve_stream(client, group)
        log.info(f"[resolve] group={group} stream={stream}")
        streams[group] = stream
    return MappingProxyType(streams)
