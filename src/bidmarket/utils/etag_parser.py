"""ETag helpers for versioned resources."""

from fastapi import Request

from bidmarket.common.exceptions import VersionMissingError

__all__ = ["format_etag", "matches_if_none_match", "parse_etag"]


def format_etag(version: int) -> str:
    """Return the strong ETag header value for a version."""
    return f'"{version}"'


def _strip(value: str) -> str:
    value = value.strip()
    if value.startswith("W/"):
        value = value[2:]
    return value.strip('"')


def parse_etag(resource_id: str, request: Request) -> int:
    """Return integer version from *If-Match* header or raise."""
    value = request.headers.get("If-Match", "").strip()
    if not (value.startswith('"') and value.endswith('"')):
        raise VersionMissingError(resource_id)

    try:
        return int(value.strip('"'))
    except ValueError as exc:
        raise VersionMissingError(resource_id) from exc


def matches_if_none_match(request: Request, version: int) -> bool:
    """Whether the client's *If-None-Match* header names the current version.

    Weak validators and comma separated lists are accepted.
    """
    header = request.headers.get("If-None-Match")
    if not header:
        return False
    if header.strip() == "*":
        return True
    return any(_strip(tag) == str(version) for tag in header.split(","))
