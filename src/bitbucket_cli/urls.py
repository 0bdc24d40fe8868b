"""Split Git remote URLs into host and path."""

import re
from urllib.parse import urlsplit

from bitbucket_cli.errors import UrlFormatError

# [user@]host:path, the scp-like syntax Git accepts for SSH remotes
SCP_LIKE_RE = re.compile(r"^(?:[^@/:]+@)?(?P<host>[^@/:]+):(?P<path>.+)$")


def split_remote_url(url: str) -> tuple[str, str]:
    """Return ``(host, path)`` for an HTTP(S), ``ssh://`` or scp-like remote URL.

    Hosts of URLs with a scheme come back lowercased, scp-like hosts as
    written. The path keeps its leading slash if it had one.
    """
    url = url.strip()
    if "://" in url:
        try:
            parsed = urlsplit(url)
            host = parsed.hostname
        except ValueError as exc:
            raise UrlFormatError(url) from exc
        if not host:
            raise UrlFormatError(url)
        return host, parsed.path

    match = SCP_LIKE_RE.match(url)
    if not match:
        raise UrlFormatError(url)
    return match.group("host"), match.group("path")


def path_segments(path: str) -> list[str]:
    return [segment for segment in path.split("/") if segment]
