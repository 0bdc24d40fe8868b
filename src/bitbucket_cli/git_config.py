"""Read remotes out of a repository's local `.git/config`."""

import logging
from pathlib import Path

from bitbucket_cli.config import BITBUCKET_HOST, AppConfig
from bitbucket_cli.errors import ConfigNotFoundError, ConfigUnreadableError, UrlFormatError
from bitbucket_cli.models import MalformedRemote, RemoteCollection, RemoteEntry
from bitbucket_cli.urls import split_remote_url

logger = logging.getLogger(__name__)

REMOTE_SECTION = "remote"
REQUIRED_REMOTE_KEYS = ("url", "fetch")
COMMENT_PREFIXES = ("#", ";")


def _parse_header(line: str) -> tuple[str, str | None]:
    header = line[1:].split("]", 1)[0].strip()
    kind, _, subsection = header.partition(" ")
    subsection = subsection.strip().strip('"')
    return kind.strip().lower(), subsection or None


def _iter_sections(raw_text: str):
    """Yield ``(kind, subsection, values)`` for every section in file order."""
    current: tuple[str, str | None, dict[str, str]] | None = None
    for raw_line in raw_text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith(COMMENT_PREFIXES):
            continue
        if line.startswith("["):
            if current:
                yield current
            kind, subsection = _parse_header(line)
            current = (kind, subsection, {})
            continue
        if current is None:
            continue
        key, sep, value = line.partition("=")
        if not sep:
            continue
        current[2][key.strip().lower()] = value.strip()
    if current:
        yield current


def parse(raw_text: str) -> RemoteCollection:
    """Collect remotes from Git config text.

    Sections other than ``[remote "<name>"]`` are skipped. A remote section
    without a name, ``url`` or ``fetch`` is recorded as malformed instead of
    stopping the parse, so the remaining sections are still read.
    """
    remotes: list[RemoteEntry] = []
    malformed: list[MalformedRemote] = []
    for kind, name, values in _iter_sections(raw_text):
        if kind != REMOTE_SECTION:
            continue
        missing = [key for key in REQUIRED_REMOTE_KEYS if not values.get(key)]
        if not name:
            missing.insert(0, "name")
        if missing:
            logger.debug("Skipping malformed remote %r: missing %s", name, ", ".join(missing))
            malformed.append(
                MalformedRemote(name=name or "", url=values.get("url") or None, missing=missing)
            )
            continue
        remotes.append(RemoteEntry(name=name, url=values["url"], fetch=values["fetch"]))
    return RemoteCollection(remotes=remotes, malformed=malformed)


def read_local(directory: Path, config: AppConfig | None = None) -> str:
    config = config or AppConfig()
    path = directory / config.git_config_path
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ConfigNotFoundError(path) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigUnreadableError(path, exc) from exc


def parse_local(directory: Path, config: AppConfig | None = None) -> RemoteCollection:
    return parse(read_local(directory, config))


def url_host(url: str) -> str | None:
    """Host of a remote URL, or None when the URL cannot be split."""
    try:
        host, _ = split_remote_url(url)
    except UrlFormatError:
        logger.debug("Ignoring unparseable remote URL %r", url)
        return None
    return host


def select_bitbucket_remote(
    remotes: list[RemoteEntry], host: str = BITBUCKET_HOST
) -> RemoteEntry | None:
    """Return the last remote, in file order, whose URL points at ``host``."""
    found: RemoteEntry | None = None
    for remote in remotes:
        if url_host(remote.url) == host:
            found = remote
    return found
