"""Work out which BitBucket repository a command refers to."""

import logging
from pathlib import Path

from pydantic import ValidationError

from bitbucket_cli.config import AppConfig
from bitbucket_cli.errors import InvalidRepoSpecError, NoBitbucketRemoteError, UrlFormatError
from bitbucket_cli.git_config import parse_local, select_bitbucket_remote, url_host
from bitbucket_cli.models import DiscoveredRepo, RepoOverride, RepoSource, RepositoryIdentity
from bitbucket_cli.urls import path_segments, split_remote_url

logger = logging.getLogger(__name__)


def from_remote_url(url: str) -> RepositoryIdentity:
    """Identity from a clone URL such as ``git@bitbucket.org:acme/widgets.git``."""
    _, path = split_remote_url(url)
    segments = path_segments(path)
    if len(segments) < 2:
        raise UrlFormatError(url)
    try:
        return RepositoryIdentity(workspace=segments[0], name=segments[1])
    except ValidationError as exc:
        raise UrlFormatError(url) from exc


def from_user_string(spec: str) -> RepositoryIdentity:
    tokens = spec.strip().split("/")
    if len(tokens) < 2:
        raise InvalidRepoSpecError(spec)
    try:
        return RepositoryIdentity(workspace=tokens[0], name=tokens[1])
    except ValidationError as exc:
        raise InvalidRepoSpecError(spec) from exc


def discover(directory: Path, config: AppConfig | None = None) -> RepositoryIdentity:
    config = config or AppConfig()
    collection = parse_local(directory, config)
    remote = select_bitbucket_remote(collection.remotes, config.bitbucket_host)
    if remote is None:
        for broken in collection.malformed:
            if broken.url and url_host(broken.url) == config.bitbucket_host:
                raise broken.error
        raise NoBitbucketRemoteError(directory)
    logger.debug("Using remote %s", remote)
    return from_remote_url(remote.url)


def resolve(source: RepoSource, config: AppConfig | None = None) -> RepositoryIdentity:
    match source:
        case RepoOverride(spec=spec):
            return from_user_string(spec)
        case DiscoveredRepo(directory=directory):
            return discover(directory, config)
    raise TypeError(f"Unsupported repository source: {source!r}")
