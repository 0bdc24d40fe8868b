"""Errors the CLI reports to the user before exiting."""

from pathlib import Path


class BitbucketCliError(Exception):
    """Base error for everything the CLI renders as a message."""


class ConfigNotFoundError(BitbucketCliError):
    """Raised when the repository has no Git config file."""

    def __init__(self, path: Path):
        super().__init__(f"Error while parsing Git config: {path} not found")
        self.path = path


class ConfigUnreadableError(BitbucketCliError):
    """Raised when the Git config file exists but cannot be read."""

    def __init__(self, path: Path, cause: Exception):
        super().__init__(f"Unexpected error while parsing Git config: {cause}")
        self.path = path
        self.cause = cause


class ConfigFormatError(BitbucketCliError):
    """Raised when a remote section is missing required keys."""

    def __init__(self, remote: str, missing: list[str]):
        keys = ", ".join(missing)
        super().__init__(f'Malformed remote "{remote}" in Git config: missing {keys}')
        self.remote = remote
        self.missing = missing


class NoBitbucketRemoteError(BitbucketCliError):
    def __init__(self, directory: Path):
        super().__init__("Project does not appear to be a repository on BitBucket.")
        self.directory = directory


class UrlFormatError(BitbucketCliError):
    def __init__(self, url: str):
        super().__init__(f"Could not parse remote URL: {url}")
        self.url = url


class InvalidRepoSpecError(BitbucketCliError):
    def __init__(self, spec: str):
        super().__init__(f'Invalid repository "{spec}": expected WORKSPACE/REPO')
        self.spec = spec


class BrowserLaunchError(BitbucketCliError):
    def __init__(self, url: str):
        super().__init__(f"Could not open {url} in a browser")
        self.url = url
