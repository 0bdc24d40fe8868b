import logging
import webbrowser
from importlib import metadata
from pathlib import Path
from typing import Annotated

import typer

from bitbucket_cli.config import AppConfig
from bitbucket_cli.errors import BitbucketCliError, BrowserLaunchError
from bitbucket_cli.models import BrowseTarget, DiscoveredRepo, RepoOverride, RepoSource
from bitbucket_cli.services.browse import target_url
from bitbucket_cli.services.repository import resolve

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="An unofficial command-line tool for working with BitBucket.",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if not value:
        return
    try:
        version = metadata.version("bitbucket-cli")
    except metadata.PackageNotFoundError:
        version = "0.0.0"
    typer.echo(f"bb {version}")
    raise typer.Exit()


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log how the repository is resolved")
    ] = False,
    version: Annotated[
        bool,
        typer.Option("--version", "-V", callback=_version_callback, is_eager=True, help="Show the version"),
    ] = False,
) -> None:
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)


def open_in_browser(url: str) -> None:
    try:
        opened = webbrowser.open(url, new=2)
    except webbrowser.Error as exc:
        raise BrowserLaunchError(url) from exc
    if not opened:
        raise BrowserLaunchError(url)


def _fail(exc: BitbucketCliError) -> typer.Exit:
    typer.echo(f"Error: {exc}", err=True)
    return typer.Exit(code=1)


@app.command("browse")
def browse(
    branch: Annotated[
        str | None, typer.Option("--branch", "-b", help="Open the page of this branch")
    ] = None,
    commit: Annotated[
        str | None, typer.Option("--commit", "-c", help="Open the source view at this commit")
    ] = None,
    no_browser: Annotated[
        bool, typer.Option("--no-browser", "-n", help="Print the URL instead of opening it")
    ] = False,
    repo: Annotated[
        str | None,
        typer.Option("--repo", "-r", help="WORKSPACE/REPO to open instead of the current directory's"),
    ] = None,
    settings: Annotated[
        str | None, typer.Option("--settings", "-s", help="Reserved, currently ignored")
    ] = None,
) -> None:
    """Open the BitBucket page of the current repository."""
    config = AppConfig()
    if settings is not None:
        logger.warning("--settings is not supported yet and was ignored")

    source: RepoSource
    if repo is not None:
        source = RepoOverride(spec=repo)
    else:
        source = DiscoveredRepo(directory=Path.cwd())
    try:
        identity = resolve(source, config)
        url = target_url(BrowseTarget(identity=identity, branch=branch, commit=commit), config)
        if no_browser:
            typer.echo(url)
            return
        logger.info("Opening %s", url)
        open_in_browser(url)
    except BitbucketCliError as exc:
        raise _fail(exc) from exc


@app.command("clone")
def clone(remote: str) -> None:
    """Clone a BitBucket repository (not implemented yet)."""
    typer.echo(f"Calling clone for remote {remote}")


if __name__ == "__main__":
    app()
