"""CLI entry point for repo-info."""

import argparse
import logging
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.progress import Progress

from repo_info import __version__
from repo_info.exceptions import RepoInfoError
from repo_info.fetcher import GitHubFetcher
from repo_info.models import Repository, RepositoryRef
from repo_info.render import render_info, render_languages
from repo_info.terminal import terminal_width

ERROR_MESSAGE = "Sorry, Can't find what you are looking for.\nError : {error}"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="repo-info",
        description="Get info about the languages used in a GitHub repository.",
    )
    parser.add_argument("repository", help="Repository in format owner/repository")
    parser.add_argument(
        "-V", "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def _configure_logging(console: Console) -> None:
    """Route package log records to stderr.

    Fetch failures are reported by main() itself, so only ERROR and above
    get through.
    """
    logger = logging.getLogger("repo_info")
    logger.handlers[:] = [RichHandler(console=console, show_path=False)]
    logger.setLevel(logging.ERROR)


def _fetch(ref: RepositoryRef, err_console: Console) -> Repository:
    """Run both API calls behind a transient two-step progress bar."""
    with Progress(
        console=err_console,
        transient=True,
        auto_refresh=False,
        disable=not err_console.is_terminal,
    ) as progress:
        task = progress.add_task(f"Fetching {ref.full_name}", total=2)
        with GitHubFetcher() as fetcher:
            return fetcher.fetch_repository(
                ref, on_progress=lambda: progress.update(task, advance=1, refresh=True)
            )


def main(argv: Optional[list[str]] = None) -> int:
    """Fetch the repository and print its summary. Returns the exit code."""
    args = build_parser().parse_args(argv)

    console = Console(soft_wrap=True, highlight=False)
    err_console = Console(stderr=True, highlight=False)
    _configure_logging(err_console)

    try:
        ref = RepositoryRef.parse(args.repository)
        repository = _fetch(ref, err_console)
    except RepoInfoError as e:
        err_console.print(
            ERROR_MESSAGE.format(error=e), markup=False, emoji=False, soft_wrap=True
        )
        return 1

    width = terminal_width()
    for line in render_info(repository.info, width):
        console.print(line)
    for line in render_languages(repository.languages, width):
        console.print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
