"""CLI for link2code."""

import os
import stat
import sys

import click
import structlog

from link2code.config.logging import configure_logging
from link2code.config.settings import get_settings
from link2code.core.exceptions import ConfigurationError
from link2code.core.models.link import BatchResult
from link2code.core.models.reference import LinkMode
from link2code.services.linking import LinkService

logger = structlog.get_logger(__name__)


def _within_pipeline() -> bool:
    """Whether stdin is a pipe, e.g. ``rg -n term | link2code``."""
    try:
        mode = os.fstat(sys.stdin.fileno()).st_mode
    except (AttributeError, OSError, ValueError):
        return False
    return stat.S_ISFIFO(mode)


def _read_tokens(stream) -> list[str]:
    return [line.strip() for line in stream.read().splitlines() if line.strip()]


@click.command(
    epilog="""\b
Examples:
  link2code Makefile
  link2code Makefile:5-10
  link2code repo1/Makefile repo2/cmd/my-tool.go repo3/README.md:25-30
  rg 'search term' -n | link2code""",
)
@click.argument("files", nargs=-1)
@click.option(
    "--colon-filenames",
    is_flag=True,
    help="Use this if filenames or directories contain ':' - otherwise parsing will fail.",
)
@click.option("--blame", is_flag=True, help="Return direct links to the blame view.")
@click.option(
    "--workers",
    "-j",
    type=click.IntRange(min=1),
    default=None,
    help="Resolve with N parallel workers (default: LINK2CODE_WORKERS or 1).",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.pass_context
def cli(
    ctx: click.Context,
    files: tuple[str, ...],
    colon_filenames: bool,
    blame: bool,
    workers: int | None,
    verbose: bool,
) -> None:
    """Craft direct URLs to source on GitHub.

    For every file given, local revisions are compared to those in origin.
    The most recent common revision is used for the direct link. Line
    numbers, and ranges, are supported by appending ":start[-end]" to the
    filepath.

    Files in trees that are not git repositories are skipped.
    """
    try:
        settings = get_settings()
    except ConfigurationError as e:
        raise click.UsageError(e.message, ctx=ctx) from e

    configure_logging(
        log_level="DEBUG" if verbose else settings.log_level,
        json_logs=settings.json_logs,
    )

    tokens = list(files)
    if not tokens and _within_pipeline():
        tokens = _read_tokens(sys.stdin)

    if not tokens:
        click.echo(ctx.get_help())
        return

    mode = LinkMode.BLAME if blame else LinkMode.TREE
    service = LinkService(settings=settings)
    results = []
    for result in service.iter_links(
        tokens,
        mode=mode,
        colon_filenames=colon_filenames,
        workers=workers,
    ):
        results.append(result)
        if result.ok:
            click.echo(result.url)
        else:
            click.secho(f"{result.token}: {result.error}", fg="yellow", err=True)

    if not BatchResult(results=results).succeeded:
        logger.debug("No tokens resolved", count=len(tokens))
        sys.exit(1)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
