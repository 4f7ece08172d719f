"""minimalcss CLI entry point."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from minimalcss import __version__
from minimalcss.errors import MinimalCSSError
from minimalcss.minimize import minimize
from minimalcss.options import Options


@click.command()
@click.version_option(version=__version__, prog_name="minimalcss")
@click.argument("markup", type=click.Path(exists=True, dir_okay=False))
@click.argument("stylesheet", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "-o", "--output", type=click.Path(dir_okay=False), help="Write CSS here instead of stdout"
)
@click.option("--stats/--no-stats", default=False, help="Prepend a size stats comment")
@click.option(
    "--remove-exclamation-comments",
    is_flag=True,
    default=False,
    help="Also strip /*! ... */ comments",
)
@click.option("--parser", "markup_parser", default="html.parser", help="BeautifulSoup tree builder")
@click.option("--compress/--no-compress", default=True, help="Compress the output")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log progress to stderr")
def cli(
    markup: str,
    stylesheet: str,
    output: str | None,
    stats: bool,
    remove_exclamation_comments: bool,
    markup_parser: str,
    compress: bool,
    verbose: bool,
) -> None:
    """Reduce STYLESHEET to the rules that can apply to MARKUP."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    options = Options(
        include_stats_comment=stats,
        remove_exclamation_comments=remove_exclamation_comments,
        markup_parser=markup_parser,
        compress=compress,
    )
    try:
        result = minimize(
            Path(markup).read_text(encoding="utf-8"),
            Path(stylesheet).read_text(encoding="utf-8"),
            options,
        )
    except MinimalCSSError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if output:
        Path(output).write_text(result.final_css, encoding="utf-8")
        click.echo(
            f"Wrote {output} ({result.size_before} -> {result.size_after} characters)",
            err=True,
        )
    else:
        click.echo(result.final_css)
