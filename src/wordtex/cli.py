"""wordtex CLI entrypoint."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TextIO

import click

from wordtex.parser.base import ConversionError
from wordtex.parser.html_parser import WordHTMLParser
from wordtex.parser.lists import ListPolicy
from wordtex.renderer.latex_renderer import LaTeXRenderer


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("input_file", type=click.File("r", encoding="utf-8", errors="ignore"))
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path), default=None, help="Output .tex path (default: stdout)")
@click.option("--standalone", is_flag=True, help="Wrap the fragment in a compilable document")
@click.option("--title", type=str, default=None, help="Document title (with --standalone)")
@click.option(
    "--list-policy",
    type=click.Choice([policy.value for policy in ListPolicy], case_sensitive=False),
    default=ListPolicy.IGNORE.value,
    show_default=True,
    help="How to report bullet list paragraphs that arrive out of order",
)
@click.option("--verbose", "-v", is_flag=True, help="Log conversion details")
def main(
    input_file: TextIO,
    output: Path | None,
    standalone: bool,
    title: str | None,
    list_policy: str,
    verbose: bool,
) -> None:
    """Convert Word clipboard HTML (INPUT_FILE, or - for stdin) into LaTeX."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format="%(levelname)s: %(message)s")

    parser = WordHTMLParser(list_policy=list_policy.lower())
    try:
        latex = parser.convert(input_file.read())
    except ConversionError as exc:
        raise click.ClickException(str(exc)) from exc

    if standalone:
        latex = LaTeXRenderer().render(latex, title=title)

    if output is None:
        click.echo(latex)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(latex + "\n", encoding="utf-8")
    click.echo(f"Written: {output}", err=True)


if __name__ == "__main__":  # pragma: no cover
    main()
