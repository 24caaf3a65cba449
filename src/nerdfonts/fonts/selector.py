"""
Font Selector
=============

Turns user input into the list of catalog entries to act on, either from
name fragments given on the command line or from an interactive prompt.
Duplicates are kept and input that matches nothing is dropped.
"""

import logging
from collections.abc import Callable, Iterable, Sequence

import click

from nerdfonts.core.models import FontEntry

logger = logging.getLogger(__name__)


def find_font(fragment: str, catalog: Sequence[FontEntry]) -> FontEntry | None:
    """Get the first entry whose name contains the fragment, ignoring case."""
    needle = fragment.lower()
    for font in catalog:
        if needle in font.name.lower():
            return font
    return None


def select_by_names(fragments: Iterable[str], catalog: Sequence[FontEntry]) -> list[FontEntry]:
    """
    Select fonts matching user supplied name fragments.

    Args:
        fragments: Case-insensitive substrings of catalog names
        catalog: Available fonts

    Returns:
        One entry per matched fragment, in fragment order
    """
    selected = []
    for fragment in fragments:
        font = find_font(fragment, catalog)
        if font is None:
            logger.debug(f"No catalog entry matches '{fragment}'")
            continue
        selected.append(font)
    return selected


def parse_selection(text: str, catalog: Sequence[FontEntry]) -> list[FontEntry]:
    """
    Parse an interactive selection line.

    ``all`` (any case) selects the whole catalog; otherwise the line is a
    comma separated list of 1-based indices.
    """
    text = text.strip()
    if text.lower() == "all":
        return list(catalog)

    selected = []
    for token in text.split(","):
        token = token.strip()
        try:
            index = int(token)
        except ValueError:
            logger.debug(f"Skipping invalid selection '{token}'")
            continue
        if not 1 <= index <= len(catalog):
            logger.debug(f"Skipping out of range selection {index}")
            continue
        selected.append(catalog[index - 1])
    return selected


def prompt_line(text: str) -> str:
    """Read one line from the user. End of input reads as an empty line."""
    try:
        return click.prompt(text, default="", show_default=False, prompt_suffix=" ")
    except click.Abort:
        click.echo()
        return ""


def _prompt_line() -> str:
    return prompt_line(click.style(">", fg="bright_green", bold=True))


def select_interactively(
    catalog: Sequence[FontEntry], read_line: Callable[[], str] | None = None
) -> list[FontEntry]:
    """
    Print the numbered catalog and read a selection from the user.

    Args:
        catalog: Available fonts
        read_line: Input source, defaults to a click prompt on stdin

    Returns:
        Selected fonts in input order
    """
    click.secho("No fonts specified. Available Nerd Fonts:", fg="bright_blue", bold=True)
    for i, font in enumerate(catalog, start=1):
        click.echo(f"  {click.style(str(i), fg='bright_cyan')}. {font}")

    click.secho(
        "\nEnter numbers separated by commas to select fonts, or 'all' to install all:",
        fg="bright_yellow",
    )
    line = (read_line or _prompt_line)()
    return parse_selection(line, catalog)
