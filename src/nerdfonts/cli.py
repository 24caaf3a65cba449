"""
Nerd Font Installer CLI
=======================

Commands to list the font catalog and install fonts into the user font
directory.
"""

import logging
import sys
from collections.abc import Callable
from pathlib import Path

import click
from pydantic import ValidationError

from nerdfonts import __version__
from nerdfonts.core.config import InstallerConfig
from nerdfonts.core.exceptions import ConfigurationError
from nerdfonts.core.models import FontEntry, FontInstallResult, InstallReport
from nerdfonts.fonts.catalog import get_catalog
from nerdfonts.fonts.installer import FontInstaller, InstallProgressCallback
from nerdfonts.fonts.platform import detect_platform
from nerdfonts.fonts.selector import prompt_line, select_by_names, select_interactively

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Setup logging configuration."""
    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)


class ConsoleInstallCallback(InstallProgressCallback):
    """Prints per-font progress and the final summary."""

    def __init__(self, url_for: Callable[[FontEntry], str] | None = None):
        self.url_for = url_for

    def on_font_start(self, font: FontEntry, index: int, total_fonts: int) -> None:
        click.echo(
            f"\n{click.style('INFO', fg='bright_blue', bold=True)} "
            f"[{index}/{total_fonts}] Installing {click.style(font.name, bold=True)}..."
        )
        if self.url_for is not None:
            click.secho(f"  Downloading from: {self.url_for(font)}", dim=True)

    def on_font_complete(self, result: FontInstallResult) -> None:
        name = result.font.name
        if result.success:
            click.echo(
                f"{click.style('✓', fg='bright_green', bold=True)} Successfully installed '{name}'!"
            )
            click.secho(
                f"  Installed {result.file_count} files to: {result.install_dir}", dim=True
            )
        else:
            click.echo(
                f"{click.style('✗', fg='bright_red', bold=True)} Failed to install '{name}': "
                f"{click.style(result.error, fg='red')}",
                err=True,
            )

    def on_complete(self, report: InstallReport) -> None:
        click.echo(
            f"\n{click.style('SUMMARY', fg='bright_blue', bold=True)} "
            f"Installed {report.succeeded}/{report.total} fonts successfully "
            f"({report.summary()})."
        )


def show_simple_font_list(fonts: list[FontEntry]) -> None:
    click.secho("Available Nerd Fonts:", fg="bright_blue", bold=True)
    for i, font in enumerate(fonts, start=1):
        click.echo(f"  {click.style(str(i), fg='bright_cyan')}. {font.name}")


def show_detailed_font_list(fonts: list[FontEntry]) -> None:
    click.secho("Available Nerd Fonts (Detailed):", fg="bright_blue", bold=True)
    for i, font in enumerate(fonts, start=1):
        click.echo(f"\n{click.style(str(i), fg='bright_cyan', bold=True)}. {font.name}")
        click.echo(f"   {click.style('Description', fg='bright_yellow')}: {font.description}")
        click.echo(f"   {click.style('Size', fg='bright_yellow')}: {font.size_mb:.1f} MB")
        click.echo(f"   {click.style('Variants', fg='bright_yellow')}: {', '.join(font.variants)}")


def confirm_install(fonts: list[FontEntry]) -> bool:
    click.secho("\nFonts to install:", fg="bright_blue", bold=True)
    for font in fonts:
        click.echo(f"  • {font}")
    click.echo()
    answer = prompt_line(click.style("Continue with installation? [y/N]:", fg="bright_yellow"))
    return answer.strip().lower().startswith("y")


@click.group()
@click.version_option(__version__, prog_name="nerd-font-installer")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to installer configuration YAML file (optional)",
)
@click.pass_context
def cli(ctx, verbose, config):
    """A CLI tool to list, download, and install Nerd Fonts."""
    setup_logging(verbose)
    try:
        ctx.obj = InstallerConfig.from_env_and_yaml(yaml_path=config)
    except (ConfigurationError, ValidationError) as e:
        logger.exception(f"Invalid configuration: {e}")
        sys.exit(1)


@cli.command(name="list")
@click.option("--details", "-d", is_flag=True, help="Show detailed information about fonts")
def list_fonts(details):
    """List available Nerd Fonts."""
    fonts = get_catalog()
    if details:
        show_detailed_font_list(fonts)
    else:
        show_simple_font_list(fonts)


@cli.command(name="install")
@click.argument("fonts", nargs=-1)
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation prompts")
@click.pass_obj
def install(config, fonts, yes):
    """Install one or more Nerd Fonts."""
    catalog = get_catalog()
    if fonts:
        to_install = select_by_names(fonts, catalog)
    else:
        to_install = select_interactively(catalog)

    if not to_install:
        click.secho("No fonts selected for installation.", fg="yellow")
        return

    if not yes and not confirm_install(to_install):
        click.secho("Installation cancelled.", fg="yellow")
        return

    platform = detect_platform()
    click.echo(f"{click.style('Detected OS:', fg='bright_blue')} {platform.value}")

    installer = FontInstaller(config, platform=platform)
    try:
        callback = ConsoleInstallCallback(installer.downloader.download_url)
        report = installer.install_all(to_install, callback)
    finally:
        installer.close()

    if report.failed:
        logger.warning(f"Failed fonts: {report.failed}")
        for failed in report.failed_results():
            logger.warning(f"  - {failed.font.name}: {failed.error}")


@cli.command(name="update")
def update():
    """Update all installed Nerd Fonts."""
    click.secho("Update functionality not yet implemented.", fg="yellow")


@cli.command(name="remove")
@click.argument("fonts", nargs=-1)
def remove(fonts):
    """Remove installed Nerd Fonts."""
    click.secho("Font removal not yet implemented.", fg="yellow")
    for font in fonts:
        click.echo(f"  Would remove: {font}")


@cli.command(name="info")
def info():
    """Show information about installed fonts."""
    click.secho("Installed font detection not yet implemented.", fg="yellow")


def main():
    """Console script entry point."""
    cli()


if __name__ == "__main__":
    main()
