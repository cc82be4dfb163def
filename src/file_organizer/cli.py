"""Command line interface for file organizer."""

import sys
import logging
from pathlib import Path
from typing import Optional

import click
from rich.logging import RichHandler
from rich.markup import escape
from rich.prompt import Prompt

from . import __version__
from .core.classifier import lossy_text
from .core.organizer import FileOrganizer
from .models.config import Config, ConflictPolicy, load_config, parse_conflict_policy
from .exceptions import FileOrganizerError
from .reporting import default_console as console, render_operation_stats

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Setup logging with rich handler."""
    level = logging.DEBUG if verbose else logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, console=console)],
    )


def apply_overrides(
    cfg: Config,
    path: str,
    dry_run: Optional[bool] = None,
    on_conflict: Optional[str] = None,
    sort_summary: Optional[bool] = None
) -> Config:
    """Apply command line values on top of a loaded or default config."""
    cfg.source_directory = Path(path)

    if dry_run is not None:
        cfg.dry_run = dry_run
    if on_conflict is not None:
        cfg.on_conflict = parse_conflict_policy(on_conflict)
    if sort_summary is not None:
        cfg.sort_summary = sort_summary

    return cfg


@click.command()
@click.argument('path', required=False)
@click.option(
    '--config',
    'config_path',
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Configuration file path'
)
@click.option(
    '--dry-run',
    is_flag=True,
    default=None,
    help='Show what would be done without making changes'
)
@click.option(
    '--on-conflict',
    type=click.Choice([p.value for p in ConflictPolicy]),
    default=None,
    help='What to do when the destination already has a file with the same name'
)
@click.option(
    '--sort',
    'sort_summary',
    is_flag=True,
    default=None,
    help='Sort extensions and file names in the summary'
)
@click.option(
    '--verbose',
    '-v',
    is_flag=True,
    help='Verbose output'
)
@click.version_option(version=__version__, prog_name='file-organizer')
def main(
    path: Optional[str],
    config_path: Optional[Path],
    dry_run: Optional[bool],
    on_conflict: Optional[str],
    sort_summary: Optional[bool],
    verbose: bool
):
    """Sort the files in PATH into one subdirectory per extension.

    Only the files directly inside PATH are moved; subdirectories are left
    alone. When PATH is omitted you are asked for it.
    """
    setup_logging(verbose)

    console.print("Welcome to File Organizer!", style="bold cyan")

    try:
        cfg = load_config(config_path) if config_path else None
    except FileOrganizerError as e:
        console.print(f"[red]Error creating organizer: {escape(lossy_text(str(e)))}[/red]")
        sys.exit(1)

    if path is None:
        if cfg is not None:
            path = str(cfg.source_directory)
        else:
            try:
                path = Prompt.ask("Enter the directory path to organize", console=console)
            except EOFError:
                console.print("\n[red]Error creating organizer: no directory path given[/red]")
                sys.exit(1)
            path = path.strip()

    try:
        cfg = apply_overrides(cfg or Config(source_directory=Path(path)), path, dry_run, on_conflict, sort_summary)
        organizer = FileOrganizer(path, config=cfg)
    except FileOrganizerError as e:
        console.print(f"[red]Error creating organizer: {escape(lossy_text(str(e)))}[/red]")
        sys.exit(1)

    console.print(f"Organizing files in: {escape(lossy_text(path))}", highlight=False)

    try:
        organizer.organize()
    except FileOrganizerError as e:
        console.print(f"[red]Error organizing files: {escape(lossy_text(str(e)))}[/red]")
        sys.exit(1)
    except Exception as e:
        logger.debug("Unexpected failure while organizing", exc_info=True)
        console.print(f"[red]Error organizing files: unexpected error: {escape(lossy_text(str(e)))}[/red]")
        if verbose:
            import traceback
            console.print(traceback.format_exc(), markup=False)
        sys.exit(1)

    if organizer.dry_run:
        console.print("\n[yellow]Dry run: no files were moved.[/yellow]")
    else:
        console.print("\n[green]Files organized successfully![/green]")

    organizer.print_summary(console)
    render_operation_stats(organizer.get_operation_summary(), console)


if __name__ == '__main__':
    main()
