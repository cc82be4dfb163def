"""Console presentation of organization results."""

from typing import Dict, List, Optional, Tuple

from rich.console import Console
from rich.markup import escape

from .core.classifier import lossy_text

SUMMARY_TITLE = "File Organization Summary:"
SUMMARY_DIVIDER = "-" * 25

default_console = Console(soft_wrap=True)


def summary_sections(organized_files: Dict[str, List[str]], sort: bool = False) -> List[Tuple[str, List[str]]]:
    """
    Return ``(label, names)`` pairs in display order.

    Without ``sort`` the mapping's own order is kept, which is the order the
    labels were first seen during the scan. Sorting never touches the
    mapping itself.
    """
    if not sort:
        return [(label, list(names)) for label, names in organized_files.items()]
    return [(label, sorted(organized_files[label])) for label in sorted(organized_files)]


def render_summary(
    organized_files: Dict[str, List[str]],
    console: Optional[Console] = None,
    sort: bool = False
) -> None:
    """Print the summary header followed by one section per extension label."""
    out = console or default_console

    out.print()
    out.print(SUMMARY_TITLE, style="bold")
    out.print(SUMMARY_DIVIDER)

    for label, names in summary_sections(organized_files, sort=sort):
        out.print()
        out.print(f"[cyan].{escape(lossy_text(label))}[/cyan] files:", highlight=False)
        for name in names:
            out.print(f"  - {escape(lossy_text(name))}", highlight=False)


def render_operation_stats(stats: Dict, console: Optional[Console] = None) -> None:
    """Print the totals from ``FileMover.get_operation_summary``."""
    out = console or default_console
    verb = "Would move" if stats.get('dry_run') else "Moved"
    out.print(
        f"\n{verb} {stats['total_files']} files, "
        f"{stats['directories_created']} new directories",
        style="dim",
        highlight=False
    )
