"""Main orchestration logic for file organization."""

import os
import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

from ..models.config import Config
from ..exceptions import FileOperationError, SourceNotFoundError
from .classifier import extension_label, lossy_text
from .mover import FileMover, MoveRecord
from ..reporting import render_summary

logger = logging.getLogger(__name__)


class FileOrganizer:
    """Move the files of a directory into one subdirectory per extension."""

    def __init__(self, source_dir: Union[str, Path], config: Optional[Config] = None):
        if not os.path.exists(source_dir):
            raise SourceNotFoundError(f"Source directory does not exist: {str(source_dir)!r}")

        self.source_dir = Path(source_dir)
        self.config = config or Config(source_directory=self.source_dir)
        self.organized_files: Dict[str, List[str]] = {}
        self.file_mover = FileMover(
            on_conflict=self.config.on_conflict,
            dry_run=self.config.dry_run
        )

    @classmethod
    def from_config(cls, config: Config) -> "FileOrganizer":
        """Create an organizer for ``config.source_directory``."""
        return cls(config.source_directory, config=config)

    @property
    def dry_run(self) -> bool:
        return self.config.dry_run

    @property
    def moves(self) -> List[MoveRecord]:
        """Moves performed (or planned, in dry run) by the last run."""
        return list(self.file_mover.operations)

    def organize(self) -> Dict[str, List[str]]:
        """
        Move every direct child file of the source directory into
        ``<source>/<extension>/``.

        Directories are skipped. The directory listing is read once up
        front, so directories created during the run are never visited.
        The run is not transactional: the first failure aborts it and
        files already moved stay where they are.

        Returns:
            Mapping of extension label to the file names moved under it,
            in the order they were encountered

        Raises:
            FileOperationError: If the directory cannot be read or any
                directory creation or move fails
        """
        self.organized_files = {}
        self.file_mover.reset()

        entries = self._snapshot()
        logger.info(f"Organizing {len(entries)} entries in {self.source_dir}")

        for entry in entries:
            path = Path(entry.path)

            try:
                is_dir = entry.is_dir()
            except OSError as e:
                raise FileOperationError(f"Cannot access {path}: {e}") from e

            if is_dir:
                logger.debug(f"Skipping directory {path.name}")
                continue

            label = extension_label(entry.name, self.config.unknown_label)
            target_dir = self.source_dir / label

            self.file_mover.ensure_directory(target_dir)
            record = self.file_mover.move_file(path, target_dir, label)
            if record is None:
                continue

            self.organized_files.setdefault(label, []).append(lossy_text(record.name))

        logger.info(
            f"{'Planned' if self.dry_run else 'Moved'} {len(self.file_mover.operations)} files "
            f"into {len(self.organized_files)} extension directories"
        )
        return self.organized_files

    def _snapshot(self) -> List[os.DirEntry]:
        """Read the directory listing once, in enumeration order."""
        try:
            with os.scandir(self.source_dir) as it:
                return list(it)
        except OSError as e:
            raise FileOperationError(f"Cannot read directory {self.source_dir}: {e}") from e

    def print_summary(self, console=None) -> None:
        """Print the files moved by the last run, grouped by extension."""
        render_summary(
            self.organized_files,
            console=console,
            sort=self.config.sort_summary
        )

    def get_operation_summary(self) -> Dict:
        """Get a summary of the operations performed."""
        return self.file_mover.get_operation_summary()
