"""File operations for moving files into their extension directories."""

import os
import logging
from pathlib import Path
from typing import Dict, List, Optional, Set
from dataclasses import dataclass

from ..exceptions import ConflictError, FileOperationError
from ..models.config import ConflictPolicy

logger = logging.getLogger(__name__)


@dataclass
class MoveRecord:
    """A single move, performed or planned."""
    source: Path
    target: Path
    label: str

    @property
    def name(self) -> str:
        return self.target.name


class FileMover:
    """Create destination directories and rename files into them."""

    def __init__(self, on_conflict: ConflictPolicy = ConflictPolicy.FAIL, dry_run: bool = False):
        self.on_conflict = on_conflict
        self.dry_run = dry_run
        self.operations: List[MoveRecord] = []
        self.directories_created: List[Path] = []
        self._planned: Set[Path] = set()
        self._vacated: Set[Path] = set()

    def reset(self) -> None:
        """Forget everything recorded by a previous run."""
        self.operations = []
        self.directories_created = []
        self._planned = set()
        self._vacated = set()

    def ensure_directory(self, directory: Path) -> bool:
        """
        Make sure ``directory`` exists, creating a single level if needed.

        Returns:
            True if the directory was (or, in dry run, would be) created

        Raises:
            FileOperationError: If the name is taken by something that is not
                a directory or the directory cannot be created
        """
        if directory.is_dir():
            return False

        if self._on_disk(directory):
            raise FileOperationError(
                f"Cannot create directory {directory}: a file with that name already exists"
            )

        if directory in self._planned:
            return False

        if self.dry_run:
            self._planned.add(directory)
        else:
            try:
                directory.mkdir()
            except OSError as e:
                raise FileOperationError(f"Failed to create directory {directory}: {e}") from e
            logger.debug(f"Created directory {directory}")

        self.directories_created.append(directory)
        return True

    def move_file(self, source: Path, target_dir: Path, label: str) -> Optional[MoveRecord]:
        """
        Move ``source`` into ``target_dir`` keeping its name.

        Returns:
            The record of the move, or None when the file was skipped
            because of a name conflict

        Raises:
            ConflictError: If the target exists and the policy is ``fail``
            FileOperationError: If the rename itself fails
        """
        target_path = target_dir / source.name
        replace = False

        if self._target_taken(target_path):
            if self.on_conflict == ConflictPolicy.FAIL:
                raise ConflictError(f"Cannot move {source}: {target_path} already exists")
            elif self.on_conflict == ConflictPolicy.SKIP:
                logger.warning(f"Skipping {source.name}: {target_path} already exists")
                return None
            elif self.on_conflict == ConflictPolicy.RENAME:
                target_path = self._resolve_duplicate(target_path)
            else:
                replace = True

        if self.dry_run:
            self._planned.add(target_path)
            self._vacated.add(source)
        else:
            try:
                if replace:
                    os.replace(source, target_path)
                else:
                    os.rename(source, target_path)
            except OSError as e:
                raise FileOperationError(f"Failed to move {source} to {target_path}: {e}") from e

        record = MoveRecord(source=source, target=target_path, label=label)
        self.operations.append(record)
        logger.debug(f"{'Would move' if self.dry_run else 'Moved'} {source} -> {target_path}")
        return record

    def get_operation_summary(self) -> Dict:
        """Get summary of performed operations."""
        by_label: Dict[str, int] = {}
        for op in self.operations:
            by_label[op.label] = by_label.get(op.label, 0) + 1

        return {
            'total_files': len(self.operations),
            'directories_created': len(self.directories_created),
            'by_label': by_label,
            'dry_run': self.dry_run
        }

    def _on_disk(self, path: Path) -> bool:
        # In dry run a source already planned to move counts as gone.
        return os.path.lexists(path) and path not in self._vacated

    def _target_taken(self, target_path: Path) -> bool:
        return self._on_disk(target_path) or target_path in self._planned

    def _resolve_duplicate(self, target_path: Path) -> Path:
        """Resolve duplicate filenames by adding a number."""
        base = target_path.stem
        ext = target_path.suffix
        parent = target_path.parent
        counter = 1

        while True:
            new_path = parent / f"{base} ({counter}){ext}"
            if not self._target_taken(new_path):
                return new_path
            counter += 1
