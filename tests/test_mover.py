"""Tests for file mover functionality."""

import os
import pytest
from pathlib import Path
from unittest.mock import patch

from file_organizer.core.mover import FileMover, MoveRecord
from file_organizer.models.config import ConflictPolicy
from file_organizer.exceptions import ConflictError, FileOperationError


@pytest.fixture
def source_file(tmp_path):
    """Create a sample file to move."""
    file_path = tmp_path / "test.txt"
    file_path.write_text("new data")
    return file_path


@pytest.fixture
def target_dir(tmp_path):
    """Create the destination directory."""
    directory = tmp_path / "txt"
    directory.mkdir()
    return directory


class TestFileMover:
    """Test FileMover class."""

    def test_initialization_default(self):
        """Test default initialization."""
        mover = FileMover()

        assert mover.on_conflict == ConflictPolicy.FAIL
        assert mover.dry_run is False
        assert mover.operations == []
        assert mover.directories_created == []

    def test_move_file(self, source_file, target_dir):
        """Test moving a file."""
        mover = FileMover()

        record = mover.move_file(source_file, target_dir, "txt")

        assert record == MoveRecord(source=source_file, target=target_dir / "test.txt", label="txt")
        assert record.name == "test.txt"
        assert (target_dir / "test.txt").read_text() == "new data"
        assert not source_file.exists()
        assert mover.operations == [record]

    def test_move_file_keeps_name_case(self, tmp_path, target_dir):
        """Test the file name is never changed."""
        source = tmp_path / "REPORT.TXT"
        source.write_text("x")

        record = FileMover().move_file(source, target_dir, "txt")

        assert record.target == target_dir / "REPORT.TXT"
        assert record.target.exists()

    def test_move_file_rename_failure(self, source_file, target_dir):
        """Test rename errors are wrapped in FileOperationError."""
        mover = FileMover()

        with patch.object(os, 'rename', side_effect=PermissionError("denied")):
            with pytest.raises(FileOperationError, match="Failed to move") as exc_info:
                mover.move_file(source_file, target_dir, "txt")

        assert isinstance(exc_info.value.__cause__, PermissionError)
        assert source_file.exists()
        assert mover.operations == []

    def test_move_missing_source(self, tmp_path, target_dir):
        """Test moving a file that vanished."""
        with pytest.raises(FileOperationError):
            FileMover().move_file(tmp_path / "gone.txt", target_dir, "txt")


class TestConflictPolicies:
    """Test handling of an existing file at the destination."""

    @pytest.fixture
    def existing(self, target_dir):
        existing = target_dir / "test.txt"
        existing.write_text("original data")
        return existing

    def test_fail(self, source_file, target_dir, existing):
        """Test the default policy raises ConflictError and moves nothing."""
        mover = FileMover()

        with pytest.raises(ConflictError, match="already exists"):
            mover.move_file(source_file, target_dir, "txt")

        assert source_file.exists()
        assert existing.read_text() == "original data"

    def test_conflict_is_file_operation_error(self, source_file, target_dir, existing):
        """Test ConflictError is caught like any other Io failure."""
        with pytest.raises(FileOperationError):
            FileMover().move_file(source_file, target_dir, "txt")

    def test_rename(self, source_file, target_dir, existing):
        """Test duplicate filename resolution."""
        mover = FileMover(on_conflict=ConflictPolicy.RENAME)

        record = mover.move_file(source_file, target_dir, "txt")

        assert record.name == "test (1).txt"
        assert record.target.read_text() == "new data"
        assert existing.read_text() == "original data"

    def test_rename_skips_taken_numbers(self, source_file, target_dir, existing):
        """Test the counter keeps going until a free name is found."""
        (target_dir / "test (1).txt").write_text("one")
        (target_dir / "test (2).txt").write_text("two")

        record = FileMover(on_conflict=ConflictPolicy.RENAME).move_file(source_file, target_dir, "txt")

        assert record.name == "test (3).txt"

    def test_overwrite(self, source_file, target_dir, existing):
        """Test the existing file is replaced."""
        mover = FileMover(on_conflict=ConflictPolicy.OVERWRITE)

        record = mover.move_file(source_file, target_dir, "txt")

        assert record.target == existing
        assert existing.read_text() == "new data"
        assert not source_file.exists()

    def test_skip(self, source_file, target_dir, existing):
        """Test the source file is left in place."""
        mover = FileMover(on_conflict=ConflictPolicy.SKIP)

        assert mover.move_file(source_file, target_dir, "txt") is None
        assert source_file.exists()
        assert existing.read_text() == "original data"
        assert mover.operations == []


class TestEnsureDirectory:
    """Test destination directory creation."""

    def test_creates_directory(self, tmp_path):
        """Test a missing directory is created."""
        mover = FileMover()
        directory = tmp_path / "jpg"

        assert mover.ensure_directory(directory) is True
        assert directory.is_dir()
        assert mover.directories_created == [directory]

    def test_existing_directory(self, target_dir):
        """Test an existing directory is reused."""
        mover = FileMover()

        assert mover.ensure_directory(target_dir) is False
        assert mover.directories_created == []

    def test_name_taken_by_file(self, tmp_path):
        """Test a file in the way of the directory is an error."""
        blocker = tmp_path / "txt"
        blocker.write_text("not a directory")

        with pytest.raises(FileOperationError, match="already exists"):
            FileMover().ensure_directory(blocker)

        assert blocker.is_file()

    def test_single_level_only(self, tmp_path):
        """Test missing parents are not created."""
        with pytest.raises(FileOperationError, match="Failed to create directory"):
            FileMover().ensure_directory(tmp_path / "missing" / "txt")

    def test_mkdir_failure(self, tmp_path):
        """Test mkdir errors are wrapped."""
        with patch.object(Path, 'mkdir', side_effect=PermissionError("denied")):
            with pytest.raises(FileOperationError) as exc_info:
                FileMover().ensure_directory(tmp_path / "txt")

        assert isinstance(exc_info.value.__cause__, PermissionError)


class TestDryRun:
    """Test planning without touching the disk."""

    def test_nothing_changes(self, source_file, tmp_path):
        """Test no directory is created and no file is moved."""
        mover = FileMover(dry_run=True)
        directory = tmp_path / "txt"

        assert mover.ensure_directory(directory) is True
        record = mover.move_file(source_file, directory, "txt")

        assert record.target == directory / "test.txt"
        assert not directory.exists()
        assert source_file.exists()

    def test_directory_planned_once(self, tmp_path):
        """Test a planned directory is only counted once."""
        mover = FileMover(dry_run=True)
        directory = tmp_path / "txt"

        mover.ensure_directory(directory)
        mover.ensure_directory(directory)

        assert mover.directories_created == [directory]

    def test_conflict_detected(self, source_file, target_dir):
        """Test conflicts with files on disk are still reported."""
        (target_dir / "test.txt").write_text("original data")

        with pytest.raises(ConflictError):
            FileMover(dry_run=True).move_file(source_file, target_dir, "txt")

    def test_planned_source_frees_its_name(self, tmp_path):
        """Test a destination blocked only by a file planned to move away is free."""
        blocker = tmp_path / "txt"
        blocker.write_text("no extension")
        mover = FileMover(dry_run=True)

        mover.ensure_directory(tmp_path / "unknown")
        mover.move_file(blocker, tmp_path / "unknown", "unknown")

        assert mover.ensure_directory(blocker) is True
        assert blocker.is_file()

    def test_unplanned_file_still_blocks(self, tmp_path):
        """Test a blocking file that is not planned to move is still reported."""
        (tmp_path / "txt").write_text("no extension")

        with pytest.raises(FileOperationError, match="already exists"):
            FileMover(dry_run=True).ensure_directory(tmp_path / "txt")

    def test_rename_accounts_for_planned_targets(self, tmp_path, target_dir):
        """Test two planned moves never share a target name."""
        (target_dir / "a.txt").write_text("existing")
        first = tmp_path / "a.txt"
        second = tmp_path / "a (1).txt"
        first.write_text("1")
        second.write_text("2")
        mover = FileMover(on_conflict=ConflictPolicy.RENAME, dry_run=True)

        one = mover.move_file(first, target_dir, "txt")
        two = mover.move_file(second, target_dir, "txt")

        assert one.name == "a (1).txt"
        assert two.name == "a (1) (1).txt"


class TestOperationSummary:
    """Test get_operation_summary."""

    def test_summary(self, tmp_path):
        """Test totals per label."""
        mover = FileMover()
        for name in ["a.txt", "b.txt", "c.jpg"]:
            (tmp_path / name).write_text(name)

        for name, label in [("a.txt", "txt"), ("b.txt", "txt"), ("c.jpg", "jpg")]:
            directory = tmp_path / label
            mover.ensure_directory(directory)
            mover.move_file(tmp_path / name, directory, label)

        summary = mover.get_operation_summary()

        assert summary == {
            'total_files': 3,
            'directories_created': 2,
            'by_label': {'txt': 2, 'jpg': 1},
            'dry_run': False
        }

    def test_reset(self, source_file, target_dir):
        """Test reset forgets previous operations."""
        mover = FileMover()
        mover.move_file(source_file, target_dir, "txt")

        mover.reset()

        assert mover.operations == []
        assert mover.get_operation_summary()['total_files'] == 0
