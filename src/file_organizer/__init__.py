"""File Organizer

A tool for sorting the files of a directory into one subdirectory per
file extension.
"""

__version__ = "0.1.0"

from .core.classifier import UNKNOWN_LABEL, extension_label
from .core.mover import FileMover, MoveRecord
from .core.organizer import FileOrganizer
from .models.config import Config, ConflictPolicy, load_config, save_config
from .exceptions import (
    FileOrganizerError,
    SourceNotFoundError,
    FileOperationError,
    ConflictError,
    ConfigurationError
)

__all__ = [
    # Core components
    "FileOrganizer",
    "FileMover",
    "MoveRecord",
    "extension_label",
    "UNKNOWN_LABEL",

    # Configuration
    "Config",
    "ConflictPolicy",
    "load_config",
    "save_config",

    # Errors
    "FileOrganizerError",
    "SourceNotFoundError",
    "FileOperationError",
    "ConflictError",
    "ConfigurationError"
]
