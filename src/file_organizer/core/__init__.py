"""Core file organizer modules."""

from .classifier import UNKNOWN_LABEL, extension_label, lossy_text
from .mover import FileMover, MoveRecord
from .organizer import FileOrganizer

__all__ = [
    'UNKNOWN_LABEL',
    'extension_label',
    'lossy_text',
    'FileMover',
    'MoveRecord',
    'FileOrganizer'
]
