"""Custom exceptions for file organizer."""


class FileOrganizerError(Exception):
    """Base exception for file organizer errors."""
    pass


class SourceNotFoundError(FileOrganizerError):
    """Raised when the directory to organize does not exist."""
    pass


class FileOperationError(FileOrganizerError):
    """Raised when file operations fail."""
    pass


class ConflictError(FileOperationError):
    """Raised when a file with the same name already exists at the destination."""
    pass


class ConfigurationError(FileOrganizerError):
    """Raised when there's an error in configuration."""
    pass
