"""Data models for file organizer."""

from .config import Config, ConflictPolicy

__all__ = ["Config", "ConflictPolicy"]
