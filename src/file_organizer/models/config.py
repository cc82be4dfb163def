"""Configuration model for file organizer."""

from pathlib import Path
from typing import Any, Dict
from enum import Enum
import json
from dataclasses import dataclass, field, fields

from ..exceptions import ConfigurationError


class ConflictPolicy(Enum):
    """What to do when the destination already holds a file with the same name."""
    FAIL = "fail"
    RENAME = "rename"
    OVERWRITE = "overwrite"
    SKIP = "skip"


@dataclass
class Config:
    """Main configuration model."""
    source_directory: Path
    unknown_label: str = "unknown"
    on_conflict: ConflictPolicy = ConflictPolicy.FAIL
    dry_run: bool = False
    sort_summary: bool = False

    def __post_init__(self):
        self.source_directory = Path(self.source_directory)
        if not isinstance(self.on_conflict, ConflictPolicy):
            self.on_conflict = parse_conflict_policy(self.on_conflict)
        if self.unknown_label in ("", ".", "..") or "/" in self.unknown_label or "\\" in self.unknown_label:
            raise ConfigurationError(f"Invalid unknown label: {self.unknown_label!r}")

    @classmethod
    def default(cls) -> "Config":
        """Create a default configuration for the current directory."""
        return cls(source_directory=Path("."))


def parse_conflict_policy(value: Any) -> ConflictPolicy:
    """Turn a policy name such as ``"rename"`` into a ConflictPolicy."""
    try:
        return ConflictPolicy(str(value).lower())
    except ValueError:
        choices = ", ".join(p.value for p in ConflictPolicy)
        raise ConfigurationError(f"Unknown conflict policy {value!r} (expected one of: {choices})")


def _config_to_dict(config: Config) -> Dict[str, Any]:
    result = {}
    for f in fields(config):
        value = getattr(config, f.name)
        if isinstance(value, Path):
            value = str(value)
        elif isinstance(value, Enum):
            value = value.value
        result[f.name] = value
    return result


def load_config(config_path: Path) -> Config:
    """Load configuration from JSON file."""
    try:
        with open(config_path, 'r') as f:
            config_data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Cannot read config file {config_path}: {e}") from e

    if not isinstance(config_data, dict):
        raise ConfigurationError(f"Config file {config_path} must contain a JSON object")

    known = {f.name for f in fields(Config)}
    unknown = set(config_data) - known
    if unknown:
        raise ConfigurationError(f"Unknown config keys: {', '.join(sorted(unknown))}")
    if 'source_directory' not in config_data:
        config_data['source_directory'] = "."

    return Config(**config_data)


def save_config(config: Config, config_path: Path) -> None:
    """Save configuration to JSON file."""
    with open(config_path, 'w') as f:
        json.dump(_config_to_dict(config), f, indent=2)
