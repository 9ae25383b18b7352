"""Custom exception hierarchy for regdeploy."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


class RegdeployError(Exception):
    """Base error for the regdeploy package."""


class ConfigError(RegdeployError):
    """Raised when a configuration file fails validation."""

    def __init__(self, path: Path, message: str):
        self.path = Path(path)
        self.message = message
        super().__init__(f"{self.path.name}: {self.message}")


@dataclass
class ManifestError(RegdeployError):
    """Raised when a package manifest cannot be read or lacks the version field."""

    path: Path
    message: str

    def __post_init__(self) -> None:
        super().__init__(f"{self.message} ({self.path})")
