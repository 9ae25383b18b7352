"""Artifact loading and transaction construction errors."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..exceptions import RegdeployError


@dataclass
class ArtifactError(RegdeployError):
    """Raised when a contract build artifact cannot be read."""

    path: Path
    message: str

    def __post_init__(self) -> None:
        super().__init__(f"{self.message} ({self.path})")


class DeploymentError(RegdeployError):
    """Raised when the deterministic signature cannot produce a valid transaction."""
