"""Compare version strings across package manifests."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from .exceptions import ManifestError


@dataclass
class VersionSyncResult:
    primary: Path
    secondary: Path
    primary_version: str
    secondary_version: str

    @property
    def in_sync(self) -> bool:
        return self.primary_version == self.secondary_version

    def as_dict(self) -> Dict[str, Any]:
        return {
            "primary": str(self.primary),
            "secondary": str(self.secondary),
            "primary_version": self.primary_version,
            "secondary_version": self.secondary_version,
            "in_sync": self.in_sync,
        }


def load_manifest_version(path: Path, field: str = "version") -> str:
    """Return the *field* string from the JSON manifest at *path*."""

    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ManifestError(path=path, message="manifest not found") from exc
    except json.JSONDecodeError as exc:
        raise ManifestError(path=path, message=f"invalid JSON ({exc})") from exc
    except OSError as exc:
        raise ManifestError(path=path, message=f"failed to read manifest: {exc}") from exc

    if not isinstance(data, dict) or field not in data:
        raise ManifestError(path=path, message=f"missing '{field}' field")
    value = data[field]
    if not isinstance(value, str):
        raise ManifestError(path=path, message=f"'{field}' must be a string")
    return value


def check_versions_in_sync(
    primary: Path, secondary: Path, field: str = "version"
) -> VersionSyncResult:
    return VersionSyncResult(
        primary=Path(primary),
        secondary=Path(secondary),
        primary_version=load_manifest_version(primary, field),
        secondary_version=load_manifest_version(secondary, field),
    )
