"""Load compiled contract artifacts."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError

from ..config import format_validation_errors
from .exceptions import ArtifactError
from .models import ContractArtifact


def load_artifact(path: Path) -> ContractArtifact:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ArtifactError(path=path, message="artifact not found") from exc
    except OSError as exc:
        raise ArtifactError(path=path, message=f"failed to read artifact: {exc}") from exc

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ArtifactError(path=path, message=f"invalid JSON ({exc})") from exc

    try:
        return ContractArtifact.model_validate(data)
    except ValidationError as exc:
        details = format_validation_errors(exc)
        raise ArtifactError(path=path, message=f"invalid artifact ({details})") from exc
