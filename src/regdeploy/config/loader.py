"""Functions for reading and validating the tool configuration."""

from __future__ import annotations

from pathlib import Path

try:  # Python 3.11+
    import tomllib
except ModuleNotFoundError:  # pragma: no cover
    import tomli as tomllib  # type: ignore

from pydantic import ValidationError

from ..exceptions import ConfigError
from .models import ToolConfig


CONFIG_FILENAME = "regdeploy.toml"


def load_tool_config(root: Path) -> ToolConfig:
    """Load ``regdeploy.toml`` from *root*, falling back to defaults when absent."""

    path = Path(root) / CONFIG_FILENAME
    if not path.exists():
        return ToolConfig()

    try:
        with path.open("rb") as fh:
            data = tomllib.load(fh)
    except (tomllib.TOMLDecodeError, OSError) as exc:
        raise ConfigError(path, f"failed to read TOML: {exc}") from exc

    try:
        return ToolConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(path, format_validation_errors(exc)) from exc


def format_validation_errors(error: ValidationError) -> str:
    """Join pydantic errors as ``section.key: message`` entries."""

    messages = []
    for err in error.errors(include_context=False):
        loc = ".".join(str(entry) for entry in err.get("loc", ()))
        msg = err.get("msg", "invalid value")
        messages.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(messages)
