"""Pydantic models describing ``regdeploy.toml``."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, model_validator


DEFAULT_ARTIFACT = Path("out/ERC6551Registry.sol/ERC6551Registry.json")
DEFAULT_PRIMARY_MANIFEST = Path("package.json")
DEFAULT_SECONDARY_MANIFEST = Path("src/package.json")


class DeploymentConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    artifact: Path = DEFAULT_ARTIFACT


class ManifestsConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    primary: Path = DEFAULT_PRIMARY_MANIFEST
    secondary: Path = DEFAULT_SECONDARY_MANIFEST
    field: str = "version"

    @model_validator(mode="after")
    def validate_fields(self) -> "ManifestsConfig":
        if not self.field:
            raise ValueError("field must not be empty")
        if self.primary == self.secondary:
            raise ValueError("primary and secondary must be different files")
        return self


class ToolConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    deployment: DeploymentConfig = Field(default_factory=DeploymentConfig)
    manifests: ManifestsConfig = Field(default_factory=ManifestsConfig)

    def resolve(self, root: Path, path: Path) -> Path:
        """Return *path* anchored at *root* unless it is already absolute."""

        path = Path(path)
        if path.is_absolute():
            return path
        return Path(root) / path
