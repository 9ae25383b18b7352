"""Typer CLI entrypoint for regdeploy."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Optional

import typer

from .config import load_tool_config
from .deployment import (
    ArtifactError,
    DeploymentError,
    create_registry_transaction,
)
from .exceptions import ConfigError, ManifestError, RegdeployError
from .versions import check_versions_in_sync


EXIT_SUCCESS = 0
EXIT_OUT_OF_SYNC = 1
EXIT_IO_ERROR = 4
EXIT_CONFIG_ERROR = 5
EXIT_SIGNATURE_ERROR = 6


app = typer.Typer(help="Deterministic registry deployment tools")


@app.callback()
def main_callback() -> None:
    """Base command callback reserved for shared options."""


@app.command("registry-tx")
def registry_tx(
    root: Path = typer.Option(
        Path("."),
        "--root",
        "-r",
        file_okay=False,
        help="Project root holding regdeploy.toml and build output",
    ),
    artifact: Optional[Path] = typer.Option(
        None,
        "--artifact",
        "-a",
        help="Contract build artifact JSON (defaults to the configured registry artifact)",
    ),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        dir_okay=False,
        help="Also write the transaction descriptor to this file",
    ),
) -> None:
    """Print the pre-signed Nick's-method registry deployment transaction."""

    try:
        config = load_tool_config(root)
        artifact_path = config.resolve(root, artifact or config.deployment.artifact)
        result = create_registry_transaction(artifact_path)
    except ConfigError as exc:
        typer.echo(f"Config error: {exc}", err=True)
        raise typer.Exit(EXIT_CONFIG_ERROR) from exc
    except ArtifactError as exc:
        typer.echo(f"Artifact error: {exc}", err=True)
        raise typer.Exit(EXIT_IO_ERROR) from exc
    except DeploymentError as exc:
        typer.echo(f"Signature error: {exc}", err=True)
        raise typer.Exit(EXIT_SIGNATURE_ERROR) from exc
    except RegdeployError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(EXIT_IO_ERROR) from exc

    json_payload = json.dumps(result.as_dict(), indent=2)
    typer.echo(json_payload)

    if out is not None:
        try:
            out.parent.mkdir(parents=True, exist_ok=True)
            out.write_text(json_payload + "\n", encoding="utf-8")
        except OSError as exc:
            typer.echo(f"Failed to write {out}: {exc}", err=True)
            raise typer.Exit(EXIT_IO_ERROR) from exc


@app.command("verify-versions")
def verify_versions(
    root: Path = typer.Option(
        Path("."),
        "--root",
        "-r",
        file_okay=False,
        help="Project root holding regdeploy.toml and the manifests",
    ),
    primary: Optional[Path] = typer.Option(
        None, "--primary", help="Top-level manifest (defaults to package.json)"
    ),
    secondary: Optional[Path] = typer.Option(
        None, "--secondary", help="Nested manifest (defaults to src/package.json)"
    ),
    field: Optional[str] = typer.Option(
        None, "--field", help="Manifest key to compare (defaults to version)"
    ),
) -> None:
    """Exit non-zero when the two manifests report different versions."""

    try:
        config = load_tool_config(root)
        primary = primary or config.manifests.primary
        secondary = secondary or config.manifests.secondary
        result = check_versions_in_sync(
            config.resolve(root, primary),
            config.resolve(root, secondary),
            field or config.manifests.field,
        )
    except ConfigError as exc:
        typer.echo(f"Config error: {exc}", err=True)
        raise typer.Exit(EXIT_CONFIG_ERROR) from exc
    except ManifestError as exc:
        typer.echo(f"Manifest error: {exc}", err=True)
        raise typer.Exit(EXIT_IO_ERROR) from exc

    if not result.in_sync:
        typer.echo(
            f"{primary.as_posix()} and {secondary.as_posix()} are out of sync "
            f"({result.primary_version} != {result.secondary_version})",
            err=True,
        )
        raise typer.Exit(EXIT_OUT_OF_SYNC)


def create_registry_transaction_main() -> None:
    app(["registry-tx", *sys.argv[1:]], prog_name="create-registry-transaction")


def verify_package_json_in_sync_main() -> None:
    app(["verify-versions", *sys.argv[1:]], prog_name="verify-package-json-in-sync")
