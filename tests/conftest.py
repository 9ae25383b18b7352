from __future__ import annotations

import json
from pathlib import Path

import pytest


SAMPLE_BYTECODE = "0x600160015500"


@pytest.fixture
def write_json():
    def _write(path: Path, payload: object) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def project_root(tmp_path: Path, write_json) -> Path:
    """Project tree laid out the way a contracts package is after a build."""

    write_json(
        tmp_path / "out" / "ERC6551Registry.sol" / "ERC6551Registry.json",
        {"abi": [], "bytecode": {"object": SAMPLE_BYTECODE, "sourceMap": ""}},
    )
    write_json(tmp_path / "package.json", {"name": "registry", "version": "1.2.3"})
    write_json(tmp_path / "src" / "package.json", {"name": "registry", "version": "1.2.3"})
    return tmp_path
