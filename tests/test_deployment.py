"""Tests for Nick's-method transaction construction."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import pytest
import rlp
from eth_account import Account
from eth_utils import big_endian_to_int, decode_hex, keccak, to_canonical_address, to_checksum_address

from regdeploy.deployment import (
    GAS_LIMIT,
    GAS_PRICE,
    NICK_SIGNATURE,
    ArtifactError,
    ContractArtifact,
    DeploymentError,
    build_skeleton,
    create_registry_transaction,
    generate_nick_method_config,
    load_artifact,
)

SAMPLE_BYTECODE = "0x600160015500"


def _artifact(code: str = SAMPLE_BYTECODE) -> ContractArtifact:
    return ContractArtifact.model_validate({"bytecode": {"object": code}})


def test_build_skeleton_uses_fixed_constants() -> None:
    skeleton = build_skeleton(_artifact())
    assert skeleton.data == "0x600160015500"
    assert skeleton.nonce == 0
    assert skeleton.value == 0
    assert skeleton.gas_price == 10000000000000
    assert skeleton.gas_limit == 160000
    assert skeleton.as_dict()["gasPrice"] == GAS_PRICE
    assert skeleton.as_dict()["gasLimit"] == GAS_LIMIT


def test_nick_signature_constants() -> None:
    assert NICK_SIGNATURE.r == int(
        "0x7340000000000000000000000000000000000000000000000000000000000734", 16
    )
    assert NICK_SIGNATURE.s == int(
        "0x7347347347347347347347347347347347347347347347347347347347347340", 16
    )
    assert NICK_SIGNATURE.v == 27


@pytest.mark.parametrize("code", ["600160015500", "0X600160015500"])
def test_artifact_prefix_is_normalized(code: str) -> None:
    assert _artifact(code).creation_code == SAMPLE_BYTECODE
    assert build_skeleton(_artifact(code)).data == SAMPLE_BYTECODE


def test_artifact_missing_bytecode_reports_location(tmp_path: Path, write_json) -> None:
    path = write_json(tmp_path / "artifact.json", {"abi": []})
    with pytest.raises(ArtifactError) as exc:
        load_artifact(path)
    assert "invalid artifact (bytecode: Field required)" in str(exc.value)


@pytest.mark.parametrize("code", ["", "0x", "0x60016", "0xzz"])
def test_artifact_rejects_bad_bytecode(tmp_path: Path, write_json, code: str) -> None:
    path = write_json(tmp_path / "artifact.json", {"bytecode": {"object": code}})
    with pytest.raises(ArtifactError) as exc:
        load_artifact(path)
    assert "bytecode" in str(exc.value)


def test_load_artifact_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ArtifactError) as exc:
        load_artifact(tmp_path / "missing.json")
    assert "not found" in str(exc.value)


def test_load_artifact_malformed_json(tmp_path: Path) -> None:
    path = tmp_path / "artifact.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ArtifactError) as exc:
        load_artifact(path)
    assert "invalid JSON" in str(exc.value)


def test_raw_transaction_encodes_skeleton_and_signature() -> None:
    skeleton = build_skeleton(_artifact())
    config = generate_nick_method_config(skeleton, NICK_SIGNATURE)

    fields = rlp.decode(decode_hex(config.raw_transaction))
    nonce, gas_price, gas_limit, to, value, data, v, r, s = fields
    assert big_endian_to_int(nonce) == 0
    assert big_endian_to_int(gas_price) == GAS_PRICE
    assert big_endian_to_int(gas_limit) == GAS_LIMIT
    assert to == b""
    assert big_endian_to_int(value) == 0
    assert data == decode_hex(SAMPLE_BYTECODE)
    assert big_endian_to_int(v) == 27
    assert big_endian_to_int(r) == NICK_SIGNATURE.r
    assert big_endian_to_int(s) == NICK_SIGNATURE.s

    assert config.transaction_hash == "0x" + keccak(decode_hex(config.raw_transaction)).hex()
    assert config.funding_amount == GAS_PRICE * GAS_LIMIT


def test_signer_and_contract_addresses() -> None:
    config = generate_nick_method_config(build_skeleton(_artifact()), NICK_SIGNATURE)

    assert Account.recover_transaction(config.raw_transaction) == config.signer_address
    expected = keccak(rlp.encode([to_canonical_address(config.signer_address), 0]))[12:]
    assert config.contract_address == to_checksum_address(expected)


def test_result_is_deterministic_and_bytecode_dependent() -> None:
    first = generate_nick_method_config(build_skeleton(_artifact()), NICK_SIGNATURE)
    second = generate_nick_method_config(build_skeleton(_artifact()), NICK_SIGNATURE)
    other = generate_nick_method_config(build_skeleton(_artifact("0x6000")), NICK_SIGNATURE)

    assert first == second
    assert other.signer_address != first.signer_address
    assert other.contract_address != first.contract_address


def test_high_s_signature_is_rejected() -> None:
    signature = replace(NICK_SIGNATURE, s=2**256 - 1)
    with pytest.raises(DeploymentError):
        generate_nick_method_config(build_skeleton(_artifact()), signature)


def test_bad_recovery_id_is_rejected() -> None:
    signature = replace(NICK_SIGNATURE, v=35)
    with pytest.raises(DeploymentError):
        generate_nick_method_config(build_skeleton(_artifact()), signature)


def test_create_registry_transaction_from_file(project_root: Path) -> None:
    path = project_root / "out" / "ERC6551Registry.sol" / "ERC6551Registry.json"
    result = create_registry_transaction(path)
    expected = generate_nick_method_config(build_skeleton(_artifact()), NICK_SIGNATURE)
    assert result == expected
