"""Build Nick's-method deployment transactions.

A legacy (pre-EIP-155) contract-creation transaction is signed with a fixed,
hand-picked ``(r, s)`` pair. Recovering the signer from that signature yields an
address whose private key nobody knows, so the transaction can be replayed on
any chain once the signer is funded and always deploys to the same address.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Union

import rlp
from eth_keys import keys
from eth_keys.constants import SECPK1_N
from eth_keys.exceptions import BadSignature, ValidationError
from eth_utils import decode_hex, encode_hex, keccak, to_checksum_address

from .artifact import load_artifact
from .exceptions import DeploymentError
from .models import (
    ContractArtifact,
    DeterministicSignature,
    NickMethodConfig,
    TransactionSkeleton,
)


GAS_PRICE = 10_000_000_000_000
GAS_LIMIT = 160_000

NICK_SIGNATURE = DeterministicSignature(
    r=0x7340000000000000000000000000000000000000000000000000000000000734,
    s=0x7347347347347347347347347347347347347347347347347347347347347340,
)


def build_skeleton(artifact: ContractArtifact) -> TransactionSkeleton:
    return TransactionSkeleton(
        nonce=0,
        gas_price=GAS_PRICE,
        gas_limit=GAS_LIMIT,
        value=0,
        data=artifact.creation_code,
    )


def generate_nick_method_config(
    skeleton: TransactionSkeleton, signature: DeterministicSignature
) -> NickMethodConfig:
    """Sign *skeleton* with *signature* and derive the deployment addresses."""

    if signature.v not in (27, 28):
        raise DeploymentError(f"recovery id must be 27 or 28, got {signature.v}")
    if signature.s > SECPK1_N // 2:
        raise DeploymentError("s must not exceed secp256k1n / 2")

    fields = _unsigned_fields(skeleton)
    message_hash = keccak(rlp.encode(fields))

    try:
        eth_signature = keys.Signature(vrs=(signature.v - 27, signature.r, signature.s))
        public_key = eth_signature.recover_public_key_from_msg_hash(message_hash)
    except (BadSignature, ValidationError) as exc:
        raise DeploymentError(f"signature does not recover a signer: {exc}") from exc

    signer = public_key.to_canonical_address()
    raw = rlp.encode(fields + [signature.v, signature.r, signature.s])
    contract = keccak(rlp.encode([signer, skeleton.nonce]))[12:]

    return NickMethodConfig(
        signer_address=to_checksum_address(signer),
        contract_address=to_checksum_address(contract),
        raw_transaction=encode_hex(raw),
        transaction_hash=encode_hex(keccak(raw)),
        gas_price=skeleton.gas_price,
        gas_limit=skeleton.gas_limit,
        funding_amount=skeleton.gas_price * skeleton.gas_limit + skeleton.value,
    )


def create_registry_transaction(artifact_path: Path) -> NickMethodConfig:
    """Load *artifact_path* and produce its deterministic deployment transaction."""

    artifact = load_artifact(artifact_path)
    return generate_nick_method_config(build_skeleton(artifact), NICK_SIGNATURE)


def _unsigned_fields(skeleton: TransactionSkeleton) -> List[Union[int, bytes]]:
    # empty recipient marks contract creation
    return [
        skeleton.nonce,
        skeleton.gas_price,
        skeleton.gas_limit,
        b"",
        skeleton.value,
        decode_hex(skeleton.data),
    ]
