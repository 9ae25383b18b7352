"""Data models for deterministic deployment transactions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from eth_utils import add_0x_prefix, is_hex, remove_0x_prefix
from pydantic import BaseModel, Field, field_validator


class BytecodeSection(BaseModel):
    code: str = Field(alias="object")

    @field_validator("code")
    @classmethod
    def ensure_hex(cls, value: str) -> str:
        digits = remove_0x_prefix(value)
        if not digits:
            raise ValueError("bytecode must not be empty")
        if not is_hex(value) or len(digits) % 2:
            raise ValueError("bytecode must be an even-length hex string")
        return add_0x_prefix(digits)


class ContractArtifact(BaseModel):
    """Compiler output for a single contract; only the creation bytecode is used."""

    bytecode: BytecodeSection

    @property
    def creation_code(self) -> str:
        return self.bytecode.code


@dataclass(frozen=True)
class TransactionSkeleton:
    """Unsigned legacy contract-creation transaction."""

    nonce: int
    gas_price: int
    gas_limit: int
    value: int
    data: str

    def as_dict(self) -> Dict[str, Any]:
        return {
            "nonce": self.nonce,
            "gasPrice": self.gas_price,
            "gasLimit": self.gas_limit,
            "value": self.value,
            "data": self.data,
        }


@dataclass(frozen=True)
class DeterministicSignature:
    r: int
    s: int
    v: int = 27


@dataclass(frozen=True)
class NickMethodConfig:
    """Pre-signed deployment transaction and the addresses it implies."""

    signer_address: str
    contract_address: str
    raw_transaction: str
    transaction_hash: str
    gas_price: int
    gas_limit: int
    funding_amount: int

    def as_dict(self) -> Dict[str, Any]:
        return {
            "signer_address": self.signer_address,
            "contract_address": self.contract_address,
            "raw_transaction": self.raw_transaction,
            "transaction_hash": self.transaction_hash,
            "gas_price": self.gas_price,
            "gas_limit": self.gas_limit,
            "funding_amount": self.funding_amount,
        }
