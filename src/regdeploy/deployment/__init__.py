"""Nick's-method deployment transaction construction."""

from .artifact import load_artifact
from .exceptions import ArtifactError, DeploymentError
from .models import (
    ContractArtifact,
    DeterministicSignature,
    NickMethodConfig,
    TransactionSkeleton,
)
from .nick import (
    GAS_LIMIT,
    GAS_PRICE,
    NICK_SIGNATURE,
    build_skeleton,
    create_registry_transaction,
    generate_nick_method_config,
)

__all__ = [
    "ArtifactError",
    "DeploymentError",
    "ContractArtifact",
    "DeterministicSignature",
    "NickMethodConfig",
    "TransactionSkeleton",
    "GAS_LIMIT",
    "GAS_PRICE",
    "NICK_SIGNATURE",
    "load_artifact",
    "build_skeleton",
    "generate_nick_method_config",
    "create_registry_transaction",
]
