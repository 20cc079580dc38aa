"""Build EIP-4844 blobs, KZG commitments and proofs from rollup pubdata."""

from pubdata_kzg.backend import CKzgBackend, KzgBackend
from pubdata_kzg.commitment import (
    compute_kzg_info,
    verify_blob,
    verify_kzg_info,
    verify_opening,
)
from pubdata_kzg.config import KzgConfig, get_kzg_config, load_backend
from pubdata_kzg.core.types import KzgInfo, PubdataCommitment
from pubdata_kzg.errors import (
    CapacityExceeded,
    CryptoPrimitiveFailure,
    KzgError,
    LengthMismatch,
    VerificationFailed,
)
from pubdata_kzg.sidecar import BlobSidecar

__version__ = "0.1.0"

__all__ = [
    "BlobSidecar",
    "CKzgBackend",
    "CapacityExceeded",
    "CryptoPrimitiveFailure",
    "KzgBackend",
    "KzgConfig",
    "KzgError",
    "KzgInfo",
    "LengthMismatch",
    "PubdataCommitment",
    "VerificationFailed",
    "compute_kzg_info",
    "get_kzg_config",
    "load_backend",
    "verify_blob",
    "verify_kzg_info",
    "verify_opening",
]
