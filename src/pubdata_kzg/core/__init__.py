"""Core types and data structures for pubdata KZG info."""

from pubdata_kzg.core.types import (
    Blob,
    Bytes32,
    KzgCommitment,
    KzgInfo,
    KzgProof,
    PubdataCommitment,
    VersionedHash,
)

__all__ = [
    "Blob",
    "Bytes32",
    "KzgCommitment",
    "KzgInfo",
    "KzgProof",
    "PubdataCommitment",
    "VersionedHash",
]
