"""Derivation of KZG info for a batch of pubdata."""

import hashlib
import logging
from typing import Callable

from eth_utils import keccak

from pubdata_kzg.backend import KzgBackend
from pubdata_kzg.codec.blob_codec import pad_pubdata, pubdata_to_4844_blob
from pubdata_kzg.core.types import (
    BYTES_PER_FIELD_ELEMENT,
    TRUNCATED_OPENING_POINT_SIZE,
    VERSIONED_HASH_VERSION_KZG,
    Blob,
    Bytes32,
    KzgInfo,
    VersionedHash,
)
from pubdata_kzg.errors import VerificationFailed

logger = logging.getLogger(__name__)

Repacker = Callable[[bytes], bytes]


def keccak256(data: bytes) -> bytes:
    """Keccak-256 digest, as used for the linear hash and opening point."""
    return keccak(data)


def commitment_to_versioned_hash(commitment: bytes) -> VersionedHash:
    """sha256 of the commitment with the first byte replaced by the version tag."""
    digest = hashlib.sha256(bytes(commitment)).digest()
    return VersionedHash(bytes([VERSIONED_HASH_VERSION_KZG]) + digest[1:])


def compute_opening_point(linear_hash: bytes, versioned_hash: bytes) -> Bytes32:
    """
    Derive the opening point from the linear hash and the versioned hash.

    Only the low 16 bytes of ``keccak(linear_hash || versioned_hash)`` are
    kept; the high 16 bytes of the point are zero.
    """
    digest = keccak256(bytes(linear_hash) + bytes(versioned_hash))
    significant = digest[BYTES_PER_FIELD_ELEMENT - TRUNCATED_OPENING_POINT_SIZE :]
    return Bytes32(b"\x00" * (BYTES_PER_FIELD_ELEMENT - TRUNCATED_OPENING_POINT_SIZE) + significant)


def compute_kzg_info(
    pubdata: bytes,
    backend: KzgBackend,
    repack: Repacker = pubdata_to_4844_blob,
) -> KzgInfo:
    """
    Construct all the KZG info needed to publish pubdata as a 4844 blob.

    The information we need is:
        1. padded blob <- pad_right(pubdata)
        2. linear hash <- keccak(padded blob)
        3. 4844 blob <- repack(padded blob)
        4. kzg commitment <- blob_to_kzg_commitment(4844 blob)
        5. versioned hash <- sha256(kzg commitment) with the version byte
        6. opening point <- keccak(linear hash || versioned hash)[16..]
        7. opening value, opening proof <- compute_kzg_proof(4844 blob, opening point)
        8. blob proof <- compute_blob_kzg_proof(4844 blob, kzg commitment)

    Args:
        pubdata: Raw pubdata of at most ``BYTES_PER_BLOB_ZK_SYNC`` bytes
        backend: KZG backend holding the trusted setup
        repack: Transform from the padded blob into a 4844 blob

    Returns:
        The complete KzgInfo

    Raises:
        CapacityExceeded: If the pubdata does not fit into one blob
        CryptoPrimitiveFailure: If any backend call fails
    """
    padded = pad_pubdata(pubdata)
    linear_hash = keccak256(padded)

    blob = Blob(repack(padded))

    kzg_commitment = backend.blob_to_kzg_commitment(blob)
    versioned_hash = commitment_to_versioned_hash(kzg_commitment)
    opening_point = compute_opening_point(linear_hash, versioned_hash)

    opening_proof, opening_value = backend.compute_kzg_proof(blob, opening_point)
    blob_proof = backend.compute_blob_kzg_proof(blob, kzg_commitment)

    logger.debug(
        "Built KZG info for %d bytes of pubdata, versioned hash %s",
        len(pubdata),
        versioned_hash.to_hex(),
    )

    return KzgInfo(
        blob=blob,
        kzg_commitment=kzg_commitment,
        opening_point=opening_point,
        opening_value=opening_value,
        opening_proof=opening_proof,
        versioned_hash=versioned_hash,
        blob_proof=blob_proof,
    )


def verify_opening(
    commitment: bytes, point: bytes, value: bytes, proof: bytes, backend: KzgBackend
) -> bool:
    """Check that the committed polynomial evaluates to ``value`` at ``point``."""
    return backend.verify_kzg_proof(commitment, point, value, proof)


def verify_blob(blob: bytes, commitment: bytes, proof: bytes, backend: KzgBackend) -> bool:
    """Check that ``blob`` and ``commitment`` represent the same data."""
    return backend.verify_blob_kzg_proof(blob, commitment, proof)


def verify_kzg_info(info: KzgInfo, backend: KzgBackend) -> None:
    """
    Verify both proofs carried by a KzgInfo.

    Raises:
        VerificationFailed: If either proof does not verify
        CryptoPrimitiveFailure: If the backend rejects an encoding
    """
    if not verify_opening(
        info.kzg_commitment, info.opening_point, info.opening_value, info.opening_proof, backend
    ):
        raise VerificationFailed(
            "opening proof does not verify",
            data={"check": "opening", "versioned_hash": info.versioned_hash.to_hex()},
        )

    if not verify_blob(info.blob, info.kzg_commitment, info.blob_proof, backend):
        raise VerificationFailed(
            "blob proof does not verify",
            data={"check": "blob", "versioned_hash": info.versioned_hash.to_hex()},
        )
