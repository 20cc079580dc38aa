"""Blob transaction sidecar assembled from KZG info."""

from dataclasses import dataclass
from typing import Dict, List, Sequence

from eth_typing import HexStr

from pubdata_kzg.core.types import Blob, KzgCommitment, KzgInfo, KzgProof, VersionedHash

# Blobs a single type-3 transaction may carry. Cancun caps blobs per block at 6
# and enforces no separate per-transaction cap, so 6 is also the transaction
# limit there; forks with their own per-transaction cap pass it as max_blobs.
MAX_BLOBS_PER_TRANSACTION = 6


@dataclass(frozen=True)
class BlobSidecar:
    """
    The data a blob-carrying transaction ships next to its payload.

    The sidecar holds the blobs, their commitments and the blob proofs; the
    transaction payload itself references only the versioned hashes.
    """

    blobs: List[Blob]
    commitments: List[KzgCommitment]
    proofs: List[KzgProof]
    versioned_hashes: List[VersionedHash]

    @classmethod
    def from_kzg_infos(
        cls, infos: Sequence[KzgInfo], max_blobs: int = MAX_BLOBS_PER_TRANSACTION
    ) -> "BlobSidecar":
        """
        Build a sidecar from one KzgInfo per blob.

        Args:
            infos: KZG info of every blob, in transaction order
            max_blobs: Per-transaction blob limit of the target fork

        Raises:
            ValueError: If there are no infos or more than a transaction can carry
        """
        if not infos:
            raise ValueError("a blob sidecar needs at least one blob")
        if len(infos) > max_blobs:
            raise ValueError(f"a transaction carries at most {max_blobs} blobs, got {len(infos)}")

        return cls(
            blobs=[info.blob for info in infos],
            commitments=[info.kzg_commitment for info in infos],
            proofs=[info.blob_proof for info in infos],
            versioned_hashes=[info.versioned_hash for info in infos],
        )

    def __len__(self) -> int:
        return len(self.blobs)

    def to_rpc_dict(self) -> Dict[str, List[HexStr]]:
        """Hex-encode every field for a JSON-RPC request."""
        return {
            "blobs": [blob.to_hex() for blob in self.blobs],
            "commitments": [commitment.to_hex() for commitment in self.commitments],
            "proofs": [proof.to_hex() for proof in self.proofs],
            "blobVersionedHashes": [h.to_hex() for h in self.versioned_hashes],
        }
