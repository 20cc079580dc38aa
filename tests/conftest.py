"""Shared fixtures for pubdata KZG tests."""

import hashlib
import os
from pathlib import Path
from typing import Dict, List, Tuple

import pytest

from pubdata_kzg.backend import KzgBackend
from pubdata_kzg.core.types import Bytes32, KzgCommitment, KzgProof

FIXTURES_DIR = Path(__file__).parent / "fixtures"


class FakeKzgBackend(KzgBackend):
    """
    Deterministic stand-in for the pairing library.

    Commitments and proofs are hashes of their inputs, so they are stable
    across runs and sensitive to every input byte. Calls are recorded in order.
    """

    def __init__(self):
        self.calls: List[str] = []
        self._blobs: Dict[bytes, bytes] = {}

    def blob_to_kzg_commitment(self, blob: bytes) -> KzgCommitment:
        self.calls.append("blob_to_kzg_commitment")
        commitment = hashlib.sha384(b"commit" + bytes(blob)).digest()
        self._blobs[commitment] = bytes(blob)
        return KzgCommitment(commitment)

    def _evaluate(self, blob: bytes, z: bytes) -> Tuple[KzgProof, Bytes32]:
        proof = hashlib.sha384(b"open" + bytes(blob) + bytes(z)).digest()
        value = hashlib.sha256(b"value" + bytes(blob) + bytes(z)).digest()
        return KzgProof(proof), Bytes32(value)

    def compute_kzg_proof(self, blob: bytes, z: bytes) -> Tuple[KzgProof, Bytes32]:
        self.calls.append("compute_kzg_proof")
        return self._evaluate(blob, z)

    def _blob_proof(self, blob: bytes, commitment: bytes) -> KzgProof:
        return KzgProof(hashlib.sha384(b"blob" + bytes(blob) + bytes(commitment)).digest())

    def compute_blob_kzg_proof(self, blob: bytes, commitment: bytes) -> KzgProof:
        self.calls.append("compute_blob_kzg_proof")
        return self._blob_proof(blob, commitment)

    def verify_kzg_proof(self, commitment: bytes, z: bytes, y: bytes, proof: bytes) -> bool:
        self.calls.append("verify_kzg_proof")
        blob = self._blobs.get(bytes(commitment))
        if blob is None:
            return False
        return self._evaluate(blob, z) == (proof, y)

    def verify_blob_kzg_proof(self, blob: bytes, commitment: bytes, proof: bytes) -> bool:
        self.calls.append("verify_blob_kzg_proof")
        if self._blobs.get(bytes(commitment)) != bytes(blob):
            return False
        return self._blob_proof(blob, commitment) == proof


@pytest.fixture
def fake_backend():
    """Fresh deterministic backend."""
    return FakeKzgBackend()


def _trusted_setup_path() -> Path:
    configured = os.getenv("PUBDATA_KZG_TRUSTED_SETUP")
    if configured:
        return Path(configured)
    path = Path(os.getenv("ZKSYNC_HOME", ".")) / "trusted_setup.txt"
    if path.is_file():
        return path
    # mainnet ceremony output shipped with c-kzg-4844
    return FIXTURES_DIR / "trusted_setup.txt"


@pytest.fixture(scope="session")
def ckzg_backend():
    """Real ckzg backend over the configured or bundled trusted setup."""
    from pubdata_kzg.backend import CKzgBackend

    path = _trusted_setup_path()
    if not path.is_file():
        pytest.skip(f"trusted setup not found at {path}")
    return CKzgBackend.from_trusted_setup(path)
