"""KZG primitives behind a narrow interface, backed by c-kzg-4844."""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Callable, Tuple, TypeVar, Union

import ckzg

from pubdata_kzg.core.types import Bytes32, KzgCommitment, KzgProof
from pubdata_kzg.errors import CryptoPrimitiveFailure

logger = logging.getLogger(__name__)

R = TypeVar("R")


class KzgBackend(ABC):
    """
    The KZG operations the pubdata pipeline relies on.

    Implementations must be safe to share between threads; all methods are
    pure functions of their inputs and the backend's trusted setup.
    """

    @abstractmethod
    def blob_to_kzg_commitment(self, blob: bytes) -> KzgCommitment:
        """Commit to the polynomial represented by ``blob``."""

    @abstractmethod
    def compute_kzg_proof(self, blob: bytes, z: bytes) -> Tuple[KzgProof, Bytes32]:
        """Open the blob polynomial at ``z``, returning ``(proof, y)``."""

    @abstractmethod
    def compute_blob_kzg_proof(self, blob: bytes, commitment: bytes) -> KzgProof:
        """Prove that ``blob`` and ``commitment`` represent the same data."""

    @abstractmethod
    def verify_kzg_proof(self, commitment: bytes, z: bytes, y: bytes, proof: bytes) -> bool:
        """Check that the committed polynomial evaluates to ``y`` at ``z``."""

    @abstractmethod
    def verify_blob_kzg_proof(self, blob: bytes, commitment: bytes, proof: bytes) -> bool:
        """Check a proof produced by ``compute_blob_kzg_proof``."""


class CKzgBackend(KzgBackend):
    """KzgBackend using the ckzg bindings and a loaded trusted setup."""

    def __init__(self, settings: Any):
        """
        Args:
            settings: Trusted setup handle returned by ``ckzg.load_trusted_setup``
        """
        self._settings = settings

    @classmethod
    def from_trusted_setup(cls, path: Union[str, Path], precompute: int = 0) -> "CKzgBackend":
        """
        Load the trusted setup once and wrap it.

        Args:
            path: Trusted setup file in the c-kzg-4844 text format
            precompute: ckzg precomputation level for proof computation

        Raises:
            FileNotFoundError: If the trusted setup file does not exist
            CryptoPrimitiveFailure: If ckzg rejects the file
        """
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"trusted setup not found: {path}")

        settings = _call(ckzg.load_trusted_setup, str(path), precompute)
        logger.info("Loaded KZG trusted setup from %s (precompute=%d)", path, precompute)
        return cls(settings)

    def blob_to_kzg_commitment(self, blob: bytes) -> KzgCommitment:
        return KzgCommitment(_call(ckzg.blob_to_kzg_commitment, bytes(blob), self._settings))

    def compute_kzg_proof(self, blob: bytes, z: bytes) -> Tuple[KzgProof, Bytes32]:
        proof, y = _call(ckzg.compute_kzg_proof, bytes(blob), bytes(z), self._settings)
        return KzgProof(proof), Bytes32(y)

    def compute_blob_kzg_proof(self, blob: bytes, commitment: bytes) -> KzgProof:
        return KzgProof(
            _call(ckzg.compute_blob_kzg_proof, bytes(blob), bytes(commitment), self._settings)
        )

    def verify_kzg_proof(self, commitment: bytes, z: bytes, y: bytes, proof: bytes) -> bool:
        return bool(
            _call(
                ckzg.verify_kzg_proof,
                bytes(commitment),
                bytes(z),
                bytes(y),
                bytes(proof),
                self._settings,
            )
        )

    def verify_blob_kzg_proof(self, blob: bytes, commitment: bytes, proof: bytes) -> bool:
        return bool(
            _call(
                ckzg.verify_blob_kzg_proof,
                bytes(blob),
                bytes(commitment),
                bytes(proof),
                self._settings,
            )
        )


def _call(fn: Callable[..., R], *args: Any) -> R:
    """Invoke a ckzg function, turning its errors into CryptoPrimitiveFailure."""
    try:
        return fn(*args)
    except (RuntimeError, ValueError, TypeError) as e:
        operation = getattr(fn, "__name__", repr(fn))
        raise CryptoPrimitiveFailure(f"{operation} failed: {e}", data={"operation": operation}) from e
