"""
Typed errors raised while building, decoding and verifying KZG info.

All errors expose:
- .code : stable machine-readable code (snake_case)
- .data : optional structured payload (dict)

Size violations also derive from ``ValueError`` so callers that only know
about the builtin hierarchy still catch them.
"""

from typing import Any, Dict, Mapping, Optional


class KzgError(Exception):
    """Base class for pubdata KZG errors."""

    default_code = "kzg_error"

    def __init__(
        self,
        message: str = "",
        *,
        code: Optional[str] = None,
        data: Optional[Mapping[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.data: Dict[str, Any] = dict(data) if data else {}

    def __str__(self) -> str:
        if self.message:
            return f"{self.code}: {self.message}"
        return self.code


class CapacityExceeded(KzgError, ValueError):
    """Pubdata does not fit into a single blob."""

    default_code = "capacity_exceeded"


class LengthMismatch(KzgError, ValueError):
    """A buffer does not have the exact size its layout requires."""

    default_code = "length_mismatch"


class CryptoPrimitiveFailure(KzgError):
    """The KZG backend rejected an input or failed internally."""

    default_code = "crypto_primitive_failure"


class VerificationFailed(KzgError):
    """A proof was well formed but did not verify."""

    default_code = "verification_failed"


def check_length(name: str, data: bytes, expected: int) -> None:
    """Raise ``LengthMismatch`` unless ``data`` is exactly ``expected`` bytes."""
    if len(data) != expected:
        raise LengthMismatch(
            f"{name} must be {expected} bytes, got {len(data)}",
            data={"field": name, "expected": expected, "actual": len(data)},
        )
