"""Core type definitions for pubdata KZG info."""

from dataclasses import dataclass, fields
from typing import Dict, List, Tuple, Type, TypeVar

from eth_typing import HexStr
from eth_utils import to_hex

from pubdata_kzg.errors import check_length

# EIP-4844 blob geometry
ELEMENTS_PER_4844_BLOCK = 4096
BYTES_PER_FIELD_ELEMENT = 32
BYTES_PER_BLOB = ELEMENTS_PER_4844_BLOCK * BYTES_PER_FIELD_ELEMENT

# The rollup fills only 31 bytes per element so every chunk fits the scalar field
BLOB_CHUNK_SIZE = 31
BYTES_PER_BLOB_ZK_SYNC = ELEMENTS_PER_4844_BLOCK * BLOB_CHUNK_SIZE

BYTES_PER_COMMITMENT = 48
BYTES_PER_PROOF = 48

# opening point (16 bytes) || claimed value (32) || commitment (48) || opening proof (48)
BYTES_PER_PUBDATA_COMMITMENT = 144
TRUNCATED_OPENING_POINT_SIZE = 16

VERSIONED_HASH_VERSION_KZG = 0x01

# BLS12-381 scalar field modulus
BLS_MODULUS = 52435875175126190479447740508185965837690552500527637822603658699938581184513

T = TypeVar("T", bound="FixedBytes")


class FixedBytes(bytes):
    """Immutable byte string of a fixed length."""

    LENGTH = 0

    def __new__(cls: Type[T], data: bytes) -> T:
        check_length(cls.__name__, data, cls.LENGTH)
        return super().__new__(cls, data)

    @classmethod
    def from_hex(cls: Type[T], hex_str: str) -> T:
        """Create from a hex string with or without a 0x prefix."""
        if hex_str.startswith(("0x", "0X")):
            hex_str = hex_str[2:]
        return cls(bytes.fromhex(hex_str))

    def to_hex(self) -> HexStr:
        """Return the 0x-prefixed hex representation."""
        return to_hex(bytes(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_hex()})"


class Bytes32(FixedBytes):
    LENGTH = 32


class Bytes48(FixedBytes):
    LENGTH = 48


class Blob(FixedBytes):
    """EIP-4844 blob: 4096 big-endian scalar field elements."""

    LENGTH = BYTES_PER_BLOB

    def __repr__(self) -> str:
        return f"Blob({bytes(self[:8]).hex()}..., {len(self)} bytes)"


class KzgCommitment(Bytes48):
    """Compressed G1 commitment to the blob polynomial."""


class KzgProof(Bytes48):
    """Compressed G1 KZG proof."""


class VersionedHash(Bytes32):
    """Commitment hash whose first byte is the version tag."""


class PubdataCommitment(FixedBytes):
    """
    Compact record passed to the L1 batch commitment.

    Format: opening point (16 bytes) || claimed value (32 bytes)
    || commitment (48 bytes) || opening proof (48 bytes)
    """

    LENGTH = BYTES_PER_PUBDATA_COMMITMENT

    @property
    def opening_point(self) -> bytes:
        return bytes(self[0:16])

    @property
    def opening_value(self) -> Bytes32:
        return Bytes32(self[16:48])

    @property
    def kzg_commitment(self) -> KzgCommitment:
        return KzgCommitment(self[48:96])

    @property
    def opening_proof(self) -> KzgProof:
        return KzgProof(self[96:144])


# Field order and width of the serialized KzgInfo; the single source of truth
# for both to_bytes and from_bytes.
KZG_INFO_LAYOUT: List[Tuple[str, Type[FixedBytes]]] = [
    ("blob", Blob),
    ("kzg_commitment", KzgCommitment),
    ("opening_point", Bytes32),
    ("opening_value", Bytes32),
    ("opening_proof", KzgProof),
    ("versioned_hash", VersionedHash),
    ("blob_proof", KzgProof),
]


@dataclass(frozen=True)
class KzgInfo:
    """
    All the info needed for both the blob transaction and the L1 contracts.

    The blob transaction sidecar carries the blob, the commitment and the blob
    proof, and its payload references the versioned hash. The batch
    commitment needs the commitment, opening point, opening value and
    opening proof (see ``to_pubdata_commitment``).
    """

    # 4844 compatible blob containing the pubdata
    blob: Blob
    # KZG commitment to the blob
    kzg_commitment: KzgCommitment
    # Point used by the point evaluation precompile
    opening_point: Bytes32
    # Value of the blob polynomial at the opening point
    opening_value: Bytes32
    # Proof that opening the commitment at the opening point yields the value
    opening_proof: KzgProof
    # sha256 of the commitment with the first byte set to the version tag
    versioned_hash: VersionedHash
    # Proof that the blob and the commitment represent the same data
    blob_proof: KzgProof

    SERIALIZED_SIZE = sum(field_type.LENGTH for _, field_type in KZG_INFO_LAYOUT)

    def __post_init__(self):
        """Coerce every field to its fixed-size type, checking its length."""
        for name, field_type in KZG_INFO_LAYOUT:
            value = getattr(self, name)
            if type(value) is not field_type:
                object.__setattr__(self, name, field_type(bytes(value)))

    def to_bytes(self) -> bytes:
        """Serialize into ``SERIALIZED_SIZE`` bytes in layout order."""
        return b"".join(bytes(getattr(self, name)) for name, _ in KZG_INFO_LAYOUT)

    @classmethod
    def from_bytes(cls, data: bytes) -> "KzgInfo":
        """
        Deserialize ``SERIALIZED_SIZE`` bytes into a KzgInfo.

        Raises:
            LengthMismatch: If ``data`` is not exactly ``SERIALIZED_SIZE`` bytes
        """
        check_length("serialized KzgInfo", data, cls.SERIALIZED_SIZE)

        values = {}
        ptr = 0
        for name, field_type in KZG_INFO_LAYOUT:
            values[name] = field_type(data[ptr : ptr + field_type.LENGTH])
            ptr += field_type.LENGTH

        return cls(**values)

    def to_pubdata_commitment(self) -> PubdataCommitment:
        """
        Return the bytes used by the batch commitment when blobs are used.

        The opening point is truncated to its low 16 bytes; its high 16 bytes
        are always zero.
        """
        return PubdataCommitment(
            self.opening_point[BYTES_PER_FIELD_ELEMENT - TRUNCATED_OPENING_POINT_SIZE :]
            + self.opening_value
            + self.kzg_commitment
            + self.opening_proof
        )

    def to_dict(self) -> Dict[str, str]:
        """Hex representation of everything except the blob."""
        result = {
            f.name: getattr(self, f.name).to_hex() for f in fields(self) if f.name != "blob"
        }
        result["pubdata_commitment"] = self.to_pubdata_commitment().to_hex()
        return result

    def __repr__(self) -> str:
        return f"KzgInfo(versioned_hash={self.versioned_hash.to_hex()})"
