"""Pubdata padding and repacking into EIP-4844 blobs."""

from typing import List

from pubdata_kzg.core.types import (
    BLOB_CHUNK_SIZE,
    BLS_MODULUS,
    BYTES_PER_BLOB,
    BYTES_PER_BLOB_ZK_SYNC,
    BYTES_PER_FIELD_ELEMENT,
    ELEMENTS_PER_4844_BLOCK,
    Blob,
)
from pubdata_kzg.errors import CapacityExceeded, check_length

# Generator of the BLS12-381 scalar field multiplicative group, as used by EIP-4844
PRIMITIVE_ROOT_OF_UNITY = 7

_LOG2_ELEMENTS = ELEMENTS_PER_4844_BLOCK.bit_length() - 1
ROOT_OF_UNITY = pow(PRIMITIVE_ROOT_OF_UNITY, (BLS_MODULUS - 1) // ELEMENTS_PER_4844_BLOCK, BLS_MODULUS)


def pad_pubdata(pubdata: bytes) -> bytes:
    """
    Right-pad pubdata with zeros up to the internal blob capacity.

    Args:
        pubdata: Raw pubdata, at most ``BYTES_PER_BLOB_ZK_SYNC`` bytes

    Returns:
        Exactly ``BYTES_PER_BLOB_ZK_SYNC`` bytes

    Raises:
        CapacityExceeded: If pubdata is longer than the blob capacity
    """
    if len(pubdata) > BYTES_PER_BLOB_ZK_SYNC:
        raise CapacityExceeded(
            f"pubdata is {len(pubdata)} bytes, blob capacity is {BYTES_PER_BLOB_ZK_SYNC}",
            data={"capacity": BYTES_PER_BLOB_ZK_SYNC, "actual": len(pubdata)},
        )
    return bytes(pubdata) + b"\x00" * (BYTES_PER_BLOB_ZK_SYNC - len(pubdata))


def reverse_bits(n: int, bits: int = _LOG2_ELEMENTS) -> int:
    """Reverse the lowest ``bits`` bits of ``n``."""
    result = 0
    for _ in range(bits):
        result = (result << 1) | (n & 1)
        n >>= 1
    return result


def bit_reversal_permutation(values: List[int]) -> List[int]:
    """Return a copy of ``values`` with indices in bit-reversed order."""
    bits = len(values).bit_length() - 1
    return [values[reverse_bits(i, bits)] for i in range(len(values))]


def _fft(coefficients: List[int], root: int) -> List[int]:
    """
    Radix-2 Cooley-Tukey FFT over the BLS12-381 scalar field.

    Returns the evaluations of the polynomial with the given coefficients at
    ``root**i`` for ``i`` in natural order.
    """
    n = len(coefficients)
    values = bit_reversal_permutation(coefficients)

    length = 2
    while length <= n:
        half = length // 2
        step = pow(root, n // length, BLS_MODULUS)
        twiddles = [1] * half
        for j in range(1, half):
            twiddles[j] = twiddles[j - 1] * step % BLS_MODULUS
        for start in range(0, n, length):
            for j in range(half):
                u = values[start + j]
                v = values[start + j + half] * twiddles[j] % BLS_MODULUS
                values[start + j] = (u + v) % BLS_MODULUS
                values[start + j + half] = (u - v) % BLS_MODULUS
        length *= 2

    return values


def pubdata_to_4844_blob(padded: bytes) -> Blob:
    """
    Repack a padded pubdata blob into an EIP-4844 blob.

    Every 31-byte chunk is read as a big-endian monomial coefficient, the first
    chunk being the highest-degree one, so the polynomial is what Horner's rule
    builds while streaming the chunks. It is evaluated over the 4096-th roots
    of unity and the evaluations are written in bit-reversed order, 32
    big-endian bytes each.
    Since a coefficient never exceeds 248 bits every element is canonical.

    Args:
        padded: Exactly ``BYTES_PER_BLOB_ZK_SYNC`` bytes (see ``pad_pubdata``)

    Returns:
        Blob of ``BYTES_PER_BLOB`` bytes

    Raises:
        LengthMismatch: If the input is not exactly the internal blob size
    """
    check_length("padded pubdata", padded, BYTES_PER_BLOB_ZK_SYNC)

    coefficients = [
        int.from_bytes(padded[i : i + BLOB_CHUNK_SIZE], "big")
        for i in range(0, BYTES_PER_BLOB_ZK_SYNC, BLOB_CHUNK_SIZE)
    ]
    # lowest degree first
    coefficients.reverse()
    evaluations = bit_reversal_permutation(_fft(coefficients, ROOT_OF_UNITY))

    return Blob(b"".join(e.to_bytes(BYTES_PER_FIELD_ELEMENT, "big") for e in evaluations))


def blob_to_pubdata(blob: bytes) -> bytes:
    """
    Recover the padded pubdata from an EIP-4844 blob.

    This reverses ``pubdata_to_4844_blob``.

    Args:
        blob: ``BYTES_PER_BLOB`` bytes

    Returns:
        Padded pubdata of ``BYTES_PER_BLOB_ZK_SYNC`` bytes

    Raises:
        LengthMismatch: If the blob has the wrong size
        ValueError: If the blob is not the image of any padded pubdata
    """
    check_length("blob", blob, BYTES_PER_BLOB)

    evaluations = []
    for i in range(0, BYTES_PER_BLOB, BYTES_PER_FIELD_ELEMENT):
        element = int.from_bytes(blob[i : i + BYTES_PER_FIELD_ELEMENT], "big")
        if element >= BLS_MODULUS:
            raise ValueError(f"blob element {i // BYTES_PER_FIELD_ELEMENT} is not a canonical field element")
        evaluations.append(element)

    # bit reversal is an involution
    natural = bit_reversal_permutation(evaluations)
    inverse_root = pow(ROOT_OF_UNITY, BLS_MODULUS - 2, BLS_MODULUS)
    inverse_n = pow(ELEMENTS_PER_4844_BLOCK, BLS_MODULUS - 2, BLS_MODULUS)
    coefficients = [c * inverse_n % BLS_MODULUS for c in _fft(natural, inverse_root)]
    # back to stream order, highest degree first
    coefficients.reverse()

    padded = bytearray()
    for index, coefficient in enumerate(coefficients):
        if coefficient.bit_length() > BLOB_CHUNK_SIZE * 8:
            raise ValueError(f"chunk {index} does not fit into {BLOB_CHUNK_SIZE} bytes")
        padded.extend(coefficient.to_bytes(BLOB_CHUNK_SIZE, "big"))

    return bytes(padded)


def assemble_blob(pubdata: bytes) -> Blob:
    """Pad pubdata and repack it into an EIP-4844 blob."""
    return pubdata_to_4844_blob(pad_pubdata(pubdata))
