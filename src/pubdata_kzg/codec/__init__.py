"""Pubdata to EIP-4844 blob encoding utilities."""

from pubdata_kzg.codec.blob_codec import (
    assemble_blob,
    blob_to_pubdata,
    pad_pubdata,
    pubdata_to_4844_blob,
)

__all__ = ["assemble_blob", "blob_to_pubdata", "pad_pubdata", "pubdata_to_4844_blob"]
