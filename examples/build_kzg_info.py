#!/usr/bin/env python3
"""Build KZG info for a piece of pubdata and show what goes on chain."""

import logging
import sys
import time
from pathlib import Path

# Add the src directory to the path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from dotenv import load_dotenv
from pubdata_kzg import BlobSidecar, compute_kzg_info, get_kzg_config, load_backend, verify_kzg_info
from pubdata_kzg.core.types import KzgInfo


def main():
    """Run the pubdata to blob pipeline once."""
    print("=== Pubdata KZG Example ===\n")

    load_dotenv()
    logging.basicConfig(level=logging.INFO)

    config = get_kzg_config()
    try:
        backend = load_backend(config)
    except FileNotFoundError as e:
        print(f"Error: {e}")
        print("Set PUBDATA_KZG_TRUSTED_SETUP in your .env file or environment")
        sys.exit(1)

    pubdata = f"Pubdata from Python - {time.strftime('%Y-%m-%d %H:%M:%S')}".encode("utf-8")

    start = time.time()
    info = compute_kzg_info(pubdata, backend)
    print(f"Built KZG info for {len(pubdata)} bytes in {time.time() - start:.2f}s")

    verify_kzg_info(info, backend)
    print("Opening proof and blob proof verified\n")

    for name, value in info.to_dict().items():
        print(f"{name:>20}: {value}")

    serialized = info.to_bytes()
    assert KzgInfo.from_bytes(serialized) == info
    print(f"\nSerialized KZG info: {len(serialized)} bytes")

    sidecar = BlobSidecar.from_kzg_infos([info])
    print(f"Blob versioned hashes for the transaction: {sidecar.to_rpc_dict()['blobVersionedHashes']}")


if __name__ == "__main__":
    main()
