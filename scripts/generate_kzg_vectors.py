#!/usr/bin/env python3
"""Record a golden KZG test vector for the integration tests."""

import argparse
import json
import random
import sys
from pathlib import Path

from dotenv import load_dotenv

from pubdata_kzg.commitment import compute_kzg_info, verify_kzg_info
from pubdata_kzg.config import get_kzg_config, load_backend


def build_vector(pubdata: bytes, backend) -> dict:
    """Compute KZG info and render it in the golden vector layout."""
    info = compute_kzg_info(pubdata, backend)
    verify_kzg_info(info, backend)

    expected = info.to_dict()
    # the point and value are recorded as integers
    expected["opening_point"] = hex(int.from_bytes(info.opening_point, "big"))
    expected["opening_value"] = hex(int.from_bytes(info.opening_value, "big"))

    return {"pubdata": pubdata.hex(), "expected_outputs": expected}


def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--input", type=Path, help="File holding the raw pubdata")
    parser.add_argument("--size", type=int, default=4096, help="Random pubdata size when no input is given")
    parser.add_argument("--seed", type=int, default=0, help="Seed for random pubdata")
    parser.add_argument("--output", type=Path, help="Output path (default: <kzg tests dir>/kzg_test_0.json)")
    args = parser.parse_args()

    load_dotenv()
    config = get_kzg_config()

    if args.input:
        pubdata = args.input.read_bytes()
    else:
        pubdata = random.Random(args.seed).randbytes(args.size)

    try:
        backend = load_backend(config)
    except FileNotFoundError as e:
        print(f"Error: {e}")
        print("Set PUBDATA_KZG_TRUSTED_SETUP or ZKSYNC_HOME to point at trusted_setup.txt")
        sys.exit(1)

    vector = build_vector(pubdata, backend)

    output = args.output or config.kzg_tests_dir / "kzg_test_0.json"
    output.parent.mkdir(parents=True, exist_ok=True)
    with open(output, "w") as f:
        json.dump(vector, f, indent=2)

    print(f"Wrote vector for {len(pubdata)} bytes of pubdata to {output}")
    print(f"  versioned hash: {vector['expected_outputs']['versioned_hash']}")


if __name__ == "__main__":
    main()
