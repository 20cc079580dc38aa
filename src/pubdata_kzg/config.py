"""Configuration for locating the KZG trusted setup and test vectors."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from pubdata_kzg.backend import CKzgBackend

TRUSTED_SETUP_FILE = "trusted_setup.txt"
KZG_TESTS_DIR = Path("etc") / "kzg_tests"


@dataclass
class KzgConfig:
    """Where to load the trusted setup from and how to initialize it."""

    trusted_setup_path: Path
    precompute: int = 0
    kzg_tests_dir: Optional[Path] = None

    def __post_init__(self):
        """Validate configuration."""
        self.trusted_setup_path = Path(self.trusted_setup_path)
        if self.kzg_tests_dir is not None:
            self.kzg_tests_dir = Path(self.kzg_tests_dir)
        if self.precompute < 0:
            raise ValueError("precompute cannot be negative")


def get_home() -> Path:
    """Repository home, taken from ZKSYNC_HOME or the working directory."""
    return Path(os.getenv("ZKSYNC_HOME", "."))


def get_kzg_config() -> KzgConfig:
    """
    Get the KZG configuration from environment variables.

    Environment variables:
        PUBDATA_KZG_TRUSTED_SETUP: Path to the trusted setup file
        PUBDATA_KZG_PRECOMPUTE: ckzg precompute level (default 0)
        PUBDATA_KZG_TESTS_DIR: Directory holding kzg_test_*.json vectors
        ZKSYNC_HOME: Base directory for the defaults of the paths above

    Returns:
        KzgConfig
    """
    home = get_home()

    trusted_setup_path = os.getenv("PUBDATA_KZG_TRUSTED_SETUP")
    kzg_tests_dir = os.getenv("PUBDATA_KZG_TESTS_DIR")

    precompute = os.getenv("PUBDATA_KZG_PRECOMPUTE", "0")
    try:
        precompute_level = int(precompute)
    except ValueError:
        raise ValueError(f"PUBDATA_KZG_PRECOMPUTE must be an integer, got {precompute!r}") from None

    return KzgConfig(
        trusted_setup_path=Path(trusted_setup_path) if trusted_setup_path else home / TRUSTED_SETUP_FILE,
        precompute=precompute_level,
        kzg_tests_dir=Path(kzg_tests_dir) if kzg_tests_dir else home / KZG_TESTS_DIR,
    )


def load_backend(config: Optional[KzgConfig] = None) -> CKzgBackend:
    """Load a CKzgBackend from the given or environment configuration."""
    config = config or get_kzg_config()
    return CKzgBackend.from_trusted_setup(config.trusted_setup_path, config.precompute)
