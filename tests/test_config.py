"""Tests for KZG configuration."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from pubdata_kzg.config import KzgConfig, get_kzg_config, load_backend


class TestKzgConfig:
    """Test KZG configuration functionality."""

    def test_config_creation(self):
        config = KzgConfig(trusted_setup_path="/tmp/setup.txt", precompute=4, kzg_tests_dir="/tmp/vectors")

        assert config.trusted_setup_path == Path("/tmp/setup.txt")
        assert config.precompute == 4
        assert config.kzg_tests_dir == Path("/tmp/vectors")

    def test_negative_precompute(self):
        with pytest.raises(ValueError, match="precompute cannot be negative"):
            KzgConfig(trusted_setup_path="setup.txt", precompute=-1)

    @patch.dict(os.environ, {}, clear=True)
    def test_defaults(self):
        """Without environment variables paths are relative to the working directory."""
        config = get_kzg_config()

        assert config.trusted_setup_path == Path("trusted_setup.txt")
        assert config.precompute == 0
        assert config.kzg_tests_dir == Path("etc/kzg_tests")

    @patch.dict(os.environ, {"ZKSYNC_HOME": "/opt/zksync"}, clear=True)
    def test_defaults_from_home(self):
        config = get_kzg_config()

        assert config.trusted_setup_path == Path("/opt/zksync/trusted_setup.txt")
        assert config.kzg_tests_dir == Path("/opt/zksync/etc/kzg_tests")

    @patch.dict(
        os.environ,
        {
            "ZKSYNC_HOME": "/opt/zksync",
            "PUBDATA_KZG_TRUSTED_SETUP": "/data/setup.txt",
            "PUBDATA_KZG_PRECOMPUTE": "8",
            "PUBDATA_KZG_TESTS_DIR": "/data/vectors",
        },
    )
    def test_explicit_overrides(self):
        config = get_kzg_config()

        assert config.trusted_setup_path == Path("/data/setup.txt")
        assert config.precompute == 8
        assert config.kzg_tests_dir == Path("/data/vectors")

    @patch.dict(os.environ, {"PUBDATA_KZG_PRECOMPUTE": "lots"})
    def test_invalid_precompute(self):
        with pytest.raises(ValueError, match="must be an integer"):
            get_kzg_config()


class TestLoadBackend:
    """Test building a backend from configuration."""

    @patch("pubdata_kzg.config.CKzgBackend")
    def test_uses_given_config(self, mock_backend):
        config = KzgConfig(trusted_setup_path="/data/setup.txt", precompute=2)

        load_backend(config)

        mock_backend.from_trusted_setup.assert_called_once_with(Path("/data/setup.txt"), 2)

    @patch("pubdata_kzg.config.CKzgBackend")
    @patch.dict(os.environ, {"PUBDATA_KZG_TRUSTED_SETUP": "/env/setup.txt"}, clear=True)
    def test_uses_environment(self, mock_backend):
        load_backend()

        mock_backend.from_trusted_setup.assert_called_once_with(Path("/env/setup.txt"), 0)
