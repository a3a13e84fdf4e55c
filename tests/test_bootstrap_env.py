"""
Unit tests for flattening Streamlit secrets into environment names.
"""

from fleet_maintenance.bootstrap_env import env_name, iter_secret_vars


class TestSecretFlattening:
    """Test env_name and iter_secret_vars."""

    def test_env_name(self):
        """Test names are joined, upper-cased and sanitized."""
        assert env_name("storage", "data-dir") == "STORAGE_DATA_DIR"
        assert env_name("fleet.log level") == "FLEET_LOG_LEVEL"

    def test_nested_secrets(self):
        """Test nested tables become prefixed variables with string values."""
        secrets = {"FLEET_SEED_ON_START": False, "storage": {"data_dir": "/tmp/fleet", "opts": {"n": 2}}}
        assert dict(iter_secret_vars(secrets)) == {
            "FLEET_SEED_ON_START": "False",
            "STORAGE_DATA_DIR": "/tmp/fleet",
            "STORAGE_OPTS_N": "2",
        }
