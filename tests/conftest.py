"""Shared fixtures for adu-manifest tests."""

import json
import sys
from pathlib import Path

import pytest

# Add project root to path so we can import modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from config import Config


def make_action(manifest, file_urls=None) -> dict:
    """Wrap a manifest into an update action, serializing it the way the service does."""
    action = {"updateManifest": json.dumps(manifest)}
    if file_urls is not None:
        action["fileUrls"] = file_urls
    return action


@pytest.fixture
def sample_manifest():
    """Sample update manifest with two files."""
    return {
        "updateId": {
            "provider": "Azure",
            "name": "IOT-Firmware",
            "version": "1.2.0.0",
        },
        "files": {
            "0001": {
                "fileName": "firmware.bin",
                "sizeInBytes": 1024,
                "hashes": {"sha256": "Zm9v"},
            },
            "0002": {
                "fileName": "install.sh",
                "arguments": "--reboot",
                "hashes": {"sha256": "YmFy", "sha1": "YmF6"},
            },
        },
    }


@pytest.fixture
def sample_action(sample_manifest):
    """Update action wrapping sample_manifest."""
    return make_action(
        sample_manifest,
        {
            "0001": "https://example.com/firmware.bin",
            "0002": "https://example.com/install.sh",
        },
    )


@pytest.fixture
def sample_config(tmp_path):
    """Pre-configured Config instance for testing."""
    return Config(
        action_source=str(tmp_path / "update-action.json"),
        request_timeout=30.0,
        output_json=False,
    )


@pytest.fixture
def config_toml_content():
    """Sample config.toml content."""
    return """
action_source = "https://custom.example.com/action.json"
request_timeout = 10.5
output_json = true
"""
