"""Shared pytest configuration and fixtures for all tests."""

import json
from pathlib import Path

import pytest


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: unit tests")
    config.addinivalue_line("markers", "integration: integration tests")
    config.addinivalue_line("markers", "outline: callout outline domain")
    config.addinivalue_line("markers", "vault: vault domain")
    config.addinivalue_line("markers", "config: configuration domain")
    config.addinivalue_line("markers", "cli: command line interface")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Configuration Helpers
# =============================================================================


def minimal_config_dict(base_dir: Path | str) -> dict:
    """Minimal valid calloutline configuration dict for testing."""
    return {
        "outline": {
            "role_tags": ["chat-r", "chat-l"],
            "max_heading_length": 80,
            "ellipsis": "...",
            "heading_level": 1,
            "extensions": [".md"],
        },
        "vault": {"base_dir": str(base_dir)},
        "watch": {"sync_interval_secs": 0.01},
        "log": {
            "level": "INFO",
            "debug_retention_days": 0.5,
            "info_retention_days": 1.0,
            "warning_retention_days": 2.0,
            "error_retention_days": 7.0,
        },
    }


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch) -> Path:
    """Point CALLOUTLINE_HOME at an empty temporary directory."""
    home = tmp_path / ".calloutline"
    home.mkdir()
    monkeypatch.setenv("CALLOUTLINE_HOME", str(home))
    return home


@pytest.fixture
def vault_dir(tmp_path) -> Path:
    vault = tmp_path / "vault"
    vault.mkdir()
    return vault


@pytest.fixture
def calloutline_home(isolated_home, vault_dir) -> Path:
    """CALLOUTLINE_HOME with a valid config.json for ``vault_dir``."""
    (isolated_home / "config.json").write_text(json.dumps(minimal_config_dict(vault_dir)), encoding="utf-8")
    return isolated_home


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


# Chat transcript used across tests: two callout blocks around native headings
CHAT_NOTE = (
    "# Session\n"
    "\n"
    "> [!chat-r]\n"
    "> How do I reverse a list?\n"
    "\n"
    "## Answer\n"
    "\n"
    "> [!chat-l]\n"
    "> Use reversed() or slicing\n"
    "> with a negative step.\n"
)
