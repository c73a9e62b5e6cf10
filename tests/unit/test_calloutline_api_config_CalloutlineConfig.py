"""Unit tests for calloutline.api.config.CalloutlineConfig."""

import json

import pytest

from calloutline.api.config.CalloutlineConfig import CalloutlineConfig
from calloutline.api.outline.OutlineConfig import OutlineConfig
from tests.conftest import minimal_config_dict

pytestmark = pytest.mark.config


class TestCalloutlineConfigLoad:
    """Test CalloutlineConfig.load() method."""

    def test_load_valid_config(self, calloutline_home, vault_dir):
        config = CalloutlineConfig.load()

        assert isinstance(config.outline, OutlineConfig)
        assert config.outline.role_tags == ["chat-r", "chat-l"]
        assert config.vault.base_dir == str(vault_dir)
        assert config.watch.sync_interval_secs == 0.01

    def test_load_file_not_found(self):
        with pytest.raises(ValueError, match="not found"):
            CalloutlineConfig.load()

    def test_load_invalid_json(self, isolated_home):
        (isolated_home / "config.json").write_text("{invalid json")
        with pytest.raises(ValueError, match="Invalid JSON"):
            CalloutlineConfig.load()

    def test_load_reports_failing_field(self, isolated_home, vault_dir):
        raw = minimal_config_dict(vault_dir)
        raw["watch"]["sync_interval_secs"] = 0
        (isolated_home / "config.json").write_text(json.dumps(raw))

        with pytest.raises(ValueError, match="watch.sync_interval_secs"):
            CalloutlineConfig.load()

    def test_load_rejects_unknown_section(self, isolated_home, vault_dir):
        raw = minimal_config_dict(vault_dir)
        raw["monitor"] = {}
        (isolated_home / "config.json").write_text(json.dumps(raw))

        with pytest.raises(ValueError, match="Configuration validation error"):
            CalloutlineConfig.load()


def test_home_dir_from_environment(isolated_home):
    assert CalloutlineConfig.get_home_dir() == isolated_home.resolve()
    assert CalloutlineConfig.get_logfile_path() == isolated_home.resolve() / "logfile"


def test_home_dir_default(monkeypatch, tmp_path):
    monkeypatch.delenv("CALLOUTLINE_HOME")
    monkeypatch.setenv("HOME", str(tmp_path))
    assert CalloutlineConfig.get_home_dir() == tmp_path / ".calloutline"


def test_save_round_trip(calloutline_home):
    config = CalloutlineConfig.load()
    config.outline.max_heading_length = 60
    config.save()

    assert CalloutlineConfig.load().outline.max_heading_length == 60
    assert not (calloutline_home / "config.json.tmp").exists()


def test_to_dict_sections(calloutline_home):
    assert list(CalloutlineConfig.load().to_dict()) == ["outline", "vault", "watch", "log"]


def test_outline_defaults():
    config = OutlineConfig()

    assert config.role_tags == ["chat-r", "chat-l"]
    assert config.max_heading_length == 80
    assert config.ellipsis == "..."
    assert config.heading_level == 1
    assert config.extensions == [".md"]


def test_outline_extensions_are_normalized():
    assert OutlineConfig(extensions=["md", ".MARKDOWN"]).extensions == [".md", ".markdown"]


@pytest.mark.parametrize(
    "overrides",
    [
        {"role_tags": []},
        {"role_tags": ["chat r"]},
        {"role_tags": ["chat]"]},
        {"max_heading_length": 3},
        {"heading_level": 0},
        {"heading_level": 7},
        {"unknown": True},
    ],
)
def test_outline_validation(overrides):
    with pytest.raises(ValueError):
        OutlineConfig(**overrides)
