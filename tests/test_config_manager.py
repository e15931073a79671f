"""Tests for the YAML configuration manager."""
from datetime import timedelta

import pytest
import yaml

from utils.config_manager import ConfigManager


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "session:\n"
        "  key: f13\n"
        "  interval_seconds: 30\n"
        "  fixed_time_enabled: true\n"
        "  duration_minutes: 2\n"
        "logging:\n"
        "  level: DEBUG\n"
    )
    return path


class TestConfigManager:

    def test_defaults_without_file(self):
        config = ConfigManager()
        assert config.get('app.title') == "Just Move It"
        assert config.get('session.interval_seconds') == 60
        assert config.get('missing.key', "fallback") == "fallback"

    def test_missing_file_raises(self, tmp_path):
        config = ConfigManager()
        with pytest.raises(FileNotFoundError):
            config.load_config(str(tmp_path / "nope.yaml"))

    def test_loaded_values_override_defaults(self, config_file):
        config = ConfigManager()
        config.load_config(str(config_file))

        assert config.get('session.key') == "f13"
        assert config.get('logging.level') == "DEBUG"
        # untouched defaults survive the merge
        assert config.get('logging.backup_count') == 5
        assert config.get('app.window_width') == 300

    def test_empty_file_keeps_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        config = ConfigManager()
        config.load_config(str(path))
        assert config.get('session.key') == "f15"

    def test_non_mapping_root_rejected(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ValueError):
            ConfigManager().load_config(str(path))

    def test_session_settings(self, config_file):
        config = ConfigManager()
        config.load_config(str(config_file))

        settings = config.session_settings()

        assert settings.interval == timedelta(seconds=30)
        assert settings.fixed_time_enabled
        assert settings.execution_duration == timedelta(minutes=2)
        assert settings.key == "f13"

    def test_set_and_save(self, tmp_path):
        config = ConfigManager()
        config.set('session.interval_seconds', 15)
        config.set('extra.nested.value', True)
        path = tmp_path / "saved.yaml"

        config.save(str(path))

        saved = yaml.safe_load(path.read_text())
        assert saved['session']['interval_seconds'] == 15
        assert saved['extra']['nested']['value'] is True

    def test_instances_are_independent(self):
        first = ConfigManager()
        second = ConfigManager()
        first.set('session.key', "f14")
        assert second.get('session.key') == "f15"
