"""
Unit tests for configuration manager
"""

import json
import pytest
from pathlib import Path

from utils.config_manager import UnifiedConfigManager, DEFAULT_PORT
from utils.exceptions import ConfigurationError, ErrorCodes


@pytest.mark.unit
class TestConfigManager:
    """Test cases for UnifiedConfigManager"""

    @pytest.fixture
    def sample_config(self):
        """Sample configuration data"""
        return {
            "api_config": {
                "host": "127.0.0.1",
                "port": 8080,
                "cors_origins": ["http://localhost:3000"]
            },
            "static_config": {
                "public_dir": "assets",
                "subdirs": ["images"]
            },
            "logging_config": {
                "level": "DEBUG",
                "modules": {"API": {"level": "WARNING", "enabled": False}}
            }
        }

    @pytest.fixture
    def config_dir(self, sample_config, tmp_path):
        """Create temporary config directory"""
        config_path = tmp_path / "config"
        config_path.mkdir()
        (config_path / "config.json").write_text(json.dumps(sample_config), encoding="utf-8")
        return config_path

    @pytest.fixture
    def config_manager(self, config_dir, monkeypatch):
        monkeypatch.delenv("PORT", raising=False)
        return UnifiedConfigManager(str(config_dir))

    def test_get_nested(self, config_manager):
        assert config_manager.get_nested("api_config.host") == "127.0.0.1"
        assert config_manager.get_nested("api_config.missing", "default") == "default"
        assert config_manager.get("nonexistent", "default") == "default"

    def test_set_nested(self, config_manager):
        config_manager.set_nested("api_config.port", 9000)
        assert config_manager.get_api_config().port == 9000

    def test_dict_access(self, config_manager):
        assert "api_config" in config_manager
        config_manager["client_config"] = {"base_url": "http://example.com"}
        assert config_manager.get_client_config().base_url == "http://example.com"

    def test_get_api_config(self, config_manager):
        api_config = config_manager.get_api_config()
        assert api_config.host == "127.0.0.1"
        assert api_config.port == 8080
        assert api_config.cors_origins == ["http://localhost:3000"]

    def test_port_environment_override(self, config_manager, monkeypatch):
        monkeypatch.setenv("PORT", "4567")
        assert config_manager.get_api_config().port == 4567

    def test_invalid_port_environment_ignored(self, config_manager, monkeypatch):
        monkeypatch.setenv("PORT", "not-a-port")
        assert config_manager.get_api_config().port == 8080

    def test_defaults_without_config_dir(self, tmp_path, monkeypatch):
        monkeypatch.delenv("PORT", raising=False)
        manager = UnifiedConfigManager(str(tmp_path / "missing"))
        assert manager.get_api_config().port == DEFAULT_PORT == 3000
        assert manager.get_static_config().subdirs == ["images", "css", "js"]

    def test_static_config_relative_path(self, config_manager):
        static_config = config_manager.get_static_config()
        assert Path(static_config.public_dir).is_absolute()
        assert Path(static_config.public_dir).name == "assets"
        assert static_config.subdirs == ["images"]

    def test_logging_config(self, config_manager):
        logging_config = config_manager.get_logging_config()
        assert logging_config.level == "DEBUG"
        assert logging_config.modules["API"].enabled is False

    def test_invalid_json(self, tmp_path):
        (tmp_path / "broken.json").write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigurationError) as exc_info:
            UnifiedConfigManager(str(tmp_path))
        assert exc_info.value.error_code == ErrorCodes.CONFIG_INVALID_FORMAT

    def test_files_merged_in_order(self, config_dir):
        (config_dir / "zz_override.json").write_text(
            json.dumps({"client_config": {"base_url": "http://override"}}), encoding="utf-8"
        )
        manager = UnifiedConfigManager(str(config_dir))
        assert manager.get_client_config().base_url == "http://override"
        assert manager.get_nested("api_config.port") == 8080

    def test_save_config(self, config_manager, tmp_path):
        target = tmp_path / "out" / "merged.json"
        config_manager.save_config(str(target))
        assert json.loads(target.read_text(encoding="utf-8"))["api_config"]["port"] == 8080

    def test_reload_config(self, config_manager, config_dir):
        (config_dir / "config.json").write_text(json.dumps({"api_config": {"port": 7000}}), encoding="utf-8")
        config_manager.reload_config()
        assert config_manager.get_api_config().port == 7000
