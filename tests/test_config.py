"""Tests for the Config class."""

import pytest

from id3_tag_manager.config import Config, get_config_path


@pytest.fixture
def config_path(tmp_path):
    return tmp_path / "config.toml"


class TestConfigDefaults:
    """Test default settings."""

    def test_defaults(self, config_path):
        config = Config(config_path)

        assert config.get_log_level() == ""
        assert config.get_max_value_length() == 60
        assert config.get_show_raw() is False
        assert config.get_comment_language() == "eng"
        assert not config.is_dirty()

    def test_default_location(self):
        assert get_config_path().name == "config.toml"
        assert get_config_path().parent.name == ".id3tm"

    def test_defaults_not_shared(self, config_path):
        Config(config_path).set_max_value_length(20)
        assert Config(config_path).get_max_value_length() == 60


class TestConfigSetters:
    """Test setting and validating values."""

    def test_log_level(self, config_path):
        config = Config(config_path)
        config.set_log_level("debug")

        assert config.get_log_level() == "debug"
        assert config.is_dirty()

    def test_invalid_log_level(self, config_path):
        with pytest.raises(ValueError, match="Invalid log level"):
            Config(config_path).set_log_level("loud")

    def test_max_value_length(self, config_path):
        config = Config(config_path)
        config.set_max_value_length(10)
        assert config.get_max_value_length() == 10

        with pytest.raises(ValueError, match="at least 10"):
            config.set_max_value_length(9)

    def test_comment_language(self, config_path):
        config = Config(config_path)
        config.set_comment_language("DEU")
        assert config.get_comment_language() == "deu"

        with pytest.raises(ValueError):
            config.set_comment_language("en")


class TestConfigPersistence:
    """Test saving and loading TOML files."""

    def test_save_and_load(self, config_path):
        config = Config(config_path)
        config.set_show_raw(True)
        config.set_comment_language("fra")
        assert config.save()

        loaded = Config(config_path)
        assert loaded.get_show_raw() is True
        assert loaded.get_comment_language() == "fra"
        assert loaded.get_max_value_length() == 60

    def test_save_skipped_when_clean(self, config_path):
        assert Config(config_path).save()
        assert not config_path.exists()

    def test_save_forced(self, tmp_path):
        path = tmp_path / "nested" / "config.toml"
        assert Config(path).save(force=True)
        assert path.exists()

    def test_partial_file(self, config_path):
        config_path.write_text('[display]\nmax_value_length = 30\n')
        config = Config(config_path)

        assert config.get_max_value_length() == 30
        assert config.get_show_raw() is False

    def test_invalid_file(self, config_path):
        config_path.write_text("[display\n")
        config = Config(config_path)

        assert config.load() is False
        assert config.get_max_value_length() == 60
