"""Tests for didi.journal.config."""

from didi.journal.config import DisplayConfig


class TestDisplayConfig:
    def test_defaults(self):
        config = DisplayConfig()
        assert config.show_date is True
        assert config.show_content is True
        assert config.show_ids is False
        assert config.show_hashes is False
        assert config.show_keywords is False
        assert config.include_hidden is False

    def test_custom_values(self):
        config = DisplayConfig(show_ids=True, include_hidden=True)
        assert config.show_ids is True
        assert config.include_hidden is True
