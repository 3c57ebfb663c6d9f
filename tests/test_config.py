"""
Tests for configuration loading.
"""

import os

import pytest

from prettycode.config import Config, ConfigError, load_config


class TestConfig:
    def test_defaults_without_file(self):
        conf = load_config()
        assert conf.get("theme") == "default"
        assert conf.get("keep_background") is False
        assert conf.get("output.template") is None

    def test_dot_paths(self, tmp_path):
        path = tmp_path / "prettycode.conf"
        path.write_text("theme:\n  light: friendly\n  dark: monokai\noutput:\n  title: Doc\n")
        conf = load_config(str(path))
        assert conf.get("theme.dark") == "monokai"
        assert conf.get("theme") == {"light": "friendly", "dark": "monokai"}
        assert conf.get("output.title") == "Doc"

    def test_missing_keys_fall_back_to_defaults(self, tmp_path):
        path = tmp_path / "prettycode.conf"
        path.write_text("output:\n  title: Doc\n")
        conf = load_config(str(path))
        assert conf.get("output.template") is None
        assert conf.get("tokens_map") == {}
        assert conf.get("no.such.key", 42) == 42

    def test_lookup_through_scalar(self):
        conf = Config({"theme": "monokai"})
        assert conf.get("theme.dark", "x") == "x"

    def test_empty_file(self, tmp_path):
        path = tmp_path / "prettycode.conf"
        path.write_text("")
        assert load_config(str(path)).get("theme") == "default"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="no such config file"):
            load_config(str(tmp_path / "nope.conf"))

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "prettycode.conf"
        path.write_text("theme: [unclosed\n")
        with pytest.raises(ConfigError, match="invalid YAML"):
            load_config(str(path))

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "prettycode.conf"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="expected a mapping"):
            load_config(str(path))

    def test_paths_are_relative_to_config(self, tmp_path):
        path = tmp_path / "prettycode.conf"
        path.write_text("output:\n  template: _templates\n")
        conf = load_config(str(path))
        assert conf.path("output.template") == os.path.join(str(tmp_path), "_templates")

    def test_extension_conf(self):
        conf = Config({"theme": "monokai", "keep_background": True, "tokens_map": {"fn": "name.function"}})
        assert conf.extension_conf() == {
            "theme": "monokai",
            "keep_background": True,
            "tokens_map": {"fn": "name.function"},
        }
