"""
Tests for settings loading, deep merge logic and config assembly.

Uses real TOML files on disk (no mocking).
"""

from pathlib import Path

from anylaunch.config import SearchConfig, create_dispatcher
from anylaunch.search.entry import EntryKind
from anylaunch.utils.helpers import (
    _deep_merge,
    data_dir,
    load_settings,
    path_entries_from_env,
    settings_path,
)
from conftest import FakeHistory


class TestDeepMerge:
    """Test the _deep_merge function directly."""

    def test_override_replaces_flat_key(self):
        assert _deep_merge({"a": 1, "b": 2}, {"b": 99}) == {"a": 1, "b": 99}

    def test_override_adds_new_key(self):
        assert _deep_merge({"a": 1}, {"b": 2}) == {"a": 1, "b": 2}

    def test_nested_dicts_are_merged(self):
        base = {"section": {"a": 1, "b": 2}}
        override = {"section": {"b": 99, "c": 3}}
        assert _deep_merge(base, override) == {"section": {"a": 1, "b": 99, "c": 3}}

    def test_base_is_not_mutated(self):
        base = {"a": {"x": 1}}
        _deep_merge(base, {"a": {"x": 2}})
        assert base["a"]["x"] == 1

    def test_result_does_not_share_nested_dicts(self):
        base = {"a": {"x": 1}}
        result = _deep_merge(base, {})
        result["a"]["x"] = 5
        assert base["a"]["x"] == 1


class TestLoadSettings:
    """Test load_settings with real TOML files."""

    def test_returns_defaults_when_file_missing(self, tmp_path):
        settings = load_settings(tmp_path / "nonexistent.toml")
        assert settings["launcher"]["open_command"] == "xdg-open"
        assert settings["search"]["max_results"] == 30

    def test_loaded_values_override_defaults(self, tmp_settings):
        settings = load_settings(tmp_settings)
        assert settings["search"]["max_results"] == 10
        assert settings["web_search"]["name"] == "Kagi"
        # Untouched defaults survive
        assert settings["web_search"]["icon"] == "web-browser"

    def test_broken_file_falls_back_to_defaults(self, tmp_path):
        path = tmp_path / "settings.toml"
        path.write_text("[launcher\nopen_command = ")
        settings = load_settings(path)
        assert settings["launcher"]["open_command"] == "xdg-open"


class TestEnvironmentDefaults:

    def test_path_entries_in_order(self):
        env = {"PATH": "/usr/local/bin:/usr/bin::/bin"}
        assert path_entries_from_env(env) == ("/usr/local/bin", "/usr/bin", "/bin")

    def test_missing_path_is_empty(self):
        assert path_entries_from_env({}) == ()

    def test_xdg_locations(self):
        env = {"HOME": "/home/u", "XDG_CONFIG_HOME": "/cfg"}
        assert settings_path(env) == Path("/cfg/anylaunch/settings.toml")
        assert data_dir(env) == Path("/home/u/.local/share/anylaunch")


class TestSearchConfig:

    def test_from_settings(self, tmp_settings, tmp_path):
        env = {"HOME": str(tmp_path), "PATH": "/a:/b"}
        config = SearchConfig.from_settings(load_settings(tmp_settings), environ=env)
        assert config.path_entries == ("/a", "/b")
        assert config.max_results == 10
        assert config.max_workers == 2
        assert config.tiers == {"application": 0}
        assert config.history_db == tmp_path / ".local" / "share" / "anylaunch" / "history.db"
        assert config.application_dirs[0] == tmp_path / ".local" / "share" / "applications"

    def test_explicit_dirs(self, tmp_path):
        settings = load_settings(tmp_path / "none.toml")
        settings["applications"]["dirs"] = [str(tmp_path / "apps")]
        settings["history"]["db_path"] = str(tmp_path / "h.db")
        config = SearchConfig.from_settings(settings, environ={"HOME": str(tmp_path)})
        assert config.application_dirs == (tmp_path / "apps",)
        assert config.history_db == tmp_path / "h.db"
        assert config.path_entries == ()

    def test_create_dispatcher(self, bin_dir, apps_dir, tmp_path):
        config = SearchConfig(
            path_entries=(str(bin_dir),),
            application_dirs=(apps_dir,),
            history_db=tmp_path / "h.db",
        )
        with create_dispatcher(config, history=FakeHistory()) as dispatcher:
            kinds = [e.kind for e in dispatcher.search("ls")]
        assert kinds == [EntryKind.COMMAND_LINE, EntryKind.WEB_SEARCH]

    def test_create_dispatcher_with_real_history(self, bin_dir, apps_dir, tmp_path):
        config = SearchConfig(
            path_entries=(str(bin_dir),),
            application_dirs=(apps_dir,),
            history_db=tmp_path / "data" / "h.db",
        )
        with create_dispatcher(config) as dispatcher:
            results = dispatcher.search("fire")
        assert results[0].name == "Firefox"
        assert (tmp_path / "data" / "h.db").exists()
