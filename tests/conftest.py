"""
Shared test fixtures for the anylaunch test suite.

Provides a temporary history database, executables, desktop files and
settings files that use real file I/O (no mocking of the filesystem).
"""

import os
import stat
import textwrap

import pytest
import toml

from anylaunch.services.history import HistoryService


class FakeHistory:
    """In-memory history with the same read interface as HistoryService."""

    def __init__(self, commands=()):
        self.commands = list(commands)

    def is_in_history(self, query):
        return query.strip() in self.commands

    def search(self, query, limit=30):
        needle = query.strip().lower()
        return [c for c in self.commands if needle and needle in c.lower()][:limit]


def make_executable(directory, name, mode=0o755):
    """Create a script file with the given permission bits."""
    path = directory / name
    path.write_text("#!/bin/sh\nexit 0\n")
    os.chmod(path, mode)
    return path


def write_desktop_file(directory, file_name, body):
    path = directory / file_name
    path.write_text(textwrap.dedent(body).lstrip())
    return path


@pytest.fixture
def empty_history():
    return FakeHistory()


@pytest.fixture
def history_service(tmp_path):
    """A real SQLite-backed history store."""
    svc = HistoryService(tmp_path / "data" / "history.db")
    yield svc
    svc.close()


@pytest.fixture
def bin_dir(tmp_path):
    """A PATH directory with one executable ("ls") and one plain file ("notes")."""
    directory = tmp_path / "bin"
    directory.mkdir()
    make_executable(directory, "ls")
    plain = directory / "notes"
    plain.write_text("not a program\n")
    os.chmod(plain, stat.S_IRUSR | stat.S_IWUSR)
    return directory


@pytest.fixture
def apps_dir(tmp_path):
    """An applications directory with visible, hidden and broken entries."""
    directory = tmp_path / "applications"
    directory.mkdir()
    write_desktop_file(directory, "firefox.desktop", """
        [Desktop Entry]
        Type=Application
        Name=Firefox
        Icon=firefox
        Exec=firefox %u
    """)
    write_desktop_file(directory, "code.desktop", """
        [Desktop Entry]
        Type=Application
        Name=Visual Studio Code
        Icon=vscode
        Exec=code --new-window %F
    """)
    write_desktop_file(directory, "hidden.desktop", """
        [Desktop Entry]
        Name=Secret Tool
        Exec=secret-tool
        Hidden=true
    """)
    write_desktop_file(directory, "nodisplay.desktop", """
        [Desktop Entry]
        Name=Helper Daemon
        Exec=helperd
        NoDisplay=true
    """)
    write_desktop_file(directory, "broken.desktop", """
        this is not an ini file
        [[[
    """)
    return directory


@pytest.fixture
def tmp_settings(tmp_path):
    """Create a real settings TOML file with all sections."""
    settings_path = tmp_path / "settings.toml"
    data = {
        "launcher": {"open_command": "xdg-open", "max_workers": 2},
        "search": {"max_results": 10},
        "web_search": {"name": "Kagi", "url": "https://kagi.com/search?q={query}"},
        "ranking": {"application": 0},
    }
    settings_path.write_text(toml.dumps(data))
    return settings_path
