"""
anylaunch configuration and assembly.

Builds the immutable SearchConfig from settings.toml and the process
environment, then wires providers, history and the dispatcher together.

Usage:
    from anylaunch.config import SearchConfig, create_dispatcher

    config = SearchConfig.from_settings(load_settings())
    with create_dispatcher(config) as dispatcher:
        results = dispatcher.search("firefo")
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional

from loguru import logger

from anylaunch.search.dispatcher import Dispatcher
from anylaunch.search.providers import (
    ApplicationProvider,
    CalculatorProvider,
    CommandProvider,
    FileProvider,
    HistoryProvider,
    UrlProvider,
    WebSearchProvider,
)
from anylaunch.search.ranking import RankPolicy
from anylaunch.services.desktop_entries import IniDesktopEntryReader, application_dirs
from anylaunch.services.file_info import StatFileInfoResolver
from anylaunch.services.history import HistoryService
from anylaunch.utils.helpers import DEFAULT_SETTINGS, data_dir, path_entries_from_env


@dataclass(frozen=True)
class SearchConfig:
    """Everything the engine reads from the environment, captured once."""
    path_entries: tuple[str, ...] = ()
    application_dirs: tuple[Path, ...] = ()
    history_db: Path = Path("history.db")
    open_command: str = "xdg-open"
    web_search: Mapping[str, str] = field(default_factory=lambda: dict(DEFAULT_SETTINGS["web_search"]))
    tiers: Mapping[str, int] = field(default_factory=dict)
    max_results: int = 30
    max_workers: int = 4

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any], environ: Optional[Mapping[str, str]] = None) -> "SearchConfig":
        """
        Build a config from loaded settings.

        Args:
            settings: Output of load_settings()
            environ: Environment mapping, defaults to os.environ
        """
        env = os.environ if environ is None else environ
        launcher = settings.get("launcher", {})

        dirs = settings.get("applications", {}).get("dirs") or []
        if dirs:
            app_dirs = tuple(Path(os.path.expanduser(d)) for d in dirs)
        else:
            app_dirs = tuple(application_dirs(env))

        db_path = settings.get("history", {}).get("db_path") or ""
        history_db = Path(os.path.expanduser(db_path)) if db_path else data_dir(env) / "history.db"

        path_entries = path_entries_from_env(env)
        if not path_entries:
            logger.warning("PATH is empty, only explicit paths will be offered as commands")

        return cls(
            path_entries=path_entries,
            application_dirs=app_dirs,
            history_db=history_db,
            open_command=launcher.get("open_command", "xdg-open"),
            web_search=dict(settings.get("web_search", {})),
            tiers=dict(settings.get("ranking", {})),
            max_results=int(settings.get("search", {}).get("max_results", 30)),
            max_workers=int(launcher.get("max_workers", 4)),
        )


def create_dispatcher(config: SearchConfig, history=None) -> Dispatcher:
    """
    Wire all providers into a Dispatcher.

    Args:
        config: Search configuration
        history: History store, defaults to a HistoryService at config.history_db
    """
    if history is None:
        history = HistoryService(config.history_db)

    providers = [
        CalculatorProvider(),
        UrlProvider(open_command=config.open_command),
        HistoryProvider(history, max_results=config.max_results),
        CommandProvider(config.path_entries, history),
        ApplicationProvider(IniDesktopEntryReader(), config.application_dirs),
        FileProvider(StatFileInfoResolver(), open_command=config.open_command, max_results=config.max_results),
        WebSearchProvider(engine=dict(config.web_search), open_command=config.open_command),
    ]

    return Dispatcher(
        providers,
        rank_policy=RankPolicy(config.tiers),
        max_results=config.max_results,
        max_workers=config.max_workers,
    )
