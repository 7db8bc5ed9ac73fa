"""
Desktop Entry Reader - Parse freedesktop .desktop files into records.

Only the [Desktop Entry] group is read. Hidden/NoDisplay flags are
reported on the record; filtering them is the caller's decision.
"""

import configparser
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Mapping, Optional, Protocol

from loguru import logger

from anylaunch.errors import ParseFailure

DESKTOP_GROUP = "Desktop Entry"


@dataclass(frozen=True)
class DesktopRecord:
    """Fields of a desktop entry that the launcher cares about."""
    desktop_id: str
    name: str
    icon: str
    exec_command: str
    hidden: bool = False
    no_display: bool = False


class DesktopEntryReader(Protocol):
    def read(self, path: Path) -> DesktopRecord:
        ...


def _as_bool(value: str) -> bool:
    return value.strip().lower() == "true"


class IniDesktopEntryReader:
    """Reads .desktop files with configparser."""

    def read(self, path: Path) -> DesktopRecord:
        """
        Parse a single desktop file.

        Raises:
            ParseFailure: File unreadable, malformed, or missing Name/Exec
        """
        parser = configparser.ConfigParser(interpolation=None, strict=False)
        # Keys are case-sensitive in desktop files
        parser.optionxform = str
        try:
            with open(path, encoding="utf-8", errors="replace") as f:
                parser.read_file(f)
        except (OSError, configparser.Error) as e:
            raise ParseFailure(f"Cannot parse {path}: {e}") from e

        if DESKTOP_GROUP not in parser:
            raise ParseFailure(f"{path} has no [{DESKTOP_GROUP}] group")
        section = parser[DESKTOP_GROUP]

        name = section.get("Name", "").strip()
        exec_command = section.get("Exec", "").strip()
        if not name or not exec_command:
            raise ParseFailure(f"{path} is missing Name or Exec")

        return DesktopRecord(
            desktop_id=Path(path).name,
            name=name,
            icon=section.get("Icon", "").strip(),
            exec_command=exec_command,
            hidden=_as_bool(section.get("Hidden", "")),
            no_display=_as_bool(section.get("NoDisplay", "")),
        )


def application_dirs(environ: Optional[Mapping[str, str]] = None) -> list[Path]:
    """
    Application directories in XDG lookup order (user directory first).

    Args:
        environ: Environment mapping, defaults to os.environ
    """
    env = os.environ if environ is None else environ
    home = env.get("HOME") or str(Path.home())
    data_home = env.get("XDG_DATA_HOME") or os.path.join(home, ".local", "share")
    data_dirs = env.get("XDG_DATA_DIRS") or "/usr/local/share:/usr/share"

    dirs = [Path(data_home) / "applications"]
    dirs.extend(Path(d) / "applications" for d in data_dirs.split(":") if d)
    return dirs


def iter_desktop_files(dirs: Iterable[Path]) -> Iterator[Path]:
    """
    Yield .desktop files, earlier directories shadowing later ones.

    Unreadable directories are skipped.
    """
    seen = set()
    for directory in dirs:
        try:
            files = sorted(Path(directory).glob("*.desktop"))
        except OSError:
            logger.debug(f"Skipping unreadable application dir {directory}")
            continue
        for path in files:
            if path.name in seen:
                continue
            seen.add(path.name)
            yield path
