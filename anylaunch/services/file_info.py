"""
File Info - Filesystem metadata and icon names for paths.

Icons follow the freedesktop icon naming spec: MIME type with "/" replaced
by "-" (e.g. "text-plain"), "folder" for directories and a generic icon
when the type cannot be guessed.
"""

import mimetypes
import os
import stat
from dataclasses import dataclass
from typing import Protocol

from anylaunch.errors import MetadataFailure

GENERIC_FILE_ICON = "text-x-generic"
FOLDER_ICON = "folder"
EXECUTABLE_ICON = "application-x-executable"


@dataclass(frozen=True)
class FileInfo:
    path: str
    icon: str
    is_dir: bool
    is_executable: bool


class FileInfoResolver(Protocol):
    def query_info(self, path: str) -> FileInfo:
        ...


def is_executable(path: str, st: os.stat_result) -> bool:
    """True if st describes a regular file the current process may execute."""
    return stat.S_ISREG(st.st_mode) and os.access(path, os.X_OK)


def icon_for(path: str, st: os.stat_result) -> str:
    """Guess a freedesktop icon name for a stat'ed path."""
    if stat.S_ISDIR(st.st_mode):
        return FOLDER_ICON
    mime, _encoding = mimetypes.guess_type(path, strict=False)
    if mime:
        return mime.replace("/", "-")
    if is_executable(path, st):
        return EXECUTABLE_ICON
    return GENERIC_FILE_ICON


class StatFileInfoResolver:
    """Resolves file info with os.stat and mimetypes."""

    def query_info(self, path: str) -> FileInfo:
        """
        Stat path and derive its icon.

        Raises:
            MetadataFailure: Path missing or not accessible
        """
        try:
            st = os.stat(path)
        except (OSError, ValueError) as e:
            raise MetadataFailure(f"Cannot stat {path!r}: {e}") from e

        return FileInfo(
            path=path,
            icon=icon_for(path, st),
            is_dir=stat.S_ISDIR(st.st_mode),
            is_executable=is_executable(path, st),
        )
