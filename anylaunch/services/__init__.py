# anylaunch Services Package
"""
Collaborators the search engine consults.

Desktop entry parsing, file metadata and command history live here so
providers stay free of I/O details.
"""

from .desktop_entries import DesktopRecord, IniDesktopEntryReader, application_dirs
from .file_info import FileInfo, StatFileInfoResolver, is_executable
from .history import HistoryService

__all__ = [
    "DesktopRecord",
    "IniDesktopEntryReader",
    "application_dirs",
    "FileInfo",
    "StatFileInfoResolver",
    "is_executable",
    "HistoryService",
]
