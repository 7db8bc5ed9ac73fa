"""
Launcher error types.

Providers catch these locally; a failure only means "no entries from this
source" and is never raised out of Dispatcher.search().
"""


class LauncherError(Exception):
    """Base class for launcher errors."""


class ParseFailure(LauncherError):
    """A desktop entry file could not be parsed."""


class MetadataFailure(LauncherError):
    """Filesystem metadata for a path could not be read."""
