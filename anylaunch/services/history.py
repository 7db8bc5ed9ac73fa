"""
History Service - Previously executed command lines.

Stores every command the user ran from the launcher in SQLite. The
search engine only reads from it:
  - is_in_history(query): suppresses a fresh command entry when the same
    command is already offered as a history entry
  - search(query): history items containing the query, most used first

record() is called by the shell after it launches something.
"""

import sqlite3
import threading
import time
from pathlib import Path

from loguru import logger

from anylaunch.search.matcher import normalize


class HistoryService:
    """
    SQLite-backed command history.

    Methods:
        record(command): Record an executed command
        is_in_history(query): Whether the exact command was run before
        search(query, limit): Commands containing query
    """

    def __init__(self, db_path: Path):
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

        # Providers read from worker threads
        self._lock = threading.Lock()
        self._conn = sqlite3.connect(str(self.db_path), check_same_thread=False)
        self._conn.execute("PRAGMA journal_mode=WAL")
        self._init_database()
        logger.debug(f"HistoryService initialized with db at {self.db_path}")

    def _init_database(self):
        """Create database schema if it doesn't exist."""
        with self._lock:
            cursor = self._conn.cursor()
            cursor.execute("""
                CREATE TABLE IF NOT EXISTS history (
                    command TEXT PRIMARY KEY,
                    normalized TEXT NOT NULL,
                    run_count INTEGER DEFAULT 0,
                    last_run INTEGER
                )
            """)
            cursor.execute("""
                CREATE INDEX IF NOT EXISTS idx_history_usage
                ON history(run_count DESC, last_run DESC)
            """)
            self._conn.commit()

    def record(self, command: str) -> None:
        """
        Record an executed command.

        Args:
            command: Command line as it was run (surrounding space ignored)
        """
        command = command.strip()
        if not command:
            return
        now = int(time.time())

        try:
            with self._lock:
                self._conn.execute("""
                    INSERT INTO history (command, normalized, run_count, last_run)
                    VALUES (?, ?, 1, ?)
                    ON CONFLICT(command) DO UPDATE SET
                        run_count = run_count + 1,
                        last_run = excluded.last_run
                """, (command, normalize(command), now))
                self._conn.commit()
            logger.debug(f"Recorded history item {command!r}")
        except sqlite3.Error:
            logger.exception(f"Failed to record history item {command!r}")

    def is_in_history(self, query: str) -> bool:
        """Whether exactly this command was run before."""
        try:
            with self._lock:
                row = self._conn.execute(
                    "SELECT 1 FROM history WHERE command = ?", (query.strip(),)
                ).fetchone()
        except sqlite3.Error:
            logger.exception("History lookup failed")
            return False
        return row is not None

    def search(self, query: str, limit: int = 30) -> list[str]:
        """
        Commands whose normalized text contains the normalized query.

        Returns:
            Commands ordered by run count, then recency
        """
        needle = normalize(query.strip())
        if not needle:
            return []
        try:
            with self._lock:
                rows = self._conn.execute("""
                    SELECT command FROM history
                    WHERE instr(normalized, ?) > 0
                    ORDER BY run_count DESC, last_run DESC
                    LIMIT ?
                """, (needle, limit)).fetchall()
        except sqlite3.Error:
            logger.exception("History search failed")
            return []
        return [command for (command,) in rows]

    def clear(self, command: str | None = None) -> None:
        """
        Clear history.

        Args:
            command: If provided, forget only this command.
        """
        try:
            with self._lock:
                if command:
                    self._conn.execute("DELETE FROM history WHERE command = ?", (command.strip(),))
                else:
                    self._conn.execute("DELETE FROM history")
                self._conn.commit()
        except sqlite3.Error:
            logger.exception(f"Failed to clear history for {command or 'all commands'}")

    def close(self) -> None:
        with self._lock:
            self._conn.close()
