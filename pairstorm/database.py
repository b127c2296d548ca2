"""SQLite connection handling and schema creation for the chat history."""

from __future__ import annotations

import os
import sqlite3
from collections.abc import Iterable
from typing import Any

MEMORY_DATABASE = ":memory:"


class QueryError(Exception):
    """A statement could not be executed."""


class ConstraintError(QueryError):
    """A statement violated a uniqueness or NOT NULL constraint."""


class Connection:
    """A lazily opened SQLite database; an empty path means an in-memory one."""

    def __init__(self, path: str | os.PathLike[str] = "") -> None:
        self.path = path
        self._db: sqlite3.Connection | None = None
        self._opened_path: str | None = None

    @property
    def is_open(self) -> bool:
        return self._db is not None

    @property
    def database(self) -> sqlite3.Connection:
        if self._db is None:
            raise RuntimeError("database connection is not open")
        return self._db

    def _target(self) -> str:
        return os.fspath(self.path) or MEMORY_DATABASE

    def open(self) -> None:
        """Open the database at ``path``, reopening if the path has changed."""
        target = self._target()
        if self._db is not None and self._opened_path == target:
            return
        self.close()
        self._db = sqlite3.connect(target, isolation_level=None)
        self._opened_path = target

    def close(self) -> None:
        if self._db is not None:
            self._db.close()
        self._db = None
        self._opened_path = None

    def __enter__(self) -> Connection:
        self.open()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


_default_connection: Connection | None = None


def get_default_connection(path: str | os.PathLike[str] | None = None) -> Connection:
    """Return the shared connection, setting its path first when one is given."""
    global _default_connection
    if _default_connection is None:
        _default_connection = Connection()
    if path is not None:
        _default_connection.path = path
    return _default_connection


def reset_default_connection() -> None:
    """Close and forget the shared connection."""
    global _default_connection
    if _default_connection is not None:
        _default_connection.close()
    _default_connection = None


class Accessor:
    """Base for classes that run statements against a connection."""

    def __init__(self, connection: Connection | None = None) -> None:
        self.connection = connection if connection is not None else get_default_connection()
        self.connection.open()

    def execute(self, sql: str, params: Iterable[Any] = ()) -> sqlite3.Cursor:
        """Run one statement and return its cursor."""
        try:
            return self.connection.database.execute(sql, tuple(params))
        except sqlite3.IntegrityError as exc:
            raise ConstraintError(str(exc)) from exc
        except sqlite3.Error as exc:
            raise QueryError(str(exc)) from exc


class SchemaCreator(Accessor):
    """Creates the tables used for users, files, messages and comments."""

    USER_TABLE = (
        "CREATE TABLE IF NOT EXISTS User ("
        "id       INTEGER      PRIMARY KEY AUTOINCREMENT UNIQUE ON CONFLICT ROLLBACK, "
        "nickname VARCHAR (39) UNIQUE ON CONFLICT FAIL  NOT NULL )"
    )
    MESSAGE_TABLE = (
        "CREATE TABLE IF NOT EXISTS Message ("
        "id          INTEGER  PRIMARY KEY AUTOINCREMENT, "
        "idUser      INTEGER  REFERENCES User (id) NOT NULL, "
        "messageText STRING, "
        "time        DATETIME DEFAULT (datetime('now')) )"
    )
    COMMENT_TABLE = (
        "CREATE TABLE IF NOT EXISTS Comment ("
        "line   INT, "
        "idFile          REFERENCES File (ID) NOT NULL, "
        "idUser INTEGER  REFERENCES User (id) NOT NULL, "
        "text   TEXT, "
        "time   DATETIME DEFAULT (datetime('now') ), "
        "PRIMARY KEY (line, idFile))"
    )
    FILE_TABLE = (
        "CREATE TABLE IF NOT EXISTS File ("
        "id   INTEGER      PRIMARY KEY AUTOINCREMENT, "
        "name VARCHAR (50) UNIQUE)"
    )

    def add_table_user(self) -> None:
        self.execute(self.USER_TABLE)

    def add_table_message(self) -> None:
        self.execute(self.MESSAGE_TABLE)

    def add_table_comment(self) -> None:
        self.execute(self.COMMENT_TABLE)

    def add_table_file(self) -> None:
        self.execute(self.FILE_TABLE)

    def create_all(self) -> None:
        """Create every table, referenced tables first."""
        self.add_table_user()
        self.add_table_file()
        self.add_table_message()
        self.add_table_comment()