"""Stores that read and write users, files, messages and comments."""

from __future__ import annotations

from collections.abc import Iterable

from .database import Accessor, ConstraintError
from .records import Comment, File, Message, User


class UserStore(Accessor):
    """Access to the ``User`` table."""

    def add_user(self, user: User | str) -> bool:
        """Insert a user; False if the nickname is already stored."""
        nickname = user.nickname if isinstance(user, User) else user
        try:
            self.execute("INSERT INTO User (nickname) VALUES (?)", (nickname,))
        except ConstraintError:
            return False
        return True

    def get_user(self, user_id: int) -> User:
        row = self.execute("SELECT nickname FROM User WHERE id = ?", (user_id,)).fetchone()
        if row is None:
            raise LookupError(f"no user with id {user_id}")
        return User(row[0])

    def get_all_users(self) -> list[User]:
        rows = self.execute("SELECT nickname FROM User ORDER BY id")
        return [User(nickname) for (nickname,) in rows]


class FileStore(Accessor):
    """Access to the ``File`` table."""

    def add_file(self, file: File | str) -> bool:
        """Insert a file; False if the name is already stored."""
        name = file.name if isinstance(file, File) else file
        try:
            self.execute("INSERT INTO File (name) VALUES (?)", (name,))
        except ConstraintError:
            return False
        return True

    def get_file(self, file_id: int) -> File:
        row = self.execute("SELECT name FROM File WHERE id = ?", (file_id,)).fetchone()
        if row is None:
            raise LookupError(f"no file with id {file_id}")
        return File(row[0])

    def delete_file(self, name: str) -> bool:
        """Remove the file record; True if one was removed."""
        return self.execute("DELETE FROM File WHERE name = ?", (name,)).rowcount > 0


class MessageStore(Accessor):
    """Access to the ``Message`` table."""

    def add_message(self, message: Message) -> None:
        """Store a message; the author must already be a known user."""
        self.execute(
            "INSERT INTO Message (idUser, messageText, time) VALUES ("
            "(SELECT id FROM User WHERE nickname = ?), ?, "
            "COALESCE(NULLIF(?, ''), datetime('now')))",
            (message.user, message.body, message.time),
        )

    def get_messages(self, start_time: str) -> list[Message]:
        """Messages published at or after ``start_time``, oldest first."""
        rows = self.execute(
            "SELECT Message.messageText, User.nickname, datetime(Message.time) "
            "FROM Message INNER JOIN User ON Message.idUser = User.id "
            "WHERE datetime(Message.time) >= ? "
            "ORDER BY datetime(Message.time), Message.id",
            (start_time,),
        )
        return [Message(body, user, time) for body, user, time in rows]


class CommentStore(Accessor):
    """Access to the ``Comment`` table."""

    _SELECT = (
        "SELECT Comment.line, Comment.text, User.nickname, File.name "
        "FROM Comment INNER JOIN User ON User.id = Comment.idUser "
        "INNER JOIN File ON File.id = Comment.idFile "
        "WHERE Comment.idFile = (SELECT id FROM File WHERE name = ?)"
    )

    def add_comments(self, comments: Iterable[Comment]) -> None:
        """Store comments; their user and file must already be known."""
        for comment in comments:
            self.execute(
                "INSERT INTO Comment (line, idFile, idUser, text) VALUES (?, "
                "(SELECT id FROM File WHERE name = ?), "
                "(SELECT id FROM User WHERE nickname = ?), ?)",
                (comment.line, comment.file, comment.user, comment.text),
            )

    def delete_comment(self, line: int, file_name: str) -> bool:
        """Remove the comment on ``line`` of ``file_name``; True if one was removed."""
        cursor = self.execute(
            "DELETE FROM Comment WHERE idFile = (SELECT id FROM File WHERE name = ?) "
            "AND line = ?",
            (file_name, line),
        )
        return cursor.rowcount > 0

    def delete_comments(self, file_name: str) -> int:
        """Remove every comment on ``file_name``; returns how many were removed."""
        cursor = self.execute(
            "DELETE FROM Comment WHERE idFile = (SELECT id FROM File WHERE name = ?)",
            (file_name,),
        )
        return cursor.rowcount

    def get_all_comments(self, file_name: str) -> list[Comment]:
        rows = self.execute(self._SELECT + " ORDER BY Comment.line", (file_name,))
        return [Comment(line, text, user, file) for line, text, user, file in rows]

    def get_comment(self, line: int, file_name: str) -> Comment:
        row = self.execute(self._SELECT + " AND Comment.line = ?", (file_name, line)).fetchone()
        if row is None:
            raise LookupError(f"no comment on line {line} of {file_name}")
        return Comment(*row)