"""Plain records stored in and read from the chat database."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Message:
    """A chat message; ``time`` uses the form ``YYYY-MM-DD hh:mm:ss``."""

    body: str = ""
    user: str = ""
    time: str = ""


@dataclass
class User:
    """A chat participant known by nickname."""

    nickname: str = ""


@dataclass
class File:
    """A project file that comments may refer to."""

    name: str = ""


@dataclass
class Comment:
    """A comment left by a user on a line of a file."""

    line: int = 0
    text: str = ""
    user: str = ""
    file: str = ""