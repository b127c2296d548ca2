"""Chat messages and their JSON wire form."""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum
from typing import Any

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
SYSTEM_NAME = "PairStorm"
REQUIRED_KEYS = frozenset({"app", "authorName", "data", "time", "type"})


class SystemMessage(IntEnum):
    """Messages the application itself can post into the chat."""

    CAN_NOT_LOG_IN_TWICE = 0
    GREETINGS = 1
    DEFAULT = 2


SYSTEM_MESSAGES: dict[SystemMessage, str] = {
    SystemMessage.GREETINGS: 'Welcome to PairStorm Application\nTo get help, type "help"',
    SystemMessage.CAN_NOT_LOG_IN_TWICE: "Sorry, you can not log in since\nyou are already logged in",
    SystemMessage.DEFAULT: "Hello from PairStorm",
}


class MessageType(IntEnum):
    """Whether a message came from the application or from a user."""

    SYSTEM = 0
    USER = 1


def format_time(moment: datetime | None) -> str:
    """Render ``moment`` in the wire format; an unset time renders as ''."""
    return moment.strftime(TIME_FORMAT) if moment is not None else ""


def parse_time(text: str) -> datetime | None:
    """Parse a wire-format time; None if it does not match the format."""
    try:
        return datetime.strptime(text, TIME_FORMAT)
    except ValueError:
        return None


def _as_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _as_int(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return 0


@dataclass
class ChatMessage:
    """One message shown in the chat."""

    author_name: str = ""
    content: str = ""
    published: datetime | None = None
    message_type: MessageType = MessageType.SYSTEM

    def to_json(self, app_label: str = "") -> str:
        """Compact JSON carrying the message, tagged with ``app_label``."""
        payload = {
            "app": app_label,
            "authorName": self.author_name,
            "data": self.content,
            "time": format_time(self.published),
            "type": int(self.message_type),
        }
        return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)

    @classmethod
    def from_json(cls, text: str, app_label: str = "") -> ChatMessage:
        """Decode a message; an empty message if the text is broken or foreign."""
        try:
            payload = json.loads(text)
        except (ValueError, TypeError):
            return cls()
        if not isinstance(payload, dict) or not REQUIRED_KEYS <= payload.keys():
            return cls()
        if _as_str(payload["app"]) != app_label:
            return cls()
        try:
            message_type = MessageType(_as_int(payload["type"]))
        except ValueError:
            return cls()
        return cls(
            author_name=_as_str(payload["authorName"]),
            content=_as_str(payload["data"]),
            published=parse_time(_as_str(payload["time"])),
            message_type=message_type,
        )

    def is_empty(self) -> bool:
        """True when the message has no author."""
        return self.author_name == ""