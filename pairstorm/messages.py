"""The list of chat messages and a row-oriented view of it."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from enum import IntEnum
from typing import Any

from .chatmessage import (
    SYSTEM_MESSAGES,
    SYSTEM_NAME,
    ChatMessage,
    MessageType,
    SystemMessage,
    format_time,
    parse_time,
)
from .database import QueryError
from .records import Message
from .signals import Signal
from .stores import MessageStore

logger = logging.getLogger(__name__)

HISTORY_DAYS = 2
USER_ROLE = 0x0100


def _utc_now() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class MessageRole(IntEnum):
    """Attributes of a message that the model exposes."""

    AUTHOR_NAME = USER_ROLE
    PUBLICATION_DATE_TIME = USER_ROLE + 1
    CONTENT = USER_ROLE + 2
    TYPE = USER_ROLE + 3


class ChatMessagesController:
    """Holds the messages of the chat and keeps user messages in the history."""

    def __init__(
        self,
        author_name: str,
        store: MessageStore | None = None,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self.author_name = author_name
        self.store = store if store is not None else MessageStore()
        self.clock = clock
        self.sending_message = Signal()
        self.pre_message_appended = Signal()
        self.post_message_appended = Signal()

        since = format_time(self.clock() - timedelta(days=HISTORY_DAYS))
        self._messages: list[ChatMessage] = [
            ChatMessage(
                author_name=saved.user,
                content=saved.body,
                published=parse_time(saved.time),
                message_type=MessageType.USER,
            )
            for saved in self.store.get_messages(since)
            if saved.body and saved.user
        ]

    @property
    def messages(self) -> list[ChatMessage]:
        """A copy of the messages currently in the chat."""
        return list(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def send_system_message(self, message_type: SystemMessage) -> None:
        """Post one of the application's own messages."""
        self.append_message(
            ChatMessage(
                author_name=SYSTEM_NAME,
                content=SYSTEM_MESSAGES[SystemMessage(message_type)],
                published=self.clock(),
                message_type=MessageType.SYSTEM,
            )
        )

    def append_message(self, message: ChatMessage) -> None:
        """Show ``message``; user messages are also written to the history."""
        self.pre_message_appended.emit()
        self._messages.append(message)
        self.post_message_appended.emit()

        if message.message_type == MessageType.USER:
            record = Message(message.content, message.author_name, format_time(message.published))
            try:
                self.store.add_message(record)
            except QueryError as exc:
                logger.warning("message from %r was not stored: %s", message.author_name, exc)

    def post_user_message(self, content: str) -> ChatMessage:
        """Build a message from the user's input, append it and share it."""
        message = ChatMessage(
            author_name=self.author_name,
            content=content,
            published=self.clock(),
            message_type=MessageType.USER,
        )
        self.append_message(message)
        self.sending_message.emit(message)
        return message


_TYPE_LABELS = {MessageType.USER: "ordinary", MessageType.SYSTEM: "service"}

_ROLE_NAMES = {
    MessageRole.PUBLICATION_DATE_TIME: "publicationDateTime",
    MessageRole.AUTHOR_NAME: "authorName",
    MessageRole.CONTENT: "content",
    MessageRole.TYPE: "type",
}


class ChatMessagesModel:
    """Row view over a messages controller, announcing inserts and resets."""

    def __init__(self, controller: ChatMessagesController | None = None) -> None:
        self.model_about_to_be_reset = Signal()
        self.model_reset = Signal()
        self.rows_about_to_be_inserted = Signal()
        self.rows_inserted = Signal()
        self._controller: ChatMessagesController | None = None
        self.controller = controller

    @property
    def controller(self) -> ChatMessagesController | None:
        return self._controller

    @controller.setter
    def controller(self, new_controller: ChatMessagesController | None) -> None:
        self.model_about_to_be_reset.emit()
        if self._controller is not None:
            self._controller.pre_message_appended.disconnect(self._on_pre_append)
            self._controller.post_message_appended.disconnect(self._on_post_append)
        self._controller = new_controller
        if new_controller is not None:
            new_controller.pre_message_appended.connect(self._on_pre_append)
            new_controller.post_message_appended.connect(self._on_post_append)
        self.model_reset.emit()

    def _on_pre_append(self) -> None:
        row = self.row_count()
        self.rows_about_to_be_inserted.emit(row, row)

    def _on_post_append(self) -> None:
        self.rows_inserted.emit()

    def row_count(self) -> int:
        return len(self._controller) if self._controller is not None else 0

    def data(self, row: int, role: MessageRole | int) -> Any:
        """The value of ``role`` for the message at ``row``, or None."""
        if self._controller is None or not 0 <= row < self.row_count():
            return None
        message = self._controller.messages[row]
        if role == MessageRole.PUBLICATION_DATE_TIME:
            return message.published
        if role == MessageRole.AUTHOR_NAME:
            return message.author_name
        if role == MessageRole.CONTENT:
            return message.content
        if role == MessageRole.TYPE:
            return _TYPE_LABELS.get(message.message_type, "")
        return None

    def role_names(self) -> dict[MessageRole, str]:
        return dict(_ROLE_NAMES)