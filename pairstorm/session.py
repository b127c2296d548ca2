"""The chat session behind the chat panel, and the dock that relays its events."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from datetime import datetime
from enum import IntEnum
from typing import Any

from .chatmessage import ChatMessage, SystemMessage
from .database import Connection
from .messages import ChatMessagesController
from .signals import Signal
from .stores import MessageStore, UserStore
from .users import ChatUsersController

DISABLED_VIEW = "qrc:/chatdisabled.qml"
CHAT_VIEW = "qrc:/chat.qml"
CHAT_TITLE = "Chat"


class Theme(IntEnum):
    """Colour themes the chat can be shown in."""

    DEFAULT = 0
    WHITE = 1
    BLUE = 2
    DARK = 3


THEMES: dict[str, Theme] = {
    "WHITE": Theme.WHITE,
    "BLUE": Theme.BLUE,
    "DARK": Theme.DARK,
}

THEME_LABELS: dict[Theme, str] = {
    Theme.DEFAULT: "white",
    Theme.WHITE: "white",
    Theme.BLUE: "blue",
    Theme.DARK: "dark",
}


class ChatSession:
    """Chat state for one user: the view in use, its context, messages and users.

    Until a user logs in the disabled view is shown and network events are
    ignored. Logging in creates the message and user controllers and switches
    to the chat view.
    """

    def __init__(
        self,
        connection: Connection | None = None,
        app_label: str = "",
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.connection = connection
        self.app_label = app_label
        self.clock = clock
        self.user_name = ""
        self.messages_controller: ChatMessagesController | None = None
        self.users_controller: ChatUsersController | None = None

        self.start_sharing_requested = Signal()
        self.stop_sharing_requested = Signal()
        self.message_sent = Signal()

        self.view_source = DISABLED_VIEW
        self.context: dict[str, Any] = {"globalTheme": THEME_LABELS[Theme.WHITE]}

    @property
    def is_logged_in(self) -> bool:
        return self.messages_controller is not None

    def configure_on_login(self, user_name: str) -> None:
        """Log ``user_name`` in; a second login only posts a notice into the chat."""
        if self.user_name:
            if self.messages_controller is not None:
                self.messages_controller.send_system_message(SystemMessage.CAN_NOT_LOG_IN_TWICE)
            return

        self.user_name = user_name

        users = ChatUsersController(user_name, UserStore(self.connection))
        users.user_state_changed_connected.connect(self.start_sharing_requested.emit)
        users.user_state_changed_disconnected.connect(self.stop_sharing_requested.emit)
        self.users_controller = users

        extra: dict[str, Any] = {"clock": self.clock} if self.clock is not None else {}
        messages = ChatMessagesController(user_name, MessageStore(self.connection), **extra)
        messages.send_system_message(SystemMessage.GREETINGS)
        messages.sending_message.connect(self._share_message)
        self.messages_controller = messages

        self.context = {
            "globalTheme": THEME_LABELS[Theme.WHITE],
            "globalUserName": user_name,
            "messagesList": messages,
            "usersList": users,
        }
        self.view_source = CHAT_VIEW

    def update_theme(self, theme_name: str) -> None:
        """Switch to the named theme; unknown names fall back to the default."""
        theme = THEMES.get(theme_name, Theme.DEFAULT)
        self.context["globalTheme"] = THEME_LABELS[theme]

    def update_online_users(self, online_users: Iterable[str]) -> None:
        if self.users_controller is not None:
            self.users_controller.update_online_users(online_users)

    def update_connected_users(self, connected_users: Iterable[str]) -> None:
        if self.users_controller is not None:
            self.users_controller.update_connected_users(connected_users)

    def append_message(self, author: str, body: str) -> bool:
        """Show a message received as JSON in ``body``; True if it was shown.

        ``author`` is not used: the author is carried inside ``body``.
        """
        if self.messages_controller is None:
            return False
        message = ChatMessage.from_json(body, self.app_label)
        if message.is_empty():
            return False
        self.messages_controller.append_message(message)
        return True

    def _share_message(self, message: ChatMessage) -> None:
        self.message_sent.emit(message.to_json(self.app_label))


class ChatDock:
    """Relays chat events between the application and a chat session."""

    def __init__(self, session: ChatSession | None = None) -> None:
        self.title = CHAT_TITLE
        self.session = session if session is not None else ChatSession()

        self.start_sharing_with_user = Signal()
        self.stop_sharing_with_user = Signal()
        self.share_message = Signal()

        self.session.start_sharing_requested.connect(self.start_sharing_with_user.emit)
        self.session.stop_sharing_requested.connect(self.stop_sharing_with_user.emit)
        self.session.message_sent.connect(self.share_message.emit)

    def set_user_name(self, user_name: str) -> None:
        self.session.configure_on_login(user_name)

    def push_message(self, user_name: str, message: str) -> bool:
        return self.session.append_message(user_name, message)

    def update_theme(self, theme_name: str) -> None:
        self.session.update_theme(theme_name)

    def update_online_users(self, online_users: Iterable[str]) -> None:
        self.session.update_online_users(online_users)

    def update_connected_users(self, connected_users: Iterable[str]) -> None:
        self.session.update_connected_users(connected_users)