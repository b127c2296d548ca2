"""The list of chat users and a row-oriented view of it."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum
from typing import Any

from .database import QueryError
from .records import User
from .signals import Signal
from .stores import UserStore

logger = logging.getLogger(__name__)

USER_ROLE = 0x0100


class UserState(IntEnum):
    """How a user relates to the current session."""

    DISCONNECTED = 0
    CONNECTED = 1
    OFFLINE = 2


@dataclass
class ChatUser:
    """A user shown in the chat's list of neighbours."""

    user_name: str = ""
    state: UserState = UserState.DISCONNECTED


class UserRole(IntEnum):
    """Attributes of a user that the model exposes."""

    USER_NAME = USER_ROLE
    USER_CONNECTED = USER_ROLE + 1
    USER_ONLINE = USER_ROLE + 2


class ChatUsersController:
    """Holds the users discovered on the network and their sharing state."""

    def __init__(self, user_name: str, store: UserStore | None = None) -> None:
        self.user_name = user_name
        self.store = store if store is not None else UserStore()
        self.user_state_changed_connected = Signal()
        self.user_state_changed_disconnected = Signal()
        self.pre_user_appended = Signal()
        self.post_user_appended = Signal()
        self.pre_user_removed = Signal()
        self.post_user_removed = Signal()
        self._users: list[ChatUser] = []
        self._store_user(user_name)

    @property
    def users(self) -> list[ChatUser]:
        """A copy of the users currently listed."""
        return [ChatUser(user.user_name, user.state) for user in self._users]

    def __len__(self) -> int:
        return len(self._users)

    def online_user_names(self) -> list[str]:
        return [user.user_name for user in self._users]

    def connected_user_names(self) -> list[str]:
        return [user.user_name for user in self._users if user.state == UserState.CONNECTED]

    def update_online_users(self, new_online_users: Iterable[str]) -> None:
        """Drop users that went away and append newly discovered ones."""
        new_online = list(new_online_users)
        old_online = self.online_user_names()
        for name in old_online:
            if name not in new_online:
                self._remove_user(name)
        for name in new_online:
            if name not in old_online:
                self._append_user(name)

    def update_connected_users(self, new_connected_users: Iterable[str]) -> None:
        """Mark users as connected or disconnected to match ``new_connected_users``."""
        new_connected = list(new_connected_users)
        old_connected = self.connected_user_names()
        for name in old_connected:
            if name not in new_connected:
                self._disconnect_user(name)
        for name in new_connected:
            if name not in old_connected:
                self._connect_user(name)

    def _store_user(self, name: str) -> None:
        try:
            self.store.add_user(User(name))
        except QueryError as exc:
            logger.warning("user %r was not stored: %s", name, exc)

    def _append_user(self, name: str, state: UserState = UserState.DISCONNECTED) -> None:
        self.pre_user_appended.emit()
        self._users.append(ChatUser(name, state))
        self.post_user_appended.emit()
        self._store_user(name)

    def _remove_user(self, name: str) -> None:
        index = next((i for i, user in enumerate(self._users) if user.user_name == name), None)
        if index is None:
            return
        self.pre_user_removed.emit(index)
        del self._users[index]
        self.post_user_removed.emit()

    def _connect_user(self, name: str) -> None:
        self._remove_user(name)
        self._append_user(name, UserState.CONNECTED)

    def _disconnect_user(self, name: str) -> None:
        self._remove_user(name)
        self._append_user(name, UserState.DISCONNECTED)


_ROLE_NAMES = {
    UserRole.USER_CONNECTED: "isUserConnected",
    UserRole.USER_ONLINE: "isUserOnline",
    UserRole.USER_NAME: "userName",
}


class ChatUsersModel:
    """Row view over a users controller, announcing inserts, removals and resets."""

    def __init__(self, controller: ChatUsersController | None = None) -> None:
        self.model_about_to_be_reset = Signal()
        self.model_reset = Signal()
        self.rows_about_to_be_inserted = Signal()
        self.rows_inserted = Signal()
        self.rows_about_to_be_removed = Signal()
        self.rows_removed = Signal()
        self.data_changed = Signal()
        self._controller: ChatUsersController | None = None
        self.controller = controller

    @property
    def controller(self) -> ChatUsersController | None:
        return self._controller

    @controller.setter
    def controller(self, new_controller: ChatUsersController | None) -> None:
        self.model_about_to_be_reset.emit()
        old = self._controller
        if old is not None:
            old.pre_user_appended.disconnect(self._on_pre_append)
            old.post_user_appended.disconnect(self._on_post_append)
            old.pre_user_removed.disconnect(self._on_pre_remove)
            old.post_user_removed.disconnect(self._on_post_remove)
        self._controller = new_controller
        if new_controller is not None:
            new_controller.pre_user_appended.connect(self._on_pre_append)
            new_controller.post_user_appended.connect(self._on_post_append)
            new_controller.pre_user_removed.connect(self._on_pre_remove)
            new_controller.post_user_removed.connect(self._on_post_remove)
        self.model_reset.emit()

    def _on_pre_append(self) -> None:
        row = self.row_count()
        self.rows_about_to_be_inserted.emit(row, row)

    def _on_post_append(self) -> None:
        self.rows_inserted.emit()

    def _on_pre_remove(self, index: int) -> None:
        self.rows_about_to_be_removed.emit(index, index)

    def _on_post_remove(self) -> None:
        self.rows_removed.emit()

    def row_count(self) -> int:
        return len(self._controller) if self._controller is not None else 0

    def _user_at(self, row: int) -> ChatUser | None:
        if self._controller is None or not 0 <= row < self.row_count():
            return None
        return self._controller.users[row]

    def data(self, row: int, role: UserRole | int) -> Any:
        """The value of ``role`` for the user at ``row``, or None."""
        user = self._user_at(row)
        if user is None:
            return None
        if role == UserRole.USER_NAME:
            return user.user_name
        if role == UserRole.USER_CONNECTED:
            return user.state == UserState.CONNECTED
        if role == UserRole.USER_ONLINE:
            return user.state != UserState.OFFLINE
        return None

    def set_data(self, row: int, value: Any, role: UserRole | int) -> bool:
        """Request a change of a user's attribute.

        Only the connected flag is acted upon: the request is passed on through
        the controller's state-change signals, and the listed state changes only
        once the network reports the new set of connected users.
        """
        user = self._user_at(row)
        if user is None or self._controller is None:
            return False
        if role == UserRole.USER_CONNECTED:
            if value:
                if user.state == UserState.CONNECTED:
                    return True
                self._controller.user_state_changed_connected.emit(user.user_name)
            else:
                if user.state == UserState.DISCONNECTED:
                    return True
                self._controller.user_state_changed_disconnected.emit(user.user_name)
        if self.data(row, role) != value:
            self.data_changed.emit(row, row, [role])
            return True
        return False

    def role_names(self) -> dict[UserRole, str]:
        return dict(_ROLE_NAMES)