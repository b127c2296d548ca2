import pytest

from pairstorm.database import Connection, SchemaCreator
from pairstorm.records import User
from pairstorm.stores import UserStore
from pairstorm.users import (
    ChatUser,
    ChatUsersController,
    ChatUsersModel,
    UserRole,
    UserState,
)


@pytest.fixture
def store():
    connection = Connection()
    SchemaCreator(connection).create_all()
    yield UserStore(connection)
    connection.close()


@pytest.fixture
def controller(store):
    return ChatUsersController("alice", store)


def test_constructor_stores_own_name(store, controller):
    assert User("alice") in store.get_all_users()
    assert controller.users == []


def test_update_online_users_appends_disconnected(store, controller):
    controller.update_online_users(["bob", "carol"])
    assert controller.users == [
        ChatUser("bob", UserState.DISCONNECTED),
        ChatUser("carol", UserState.DISCONNECTED),
    ]
    names = [user.nickname for user in store.get_all_users()]
    assert names == ["alice", "bob", "carol"]


def test_update_online_users_removes_missing(controller):
    controller.update_online_users(["bob", "carol", "dave"])
    controller.update_online_users(["carol", "erin"])
    assert controller.online_user_names() == ["carol", "erin"]


def test_connect_moves_user_to_end(controller):
    controller.update_online_users(["bob", "carol"])
    controller.update_connected_users(["bob"])
    assert controller.online_user_names() == ["carol", "bob"]
    assert controller.connected_user_names() == ["bob"]


def test_disconnect_clears_connected_state(controller):
    controller.update_online_users(["bob", "carol"])
    controller.update_connected_users(["bob", "carol"])
    controller.update_connected_users(["carol"])
    assert controller.connected_user_names() == ["carol"]
    assert ChatUser("bob", UserState.DISCONNECTED) in controller.users


def test_connecting_unknown_user_appends_it(controller):
    controller.update_connected_users(["zed"])
    assert controller.users == [ChatUser("zed", UserState.CONNECTED)]


def test_removal_signal_carries_index(controller):
    removed = []
    controller.pre_user_removed.connect(removed.append)
    controller.update_online_users(["bob", "carol", "dave"])
    controller.update_online_users(["bob", "dave"])
    assert removed == [1]


def test_users_returns_copy(controller):
    controller.update_online_users(["bob"])
    controller.users[0].state = UserState.CONNECTED
    assert controller.connected_user_names() == []


def test_model_without_controller_is_empty():
    model = ChatUsersModel()
    assert model.row_count() == 0
    assert model.data(0, UserRole.USER_NAME) is None
    assert model.set_data(0, True, UserRole.USER_CONNECTED) is False


def test_model_data(controller):
    controller.update_online_users(["bob", "carol"])
    controller.update_connected_users(["carol"])
    model = ChatUsersModel(controller)
    assert model.row_count() == 2
    assert model.data(0, UserRole.USER_NAME) == "bob"
    assert model.data(0, UserRole.USER_CONNECTED) is False
    assert model.data(1, UserRole.USER_CONNECTED) is True
    assert model.data(1, UserRole.USER_ONLINE) is True
    assert model.data(5, UserRole.USER_NAME) is None
    assert model.data(0, 0) is None


def test_role_names(controller):
    model = ChatUsersModel(controller)
    assert model.role_names() == {
        UserRole.USER_CONNECTED: "isUserConnected",
        UserRole.USER_ONLINE: "isUserOnline",
        UserRole.USER_NAME: "userName",
    }


def test_model_reports_insert_and_remove_rows(controller):
    model = ChatUsersModel(controller)
    inserted, removed = [], []
    model.rows_about_to_be_inserted.connect(lambda first, last: inserted.append((first, last)))
    model.rows_about_to_be_removed.connect(lambda first, last: removed.append((first, last)))
    controller.update_online_users(["bob", "carol"])
    controller.update_online_users(["carol"])
    assert inserted == [(0, 0), (1, 1)]
    assert removed == [(0, 0)]
    assert model.row_count() == 1


def test_set_data_connect_requests_sharing(controller):
    controller.update_online_users(["bob"])
    model = ChatUsersModel(controller)
    requested, changed = [], []
    controller.user_state_changed_connected.connect(requested.append)
    model.data_changed.connect(lambda first, last, roles: changed.append((first, last, roles)))
    assert model.set_data(0, True, UserRole.USER_CONNECTED) is True
    assert requested == ["bob"]
    assert changed == [(0, 0, [UserRole.USER_CONNECTED])]
    assert model.data(0, UserRole.USER_CONNECTED) is False


def test_set_data_already_connected_emits_nothing(controller):
    controller.update_connected_users(["bob"])
    model = ChatUsersModel(controller)
    requested = []
    controller.user_state_changed_connected.connect(requested.append)
    assert model.set_data(0, True, UserRole.USER_CONNECTED) is True
    assert requested == []


def test_set_data_disconnect_requests_stop(controller):
    controller.update_connected_users(["bob"])
    model = ChatUsersModel(controller)
    stopped = []
    controller.user_state_changed_disconnected.connect(stopped.append)
    assert model.set_data(0, False, UserRole.USER_CONNECTED) is True
    assert stopped == ["bob"]


def test_set_data_unchanged_name_returns_false(controller):
    controller.update_online_users(["bob"])
    model = ChatUsersModel(controller)
    assert model.set_data(0, "bob", UserRole.USER_NAME) is False


def test_replacing_controller_detaches_old(store, controller):
    model = ChatUsersModel(controller)
    other = ChatUsersController("bob", store)
    model.controller = other
    inserted = []
    model.rows_about_to_be_inserted.connect(lambda first, last: inserted.append(first))
    controller.update_online_users(["carol"])
    other.update_online_users(["dave", "erin"])
    assert inserted == [0, 1]
    assert model.row_count() == 2
    assert len(controller.pre_user_appended) == 0