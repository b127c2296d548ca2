# pairstorm

The non-graphical core of a pair-programming editor's chat panel and class
scaffolding tools. Everything is plain Python with no dependencies beyond the
standard library.

## Modules

- `pairstorm.signals` — `Signal`, a small observer: `connect`, `disconnect`,
  `disconnect_all` and `emit`. Every other component announces its events
  through signals.
- `pairstorm.records` — the dataclasses `Message`, `User`, `File` and
  `Comment` stored in the database.
- `pairstorm.database` — `Connection` (a lazily opened SQLite database; an
  empty path means an in-memory one), the shared connection returned by
  `get_default_connection(path)` and cleared by `reset_default_connection()`,
  the `Accessor` base class, and `SchemaCreator`, which creates the `User`,
  `File`, `Message` and `Comment` tables. Failed statements raise `QueryError`,
  or `ConstraintError` for constraint violations.
- `pairstorm.stores` — `UserStore`, `FileStore`, `MessageStore` and
  `CommentStore`, which read and write those tables. Lookups of a missing row
  raise `LookupError`; adding an already known user or file returns `False`.
- `pairstorm.chatmessage` — `ChatMessage`, with `to_json(app_label)` and
  `ChatMessage.from_json(text, app_label)` for the compact JSON wire form.
  Text that is broken, lacks a key or carries another application label
  decodes to an empty message (`is_empty()` is true). `SystemMessage` names
  the notices the application posts itself; `MessageType` tells system and
  user messages apart.
- `pairstorm.messages` — `ChatMessagesController` holds the chat's messages,
  loads the last two days of history from a `MessageStore`, stores every user
  message it receives, and shares messages built by `post_user_message`
  through its `sending_message` signal. `ChatMessagesModel` is a row view over
  it, addressed by `MessageRole`.
- `pairstorm.users` — `ChatUsersController` keeps the list of online users and
  which of them are connected (`update_online_users`,
  `update_connected_users`). `ChatUsersModel` is a row view over it; calling
  `set_data` with `UserRole.USER_CONNECTED` emits the controller's
  `user_state_changed_connected` or `user_state_changed_disconnected` signal.
- `pairstorm.session` — `ChatSession` handles login, themes (`Theme`) and
  incoming JSON messages, and emits `start_sharing_requested`,
  `stop_sharing_requested` and `message_sent`. `ChatDock` relays these events
  between the rest of an application and a session.
- `pairstorm.definitions` — helpers that read single-line method declarations
  (`is_valid_method_initialization`, `get_method_definition_pattern`,
  `get_method_definition_name`, `definition_exists`, ...) and build empty
  definitions for them (`create_method_definition_bones`).
- `pairstorm.classgenerator` — `ClassGenerator`, which writes a `.h` header and
  a `.cpp` source skeleton for a new class and raises `InvalidClassName` for a
  name that is not a valid identifier.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

Storing users:

```python
from pairstorm.database import SchemaCreator, get_default_connection
from pairstorm.records import User
from pairstorm.stores import UserStore

get_default_connection("chat.sqlite")
SchemaCreator().create_all()

users = UserStore()
users.add_user(User("alice"))
print([user.nickname for user in users.get_all_users()])
```

A chat session:

```python
from pairstorm.database import Connection, SchemaCreator
from pairstorm.session import ChatSession
from pairstorm.users import ChatUsersModel, UserRole

connection = Connection("chat.sqlite")
SchemaCreator(connection).create_all()

session = ChatSession(connection, app_label="pairstorm")
session.message_sent.connect(print)              # JSON to send to peers
session.start_sharing_requested.connect(print)   # names of users to share with

session.configure_on_login("alice")
session.messages_controller.post_user_message("hello")

session.update_online_users(["bob"])
model = ChatUsersModel(session.users_controller)
model.set_data(0, True, UserRole.USER_CONNECTED)  # requests sharing with "bob"
```

Reading a declaration and generating a class skeleton:

```python
from pairstorm.classgenerator import ClassGenerator
from pairstorm.definitions import get_method_definition_name

lines = ["#include <string>", "class Shape", "{", "    int area(int w, int h);", "};"]
print(get_method_definition_name(lines, 3))   # int Shape::area

generator = ClassGenerator(".", "Widget")
print(generator.header_text())
header_path, source_path = generator.create_files()
```

## What the package does not do

- It draws no window, panel or chat view. `ChatSession.view_source` and
  `ChatSession.context` only record which view and values a user interface
  should show.
- It has no network transport. Messages to share and sharing requests leave
  through signals, and the lists of online and connected users must be fed in
  by the caller.
- It provides no command-line program.