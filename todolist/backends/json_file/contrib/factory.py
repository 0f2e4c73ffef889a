from todolist.core.events import EventsManager
from todolist.core.persistence import DEFAULT_STORAGE_KEY
from todolist.core.serializer import RecordItemSerializer
from todolist.core.store import ToDoStore
from todolist.backends.json_file import JSONFilePersistenceAdapter
from typing import Optional


def create_json_file_store(
    path: "str",
    key: "str" = DEFAULT_STORAGE_KEY,
    lock_timeout: "float" = 10,
    indent: "Optional[int]" = None,
    item_serializer=None,
    events_manager_class=EventsManager,
    autoload: "bool" = True,
) -> ToDoStore:

    if item_serializer is None:
        item_serializer = RecordItemSerializer()

    persistence_adapter = JSONFilePersistenceAdapter(
        key=key,
        item_serializer=item_serializer,
        path=path,
        lock_timeout=lock_timeout,
        indent=indent,
    )

    return ToDoStore(
        persistence_adapter=persistence_adapter,
        events_manager=events_manager_class(),
        autoload=autoload,
    )
