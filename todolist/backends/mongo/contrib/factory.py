from todolist.core.events import EventsManager
from todolist.core.persistence import DEFAULT_STORAGE_KEY
from todolist.core.serializer import RecordItemSerializer
from todolist.core.store import ToDoStore
from todolist.backends.mongo import MongoPersistenceAdapter, DEFAULT_COLLECTION_NAME
from pymongo import MongoClient


def create_mongo_store(
    client: MongoClient,
    database_name: "str",
    key: "str" = DEFAULT_STORAGE_KEY,
    collection_name: "str" = DEFAULT_COLLECTION_NAME,
    item_serializer=None,
    events_manager_class=EventsManager,
    autoload: "bool" = True,
) -> ToDoStore:

    if item_serializer is None:
        item_serializer = RecordItemSerializer()

    persistence_adapter = MongoPersistenceAdapter(
        key=key,
        item_serializer=item_serializer,
        db=client[database_name],
        collection_name=collection_name,
    )

    return ToDoStore(
        persistence_adapter=persistence_adapter,
        events_manager=events_manager_class(),
        autoload=autoload,
    )


def create_mongo_store_from_uri(
    connect_uri: "str", database_name: "str", **kwargs
) -> ToDoStore:  # pragma: no cover
    client = MongoClient(connect_uri)
    return create_mongo_store(client=client, database_name=database_name, **kwargs)
