import unittest
import os
import tempfile
from todolist.core.metadata import ToDoItem
from todolist.core.serializer import RecordItemSerializer
from todolist.backends.in_memory import InMemoryPersistenceAdapter
from todolist.backends.in_memory.contrib.factory import create_in_memory_store
from todolist.backends.json_file import JSONFilePersistenceAdapter
from todolist.backends.json_file.contrib.factory import create_json_file_store
from todolist.backends.mongo import MongoPersistenceAdapter
from todolist.backends.mongo.contrib.factory import create_mongo_store
from tests.base import RecordingEventsManager
from tests.mongo.base import FakeClient


class InMemoryFactoryTest(unittest.TestCase):
    def test_create_in_memory_store(self):
        storage = {"todos": [{"text": "A", "isCompleted": True}]}

        store = create_in_memory_store(
            storage=storage, key="todos", events_manager_class=RecordingEventsManager
        )

        self.assertIsInstance(store.persistence_adapter, InMemoryPersistenceAdapter)
        self.assertIsInstance(
            store.persistence_adapter.item_serializer, RecordItemSerializer
        )
        self.assertIsInstance(store.events_manager, RecordingEventsManager)
        self.assertEqual(store.list(), [ToDoItem(text="A", completed=True)])

        store.add("B")
        self.assertEqual(
            storage["todos"],
            [{"text": "A", "isCompleted": True}, {"text": "B", "isCompleted": False}],
        )

    def test_autoload(self):
        store = create_in_memory_store(autoload=False)

        self.assertFalse(store.is_loaded)


class JSONFileFactoryTest(unittest.TestCase):
    def test_create_json_file_store(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            path = os.path.join(tmp_dir, "todos.json")

            store = create_json_file_store(path=path, lock_timeout=1)
            store.add("Buy milk")
            store.toggle_completed(0)

            self.assertIsInstance(store.persistence_adapter, JSONFilePersistenceAdapter)
            self.assertEqual(
                create_json_file_store(path=path).list(),
                [ToDoItem(text="Buy milk", completed=True)],
            )


class MongoFactoryTest(unittest.TestCase):
    def test_create_mongo_store(self):
        client = FakeClient()

        store = create_mongo_store(
            client=client, database_name="test_db", collection_name="prefs"
        )
        store.add("A")

        self.assertIsInstance(store.persistence_adapter, MongoPersistenceAdapter)
        self.assertEqual(
            client["test_db"]["prefs"].documents["items"]["value"],
            [{"text": "A", "isCompleted": False}],
        )
