import unittest
from todolist.core.serializer import RecordItemSerializer
from todolist.core.exceptions import MalformedRecordError
from todolist.core.metadata import ToDoItem


class RecordItemSerializerTest(unittest.TestCase):
    def setUp(self):
        self.serializer = RecordItemSerializer()

    def test_serialize_item(self):
        self.assertEqual(
            self.serializer.serialize_item(ToDoItem(text="Buy milk")),
            {"text": "Buy milk", "isCompleted": False},
        )
        self.assertEqual(
            self.serializer.serialize_item(ToDoItem(text="Buy milk", completed=True)),
            {"text": "Buy milk", "isCompleted": True},
        )

    def test_deserialize_item(self):
        item = self.serializer.deserialize_item({"text": "Buy milk", "isCompleted": True})

        self.assertEqual(item, ToDoItem(text="Buy milk", completed=True))

    def test_deserialize_item_prefers_is_completed(self):
        item = self.serializer.deserialize_item(
            {"text": "A", "isCompleted": True, "completed": False}
        )

        self.assertTrue(item.completed)

    def test_deserialize_item_with_completed(self):
        item = self.serializer.deserialize_item({"text": "A", "completed": True})

        self.assertEqual(item, ToDoItem(text="A", completed=True))

    def test_deserialize_item_keeps_empty_text(self):
        item = self.serializer.deserialize_item({"text": "", "isCompleted": False})

        self.assertEqual(item, ToDoItem(text=""))

    def test_deserialize_malformed(self):
        records = [
            {"text": "X"},
            {"isCompleted": False},
            {},
            {"text": None, "isCompleted": False},
            {"text": ["X"], "isCompleted": False},
            {"text": "X", "isCompleted": 1},
            {"text": "X", "completed": "true"},
            {"text": "X", "isCompleted": None},
            ["X", False],
            "X",
            None,
        ]

        for record in records:
            with self.assertRaises(MalformedRecordError, msg=repr(record)):
                self.serializer.deserialize_item(record)


class CustomFieldsSerializerTest(unittest.TestCase):
    def test_custom_field_names(self):
        class DoneSerializer(RecordItemSerializer):
            completed_field = "done"
            completed_aliases = ("done",)

        serializer = DoneSerializer()

        self.assertEqual(
            serializer.serialize_item(ToDoItem(text="A", completed=True)),
            {"text": "A", "done": True},
        )
        self.assertEqual(
            serializer.deserialize_item({"text": "A", "done": False}), ToDoItem(text="A")
        )
        with self.assertRaises(MalformedRecordError):
            serializer.deserialize_item({"text": "A", "isCompleted": False})
