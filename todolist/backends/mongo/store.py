from todolist.core.persistence import BasePersistenceAdapter
from todolist.core.exceptions import PersistenceError
from pymongo.errors import PyMongoError
from typing import Any, List, Optional
import logging

logger = logging.getLogger(__name__)

DEFAULT_COLLECTION_NAME = "todolist__defaults"


class MongoPersistenceAdapter(BasePersistenceAdapter):
    """Stores the records in a MongoDB collection, one document per key:
    ``{"_id": key, "value": records}``."""

    def __init__(self, *args, **kwargs):
        self.db = kwargs.pop("db")
        self.collection_name = kwargs.pop("collection_name", DEFAULT_COLLECTION_NAME)
        super().__init__(*args, **kwargs)

    def __repr__(self):  # pragma: no cover
        return f"{self.__class__.__name__}(collection_name='{self.collection_name}', key='{self.key}')"

    def _get_collection(self):
        return self.db[self.collection_name]

    def read_records(self) -> "Optional[Any]":
        try:
            document = self._get_collection().find_one({"_id": self.key})
        except PyMongoError as e:
            raise PersistenceError(
                f"Could not read key '{self.key}' from '{self.collection_name}': {e}"
            ) from e

        if not document:
            return None
        return document.get("value")

    def write_records(self, records: "List[Any]"):
        try:
            self._get_collection().replace_one(
                {"_id": self.key}, {"_id": self.key, "value": records}, upsert=True
            )
        except PyMongoError as e:
            raise PersistenceError(
                f"Could not write key '{self.key}' to '{self.collection_name}': {e}"
            ) from e

        logger.debug("Wrote key '%s' to collection %s", self.key, self.collection_name)
