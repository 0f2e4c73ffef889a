from todolist.core.persistence import BasePersistenceAdapter
from typing import Any, Dict, List, Optional
import copy


class InMemoryPersistenceAdapter(BasePersistenceAdapter):
    """Keeps the records in a dictionary, the same way the host's defaults storage would.
    Passing the same dictionary to two adapters makes them share the storage."""

    def __init__(self, *args, **kwargs):
        storage = kwargs.pop("storage", None)
        super().__init__(*args, **kwargs)
        self._db: "Dict[str, Any]" = storage if storage is not None else {}

    def read_records(self) -> "Optional[Any]":
        return copy.deepcopy(self._db.get(self.key))

    def write_records(self, records: "List[Any]"):
        self._db[self.key] = copy.deepcopy(records)
