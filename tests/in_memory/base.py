import tests.base
from todolist.core.persistence import BasePersistenceAdapter
from todolist.backends.in_memory import InMemoryPersistenceAdapter
from typing import Any
import copy


class InMemoryBackendTestMixin(tests.base.BackendTestMixin):
    def _set_up_backend(self):
        self.storage = {}

    def _create_adapter(self, key: "str" = "items") -> "BasePersistenceAdapter":
        return InMemoryPersistenceAdapter(key=key, storage=self.storage)

    def _set_raw_value(self, value: "Any", key: "str" = "items"):
        self.storage[key] = copy.deepcopy(value)

    def _get_raw_value(self, key: "str" = "items") -> "Any":
        return self.storage[key]
