from todolist.core.persistence import BasePersistenceAdapter
from todolist.core.exceptions import PersistenceError
from filelock import FileLock, Timeout
from typing import Any, Dict, List, Optional
import json
import os
import tempfile
import logging

logger = logging.getLogger(__name__)


class JSONFilePersistenceAdapter(BasePersistenceAdapter):
    """Stores the records in a JSON file holding an object that maps keys to values.
    Values under other keys are kept when the file is written.

    Attributes:
        path (str): Path to the JSON file.
        lock (FileLock): Lock held while the file is read or replaced.
        indent (Optional[int]): Indentation used when the file is written.
    """

    path: "str"
    lock: "FileLock"

    def __init__(self, *args, **kwargs):
        self.path = os.fspath(kwargs.pop("path"))
        lock_timeout = kwargs.pop("lock_timeout", 10)
        self.indent = kwargs.pop("indent", None)
        super().__init__(*args, **kwargs)
        self.lock = FileLock(self.path + ".lock", timeout=lock_timeout)

    def __repr__(self):  # pragma: no cover
        return f"{self.__class__.__name__}(path='{self.path}', key='{self.key}')"

    def _read_document(self) -> "Dict[str, Any]":
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                document = json.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as e:
            raise PersistenceError(f"Could not read '{self.path}': {e}") from e

        if not isinstance(document, dict):
            raise PersistenceError(
                f"Could not read '{self.path}': expected a JSON object, found {type(document).__name__}."
            )
        return document

    def _write_document(self, document: "Dict[str, Any]"):
        directory = os.path.dirname(os.path.abspath(self.path))
        fd, tmp_path = tempfile.mkstemp(dir=directory, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(document, f, indent=self.indent)
            os.replace(tmp_path, self.path)
        except BaseException:
            try:
                os.remove(tmp_path)
            except FileNotFoundError:
                pass
            raise

    def read_records(self) -> "Optional[Any]":
        try:
            with self.lock:
                document = self._read_document()
        except Timeout as e:
            raise PersistenceError(f"Timed out waiting for '{e.lock_file}'.") from e

        return document.get(self.key)

    def write_records(self, records: "List[Any]"):
        try:
            with self.lock:
                document = self._read_document()
                document[self.key] = records
                self._write_document(document=document)
        except Timeout as e:
            raise PersistenceError(f"Timed out waiting for '{e.lock_file}'.") from e
        except OSError as e:
            raise PersistenceError(f"Could not write '{self.path}': {e}") from e

        logger.debug("Wrote key '%s' to %s", self.key, self.path)
