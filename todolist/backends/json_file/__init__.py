from .store import JSONFilePersistenceAdapter
