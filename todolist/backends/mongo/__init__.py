from .store import MongoPersistenceAdapter, DEFAULT_COLLECTION_NAME
