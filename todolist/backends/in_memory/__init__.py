from .store import InMemoryPersistenceAdapter
