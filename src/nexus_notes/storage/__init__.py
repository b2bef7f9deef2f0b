from nexus_notes.storage.json_file import JsonFileRepository
from nexus_notes.storage.memory import InMemoryRepository
from nexus_notes.storage.repository import NotesRepository, StorageError

__all__ = [
    "JsonFileRepository",
    "InMemoryRepository",
    "NotesRepository",
    "StorageError",
]
