from abc import ABC, abstractmethod

from nexus_notes.library.models import Tree


class StorageError(Exception):
    """Raised when the notes blob cannot be read or written."""


class NotesRepository(ABC):
    @abstractmethod
    def load(self) -> Tree:
        """Return the stored tree, or an empty tree when nothing is stored yet."""
        pass

    @abstractmethod
    def save(self, tree: Tree) -> None:
        """Replace the stored tree. Raises StorageError on failure."""
        pass
