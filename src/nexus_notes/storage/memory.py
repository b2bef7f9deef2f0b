import json

from nexus_notes.library.models import Tree, tree_from_payload, tree_to_payload
from nexus_notes.storage.repository import NotesRepository


class InMemoryRepository(NotesRepository):
    def __init__(self, tree: Tree = ()) -> None:
        self._blob = json.dumps(tree_to_payload(tree))
        self.save_count = 0

    def load(self) -> Tree:
        return tree_from_payload(json.loads(self._blob))

    def save(self, tree: Tree) -> None:
        self._blob = json.dumps(tree_to_payload(tree))
        self.save_count += 1
