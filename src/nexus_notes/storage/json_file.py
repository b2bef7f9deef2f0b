import json
import logging
import os
from pathlib import Path
from typing import Any

from nexus_notes.config import DEFAULT_STORAGE_KEY, get_notes_config
from nexus_notes.library.models import Tree, tree_from_payload, tree_to_payload
from nexus_notes.storage.repository import NotesRepository, StorageError

logger = logging.getLogger(__name__)


class JsonFileRepository(NotesRepository):
    """Key-value blob store backed by one JSON object file.

    The tree is kept under a single key and is always replaced whole. Other
    keys found in the file are written back untouched.
    """

    def __init__(self, path: str, key: str = DEFAULT_STORAGE_KEY) -> None:
        self.path = Path(path)
        self.key = key

    @classmethod
    def from_config(cls) -> "JsonFileRepository":
        config = get_notes_config()
        return cls(config.state_file, key=config.storage_key)

    def load(self) -> Tree:
        store = self._read_store()
        if self.key not in store:
            return ()
        try:
            return tree_from_payload(store[self.key])
        except (ValueError, TypeError) as exc:
            raise StorageError(f"malformed notes data under {self.key!r}: {exc}") from exc

    def save(self, tree: Tree) -> None:
        store = self._read_store()
        store[self.key] = tree_to_payload(tree)

        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json.dumps(store, indent=2, sort_keys=True), encoding="utf-8")
            os.replace(tmp_path, self.path)
        except OSError as exc:
            logger.warning("could not write %s: %s", self.path, exc)
            raise StorageError(f"could not write {self.path}: {exc}") from exc

    def _read_store(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            logger.warning("could not read %s: %s", self.path, exc)
            raise StorageError(f"could not read {self.path}: {exc}") from exc
        if not isinstance(payload, dict):
            raise StorageError(f"{self.path} must contain a JSON object")
        return payload
