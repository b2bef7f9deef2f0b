"""Subject / chapter / note tree and the navigation over it."""

from .models import Chapter, Note, Subject, Tree, tree_from_payload, tree_to_payload
from .navigation import (
    ChapterListView,
    Draft,
    LibraryView,
    NavigationState,
    NoteEditorView,
    Operation,
)

__all__ = [
    "Chapter",
    "Note",
    "Subject",
    "Tree",
    "tree_from_payload",
    "tree_to_payload",
    "ChapterListView",
    "Draft",
    "LibraryView",
    "NavigationState",
    "NoteEditorView",
    "Operation",
]
