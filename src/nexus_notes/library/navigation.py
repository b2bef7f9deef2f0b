from dataclasses import dataclass, replace
from enum import Enum
from typing import Union

from nexus_notes.library.models import Note

AI_APPEND_SEPARATOR = "\n\n--- AI Generated ---\n"


class Operation(str, Enum):
    CREATE_SUBJECT = "create_subject"
    DELETE_SUBJECT = "delete_subject"
    CREATE_CHAPTER = "create_chapter"
    DELETE_CHAPTER = "delete_chapter"
    CREATE_NOTE = "create_note"
    DELETE_NOTE = "delete_note"
    UPDATE_NOTE = "update_note"
    REQUEST_AI_ACTION = "request_ai_action"
    SAVE_AI_SUMMARY = "save_ai_summary"


@dataclass(frozen=True)
class Draft:
    title: str
    content: str


@dataclass(frozen=True)
class LibraryView:
    pass


@dataclass(frozen=True)
class ChapterListView:
    subject_id: str


@dataclass(frozen=True)
class NoteEditorView:
    subject_id: str
    chapter_id: str
    note_id: str
    draft: Draft


NavigationState = Union[LibraryView, ChapterListView, NoteEditorView]

_ALLOWED_OPERATIONS: dict[type, frozenset[Operation]] = {
    LibraryView: frozenset({Operation.CREATE_SUBJECT, Operation.DELETE_SUBJECT}),
    ChapterListView: frozenset(
        {
            Operation.CREATE_CHAPTER,
            Operation.DELETE_CHAPTER,
            Operation.CREATE_NOTE,
            Operation.DELETE_NOTE,
        }
    ),
    NoteEditorView: frozenset(
        {
            Operation.UPDATE_NOTE,
            Operation.REQUEST_AI_ACTION,
            Operation.SAVE_AI_SUMMARY,
        }
    ),
}


def initial_state() -> LibraryView:
    return LibraryView()


def allowed_operations(state: NavigationState) -> frozenset[Operation]:
    return _ALLOWED_OPERATIONS.get(type(state), frozenset())


def is_allowed(state: NavigationState, operation: Operation) -> bool:
    return operation in allowed_operations(state)


def select_subject(state: NavigationState, subject_id: str) -> ChapterListView:
    if not isinstance(state, LibraryView):
        raise ValueError("a subject can only be selected from the library")
    return ChapterListView(subject_id=subject_id)


def go_back(state: NavigationState) -> NavigationState:
    if isinstance(state, NoteEditorView):
        return ChapterListView(subject_id=state.subject_id)
    return LibraryView()


def open_note(state: NavigationState, chapter_id: str, note: Note) -> NoteEditorView:
    if not isinstance(state, (ChapterListView, NoteEditorView)):
        raise ValueError("a note can only be opened once a subject is selected")
    # Switching notes from the editor drops the previous draft unsaved.
    return NoteEditorView(
        subject_id=state.subject_id,
        chapter_id=chapter_id,
        note_id=note.id,
        draft=Draft(title=note.title, content=note.content),
    )


def edit_draft(
    state: NavigationState,
    title: str | None = None,
    content: str | None = None,
) -> NoteEditorView:
    if not isinstance(state, NoteEditorView):
        raise ValueError("the draft can only be edited in the note editor")
    draft = Draft(
        title=state.draft.title if title is None else title,
        content=state.draft.content if content is None else content,
    )
    return replace(state, draft=draft)


def append_to_draft(state: NavigationState, text: str) -> NoteEditorView:
    if not isinstance(state, NoteEditorView):
        raise ValueError("the draft can only be edited in the note editor")
    return edit_draft(state, content=state.draft.content + AI_APPEND_SEPARATOR + text)
