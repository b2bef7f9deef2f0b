import asyncio
import logging
from typing import Callable

from nexus_notes.ai.actions import AiAction
from nexus_notes.ai.config import AiConfig
from nexus_notes.ai.gateway import is_fallback_message, request_ai_action
from nexus_notes.ai.generator import TextGenerator
from nexus_notes.library import mutations, navigation
from nexus_notes.library.models import (
    Chapter,
    Note,
    Subject,
    Tree,
    count_notes,
    find_chapter,
    find_note,
    find_subject,
)
from nexus_notes.library.navigation import (
    ChapterListView,
    LibraryView,
    NavigationState,
    NoteEditorView,
    Operation,
)
from nexus_notes.storage.repository import NotesRepository

logger = logging.getLogger(__name__)

CONFIRM_DELETE_SUBJECT = "Are you sure? All chapters and notes in this subject will be lost."
CONFIRM_DELETE_CHAPTER = "Delete this chapter and all its notes?"
CONFIRM_DELETE_NOTE = "Delete this note?"


def _refuse(message: str) -> bool:
    return False


class NotebookSession:
    """The single owner of the notes tree for one interactive session.

    Every effective mutation is written through the repository before the
    in-memory tree is replaced, so a ``StorageError`` leaves the session on
    the last tree that was saved. Operations that the current view does not
    offer, or whose ids do not resolve, are ignored.

    ``confirm`` is asked before any delete; without one, deletes are refused.
    """

    def __init__(
        self,
        repository: NotesRepository,
        generator: TextGenerator | None = None,
        ai_config: AiConfig | None = None,
        confirm: Callable[[str], bool] | None = None,
    ) -> None:
        self._repository = repository
        self._generator = generator
        self._ai_config = ai_config
        self._confirm = confirm or _refuse
        self._tree: Tree = repository.load()
        self._state: NavigationState = navigation.initial_state()
        self.ai_busy = False
        self.ai_action: AiAction | None = None
        self.ai_result: str | None = None
        self.ai_note_id: str | None = None

    @property
    def tree(self) -> Tree:
        return self._tree

    @property
    def state(self) -> NavigationState:
        return self._state

    # selection

    def selected_subject(self) -> Subject | None:
        if isinstance(self._state, LibraryView):
            return None
        return find_subject(self._tree, self._state.subject_id)

    def selected_chapter(self) -> Chapter | None:
        if not isinstance(self._state, NoteEditorView):
            return None
        return find_chapter(self._tree, self._state.subject_id, self._state.chapter_id)

    def selected_note(self) -> Note | None:
        if not isinstance(self._state, NoteEditorView):
            return None
        state = self._state
        return find_note(self._tree, state.subject_id, state.chapter_id, state.note_id)

    def stats(self) -> dict[str, int]:
        return {
            "subjects": len(self._tree),
            "chapters": sum(len(subject.chapters) for subject in self._tree),
            "notes": count_notes(self._tree),
        }

    # navigation

    def select_subject(self, subject_id: str) -> bool:
        if not isinstance(self._state, LibraryView):
            logger.debug("select_subject ignored outside the library")
            return False
        if find_subject(self._tree, subject_id) is None:
            logger.debug("select_subject ignored: unknown subject %s", subject_id)
            return False
        self._state = navigation.select_subject(self._state, subject_id)
        return True

    def go_back(self) -> None:
        self._state = navigation.go_back(self._state)

    def open_note(self, chapter_id: str, note_id: str) -> bool:
        if not isinstance(self._state, (ChapterListView, NoteEditorView)):
            logger.debug("open_note ignored: no subject selected")
            return False
        note = find_note(self._tree, self._state.subject_id, chapter_id, note_id)
        if note is None:
            logger.debug("open_note ignored: unknown note %s", note_id)
            return False
        self._state = navigation.open_note(self._state, chapter_id, note)
        self.ai_result = None
        return True

    def edit_draft(self, title: str | None = None, content: str | None = None) -> bool:
        if not isinstance(self._state, NoteEditorView):
            logger.debug("edit_draft ignored outside the note editor")
            return False
        self._state = navigation.edit_draft(self._state, title=title, content=content)
        return True

    # mutations

    def create_subject(self, title: str, code: str | None = None) -> Subject | None:
        if not self._allowed(Operation.CREATE_SUBJECT):
            return None
        if not self._commit(mutations.create_subject(self._tree, title, code)):
            return None
        return self._tree[-1]

    def delete_subject(self, subject_id: str) -> bool:
        if not self._allowed(Operation.DELETE_SUBJECT):
            return False
        if find_subject(self._tree, subject_id) is None:
            return False
        if not self._confirm(CONFIRM_DELETE_SUBJECT):
            logger.debug("delete_subject %s not confirmed", subject_id)
            return False
        return self._commit(mutations.delete_subject(self._tree, subject_id))

    def create_chapter(self, title: str, description: str | None = None) -> Chapter | None:
        if not self._allowed(Operation.CREATE_CHAPTER):
            return None
        subject_id = self._state.subject_id
        updated = mutations.create_chapter(self._tree, subject_id, title, description)
        if not self._commit(updated):
            return None
        return find_subject(self._tree, subject_id).chapters[-1]

    def delete_chapter(self, chapter_id: str) -> bool:
        if not self._allowed(Operation.DELETE_CHAPTER):
            return False
        subject_id = self._state.subject_id
        if find_chapter(self._tree, subject_id, chapter_id) is None:
            return False
        if not self._confirm(CONFIRM_DELETE_CHAPTER):
            logger.debug("delete_chapter %s not confirmed", chapter_id)
            return False
        return self._commit(mutations.delete_chapter(self._tree, subject_id, chapter_id))

    def create_note(self, chapter_id: str) -> Note | None:
        """Create an empty note in ``chapter_id`` and open it in the editor."""
        if not self._allowed(Operation.CREATE_NOTE):
            return None
        updated, note = mutations.create_note(self._tree, self._state.subject_id, chapter_id)
        if note is None or not self._commit(updated):
            return None
        self._state = navigation.open_note(self._state, chapter_id, note)
        self.ai_result = None
        return note

    def delete_note(self, chapter_id: str, note_id: str) -> bool:
        if not self._allowed(Operation.DELETE_NOTE):
            return False
        subject_id = self._state.subject_id
        if find_note(self._tree, subject_id, chapter_id, note_id) is None:
            return False
        if not self._confirm(CONFIRM_DELETE_NOTE):
            logger.debug("delete_note %s not confirmed", note_id)
            return False
        return self._commit(mutations.delete_note(self._tree, subject_id, chapter_id, note_id))

    def save_note(self) -> bool:
        if not self._allowed(Operation.UPDATE_NOTE):
            return False
        state = self._state
        updated = mutations.update_note(
            self._tree,
            state.subject_id,
            state.chapter_id,
            state.note_id,
            state.draft.title,
            state.draft.content,
        )
        return self._commit(updated)

    # AI

    async def run_ai_action(self, action: AiAction) -> str | None:
        """Run ``action`` over the current draft without blocking other edits.

        Only one request may be outstanding. The result is kept in
        ``ai_result`` even if the editor moved to another note meanwhile.
        """
        if not self._allowed(Operation.REQUEST_AI_ACTION):
            return None
        if self.ai_busy:
            logger.debug("AI request ignored: another request is outstanding")
            return None
        content = self._state.draft.content
        if not content.strip():
            logger.debug("AI request ignored: draft is empty")
            return None

        self.ai_busy = True
        self.ai_action = AiAction(action)
        self.ai_note_id = self._state.note_id
        self.ai_result = None
        try:
            result = await asyncio.to_thread(
                request_ai_action,
                content,
                self.ai_action,
                self._generator,
                self._ai_config,
            )
        finally:
            self.ai_busy = False

        self.ai_result = result
        return result

    def append_ai_result(self) -> bool:
        if self.ai_result is None or not isinstance(self._state, NoteEditorView):
            return False
        self._state = navigation.append_to_draft(self._state, self.ai_result)
        self.ai_result = None
        return True

    def dismiss_ai_result(self) -> bool:
        if self.ai_result is None:
            return False
        self.ai_result = None
        return True

    def save_ai_summary(self) -> bool:
        """Store the last Summarize result on the note it was requested for.

        Fallback messages are never stored, and a result that arrived after
        the editor switched notes stays display-only.
        """
        if not self._allowed(Operation.SAVE_AI_SUMMARY):
            return False
        if self.ai_action != AiAction.SUMMARIZE or not self.ai_result:
            return False
        if is_fallback_message(self.ai_result):
            logger.debug("save_ai_summary ignored: result is a fallback message")
            return False
        state = self._state
        if self.ai_note_id != state.note_id:
            logger.debug("save_ai_summary ignored: result belongs to note %s", self.ai_note_id)
            return False
        updated = mutations.set_note_summary(
            self._tree,
            state.subject_id,
            state.chapter_id,
            state.note_id,
            self.ai_result,
        )
        return self._commit(updated)

    def _allowed(self, operation: Operation) -> bool:
        if navigation.is_allowed(self._state, operation):
            return True
        logger.debug("%s ignored in %s", operation.value, type(self._state).__name__)
        return False

    def _commit(self, updated: Tree) -> bool:
        if updated is self._tree:
            return False
        self._repository.save(updated)
        self._tree = updated
        logger.info("saved %d subjects", len(updated))
        return True
