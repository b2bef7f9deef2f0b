"""Pure operations over the subject / chapter / note tree.

Every function returns a new tree and leaves its input untouched. Only the
path from the root to the changed node is rebuilt; all other subjects,
chapters and notes are shared with the input tree. When a guard fails
(blank title, unknown id) the input tree object itself is returned.
"""

import logging
import random
import uuid
from dataclasses import replace
from typing import Callable

from nexus_notes.library.models import (
    DEFAULT_NOTE_TITLE,
    Chapter,
    Note,
    Subject,
    Tree,
    now_ms,
)
from nexus_notes.library.palette import random_color

logger = logging.getLogger(__name__)


def new_id() -> str:
    return str(uuid.uuid4())


def create_subject(
    tree: Tree,
    title: str,
    code: str | None = None,
    now: int | None = None,
    rng: random.Random | None = None,
) -> Tree:
    if not title.strip():
        logger.debug("create_subject ignored: blank title")
        return tree

    subject = Subject(
        id=new_id(),
        title=title,
        code=code if code and code.strip() else None,
        color=random_color(rng),
        chapters=(),
        created_at=_timestamp(now),
    )
    return tree + (subject,)


def delete_subject(tree: Tree, subject_id: str) -> Tree:
    remaining = tuple(subject for subject in tree if subject.id != subject_id)
    if len(remaining) == len(tree):
        logger.debug("delete_subject ignored: unknown subject %s", subject_id)
        return tree
    return remaining


def create_chapter(
    tree: Tree,
    subject_id: str,
    title: str,
    description: str | None = None,
    now: int | None = None,
) -> Tree:
    if not title.strip():
        logger.debug("create_chapter ignored: blank title")
        return tree

    chapter = Chapter(
        id=new_id(),
        title=title,
        description=description,
        notes=(),
        created_at=_timestamp(now),
    )
    return _map_subject(
        tree,
        subject_id,
        lambda subject: replace(subject, chapters=subject.chapters + (chapter,)),
    )


def delete_chapter(tree: Tree, subject_id: str, chapter_id: str) -> Tree:
    def drop(subject: Subject) -> Subject:
        remaining = tuple(c for c in subject.chapters if c.id != chapter_id)
        if len(remaining) == len(subject.chapters):
            return subject
        return replace(subject, chapters=remaining)

    return _map_subject(tree, subject_id, drop)


def create_note(
    tree: Tree,
    subject_id: str,
    chapter_id: str,
    now: int | None = None,
) -> tuple[Tree, Note | None]:
    timestamp = _timestamp(now)
    note = Note(
        id=new_id(),
        title=DEFAULT_NOTE_TITLE,
        content="",
        created_at=timestamp,
        last_modified=timestamp,
    )
    updated = _map_chapter(
        tree,
        subject_id,
        chapter_id,
        lambda chapter: replace(chapter, notes=chapter.notes + (note,)),
    )
    if updated is tree:
        return tree, None
    return updated, note


def delete_note(tree: Tree, subject_id: str, chapter_id: str, note_id: str) -> Tree:
    def drop(chapter: Chapter) -> Chapter:
        remaining = tuple(n for n in chapter.notes if n.id != note_id)
        if len(remaining) == len(chapter.notes):
            return chapter
        return replace(chapter, notes=remaining)

    return _map_chapter(tree, subject_id, chapter_id, drop)


def update_note(
    tree: Tree,
    subject_id: str,
    chapter_id: str,
    note_id: str,
    title: str,
    content: str,
    now: int | None = None,
) -> Tree:
    timestamp = _timestamp(now)
    return _map_note(
        tree,
        subject_id,
        chapter_id,
        note_id,
        lambda note: replace(
            note,
            title=title,
            content=content,
            last_modified=max(timestamp, note.created_at),
        ),
    )


def set_note_summary(
    tree: Tree,
    subject_id: str,
    chapter_id: str,
    note_id: str,
    summary: str | None,
) -> Tree:
    return _map_note(
        tree,
        subject_id,
        chapter_id,
        note_id,
        lambda note: replace(note, ai_summary=summary),
    )


def _timestamp(now: int | None) -> int:
    return now_ms() if now is None else now


def _map_subject(tree: Tree, subject_id: str, fn: Callable[[Subject], Subject]) -> Tree:
    for index, subject in enumerate(tree):
        if subject.id != subject_id:
            continue
        updated = fn(subject)
        if updated is subject:
            return tree
        return tree[:index] + (updated,) + tree[index + 1:]

    logger.debug("unknown subject %s", subject_id)
    return tree


def _map_chapter(
    tree: Tree,
    subject_id: str,
    chapter_id: str,
    fn: Callable[[Chapter], Chapter],
) -> Tree:
    def apply(subject: Subject) -> Subject:
        for index, chapter in enumerate(subject.chapters):
            if chapter.id != chapter_id:
                continue
            updated = fn(chapter)
            if updated is chapter:
                return subject
            chapters = subject.chapters[:index] + (updated,) + subject.chapters[index + 1:]
            return replace(subject, chapters=chapters)

        logger.debug("unknown chapter %s in subject %s", chapter_id, subject_id)
        return subject

    return _map_subject(tree, subject_id, apply)


def _map_note(
    tree: Tree,
    subject_id: str,
    chapter_id: str,
    note_id: str,
    fn: Callable[[Note], Note],
) -> Tree:
    def apply(chapter: Chapter) -> Chapter:
        for index, note in enumerate(chapter.notes):
            if note.id != note_id:
                continue
            notes = chapter.notes[:index] + (fn(note),) + chapter.notes[index + 1:]
            return replace(chapter, notes=notes)

        logger.debug("unknown note %s in chapter %s", note_id, chapter_id)
        return chapter

    return _map_chapter(tree, subject_id, chapter_id, apply)
