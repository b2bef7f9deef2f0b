import time
from dataclasses import dataclass
from typing import Any

DEFAULT_NOTE_TITLE = "Untitled Note"
PREVIEW_LENGTH = 40


def now_ms() -> int:
    return int(time.time() * 1000)


@dataclass(frozen=True)
class Note:
    id: str
    title: str
    content: str
    created_at: int
    last_modified: int
    ai_summary: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "createdAt": self.created_at,
            "lastModified": self.last_modified,
        }
        if self.ai_summary is not None:
            data["aiSummary"] = self.ai_summary
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Note":
        _require_keys(data, "note", ("id", "title", "content", "createdAt", "lastModified"))
        return cls(
            id=data["id"],
            title=data["title"],
            content=data["content"],
            created_at=int(data["createdAt"]),
            last_modified=int(data["lastModified"]),
            ai_summary=data.get("aiSummary"),
        )


@dataclass(frozen=True)
class Chapter:
    id: str
    title: str
    created_at: int
    notes: tuple[Note, ...] = ()
    description: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "notes": [note.to_dict() for note in self.notes],
            "createdAt": self.created_at,
        }
        if self.description is not None:
            data["description"] = self.description
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Chapter":
        _require_keys(data, "chapter", ("id", "title", "createdAt"))
        notes = data.get("notes", [])
        if not isinstance(notes, list):
            raise ValueError(f"chapter {data['id']}: notes must be a list")
        return cls(
            id=data["id"],
            title=data["title"],
            created_at=int(data["createdAt"]),
            notes=tuple(Note.from_dict(item) for item in notes),
            description=data.get("description"),
        )


@dataclass(frozen=True)
class Subject:
    id: str
    title: str
    color: str
    created_at: int
    chapters: tuple[Chapter, ...] = ()
    code: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "color": self.color,
            "chapters": [chapter.to_dict() for chapter in self.chapters],
            "createdAt": self.created_at,
        }
        if self.code is not None:
            data["code"] = self.code
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Subject":
        _require_keys(data, "subject", ("id", "title", "color", "createdAt"))
        chapters = data.get("chapters", [])
        if not isinstance(chapters, list):
            raise ValueError(f"subject {data['id']}: chapters must be a list")
        return cls(
            id=data["id"],
            title=data["title"],
            color=data["color"],
            created_at=int(data["createdAt"]),
            chapters=tuple(Chapter.from_dict(item) for item in chapters),
            # Older saves wrote an empty string for "no code".
            code=data.get("code") or None,
        )


Tree = tuple[Subject, ...]


def tree_to_payload(tree: Tree) -> list[dict[str, Any]]:
    return [subject.to_dict() for subject in tree]


def tree_from_payload(payload: Any) -> Tree:
    if not isinstance(payload, list):
        raise ValueError("payload must be a list of subjects")
    return tuple(Subject.from_dict(item) for item in payload)


def find_subject(tree: Tree, subject_id: str) -> Subject | None:
    for subject in tree:
        if subject.id == subject_id:
            return subject
    return None


def find_chapter(tree: Tree, subject_id: str, chapter_id: str) -> Chapter | None:
    subject = find_subject(tree, subject_id)
    if subject is None:
        return None
    for chapter in subject.chapters:
        if chapter.id == chapter_id:
            return chapter
    return None


def find_note(tree: Tree, subject_id: str, chapter_id: str, note_id: str) -> Note | None:
    chapter = find_chapter(tree, subject_id, chapter_id)
    if chapter is None:
        return None
    for note in chapter.notes:
        if note.id == note_id:
            return note
    return None


def count_notes(tree: Tree) -> int:
    return sum(len(chapter.notes) for subject in tree for chapter in subject.chapters)


def note_preview(note: Note) -> str:
    return note.content[:PREVIEW_LENGTH] or "No content..."


def _require_keys(data: Any, kind: str, keys: tuple[str, ...]) -> None:
    if not isinstance(data, dict):
        raise ValueError(f"each {kind} must be an object")
    missing = [key for key in keys if key not in data]
    if missing:
        raise ValueError(f"{kind} is missing required keys: {', '.join(missing)}")
