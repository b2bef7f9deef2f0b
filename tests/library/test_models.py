import unittest

from nexus_notes.library.models import (
    Chapter,
    Note,
    Subject,
    count_notes,
    find_chapter,
    find_note,
    find_subject,
    note_preview,
    tree_from_payload,
    tree_to_payload,
)


def _sample_tree():
    note = Note(id="n1", title="Medici", content="Patrons of the arts", created_at=10, last_modified=20, ai_summary="- patrons")
    empty_note = Note(id="n2", title="Untitled Note", content="", created_at=30, last_modified=30)
    chapter = Chapter(id="c1", title="Renaissance", created_at=5, notes=(note, empty_note), description="Italy")
    return (
        Subject(id="s1", title="History", color="bg-red-800", created_at=1, chapters=(chapter,), code="HIS101"),
        Subject(id="s2", title="Physics", color="bg-sky-800", created_at=2),
    )


class NoteSerializationTests(unittest.TestCase):
    def test_note_to_dict_uses_camel_case_keys(self):
        note = Note(id="n1", title="T", content="C", created_at=1, last_modified=2)

        self.assertEqual(
            note.to_dict(),
            {"id": "n1", "title": "T", "content": "C", "createdAt": 1, "lastModified": 2},
        )

    def test_optional_fields_are_omitted_when_unset(self):
        subject = Subject(id="s", title="T", color="bg-red-800", created_at=1)

        data = subject.to_dict()

        self.assertNotIn("code", data)
        self.assertEqual(data["chapters"], [])

    def test_missing_required_key_raises(self):
        with self.assertRaises(ValueError) as ctx:
            Note.from_dict({"id": "n1", "title": "T", "content": ""})
        self.assertIn("createdAt", str(ctx.exception))

    def test_empty_code_loads_as_none(self):
        subject = Subject.from_dict({"id": "s", "title": "T", "code": "", "color": "bg-red-800", "chapters": [], "createdAt": 1})
        self.assertIsNone(subject.code)


class TreePayloadTests(unittest.TestCase):
    def test_round_trip_reproduces_equal_tree(self):
        tree = _sample_tree()

        restored = tree_from_payload(tree_to_payload(tree))

        self.assertEqual(restored, tree)
        self.assertEqual([s.id for s in restored], ["s1", "s2"])
        self.assertEqual([n.id for n in restored[0].chapters[0].notes], ["n1", "n2"])

    def test_payload_must_be_a_list(self):
        with self.assertRaises(ValueError):
            tree_from_payload({"subjects": []})

    def test_entities_must_be_objects(self):
        with self.assertRaises(ValueError):
            tree_from_payload(["not a subject"])


class LookupTests(unittest.TestCase):
    def test_find_helpers_resolve_nested_ids(self):
        tree = _sample_tree()

        self.assertEqual(find_subject(tree, "s2").title, "Physics")
        self.assertEqual(find_chapter(tree, "s1", "c1").title, "Renaissance")
        self.assertEqual(find_note(tree, "s1", "c1", "n1").title, "Medici")

    def test_find_helpers_return_none_for_unknown_ids(self):
        tree = _sample_tree()

        self.assertIsNone(find_subject(tree, "missing"))
        self.assertIsNone(find_chapter(tree, "s2", "c1"))
        self.assertIsNone(find_note(tree, "s1", "c1", "missing"))

    def test_count_notes_spans_all_subjects(self):
        self.assertEqual(count_notes(_sample_tree()), 2)
        self.assertEqual(count_notes(()), 0)

    def test_note_preview(self):
        tree = _sample_tree()
        long_note = Note(id="n", title="t", content="x" * 100, created_at=0, last_modified=0)

        self.assertEqual(note_preview(find_note(tree, "s1", "c1", "n2")), "No content...")
        self.assertEqual(note_preview(long_note), "x" * 40)


if __name__ == "__main__":
    unittest.main()
