import logging
import sys
import unittest
from pathlib import Path

# Ensure src/ is on sys.path so we can import the package without installation
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from tagedit.editor.session import BatchEditSession  # noqa: E402
from tagedit.editor.status import TRANSITIONS, TagStatus, next_status  # noqa: E402
from tagedit.exceptions import InvalidTagNameError, SessionClosedError  # noqa: E402
from tagedit.resources.tags_types import TagOperation  # noqa: E402


logging.basicConfig(
    level=logging.WARNING,
    format="%(levelname)s:%(name)s:%(message)s",
    stream=sys.stdout,
    force=True,
)


class StatusTests(unittest.TestCase):
    def test_transition_table(self):
        self.assertIs(next_status(None), TagStatus.ADD)
        self.assertIsNone(next_status(TagStatus.ADD))
        self.assertIs(next_status(TagStatus.PRESENT), TagStatus.REMOVE)
        self.assertIs(next_status(TagStatus.REMOVE), TagStatus.PRESENT)

    def test_transitions_are_involutive(self):
        for status in TRANSITIONS:
            self.assertIs(next_status(next_status(status)), status)

    def test_in_baseline(self):
        self.assertTrue(TagStatus.PRESENT.in_baseline)
        self.assertTrue(TagStatus.REMOVE.in_baseline)
        self.assertFalse(TagStatus.ADD.in_baseline)


class BatchEditSessionTests(unittest.TestCase):
    def test_open_marks_baseline_present(self):
        session = BatchEditSession.open({"pii", "finance"})
        self.assertEqual(session.statuses(), {"finance": TagStatus.PRESENT, "pii": TagStatus.PRESENT})
        self.assertIs(session.status("pii"), TagStatus.PRESENT)
        self.assertIsNone(session.status("other"))
        self.assertEqual(session.baseline, frozenset({"pii", "finance"}))
        self.assertTrue(session.is_open)

    def test_open_without_toggles_compiles_empty(self):
        for baseline in (set(), {"a"}, {"a", "b", "c"}):
            self.assertEqual(BatchEditSession.open(baseline).commit(), [])

    def test_toggle_baseline_tag(self):
        session = BatchEditSession.open({"pii", "finance"})
        self.assertIs(session.toggle("pii"), TagStatus.REMOVE)
        self.assertEqual(session.pending_operations(), [TagOperation.remove("pii")])
        self.assertIs(session.toggle("pii"), TagStatus.PRESENT)
        self.assertEqual(session.pending_operations(), [])

    def test_toggle_new_tag(self):
        session = BatchEditSession.open({"finance"})
        self.assertIs(session.toggle("new_tag"), TagStatus.ADD)
        self.assertEqual(session.pending_operations(), [TagOperation.add("new_tag")])
        self.assertIsNone(session.toggle("new_tag"))
        self.assertNotIn("new_tag", session.statuses())
        self.assertEqual(session.pending_operations(), [])

    def test_double_toggle_restores_status(self):
        session = BatchEditSession.open({"a"})
        for name in ("a", "b"):
            before = session.status(name)
            session.toggle(name)
            session.toggle(name)
            self.assertIs(session.status(name), before)

    def test_mixed_toggles(self):
        session = BatchEditSession.open({"a", "b"})
        session.toggle("a")
        session.toggle("c")
        session.toggle("b")
        expected = {TagOperation.remove("a"), TagOperation.add("c"), TagOperation.remove("b")}
        operations = session.commit()
        self.assertEqual(len(operations), 3)
        self.assertEqual(set(operations), expected)

    def test_statuses_is_a_copy(self):
        session = BatchEditSession.open({"a"})
        snapshot = session.statuses()
        snapshot["a"] = TagStatus.REMOVE
        self.assertIs(session.status("a"), TagStatus.PRESENT)

    def test_invalid_new_name_ignored_with_warning(self):
        session = BatchEditSession.open({"a"})
        with self.assertLogs("tagedit.editor.session", level="WARNING"):
            self.assertIsNone(session.toggle("Not Valid"))
        self.assertEqual(session.statuses(), {"a": TagStatus.PRESENT})

    def test_invalid_new_name_strict(self):
        session = BatchEditSession.open({"a"}, validation="strict")
        with self.assertRaises(InvalidTagNameError) as ctx:
            session.toggle("Not Valid")
        self.assertEqual(ctx.exception.tag_name, "Not Valid")
        self.assertIn("a-z, 0-9", str(ctx.exception))

    def test_invalid_new_name_off(self):
        session = BatchEditSession.open(set(), validation="off")
        self.assertIs(session.toggle("Not Valid"), TagStatus.ADD)

    def test_catalog_names_skip_validation(self):
        session = BatchEditSession.open(set(), catalog={"Legacy"}, validation="strict")
        self.assertIs(session.toggle("Legacy"), TagStatus.ADD)

    def test_baseline_names_skip_validation(self):
        session = BatchEditSession.open({"Legacy Tag"}, validation="strict")
        self.assertIs(session.toggle("Legacy Tag"), TagStatus.REMOVE)

    def test_commit_closes(self):
        session = BatchEditSession.open({"a"})
        session.toggle("a")
        self.assertEqual(session.commit(), [TagOperation.remove("a")])
        self.assertFalse(session.is_open)
        with self.assertRaises(SessionClosedError):
            session.toggle("a")
        with self.assertRaises(SessionClosedError):
            session.statuses()
        with self.assertRaises(SessionClosedError):
            session.commit()

    def test_discard_closes_without_operations(self):
        session = BatchEditSession.open({"a"})
        session.toggle("a")
        session.toggle("z")
        self.assertIsNone(session.discard())
        self.assertFalse(session.is_open)
        with self.assertRaises(SessionClosedError):
            session.pending_operations()
        with self.assertRaises(SessionClosedError):
            session.discard()


if __name__ == "__main__":
    unittest.main()
