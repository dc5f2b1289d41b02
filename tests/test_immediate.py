import logging
import sys
import unittest
from pathlib import Path

# Ensure src/ is on sys.path so we can import the package without installation
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from tagedit.editor.immediate import ImmediateEditor  # noqa: E402
from tagedit.exceptions import InvalidTagNameError  # noqa: E402
from tagedit.resources.tags_types import TagOperation  # noqa: E402


logging.basicConfig(
    level=logging.WARNING,
    format="%(levelname)s:%(name)s:%(message)s",
    stream=sys.stdout,
    force=True,
)


class RecordingDispatcher:
    def __init__(self) -> None:
        self.calls: list[tuple[str, str, list[TagOperation]]] = []

    def apply_tag_operations(self, resource_type, key, operations):
        self.calls.append((resource_type, key, list(operations)))
        return True


class ScriptedDispatcher(RecordingDispatcher):
    """Returns the queued results in order, then True."""

    def __init__(self, *results) -> None:
        super().__init__()
        self.results = list(results)

    def apply_tag_operations(self, resource_type, key, operations):
        super().apply_tag_operations(resource_type, key, operations)
        return self.results.pop(0) if self.results else True


class ImmediateEditorTests(unittest.TestCase):
    def setUp(self) -> None:
        self.dispatcher = RecordingDispatcher()
        self.editor = ImmediateEditor(self.dispatcher, "table", "k", current={"finance"})

    def test_add_dispatches_single_operation(self):
        operation = self.editor.add("pii")
        self.assertEqual(operation, TagOperation.add("pii"))
        self.assertEqual(self.dispatcher.calls, [("table", "k", [TagOperation.add("pii")])])
        self.assertIn("pii", self.editor.current)

    def test_add_invalid_name_is_dropped(self):
        self.assertIsNone(self.editor.add("Invalid Name"))
        self.assertEqual(self.dispatcher.calls, [])

    def test_add_invalid_name_strict(self):
        self.editor.validation = "strict"
        with self.assertRaises(InvalidTagNameError) as ctx:
            self.editor.add("Invalid Name")
        self.assertIn("a-z, 0-9", str(ctx.exception))
        self.assertEqual(self.dispatcher.calls, [])

    def test_add_invalid_name_off(self):
        self.editor.validation = "off"
        self.assertEqual(self.editor.add("Invalid Name"), TagOperation.add("Invalid Name"))
        self.assertEqual(len(self.dispatcher.calls), 1)

    def test_add_existing_is_noop(self):
        self.assertIsNone(self.editor.add("finance"))
        self.assertEqual(self.dispatcher.calls, [])

    def test_add_twice_dispatches_once(self):
        self.editor.add("pii")
        self.editor.add("pii")
        self.assertEqual(len(self.dispatcher.calls), 1)

    def test_remove_always_dispatches(self):
        for name in ("finance", "anything", "Not Valid", ""):
            self.assertEqual(self.editor.remove(name), TagOperation.remove(name))
        self.assertEqual(len(self.dispatcher.calls), 4)
        for _type, _key, operations in self.dispatcher.calls:
            self.assertEqual(len(operations), 1)
        self.assertNotIn("finance", self.editor.current)

    def test_calls_are_not_batched(self):
        self.editor.add("a")
        self.editor.remove("finance")
        self.assertEqual(
            [ops for _t, _k, ops in self.dispatcher.calls],
            [[TagOperation.add("a")], [TagOperation.remove("finance")]],
        )


    def test_failed_add_can_be_sent_again(self):
        dispatcher = ScriptedDispatcher(False)
        editor = ImmediateEditor(dispatcher, "table", "k")
        self.assertEqual(editor.add("pii"), TagOperation.add("pii"))
        self.assertNotIn("pii", editor.current)
        self.assertEqual(editor.add("pii"), TagOperation.add("pii"))
        self.assertEqual(len(dispatcher.calls), 2)
        self.assertIn("pii", editor.current)

    def test_failed_remove_keeps_tag_known(self):
        dispatcher = ScriptedDispatcher(False)
        editor = ImmediateEditor(dispatcher, "table", "k", current={"pii"})
        editor.remove("pii")
        self.assertIn("pii", editor.current)
        self.assertIsNone(editor.add("pii"))
        self.assertEqual(len(dispatcher.calls), 1)


if __name__ == "__main__":
    unittest.main()
