"""CLI demo that batch-edits the tags of one table.

Run with the virtual environment activated::

    python examples/demo_tag_editor.py "hive://gold.core/orders" pii finance

Each tag name given on the command line is toggled: attached tags are
removed, other tags are added. Set ``CATALOG_HOST`` / ``CATALOG_PORT`` if
the catalog is not available at the defaults (``localhost:5000``).
"""

import logging
import os
import sys

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
SRC_DIR = os.path.join(PROJECT_ROOT, "src")
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from tagedit import Catalog, TagEditError

logging.basicConfig(level=logging.INFO)


def main(argv: list[str]) -> int:
    if len(argv) < 2:
        print(__doc__)
        return 2

    key, names = argv[0], argv[1:]
    catalog = Catalog()
    editor = catalog.editor("table", key)

    print(f"Current tags on {key}: {', '.join(sorted(editor.tags)) or '(none)'}")
    try:
        session = editor.open_batch()
    except TagEditError as exc:
        print(exc)
        return 1

    for name in names:
        status = session.toggle(name)
        print(f"  {name}: {status.value if status else 'not staged'}")

    operations = editor.commit()
    if not operations:
        print("Nothing to update.")
        return 0
    if not editor.last_commit_ok:
        print("Update failed; see the log for the rejected request.")
        return 1
    for operation in operations:
        print(f"Sent {operation.method.name} {operation.tag_name}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
