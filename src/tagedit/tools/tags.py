"""Tag helper tools."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Iterable, Sequence

from tqdm import tqdm

from tagedit.resources._common_types import ResourceType
from tagedit.resources.tags import Tags
from tagedit.resources.tags_types import TagOperation
from tagedit.utils import unique_in_order

_logger = logging.getLogger(__name__)


def apply_to_resources(
    tags: Tags,
    resources: Iterable[tuple[ResourceType, str]],
    operations: Sequence[TagOperation],
    *,
    max_workers: int = 4,
    progress: bool = True,
) -> list[tuple[ResourceType, str]]:
    """Apply the same tag operations to many resources.

    Parameters
    ----------
    tags
        Tags resource used to send the updates.
    resources
        ``(resource_type, key)`` pairs to update.
    operations
        Operations applied to every resource, in order.
    max_workers
        Parallel requests; ``0`` applies resources one at a time.
    progress
        Show a ``tqdm`` progress bar.

    Returns
    -------
    list[tuple[str, str]]
        Resources whose update failed, in input order.
    """
    targets = unique_in_order(resources)
    operations = list(operations)
    if not targets or not operations:
        return []

    failed: set[tuple[ResourceType, str]] = set()

    if max_workers == 0:
        for target in tqdm(targets, desc="Tagging resources", unit=" resources", disable=not progress):
            if not tags.apply_tag_operations(*target, operations):
                failed.add(target)
        return [target for target in targets if target in failed]

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = {
            executor.submit(tags.apply_tag_operations, resource_type, key, operations): (resource_type, key)
            for resource_type, key in targets
        }
        with tqdm(total=len(futures), desc="Tagging resources (parallel)", unit=" resources", disable=not progress) as pbar:
            for future in as_completed(futures):
                target = futures[future]
                try:
                    if not future.result():
                        failed.add(target)
                except Exception as exc:  # noqa: BLE001 - one resource failing must not stop the rest
                    _logger.warning("Tagging %s %s failed: %s", target[0], target[1], exc)
                    failed.add(target)
                finally:
                    pbar.update(1)

    return [target for target in targets if target in failed]
