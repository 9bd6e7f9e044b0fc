"""Public API functions for changeset-debug.

Each call creates a fresh walker or replayer, so no state is shared between
calls.  Use ``ChangesetDebug`` directly to observe a live update pipeline.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from changeset_debug.changes.replay import ChangesetReplayer, DataChangeInfo
from changeset_debug.config import ChangesetDebugConfig
from changeset_debug.tree.walker import SectionTreeWalker

if TYPE_CHECKING:
    from changeset_debug.changes.change import Change, ChangesInfo
    from changeset_debug.records import DataRecord, SectionRecord
    from changeset_debug.tree.nodes import Section
    from changeset_debug.tree.walker import DirtyPredicate

__all__ = ["replay", "walk"]


def walk(
    new_root: Section | None,
    old_root: Section | None,
    is_dirty: DirtyPredicate | None = None,
    config: ChangesetDebugConfig | None = None,
) -> list[SectionRecord]:
    """Return the section records of an update.

    Args:
        new_root: Root of the tree after the update.
        old_root: Root of the tree before the update.
        is_dirty: Dirty predicate.  Defaults to ``default_is_dirty``.
        config:   Snapshot settings.  Defaults to ``ChangesetDebugConfig()``.

    Returns:
        Records of the new tree in pre-order, followed by one ``removed``
        record per old section whose key is absent from the new tree.
    """
    return SectionTreeWalker(is_dirty=is_dirty, config=config).walk(new_root, old_root)


def replay(
    previous: Iterable[DataChangeInfo | tuple[object, str | None]],
    changes: ChangesInfo | Iterable[Change],
    config: ChangesetDebugConfig | None = None,
) -> list[DataRecord]:
    """Replay ``changes`` over ``previous`` and return one record per item.

    Args:
        previous: The previous data list, either as ``DataChangeInfo``
                  entries or as ``(item, owner_key)`` pairs.
        changes:  Changes in the order the framework applied them.
        config:   Snapshot settings.  Defaults to ``ChangesetDebugConfig()``.

    Returns:
        Records in working-list order, removed items included.  Use
        ``ChangesetReplayer`` to also get the diagnostics.
    """
    entries = [
        entry
        if isinstance(entry, DataChangeInfo)
        else DataChangeInfo(model=entry[0], section_key=entry[1])
        for entry in previous
    ]
    return ChangesetReplayer(config=config).replay(entries, changes).records
