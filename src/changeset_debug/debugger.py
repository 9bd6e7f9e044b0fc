"""ChangesetDebug: bridge between the host's update pipeline and a listener.

For every applied changeset the bridge builds one ``ChangesetSnapshot``:

1. Side-panel details of the changeset, keyed by the new root's global key.
2. Section records from ``SectionTreeWalker`` (new tree, then removed).
3. Data records from ``ChangesetReplayer`` over the old tree's data items.
4. A unique update id, ``"<n>-<surface_id>"``.

The snapshot is handed to the listener synchronously on the calling thread.
The bridge observes only: nothing it does, including a failing listener,
ever propagates back into the host pipeline.
"""

from __future__ import annotations

import itertools
import logging
import threading
from collections.abc import Iterator
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from changeset_debug.attribution import is_event_async, source_to_string
from changeset_debug.changes.replay import ChangesetReplayer, collect_previous_data
from changeset_debug.config import ChangesetDebugConfig
from changeset_debug.records import (
    ChangesetSnapshot,
    DataRecord,
    SectionRecord,
    changeset_details,
)
from changeset_debug.tree.walker import SectionTreeWalker

if TYPE_CHECKING:
    from changeset_debug.changes.change import ChangesInfo
    from changeset_debug.tree.nodes import Section
    from changeset_debug.tree.walker import DirtyPredicate

__all__ = ["ChangesetDebug", "ChangesetListener"]

logger = logging.getLogger(__name__)

# Shared by every bridge in the process.  Guarded by a lock so that
# concurrent updates never receive the same number, GIL or not.
_changeset_ids: Iterator[int] = itertools.count(1)
_ids_lock = threading.Lock()


@runtime_checkable
class ChangesetListener(Protocol):
    """Sink receiving one snapshot per applied changeset."""

    def on_changeset_applied(self, snapshot: ChangesetSnapshot) -> None: ...


class ChangesetDebug:
    """Builds and dispatches a snapshot for every applied changeset.

    Args:
        listener: Receives the snapshots.
        config: Snapshot settings.  Defaults to ``ChangesetDebugConfig()``.
        is_dirty: Dirty predicate for the tree walker.  Defaults to
            ``default_is_dirty``.
        id_generator: Source of update numbers.  Defaults to the process-wide
            counter; pass your own iterator to get predictable ids.
    """

    def __init__(
        self,
        listener: ChangesetListener,
        config: ChangesetDebugConfig | None = None,
        is_dirty: DirtyPredicate | None = None,
        id_generator: Iterator[int] | None = None,
    ) -> None:
        self._listener = listener
        self._config = config if config is not None else ChangesetDebugConfig()
        self._walker = SectionTreeWalker(is_dirty=is_dirty, config=self._config)
        self._replayer = ChangesetReplayer(config=self._config)
        self._ids = id_generator if id_generator is not None else _changeset_ids

    @property
    def listener(self) -> ChangesetListener:
        return self._listener

    def on_changeset_applied(
        self,
        root: Section | None,
        old_root: Section | None,
        changes_info: ChangesInfo,
        surface_id: str,
        attribution: int,
        extra: str = "",
    ) -> ChangesetSnapshot | None:
        """Observe one applied changeset.

        Returns:
            The snapshot handed to the listener, or None when building or
            delivering it failed (the failure is logged).
        """
        try:
            snapshot = self.build_snapshot(
                root, old_root, changes_info, surface_id, attribution, extra
            )
            self._listener.on_changeset_applied(snapshot)
        except Exception:
            logger.exception("Failed to report changeset for surface %r", surface_id)
            return None
        return snapshot

    def build_snapshot(
        self,
        root: Section | None,
        old_root: Section | None,
        changes_info: ChangesInfo,
        surface_id: str,
        attribution: int,
        extra: str = "",
    ) -> ChangesetSnapshot:
        """Build the snapshot for one changeset without delivering it.

        Each call consumes one update id.
        """
        root_key = root.global_key if root is not None else self._config.root_parent_key
        details = changeset_details(changes_info, root_key)

        tree: list[SectionRecord | DataRecord] = list(self._walker.walk(root, old_root))
        result = self._replayer.replay(collect_previous_data(old_root), changes_info)
        tree.extend(result.records)

        with _ids_lock:
            number = next(self._ids)
        update_id = f"{number}-{surface_id}"
        logger.debug(
            "Changeset %s: %d change(s), %d record(s), %d diagnostic(s)",
            update_id,
            len(changes_info),
            len(tree),
            len(result.diagnostics),
        )
        return ChangesetSnapshot(
            name=f"{source_to_string(attribution)} {extra}",
            is_async=is_event_async(attribution),
            surface_id=surface_id,
            id=update_id,
            tree=tree,
            changeset_data=details,
        )
