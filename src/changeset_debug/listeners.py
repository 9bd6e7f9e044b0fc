"""Ready-made changeset listeners.

- ``RecordingListener`` keeps every snapshot in memory (tests, REPL sessions).
- ``JsonLinesListener`` writes one JSON document per snapshot to a text
  stream, producing an export that can be loaded back line by line.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from changeset_debug.records import ChangesetSnapshot

__all__ = ["JsonLinesListener", "RecordingListener"]


class RecordingListener:
    """Collects snapshots in arrival order.

    Satisfies the ``ChangesetListener`` Protocol structurally.  Appends are
    serialized, so updates reported from several threads are all kept.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._snapshots: list[ChangesetSnapshot] = []

    def on_changeset_applied(self, snapshot: ChangesetSnapshot) -> None:
        with self._lock:
            self._snapshots.append(snapshot)

    @property
    def snapshots(self) -> list[ChangesetSnapshot]:
        """A copy of the snapshots received so far."""
        with self._lock:
            return list(self._snapshots)

    @property
    def last(self) -> ChangesetSnapshot | None:
        with self._lock:
            return self._snapshots[-1] if self._snapshots else None

    def clear(self) -> None:
        with self._lock:
            self._snapshots.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._snapshots)


class JsonLinesListener:
    """Writes every snapshot as one line of JSON to ``stream``.

    The stream is flushed after each line and is never closed by the
    listener.
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._lock = threading.Lock()

    def on_changeset_applied(self, snapshot: ChangesetSnapshot) -> None:
        line = snapshot.to_json()
        with self._lock:
            self._stream.write(line + "\n")
            self._stream.flush()
