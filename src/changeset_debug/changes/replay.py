"""ChangesetReplayer: replays a changeset against the previous data list.

The framework reports changes by logical index: each index addresses the
list as it stands after every earlier change.  To show what happened to
every item, the replayer keeps deleted items in its working list and only
*tags* them, so the working list always holds every item that was ever
live.  Logical indices are mapped to physical positions by counting live
(non-deleted) entries only; see ``resolve_position``.

Replay semantics per change type, where ``pos`` is the resolved position:

- INSERT:       one new entry spliced in at ``pos``.
- INSERT_RANGE: ``count`` new entries spliced in at ``pos + i``, keeping
                their supplied order.
- DELETE:       the entry at ``pos`` is tagged deleted.
- DELETE_RANGE: the physical slice ``pos .. pos + count - 1`` is tagged.
- UPDATE:       the entry at ``pos`` is tagged updated.
- UPDATE_RANGE: each logical index in ``[index, index + count)`` is resolved
                on its own and tagged updated.
- MOVE and unknown types are skipped.

A change that addresses a position the working list does not have is a
disagreement between the changeset and the observed tree.  It never aborts
the replay: whatever can be produced is produced and the problem is
reported as a ``ReplayInconsistencyError`` diagnostic.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

from changeset_debug.changes.change import Change, ChangesInfo, ChangeType
from changeset_debug.config import ChangesetDebugConfig
from changeset_debug.errors import MissingDiffDataError, ReplayInconsistencyError
from changeset_debug.records import DataRecord
from changeset_debug.tree.nodes import Section

__all__ = [
    "ChangesetReplayer",
    "DataChangeInfo",
    "ReplayResult",
    "collect_previous_data",
    "resolve_position",
]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DataChangeInfo:
    """A data item in the working list.

    Attributes:
        model: The data item, or None when the framework did not report it.
        section_key: Global key of the section that owns the item.
        operation: Last change applied to the item; None means unchanged.
    """

    model: Any = None
    section_key: str | None = None
    operation: ChangeType | None = None

    @property
    def is_live(self) -> bool:
        return self.operation is None or not self.operation.is_delete


@dataclass(frozen=True, slots=True)
class ReplayResult:
    """Records produced by a replay plus any inconsistencies met on the way."""

    records: list[DataRecord]
    diagnostics: list[ReplayInconsistencyError] = field(default_factory=list)


def resolve_position(entries: Sequence[DataChangeInfo], logical_index: int) -> int:
    """Map a logical index to a physical position in the working list.

    Only live entries count.  The position of the ``k``-th live entry is
    returned when it exists; otherwise the position just after the last live
    entry (0 when there is none), which is where an append lands.  Negative
    indices resolve to 0.
    """
    if logical_index < 0:
        return 0
    live = -1
    append_at = 0
    for i, entry in enumerate(entries):
        if entry.is_live:
            live += 1
            if live == logical_index:
                return i
            append_at = i + 1
    return append_at


def _live_count(entries: Iterable[DataChangeInfo]) -> int:
    return sum(1 for entry in entries if entry.is_live)


def collect_previous_data(previous_root: Section | None) -> list[DataChangeInfo]:
    """Flatten the data items of every diffing section of the previous tree.

    Sections are visited in pre-order.  A diffing section contributes its
    items (owned by its global key) and is not descended into.  A diffing
    section whose data cannot be read contributes nothing.
    """
    data: list[DataChangeInfo] = []
    _collect_recursive(previous_root, data)
    return data


def _collect_recursive(section: Section | None, data: list[DataChangeInfo]) -> None:
    if section is None:
        return

    if section.is_diff_section:
        try:
            items = section.provide_diff_items()
        except MissingDiffDataError as exc:
            logger.warning("Treating section as empty: %s", exc)
            return
        data.extend(DataChangeInfo(model=item, section_key=section.global_key) for item in items)
        return

    for child in section.children:
        _collect_recursive(child, data)


class ChangesetReplayer:
    """Replays changes against a positional model of the previous data list.

    Example::

        from changeset_debug.changes import Change, ChangesInfo, ChangeType
        from changeset_debug.changes.replay import ChangesetReplayer, DataChangeInfo

        previous = [DataChangeInfo(model=m, section_key="list") for m in "ABC"]
        changes = ChangesInfo([Change(ChangeType.DELETE, index=1)])
        result = ChangesetReplayer().replay(previous, changes)
        [r.name for r in result.records if r.removed]   # ["B"]
    """

    def __init__(self, config: ChangesetDebugConfig | None = None) -> None:
        self._config = config if config is not None else ChangesetDebugConfig()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def replay(
        self,
        previous: Iterable[DataChangeInfo],
        changes: ChangesInfo | Iterable[Change],
    ) -> ReplayResult:
        """Apply ``changes`` in order and annotate every item ever live.

        ``previous`` is copied; the caller's entries are not modified.

        Returns:
            A ``ReplayResult`` with one record per working-list entry, in
            list order, deleted entries included.

        Raises:
            ReplayInconsistencyError: Only when the config is strict.
        """
        entries = [
            DataChangeInfo(model=e.model, section_key=e.section_key, operation=e.operation)
            for e in previous
        ]
        if isinstance(changes, ChangesInfo):
            changes = changes.all_changes
        diagnostics: list[ReplayInconsistencyError] = []

        for change_index, change in enumerate(changes):
            self._apply(entries, change_index, change, diagnostics)

        return ReplayResult(records=[self._to_record(e) for e in entries], diagnostics=diagnostics)

    # ------------------------------------------------------------------
    # Per-change application
    # ------------------------------------------------------------------

    def _apply(
        self,
        entries: list[DataChangeInfo],
        change_index: int,
        change: Change,
        diagnostics: list[ReplayInconsistencyError],
    ) -> None:
        index = change.index
        match change.type:
            case ChangeType.INSERT:
                self._check_insert(entries, change_index, change, diagnostics)
                info = change.render_info
                entries.insert(
                    resolve_position(entries, index),
                    DataChangeInfo(
                        model=change.next_data[0] if change.next_data else None,
                        section_key=self._owner(info),
                        operation=ChangeType.INSERT,
                    ),
                )
            case ChangeType.INSERT_RANGE:
                self._check_insert(entries, change_index, change, diagnostics)
                position = resolve_position(entries, index)
                for item in range(change.count):
                    if item >= len(change.render_infos):
                        self._report(
                            diagnostics, change_index, change, index, position + item,
                            len(entries), f"no render info for item {item}",
                        )
                        info = None
                    else:
                        info = change.render_infos[item]
                    entries.insert(
                        position + item,
                        DataChangeInfo(
                            model=self._nth(change.next_data, item),
                            section_key=self._owner(info),
                            operation=ChangeType.INSERT_RANGE,
                        ),
                    )
            case ChangeType.DELETE | ChangeType.UPDATE:
                position = self._live_position(entries, change_index, change, index, diagnostics)
                if position is not None:
                    entries[position].operation = change.type
            case ChangeType.DELETE_RANGE:
                position = self._live_position(entries, change_index, change, index, diagnostics)
                if position is None:
                    return
                end = position + change.count
                if end > len(entries):
                    self._report(
                        diagnostics, change_index, change, index, position, len(entries),
                        f"range of {change.count} runs past the end of the list",
                    )
                    end = len(entries)
                for entry in entries[position:end]:
                    entry.operation = ChangeType.DELETE_RANGE
            case ChangeType.UPDATE_RANGE:
                for update_index in range(index, index + change.count):
                    position = self._live_position(
                        entries, change_index, change, update_index, diagnostics
                    )
                    if position is not None:
                        entries[position].operation = ChangeType.UPDATE_RANGE
            case _:
                logger.debug("Skipping change #%d of type %s", change_index, change.type)

    def _live_position(
        self,
        entries: list[DataChangeInfo],
        change_index: int,
        change: Change,
        logical_index: int,
        diagnostics: list[ReplayInconsistencyError],
    ) -> int | None:
        """Resolve an index that must address an existing live entry."""
        position = resolve_position(entries, logical_index)
        if 0 <= logical_index < _live_count(entries):
            return position
        self._report(
            diagnostics, change_index, change, logical_index, position, len(entries),
            "no live item at that index",
        )
        return None

    def _check_insert(
        self,
        entries: list[DataChangeInfo],
        change_index: int,
        change: Change,
        diagnostics: list[ReplayInconsistencyError],
    ) -> None:
        live = _live_count(entries)
        if not 0 <= change.index <= live:
            self._report(
                diagnostics, change_index, change, change.index,
                resolve_position(entries, change.index), len(entries),
                f"insert index outside 0..{live}",
            )

    def _report(
        self,
        diagnostics: list[ReplayInconsistencyError],
        change_index: int,
        change: Change,
        logical_index: int,
        position: int,
        size: int,
        detail: str,
    ) -> None:
        error = ReplayInconsistencyError(
            change_index, str(change.type), logical_index, position, size, detail
        )
        if self._config.strict:
            raise error
        logger.warning("Inconsistent changeset: %s", error)
        diagnostics.append(error)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _owner(self, info: Any) -> str | None:
        if info is None:
            return None
        return info.get_debug_info(self._config.owner_debug_key)

    @staticmethod
    def _nth(data: list[Any] | None, n: int) -> Any:
        if data is None or n >= len(data):
            return None
        return data[n]

    def _to_record(self, entry: DataChangeInfo) -> DataRecord:
        name = self._config.not_available_name if entry.model is None else str(entry.model)
        return DataRecord(
            identifier=name, name=name, parent=entry.section_key, operation=entry.operation
        )
