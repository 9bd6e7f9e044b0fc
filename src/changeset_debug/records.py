"""Output records for one observed update.

This module provides the serializable types handed to a listener:
``SectionRecord`` and ``DataRecord`` rows of the tree view, the per-change
details of the side panel, and the ``ChangesetSnapshot`` bundling them.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from changeset_debug.changes.change import ChangesInfo, ChangeType

__all__ = [
    "ChangesetSnapshot",
    "DataRecord",
    "SectionRecord",
    "changeset_details",
]


@dataclass(frozen=True, slots=True)
class SectionRecord:
    """One section of the tree view.

    Attributes:
        identifier: Global key of the section.
        name: Simple name of the section.
        parent: Global key of the parent section, or the root sentinel.
        is_dirty: True when the section was re-rendered by this update.
        removed: True for sections present only in the old tree.
        did_trigger_state_update: Always False; state-update attribution per
            section is not tracked.
    """

    identifier: str
    name: str
    parent: str | None
    is_dirty: bool = False
    removed: bool = False
    did_trigger_state_update: bool = False

    @property
    def is_reused(self) -> bool:
        return not self.is_dirty

    def to_dict(self) -> dict[str, Any]:
        if self.removed:
            return {
                "identifier": self.identifier,
                "name": self.name,
                "parent": self.parent,
                "removed": True,
            }
        return {
            "identifier": self.identifier,
            "name": self.name,
            "parent": self.parent,
            "isDirty": self.is_dirty,
            "isReused": self.is_reused,
            "didTriggerStateUpdate": self.did_trigger_state_update,
        }


@dataclass(frozen=True, slots=True)
class DataRecord:
    """One data item of the tree view, annotated with what happened to it.

    ``operation`` is the last change applied to the item, or None when the
    item was left untouched.  Range operations map to the same flag as their
    single-item counterpart.
    """

    identifier: str
    name: str
    parent: str | None
    operation: ChangeType | None = None

    @property
    def unchanged(self) -> bool:
        return self.operation is None

    @property
    def inserted(self) -> bool:
        return self.operation is not None and self.operation.is_insert

    @property
    def removed(self) -> bool:
        return self.operation is not None and self.operation.is_delete

    @property
    def updated(self) -> bool:
        return self.operation is not None and self.operation.is_update

    def to_dict(self) -> dict[str, Any]:
        return {
            "identifier": self.identifier,
            "name": self.name,
            "parent": self.parent,
            "unchanged": self.unchanged,
            "inserted": self.inserted,
            "removed": self.removed,
            "updated": self.updated,
        }


def _data_names(data: list[Any] | None) -> list[str]:
    if data is None:
        return []
    return [str(item) for item in data]


def changeset_details(changes_info: ChangesInfo, global_key: str) -> dict[str, Any]:
    """Build the side-panel details for the changes of one section.

    Returns:
        ``{global_key: {"changesets": {"0": {...}, "1": {...}}}}`` where each
        entry holds ``type``, ``index``, ``toIndex`` (MOVE only), ``count``,
        ``render_infos``, ``prev_data`` and ``next_data``.
    """
    changesets: dict[str, Any] = {}
    for i, change in enumerate(changes_info.all_changes):
        detail: dict[str, Any] = {"type": str(change.type), "index": change.index}
        if change.to_index >= 0:
            detail["toIndex"] = change.to_index
        detail["count"] = change.count
        detail["render_infos"] = change.render_info_names()
        detail["prev_data"] = _data_names(change.prev_data)
        detail["next_data"] = _data_names(change.next_data)
        changesets[str(i)] = detail
    return {global_key: {"changesets": changesets}}


@dataclass(frozen=True, slots=True)
class ChangesetSnapshot:
    """Everything a listener receives for one applied changeset.

    Attributes:
        name: Human-readable cause, ``"<attribution> <extra>"``.
        is_async: Whether the update was computed asynchronously.
        surface_id: Identifier of the surface that was updated.
        id: Globally unique update id, ``"<counter>-<surface_id>"``.
        tree: Section records followed by data records.
        changeset_data: Side-panel details keyed by section global key.
    """

    name: str
    is_async: bool
    surface_id: str
    id: str
    tree: list[SectionRecord | DataRecord] = field(default_factory=list)
    changeset_data: dict[str, Any] = field(default_factory=dict)

    @property
    def section_records(self) -> list[SectionRecord]:
        return [r for r in self.tree if isinstance(r, SectionRecord)]

    @property
    def data_records(self) -> list[DataRecord]:
        return [r for r in self.tree if isinstance(r, DataRecord)]

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "isAsync": self.is_async,
            "surfaceId": self.surface_id,
            "id": self.id,
            "tree": [record.to_dict() for record in self.tree],
            "changesetData": self.changeset_data,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), default=str)
