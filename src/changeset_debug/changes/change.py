"""Change, RenderInfo and ChangesInfo: the changeset produced by one update.

A changeset is the ordered list of list-edit operations the framework's
diffing produced.  The index of every change addresses the list as it stands
after all earlier changes have been applied.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

__all__ = ["Change", "ChangeType", "ChangesInfo", "RenderInfo"]


class ChangeType(StrEnum):
    """Kinds of list-edit operation.

    Values are the upper-case names shown in the changeset details panel.
    MOVE is reported there but is not replayed.
    """

    INSERT = "INSERT"
    INSERT_RANGE = "INSERT_RANGE"
    DELETE = "DELETE"
    DELETE_RANGE = "DELETE_RANGE"
    MOVE = "MOVE"
    UPDATE = "UPDATE"
    UPDATE_RANGE = "UPDATE_RANGE"

    @property
    def is_insert(self) -> bool:
        return self in (ChangeType.INSERT, ChangeType.INSERT_RANGE)

    @property
    def is_delete(self) -> bool:
        return self in (ChangeType.DELETE, ChangeType.DELETE_RANGE)

    @property
    def is_update(self) -> bool:
        return self in (ChangeType.UPDATE, ChangeType.UPDATE_RANGE)


@dataclass(frozen=True, slots=True)
class RenderInfo:
    """Render information attached to an inserted or updated item.

    Attributes:
        name: Display name of the rendered component.
        debug_info: Free-form debug values; the owning section's global key is
            stored under ``"section_global_key"``.
    """

    name: str
    debug_info: dict[str, Any] = field(default_factory=dict)

    def get_debug_info(self, key: str) -> Any:
        return self.debug_info.get(key)


@dataclass(frozen=True, slots=True)
class Change:
    """One list-edit operation.

    Attributes:
        type: The operation.
        index: Logical index the operation applies to.
        to_index: Destination index for MOVE; -1 otherwise.
        count: Number of items for range operations; 1 otherwise.
        render_infos: One render info per inserted/updated item.
        prev_data: Items before the change, if the framework reported them.
        next_data: Items after the change, if the framework reported them.
    """

    type: ChangeType
    index: int
    to_index: int = -1
    count: int = 1
    render_infos: list[RenderInfo] = field(default_factory=list)
    prev_data: list[Any] | None = None
    next_data: list[Any] | None = None

    @property
    def render_info(self) -> RenderInfo | None:
        """The render info of a single-item change, or None."""
        return self.render_infos[0] if self.render_infos else None

    def render_info_names(self) -> list[str]:
        return [info.name for info in self.render_infos]


@dataclass(slots=True)
class ChangesInfo:
    """Ordered collection of the changes applied by one update."""

    changes: list[Change] = field(default_factory=list)

    @property
    def all_changes(self) -> list[Change]:
        return self.changes

    def __len__(self) -> int:
        return len(self.changes)

    def __iter__(self) -> Iterator[Change]:
        return iter(self.changes)
