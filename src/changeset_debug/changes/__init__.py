"""changes subpackage — changeset types and the changeset replayer.

Import from this module (not from sub-modules directly) to stay on the
stable public interface.
"""

from __future__ import annotations

from changeset_debug.changes.change import Change, ChangesInfo, ChangeType, RenderInfo
from changeset_debug.changes.replay import (
    ChangesetReplayer,
    DataChangeInfo,
    ReplayResult,
    collect_previous_data,
    resolve_position,
)

__all__ = [
    "Change",
    "ChangeType",
    "ChangesInfo",
    "ChangesetReplayer",
    "DataChangeInfo",
    "RenderInfo",
    "ReplayResult",
    "collect_previous_data",
    "resolve_position",
]
