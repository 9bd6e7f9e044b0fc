"""changeset-debug - snapshots of section-tree updates for debugging tools."""

from __future__ import annotations

import logging

from changeset_debug.api import replay, walk
from changeset_debug.attribution import ApplyNewChangeSet
from changeset_debug.changes import (
    Change,
    ChangesetReplayer,
    ChangesInfo,
    ChangeType,
    RenderInfo,
)
from changeset_debug.config import ChangesetDebugConfig
from changeset_debug.debugger import ChangesetDebug, ChangesetListener
from changeset_debug.errors import (
    ChangesetDebugError,
    ListenerAlreadyInstalledError,
    MissingDiffDataError,
    ReplayInconsistencyError,
)
from changeset_debug.records import ChangesetSnapshot, DataRecord, SectionRecord
from changeset_debug.registration import DebugHook, dispatch, install
from changeset_debug.tree import Section, SectionKind, SectionTreeWalker

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__: str = "0.1.0"
__all__: list[str] = [
    "ApplyNewChangeSet",
    "Change",
    "ChangeType",
    "ChangesInfo",
    "ChangesetDebug",
    "ChangesetDebugConfig",
    "ChangesetDebugError",
    "ChangesetListener",
    "ChangesetReplayer",
    "ChangesetSnapshot",
    "DataRecord",
    "DebugHook",
    "ListenerAlreadyInstalledError",
    "MissingDiffDataError",
    "RenderInfo",
    "ReplayInconsistencyError",
    "Section",
    "SectionKind",
    "SectionRecord",
    "SectionTreeWalker",
    "dispatch",
    "install",
    "replay",
    "walk",
]
