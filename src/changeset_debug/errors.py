"""Exception hierarchy for changeset-debug.

Only ``ListenerAlreadyInstalledError`` ever reaches a caller in normal
operation.  The other errors are raised internally and then logged or
collected as diagnostics, because the debugger must never break the update
pipeline it observes.
"""

from __future__ import annotations

__all__ = [
    "ChangesetDebugError",
    "ListenerAlreadyInstalledError",
    "MissingDiffDataError",
    "ReplayInconsistencyError",
]


class ChangesetDebugError(Exception):
    """Base class for every error raised by changeset-debug."""


class MissingDiffDataError(ChangesetDebugError):
    """A diffing section does not carry the payload its kind requires."""

    def __init__(self, global_key: str, kind: str) -> None:
        self.global_key = global_key
        self.kind = kind
        super().__init__(f"Section {global_key!r} of kind {kind!r} has no diff data")


class ReplayInconsistencyError(ChangesetDebugError):
    """A change cannot be applied at the position it addresses.

    This means the changeset and the previous tree disagree, e.g. the
    framework diffed a different list than the one observed in the old tree.

    Attributes:
        change_index: Position of the offending change in the changeset.
        change_type:  Type of the offending change.
        logical_index: Logical (live-item) index the change addressed.
        position:     Physical position it resolved to.
        size:         Size of the working list at that moment.
    """

    def __init__(
        self,
        change_index: int,
        change_type: str,
        logical_index: int,
        position: int,
        size: int,
        detail: str = "",
    ) -> None:
        self.change_index = change_index
        self.change_type = change_type
        self.logical_index = logical_index
        self.position = position
        self.size = size
        msg = (
            f"change #{change_index} ({change_type}) at index {logical_index} "
            f"resolved to position {position} in a list of {size} item(s)"
        )
        if detail:
            msg = f"{msg}: {detail}"
        super().__init__(msg)


class ListenerAlreadyInstalledError(ChangesetDebugError):
    """A second, different listener was installed on a hook."""
