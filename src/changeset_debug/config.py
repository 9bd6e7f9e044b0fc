"""ChangesetDebugConfig: immutable settings for snapshot construction."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["ChangesetDebugConfig"]


@dataclass(frozen=True, slots=True)
class ChangesetDebugConfig:
    """Immutable configuration for the tree walker and changeset replayer.

    Attributes:
        not_available_name: Name emitted for a data record whose item is None.
        owner_debug_key: Debug-info key under which a render info carries the
            global key of the section that owns an inserted item.
        root_parent_key: Parent value emitted for parentless sections, both
            for the new root and for removed old roots.
        strict: When True, replay inconsistencies raise
            ``ReplayInconsistencyError`` instead of being recorded as
            diagnostics.  Meant for tests; leave False when observing a live
            pipeline.
    """

    not_available_name: str = "N/A"
    owner_debug_key: str = "section_global_key"
    root_parent_key: str = ""
    strict: bool = False

    def __post_init__(self) -> None:
        if not self.not_available_name:
            msg = "not_available_name must be a non-empty string"
            raise ValueError(msg)
        if not self.owner_debug_key:
            msg = "owner_debug_key must be a non-empty string"
            raise ValueError(msg)
