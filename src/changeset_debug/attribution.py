"""Attribution codes describing what triggered a changeset."""

from __future__ import annotations

from enum import IntEnum

__all__ = ["ApplyNewChangeSet", "is_event_async", "source_to_string"]


class ApplyNewChangeSet(IntEnum):
    NONE = -1
    SET_ROOT = 0
    SET_ROOT_ASYNC = 1
    UPDATE_STATE = 2
    UPDATE_STATE_ASYNC = 3


_SOURCE_NAMES: dict[int, str] = {
    ApplyNewChangeSet.NONE: "none",
    ApplyNewChangeSet.SET_ROOT: "setRoot",
    ApplyNewChangeSet.SET_ROOT_ASYNC: "setRootAsync",
    ApplyNewChangeSet.UPDATE_STATE: "updateState",
    ApplyNewChangeSet.UPDATE_STATE_ASYNC: "updateStateAsync",
}


def source_to_string(attribution: int) -> str:
    """Return the display name of an attribution code.

    Unknown codes render as ``"unknown(<code>)"`` rather than raising.
    """
    return _SOURCE_NAMES.get(attribution, f"unknown({attribution})")


def is_event_async(attribution: int) -> bool:
    return attribution in (ApplyNewChangeSet.SET_ROOT_ASYNC, ApplyNewChangeSet.UPDATE_STATE_ASYNC)
