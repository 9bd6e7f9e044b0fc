"""Tests for attribution codes."""

from __future__ import annotations

import pytest

from changeset_debug.attribution import ApplyNewChangeSet, is_event_async, source_to_string


class TestSourceToString:
    """Tests for source_to_string."""

    @pytest.mark.parametrize(
        ("code", "name"),
        [
            (ApplyNewChangeSet.NONE, "none"),
            (ApplyNewChangeSet.SET_ROOT, "setRoot"),
            (ApplyNewChangeSet.SET_ROOT_ASYNC, "setRootAsync"),
            (ApplyNewChangeSet.UPDATE_STATE, "updateState"),
            (ApplyNewChangeSet.UPDATE_STATE_ASYNC, "updateStateAsync"),
        ],
    )
    def test_known_codes(self, code: ApplyNewChangeSet, name: str) -> None:
        """Every known code maps to its display name."""
        assert source_to_string(code) == name

    def test_plain_ints_are_accepted(self) -> None:
        """Raw int codes work as well as enum members."""
        assert source_to_string(2) == "updateState"

    def test_unknown_code(self) -> None:
        """Unknown codes are shown with their value."""
        assert source_to_string(42) == "unknown(42)"


class TestIsEventAsync:
    """Tests for is_event_async."""

    def test_async_codes(self) -> None:
        """The two async codes are async."""
        assert is_event_async(ApplyNewChangeSet.SET_ROOT_ASYNC)
        assert is_event_async(ApplyNewChangeSet.UPDATE_STATE_ASYNC)

    @pytest.mark.parametrize("code", [-1, 0, 2, 42])
    def test_other_codes_are_sync(self, code: int) -> None:
        """Every other code, known or not, is synchronous."""
        assert not is_event_async(code)
