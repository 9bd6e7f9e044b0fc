"""Tests for ChangeType, RenderInfo, Change and ChangesInfo."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from changeset_debug.changes.change import Change, ChangesInfo, ChangeType, RenderInfo


class TestChangeType:
    """Tests for the ChangeType StrEnum."""

    def test_values_are_upper_case_names(self) -> None:
        """Serialized values are the member names, e.g. "INSERT_RANGE"."""
        for member in ChangeType:
            assert member == member.name

    def test_range_types_share_flags_with_singular(self) -> None:
        """Range types answer the same flag as their singular type."""
        assert ChangeType.INSERT.is_insert and ChangeType.INSERT_RANGE.is_insert
        assert ChangeType.DELETE.is_delete and ChangeType.DELETE_RANGE.is_delete
        assert ChangeType.UPDATE.is_update and ChangeType.UPDATE_RANGE.is_update

    def test_move_has_no_flag(self) -> None:
        """MOVE is neither insert, delete nor update."""
        move = ChangeType.MOVE
        assert not (move.is_insert or move.is_delete or move.is_update)


class TestRenderInfo:
    """Tests for RenderInfo."""

    def test_debug_info_lookup(self) -> None:
        """get_debug_info returns the stored value or None."""
        info = RenderInfo("Row", {"section_global_key": "list"})
        assert info.get_debug_info("section_global_key") == "list"
        assert info.get_debug_info("missing") is None


class TestChange:
    """Tests for the Change dataclass."""

    def test_defaults(self) -> None:
        """Optional fields default to no target, a count of one and no data."""
        change = Change(ChangeType.DELETE, index=3)
        assert change.to_index == -1
        assert change.count == 1
        assert change.render_infos == []
        assert change.prev_data is None
        assert change.next_data is None
        assert change.render_info is None

    def test_render_info_is_first(self) -> None:
        """render_info is the first render info; names cover all of them."""
        change = Change(
            ChangeType.INSERT_RANGE,
            index=0,
            count=2,
            render_infos=[RenderInfo("Row1"), RenderInfo("Row2")],
        )
        assert change.render_info == RenderInfo("Row1")
        assert change.render_info_names() == ["Row1", "Row2"]

    def test_frozen(self) -> None:
        """Changes are immutable."""
        change = Change(ChangeType.UPDATE, index=0)
        with pytest.raises(FrozenInstanceError):
            change.index = 1  # type: ignore[misc]


class TestChangesInfo:
    """Tests for ChangesInfo."""

    def test_iteration_and_length(self) -> None:
        """ChangesInfo iterates its changes in order and reports their count."""
        changes = [Change(ChangeType.DELETE, index=0), Change(ChangeType.UPDATE, index=1)]
        info = ChangesInfo(changes)
        assert len(info) == 2
        assert list(info) == changes
        assert info.all_changes is changes

    def test_empty(self) -> None:
        """A default ChangesInfo holds no changes."""
        assert len(ChangesInfo()) == 0
