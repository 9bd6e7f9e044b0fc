"""Performance benchmarks for the tree walker and changeset replayer.

Run with: pytest tests/benchmarks/ --benchmark-only -v
Skip during normal test runs: pytest --benchmark-disable
"""

from __future__ import annotations

from typing import Any

import pytest

pytest.importorskip("pytest_benchmark")

from changeset_debug.changes.change import Change, ChangeType, RenderInfo  # noqa: E402
from changeset_debug.changes.replay import ChangesetReplayer, DataChangeInfo  # noqa: E402
from changeset_debug.tree.nodes import Section  # noqa: E402
from changeset_debug.tree.walker import SectionTreeWalker  # noqa: E402


def wide_tree(groups: int, per_group: int) -> Section:
    return Section(
        "root",
        "Root",
        children=[
            Section(
                f"g{g}",
                "Group",
                children=[Section(f"g{g}/s{s}", "Leaf") for s in range(per_group)],
            )
            for g in range(groups)
        ],
    )


class TestWalkerPerformance:
    """Benchmarks for SectionTreeWalker."""

    def test_walk_2000_sections(self, benchmark: Any) -> None:
        """Walk 2000 sections with one removal per group."""
        old = wide_tree(40, 50)
        new = wide_tree(40, 49)
        records = benchmark(SectionTreeWalker().walk, new, old)
        assert sum(1 for r in records if r.removed) == 40


class TestReplayPerformance:
    """Benchmarks for ChangesetReplayer."""

    def test_replay_500_changes(self, benchmark: Any) -> None:
        """Replay 500 interleaved deletes and inserts over 1000 items."""
        previous = [DataChangeInfo(model=i, section_key="list") for i in range(1000)]
        info = RenderInfo("Row", {"section_global_key": "list"})
        changes = []
        for i in range(250):
            changes.append(Change(ChangeType.DELETE, index=i))
            changes.append(
                Change(ChangeType.INSERT, index=i, next_data=[f"n{i}"], render_infos=[info])
            )
        result = benchmark(ChangesetReplayer().replay, previous, changes)
        assert len(result.records) == 1250
        assert result.diagnostics == []
