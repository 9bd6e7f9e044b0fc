"""Shared fixtures for the test-suite."""

from __future__ import annotations

import pytest

# Plugin fixtures are re-exported so the suite also runs from a source checkout
# where the pytest11 entry point is not registered.
from changeset_debug.integrations._pytest_plugin import (  # noqa: F401
    changeset_recorder,
    replay_names,
)
from changeset_debug.tree.nodes import Section, SectionKind


@pytest.fixture
def old_tree() -> Section:
    """root -> [header (single "H"), list (data A, B, C)]."""
    return Section(
        "root",
        "RootSection",
        children=[
            Section(
                "header",
                "SingleComponentSection",
                kind=SectionKind.SINGLE_COMPONENT,
                component="H",
            ),
            Section("list", "DataDiffSection", kind=SectionKind.DATA_DIFF, data=["A", "B", "C"]),
        ],
    )
