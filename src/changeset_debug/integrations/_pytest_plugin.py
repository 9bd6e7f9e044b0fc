"""pytest plugin for changeset-debug.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

import pytest

from changeset_debug.changes.change import Change
from changeset_debug.config import ChangesetDebugConfig
from changeset_debug.listeners import RecordingListener


@pytest.fixture
def changeset_recorder() -> RecordingListener:
    """Fixture that returns a fresh ``RecordingListener``.

    Function-scoped: every test starts with an empty recorder.  The recorder
    is not installed on the process-wide hook; pass it to ``ChangesetDebug``
    or to a ``DebugHook`` of your own.

    Usage in tests::

        def test_update(changeset_recorder):
            debug = ChangesetDebug(changeset_recorder)
            debug.on_changeset_applied(new, old, changes, "surface", 0)
            assert changeset_recorder.last.surface_id == "surface"
    """
    return RecordingListener()


@pytest.fixture(scope="session")
def replay_names() -> Callable[..., list[tuple[str, str]]]:
    """Fixture that replays changes and summarises every record.

    The returned callable takes the previous items (owned by ``"list"``) and
    the changes, replays them in strict mode and returns ``(status, name)``
    pairs, where status is one of ``unchanged``, ``inserted``, ``removed`` or
    ``updated``.

    Usage in tests::

        def test_delete(replay_names):
            changes = [Change(ChangeType.DELETE, index=1)]
            assert replay_names("ABC", changes) == [
                ("unchanged", "A"), ("removed", "B"), ("unchanged", "C"),
            ]
    """
    from changeset_debug.api import replay

    config = ChangesetDebugConfig(strict=True)

    def _replay(previous: Iterable[Any], changes: Iterable[Change]) -> list[tuple[str, str]]:
        records = replay([(item, "list") for item in previous], changes, config=config)
        summary = []
        for record in records:
            if record.inserted:
                status = "inserted"
            elif record.removed:
                status = "removed"
            elif record.updated:
                status = "updated"
            else:
                status = "unchanged"
            summary.append((status, record.name))
        return summary

    return _replay
