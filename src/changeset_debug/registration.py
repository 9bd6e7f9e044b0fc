"""DebugHook: the one place a host update pipeline reports changesets to.

The host calls ``dispatch`` after every applied changeset.  A debugger
installs itself once per process with ``install``; until then dispatching is
a no-op.  Installing the same listener again is harmless and returns the
existing bridge, but a different listener is rejected with
``ListenerAlreadyInstalledError`` so that two tools never silently fight
over the hook.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from changeset_debug.debugger import ChangesetDebug
from changeset_debug.errors import ListenerAlreadyInstalledError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from changeset_debug.changes.change import ChangesInfo
    from changeset_debug.config import ChangesetDebugConfig
    from changeset_debug.debugger import ChangesetListener
    from changeset_debug.records import ChangesetSnapshot
    from changeset_debug.tree.nodes import Section
    from changeset_debug.tree.walker import DirtyPredicate

__all__ = ["DebugHook", "default_hook", "dispatch", "install"]

logger = logging.getLogger(__name__)


class DebugHook:
    """Holds at most one ``ChangesetDebug`` for the lifetime of the hook."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._debug: ChangesetDebug | None = None

    @property
    def installed(self) -> ChangesetDebug | None:
        return self._debug

    def install(
        self,
        listener: ChangesetListener,
        config: ChangesetDebugConfig | None = None,
        is_dirty: DirtyPredicate | None = None,
        id_generator: Iterator[int] | None = None,
    ) -> ChangesetDebug:
        """Install ``listener`` as the sink of this hook.

        Returns:
            The installed bridge.  A repeated call with the same listener
            returns the existing bridge and ignores the other arguments.

        Raises:
            ListenerAlreadyInstalledError: If a different listener is installed.
        """
        with self._lock:
            if self._debug is not None:
                if self._debug.listener is listener:
                    return self._debug
                msg = f"A changeset listener is already installed: {self._debug.listener!r}"
                raise ListenerAlreadyInstalledError(msg)
            self._debug = ChangesetDebug(
                listener, config=config, is_dirty=is_dirty, id_generator=id_generator
            )
            logger.debug("Installed changeset listener %r", listener)
            return self._debug

    def dispatch(
        self,
        root: Section | None,
        old_root: Section | None,
        changes_info: ChangesInfo,
        surface_id: str,
        attribution: int,
        extra: str = "",
    ) -> ChangesetSnapshot | None:
        """Report an applied changeset; returns the snapshot, if one was delivered."""
        debug = self._debug
        if debug is None:
            return None
        return debug.on_changeset_applied(
            root, old_root, changes_info, surface_id, attribution, extra
        )


default_hook = DebugHook()


def install(
    listener: ChangesetListener,
    config: ChangesetDebugConfig | None = None,
    is_dirty: DirtyPredicate | None = None,
    id_generator: Iterator[int] | None = None,
) -> ChangesetDebug:
    """Install ``listener`` on the process-wide hook (see ``DebugHook.install``)."""
    return default_hook.install(
        listener, config=config, is_dirty=is_dirty, id_generator=id_generator
    )


def dispatch(
    root: Section | None,
    old_root: Section | None,
    changes_info: ChangesInfo,
    surface_id: str,
    attribution: int,
    extra: str = "",
) -> ChangesetSnapshot | None:
    """Report an applied changeset to the process-wide hook."""
    return default_hook.dispatch(root, old_root, changes_info, surface_id, attribution, extra)
