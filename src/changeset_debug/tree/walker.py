"""SectionTreeWalker: classifies every section of an update as dirty, reused or removed.

The new tree is walked in pre-order.  Each section is paired with the old
section carrying the same global key, looked up in an index built once per
walk, and classified through a dirty predicate.  Old sections whose key is
absent from the new tree are then emitted as removed, in old-tree order.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from changeset_debug.config import ChangesetDebugConfig
from changeset_debug.records import SectionRecord
from changeset_debug.tree.nodes import Section, index_by_key, iter_preorder

__all__ = ["DirtyPredicate", "SectionTreeWalker", "default_is_dirty"]


@runtime_checkable
class DirtyPredicate(Protocol):
    """Decides whether a section present in both trees was re-rendered.

    Sections without an old counterpart are always dirty and never reach
    the predicate.
    """

    def __call__(self, old: Section, new: Section) -> bool: ...


def default_is_dirty(old: Section, new: Section) -> bool:
    """Sections whose props changed are dirty."""
    return old.props != new.props


class SectionTreeWalker:
    """Produces the section records of one update.

    Example::

        from changeset_debug.tree import Section, SectionTreeWalker

        old = Section("root", "Root", children=[Section("a", "A"), Section("b", "B")])
        new = Section("root", "Root", children=[Section("a", "A")])
        records = SectionTreeWalker().walk(new, old)
        [(r.identifier, r.removed) for r in records]
        # [("root", False), ("a", False), ("b", True)]
    """

    def __init__(
        self,
        is_dirty: DirtyPredicate | None = None,
        config: ChangesetDebugConfig | None = None,
    ) -> None:
        self._is_dirty = is_dirty if is_dirty is not None else default_is_dirty
        self._config = config if config is not None else ChangesetDebugConfig()

    def walk(self, new_root: Section | None, old_root: Section | None) -> list[SectionRecord]:
        """Return records for the new tree followed by records for removed sections.

        Args:
            new_root: Root of the tree after the update; None contributes nothing.
            old_root: Root of the tree before the update; None contributes nothing.
        """
        old_index = index_by_key(old_root)
        root_parent = self._config.root_parent_key

        records: list[SectionRecord] = []
        new_keys: set[str] = set()
        for section, parent in iter_preorder(new_root):
            new_keys.add(section.global_key)
            old = old_index.get(section.global_key)
            is_dirty = old is None or bool(self._is_dirty(old[0], section))
            records.append(
                SectionRecord(
                    identifier=section.global_key,
                    name=section.name,
                    parent=root_parent if parent is None else parent,
                    is_dirty=is_dirty,
                )
            )

        for key, (section, parent) in old_index.items():
            if key in new_keys:
                continue
            records.append(
                SectionRecord(
                    identifier=key,
                    name=section.name,
                    parent=root_parent if parent is None else parent,
                    removed=True,
                )
            )
        return records
