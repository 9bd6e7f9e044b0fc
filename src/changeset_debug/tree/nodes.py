"""Section dataclass and SectionKind StrEnum for section-tree snapshots.

A section tree is what the host framework builds on every update: group
sections own child sections, diffing sections own a list of data items that
the framework diffs to produce a changeset.  Each snapshot is read-only for
this package.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Any

from changeset_debug.errors import MissingDiffDataError


class SectionKind(StrEnum):
    """Enumeration of the section kinds the debugger understands.

    - GROUP            -> "group"            : structural, owns child sections
    - DATA_DIFF        -> "data_diff"        : diffs a list of data items
    - SINGLE_COMPONENT -> "single_component" : diffs exactly one component
    """

    GROUP = auto()
    DATA_DIFF = auto()
    SINGLE_COMPONENT = auto()


@dataclass(slots=True)
class Section:
    """A node in a section-tree snapshot.

    Attributes:
        global_key: Identifier that is stable across snapshots.  Two sections
                    with the same key in the old and new tree are the same
                    logical section.
        name:       Simple (class-like) name shown by the debugger.
        kind:       Which kind of section this is (see SectionKind).
        children:   Child sections, in render order.
        props:      Arbitrary props; the default dirty predicate compares them.
        data:       Items a DATA_DIFF section diffs over; None when missing.
        component:  The component a SINGLE_COMPONENT section renders.
    """

    global_key: str
    name: str
    kind: SectionKind = SectionKind.GROUP
    children: list[Section] = field(default_factory=list)
    props: dict[str, Any] = field(default_factory=dict)
    data: list[Any] | None = None
    component: Any = None

    @property
    def is_diff_section(self) -> bool:
        """True for sections whose content comes from list diffing."""
        return self.kind is not SectionKind.GROUP

    def provide_diff_items(self) -> list[Any]:
        """Return the items this section diffs over, in order.

        Raises:
            MissingDiffDataError: If a diffing section lacks its payload.
        """
        if self.kind is SectionKind.DATA_DIFF:
            if self.data is None:
                raise MissingDiffDataError(self.global_key, self.kind)
            return list(self.data)
        if self.kind is SectionKind.SINGLE_COMPONENT:
            if self.component is None:
                raise MissingDiffDataError(self.global_key, self.kind)
            return [self.component]
        return []


def iter_preorder(
    root: Section | None, parent_key: str | None = None
) -> Iterator[tuple[Section, str | None]]:
    """Yield ``(section, parent_key)`` pairs in pre-order.

    The root is paired with ``parent_key`` (None by default).  A None root
    yields nothing.
    """
    if root is None:
        return
    stack: list[tuple[Section, str | None]] = [(root, parent_key)]
    while stack:
        section, parent = stack.pop()
        yield section, parent
        for child in reversed(section.children):
            stack.append((child, section.global_key))


def index_by_key(root: Section | None) -> dict[str, tuple[Section, str | None]]:
    """Map every global key in the tree to its section and parent key.

    Keys are inserted in pre-order.  If a key occurs twice, the first section
    in pre-order wins.
    """
    index: dict[str, tuple[Section, str | None]] = {}
    for section, parent in iter_preorder(root):
        index.setdefault(section.global_key, (section, parent))
    return index
