"""Tree subpackage for section-tree snapshots and their traversal.

Re-exports the public API for the tree module:
- Section: dataclass representing a node in a section-tree snapshot
- SectionKind: StrEnum of the section kinds (GROUP, DATA_DIFF, SINGLE_COMPONENT)
- SectionTreeWalker: emits per-section dirty/reused/removed records
"""

from changeset_debug.tree.nodes import Section, SectionKind, index_by_key, iter_preorder
from changeset_debug.tree.walker import DirtyPredicate, SectionTreeWalker, default_is_dirty

__all__ = [
    "DirtyPredicate",
    "Section",
    "SectionKind",
    "SectionTreeWalker",
    "default_is_dirty",
    "index_by_key",
    "iter_preorder",
]
