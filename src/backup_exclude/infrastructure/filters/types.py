"""Filter type alias.

PEP 695 type alias syntax.
Filter function: takes TreeEntry, returns True to include.
"""

from collections.abc import Callable
from typing import TypeAlias

from backup_exclude.domain.model.tree_entry import TreeEntry

Filter: TypeAlias = Callable[[TreeEntry], bool]
