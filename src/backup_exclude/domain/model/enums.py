"""Domain enumerations."""

from enum import Enum, auto

# Rank of a pattern whose kind could not be determined
FALLBACK_RANK = 1


class PatternKind(Enum):
    """Structural category of an exclude pattern.

    Value is the specificity rank: higher = more specific.
    Ranks are distinct, so the kinds form a total order.
    """

    EXACT_PATH = 10  # dir1/file4.txt
    DIRECTORY_TRAILING_SLASH = 8  # cache/
    DOUBLE_ASTERISK = 6  # **/log
    FILE_EXTENSION = 4  # *.log
    REGULAR = 2  # logs

    @property
    def rank(self) -> int:
        """Specificity rank used for conflict resolution."""
        return self.value


class EntryKind(Enum):
    """Filesystem entry type of a matched path."""

    FILE = auto()
    DIRECTORY = auto()


class ClauseKind(Enum):
    """Predicate type of a filter expression clause."""

    EXACT_PATH = auto()  # exclude this exact path
    NAME_SUFFIX = auto()  # exclude files whose name matches a suffix glob
    SUBTREE = auto()  # exclude a directory and everything beneath it
