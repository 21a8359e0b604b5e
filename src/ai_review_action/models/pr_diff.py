"""
PR Diff Data Models

Structures produced by parsing a unified diff: files, hunks and lines.
"""

from dataclasses import dataclass, field
from typing import List, Optional


# Target path used by unified diffs for a file removed in the new version
DELETED_FILE_PATH = "/dev/null"

CHANGE_TYPES = {'normal', 'add', 'del'}


@dataclass
class Change:
    """A single line inside a diff chunk"""
    type: str  # 'normal' (context), 'add', 'del'
    content: str
    ln: Optional[int] = None
    ln1: Optional[int] = None
    ln2: Optional[int] = None

    def __post_init__(self):
        """데이터 검증"""
        if self.type not in CHANGE_TYPES:
            raise ValueError(f"Invalid change type: {self.type}")
        if self.type == 'normal' and (self.ln1 is None or self.ln2 is None):
            raise ValueError("Context lines need both old and new line numbers")
        if self.type in ('add', 'del') and self.ln is None:
            raise ValueError(f"'{self.type}' lines need a line number")

    @property
    def new_line(self) -> Optional[int]:
        """Line number in the new file version, if the line exists there"""
        if self.type == 'add':
            return self.ln
        if self.type == 'normal':
            return self.ln2
        return None


@dataclass
class Chunk:
    """A hunk of a diff: header line plus its changes"""
    content: str
    old_start: int
    old_lines: int
    new_start: int
    new_lines: int
    changes: List[Change] = field(default_factory=list)

    def __post_init__(self):
        """데이터 검증"""
        if self.old_start < 0 or self.new_start < 0:
            raise ValueError("Line numbers must be non-negative")
        if self.old_lines < 0 or self.new_lines < 0:
            raise ValueError("Line counts must be non-negative")

    @property
    def new_line_numbers(self) -> List[int]:
        """New-file line numbers that review comments can be attached to"""
        return [c.new_line for c in self.changes if c.new_line is not None]


@dataclass
class DiffFile:
    """One file touched by the diff"""
    from_path: Optional[str] = None
    to_path: Optional[str] = None
    chunks: List[Chunk] = field(default_factory=list)
    new: bool = False
    deleted: bool = False
    additions: int = 0
    deletions: int = 0

    @property
    def is_deleted(self) -> bool:
        """Deleted files have the sentinel target path"""
        return self.to_path == DELETED_FILE_PATH

    @property
    def path(self) -> str:
        """Path used for display and pattern matching"""
        return self.to_path or ""
