"""
File Filter

Decides which files of a parsed diff are sent for review.
"""

import logging
from typing import Iterable, List, Sequence

from wcmatch import glob

from ..models.pr_diff import DiffFile


logger = logging.getLogger(__name__)

# `*` stays within one path segment, `**` spans segments, `{a,b}` expands.
# A leading `!` negates the pattern: `!src/**` matches every path outside src/.
GLOB_FLAGS = glob.GLOBSTAR | glob.BRACE | glob.EXTGLOB | glob.NEGATE | glob.NEGATEALL


class FileFilter:
    """
    Drops deleted files and files matching exclusion globs.

    Patterns are evaluated against the full relative path of the file in
    the new version, so ``*.md`` matches ``README.md`` but not
    ``docs/guide.md`` (use ``**/*.md`` for that).
    """

    def __init__(self, patterns: Sequence[str] = ()):
        self.patterns = [p.strip() for p in patterns if p and p.strip()]

    def is_excluded(self, path: str) -> bool:
        """Check whether a path matches any exclusion pattern."""
        return any(glob.globmatch(path, pattern, flags=GLOB_FLAGS) for pattern in self.patterns)

    def filter(self, files: Iterable[DiffFile]) -> List[DiffFile]:
        """
        Filter files relevant for review.

        Args:
            files: Parsed diff files

        Returns:
            Files to review, in their original order
        """
        relevant_files = []

        for diff_file in files:
            if diff_file.is_deleted or not diff_file.to_path:
                logger.debug(f"Skipping deleted file: {diff_file.from_path}")
                continue

            if self.is_excluded(diff_file.path):
                logger.info(f"Excluded by pattern: {diff_file.path}")
                continue

            relevant_files.append(diff_file)

        logger.info(f"Filtered to {len(relevant_files)} relevant files")
        return relevant_files
