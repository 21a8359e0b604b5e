"""
Unified Diff Parser

Parses unified diff text returned by GitHub into files, hunks and lines.
Handles git extended headers, renames, deletions and binary files.
"""

import re
import logging
from typing import List, Optional

from ..models.pr_diff import DELETED_FILE_PATH, Change, Chunk, DiffFile


logger = logging.getLogger(__name__)


class UnifiedDiffParser:
    """
    Parser for unified diff text.

    Converts a diff blob (``git diff`` / GitHub ``.diff`` media type) into
    an ordered list of DiffFile objects with numbered changes.
    """

    def __init__(self):
        """Initialize unified diff parser."""
        self.git_header_pattern = re.compile(r'^diff --git (?:"?a/)?(.+?)"? (?:"?b/)?(.+?)"?$')
        self.hunk_header_pattern = re.compile(r'^@@\s*-(\d+)(?:,(\d+))?\s*\+(\d+)(?:,(\d+))?\s*@@(.*)$')
        self.binary_file_pattern = re.compile(r'^Binary files? .* differ')

    def parse(self, diff_text: str) -> List[DiffFile]:
        """
        Parse diff text into structured files.

        Args:
            diff_text: Raw unified diff

        Returns:
            Ordered list of DiffFile objects
        """
        if not diff_text or not diff_text.strip():
            return []

        files: List[DiffFile] = []
        current_file: Optional[DiffFile] = None
        current_chunk: Optional[Chunk] = None
        old_line = new_line = 0
        old_remaining = new_remaining = 0

        for line in re.split(r'\r?\n', diff_text):
            in_hunk = current_chunk is not None and (old_remaining > 0 or new_remaining > 0)

            if in_hunk:
                if line.startswith('\\'):
                    # "\ No newline at end of file"
                    continue

                marker, text = (line[:1], line) if line else (' ', ' ')
                if marker == '+':
                    current_chunk.changes.append(Change(type='add', content=text, ln=new_line))
                    current_file.additions += 1
                    new_line += 1
                    new_remaining -= 1
                    continue
                if marker == '-':
                    current_chunk.changes.append(Change(type='del', content=text, ln=old_line))
                    current_file.deletions += 1
                    old_line += 1
                    old_remaining -= 1
                    continue
                if marker == ' ':
                    current_chunk.changes.append(Change(type='normal', content=text, ln1=old_line, ln2=new_line))
                    old_line += 1
                    new_line += 1
                    old_remaining -= 1
                    new_remaining -= 1
                    continue

                logger.debug(f"Hunk ended early at line: {line!r}")
                old_remaining = new_remaining = 0

            if line.startswith('\\'):
                continue

            git_match = self.git_header_pattern.match(line)
            if git_match:
                current_file = DiffFile(from_path=git_match.group(1), to_path=git_match.group(2))
                files.append(current_file)
                current_chunk = None
                continue

            if line.startswith('--- '):
                if current_file is None or current_file.chunks:
                    current_file = DiffFile()
                    files.append(current_file)
                    current_chunk = None
                current_file.from_path = self._parse_path(line[4:])
                continue

            if line.startswith('+++ '):
                if current_file is None:
                    current_file = DiffFile()
                    files.append(current_file)
                current_file.to_path = self._parse_path(line[4:])
                continue

            hunk_match = self.hunk_header_pattern.match(line)
            if hunk_match:
                if current_file is None:
                    logger.warning("Hunk header found before any file header, skipping")
                    continue

                old_start = int(hunk_match.group(1))
                old_lines = int(hunk_match.group(2) if hunk_match.group(2) is not None else 1)
                new_start = int(hunk_match.group(3))
                new_lines = int(hunk_match.group(4) if hunk_match.group(4) is not None else 1)

                current_chunk = Chunk(
                    content=line,
                    old_start=old_start,
                    old_lines=old_lines,
                    new_start=new_start,
                    new_lines=new_lines,
                )
                current_file.chunks.append(current_chunk)

                old_line, new_line = old_start, new_start
                old_remaining, new_remaining = old_lines, new_lines
                continue

            if current_file is None:
                continue

            if line.startswith('new file mode'):
                current_file.new = True
                current_file.from_path = DELETED_FILE_PATH
            elif line.startswith('deleted file mode'):
                current_file.deleted = True
                current_file.to_path = DELETED_FILE_PATH
            elif line.startswith('rename from '):
                current_file.from_path = line[len('rename from '):]
            elif line.startswith('rename to '):
                current_file.to_path = line[len('rename to '):]
            elif self.binary_file_pattern.match(line):
                logger.debug(f"Binary file diff: {current_file.to_path}")

        logger.info(f"Parsed diff: {len(files)} files, {sum(len(f.chunks) for f in files)} chunks")
        return files

    def _parse_path(self, raw: str) -> str:
        """
        Normalize a ``---``/``+++`` header path.

        Args:
            raw: Header value after the marker

        Returns:
            Path without the a/ or b/ prefix
        """
        path = raw.split('\t')[0].strip()
        if len(path) >= 2 and path.startswith('"') and path.endswith('"'):
            path = path[1:-1]
        if path == DELETED_FILE_PATH:
            return path
        if path.startswith('a/') or path.startswith('b/'):
            return path[2:]
        return path
