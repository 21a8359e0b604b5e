"""
Unit tests for the unified diff parser.
"""

import pytest

from ai_review_action.github.parser import UnifiedDiffParser
from ai_review_action.models.pr_diff import DELETED_FILE_PATH

from conftest import APP_DIFF


class TestUnifiedDiffParser:
    """Unit tests for UnifiedDiffParser class."""

    def setup_method(self):
        self.parser = UnifiedDiffParser()

    @pytest.mark.parametrize("text", ["", "   \n", None])
    def test_empty_diff(self, text):
        assert self.parser.parse(text) == []

    def test_parse_modified_file(self):
        """Test a single hunk is numbered against both file versions."""
        files = self.parser.parse(APP_DIFF)

        assert len(files) == 1
        diff_file = files[0]
        assert diff_file.from_path == "src/app.ts"
        assert diff_file.to_path == "src/app.ts"
        assert diff_file.additions == 1
        assert diff_file.deletions == 0

        assert len(diff_file.chunks) == 1
        chunk = diff_file.chunks[0]
        assert chunk.content == "@@ -8,3 +8,4 @@ export function main() {"
        assert (chunk.old_start, chunk.old_lines, chunk.new_start, chunk.new_lines) == (8, 3, 8, 4)

        changes = [(c.type, c.content, c.ln, c.ln1, c.ln2) for c in chunk.changes]
        assert changes == [
            ('normal', ' const a = 1;', None, 8, 8),
            ('normal', ' const b = 2;', None, 9, 9),
            ('add', '+const c = 3;', 10, None, None),
            ('normal', ' return a + b;', None, 10, 11),
        ]

    def test_parse_multiple_hunks_and_removals(self):
        diff = (
            "diff --git a/lib/util.py b/lib/util.py\n"
            "--- a/lib/util.py\n"
            "+++ b/lib/util.py\n"
            "@@ -1,3 +1,2 @@\n"
            " import os\n"
            "-import sys\n"
            " \n"
            "@@ -20,2 +19,3 @@ def helper():\n"
            "     x = 1\n"
            "+    y = 2\n"
            "     return x\n"
        )
        files = self.parser.parse(diff)

        assert len(files) == 1
        first, second = files[0].chunks
        assert [(c.type, c.ln) for c in first.changes if c.type != 'normal'] == [('del', 2)]
        assert first.changes[2].ln1 == 3 and first.changes[2].ln2 == 2
        assert second.changes[1].type == 'add'
        assert second.changes[1].ln == 20
        assert second.changes[2].ln2 == 21
        assert files[0].additions == 1
        assert files[0].deletions == 1

    def test_parse_deleted_file(self):
        diff = (
            "diff --git a/old.py b/old.py\n"
            "deleted file mode 100644\n"
            "index e69de29..0000000\n"
            "--- a/old.py\n"
            "+++ /dev/null\n"
            "@@ -1,2 +0,0 @@\n"
            "-x = 1\n"
            "-y = 2\n"
        )
        diff_file = self.parser.parse(diff)[0]

        assert diff_file.deleted
        assert diff_file.is_deleted
        assert diff_file.to_path == DELETED_FILE_PATH
        assert diff_file.from_path == "old.py"
        assert [c.ln for c in diff_file.chunks[0].changes] == [1, 2]

    def test_parse_new_file(self):
        diff = (
            "diff --git a/new.py b/new.py\n"
            "new file mode 100644\n"
            "index 0000000..e69de29\n"
            "--- /dev/null\n"
            "+++ b/new.py\n"
            "@@ -0,0 +1,2 @@\n"
            "+a = 1\n"
            "+b = 2\n"
        )
        diff_file = self.parser.parse(diff)[0]

        assert diff_file.new
        assert diff_file.from_path == DELETED_FILE_PATH
        assert diff_file.to_path == "new.py"
        assert [c.ln for c in diff_file.chunks[0].changes] == [1, 2]

    def test_parse_rename_without_content(self):
        diff = (
            "diff --git a/a.txt b/b.txt\n"
            "similarity index 100%\n"
            "rename from a.txt\n"
            "rename to b.txt\n"
        )
        diff_file = self.parser.parse(diff)[0]

        assert diff_file.from_path == "a.txt"
        assert diff_file.to_path == "b.txt"
        assert diff_file.chunks == []

    def test_parse_binary_file(self):
        diff = (
            "diff --git a/logo.png b/logo.png\n"
            "index 1111111..2222222 100644\n"
            "Binary files a/logo.png and b/logo.png differ\n"
        )
        diff_file = self.parser.parse(diff)[0]

        assert diff_file.to_path == "logo.png"
        assert diff_file.chunks == []

    def test_hunk_header_without_counts(self):
        diff = (
            "--- a/x.py\n"
            "+++ b/x.py\n"
            "@@ -1 +1 @@\n"
            "-old\n"
            "\\ No newline at end of file\n"
            "+new\n"
            "\\ No newline at end of file\n"
        )
        chunk = self.parser.parse(diff)[0].chunks[0]

        assert (chunk.old_lines, chunk.new_lines) == (1, 1)
        assert [(c.type, c.content) for c in chunk.changes] == [('del', '-old'), ('add', '+new')]

    def test_removed_line_that_looks_like_a_header(self):
        """Test a removed SQL comment is not mistaken for a file header."""
        diff = (
            "--- a/schema.sql\n"
            "+++ b/schema.sql\n"
            "@@ -1,2 +1,1 @@\n"
            "--- legacy table\n"
            " CREATE TABLE t (id int);\n"
        )
        files = self.parser.parse(diff)

        assert len(files) == 1
        changes = files[0].chunks[0].changes
        assert changes[0].type == 'del'
        assert changes[0].content == '--- legacy table'

    def test_plain_diff_with_multiple_files(self):
        diff = (
            "--- a/x.py\n"
            "+++ b/x.py\n"
            "@@ -1 +1 @@\n"
            "-a\n"
            "+b\n"
            "--- a/y.py\n"
            "+++ b/y.py\n"
            "@@ -1 +1 @@\n"
            "-c\n"
            "+d\n"
        )
        files = self.parser.parse(diff)

        assert [f.to_path for f in files] == ["x.py", "y.py"]
        assert all(len(f.chunks) == 1 for f in files)

    def test_header_timestamps_are_stripped(self):
        diff = (
            "--- a/x.py\t2024-01-01 00:00:00\n"
            "+++ b/x.py\t2024-01-02 00:00:00\n"
            "@@ -1 +1 @@\n"
            "-a\n"
            "+b\n"
        )
        assert self.parser.parse(diff)[0].to_path == "x.py"

    def test_crlf_line_endings(self):
        diff = APP_DIFF.replace("\n", "\r\n")
        chunk = self.parser.parse(diff)[0].chunks[0]
        assert chunk.changes[2].content == "+const c = 3;"
