"""
Property-based tests for prompt generation.
"""

from hypothesis import given, strategies as st

from ai_review_action.llm.prompts import PromptBuilder
from ai_review_action.models.pr_diff import Change, Chunk, DiffFile
from ai_review_action.models.review import PullRequestDetail, ReviewRules


line_text = st.text(alphabet=st.characters(blacklist_categories=('Cs', 'Cc')), max_size=40)


@st.composite
def hunks(draw):
    """Build a hunk of numbered context, added and removed lines."""
    kinds = draw(st.lists(st.sampled_from(['normal', 'add', 'del']), min_size=1, max_size=15))
    old_line = new_line = draw(st.integers(min_value=1, max_value=500))
    start = old_line
    changes = []
    for kind in kinds:
        text = draw(line_text)
        if kind == 'normal':
            changes.append(Change(type='normal', content=' ' + text, ln1=old_line, ln2=new_line))
            old_line += 1
            new_line += 1
        elif kind == 'add':
            changes.append(Change(type='add', content='+' + text, ln=new_line))
            new_line += 1
        else:
            changes.append(Change(type='del', content='-' + text, ln=old_line))
            old_line += 1
    return Chunk(
        content=f"@@ -{start},{old_line - start} +{start},{new_line - start} @@",
        old_start=start,
        old_lines=old_line - start,
        new_start=start,
        new_lines=new_line - start,
        changes=changes,
    )


class TestPromptProperties:
    """Property tests for PromptBuilder."""

    @given(
        chunk=hunks(),
        path=st.from_regex(r"[a-z]{1,8}(/[a-z]{1,8}){0,2}\.[a-z]{1,3}", fullmatch=True),
        title=line_text,
        description=st.text(max_size=200),
        language=st.sampled_from(["", "Python", "TypeScript"]),
        framework=st.sampled_from(["", "Django", "React"]),
    )
    def test_prompt_is_deterministic(self, chunk, path, title, description, language, framework):
        """
        Property: identical inputs always produce an identical prompt.
        """
        diff_file = DiffFile(from_path=path, to_path=path, chunks=[chunk])
        pull_request = PullRequestDetail(
            owner="owner", repo="repo", pull_request_number=1, title=title, description=description
        )
        rules = ReviewRules(language=language, framework=framework)

        first = PromptBuilder().build_review_prompt(diff_file, chunk, pull_request, rules)
        second = PromptBuilder().build_review_prompt(diff_file, chunk, pull_request, rules)

        assert first == second
        assert f'in the file "{path}"' in first
        assert f"Pull request title: {title}" in first

    @given(chunk=hunks())
    def test_every_change_is_rendered(self, chunk):
        """
        Property: the rendered hunk has the header plus one line per change.
        """
        rendered = PromptBuilder().format_chunk(chunk)
        lines = rendered.split("\n")

        assert lines[0] == chunk.content
        assert len(lines) == len(chunk.changes) + 1
        for change, line in zip(chunk.changes, lines[1:]):
            if change.type == 'add':
                assert line.startswith(f"+{change.ln} ")
            elif change.type == 'del':
                assert line.startswith(f"-{change.ln} ")
            else:
                assert line.startswith(f"{change.ln1},{change.ln2} ")
