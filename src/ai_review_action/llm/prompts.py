"""
Prompt Builder

Builds the per-hunk review prompt sent to the language model.
"""

import logging
from typing import Dict

from ..models.pr_diff import Change, Chunk, DiffFile
from ..models.review import PullRequestDetail, ReviewRules


logger = logging.getLogger(__name__)


class PromptBuilder:
    """
    Builds structured prompts for LLM review generation.

    Prompts are a pure function of the file, hunk, pull request and review
    rules: identical inputs always produce identical text.
    """

    def __init__(self):
        """Initialize prompt builder."""
        self.templates = self._load_templates()

    def build_review_prompt(
        self,
        diff_file: DiffFile,
        chunk: Chunk,
        pull_request: PullRequestDetail,
        rules: ReviewRules
    ) -> str:
        """
        Build complete review prompt for a single hunk.

        Args:
            diff_file: File the hunk belongs to
            chunk: Hunk to review
            pull_request: Title and description used for context
            rules: Language/framework hints

        Returns:
            Complete prompt string
        """
        logger.debug(f"Building review prompt for {diff_file.to_path} {chunk.content}")

        framework_clause = ""
        lint_framework_clause = ""
        if rules.framework:
            framework_clause = self.templates["framework_clause"].format(framework=rules.framework)
            lint_framework_clause = self.templates["lint_framework_clause"].format(framework=rules.framework)

        sections = [
            self.templates["instructions"].format(
                language=rules.language,
                framework_clause=framework_clause,
                lint_framework_clause=lint_framework_clause,
            ),
            self.templates["file_header"].format(file_path=diff_file.to_path),
            self.templates["pull_request"].format(
                title=pull_request.title,
                description=pull_request.description,
            ),
            self.templates["diff"].format(diff=self.format_chunk(chunk)),
        ]

        return "\n".join(sections)

    def format_chunk(self, chunk: Chunk) -> str:
        """Render a hunk as its header followed by numbered changes."""
        lines = [chunk.content]
        lines.extend(self._format_change(change) for change in chunk.changes)
        return "\n".join(lines)

    def _format_change(self, change: Change) -> str:
        if change.type == 'add':
            return f"+{change.ln} {change.content}"
        if change.type == 'del':
            return f"-{change.ln} {change.content}"
        return f"{change.ln1},{change.ln2} {change.content}"

    def _load_templates(self) -> Dict[str, str]:
        """Load prompt templates."""
        return {
            "instructions": """Your task is to review pull requests. Instructions:
-   Provide the response in the following JSON format: {{"reviews": [{{"lineNumber": <line_number>, "reviewComment": "<review comment>"}}]}}
-   Do not give positive comments or compliments.
-   Provide comments and suggestions ONLY if there is something to improve, otherwise "reviews" should be an empty array.
-   Write the comment in GitHub Markdown format.
-   Use the given description only for the overall context and only comment on the code.
-   IMPORTANT: NEVER suggest adding comments to the code.
-   Consider the specifics of the {language} language{framework_clause} when making your review.
-   Pay attention to and correct any typos in the code.
-   Identify and correct any linting issues according to the standard conventions for the {language} language{lint_framework_clause}.
""",

            "framework_clause": " and the {framework} framework",

            "lint_framework_clause": " (and the {framework} framework)",

            "file_header": """Review the following code diff in the file "{file_path}" and take the pull request title and description into account when writing the response.
""",

            "pull_request": """Pull request title: {title}
Pull request description:

---
{description}
---
""",

            "diff": """Git diff to review:

```diff
{diff}
```
""",
        }
