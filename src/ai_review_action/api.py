"""
Pull Request Reviewer

Main interface that orchestrates the review of one pull request event,
from diff retrieval to the submitted GitHub review.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .config import AppConfig
from .github.client import GitHubClient
from .github.event import EventPayloadError
from .github.parser import UnifiedDiffParser
from .llm.generator import ReviewGenerator
from .llm.prompts import PromptBuilder
from .models.event import PullRequestEvent
from .models.pr_diff import DiffFile
from .models.review import GitComment, PullRequestDetail, ReviewRules
from .review.filter import FileFilter
from .review.mapper import convert_to_comments


logger = logging.getLogger(__name__)

REVIEW_EVENT = "COMMENT"


@dataclass
class RunResult:
    """Outcome of a review run."""
    status: str  # 'published', 'no_comments', 'unsupported_action', 'empty_diff'
    repository: str
    pr_number: int
    files_reviewed: int = 0
    chunks_reviewed: int = 0
    comments: List[GitComment] = field(default_factory=list)
    review: Optional[Dict[str, Any]] = None


class PullRequestReviewer:
    """
    Orchestrates the review process:
    1. Fetch pull request details and the diff for the event
    2. Parse the diff and drop deleted or excluded files
    3. Ask the model about every hunk, one at a time
    4. Submit all resulting comments as a single review
    """

    def __init__(
        self,
        config: AppConfig,
        github_client: Optional[GitHubClient] = None,
        review_generator: Optional[ReviewGenerator] = None
    ):
        """
        Initialize the reviewer.

        Args:
            config: Validated application configuration
            github_client: Client override, built from config when omitted
            review_generator: Generator override, built from config when omitted
        """
        self.config = config
        self.rules: ReviewRules = config.review.rules

        self.github_client = github_client or GitHubClient(
            token=config.github.token,
            base_url=config.github.api_base_url,
            timeout=config.github.timeout_seconds
        )
        self.review_generator = review_generator or ReviewGenerator(
            model_name=config.openai.model,
            api_key=config.openai.api_key,
            base_url=config.openai.base_url
        )
        logger.info(f"Review model: {self.review_generator.get_model_info()}")
        self.diff_parser = UnifiedDiffParser()
        self.file_filter = FileFilter(config.review.exclude_patterns)
        self.prompt_builder = PromptBuilder()

    def run(self, event: PullRequestEvent) -> RunResult:
        """
        Review the pull request referenced by an event.

        Args:
            event: Triggering pull request event

        Returns:
            RunResult describing what happened
        """
        result = RunResult(
            status='no_comments',
            repository=f"{event.owner}/{event.repo}",
            pr_number=event.number
        )

        if not event.is_supported:
            logger.error(f"Unsupported event action: {event.action} ({self.config.event_name or 'unknown event'})")
            result.status = 'unsupported_action'
            return result

        pull_request = self.fetch_pull_request_detail(event)
        logger.info(f"Reviewing {pull_request.repository}#{pull_request.pull_request_number} ({event.action})")

        diff = self.fetch_diff(event, pull_request)
        if not diff or not diff.strip():
            logger.error("No diff found")
            result.status = 'empty_diff'
            return result

        files = self.file_filter.filter(self.diff_parser.parse(diff))
        result.files_reviewed = len(files)
        result.chunks_reviewed = sum(len(f.chunks) for f in files)

        comments = self.analyze(files, pull_request)
        result.comments = comments

        if not comments:
            logger.info("No review comments produced, nothing to publish")
            return result

        result.review = self.create_review_comment(pull_request, comments)
        result.status = 'published'
        return result

    def fetch_pull_request_detail(self, event: PullRequestEvent) -> PullRequestDetail:
        """Fetch title and description of the event's pull request."""
        pr_data = self.github_client.get_pull_request(event.owner, event.repo, event.number)

        return PullRequestDetail(
            owner=event.owner,
            repo=event.repo,
            pull_request_number=event.number,
            title=pr_data.get('title') or "",
            description=pr_data.get('body') or ""
        )

    def fetch_diff(self, event: PullRequestEvent, pull_request: PullRequestDetail) -> Optional[str]:
        """
        Fetch the diff to review for the event.

        ``opened`` reviews the whole pull request; ``synchronize`` reviews
        only the commits introduced by the push.
        """
        if event.action == 'opened':
            return self.github_client.get_pull_request_diff(
                pull_request.owner, pull_request.repo, pull_request.pull_request_number
            )

        if event.action == 'synchronize':
            if not event.before or not event.after:
                raise EventPayloadError("Synchronize event is missing 'before'/'after' commits")
            return self.github_client.compare_commits(
                pull_request.owner, pull_request.repo, event.before, event.after
            )

        return None

    def analyze(self, files: List[DiffFile], pull_request: PullRequestDetail) -> List[GitComment]:
        """
        Review every hunk of every file.

        Args:
            files: Files retained after filtering
            pull_request: Pull request details for prompt context

        Returns:
            Comments accumulated across all hunks
        """
        comments: List[GitComment] = []

        for diff_file in files:
            if diff_file.is_deleted:
                continue

            for chunk in diff_file.chunks:
                prompt = self.prompt_builder.build_review_prompt(diff_file, chunk, pull_request, self.rules)
                items = self.review_generator.get_ai_response(prompt)
                if not items:
                    continue

                new_comments = convert_to_comments(diff_file, chunk, items)
                logger.info(f"{diff_file.to_path} {chunk.content}: {len(new_comments)} comments")
                comments.extend(new_comments)

        logger.info(f"Collected {len(comments)} comments from {len(files)} files")
        return comments

    def create_review_comment(self, pull_request: PullRequestDetail, comments: List[GitComment]) -> Dict[str, Any]:
        """Submit all comments as one advisory review."""
        return self.github_client.create_review(
            pull_request.owner,
            pull_request.repo,
            pull_request.pull_request_number,
            comments,
            event=REVIEW_EVENT
        )
