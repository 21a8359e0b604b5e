"""
GitHub API Client

Handles GitHub API authentication and communication.
Provides methods for PR detail and diff retrieval and review submission.
"""

import logging
from typing import Any, Dict, List, Optional

import requests

from ..models.review import GitComment


logger = logging.getLogger(__name__)

DIFF_MEDIA_TYPE = 'application/vnd.github.v3.diff'


class GitHubAPIError(Exception):
    """GitHub API related errors"""
    def __init__(self, message: str, status_code: Optional[int] = None, response_data: Optional[Dict] = None):
        super().__init__(message)
        self.status_code = status_code
        self.response_data = response_data


class GitHubClient:
    """
    GitHub API client with authentication and error handling.

    Provides methods for:
    - Pull request detail retrieval
    - PR and commit-range diff retrieval
    - Review submission with inline comments
    """

    def __init__(self, token: str, base_url: str = "https://api.github.com", timeout: int = 30):
        """
        Initialize GitHub client.

        Args:
            token: GitHub access token
            base_url: GitHub API base URL (default: https://api.github.com)
            timeout: Per-request timeout in seconds
        """
        if not token:
            raise ValueError("GitHub token is required")

        self.token = token
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = self._create_session()

    def _create_session(self) -> requests.Session:
        """Create requests session with authentication headers."""
        session = requests.Session()
        session.headers.update({
            'Authorization': f'token {self.token}',
            'Accept': 'application/vnd.github.v3+json',
            'User-Agent': 'AI-Review-Action/1.0'
        })
        return session

    def _make_request(self, method: str, endpoint: str, **kwargs) -> requests.Response:
        """
        Make authenticated request to GitHub API.

        Args:
            method: HTTP method (GET, POST, etc.)
            endpoint: API endpoint (without base URL)
            **kwargs: Additional arguments for requests

        Returns:
            Response object

        Raises:
            GitHubAPIError: For API and transport errors
        """
        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        kwargs.setdefault('timeout', self.timeout)

        try:
            response = self.session.request(method, url, **kwargs)
        except requests.RequestException as e:
            logger.error(f"Request failed: {e}")
            raise GitHubAPIError(f"Request failed: {str(e)}") from e

        if not response.ok:
            try:
                error_data = response.json() if response.content else {}
            except ValueError:
                error_data = {'message': response.text}
            raise GitHubAPIError(
                f"GitHub API error: {response.status_code} - {error_data.get('message', 'Unknown error')}",
                status_code=response.status_code,
                response_data=error_data
            )

        return response

    def get_pull_request(self, owner: str, repo: str, pr_number: int) -> Dict:
        """
        Get pull request information.

        Args:
            owner: Repository owner
            repo: Repository name
            pr_number: Pull request number

        Returns:
            Pull request data
        """
        logger.info(f"Fetching PR {owner}/{repo}#{pr_number}")

        response = self._make_request('GET', f'/repos/{owner}/{repo}/pulls/{pr_number}')
        return response.json()

    def get_pull_request_diff(self, owner: str, repo: str, pr_number: int) -> str:
        """
        Get the full unified diff of a pull request.

        Args:
            owner: Repository owner
            repo: Repository name
            pr_number: Pull request number

        Returns:
            Unified diff text
        """
        logger.info(f"Fetching diff for {owner}/{repo}#{pr_number}")

        response = self._make_request(
            'GET',
            f'/repos/{owner}/{repo}/pulls/{pr_number}',
            headers={'Accept': DIFF_MEDIA_TYPE}
        )
        return response.text

    def compare_commits(self, owner: str, repo: str, base: str, head: str) -> str:
        """
        Get the unified diff between two commits.

        Args:
            owner: Repository owner
            repo: Repository name
            base: Base commit SHA
            head: Head commit SHA

        Returns:
            Unified diff text
        """
        logger.info(f"Comparing {owner}/{repo} {base[:7]}...{head[:7]}")

        response = self._make_request(
            'GET',
            f'/repos/{owner}/{repo}/compare/{base}...{head}',
            headers={'Accept': DIFF_MEDIA_TYPE}
        )
        return response.text

    def create_review(
        self,
        owner: str,
        repo: str,
        pr_number: int,
        comments: List[GitComment],
        event: str = "COMMENT"
    ) -> Dict[str, Any]:
        """
        Submit a review carrying inline comments.

        Args:
            owner: Repository owner
            repo: Repository name
            pr_number: Pull request number
            comments: Inline comments to attach
            event: Review event type

        Returns:
            Created review data
        """
        logger.info(f"Creating review on {owner}/{repo}#{pr_number} with {len(comments)} comments")

        response = self._make_request(
            'POST',
            f'/repos/{owner}/{repo}/pulls/{pr_number}/reviews',
            json={
                'event': event,
                'comments': [comment.to_api() for comment in comments],
            }
        )
        return response.json()
