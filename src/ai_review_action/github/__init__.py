"""
GitHub Integration Layer

This module provides GitHub API integration for pull request details,
diff retrieval, event loading and review submission.
"""

from .client import GitHubAPIError, GitHubClient
from .event import EventPayloadError, load_event
from .parser import UnifiedDiffParser

__all__ = ['GitHubAPIError', 'GitHubClient', 'EventPayloadError', 'load_event', 'UnifiedDiffParser']
