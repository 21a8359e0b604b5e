"""
Data Models

AI Review Action의 핵심 데이터 모델들
"""

from .pr_diff import DELETED_FILE_PATH, Change, Chunk, DiffFile
from .event import PullRequestEvent
from .review import (
    AiReviewItem,
    GitComment,
    MalformedResponse,
    ParsedReviews,
    PullRequestDetail,
    ReviewRules,
    ReviewRulesError,
)

__all__ = [
    "DELETED_FILE_PATH",
    "Change",
    "Chunk",
    "DiffFile",
    "PullRequestEvent",
    "AiReviewItem",
    "GitComment",
    "MalformedResponse",
    "ParsedReviews",
    "PullRequestDetail",
    "ReviewRules",
    "ReviewRulesError",
]
