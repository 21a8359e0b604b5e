"""
Review Data Models

코드 리뷰 관련 데이터 모델들
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


class ReviewRulesError(ValueError):
    """Review rules input is not a valid JSON object"""


@dataclass(frozen=True)
class PullRequestDetail:
    """리뷰 대상 Pull Request 정보"""
    owner: str
    repo: str
    pull_request_number: int
    title: str
    description: str = ""

    def __post_init__(self):
        """데이터 검증"""
        if self.pull_request_number <= 0:
            raise ValueError("PR number must be positive")
        if not self.owner or not self.repo:
            raise ValueError("Owner and repo are required")

    @property
    def repository(self) -> str:
        return f"{self.owner}/{self.repo}"


class ReviewRules(BaseModel):
    """Language/framework hints injected into the review prompt"""
    language: str = "code"
    framework: str = ""

    @field_validator('language', mode='before')
    @classmethod
    def default_language(cls, v):
        if v is None or not str(v).strip():
            return "code"
        return str(v).strip()

    @field_validator('framework', mode='before')
    @classmethod
    def default_framework(cls, v):
        if v is None:
            return ""
        return str(v).strip()

    @classmethod
    def from_json(cls, raw: Optional[str]) -> "ReviewRules":
        """
        Parse a JSON-encoded rules string.

        Blank input and JSON ``null`` both yield the default rules.

        Raises:
            ReviewRulesError: if the input is not a JSON object of rules
        """
        if raw is None or not raw.strip():
            return cls()

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ReviewRulesError(f"Review rules are not valid JSON: {e}") from e

        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ReviewRulesError(f"Review rules must be a JSON object, got {type(data).__name__}")

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ReviewRulesError(f"Invalid review rules: {e}") from e


class AiReviewItem(BaseModel):
    """One suggestion reported by the language model"""
    model_config = ConfigDict(populate_by_name=True)

    line_number: str = Field(alias="lineNumber")
    review_comment: str = Field(alias="reviewComment")

    @field_validator('line_number', mode='before')
    @classmethod
    def stringify_line_number(cls, v):
        # Models often answer with a bare integer
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @property
    def line(self) -> Optional[int]:
        """Line number as a positive integer, or None if it cannot be coerced"""
        value = self.line_number.strip()
        # str.isdigit() also accepts superscripts and other non-decimal digits
        if not (value.isascii() and value.isdigit()):
            return None
        try:
            line = int(value)
        except ValueError:
            # Longer than the interpreter's int conversion limit
            return None
        return line if line > 0 else None


@dataclass
class GitComment:
    """Inline review comment in the shape the GitHub reviews API expects"""
    body: str
    path: str
    line: int

    def __post_init__(self):
        """데이터 검증"""
        if self.line <= 0:
            raise ValueError("Line number must be positive")
        if not self.path:
            raise ValueError("Comment path cannot be empty")

    def to_api(self) -> Dict[str, Any]:
        return {'path': self.path, 'line': self.line, 'body': self.body}


@dataclass
class ParsedReviews:
    """Model output that matched the expected schema"""
    items: List[AiReviewItem] = field(default_factory=list)
    dropped: List[Any] = field(default_factory=list)


@dataclass
class MalformedResponse:
    """Model output that could not be used; ``raw`` is kept for logging"""
    reason: str
    raw: Any


ReviewResponse = Union[ParsedReviews, MalformedResponse]
