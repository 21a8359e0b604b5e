"""
Configuration Management

액션 설정 관리
"""

import json
import os
import yaml
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List
from pathlib import Path
import logging

from .models.review import ReviewRules, ReviewRulesError


def _get_input(name: str, default: str = "") -> str:
    """
    Read an action input.

    The workflow runner exposes ``with:`` inputs as ``INPUT_<NAME>``; the
    plain variable is the fallback for local runs.
    """
    key = name.replace(' ', '_').upper()
    value = os.getenv(f"INPUT_{key}")
    if value is None or value == "":
        value = os.getenv(key, default)
    return value.strip()


def parse_exclude_patterns(raw: Optional[str]) -> List[str]:
    """Split a comma-separated glob list, dropping blank entries"""
    if not raw:
        return []
    return [pattern.strip() for pattern in raw.split(',') if pattern.strip()]


@dataclass(frozen=True)
class GitHubConfig:
    """GitHub API 설정"""
    token: Optional[str] = None
    api_base_url: str = "https://api.github.com"
    timeout_seconds: int = 30


@dataclass(frozen=True)
class OpenAIConfig:
    """OpenAI API 설정"""
    api_key: Optional[str] = None
    model: str = "gpt-4"
    base_url: Optional[str] = None


@dataclass(frozen=True)
class ReviewConfig:
    """리뷰 생성 설정"""
    review_rules: str = ""
    exclude_patterns: List[str] = field(default_factory=list)

    @property
    def rules(self) -> ReviewRules:
        return ReviewRules.from_json(self.review_rules)


@dataclass(frozen=True)
class LoggingConfig:
    """로깅 설정"""
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file_path: Optional[str] = None
    max_file_size: int = 10 * 1024 * 1024  # 10MB
    backup_count: int = 5


@dataclass(frozen=True)
class AppConfig:
    """전체 애플리케이션 설정"""
    github: GitHubConfig = field(default_factory=GitHubConfig)
    openai: OpenAIConfig = field(default_factory=OpenAIConfig)
    review: ReviewConfig = field(default_factory=ReviewConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    event_path: Optional[str] = None
    event_name: Optional[str] = None

    @classmethod
    def from_env(cls) -> "AppConfig":
        """환경 변수에서 설정 로드"""
        return cls(
            github=GitHubConfig(
                token=_get_input("github_token") or None,
                api_base_url=os.getenv("GITHUB_API_URL", "https://api.github.com"),
                timeout_seconds=int(os.getenv("GITHUB_TIMEOUT", "30")),
            ),
            openai=OpenAIConfig(
                api_key=_get_input("openai_api_key") or None,
                model=_get_input("openai_api_model", "gpt-4") or "gpt-4",
                base_url=os.getenv("OPENAI_BASE_URL") or None,
            ),
            review=ReviewConfig(
                review_rules=_get_input("review_rules"),
                exclude_patterns=parse_exclude_patterns(_get_input("exclude")),
            ),
            logging=LoggingConfig(
                level=os.getenv("LOG_LEVEL", "INFO"),
                format=os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
                file_path=os.getenv("LOG_FILE"),
                max_file_size=int(os.getenv("LOG_MAX_SIZE", str(10 * 1024 * 1024))),
                backup_count=int(os.getenv("LOG_BACKUP_COUNT", "5")),
            ),
            event_path=os.getenv("GITHUB_EVENT_PATH"),
            event_name=os.getenv("GITHUB_EVENT_NAME"),
        )

    @classmethod
    def from_yaml(cls, config_path: str) -> "AppConfig":
        """YAML 파일에서 설정 로드"""
        config_file = Path(config_path)
        if not config_file.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_file, 'r', encoding='utf-8') as f:
            config_data = yaml.safe_load(f) or {}

        review_data = dict(config_data.get('review', {}))
        patterns = review_data.get('exclude_patterns', [])
        if isinstance(patterns, str):
            review_data['exclude_patterns'] = parse_exclude_patterns(patterns)

        rules = review_data.get('review_rules', "")
        if isinstance(rules, dict):
            # YAML lets users write the rules inline instead of as a JSON string
            review_data['review_rules'] = json.dumps(rules)

        return cls(
            github=GitHubConfig(**config_data.get('github', {})),
            openai=OpenAIConfig(**config_data.get('openai', {})),
            review=ReviewConfig(**review_data),
            logging=LoggingConfig(**config_data.get('logging', {})),
            event_path=config_data.get('event_path'),
            event_name=config_data.get('event_name'),
        )

    def validate(self) -> None:
        """설정 유효성 검사"""
        errors = []

        if not self.github.token:
            errors.append("GitHub token is required")

        if not self.openai.api_key:
            errors.append("OpenAI API key is required")

        if not self.openai.model:
            errors.append("OpenAI model is required")

        if self.github.timeout_seconds <= 0:
            errors.append("GitHub timeout must be positive")

        try:
            self.review.rules
        except ReviewRulesError as e:
            errors.append(str(e))

        valid_log_levels = {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}
        if self.logging.level.upper() not in valid_log_levels:
            errors.append(f"Invalid log level: {self.logging.level}")

        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

    def to_dict(self) -> Dict[str, Any]:
        """설정을 딕셔너리로 변환"""
        return {
            'github': {
                'api_base_url': self.github.api_base_url,
                'timeout_seconds': self.github.timeout_seconds,
                # 보안상 토큰은 제외
            },
            'openai': {
                'model': self.openai.model,
                'base_url': self.openai.base_url,
            },
            'review': {
                'review_rules': self.review.review_rules,
                'exclude_patterns': list(self.review.exclude_patterns),
            },
            'logging': {
                'level': self.logging.level,
                'format': self.logging.format,
                'file_path': self.logging.file_path,
                'max_file_size': self.logging.max_file_size,
                'backup_count': self.logging.backup_count,
            },
            'event_path': self.event_path,
            'event_name': self.event_name,
        }


def setup_logging(config: LoggingConfig) -> None:
    """로깅 설정"""
    logging.basicConfig(
        level=getattr(logging, config.level.upper()),
        format=config.format,
    )

    # 파일 로깅이 설정된 경우 로테이션 설정
    if config.file_path:
        from logging.handlers import RotatingFileHandler

        handler = RotatingFileHandler(
            config.file_path,
            maxBytes=config.max_file_size,
            backupCount=config.backup_count,
        )
        handler.setFormatter(logging.Formatter(config.format))

        # 루트 로거에 핸들러 추가
        logging.getLogger().addHandler(handler)
