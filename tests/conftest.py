"""
Shared fixtures for the test suite.
"""

import json
from unittest.mock import Mock

import pytest

from ai_review_action.config import AppConfig, GitHubConfig, OpenAIConfig, ReviewConfig


APP_DIFF = """diff --git a/src/app.ts b/src/app.ts
index 83db48f..bf269f4 100644
--- a/src/app.ts
+++ b/src/app.ts
@@ -8,3 +8,4 @@ export function main() {
 const a = 1;
 const b = 2;
+const c = 3;
 return a + b;
"""

README_DIFF = """diff --git a/README.md b/README.md
index 1111111..2222222 100644
--- a/README.md
+++ b/README.md
@@ -1,2 +1,2 @@
 # Project
-Old intro
+New intro
"""

ACTION_ENV_KEYS = [
    "INPUT_GITHUB_TOKEN", "GITHUB_TOKEN",
    "INPUT_OPENAI_API_KEY", "OPENAI_API_KEY",
    "INPUT_OPENAI_API_MODEL", "OPENAI_API_MODEL",
    "INPUT_REVIEW_RULES", "REVIEW_RULES",
    "INPUT_EXCLUDE", "EXCLUDE",
    "GITHUB_API_URL", "GITHUB_TIMEOUT", "OPENAI_BASE_URL",
    "LOG_LEVEL", "LOG_FORMAT", "LOG_FILE",
    "GITHUB_EVENT_PATH", "GITHUB_EVENT_NAME",
]


def make_completion(content):
    """Build an object shaped like an OpenAI chat completion."""
    message = Mock()
    message.content = content
    choice = Mock()
    choice.message = message
    response = Mock()
    response.choices = [choice]
    return response


def make_config(review_rules: str = "", exclude_patterns=None) -> AppConfig:
    return AppConfig(
        github=GitHubConfig(token="ghp_test_token"),
        openai=OpenAIConfig(api_key="sk-test", model="gpt-4"),
        review=ReviewConfig(review_rules=review_rules, exclude_patterns=list(exclude_patterns or [])),
    )


def make_event_data(action: str = "opened", **extra) -> dict:
    data = {
        "action": action,
        "number": 7,
        "repository": {"name": "repo", "owner": {"login": "owner"}},
    }
    data.update(extra)
    return data


@pytest.fixture
def clean_env(monkeypatch):
    """Remove action inputs inherited from the surrounding environment."""
    for key in ACTION_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


@pytest.fixture
def event_file(tmp_path):
    """Write an event payload and return its path."""
    def _write(data) -> str:
        path = tmp_path / "event.json"
        path.write_text(json.dumps(data) if not isinstance(data, str) else data, encoding="utf-8")
        return str(path)
    return _write
