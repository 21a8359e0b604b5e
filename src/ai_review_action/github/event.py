"""
Workflow Event Reader

Loads the event payload the workflow runner writes to GITHUB_EVENT_PATH.
"""

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from ..models.event import PullRequestEvent


logger = logging.getLogger(__name__)


class EventPayloadError(Exception):
    """Event payload missing, unreadable or not a pull request event"""


def load_event(event_path: Optional[str]) -> PullRequestEvent:
    """
    Load and validate the triggering event.

    Args:
        event_path: Path of the JSON event payload

    Returns:
        Parsed pull request event

    Raises:
        EventPayloadError: if the file cannot be read or validated
    """
    if not event_path:
        raise EventPayloadError("GITHUB_EVENT_PATH is not set")

    try:
        raw = Path(event_path).read_text(encoding='utf-8')
    except OSError as e:
        raise EventPayloadError(f"Cannot read event payload {event_path}: {e}") from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise EventPayloadError(f"Event payload is not valid JSON: {e}") from e

    try:
        event = PullRequestEvent.model_validate(data)
    except ValidationError as e:
        raise EventPayloadError(f"Event payload is not a pull request event: {e}") from e

    logger.info(f"Loaded '{event.action}' event for {event.owner}/{event.repo}#{event.number}")
    return event
