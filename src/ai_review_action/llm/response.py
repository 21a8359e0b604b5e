"""
Model Response Parsing

Validates the JSON document returned by the language model.
"""

import json
import logging
from typing import Optional

from pydantic import ValidationError

from ..models.review import AiReviewItem, MalformedResponse, ParsedReviews, ReviewResponse


logger = logging.getLogger(__name__)


def parse_review_response(content: Optional[str]) -> ReviewResponse:
    """
    Parse the model's message content.

    Args:
        content: Raw message text; empty content is treated as ``{}``

    Returns:
        ParsedReviews when the document has a ``reviews`` list, otherwise a
        MalformedResponse carrying the offending payload
    """
    text = (content or "").strip() or "{}"

    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        return MalformedResponse(reason=f"Error parsing response: {e}", raw=text)

    reviews = document.get('reviews') if isinstance(document, dict) else None
    if not isinstance(reviews, list):
        return MalformedResponse(reason="Invalid response format", raw=document)

    result = ParsedReviews()
    for entry in reviews:
        try:
            result.items.append(AiReviewItem.model_validate(entry))
        except ValidationError as e:
            logger.warning(f"Dropping malformed review item {entry!r}: {e.error_count()} validation errors")
            result.dropped.append(entry)

    return result
