"""
Review Generator

Generates code reviews with an OpenAI chat completion per diff hunk.
Handles the model call and response validation.
"""

import logging
from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional

from openai import OpenAI

from ..models.review import AiReviewItem, MalformedResponse
from .response import parse_review_response


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationConfig:
    """Sampling parameters for the chat completion."""
    temperature: float = 0.7
    max_tokens: int = 700
    top_p: float = 1
    frequency_penalty: float = 0.5
    presence_penalty: float = 0


class ReviewGenerator:
    """
    Generates code reviews using an OpenAI chat model.

    Every failure is contained here: callers get ``None`` and the
    problem is logged.
    """

    def __init__(
        self,
        model_name: str,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        client: Optional[OpenAI] = None,
        generation_config: Optional[GenerationConfig] = None
    ):
        """
        Initialize review generator.

        Args:
            model_name: Chat model identifier
            api_key: OpenAI API key
            base_url: Alternative OpenAI-compatible endpoint
            client: Preconfigured client, used instead of building one
            generation_config: Sampling parameters
        """
        self.model_name = model_name
        self.client = client or OpenAI(api_key=api_key, base_url=base_url)
        self.generation_config = generation_config or GenerationConfig()

    def get_ai_response(self, prompt: str) -> Optional[List[AiReviewItem]]:
        """
        Ask the model to review a prompt.

        Args:
            prompt: Complete review prompt

        Returns:
            Review items, or None when the call or its output was unusable
        """
        try:
            response = self.client.chat.completions.create(
                model=self.model_name,
                **asdict(self.generation_config),
                response_format={"type": "json_object"},
                messages=[
                    {
                        "role": "system",
                        "content": prompt,
                    }
                ],
            )
            content = response.choices[0].message.content
        except Exception as e:
            logger.error(f"Model call failed: {e}")
            return None

        result = parse_review_response(content)
        if isinstance(result, MalformedResponse):
            logger.error(f"{result.reason}: {result.raw!r}")
            return None

        logger.debug(f"Model returned {len(result.items)} review items")
        return result.items

    def get_model_info(self) -> Dict[str, Any]:
        """Get information about the configured model."""
        return {
            'model_name': self.model_name,
            'generation_config': asdict(self.generation_config),
        }
