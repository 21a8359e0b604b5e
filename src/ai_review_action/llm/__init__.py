"""
LLM Review Engine

This module provides the per-hunk review prompt, the OpenAI model call
and validation of the model's JSON answer.
"""

from .prompts import PromptBuilder
from .generator import GenerationConfig, ReviewGenerator
from .response import parse_review_response

__all__ = ['PromptBuilder', 'GenerationConfig', 'ReviewGenerator', 'parse_review_response']
