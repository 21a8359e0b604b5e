"""
Review Processing

File filtering ahead of review and mapping of model output to comments.
"""

from .filter import FileFilter
from .mapper import convert_to_comments

__all__ = ['FileFilter', 'convert_to_comments']
