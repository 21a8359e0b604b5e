"""
Comment Mapper

Turns model review items into inline comments on a file.
"""

import logging
from typing import List

from ..models.pr_diff import Chunk, DiffFile
from ..models.review import AiReviewItem, GitComment


logger = logging.getLogger(__name__)


def convert_to_comments(diff_file: DiffFile, chunk: Chunk, items: List[AiReviewItem]) -> List[GitComment]:
    """
    Map review items onto a file.

    Items are rejected here instead of being sent to GitHub when their line
    number is not a positive integer, or when it does not address a line of
    the hunk in the new file version. GitHub refuses the whole review if a
    single comment points outside the diff.

    Args:
        diff_file: File the items were produced for
        chunk: Hunk the items were produced for
        items: Model review items

    Returns:
        Comments addressed to the file's new path
    """
    if diff_file.is_deleted or not diff_file.to_path:
        return []

    commentable = set(chunk.new_line_numbers)
    comments = []
    for item in items:
        line = item.line
        if line is None:
            logger.warning(
                f"Skipping review item for {diff_file.to_path} with invalid line number {item.line_number!r}"
            )
            continue

        if line not in commentable:
            logger.warning(f"Skipping review item for {diff_file.to_path}: line {line} is outside {chunk.content}")
            continue

        comments.append(GitComment(body=item.review_comment, path=diff_file.to_path, line=line))

    return comments
