"""
AI Review Action

Pull request 변경사항을 청크 단위로 LLM에 리뷰 요청하고
인라인 코멘트로 게시하는 GitHub Action
"""

__version__ = "1.0.0"

from .api import PullRequestReviewer, RunResult

__all__ = ["PullRequestReviewer", "RunResult"]
