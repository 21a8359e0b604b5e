"""
Command Line Entry Point

Runs one review pass for the workflow event and maps the outcome to an
exit code.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .api import PullRequestReviewer
from .config import AppConfig, setup_logging
from .github.event import load_event


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ai-review-action",
        description="Review a pull request with an OpenAI model and post inline comments"
    )
    parser.add_argument("-c", "--config", help="Path to a YAML config file (default: environment)")
    parser.add_argument("-e", "--event-path", help="Path to the event payload (default: $GITHUB_EVENT_PATH)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def set_failed(message: str) -> None:
    """Report a failure as a workflow error annotation."""
    print(f"::error::{message}", flush=True)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = AppConfig.from_yaml(args.config) if args.config else AppConfig.from_env()
        config.validate()

        setup_logging(config.logging)
        if args.verbose:
            logging.getLogger().setLevel(logging.DEBUG)
        logger.debug(f"Configuration: {config.to_dict()}")

        event = load_event(args.event_path or config.event_path)
        result = PullRequestReviewer(config).run(event)
    except Exception as e:
        logger.exception("Review run failed")
        set_failed(str(e))
        return 1

    logger.info(
        f"Run finished for {result.repository}#{result.pr_number}: {result.status}, "
        f"{result.files_reviewed} files, {result.chunks_reviewed} chunks, {len(result.comments)} comments"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
