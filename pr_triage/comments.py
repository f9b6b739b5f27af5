"""Filtering of bot-authored comments out of a pull request's discussion."""

import logging
from typing import Iterable, List

from .models import Comment, PullRequest


# Automation accounts whose login does not give them away
DEFAULT_BOT_ACCOUNTS = [
    'gitstream-cm',
]


class BotDetector:
    """Decides whether a comment was written by automation.

    A comment counts as a bot comment when any of these hold:
      - the author's account type is 'Bot'
      - the author's login contains 'bot' (case-sensitive)
      - the author's login is one of the known automation accounts

    This is a heuristic: bots without 'bot' in their name slip through and
    humans with 'bot' in their username are dropped.
    """

    def __init__(self, known_accounts: Iterable[str] = None):
        """Initialize the detector.

        Args:
            known_accounts: Logins to always treat as bots (uses default if None)
        """
        if known_accounts is None:
            known_accounts = DEFAULT_BOT_ACCOUNTS
        self.known_accounts = set(known_accounts)

    def is_bot(self, comment: Comment) -> bool:
        """Check if a comment was authored by a bot.

        Args:
            comment: The comment to check

        Returns:
            True if the author looks like automation, False otherwise
        """
        return (
            comment.user_type == 'Bot'
            or 'bot' in comment.user
            or comment.user in self.known_accounts
        )


def get_human_comments(pr: PullRequest, bot_detector: BotDetector = None) -> List[Comment]:
    """Merge review and issue comments, dropping those written by bots.

    Args:
        pr: Pull request with comments attached
        bot_detector: Predicate for bot comments (default detector if None)

    Returns:
        Review comments followed by issue comments, in original order
    """
    bot_detector = bot_detector or BotDetector()
    all_comments = pr.review_comments + pr.issue_comments
    human_comments = [c for c in all_comments if not bot_detector.is_bot(c)]

    skipped = len(all_comments) - len(human_comments)
    if skipped:
        logging.debug(f"PR #{pr.number}: Ignoring {skipped} bot comment(s)")

    return human_comments
