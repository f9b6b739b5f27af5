"""Analysis of who commented on a pull request and whether they were asked back."""

from collections import Counter
from typing import List

from .models import Comment, CommenterStats, PullRequest, Review

# Minimum number of human comments for a user to count as a prolific commenter
PROLIFIC_COMMENT_THRESHOLD = 3


def analyze_commenters(
    pr: PullRequest,
    human_comments: List[Comment],
    approvals: List[Review]
) -> CommenterStats:
    """Derive prolific commenters and pending feedback for a pull request.

    A prolific commenter is anyone other than the author with at least
    PROLIFIC_COMMENT_THRESHOLD comments whose current review is not an
    approval. Those still listed in requested_reviewers were re-requested,
    which means the author considers their feedback addressed.

    Comments count as "to fix" while at least one non-author commenter is
    not in requested_reviewers. Team review requests are not expanded, so
    members of a requested team still count as not requested.

    Args:
        pr: The pull request
        human_comments: Comments with bots already filtered out
        approvals: Current approvals of the pull request

    Returns:
        CommenterStats with lists in order of each commenter's first comment
    """
    comment_counts = Counter(comment.user for comment in human_comments)
    approved_users = {review.user for review in approvals}
    requested = set(pr.requested_reviewers)

    prolific_without_approval = [
        user for user, count in comment_counts.items()
        if count >= PROLIFIC_COMMENT_THRESHOLD
        and user not in approved_users
        and user != pr.author
    ]
    prolific_re_requested = [user for user in prolific_without_approval if user in requested]

    has_comments_to_fix = any(
        user != pr.author and user not in requested
        for user in comment_counts
    )

    return CommenterStats(
        comment_counts=dict(comment_counts),
        prolific_without_approval=prolific_without_approval,
        prolific_re_requested=prolific_re_requested,
        has_comments_to_fix=has_comments_to_fix
    )
