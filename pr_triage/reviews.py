"""Resolution of a pull request's reviews to one current review per reviewer."""

from datetime import datetime, timezone
from typing import Dict, List

from .models import PullRequest, Review

APPROVED = 'APPROVED'

# Pending reviews have no submission time and order before any submitted one
_UNSUBMITTED = datetime.min.replace(tzinfo=timezone.utc)


def _review_time(review: Review) -> datetime:
    return review.submitted_at or _UNSUBMITTED


def get_latest_reviews(reviews: List[Review]) -> Dict[str, Review]:
    """Reduce a review list to the most recent review of each reviewer.

    A review replaces the stored one for its author when it was submitted at
    the same time or later, so on equal timestamps the last one seen wins.

    Args:
        reviews: Reviews in the order returned by the API

    Returns:
        Dictionary mapping reviewer login to their current review
    """
    latest: Dict[str, Review] = {}
    for review in reviews:
        current = latest.get(review.user)
        if current is None or _review_time(review) >= _review_time(current):
            latest[review.user] = review
    return latest


def get_approvals(pr: PullRequest) -> List[Review]:
    """Get the current approvals of a pull request.

    Only a reviewer's latest review counts: a later CHANGES_REQUESTED
    invalidates an earlier approval and vice versa.

    Args:
        pr: Pull request with reviews attached

    Returns:
        One APPROVED review per approving reviewer
    """
    return [
        review for review in get_latest_reviews(pr.reviews).values()
        if review.state == APPROVED
    ]
