"""Shared test fixtures."""

from datetime import datetime, timedelta, timezone

import pytest

from pr_triage.models import Comment, PullRequest, Review

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


def at(hours: int) -> datetime:
    """Timestamp a number of hours after BASE_TIME."""
    return BASE_TIME + timedelta(hours=hours)


@pytest.fixture
def make_pr():
    """Factory for pull requests with sensible defaults."""
    def _make_pr(number=1, author='author', labels=None, requested_reviewers=None,
                 reviews=None, review_comments=None, issue_comments=None, created_at=None, **kwargs):
        kwargs.setdefault('title', f'PR {number}')
        kwargs.setdefault('html_url', f'https://github.com/test/repo/pull/{number}')
        return PullRequest(
            number=number,
            author=author,
            created_at=created_at or at(number),
            repository='test/repo',
            labels=labels or [],
            requested_reviewers=requested_reviewers or [],
            reviews=reviews or [],
            review_comments=review_comments or [],
            issue_comments=issue_comments or [],
            **kwargs
        )
    return _make_pr


@pytest.fixture
def approval():
    """Factory for APPROVED reviews."""
    def _approval(user, hours=1):
        return Review(user=user, state='APPROVED', submitted_at=at(hours))
    return _approval


@pytest.fixture
def comments():
    """Factory for a run of human comments by one user."""
    def _comments(user, count=1, user_type='User'):
        return [Comment(user=user, user_type=user_type, body=f'comment {i}') for i in range(count)]
    return _comments
