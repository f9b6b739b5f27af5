"""Data models for pull request triage."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional


def parse_github_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Parse a GitHub ISO 8601 timestamp (e.g. '2024-05-01T12:00:00Z').

    Args:
        value: Timestamp string from the API, or None

    Returns:
        Timezone-aware datetime, or None if no value was given
    """
    if not value:
        return None
    return datetime.fromisoformat(value.replace('Z', '+00:00'))


class Category(Enum):
    """Triage categories a pull request can be assigned to."""
    HIGH_PRIORITY = 'HighPriority'
    NEEDS_PROLIFIC_COMMENTERS_APPROVAL = 'NeedsProlificCommentersApproval'
    HAS_COMMENTS_TO_FIX = 'HasCommentsToFix'
    NEEDS_MERGING = 'NeedsMerging'
    NEED_ONE_MORE_APPROVAL = 'NeedOneMoreApproval'
    REQUIRES_REVIEW = 'RequiresReview'


@dataclass
class Review:
    """A reviewer's verdict on a pull request at a point in time."""
    user: str
    state: str
    submitted_at: Optional[datetime] = None

    @classmethod
    def from_api(cls, data: Dict) -> 'Review':
        return cls(
            user=data['user']['login'],
            state=data['state'],
            submitted_at=parse_github_timestamp(data.get('submitted_at')),
        )


@dataclass
class Comment:
    """A review comment or conversation comment on a pull request."""
    user: str
    user_type: str = 'User'
    body: str = ''
    created_at: Optional[datetime] = None

    @classmethod
    def from_api(cls, data: Dict) -> 'Comment':
        user = data['user']
        return cls(
            user=user['login'],
            user_type=user.get('type', 'User'),
            body=data.get('body') or '',
            created_at=parse_github_timestamp(data.get('created_at')),
        )


@dataclass
class PullRequest:
    """An open pull request with its reviews and comments attached."""
    number: int
    title: str
    html_url: str
    author: str
    created_at: datetime
    repository: str = ''
    draft: bool = False
    labels: List[str] = field(default_factory=list)
    requested_reviewers: List[str] = field(default_factory=list)
    requested_teams: List[str] = field(default_factory=list)  # never expanded to members
    reviews: List[Review] = field(default_factory=list)
    review_comments: List[Comment] = field(default_factory=list)
    issue_comments: List[Comment] = field(default_factory=list)

    @classmethod
    def from_api(cls, data: Dict, repository: str = '') -> 'PullRequest':
        """Build a PullRequest from a GitHub pulls API item.

        Missing label and reviewer-request fields are normalized to empty
        lists. Reviews and comments are attached separately.

        Args:
            data: Pull request JSON from the GitHub API
            repository: Repository in 'owner/repo' form

        Returns:
            PullRequest without reviews or comments
        """
        return cls(
            number=data['number'],
            title=data['title'],
            html_url=data['html_url'],
            author=data['user']['login'],
            created_at=parse_github_timestamp(data['created_at']),
            repository=repository,
            draft=data.get('draft', False),
            labels=[label['name'] for label in data.get('labels') or []],
            requested_reviewers=[r['login'] for r in data.get('requested_reviewers') or []],
            requested_teams=[t['slug'] for t in data.get('requested_teams') or []],
        )


@dataclass
class CommenterStats:
    """Comment activity on a pull request, derived from human comments."""
    comment_counts: Dict[str, int] = field(default_factory=dict)
    prolific_without_approval: List[str] = field(default_factory=list)
    prolific_re_requested: List[str] = field(default_factory=list)
    has_comments_to_fix: bool = False


@dataclass
class TriageFacts:
    """Everything the classifier and the report know about one pull request."""
    pull_request: PullRequest
    approvals: List[Review] = field(default_factory=list)
    human_comments: List[Comment] = field(default_factory=list)
    commenters: CommenterStats = field(default_factory=CommenterStats)
    review_owner_approved: bool = False
    high_priority: bool = False
    category: Optional[Category] = None

    @property
    def approval_count(self) -> int:
        return len(self.approvals)

    @property
    def approver_logins(self) -> List[str]:
        return [review.user for review in self.approvals]

    @property
    def comment_count(self) -> int:
        return len(self.human_comments)
