"""PR Triage - sorts open pull requests into review triage categories."""

from .models import Category, Comment, CommenterStats, PullRequest, Review, TriageFacts
from .reviews import get_approvals, get_latest_reviews
from .comments import BotDetector, DEFAULT_BOT_ACCOUNTS, get_human_comments
from .commenters import analyze_commenters
from .classifier import PRClassifier, has_high_priority_label, sort_prs_by_priority
from .api_client import GitHubAPIClient
from .fetcher import PullRequestFetcher, parse_repository
from .output import MarkdownReportRenderer

__all__ = [
    'Category',
    'Comment',
    'CommenterStats',
    'PullRequest',
    'Review',
    'TriageFacts',
    'get_approvals',
    'get_latest_reviews',
    'BotDetector',
    'DEFAULT_BOT_ACCOUNTS',
    'get_human_comments',
    'analyze_commenters',
    'PRClassifier',
    'has_high_priority_label',
    'sort_prs_by_priority',
    'GitHubAPIClient',
    'PullRequestFetcher',
    'parse_repository',
    'MarkdownReportRenderer',
]
