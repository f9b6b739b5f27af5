"""Rule cascade assigning each open pull request to one triage category."""

import logging
from typing import Callable, Dict, List, Optional, Tuple

from .models import Category, PullRequest, TriageFacts
from .reviews import get_approvals
from .comments import BotDetector, get_human_comments
from .commenters import analyze_commenters


HIGH_PRIORITY_LABEL_PATTERNS = [
    'high priority',
    'high-priority',
    'priority : high',
    'urgent',
    'critical',
]

# Order in which categories appear in the report
CATEGORY_ORDER = [
    Category.HIGH_PRIORITY,
    Category.NEED_ONE_MORE_APPROVAL,
    Category.NEEDS_PROLIFIC_COMMENTERS_APPROVAL,
    Category.REQUIRES_REVIEW,
    Category.HAS_COMMENTS_TO_FIX,
    Category.NEEDS_MERGING,
]


def has_high_priority_label(pr: PullRequest) -> bool:
    """Check if any label marks the pull request as high priority (case-insensitive)."""
    return any(
        pattern in label.lower()
        for label in pr.labels
        for pattern in HIGH_PRIORITY_LABEL_PATTERNS
    )


def sort_prs_by_priority(prs: List[PullRequest]) -> List[PullRequest]:
    """Sort pull requests high priority first, then newest first.

    Pull requests created at the same time keep their input order.
    """
    newest_first = sorted(prs, key=lambda pr: pr.created_at, reverse=True)
    return sorted(newest_first, key=lambda pr: not has_high_priority_label(pr))


def _needs_merging(facts: TriageFacts) -> bool:
    return (
        facts.approval_count >= 2
        and not facts.commenters.has_comments_to_fix
        and not facts.review_owner_approved
    )


# Evaluated top to bottom, the first matching rule wins
TRIAGE_RULES: List[Tuple[Callable[[TriageFacts], bool], Category]] = [
    (lambda facts: facts.high_priority, Category.HIGH_PRIORITY),
    (lambda facts: bool(facts.commenters.prolific_re_requested), Category.NEEDS_PROLIFIC_COMMENTERS_APPROVAL),
    (lambda facts: facts.commenters.has_comments_to_fix, Category.HAS_COMMENTS_TO_FIX),
    (_needs_merging, Category.NEEDS_MERGING),
    (lambda facts: bool(facts.commenters.prolific_without_approval), Category.NEEDS_PROLIFIC_COMMENTERS_APPROVAL),
    (lambda facts: facts.approval_count == 1, Category.NEED_ONE_MORE_APPROVAL),
    (lambda facts: facts.approval_count == 0, Category.REQUIRES_REVIEW),
]


def classify_facts(facts: TriageFacts) -> Optional[Category]:
    """Apply the triage rules to precomputed facts.

    Returns:
        The category of the first matching rule, or None if no rule matches
        (two or more approvals including the review owner's, nothing to fix)
    """
    for predicate, category in TRIAGE_RULES:
        if predicate(facts):
            return category
    return None


class PRClassifier:
    """Classifies open pull requests into triage categories."""

    def __init__(self, review_owner: str = None, bot_detector: BotDetector = None):
        """Initialize the classifier.

        Args:
            review_owner: Login whose approval means the PR is ready to merge
            bot_detector: Predicate used to drop bot comments
        """
        self.review_owner = review_owner
        self.bot_detector = bot_detector or BotDetector()

    def collect_facts(self, pr: PullRequest) -> TriageFacts:
        """Compute the approvals and comment activity of a pull request.

        Args:
            pr: Pull request with reviews and comments attached

        Returns:
            TriageFacts without a category
        """
        approvals = get_approvals(pr)
        human_comments = get_human_comments(pr, self.bot_detector)
        commenters = analyze_commenters(pr, human_comments, approvals)
        review_owner_approved = bool(self.review_owner) and any(
            review.user == self.review_owner for review in approvals
        )

        return TriageFacts(
            pull_request=pr,
            approvals=approvals,
            human_comments=human_comments,
            commenters=commenters,
            review_owner_approved=review_owner_approved,
            high_priority=has_high_priority_label(pr)
        )

    def classify(self, pr: PullRequest) -> Optional[Category]:
        """Get the triage category of a pull request, or None if no rule matches."""
        return classify_facts(self.collect_facts(pr))

    def triage(self, pr: PullRequest) -> TriageFacts:
        """Collect facts for a pull request and classify it."""
        facts = self.collect_facts(pr)
        facts.category = classify_facts(facts)
        return facts

    def categorize_prs(self, prs: List[PullRequest]) -> Dict[Category, List[TriageFacts]]:
        """Group pull requests by triage category.

        Pull requests matching no rule are left out of every category.

        Args:
            prs: Non-draft pull requests with reviews and comments attached

        Returns:
            Dictionary with every category in report order, each mapping to
            its pull requests sorted by priority and creation date
        """
        categories: Dict[Category, List[TriageFacts]] = {category: [] for category in CATEGORY_ORDER}

        for pr in sort_prs_by_priority(prs):
            facts = self.triage(pr)
            if facts.category is None:
                logging.info(f"PR #{pr.number} matches no triage category "
                             f"({facts.approval_count} approvals including review owner), leaving it out")
                continue
            logging.debug(f"PR #{pr.number}: {facts.category.value}")
            categories[facts.category].append(facts)

        return categories
