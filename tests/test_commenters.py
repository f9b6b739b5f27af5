"""
Unit tests for commenter analysis
"""

from pr_triage.commenters import PROLIFIC_COMMENT_THRESHOLD, analyze_commenters
from pr_triage.comments import get_human_comments
from pr_triage.reviews import get_approvals


def analyze(pr):
    return analyze_commenters(pr, get_human_comments(pr), get_approvals(pr))


class TestCommentCounts:
    """Test cases for per-user comment counts."""

    def test_counts_across_both_comment_sources(self, make_pr, comments):
        """Test that review and issue comments are counted together."""
        pr = make_pr(review_comments=comments('alice', 2), issue_comments=comments('alice', 1) + comments('bob', 1))
        stats = analyze(pr)
        assert stats.comment_counts == {'alice': 3, 'bob': 1}

    def test_bot_comments_not_counted(self, make_pr, comments):
        """Test that bot comments do not count."""
        pr = make_pr(issue_comments=comments('dependabot', 5) + comments('alice', 1))
        assert analyze(pr).comment_counts == {'alice': 1}


class TestProlificCommenters:
    """Test cases for prolific commenter detection."""

    def test_threshold(self, make_pr, comments):
        """Test that exactly the threshold makes a commenter prolific."""
        assert PROLIFIC_COMMENT_THRESHOLD == 3
        pr = make_pr(issue_comments=comments('alice', 3) + comments('bob', 2))
        assert analyze(pr).prolific_without_approval == ['alice']

    def test_approvers_excluded(self, make_pr, comments, approval):
        """Test that a commenter whose latest review is an approval is not waited for."""
        pr = make_pr(issue_comments=comments('alice', 4), reviews=[approval('alice')])
        assert analyze(pr).prolific_without_approval == []

    def test_author_excluded(self, make_pr, comments):
        """Test that the PR author is never a prolific commenter."""
        pr = make_pr(author='carol', issue_comments=comments('carol', 10))
        assert analyze(pr).prolific_without_approval == []

    def test_first_comment_order(self, make_pr, comments):
        """Test that prolific commenters are listed in order of their first comment."""
        pr = make_pr(issue_comments=comments('zed', 1) + comments('amy', 3) + comments('zed', 2))
        assert analyze(pr).prolific_without_approval == ['zed', 'amy']

    def test_re_requested_subset(self, make_pr, comments):
        """Test that only requested reviewers are in the re-requested list."""
        pr = make_pr(
            issue_comments=comments('alice', 3) + comments('bob', 3),
            requested_reviewers=['bob', 'dave']
        )
        stats = analyze(pr)
        assert stats.prolific_without_approval == ['alice', 'bob']
        assert stats.prolific_re_requested == ['bob']


class TestHasCommentsToFix:
    """Test cases for the unaddressed-feedback heuristic."""

    def test_commenter_not_requested(self, make_pr, comments):
        """Test that a commenter not asked back means comments to fix."""
        pr = make_pr(issue_comments=comments('alice', 1))
        assert analyze(pr).has_comments_to_fix is True

    def test_all_commenters_requested(self, make_pr, comments):
        """Test that no comments are pending once every commenter is re-requested."""
        pr = make_pr(issue_comments=comments('alice', 1) + comments('bob', 4), requested_reviewers=['alice', 'bob'])
        assert analyze(pr).has_comments_to_fix is False

    def test_only_author_comments(self, make_pr, comments):
        """Test that the author's own comments are not feedback."""
        pr = make_pr(author='carol', issue_comments=comments('carol', 2))
        assert analyze(pr).has_comments_to_fix is False

    def test_only_bot_comments(self, make_pr, comments):
        """Test that bot comments are not feedback."""
        pr = make_pr(issue_comments=comments('gitstream-cm', 2))
        assert analyze(pr).has_comments_to_fix is False

    def test_team_request_does_not_count(self, make_pr, comments):
        """Test that a team review request does not cover its members."""
        pr = make_pr(issue_comments=comments('alice', 1), requested_teams=['core'])
        assert analyze(pr).has_comments_to_fix is True

    def test_no_comments(self, make_pr):
        """Test PR without comments."""
        assert analyze(make_pr()).has_comments_to_fix is False
