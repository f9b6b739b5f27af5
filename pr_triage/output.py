"""Markdown report and console summary for triaged pull requests."""

import logging
from datetime import date
from typing import Dict, List

from .models import Category, TriageFacts


# ANSI color codes
GREEN = '\033[92m'
YELLOW = '\033[93m'
RED = '\033[91m'
CYAN = '\033[96m'
BOLD = '\033[1m'
RESET = '\033[0m'

SECTION_HEADINGS = {
    Category.HIGH_PRIORITY: "High Priority :rotating_light:",
    Category.NEED_ONE_MORE_APPROVAL: "Need one more approval :white_check_mark:",
    Category.NEEDS_PROLIFIC_COMMENTERS_APPROVAL: "Needs approvals from previous :sparkles: prolific :sparkles: commenters",
    Category.REQUIRES_REVIEW: "Requires review :writing_hand:",
    Category.HAS_COMMENTS_TO_FIX: "Have some comments to fix :wrench:",
    Category.NEEDS_MERGING: "Needs merging (Reminder for me :zany_face:)",
}

SUMMARY_COLORS = {
    Category.HIGH_PRIORITY: RED,
    Category.NEED_ONE_MORE_APPROVAL: GREEN,
    Category.NEEDS_PROLIFIC_COMMENTERS_APPROVAL: YELLOW,
    Category.REQUIRES_REVIEW: CYAN,
    Category.HAS_COMMENTS_TO_FIX: YELLOW,
    Category.NEEDS_MERGING: GREEN,
}


def default_output_file(owner: str, repo: str) -> str:
    """Get the default report file name for a repository."""
    return f"{owner}-{repo}-prs.md"


class MarkdownReportRenderer:
    """Renders categorized pull requests as a markdown document."""

    def generate_markdown(
        self,
        categories: Dict[Category, List[TriageFacts]],
        total_prs: int,
        owner: str,
        repo: str,
        generated_on: date = None
    ) -> str:
        """Generate the markdown report.

        Args:
            categories: Triaged pull requests grouped by category
            total_prs: Number of open pull requests fetched
            owner: Repository owner
            repo: Repository name
            generated_on: Report date (today if None)

        Returns:
            Markdown text with one section per non-empty category
        """
        generated_on = generated_on or date.today()

        lines = [
            f"# Pull Requests for {owner}/{repo}",
            "",
            f"Generated on: {generated_on.isoformat()}",
            f"Total PRs: {total_prs}",
            "",
        ]

        for category, heading in SECTION_HEADINGS.items():
            entries = categories.get(category, [])
            if not entries:
                continue

            lines.append(f"## {heading}")
            for facts in entries:
                lines.append(self._format_entry(category, facts))
            lines.append("")

        if total_prs == 0:
            lines.append("No open pull requests found.")

        return "\n".join(lines) + "\n"

    def _format_entry(self, category: Category, facts: TriageFacts) -> str:
        """Format one pull request bullet with its category annotation."""
        pr = facts.pull_request
        link = f"- [{pr.title}]({pr.html_url})"
        annotation = self._annotation(category, facts)
        return f"{link} ({annotation})" if annotation else link

    def _annotation(self, category: Category, facts: TriageFacts) -> str:
        if category == Category.HIGH_PRIORITY:
            if facts.approval_count == 0:
                return 'needs review'
            if facts.approval_count == 1:
                return 'needs one more approval'
            return 'ready to merge'

        if category == Category.NEED_ONE_MORE_APPROVAL:
            approver = facts.approver_logins[0] if facts.approvals else 'unknown'
            return f"approved by {approver}"

        if category == Category.NEEDS_PROLIFIC_COMMENTERS_APPROVAL:
            commenters = facts.commenters
            if commenters.prolific_re_requested:
                return f"re-requested: {', '.join(commenters.prolific_re_requested)}"
            return f"waiting for: {', '.join(commenters.prolific_without_approval)}"

        if category == Category.HAS_COMMENTS_TO_FIX:
            count = facts.comment_count
            return f"{count} comment{'s' if count != 1 else ''}"

        if category == Category.NEEDS_MERGING:
            return f"{facts.approval_count} approvals"

        return ''

    def save_markdown(self, markdown: str, filename: str):
        """Write the report to a file.

        Args:
            markdown: Report text
            filename: Output path
        """
        with open(filename, 'w', encoding='utf-8') as f:
            f.write(markdown)
        logging.info(f"Markdown report saved to: {filename}")

    def print_summary(self, categories: Dict[Category, List[TriageFacts]], total_prs: int):
        """Print the number of pull requests in each category.

        Args:
            categories: Triaged pull requests grouped by category
            total_prs: Number of open pull requests fetched
        """
        print("\n" + "="*80)
        print(f"{BOLD}PR TRIAGE SUMMARY{RESET}")
        print("="*80)

        for category in SECTION_HEADINGS:
            count = len(categories.get(category, []))
            if count:
                print(f"{SUMMARY_COLORS[category]}{count:>4}{RESET}  {category.value}")

        classified = sum(len(entries) for entries in categories.values())
        high_priority = len(categories.get(Category.HIGH_PRIORITY, []))
        print(f"\nSummary: {total_prs} total PRs, {high_priority} high priority")
        if classified < total_prs:
            print(f"{YELLOW}{total_prs - classified} PR(s) matched no category{RESET}")
