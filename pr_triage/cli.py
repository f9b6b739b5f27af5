"""Command-line entry point: fetch, triage and write the markdown report."""

import argparse
import logging
import os
import sys

import requests
from dotenv import find_dotenv, load_dotenv

from .api_client import GitHubAPIClient
from .classifier import PRClassifier
from .comments import BotDetector
from .config import load_config
from .exceptions import TriageError
from .fetcher import PullRequestFetcher, parse_repository
from .output import MarkdownReportRenderer, default_output_file


def configure_logging(log_level: str):
    """Configure root logging (LOG_LEVEL or --log-level)."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format='%(asctime)s %(levelname)s: %(message)s',
        datefmt='%m/%d/%Y %I:%M:%S %p'
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='pr-triage',
        description='Sort the open pull requests of a GitHub repository into triage categories '
                    'and write them to a markdown report.',
        epilog='Environment: GITHUB_TOKEN, GITHUB_REPO, REVIEW_OWNER, LOG_LEVEL, MAX_WORKERS, BOT_ACCOUNTS'
    )
    parser.add_argument('repository', nargs='?',
                        help='GitHub repository (owner/repo or GitHub URL), defaults to GITHUB_REPO')
    parser.add_argument('output_file', nargs='?',
                        help='Output filename (default: owner-repo-prs.md)')
    parser.add_argument('--review-owner',
                        help='Login whose approval marks a PR as ready to merge (overrides REVIEW_OWNER)')
    parser.add_argument('--log-level',
                        help='Logging level (overrides LOG_LEVEL)')
    return parser


def main(argv=None) -> int:
    """Main entry point for the script."""
    args = build_parser().parse_args(argv)

    # Logging has to be configured before the config loader logs anything
    load_dotenv(find_dotenv(usecwd=True))
    configure_logging(args.log_level or os.environ.get('LOG_LEVEL', 'INFO'))
    config = load_config(dotenv=False)

    repository = args.repository or config.repository
    if not repository:
        logging.error("Repository is required (argument or GITHUB_REPO)")
        return 1

    review_owner = args.review_owner or config.review_owner
    if review_owner:
        logging.info(f"Using review owner: {review_owner}")

    print("PR Triage Report Generator")
    print("="*80)

    try:
        owner, repo = parse_repository(repository)

        print(f"Fetching PRs from {owner}/{repo}...")
        api_client = GitHubAPIClient(config.github_token, pool_size=config.max_workers * 2)
        fetcher = PullRequestFetcher(api_client, max_workers=config.max_workers)
        prs = fetcher.fetch_open_pull_requests(owner, repo)
    except (TriageError, requests.exceptions.RequestException) as e:
        logging.error(f"Error: {e}")
        return 1

    print(f"Generating markdown for {len(prs)} PRs...")
    classifier = PRClassifier(review_owner, BotDetector(config.bot_accounts))
    categories = classifier.categorize_prs(prs)

    renderer = MarkdownReportRenderer()
    markdown = renderer.generate_markdown(categories, len(prs), owner, repo)

    filename = args.output_file or default_output_file(owner, repo)
    try:
        renderer.save_markdown(markdown, filename)
    except OSError as e:
        logging.error(f"Could not write {filename}: {e}")
        return 1

    print(f"Successfully generated {filename}")
    renderer.print_summary(categories, len(prs))
    return 0


if __name__ == '__main__':
    sys.exit(main())
