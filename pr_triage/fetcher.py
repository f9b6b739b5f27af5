"""Fetching open pull requests with their reviews and comments."""

import re
import logging
from typing import List, Tuple
from concurrent.futures import ThreadPoolExecutor, as_completed

import requests

from .api_client import GitHubAPIClient
from .exceptions import InvalidRepositoryError, RepositoryNotFoundError
from .models import Comment, PullRequest, Review

GITHUB_URL_PATTERN = re.compile(r'github\.com/([^/]+)/([^/?#]+)')


def parse_repository(repo_input: str) -> Tuple[str, str]:
    """Split a repository argument into owner and name.

    Accepts 'owner/repo' or a GitHub URL such as
    'https://github.com/owner/repo.git'.

    Args:
        repo_input: Repository as given on the command line

    Returns:
        Tuple of (owner, repo)

    Raises:
        InvalidRepositoryError: If the input has neither form
    """
    repo_input = repo_input.strip()

    if 'github.com' in repo_input:
        match = GITHUB_URL_PATTERN.search(repo_input)
        if not match:
            raise InvalidRepositoryError(f"Could not find owner/repo in URL '{repo_input}'")
        owner, repo = match.groups()
    elif '/' in repo_input:
        owner, repo = repo_input.split('/')[:2]
    else:
        raise InvalidRepositoryError('Invalid repository format. Use "owner/repo" or GitHub URL')

    repo = re.sub(r'\.git$', '', repo)
    if not owner or not repo:
        raise InvalidRepositoryError(f"Invalid repository '{repo_input}'")

    return owner, repo


class PullRequestFetcher:
    """Builds pull request snapshots from the GitHub REST API."""

    def __init__(self, api_client: GitHubAPIClient, max_workers: int = 10):
        """Initialize the fetcher.

        Args:
            api_client: Client used for all API requests
            max_workers: Maximum number of pull requests fetched in parallel
        """
        self.api_client = api_client
        self.max_workers = max(1, max_workers)

    def fetch_open_pull_requests(self, owner: str, repo: str) -> List[PullRequest]:
        """Fetch all non-draft open pull requests with reviews and comments.

        Args:
            owner: Repository owner
            repo: Repository name

        Returns:
            Pull requests in API order, each fully populated

        Raises:
            RepositoryNotFoundError: If the repository does not exist
            GitHubAccessError: If access is denied or rate limited
        """
        repository = f"{owner}/{repo}"
        url = self.api_client.url(f"/repos/{repository}/pulls")

        try:
            open_prs = self.api_client.get_paginated(url, {'state': 'open'})
        except requests.exceptions.HTTPError as e:
            if e.response is not None and e.response.status_code == 404:
                raise RepositoryNotFoundError(
                    f'Repository "{repository}" not found or not accessible'
                ) from e
            raise

        prs = []
        for data in open_prs:
            if data.get('draft', False):
                logging.debug(f"Skipping draft PR #{data['number']}")
                continue
            prs.append(PullRequest.from_api(data, repository))

        logging.info(f"Found {len(prs)} open PR(s) ready for review in {repository}")

        if prs:
            self._fetch_details_parallel(repository, prs)

        return prs

    def _fetch_details_parallel(self, repository: str, prs: List[PullRequest]):
        """Attach reviews and comments to each pull request in parallel.

        Args:
            repository: Repository in 'owner/repo' form
            prs: Pull requests to populate in place
        """
        max_workers = min(self.max_workers, len(prs))
        fetched = 0

        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            future_to_pr = {
                executor.submit(self._fetch_details, repository, pr): pr
                for pr in prs
            }

            for future in as_completed(future_to_pr):
                future.result()
                fetched += 1
                if fetched % 20 == 0 or fetched == len(prs):
                    print(f"  Progress: {fetched}/{len(prs)} PRs", flush=True)

    def _fetch_details(self, repository: str, pr: PullRequest):
        """Fetch reviews, review comments and issue comments of one pull request.

        On failure the pull request is left with no reviews and no comments.

        Args:
            repository: Repository in 'owner/repo' form
            pr: Pull request to populate in place
        """
        reviews_url = self.api_client.url(f"/repos/{repository}/pulls/{pr.number}/reviews")
        review_comments_url = self.api_client.url(f"/repos/{repository}/pulls/{pr.number}/comments")
        issue_comments_url = self.api_client.url(f"/repos/{repository}/issues/{pr.number}/comments")

        try:
            reviews = [Review.from_api(r) for r in self.api_client.get_paginated(reviews_url)]
            review_comments = [Comment.from_api(c) for c in self.api_client.get_paginated(review_comments_url)]
            issue_comments = [Comment.from_api(c) for c in self.api_client.get_paginated(issue_comments_url)]
        except Exception as e:
            logging.warning(f"Failed to fetch detailed info for PR #{pr.number}: {e}")
            reviews, review_comments, issue_comments = [], [], []

        pr.reviews = reviews
        pr.review_comments = review_comments
        pr.issue_comments = issue_comments
        logging.debug(f"PR #{pr.number}: {len(reviews)} review(s), "
                      f"{len(review_comments) + len(issue_comments)} comment(s)")
