"""GitHub API client for making requests and handling pagination."""

import os
import logging
from typing import Dict, List
import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .exceptions import GitHubAccessError

GITHUB_API_URL = 'https://api.github.com'


class GitHubAPIClient:
    """Handles GitHub API requests with retry logic and pagination."""

    def __init__(self, token: str = None, base_url: str = GITHUB_API_URL, pool_size: int = 20):
        """Initialize the GitHub API client.

        Args:
            token: GitHub personal access token for authentication
            base_url: Root URL of the GitHub REST API
            pool_size: Maximum number of pooled connections
        """
        # Use provided token or fall back to environment variable
        self.token = token or os.environ.get('GITHUB_TOKEN')
        self.base_url = base_url.rstrip('/')
        self.session = requests.Session()

        adapter = HTTPAdapter(
            pool_connections=pool_size,
            pool_maxsize=pool_size,
            max_retries=Retry(
                total=3,
                backoff_factor=0.3,
                status_forcelist=[500, 502, 503, 504]
            )
        )
        self.session.mount('https://', adapter)
        self.session.mount('http://', adapter)

        self.session.headers.update({
            'Accept': 'application/vnd.github.v3+json',
            'User-Agent': 'pr-triage'
        })

        if self.token:
            self.session.headers['Authorization'] = f'token {self.token}'
            logging.info("Initialized GitHub API client with token")
        else:
            logging.warning("No GitHub token provided. Rate limits will be much lower.")
            logging.warning("Set GITHUB_TOKEN environment variable or pass token as argument.")

    def url(self, path: str) -> str:
        """Build an absolute API URL from a path like '/repos/owner/repo/pulls'."""
        return f"{self.base_url}/{path.lstrip('/')}"

    def get_paginated(self, url: str, params: Dict = None) -> List[Dict]:
        """Fetch all pages of a paginated GitHub API endpoint.

        Args:
            url: The API endpoint URL
            params: Query parameters

        Returns:
            List of all items from all pages

        Raises:
            GitHubAccessError: On a 403 response
            requests.exceptions.HTTPError: On any other error status
        """
        results = []
        page = 1
        per_page = 100

        params = dict(params or {})
        params['per_page'] = per_page

        while True:
            logging.debug(f"Fetching page {page} from {url}")
            response = self.session.get(url, params={**params, 'page': page})

            if response.status_code == 403:
                logging.error(f"Access denied for {url}: {response.text}")
                raise GitHubAccessError(
                    "Rate limited or insufficient permissions. "
                    "Consider setting GITHUB_TOKEN environment variable"
                )

            response.raise_for_status()
            data = response.json()

            if not data:
                break

            results.extend(data)

            # Check if there are more pages
            if len(data) < per_page:
                break

            page += 1

        logging.debug(f"Fetched {len(results)} total items from {url}")
        return results
