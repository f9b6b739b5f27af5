"""
Runtime configuration for the PR triage tool.

Settings come from environment variables, optionally loaded from a .env
file. Command-line flags override them.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import find_dotenv, load_dotenv

from .comments import DEFAULT_BOT_ACCOUNTS

DEFAULT_MAX_WORKERS = 10


def _split_list(value: str) -> List[str]:
    return [item.strip() for item in value.split(',') if item.strip()]


@dataclass
class TriageConfig:
    """Settings for a triage run."""
    github_token: Optional[str] = None
    repository: Optional[str] = None
    review_owner: Optional[str] = None
    max_workers: int = DEFAULT_MAX_WORKERS
    bot_accounts: List[str] = field(default_factory=lambda: list(DEFAULT_BOT_ACCOUNTS))


def load_config(dotenv: bool = True) -> TriageConfig:
    """Build a TriageConfig from the environment.

    Args:
        dotenv: Whether to load a .env file first

    Returns:
        TriageConfig with environment values applied
    """
    if dotenv:
        load_dotenv(find_dotenv(usecwd=True))

    config = TriageConfig(
        github_token=os.environ.get('GITHUB_TOKEN') or None,
        repository=os.environ.get('GITHUB_REPO') or None,
        review_owner=os.environ.get('REVIEW_OWNER', '').strip() or None,
    )

    max_workers_env = os.environ.get('MAX_WORKERS')
    if max_workers_env:
        try:
            max_workers = int(max_workers_env)
        except ValueError:
            max_workers = 0

        if max_workers >= 1:
            config.max_workers = max_workers
        else:
            logging.warning(f"Invalid MAX_WORKERS value '{max_workers_env}', using default: {DEFAULT_MAX_WORKERS}")

    bot_accounts_env = os.environ.get('BOT_ACCOUNTS')
    if bot_accounts_env:
        extra_accounts = _split_list(bot_accounts_env)
        config.bot_accounts.extend(a for a in extra_accounts if a not in config.bot_accounts)
        logging.info(f"Treating as bots: {', '.join(config.bot_accounts)}")

    return config
