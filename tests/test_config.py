"""
Unit tests for environment configuration
"""

import os

import pytest
from unittest.mock import patch

from pr_triage.comments import DEFAULT_BOT_ACCOUNTS
from pr_triage.config import DEFAULT_MAX_WORKERS, TriageConfig, load_config


class TestLoadConfig:
    """Test cases for load_config."""

    def load(self, env):
        with patch.dict(os.environ, env, clear=True):
            return load_config(dotenv=False)

    def test_defaults(self):
        """Test the configuration with an empty environment."""
        config = self.load({})
        assert config == TriageConfig()
        assert config.github_token is None
        assert config.review_owner is None
        assert config.max_workers == DEFAULT_MAX_WORKERS
        assert config.bot_accounts == DEFAULT_BOT_ACCOUNTS

    def test_values_from_environment(self):
        """Test that every setting is read from the environment."""
        config = self.load({
            'GITHUB_TOKEN': 'secret',
            'GITHUB_REPO': 'test/repo',
            'REVIEW_OWNER': ' lead ',
            'MAX_WORKERS': '4',
        })
        assert config.github_token == 'secret'
        assert config.repository == 'test/repo'
        assert config.review_owner == 'lead'
        assert config.max_workers == 4

    @pytest.mark.parametrize('value', ['many', '0', '-3'])
    def test_invalid_max_workers(self, value, caplog):
        """Test that invalid MAX_WORKERS values fall back to the default."""
        config = self.load({'MAX_WORKERS': value})
        assert config.max_workers == DEFAULT_MAX_WORKERS
        assert f"Invalid MAX_WORKERS value '{value}'" in caplog.text

    def test_extra_bot_accounts(self):
        """Test that BOT_ACCOUNTS extends the default list without duplicates."""
        config = self.load({'BOT_ACCOUNTS': 'ci-runner, gitstream-cm ,,release-train'})
        assert config.bot_accounts == ['gitstream-cm', 'ci-runner', 'release-train']

    def test_default_bot_accounts_not_shared(self):
        """Test that configs do not share the default list."""
        config = TriageConfig()
        config.bot_accounts.append('someone')
        assert 'someone' not in DEFAULT_BOT_ACCOUNTS

    def test_loads_dotenv_file(self, tmp_path, monkeypatch):
        """Test that settings are read from a .env file in the working directory."""
        (tmp_path / '.env').write_text('REVIEW_OWNER=from-dotenv\n')
        monkeypatch.chdir(tmp_path)

        with patch.dict(os.environ, {}, clear=True):
            config = load_config()

        assert config.review_owner == 'from-dotenv'
