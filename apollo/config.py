"""
Configuration for the Apollo clients.
Loads API keys and settings from environment variables, an optional .env
file and an optional JSON secrets file.
"""

import os
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Union

from .models import ClientConfig

logger = logging.getLogger(__name__)

DEFAULT_SECRETS_FILE = Path('config') / 'secrets' / 'apollo-config.json'

# (environment variable, secrets file key) per family
_KEY_SOURCES = {
    'enrichment_api_key': ('APOLLO_ENRICHMENT_API_KEY', 'enrichment_api_key'),
    'search_api_key': ('APOLLO_SEARCH_API_KEY', 'search_api_key'),
    'account_api_key': ('APOLLO_ACCOUNT_API_KEY', 'account_api_key'),
}

# Per-family base URL overrides; each falls back to APOLLO_BASE_URI
_URL_SOURCES = {
    'enrichment_base_url': ('APOLLO_ENRICHMENT_BASE_URI', 'enrichment_base_uri'),
    'search_base_url': ('APOLLO_SEARCH_BASE_URI', 'search_base_uri'),
    'account_base_url': ('APOLLO_ACCOUNT_BASE_URI', 'account_base_uri'),
}


def load_env_file(path: Union[str, Path]) -> None:
    """Load KEY=VALUE lines from a .env file. Variables already set are kept."""
    env_file = Path(path)
    if not env_file.exists():
        return
    with open(env_file) as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith('#') or '=' not in line:
                continue
            key, value = line.split('=', 1)
            os.environ.setdefault(key.strip(), value.strip().strip('"').strip("'"))


def _read_secrets(path: Union[str, Path]) -> Dict[str, str]:
    secrets_file = Path(path)
    if not secrets_file.exists():
        return {}
    try:
        with open(secrets_file, 'r') as f:
            secrets = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"⚠️ Failed to load Apollo secrets from {secrets_file}: {e}")
        return {}
    logger.info(f"Loaded Apollo secrets from {secrets_file}")
    return secrets if isinstance(secrets, dict) else {}


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"⚠️ Ignoring invalid APOLLO_TIMEOUT_SECONDS={raw!r}")
        return None


@dataclass
class ApolloConfig:
    """API keys per resource family plus shared settings.

    base_url applies to every family unless a per-family URL is set; with
    neither, each client uses its own default. timeout_seconds=None leaves
    timeouts to requests.
    """
    enrichment_api_key: str = ''
    search_api_key: str = ''
    account_api_key: str = ''
    base_url: Optional[str] = None
    enrichment_base_url: Optional[str] = None
    search_base_url: Optional[str] = None
    account_base_url: Optional[str] = None
    timeout_seconds: Optional[float] = None

    @classmethod
    def load(cls, env_file: Optional[Union[str, Path]] = None,
             secrets_file: Optional[Union[str, Path]] = None) -> 'ApolloConfig':
        """Load configuration: environment first, then the secrets file.

        Each family key falls back to APOLLO_API_KEY (or 'api_key' in the
        secrets file). Missing keys are logged, not raised.
        """
        if env_file is not None:
            load_env_file(env_file)
        secrets = _read_secrets(secrets_file if secrets_file is not None else DEFAULT_SECRETS_FILE)

        shared_key = os.getenv('APOLLO_API_KEY') or secrets.get('api_key', '')
        settings = {}
        for field_name, (env_var, secrets_key) in _KEY_SOURCES.items():
            settings[field_name] = os.getenv(env_var) or secrets.get(secrets_key) or shared_key
            if not settings[field_name]:
                logger.warning(f"⚠️ {env_var} is not configured (and no APOLLO_API_KEY fallback)")
        for field_name, (env_var, secrets_key) in _URL_SOURCES.items():
            settings[field_name] = os.getenv(env_var) or secrets.get(secrets_key) or None

        return cls(
            base_url=os.getenv('APOLLO_BASE_URI') or secrets.get('base_uri') or None,
            timeout_seconds=_parse_timeout(os.getenv('APOLLO_TIMEOUT_SECONDS')),
            **settings,
        )

    def enrichment(self) -> ClientConfig:
        return ClientConfig(api_key=self.enrichment_api_key, base_url=self.enrichment_base_url or self.base_url)

    def search(self) -> ClientConfig:
        return ClientConfig(api_key=self.search_api_key, base_url=self.search_base_url or self.base_url)

    def accounts(self) -> ClientConfig:
        return ClientConfig(api_key=self.account_api_key, base_url=self.account_base_url or self.base_url)

    def validate(self) -> Dict[str, bool]:
        """Which required settings are present."""
        return {
            'enrichment_api_key': bool(self.enrichment_api_key),
            'search_api_key': bool(self.search_api_key),
            'account_api_key': bool(self.account_api_key),
        }

    def __repr__(self) -> str:
        validation = self.validate()
        return f"ApolloConfig(validated={all(validation.values())}, checks={validation}, base_url={self.base_url!r})"
