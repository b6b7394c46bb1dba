"""
Apollo client facade.

Builds the three resource clients from one ApolloConfig so callers wire
everything in one place. Nothing here is global: the caller owns the bundle.
"""

from dataclasses import dataclass
from typing import Optional

from .accounts import AccountClient
from .config import ApolloConfig
from .enrichment import EnrichmentClient
from .search import SearchClient


@dataclass
class ApolloClients:
    enrichment: EnrichmentClient
    search: SearchClient
    accounts: AccountClient

    def close(self) -> None:
        for client in (self.enrichment, self.search, self.accounts):
            client.close()

    def __enter__(self):
        return self

    def __exit__(self, *args) -> None:
        self.close()


def build_clients(config: Optional[ApolloConfig] = None, session=None) -> ApolloClients:
    """Build enrichment, search and account clients.

    config defaults to ApolloConfig.load(). A session, when given, is shared by
    all three clients and left open on close().
    """
    if config is None:
        config = ApolloConfig.load()
    timeout = config.timeout_seconds
    return ApolloClients(
        enrichment=EnrichmentClient(config.enrichment(), session=session, timeout=timeout),
        search=SearchClient(config.search(), session=session, timeout=timeout),
        accounts=AccountClient(config.accounts(), session=session, timeout=timeout),
    )
