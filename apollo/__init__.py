"""
Apollo.io API client.
Thin synchronous clients for the enrichment, search and account endpoints.
"""

from .models import ApiFailure, ApiResult, ApiSuccess, AuthScheme, ClientConfig, FaultKind, RequestSpec
from .http import ApolloHttpClient, build_headers
from .enrichment import EnrichmentClient
from .search import SearchClient
from .accounts import AccountClient
from .config import ApolloConfig
from .facade import ApolloClients, build_clients

__all__ = [
    'ApiFailure',
    'ApiResult',
    'ApiSuccess',
    'AuthScheme',
    'ClientConfig',
    'FaultKind',
    'RequestSpec',
    'ApolloHttpClient',
    'build_headers',
    'EnrichmentClient',
    'SearchClient',
    'AccountClient',
    'ApolloConfig',
    'ApolloClients',
    'build_clients',
]
