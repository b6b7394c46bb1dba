"""
Apollo search endpoints: people, organizations and job postings.
"""

from typing import Any, Dict, Optional

from .base import BaseApolloClient
from .models import ApiResult, AuthScheme


def paginate(filters: Optional[Dict[str, Any]], page: int, per_page: int) -> Dict[str, Any]:
    """Copy filters and set page/per_page. Explicit arguments win over keys already in filters."""
    payload = dict(filters or {})
    payload['page'] = page
    payload['per_page'] = per_page
    return payload


class SearchClient(BaseApolloClient):
    """People/organization search. Authenticates with a Bearer token against /v1."""

    AUTH_SCHEME = AuthScheme.BEARER
    DEFAULT_BASE_URL = 'https://api.apollo.io/v1'

    def search_people(self, filters: Optional[Dict[str, Any]] = None,
                      page: int = 1, per_page: int = 25) -> ApiResult:
        """Search Apollo's people database via POST /people/search.

        filters takes the documented search keys (person_titles,
        person_locations, person_seniorities, ...).
        """
        return self._http.request('POST', '/people/search', json=paginate(filters, page, per_page))

    def search_organizations(self, filters: Optional[Dict[str, Any]] = None) -> ApiResult:
        return self._http.request('POST', '/organizations/search', json=filters or {})

    def search_organization_job_postings(self, filters: Optional[Dict[str, Any]] = None) -> ApiResult:
        return self._http.request('POST', '/organizations/job_postings/search', json=filters or {})
