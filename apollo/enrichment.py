"""
Apollo enrichment endpoints: people and organizations, single and bulk.
"""

from typing import Any, Dict, List, Optional

from .base import BaseApolloClient
from .models import ApiResult


def _flag(value: bool) -> str:
    # Apollo expects the literal strings, not JSON booleans
    return 'true' if value else 'false'


class EnrichmentClient(BaseApolloClient):
    """People/organization enrichment. Authenticates with x-api-key."""

    def enrich_person(self, fields: Optional[Dict[str, Any]] = None,
                      reveal_personal_emails: bool = False,
                      reveal_phone_number: bool = False) -> ApiResult:
        """Enrich one person via POST /people/match.

        fields can hold first_name, last_name, email, domain, etc. Revealing
        personal emails or phone numbers costs extra credits.
        """
        params = {
            'reveal_personal_emails': _flag(reveal_personal_emails),
            'reveal_phone_number': _flag(reveal_phone_number),
        }
        return self._http.request('POST', '/people/match', params=params, json=fields or {})

    def bulk_enrich_people(self, people: Optional[List[Dict[str, Any]]] = None) -> ApiResult:
        """Enrich several people in one call via POST /people/bulk_match."""
        return self._http.request('POST', '/people/bulk_match', json={'people': people or []})

    def enrich_organization(self, fields: Optional[Dict[str, Any]] = None) -> ApiResult:
        """Enrich one company via POST /organizations/enrich (usually needs 'domain')."""
        return self._http.request('POST', '/organizations/enrich', json=fields or {})

    def bulk_enrich_organizations(self, domains: Optional[List[str]] = None) -> ApiResult:
        """Enrich a list of company domains via POST /organizations/bulk_enrich."""
        return self._http.request('POST', '/organizations/bulk_enrich', json={'domains': domains or []})
