"""
Apollo account endpoints: create/update/search accounts, bulk stage and
owner changes, and the account stage list.
"""

from typing import Any, Dict, List, Optional

from .base import BaseApolloClient
from .models import ApiResult
from .search import paginate


class AccountClient(BaseApolloClient):
    """Accounts (companies added to your Apollo team). Authenticates with x-api-key."""

    def create_account(self, fields: Optional[Dict[str, Any]] = None) -> ApiResult:
        """Create an account via POST /accounts.

        Typical fields: name, domain, owner_id, account_stage_id, phone,
        raw_address.
        """
        return self._http.request('POST', '/accounts', json=fields or {})

    def update_account(self, account_id: str, fields: Optional[Dict[str, Any]] = None) -> ApiResult:
        """Update an account via PUT /accounts/{account_id}.

        account_id is inserted into the path as-is; it must be URL-path safe.
        """
        return self._http.request('PUT', f'/accounts/{account_id}', json=fields or {})

    def search_accounts(self, filters: Optional[Dict[str, Any]] = None,
                        page: int = 1, per_page: int = 25) -> ApiResult:
        """Search your team's accounts via POST /accounts/search."""
        return self._http.request('POST', '/accounts/search', json=paginate(filters, page, per_page))

    def update_account_stage_for_multiple_accounts(self, account_ids: List[str], stage_id: str) -> ApiResult:
        payload = {
            'account_ids': account_ids,
            'account_stage_id': stage_id,
        }
        return self._http.request('POST', '/accounts/bulk_update', json=payload)

    def update_account_owner_for_multiple_accounts(self, account_ids: List[str], owner_id: str) -> ApiResult:
        payload = {
            'account_ids': account_ids,
            'owner_id': owner_id,
        }
        return self._http.request('POST', '/accounts/update_owners', json=payload)

    def list_account_stages(self) -> ApiResult:
        """All account stages for the team, via GET /account_stages."""
        return self._http.request('GET', '/account_stages')
