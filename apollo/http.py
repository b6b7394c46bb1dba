"""
Shared HTTP helper for the Apollo API.

Every client method funnels through ApolloHttpClient.perform(): one request,
one ApiResult back. Transport, decode and non-2xx faults are logged and
returned as ApiFailure, never raised.
"""

import logging
from typing import Any, Dict, Optional

import requests

from .models import ApiFailure, ApiResult, ApiSuccess, AuthScheme, ClientConfig, FaultKind, RequestSpec

logger = logging.getLogger(__name__)


def build_headers(api_key: str, auth_scheme: AuthScheme) -> Dict[str, str]:
    """Fixed JSON headers plus the auth header for the given scheme."""
    headers = {
        'Content-Type': 'application/json',
        'Accept': 'application/json',
        'Cache-Control': 'no-cache',
    }
    if auth_scheme is AuthScheme.BEARER:
        headers['Authorization'] = f'Bearer {api_key}'
    else:
        headers['x-api-key'] = api_key
    return headers


def _describe(error: Exception) -> str:
    # Some requests exceptions stringify to ''
    return str(error) or type(error).__name__


class ApolloHttpClient:
    """Sends RequestSpecs for one client and normalizes the outcome."""

    def __init__(self, config: ClientConfig, auth_scheme: AuthScheme, default_base_url: str,
                 session=None, timeout: Optional[float] = None):
        self.config = config
        self.base_url = (config.base_url or default_base_url).rstrip('/')
        self.headers = build_headers(config.api_key, auth_scheme)
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    def url_for(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def request(self, method: str, path: str, params: Optional[Dict[str, str]] = None,
                json: Any = None) -> ApiResult:
        return self.perform(RequestSpec(method=method, path=path, params=params, json=json))

    def perform(self, req: RequestSpec) -> ApiResult:
        url = self.url_for(req.path)
        logger.debug(f"{req.method} {url}")

        try:
            response = self.session.request(
                req.method,
                url,
                headers=self.headers,
                params=req.params,
                json=req.json,
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            # Include response status/body for faster diagnostics
            status = getattr(e.response, 'status_code', None)
            body = getattr(e.response, 'text', '') or ''
            logger.error(f"Apollo API call failed: {req.method} {url}: {e} (status={status}, body={body[:800]})")
            return ApiFailure(message=_describe(e), kind=FaultKind.REMOTE, status_code=status)
        except requests.exceptions.RequestException as e:
            logger.error(f"Apollo API call failed: {req.method} {url}: {e}")
            return ApiFailure(message=_describe(e), kind=FaultKind.TRANSPORT)
        except TypeError as e:
            # requests lets json.dumps TypeErrors (dates, sets, ...) through unwrapped
            logger.error(f"Apollo API request body not serializable: {req.method} {url}: {e}")
            return ApiFailure(message=f"Invalid request body: {_describe(e)}", kind=FaultKind.ENCODE)

        try:
            data = response.json()
        except ValueError as e:
            body = response.text or ''
            logger.error(f"Apollo API returned non-JSON body: {req.method} {url}: {e} "
                         f"(status={response.status_code}, body={body[:800]})")
            return ApiFailure(
                message=f"Invalid JSON in response: {_describe(e)}",
                kind=FaultKind.DECODE,
                status_code=response.status_code,
            )

        return ApiSuccess(data)
