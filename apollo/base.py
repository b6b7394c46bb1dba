"""Base class for the Apollo resource clients."""

from typing import Optional

from .http import ApolloHttpClient
from .models import AuthScheme, ClientConfig

DEFAULT_BASE_URL = 'https://api.apollo.io/api/v1'


class BaseApolloClient:
    """Holds the ClientConfig and the shared request helper.

    Subclasses set AUTH_SCHEME and DEFAULT_BASE_URL for their resource family
    and implement one thin method per endpoint.
    """

    AUTH_SCHEME = AuthScheme.API_KEY
    DEFAULT_BASE_URL = DEFAULT_BASE_URL

    def __init__(self, config: ClientConfig, session=None, timeout: Optional[float] = None,
                 auth_scheme: Optional[AuthScheme] = None):
        self.config = config
        self._owns_session = session is None
        self._http = ApolloHttpClient(
            config,
            auth_scheme or self.AUTH_SCHEME,
            self.DEFAULT_BASE_URL,
            session=session,
            timeout=timeout,
        )

    @property
    def base_url(self) -> str:
        return self._http.base_url

    def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session:
            self._http.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self.base_url!r})"
