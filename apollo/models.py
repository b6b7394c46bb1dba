"""
Data models for the Apollo client.
Request descriptions, client configuration and call results.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union


class AuthScheme(Enum):
    """How the API key is presented to Apollo."""
    API_KEY = 'x-api-key'
    BEARER = 'bearer'


class FaultKind(Enum):
    """Why a call failed."""
    TRANSPORT = 'transport'  # DNS, connect, timeout, TLS
    DECODE = 'decode'        # body was not JSON
    REMOTE = 'remote'        # non-2xx status
    ENCODE = 'encode'        # request body could not be serialized


@dataclass(frozen=True)
class ClientConfig:
    """API key and base URL for one client. base_url=None uses the family default."""
    api_key: str
    base_url: Optional[str] = None


@dataclass(frozen=True)
class RequestSpec:
    """One outgoing request, built per call."""
    method: str
    path: str
    params: Optional[Dict[str, str]] = None
    json: Any = None


@dataclass(frozen=True)
class ApiSuccess:
    """Decoded JSON body of a successful call, unmodified."""
    data: Any

    ok = True

    def as_payload(self) -> Any:
        return self.data


@dataclass(frozen=True)
class ApiFailure:
    """A failed call. The fault kind is kept; as_payload() flattens it away."""
    message: str
    kind: FaultKind
    status_code: Optional[int] = None

    ok = False

    def as_payload(self) -> Dict[str, Any]:
        return {'error': True, 'message': self.message}


ApiResult = Union[ApiSuccess, ApiFailure]
