"""Value objects describing how an external API authenticates callers."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class AuthType(str, Enum):
  API_KEY = 'apiKey'
  BEARER = 'bearer'
  OAUTH = 'oauth'
  BASIC = 'basic'


class ApiKeyLocation(str, Enum):
  HEADER = 'header'
  QUERY = 'query'


@dataclass(frozen=True)
class ApiAuthentication:
  """Authentication scheme declared by an API."""

  type: AuthType = AuthType.API_KEY
  location: Optional[ApiKeyLocation] = None
  name: Optional[str] = None

  @classmethod
  def from_security_scheme(cls, scheme: Any) -> 'ApiAuthentication':
    """Map an OpenAPI security scheme object, falling back to a bare API key."""
    if not isinstance(scheme, dict):
      return cls()

    scheme_type = str(scheme.get('type', '')).lower()
    if scheme_type == 'http' and str(scheme.get('scheme', '')).lower() == 'bearer':
      return cls(type=AuthType.BEARER)

    if scheme_type == 'apikey':
      location = scheme.get('in')
      return cls(
        type=AuthType.API_KEY,
        location=ApiKeyLocation(location) if location in ('header', 'query') else None,
        name=scheme.get('name'),
      )

    return cls()

  def to_dict(self) -> Dict[str, str]:
    payload: Dict[str, str] = {'type': self.type.value}
    if self.location is not None:
      payload['location'] = self.location.value
    if self.name is not None:
      payload['name'] = self.name
    return payload
