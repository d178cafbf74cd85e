"""Canonical in-memory description of an external API."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Tuple

from src.domain.entities.api_endpoint import ApiEndpoint
from src.domain.value_objects.api_authentication import ApiAuthentication


class InputSource(str, Enum):
  """Which classification strategy produced a ParsedApi."""
  VENDOR = 'vendor'
  OPENAPI = 'openapi'
  URL = 'url'


@dataclass(frozen=True)
class ParsedApi:
  name: str
  base_url: str
  description: str
  endpoints: Tuple[ApiEndpoint, ...] = ()
  authentication: ApiAuthentication = field(default_factory=ApiAuthentication)
  capabilities: Tuple[str, ...] = ()

  def to_dict(self) -> Dict[str, Any]:
    return {
      'name': self.name,
      'baseUrl': self.base_url,
      'description': self.description,
      'endpoints': [endpoint.to_dict() for endpoint in self.endpoints],
      'authentication': self.authentication.to_dict(),
      'capabilities': list(self.capabilities),
    }


@dataclass(frozen=True)
class Classification:
  """Result of running an input through the classification chain."""

  source: InputSource
  api: ParsedApi
