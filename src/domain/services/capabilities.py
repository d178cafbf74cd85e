"""Derivation of human-readable capability labels from endpoints."""
from __future__ import annotations

from typing import Dict, Iterable, Tuple

from src.domain.entities.api_endpoint import ApiEndpoint, HttpMethod

METHOD_CAPABILITIES: Dict[HttpMethod, str] = {
  HttpMethod.GET: 'Retrieve data',
  HttpMethod.POST: 'Create resources',
  HttpMethod.PUT: 'Update resources',
  HttpMethod.PATCH: 'Update resources',
  HttpMethod.DELETE: 'Delete resources',
}


def derive_capabilities(endpoints: Iterable[ApiEndpoint]) -> Tuple[str, ...]:
  """Collect "Manage {tag}" labels and one verb label per endpoint, deduplicated."""
  # dict keeps first-occurrence order
  capabilities: Dict[str, None] = {}
  for endpoint in endpoints:
    for tag in endpoint.tags:
      capabilities.setdefault(f'Manage {tag}', None)
    capabilities.setdefault(METHOD_CAPABILITIES[endpoint.method], None)
  return tuple(capabilities)
