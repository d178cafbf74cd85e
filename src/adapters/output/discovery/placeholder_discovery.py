"""Endpoint discovery that describes a URL without contacting it."""
from __future__ import annotations

import logging

from src.domain.entities.api_endpoint import ApiEndpoint, ApiResponse, HttpMethod
from src.domain.entities.parsed_api import ParsedApi
from src.domain.value_objects.api_authentication import ApiAuthentication
from src.ports.output.endpoint_discovery import EndpointDiscovery

logger = logging.getLogger(__name__)


class PlaceholderEndpointDiscovery(EndpointDiscovery):
  """Returns a one-endpoint stub for any URL. No request is made."""

  def discover(self, url: str) -> ParsedApi:
    logger.info('Using placeholder discovery for %s', url)
    return ParsedApi(
      name='Custom API',
      base_url=url,
      description='Custom API endpoint',
      endpoints=(
        ApiEndpoint(
          path='/',
          method=HttpMethod.GET,
          summary='Root endpoint',
          description='Main API endpoint',
          tags=('general',),
          responses=(ApiResponse(status_code=200, description='Success'),),
        ),
      ),
      authentication=ApiAuthentication(),
      capabilities=('General API operations',),
    )
