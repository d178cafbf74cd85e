"""Output port for discovering the endpoints behind a bare URL."""
from __future__ import annotations

from typing import Protocol

from src.domain.entities.parsed_api import ParsedApi


class EndpointDiscovery(Protocol):
  def discover(self, url: str) -> ParsedApi:
    """Describe the API served at ``url``."""
    ...
