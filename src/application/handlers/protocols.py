"""Protocols shared across application handlers."""
from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable


@runtime_checkable
class AnalysisRunner(Protocol):
  """Runs one analysis from an initial state (``api_input``, ``include_description``)
  and returns the final state with ``parsed_api``, ``source``, ``description`` and ``error``."""

  async def run(self, state: Mapping[str, Any]) -> Mapping[str, Any]:
    ...
