"""Command object representing an API analysis request."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AnalyzeApiCommand:
  """Command for describing an API given as vendor name, OpenAPI document or URL."""
  api_input: str
  include_description: bool = True

  def __post_init__(self) -> None:
    if not self.api_input or not self.api_input.strip():
      raise ValueError('api_input is required')
