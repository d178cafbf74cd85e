"""State definition for the API analysis LangGraph agent."""
from __future__ import annotations

from typing import Optional, TypedDict

from src.domain.entities.parsed_api import InputSource, ParsedApi


class ApiAnalysisState(TypedDict, total=False):
  # Input fields
  api_input: str
  include_description: bool

  # Classification results
  source: Optional[InputSource]
  parsed_api: Optional[ParsedApi]

  # Summary
  description: Optional[str]

  # Status tracking
  error: Optional[str]
  step: str
