"""Domain errors raised by the API analyzer."""
from __future__ import annotations


class UnrecognizedInputError(ValueError):
  """Raised when an input is neither a known vendor, an OpenAPI document nor a URL."""

  def __init__(self, message: str = 'Unable to analyze API. Please provide a valid URL or OpenAPI specification.'):
    super().__init__(message)
