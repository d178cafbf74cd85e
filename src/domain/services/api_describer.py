"""Domain service producing natural-language blurbs for parsed APIs."""
from __future__ import annotations

from typing import Dict

from src.domain.entities.parsed_api import ParsedApi


class ApiDescriber:
  """Summarizes a ParsedApi in a few sentences."""

  @staticmethod
  def describe(api: ParsedApi) -> str:
    method_counts: Dict[str, int] = {}
    for endpoint in api.endpoints:
      method = endpoint.method.value
      method_counts[method] = method_counts.get(method, 0) + 1

    operations = ', '.join(
      f"{count} {method} endpoint{'s' if count > 1 else ''}"
      for method, count in method_counts.items()
    )

    sentences = [
      f'{api.name} is {api.description}.',
      f"It provides {len(api.capabilities)} main capabilities: {', '.join(api.capabilities)}.",
      f'The API has {len(api.endpoints)} endpoints available for integration.',
      f'Available operations include: {operations or "none"}.',
    ]
    return ' '.join(sentences)
