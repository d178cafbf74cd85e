"""Application handler for API analysis requests."""
from __future__ import annotations

import logging
import time
from typing import Dict, Mapping

from src.application.commands.analyze_api_command import AnalyzeApiCommand
from src.application.handlers.protocols import AnalysisRunner
from src.application.queries.analysis_result import AnalysisResult, AnalysisStatus
from src.domain.entities.parsed_api import ParsedApi

logger = logging.getLogger(__name__)


class AnalyzeApiHandler:
  """Runs the analysis agent for a command and packages its final state."""

  def __init__(self, agent_runner: AnalysisRunner):
    self._agent_runner = agent_runner

  async def handle(self, command: AnalyzeApiCommand) -> AnalysisResult:
    start = time.perf_counter()
    try:
      agent_response: Mapping[str, object] = await self._agent_runner.run({
        'api_input': command.api_input,
        'include_description': command.include_description,
      })
    except Exception as exc:  # noqa: BLE001
      logger.exception('API analysis failed unexpectedly')
      return AnalysisResult(
        status=AnalysisStatus.ERROR,
        execution_time=time.perf_counter() - start,
        error=str(exc),
      )

    execution_time = time.perf_counter() - start
    error = agent_response.get('error')
    api = agent_response.get('parsed_api')

    metadata: Dict[str, object] = {'step': agent_response.get('step')}
    if isinstance(api, ParsedApi):
      metadata.update({
        'endpoints_found': len(api.endpoints),
        'capabilities_found': len(api.capabilities),
        'methods': self._count_methods(api),
      })

    return AnalysisResult(
      status=AnalysisStatus.ERROR if error else AnalysisStatus.SUCCESS,
      api=api if isinstance(api, ParsedApi) else None,
      source=agent_response.get('source'),
      description=agent_response.get('description'),
      metadata=metadata,
      execution_time=execution_time,
      error=str(error) if error else None,
    )

  @staticmethod
  def _count_methods(api: ParsedApi) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for endpoint in api.endpoints:
      counts[endpoint.method.value] = counts.get(endpoint.method.value, 0) + 1
    return counts
