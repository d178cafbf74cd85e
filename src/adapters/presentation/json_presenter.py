"""JSON presenter implementation."""
from __future__ import annotations

import json
from typing import Any, Dict

from src.application.queries.analysis_result import AnalysisResult
from src.ports.input.result_presenter import ResultPresenter


class JsonPresenter(ResultPresenter):
  def present(self, result: AnalysisResult) -> str:
    return json.dumps(self.to_payload(result), ensure_ascii=False, indent=2, default=str)

  @staticmethod
  def to_payload(result: AnalysisResult) -> Dict[str, Any]:
    return {
      'status': result.status.value,
      'source': result.source.value if result.source else None,
      'api': result.api.to_dict() if result.api else None,
      'description': result.description,
      'metadata': result.metadata,
      'execution_time': result.execution_time,
      'timestamp': result.timestamp.isoformat(),
      'error': result.error,
    }

  def present_error(self, error: Exception) -> str:
    return json.dumps({'status': 'error', 'error': str(error)}, ensure_ascii=False, indent=2)
