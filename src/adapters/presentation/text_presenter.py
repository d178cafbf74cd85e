"""Plain text presenter for terminal output."""
from __future__ import annotations

from src.application.queries.analysis_result import AnalysisResult
from src.ports.input.result_presenter import ResultPresenter


class TextPresenter(ResultPresenter):
  def present(self, result: AnalysisResult) -> str:
    if result.error or result.api is None:
      return self.present_error(result.error or 'No API description was produced')

    api = result.api
    lines = [
      '=' * 60,
      api.name.upper(),
      '=' * 60,
      f'Base URL: {api.base_url or "(none)"}',
      f'Source: {result.source.value if result.source else "unknown"}',
      f'Authentication: {api.authentication.type.value}',
      '',
    ]

    if result.description:
      lines.extend([result.description, ''])

    lines.extend([
      '=' * 60,
      'ENDPOINTS',
      '=' * 60,
    ])
    for endpoint in api.endpoints:
      line = f'- {endpoint.identifier()}'
      if endpoint.summary:
        line += f' - {endpoint.summary}'
      lines.append(line)
    lines.append('')

    if api.capabilities:
      lines.append('Capabilities: ' + ', '.join(api.capabilities))
    lines.append(f'Execution time: {result.execution_time:.3f}s')
    return '\n'.join(lines)

  def present_error(self, error) -> str:
    return f'ERROR: {error}'
