"""Markdown presenter for report-style outputs."""
from __future__ import annotations

from src.application.queries.analysis_result import AnalysisResult
from src.ports.input.result_presenter import ResultPresenter


def _cell(text) -> str:
  """Keep a value inside one markdown table cell."""
  return ' '.join(str(text).split()).replace('|', r'\|')


class MarkdownPresenter(ResultPresenter):
  def present(self, result: AnalysisResult) -> str:
    if result.error or result.api is None:
      return self.present_error(result.error or 'No API description was produced')

    api = result.api
    lines = [
      f'# {api.name}',
      '',
      f'**Source:** {result.source.value if result.source else "unknown"}',
      f'**Base URL:** `{api.base_url or "(none)"}`',
      f'**Authentication:** {api.authentication.type.value}',
      '',
    ]

    if result.description:
      lines.extend(['## Summary', result.description, ''])

    if api.capabilities:
      lines.append('## Capabilities')
      lines.extend(f'- {capability}' for capability in api.capabilities)
      lines.append('')

    if api.endpoints:
      lines.append('## Endpoints')
      lines.append('| Method | Path | Summary | Parameters |')
      lines.append('| --- | --- | --- | --- |')
      for endpoint in api.endpoints:
        params = ', '.join(
          f'{p.name}{"*" if p.required else ""} ({p.location.value})' for p in endpoint.parameters
        )
        lines.append(
          f'| {endpoint.method.value} | `{_cell(endpoint.path)}` | {_cell(endpoint.summary)} | {_cell(params or "-")} |'
        )
      lines.append('')

    lines.append(f'_Analyzed in {result.execution_time:.3f}s_')
    return '\n'.join(lines)

  def present_error(self, error) -> str:
    return f'# Error\n\n{error}'
