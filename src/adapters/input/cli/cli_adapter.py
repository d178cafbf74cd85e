"""CLI adapter for interacting with the analysis service."""
from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import Dict, Optional

import click

from src.adapters.presentation.json_presenter import JsonPresenter
from src.adapters.presentation.markdown_presenter import MarkdownPresenter
from src.application.commands.analyze_api_command import AnalyzeApiCommand
from src.application.queries.analysis_result import AnalysisStatus
from src.ports.input.analysis_service import AnalysisService
from src.ports.input.result_presenter import ResultPresenter


class CLIAdapter:
  def __init__(self, analysis_service: AnalysisService, presenter: ResultPresenter):
    self._analysis_service = analysis_service
    self._presenters: Dict[str, ResultPresenter] = {
      'text': presenter,
      'json': JsonPresenter(),
      'markdown': MarkdownPresenter(),
    }

  def run(self) -> None:
    self.build_cli()()

  def build_cli(self) -> click.Group:
    cli = click.Group(help='Describe external HTTP APIs from a vendor name, OpenAPI document or URL.')

    @cli.command('analyze')
    @click.argument('api_input', required=False)
    @click.option(
      '--file', 'spec_file',
      type=click.Path(exists=True, dir_okay=False, path_type=Path),
      default=None,
      help='Read an OpenAPI/Swagger document (JSON or YAML) from a file',
    )
    @click.option('--no-description', is_flag=True, default=False, help='Skip the natural-language summary')
    @click.option('--format', 'output_format', type=click.Choice(['text', 'json', 'markdown']), default='text')
    def analyze(
      api_input: Optional[str],
      spec_file: Optional[Path],
      no_description: bool,
      output_format: str,
    ) -> None:
      """Analyze an API.

      Examples:

        cli analyze stripe

        cli analyze https://api.example.com/v1

        cli analyze --file openapi.yaml --format json
      """
      if bool(api_input) == bool(spec_file):
        raise click.UsageError('Provide either API_INPUT or --file, not both')

      text = spec_file.read_text(encoding='utf-8') if spec_file else api_input
      try:
        command = AnalyzeApiCommand(api_input=text, include_description=not no_description)
      except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint='API_INPUT') from exc

      result = asyncio.run(self._analysis_service.analyze_api(command))
      click.echo(self._presenters[output_format].present(result))
      if result.status == AnalysisStatus.ERROR:
        sys.exit(1)

    @cli.command('vendors')
    def vendors() -> None:
      """List the APIs that are recognized by name."""
      for listing in self._analysis_service.list_vendors():
        click.echo(f'{listing.id:<10} {listing.name:<10} {listing.description} ({listing.url})')

    return cli
