import json

import pytest
from click.testing import CliRunner

from src.adapters.input.cli.cli_adapter import CLIAdapter
from src.adapters.presentation.text_presenter import TextPresenter


@pytest.fixture
def cli(analysis_service):
  return CLIAdapter(analysis_service, TextPresenter()).build_cli()


def test_analyze_prints_text_report(cli):
  result = CliRunner().invoke(cli, ['analyze', 'slack'])

  assert result.exit_code == 0
  assert 'SLACK' in result.output
  assert '- POST /chat.postMessage - Send message' in result.output
  assert 'Slack is Team communication and collaboration platform.' in result.output


def test_analyze_json_format(cli):
  result = CliRunner().invoke(cli, ['analyze', 'https://api.example.com', '--format', 'json', '--no-description'])

  assert result.exit_code == 0
  payload = json.loads(result.output)
  assert payload['source'] == 'url'
  assert payload['api']['name'] == 'Custom API'
  assert payload['description'] is None


def test_analyze_spec_file(cli, tmp_path):
  spec = tmp_path / 'openapi.yaml'
  spec.write_text(
    'openapi: 3.0.0\n'
    'info:\n'
    '  title: Inventory\n'
    'paths:\n'
    '  /items:\n'
    '    delete:\n'
    '      responses:\n'
    '        "204":\n'
    '          description: Removed\n',
    encoding='utf-8',
  )

  result = CliRunner().invoke(cli, ['analyze', '--file', str(spec), '--format', 'markdown'])

  assert result.exit_code == 0
  assert result.output.startswith('# Inventory')
  assert '| DELETE | `/items` |' in result.output


def test_analyze_unrecognized_input_exits_with_error(cli):
  result = CliRunner().invoke(cli, ['analyze', 'nothing useful here'])

  assert result.exit_code == 1
  assert result.output.startswith('ERROR: Unable to analyze API')


def test_analyze_requires_exactly_one_source(cli, tmp_path):
  assert CliRunner().invoke(cli, ['analyze']).exit_code == 2

  spec = tmp_path / 'spec.json'
  spec.write_text('{}', encoding='utf-8')
  assert CliRunner().invoke(cli, ['analyze', 'stripe', '--file', str(spec)]).exit_code == 2


def test_vendors_command(cli):
  result = CliRunner().invoke(cli, ['vendors'])

  assert result.exit_code == 0
  lines = result.output.strip().splitlines()
  assert len(lines) == 3
  assert lines[0].startswith('stripe')
  assert 'https://slack.com/api' in lines[2]
