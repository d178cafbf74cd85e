import json
from datetime import datetime, timezone

import pytest

from src.adapters.presentation.json_presenter import JsonPresenter
from src.adapters.presentation.markdown_presenter import MarkdownPresenter
from src.adapters.presentation.text_presenter import TextPresenter
from src.application.queries.analysis_result import AnalysisResult, AnalysisStatus
from src.domain.catalog.vendors import SHOPIFY
from src.domain.entities.api_endpoint import ApiEndpoint, HttpMethod
from src.domain.entities.parsed_api import InputSource, ParsedApi


@pytest.fixture
def success():
  return AnalysisResult(
    status=AnalysisStatus.SUCCESS,
    api=SHOPIFY,
    source=InputSource.VENDOR,
    description='Shopify is E-commerce platform for online stores.',
    metadata={'endpoints_found': 4},
    execution_time=0.25,
    timestamp=datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
  )


@pytest.fixture
def failure():
  return AnalysisResult(status=AnalysisStatus.ERROR, error='Unable to analyze API.')


def test_json_presenter(success):
  payload = json.loads(JsonPresenter().present(success))

  assert payload['status'] == 'success'
  assert payload['source'] == 'vendor'
  assert payload['api']['authentication'] == {
    'type': 'apiKey',
    'location': 'header',
    'name': 'X-Shopify-Access-Token',
  }
  assert payload['metadata'] == {'endpoints_found': 4}
  assert payload['timestamp'] == '2024-01-02T03:04:05+00:00'


def test_json_presenter_error(failure):
  payload = json.loads(JsonPresenter().present(failure))
  assert payload['status'] == 'error'
  assert payload['api'] is None
  assert payload['source'] is None
  assert json.loads(JsonPresenter().present_error(ValueError('boom'))) == {'status': 'error', 'error': 'boom'}


def test_markdown_presenter(success):
  text = MarkdownPresenter().present(success)

  assert text.startswith('# Shopify\n')
  assert '**Authentication:** apiKey' in text
  assert '## Summary\nShopify is E-commerce platform for online stores.' in text
  assert '- Track inventory' in text
  assert '| GET | `/products.json` | List products | limit (query), status (query) |' in text
  assert text.endswith('_Analyzed in 0.250s_')


def test_markdown_table_cells_escape_pipes():
  api = ParsedApi(
    name='Search',
    base_url='',
    description='',
    endpoints=(ApiEndpoint(path='/search|all', method=HttpMethod.GET, summary='Find a | b\nacross indexes'),),
  )
  result = AnalysisResult(status=AnalysisStatus.SUCCESS, api=api, source=InputSource.OPENAPI)

  text = MarkdownPresenter().present(result)

  assert '| GET | `/search\\|all` | Find a \\| b across indexes | - |' in text


def test_text_presenter(success):
  text = TextPresenter().present(success)

  assert 'SHOPIFY' in text
  assert 'Base URL: https://{shop}.myshopify.com/admin/api/2023-10' in text
  assert '- GET /orders.json - List orders' in text
  assert 'Capabilities: Manage products, Process orders' in text


@pytest.mark.parametrize('presenter, expected', [
  (TextPresenter(), 'ERROR: Unable to analyze API.'),
  (MarkdownPresenter(), '# Error\n\nUnable to analyze API.'),
])
def test_error_rendering(presenter, failure, expected):
  assert presenter.present(failure) == expected
