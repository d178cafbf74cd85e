"""Domain service that turns free-form input into a ParsedApi.

Inputs are tried against three strategies, first match wins:

1. known vendor (substring match against the catalog),
2. OpenAPI/Swagger document (JSON or YAML with an ``openapi``/``swagger`` field),
3. bare URL (syntax only, handed to an EndpointDiscovery collaborator).

Anything else raises UnrecognizedInputError.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

import yaml
from pydantic import AnyUrl, TypeAdapter, ValidationError

from src.domain.catalog.vendors import match_vendor
from src.domain.entities.parsed_api import Classification, InputSource, ParsedApi
from src.domain.errors import UnrecognizedInputError
from src.domain.services.openapi_transformer import OpenApiTransformer
from src.ports.output.endpoint_discovery import EndpointDiscovery

logger = logging.getLogger(__name__)

_URL_ADAPTER = TypeAdapter(AnyUrl)


@dataclass(frozen=True)
class DocumentReading:
  """Outcome of trying to read an input as an OpenAPI document."""

  document: Optional[Mapping[str, Any]] = None
  reason: Optional[str] = None

  @property
  def found(self) -> bool:
    return self.document is not None

  @classmethod
  def not_a_document(cls, reason: str) -> 'DocumentReading':
    return cls(reason=reason)


class _DocumentLoader(yaml.SafeLoader):
  """SafeLoader that keeps dates and timestamps as plain strings."""


_DocumentLoader.yaml_implicit_resolvers = {
  first: [
    (tag, regexp) for tag, regexp in resolvers
    if tag != 'tag:yaml.org,2002:timestamp'
  ]
  for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def read_document(text: str) -> DocumentReading:
  try:
    parsed = json.loads(text)
  except ValueError as json_error:
    # JSON-shaped text is never re-read as YAML flow syntax.
    if text.lstrip().startswith(('{', '[')):
      return DocumentReading.not_a_document(f'invalid JSON: {json_error}')
    try:
      parsed = yaml.load(text, Loader=_DocumentLoader)
    except yaml.YAMLError:
      return DocumentReading.not_a_document(f'not JSON or YAML: {json_error}')

  if not isinstance(parsed, Mapping):
    return DocumentReading.not_a_document('document is not a mapping')
  if not (parsed.get('openapi') or parsed.get('swagger')):
    return DocumentReading.not_a_document('no openapi or swagger field')
  return DocumentReading(document=parsed)


def is_url(text: str) -> bool:
  try:
    _URL_ADAPTER.validate_python(text)
  except ValidationError:
    return False
  return True


class ApiAnalyzer:
  def __init__(
    self,
    discovery: EndpointDiscovery,
    transformer: Optional[OpenApiTransformer] = None,
  ) -> None:
    self._discovery = discovery
    self._transformer = transformer or OpenApiTransformer()

  def analyze(self, text: str) -> ParsedApi:
    return self.classify(text).api

  def classify(self, text: str) -> Classification:
    vendor = match_vendor(text)
    if vendor is not None:
      return Classification(source=InputSource.VENDOR, api=vendor)

    reading = read_document(text)
    if reading.found:
      return Classification(source=InputSource.OPENAPI, api=self._transformer.transform(reading.document))
    logger.debug('Input is not an OpenAPI document (%s)', reading.reason)

    if is_url(text):
      return Classification(source=InputSource.URL, api=self._discovery.discover(text))

    raise UnrecognizedInputError()
