"""Domain service that maps OpenAPI/Swagger documents onto ParsedApi."""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple

from src.domain.entities.api_endpoint import (
  ApiEndpoint,
  ApiParameter,
  ApiResponse,
  HttpMethod,
  ParameterLocation,
)
from src.domain.entities.parsed_api import ParsedApi
from src.domain.services.capabilities import derive_capabilities
from src.domain.value_objects.api_authentication import ApiAuthentication

logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = 'application/json'

# Swagger 2 form fields travel in the request body.
_LOCATION_ALIASES = {'formData': ParameterLocation.BODY}


def _mapping(value: Any) -> Mapping[str, Any]:
  return value if isinstance(value, Mapping) else {}


def _json_media(owner: Mapping[str, Any]) -> Mapping[str, Any]:
  """The ``application/json`` entry of an object's ``content`` map, or an empty mapping."""
  return _mapping(_mapping(owner.get('content')).get(JSON_MEDIA_TYPE))


class OpenApiTransformer:
  """Builds a ParsedApi from an already-parsed OpenAPI 3 or Swagger 2 mapping."""

  def transform(self, document: Mapping[str, Any]) -> ParsedApi:
    endpoints: List[ApiEndpoint] = []

    paths = document.get('paths') or {}
    if not isinstance(paths, Mapping):
      paths = {}

    for path, path_item in paths.items():
      if not isinstance(path_item, Mapping):
        continue

      for method_key, operation in path_item.items():
        method = HttpMethod.parse(method_key)
        if method is None:
          continue
        endpoints.append(self._build_endpoint(path, method, operation if isinstance(operation, Mapping) else {}))

    info = document.get('info')
    if not isinstance(info, Mapping):
      info = {}
    return ParsedApi(
      name=info.get('title') or 'Unknown API',
      base_url=self._base_url(document),
      description=info.get('description') or '',
      endpoints=tuple(endpoints),
      authentication=self._authentication(document),
      capabilities=derive_capabilities(endpoints),
    )

  def _build_endpoint(self, path: str, method: HttpMethod, operation: Mapping[str, Any]) -> ApiEndpoint:
    declared = operation.get('parameters')
    parameters = self._declared_parameters(declared if isinstance(declared, list) else [])
    parameters.extend(self._body_parameters(operation.get('requestBody')))

    return ApiEndpoint(
      path=path,
      method=method,
      summary=operation.get('summary') or '',
      description=operation.get('description') or '',
      tags=self._tags(operation.get('tags')),
      parameters=tuple(parameters),
      responses=tuple(self._responses(_mapping(operation.get('responses')))),
    )

  @staticmethod
  def _tags(tags: Any) -> Tuple[str, ...]:
    if isinstance(tags, str):
      return (tags,)
    if not isinstance(tags, list):
      return ()
    return tuple(tag for tag in tags if isinstance(tag, str))

  @staticmethod
  def _declared_parameters(params: List[Any]) -> List[ApiParameter]:
    parameters: List[ApiParameter] = []
    for param in params:
      if not isinstance(param, Mapping) or not param.get('name'):
        logger.debug('Skipping parameter without a name: %r', param)
        continue

      schema = param.get('schema') if isinstance(param.get('schema'), Mapping) else {}
      declared_type = schema.get('type') if 'schema' in param else param.get('type')
      example = param.get('example', schema.get('example'))

      location_key = param.get('in', 'query')
      location = _LOCATION_ALIASES.get(location_key)
      if location is None:
        try:
          location = ParameterLocation(location_key)
        except ValueError:
          location = ParameterLocation.QUERY

      parameters.append(ApiParameter(
        name=param['name'],
        type=declared_type or 'string',
        required=bool(param.get('required', False)),
        description=param.get('description') or '',
        location=location,
        example=example,
      ))
    return parameters

  @staticmethod
  def _body_parameters(request_body: Any) -> List[ApiParameter]:
    """One body parameter per property of the JSON request body schema."""
    if not isinstance(request_body, Mapping):
      return []

    schema = _json_media(request_body).get('schema')
    if not isinstance(schema, Mapping):
      return []

    required = schema.get('required')
    required_names = set(required) if isinstance(required, list) else set()

    parameters: List[ApiParameter] = []
    for name, prop in _mapping(schema.get('properties')).items():
      prop = prop if isinstance(prop, Mapping) else {}
      parameters.append(ApiParameter(
        name=name,
        type=prop.get('type') or 'string',
        required=name in required_names,
        description=prop.get('description') or '',
        location=ParameterLocation.BODY,
        example=prop.get('example'),
      ))
    return parameters

  @staticmethod
  def _responses(responses: Mapping[str, Any]) -> List[ApiResponse]:
    parsed: List[ApiResponse] = []
    for code, response in responses.items():
      try:
        status_code = int(code)
      except (TypeError, ValueError):
        logger.debug('Skipping non-numeric response key %r', code)
        continue

      response = response if isinstance(response, Mapping) else {}
      json_content = _json_media(response)
      parsed.append(ApiResponse(
        status_code=status_code,
        description=response.get('description') or '',
        schema=json_content.get('schema'),
        example=json_content.get('example'),
      ))
    return parsed

  @staticmethod
  def _base_url(document: Mapping[str, Any]) -> str:
    servers = document.get('servers')
    if isinstance(servers, list) and servers and isinstance(servers[0], Mapping):
      return servers[0].get('url') or ''
    return ''

  @staticmethod
  def _authentication(document: Mapping[str, Any]) -> ApiAuthentication:
    """Use the first declared security scheme (declaration order)."""
    components = document.get('components')
    schemes: Optional[Dict[str, Any]] = components.get('securitySchemes') if isinstance(components, Mapping) else None
    if schemes is None:
      schemes = document.get('securityDefinitions')
    if not isinstance(schemes, Mapping) or not schemes:
      return ApiAuthentication()
    return ApiAuthentication.from_security_scheme(next(iter(schemes.values())))
