"""FastAPI adapter exposing HTTP endpoints."""
from __future__ import annotations

from typing import List

from fastapi import FastAPI, HTTPException, Response
from pydantic import BaseModel, Field

from src.application.commands.analyze_api_command import AnalyzeApiCommand
from src.application.queries.analysis_result import AnalysisStatus
from src.ports.input.analysis_service import AnalysisService
from src.ports.input.result_presenter import ResultPresenter


class AnalyzeApiPayload(BaseModel):
  """Payload describing the API to analyze."""
  input: str = Field(..., min_length=1, description='Vendor name, OpenAPI/Swagger document or API URL')
  include_description: bool = Field(default=True, description='Add a natural-language summary')

  model_config = {
    'json_schema_extra': {
      'examples': [
        {'input': 'stripe', 'include_description': True},
        {'input': 'https://api.example.com/v1', 'include_description': False},
      ]
    }
  }


class VendorPayload(BaseModel):
  id: str
  name: str
  description: str
  url: str


class FastAPIAdapter:
  def __init__(self, analysis_service: AnalysisService, presenter: ResultPresenter):
    self._analysis_service = analysis_service
    self._presenter = presenter
    self.app = FastAPI(
      title='LivelyAPI Analyzer',
      version='0.1.0',
      description='Turns a vendor name, an OpenAPI/Swagger document or a URL into a uniform API description.',
    )
    self._configure_routes()

  def _configure_routes(self) -> None:
    @self.app.post('/api/v1/analyze', tags=['Analysis'])
    async def analyze_api(payload: AnalyzeApiPayload):
      """
      Analyze an API description.

      The input is classified in this order:
      1. A known vendor (Stripe, Shopify, Slack) mentioned anywhere in the text
      2. An OpenAPI/Swagger document in JSON or YAML
      3. A bare URL, described with a placeholder endpoint

      Inputs matching none of these are rejected with HTTP 422.
      """
      try:
        command = AnalyzeApiCommand(
          api_input=payload.input,
          include_description=payload.include_description,
        )
      except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc))

      result = await self._analysis_service.analyze_api(command)
      status_code = 422 if result.status == AnalysisStatus.ERROR else 200
      return Response(
        content=self._presenter.present(result),
        status_code=status_code,
        media_type='application/json',
      )

    @self.app.get('/api/v1/vendors', tags=['Analysis'], response_model=List[VendorPayload])
    async def list_vendors():
      """List the APIs that are recognized by name."""
      return [listing.to_dict() for listing in self._analysis_service.list_vendors()]

    @self.app.get('/api/v1/vendors/{vendor_id}', tags=['Analysis'])
    async def get_vendor(vendor_id: str):
      """Return the full catalog description of one vendor."""
      api = self._analysis_service.get_vendor(vendor_id)
      if api is None:
        raise HTTPException(status_code=404, detail=f'Unknown vendor: {vendor_id}')
      return api.to_dict()

    @self.app.get('/health', tags=['Health'])
    async def health():
      """Health check endpoint."""
      return {'status': 'healthy'}
