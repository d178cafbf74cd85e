"""Streamlit adapter for interactive exploration."""
from __future__ import annotations

import asyncio
from typing import Optional

import streamlit as st

from src.application.commands.analyze_api_command import AnalyzeApiCommand
from src.application.queries.analysis_result import AnalysisStatus
from src.ports.input.analysis_service import AnalysisService
from src.ports.input.result_presenter import ResultPresenter

_CUSTOM = 'custom'


class StreamlitAdapter:
  def __init__(self, analysis_service: AnalysisService, presenter: ResultPresenter):
    self._analysis_service = analysis_service
    self._presenter = presenter

  def render(self) -> None:
    st.set_page_config(page_title='LivelyAPI', layout='wide')
    st.title('LivelyAPI')
    st.caption('Describe an API by name, OpenAPI document or URL')

    api_input = self._render_input()
    include_description = st.checkbox('Include summary', value=True, key='include_description')

    if st.button('Analyze API', key='analyze_submit', type='primary'):
      if not api_input or not api_input.strip():
        st.error('Choose a popular API or provide a URL or OpenAPI specification')
        return

      command = AnalyzeApiCommand(api_input=api_input, include_description=include_description)
      with st.spinner('Analyzing...'):
        result = asyncio.run(self._analysis_service.analyze_api(command))

      if result.status == AnalysisStatus.ERROR:
        st.error(result.error)
        return

      st.success(
        f'{result.api.name} analyzed: found {len(result.api.endpoints)} endpoints, '
        f'{len(result.api.capabilities)} capabilities'
      )
      st.markdown(self._presenter.present(result))

  def _render_input(self) -> Optional[str]:
    """Offer the vendor catalog, or a free-form URL / document."""
    listings = {listing.id: listing for listing in self._analysis_service.list_vendors()}
    choice = st.radio(
      'Popular APIs',
      options=[*listings, _CUSTOM],
      format_func=lambda key: (
        f'{listings[key].name} ({listings[key].description})' if key in listings else 'Other API'
      ),
      key='api_choice',
      horizontal=True,
    )

    if choice != _CUSTOM:
      return listings[choice].id

    return st.text_area(
      'API endpoint URL or OpenAPI specification',
      key='api_input',
      placeholder='https://api.example.com/v1 or a pasted JSON/YAML OpenAPI document',
      height=200,
    )
