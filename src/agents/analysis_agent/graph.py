"""API analysis runner based on LangGraph."""
from __future__ import annotations

from typing import Mapping

from langgraph.graph import END, StateGraph

from src.agents.analysis_agent.nodes import ApiAnalysisActions
from src.agents.analysis_agent.state import ApiAnalysisState
from src.application.handlers.protocols import AnalysisRunner
from src.domain.services.api_analyzer import ApiAnalyzer
from src.domain.services.api_describer import ApiDescriber


class ApiAnalysisRunner(AnalysisRunner):
  def __init__(self, analyzer: ApiAnalyzer, describer: ApiDescriber) -> None:
    self._actions = ApiAnalysisActions(analyzer=analyzer, describer=describer)
    self._graph = self._build_graph()

  def _build_graph(self):
    workflow = StateGraph(ApiAnalysisState)
    workflow.add_node('classify', self._actions.classify)
    workflow.add_node('describe', self._actions.describe)
    workflow.add_node('finalize', self._actions.finalize)

    workflow.set_entry_point('classify')
    workflow.add_conditional_edges(
      'classify',
      self._actions.route_after_classify,
      {'describe': 'describe', 'finalize': 'finalize'},
    )
    workflow.add_edge('describe', 'finalize')
    workflow.add_edge('finalize', END)
    return workflow.compile()

  async def run(self, state: Mapping[str, object]) -> Mapping[str, object]:
    return await self._graph.ainvoke(state)
