"""Application-level analysis result representation."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional

from src.domain.entities.parsed_api import InputSource, ParsedApi


class AnalysisStatus(str, Enum):
  SUCCESS = 'success'
  ERROR = 'error'


@dataclass
class AnalysisResult:
  status: AnalysisStatus
  api: Optional[ParsedApi] = None
  source: Optional[InputSource] = None
  description: Optional[str] = None
  metadata: Dict[str, Any] = field(default_factory=dict)
  execution_time: float = 0.0
  timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
  error: Optional[str] = None
