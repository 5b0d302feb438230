"""Deep Dissect — multi-provider orchestration for themed LLM analysis tools."""

from dissect.factory import create_orchestrator
from dissect.history import InteractionLog, RequestRecord
from dissect.orchestration import RequestOrchestrator
from dissect.settings import DissectSettings, SettingsManager
from dissect.suite import ToolSuite

__all__ = [
    "DissectSettings",
    "InteractionLog",
    "RequestOrchestrator",
    "RequestRecord",
    "SettingsManager",
    "ToolSuite",
    "create_orchestrator",
]
