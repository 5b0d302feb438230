"""Deep Dissect tools — configs, inputs, results and the built-in library."""

from dissect.tools.config import ToolConfig
from dissect.tools.inputs import (
    AntiLifeInput,
    DecisionInput,
    DecisionOption,
    DecisionWeights,
    StitcherInput,
)
from dissect.tools.prompts import build_structured_prompt
from dissect.tools.registry import ToolRegistry, default_registry
from dissect.tools.results import ToolResult

__all__ = [
    "AntiLifeInput",
    "DecisionInput",
    "DecisionOption",
    "DecisionWeights",
    "StitcherInput",
    "ToolConfig",
    "ToolRegistry",
    "ToolResult",
    "build_structured_prompt",
    "default_registry",
]
