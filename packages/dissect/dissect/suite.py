"""Tool suite — one typed entry point per built-in tool."""

from __future__ import annotations

from typing import Any

from dissect.orchestration import RequestOrchestrator
from dissect.tools import library
from dissect.tools.inputs import AntiLifeInput, DecisionInput, StitcherInput
from dissect.tools.results import (
    BiasResult,
    CodeArchResult,
    CostCalcResult,
    DebateResult,
    DeceptionResult,
    DecisionPathResult,
    DevilsResult,
    EgoBoundaryResult,
    ExtremeSimResult,
    JuryResult,
    LangSmellResult,
    SubtextResult,
    WorldSimResult,
)


class ToolSuite:
    """Binds each built-in tool config and its input shape to an orchestrator."""

    def __init__(self, orchestrator: RequestOrchestrator) -> None:
        self._orchestrator = orchestrator

    def run_anti_life_simulation(self, profile: str, weakness: str) -> dict[str, Any]:
        return self._orchestrator.run(
            library.ANTI_LIFE, AntiLifeInput(profile=profile, weakness=weakness)
        )

    def run_bias_detection(self, text: str) -> BiasResult:
        return self._orchestrator.run(library.BIAS_DETECTOR, text)

    def run_world_simulation(self, premise: str) -> WorldSimResult:
        return self._orchestrator.run(library.WORLD_SIM, premise)

    def run_subtext_analysis(self, text: str) -> SubtextResult:
        return self._orchestrator.run(library.SUBTEXT, text)

    def run_ego_boundary_analysis(self, description: str) -> EgoBoundaryResult:
        return self._orchestrator.run(library.EGO_BOUNDARY, description)

    def run_language_smell(self, text: str) -> LangSmellResult:
        return self._orchestrator.run(library.LANG_SMELL, text)

    def run_decision_matrix(self, decision: DecisionInput) -> DecisionPathResult:
        return self._orchestrator.run(library.DECISION_PATH, decision)

    def run_cost_calculation(self, choice: str) -> CostCalcResult:
        return self._orchestrator.run(library.COST_CALC, choice)

    def run_self_deception(self, narrative: str) -> DeceptionResult:
        return self._orchestrator.run(library.DECEPTION, narrative)

    def run_extreme_simulation(self, habit: str) -> ExtremeSimResult:
        return self._orchestrator.run(library.EXTREME_SIM, habit)

    def run_personality_jury(self, decision: str) -> JuryResult:
        return self._orchestrator.run(library.JURY, decision)

    def run_cyber_debate(self, topic: str) -> DebateResult:
        return self._orchestrator.run(library.CYBER_DEBATE, topic)

    def run_code_archaeology(self, code: str) -> CodeArchResult:
        return self._orchestrator.run(library.CODE_ARCH, code)

    def run_devils_advocate(self, opinion: str) -> DevilsResult:
        return self._orchestrator.run(library.DEVILS_ADVOCATE, opinion)

    def run_concept_stitcher(self, term_a: str, term_b: str) -> dict[str, Any]:
        return self._orchestrator.run(
            library.CONCEPT_STITCHER, StitcherInput(term_a=term_a, term_b=term_b)
        )
