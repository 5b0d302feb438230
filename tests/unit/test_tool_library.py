"""Tests for the built-in tool library."""

from __future__ import annotations

import json
from typing import Any

import pytest

from dissect.tools.inputs import (
    AntiLifeInput,
    DecisionInput,
    DecisionOption,
    DecisionWeights,
    StitcherInput,
)
from dissect.tools.library import (
    ANTI_LIFE,
    BUILTIN_TOOLS,
    CONCEPT_STITCHER,
    CYBER_DEBATE,
    DECISION_PATH,
    JURY,
)
from dissect.tools.prompts import build_structured_prompt


class TestCatalogue:
    def test_fifteen_unique_ids(self) -> None:
        ids = [t.id for t in BUILTIN_TOOLS]
        assert len(ids) == 15
        assert len(set(ids)) == 15

    def test_unnormalized_tools(self) -> None:
        raw_tools = {t.id for t in BUILTIN_TOOLS if t.normalize is None}
        assert raw_tools == {"ANTI_LIFE", "CONCEPT_STITCHER"}

    @pytest.mark.parametrize("tool", BUILTIN_TOOLS, ids=lambda t: t.id)
    def test_required_fields_declared_in_schema(self, tool: Any) -> None:
        assert tool.output_schema["type"] == "OBJECT"
        assert set(tool.required_fields) <= set(tool.output_schema["properties"])

    @pytest.mark.parametrize("tool", BUILTIN_TOOLS, ids=lambda t: t.id)
    def test_hub_metadata(self, tool: Any) -> None:
        assert tool.title
        assert tool.description
        assert "[ROLE_DEFINITION]" in tool.system_prompt
        assert "[OUTPUT_CONTRACT]" in tool.system_prompt


class TestPrompts:
    def test_structured_prompt_sections(self) -> None:
        prompt = build_structured_prompt("role", '{"a": 1}', "terse")
        role = prompt.index("[ROLE_DEFINITION]")
        contract = prompt.index("[OUTPUT_CONTRACT]")
        style = prompt.index("[STYLE_CONSTRAINTS]")
        assert role < contract < style
        assert '{"a": 1}' in prompt

    def test_text_tool_embeds_input(self) -> None:
        assert "金钱是万恶之源" in JURY.build_user_prompt("金钱是万恶之源")
        assert "AI 会取代程序员" in CYBER_DEBATE.build_user_prompt("AI 会取代程序员")

    def test_anti_life_prompt(self) -> None:
        prompt = ANTI_LIFE.build_user_prompt(AntiLifeInput(profile="开咖啡馆", weakness="没钱"))
        assert "开咖啡馆" in prompt
        assert "没钱" in prompt

    def test_stitcher_prompt(self) -> None:
        prompt = CONCEPT_STITCHER.build_user_prompt(StitcherInput(term_a="区块链", term_b="煎饼"))
        assert '"区块链"' in prompt
        assert '"煎饼"' in prompt

    def test_decision_prompt_is_camel_json(self) -> None:
        decision = DecisionInput(
            title="换工作",
            current_state="稳定",
            options=[DecisionOption(name="留下", emotional_pull=3)],
            weights=DecisionWeights(risk_tolerance=2),
        )
        prompt = DECISION_PATH.build_user_prompt(decision)
        payload = json.loads(prompt.split("\n", 1)[1])
        assert payload["title"] == "换工作"
        assert payload["currentState"] == "稳定"
        assert payload["options"][0]["emotionalPull"] == 3
        assert payload["weights"]["riskTolerance"] == 2
        assert "category" not in payload


class TestInputs:
    def test_camel_aliases_accepted(self) -> None:
        assert StitcherInput.model_validate({"termA": "a", "termB": "b"}).term_a == "a"

    def test_emotional_pull_bounded(self) -> None:
        with pytest.raises(ValueError):
            DecisionOption(name="x", emotional_pull=11)
