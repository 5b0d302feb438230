"""Result models — fully defaulted outputs of the analysis tools.

Every field carries a default, and ``from_raw`` coerces an arbitrary model
response into the model field by field: wrong-typed or falsy values fall
back to the default, list fields keep only items of the declared kind, and
object fields are merged over their defaults. ``from_raw`` is therefore
total and serves as the tool normalizer.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal, TypeVar, get_args, get_origin

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

R = TypeVar("R", bound="ToolResult")


def _coerce(annotation: Any, value: Any, default: Any) -> Any:
    origin = get_origin(annotation)

    if origin is Literal:
        return value if value in get_args(annotation) else default

    if annotation is str:
        return value if isinstance(value, str) and value else default

    if annotation is float:
        if isinstance(value, (int, float)) and not isinstance(value, bool) and value:
            return value
        return default

    if origin is list:
        if not isinstance(value, list):
            return default
        args = get_args(annotation)
        item_type = args[0] if args else Any
        if item_type is str:
            return [item for item in value if isinstance(item, str)]
        if item_type is dict or get_origin(item_type) is dict:
            return [item for item in value if isinstance(item, dict)]
        return list(value)

    if annotation is dict or origin is dict:
        if not isinstance(value, dict):
            return default
        return {**default, **{k: v for k, v in value.items() if v is not None}}

    return default if value is None else value


class ToolResult(BaseModel):
    """Base class for tool outputs; JSON keys are the camelCase contract keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @classmethod
    def from_raw(cls: type[R], raw: Any) -> R:
        """Build a fully populated result from any raw provider value."""
        data = raw if isinstance(raw, Mapping) else {}
        values: dict[str, Any] = {}
        for name, field in cls.model_fields.items():
            default = field.get_default(call_default_factory=True)
            values[name] = _coerce(field.annotation, data.get(field.alias or name), default)
        return cls(**values)

    def to_payload(self) -> dict[str, Any]:
        """Dump with the contract keys, as the view layer expects them."""
        return self.model_dump(by_alias=True)


class BiasResult(ToolResult):
    infection_rate: float = 0
    overall_diagnosis: str = "样本纯净"
    viruses: list[dict[str, Any]] = Field(default_factory=list)
    quarantine_advice: str = "无需隔离"


class WorldSimResult(ToolResult):
    chaos_level: float = 0
    divergence_point: str = ""
    timeline: list[dict[str, Any]] = Field(default_factory=list)
    breaking_news: dict[str, Any] = Field(
        default_factory=lambda: {"headline": "Connection Lost", "source": "System", "date": "Unknown"}
    )
    new_laws: list[str] = Field(default_factory=list)
    survivor_guide: dict[str, Any] = Field(
        default_factory=lambda: {"role": "Unknown", "keySkill": "Survival", "mustHaveItem": "Hope"}
    )


class SubtextResult(ToolResult):
    bullshit_meter: float = 0
    voice_stress_analysis: str = "无明显压力"
    declassified_content: list[dict[str, Any]] = Field(default_factory=list)
    verdict: str = "信息不足"
    power_dynamics: str = "未知"


class EgoBoundaryResult(ToolResult):
    integrity_score: float = 0
    yield_point: dict[str, Any] = Field(
        default_factory=lambda: {"trigger": "Unknown", "pressureLevel": "Unknown"}
    )
    fracture_mode: str = "Unknown"
    structural_weaknesses: list[dict[str, Any]] = Field(default_factory=list)
    reinforcement_plan: str = "None"


class LangSmellResult(ToolResult):
    composition: list[dict[str, Any]] = Field(default_factory=list)
    scent_profile: dict[str, Any] = Field(
        default_factory=lambda: {"topNote": "", "middleNote": "", "baseNote": ""}
    )
    toxicity_ppm: float = Field(default=0, alias="toxicityPPM")
    ai_probability: float = 0
    detection_log: str = ""


class DecisionPathResult(ToolResult):
    # The decision contract uses snake_case keys.
    model_config = ConfigDict(alias_generator=None, populate_by_name=True)

    decision_nature: dict[str, Any] = Field(
        default_factory=lambda: {
            "type": "Unknown",
            "core_conflict": "Unknown",
            "key_uncertainty": "Unknown",
        }
    )
    comparison_matrix: list[dict[str, Any]] = Field(default_factory=list)
    risk_warnings: list[dict[str, Any]] = Field(default_factory=list)
    experimentation_suggestions: list[dict[str, Any]] = Field(default_factory=list)
    stop_loss_signals: list[dict[str, Any]] = Field(default_factory=list)
    cooling_advice: dict[str, Any] = Field(
        default_factory=lambda: {
            "emotional_bias_detected": "",
            "recommended_wait_time": "",
            "recheck_questions": [],
        }
    )


class CostCalcResult(ToolResult):
    invoice_id: str = "INV-NULL"
    currency_unit: str = "Units"
    line_items: list[dict[str, Any]] = Field(default_factory=list)
    total_cost: str = "Unknown"
    fine_print: str = "No refunds."


class DeceptionResult(ToolResult):
    blue_pill_narrative: str = ""
    red_pill_truth: str = ""
    glitch_factor: float = 0
    system_failure_log: list[str] = Field(default_factory=list)
    reality_patch: str = ""


class ExtremeSimResult(ToolResult):
    disaster_level: Literal["CAT 1", "CAT 2", "CAT 3", "CAT 4", "CAT 5"] = "CAT 1"
    current_impact: str = ""
    cascade_timeline: list[dict[str, Any]] = Field(default_factory=list)
    final_collapse: str = ""
    tipping_point: str = ""


class JuryResult(ToolResult):
    council_name: str = "Council"
    chaos_meter: float = 0
    jurors: list[dict[str, Any]] = Field(default_factory=list)
    final_decree: str = "Adjourned"


class DebateResult(ToolResult):
    topic: str = ""
    red_fighter: dict[str, Any] = Field(
        default_factory=lambda: {"name": "Red", "style": "Aggressive"}
    )
    blue_fighter: dict[str, Any] = Field(
        default_factory=lambda: {"name": "Blue", "style": "Defensive"}
    )
    rounds: list[dict[str, Any]] = Field(default_factory=list)
    winner: Literal["RED", "BLUE", "DRAW"] = "DRAW"
    fatality_move: str = ""


class CodeArchResult(ToolResult):
    carbon_dating: str = "Unknown Era"
    tech_stack_layer: str = "Unknown Layer"
    author_profile: dict[str, Any] = Field(
        default_factory=lambda: {"mentalState": "?", "caffeineLevel": "?", "hairLossRisk": "?"}
    )
    spaghetti_index: float = 0
    excavation_report: str = "No data found."
    fossil_faults: list[str] = Field(default_factory=list)
    curator_note: str = "Interesting artifact."


class DevilsResult(ToolResult):
    verdict: str = "逻辑混沌罪"
    logical_crimes: list[dict[str, Any]] = Field(default_factory=list)
    torture_session: list[dict[str, Any]] = Field(default_factory=list)
    forced_confession: str = "被告已疯，无法签署认罪书。"
    sanity_score: float = 0
