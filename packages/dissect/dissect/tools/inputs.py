"""Structured inputs for the tools that take more than one text field."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AntiLifeInput(_CamelModel):
    """A plan to autopsy and the weakness its author already suspects."""

    profile: str
    weakness: str = ""


class StitcherInput(_CamelModel):
    """Two unrelated concepts to stitch into one startup pitch."""

    term_a: str
    term_b: str


class DecisionOption(_CamelModel):
    name: str
    desc: str = ""
    pros: str = ""
    cons: str = ""
    emotional_pull: float = Field(default=5, ge=0, le=10)


class DecisionWeights(_CamelModel):
    risk_tolerance: float = 5
    stability_pref: float = 5
    growth_priority: float = 5
    short_term_pressure: float = 5


class DecisionInput(_CamelModel):
    """A decision with its context, options and the user's priorities."""

    title: str
    category: str | None = None
    timeframe: str | None = None
    urgency: float | None = None
    current_state: str | None = None
    constraints: str | None = None
    irreversibles: str | None = None
    options: list[DecisionOption] = Field(default_factory=list)
    weights: DecisionWeights | None = None

    def to_prompt_json(self) -> str:
        """Compact JSON of the decision, unset fields omitted."""
        return self.model_dump_json(by_alias=True, exclude_none=True)
