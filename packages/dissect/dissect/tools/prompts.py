"""System prompt construction shared by every tool."""

from __future__ import annotations


def build_structured_prompt(role: str, contract: str, style: str) -> str:
    """Assemble a system prompt from role, JSON contract and style rules."""
    return f"""
[ROLE_DEFINITION]
{role}

[OUTPUT_CONTRACT]
1. You MUST return a VALID JSON object.
2. Do NOT output any markdown code blocks (like ```json). Just the raw JSON string.
3. The JSON structure must strictly follow this template:
{contract}

[STYLE_CONSTRAINTS]
{style}
""".strip()
