"""API request/response schemas for the chat proxy."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ChatProxyRequest(BaseModel):
    """Request body for POST /api/deepseek."""

    model_config = ConfigDict(populate_by_name=True)

    api_key: str = Field(default="", alias="apiKey")
    system_prompt: str = Field(default="", alias="systemPrompt")
    user_prompt: str = Field(default="", alias="userPrompt")


class ErrorResponse(BaseModel):
    error: str
