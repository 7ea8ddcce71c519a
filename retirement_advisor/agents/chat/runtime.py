"""Agent construction for the advisor CLI."""

from __future__ import annotations

from typing import Any, Sequence

from strands import Agent

from retirement_advisor.agents.chat.model_registry import ModelClient


class AgentBuildError(RuntimeError):
    """Raised when an agent cannot be constructed."""


def build_agent(
    *,
    model_client: ModelClient,
    system_prompt: str,
    tools: Sequence[Any] | None = None,
) -> Agent:
    """Construct a Strands agent that delegates all arithmetic to ``tools``."""

    if not model_client:
        raise AgentBuildError("Model client is required to build an agent.")
    if not system_prompt or not system_prompt.strip():
        raise AgentBuildError("A system prompt is required to build an agent.")
    return Agent(
        model=model_client.client,
        system_prompt=system_prompt,
        tools=list(tools or ()),
        load_tools_from_directory=False,
    )
