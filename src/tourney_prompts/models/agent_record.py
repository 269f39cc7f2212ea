"""
Agent record models.

Defines the structured result produced by the agent config parser:
one AgentRecord per agent marker, each carrying a model descriptor
and the block-literal prompts found for it.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class PromptKind(str, Enum):
	"""Recognized prompt kinds."""

	SYSTEM = "system"
	STEP_WISE = "step-wise"

	@property
	def document_key(self) -> str:
		"""Key that introduces this prompt in a config document."""
		return _DOCUMENT_KEYS[self]

	@property
	def heading(self) -> str:
		"""Human readable heading for display."""
		return _HEADINGS[self]

	@classmethod
	def from_document_key(cls, key: str) -> PromptKind | None:
		"""Return the kind for a document key, or None if unrecognized."""
		for kind, doc_key in _DOCUMENT_KEYS.items():
			if doc_key == key:
				return kind
		return None


_DOCUMENT_KEYS: dict[PromptKind, str] = {
    PromptKind.SYSTEM: "system_prompt",
    PromptKind.STEP_WISE: "step_wise_prompt",
}

_HEADINGS: dict[PromptKind, str] = {
    PromptKind.SYSTEM: "System Prompt",
    PromptKind.STEP_WISE: "Step-wise Prompt",
}


class ModelInfo(BaseModel):
	"""Model descriptor for an agent; absent keys stay None."""

	provider: str | None = Field(default=None,
	                             description="Model provider, e.g. openai")
	name: str | None = Field(default=None, description="Model name")

	@property
	def is_empty(self) -> bool:
		return self.provider is None and self.name is None


class AgentRecord(BaseModel):
	"""One agent parsed from a config document."""

	model: ModelInfo = Field(default_factory=ModelInfo,
	                         description="Model descriptor")
	prompts: dict[PromptKind, str] = Field(
	    default_factory=dict,
	    description="Verbatim block text keyed by prompt kind")

	def prompt(self, kind: PromptKind) -> str | None:
		"""Return the prompt text for a kind, or None if absent."""
		return self.prompts.get(kind)

	@property
	def has_prompts(self) -> bool:
		"""True when at least one prompt has non-empty text."""
		return any(text for text in self.prompts.values())


class PlayerConfig(BaseModel):
	"""Parsed configuration document for a single player."""

	player: str = Field(description="Player name as requested")
	source: Path | None = Field(default=None,
	                            description="File the config was read from")
	agents: list[AgentRecord] = Field(default_factory=list,
	                                  description="Agents in document order")

	def agent(self, index: int = 0) -> AgentRecord | None:
		"""
		Return the agent at a position, or None when out of range.

		Parameters:
			index: Zero-based agent position in document order.

		Returns:
			The AgentRecord, or None.
		"""
		if 0 <= index < len(self.agents):
			return self.agents[index]
		return None

	@property
	def primary_agent(self) -> AgentRecord | None:
		"""First agent in the document, used for display by default."""
		return self.agent(0)


__all__ = ["PromptKind", "ModelInfo", "AgentRecord", "PlayerConfig"]
