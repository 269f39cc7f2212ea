"""
Display data model for player configs.

Pure data extraction for the config views, separating agent selection
and placeholder policy from Rich rendering and Markdown export.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from tourney_prompts.models.agent_record import PlayerConfig, PromptKind

UNKNOWN = "Unknown"
NOT_AVAILABLE = "Configuration not available"
NO_PROMPTS = "No prompts found in configuration"


class PromptEntry(BaseModel):
	"""A single prompt ready for display."""

	kind: PromptKind
	title: str
	text: str


class ConfigDisplay(BaseModel):
	"""All data needed to render a player's agent configuration.

	Populated by `build_config_display()`; fields hold display strings
	with placeholders already applied.
	"""

	player: str
	source: str | None = None
	agent_index: int = 0
	agent_count: int = 0
	available: bool = False
	provider: str = UNKNOWN
	model_name: str = UNKNOWN
	prompts: list[PromptEntry] = Field(default_factory=list)

	@property
	def prompts_message(self) -> str | None:
		"""Placeholder shown instead of prompts, or None if there are some."""
		if not self.available:
			return NOT_AVAILABLE
		if not self.prompts:
			return NO_PROMPTS
		return None


def build_config_display(
    player: str,
    config: PlayerConfig | None,
    agent_index: int = 0,
) -> ConfigDisplay:
	"""Extract display data for one agent of a player's config.

	Pure function with no rendering side effects. A missing config or an
	agent index past the end of the document both mark the display as
	not available.

	Parameters:
		player: Player name shown in headings.
		config: Parsed config, or None when it could not be loaded.
		agent_index: Which agent to show; the first by default.

	Returns:
		Populated ConfigDisplay model.
	"""
	data = ConfigDisplay(player=player, agent_index=agent_index)
	if config is None:
		return data

	data.agent_count = len(config.agents)
	if config.source is not None:
		data.source = str(Path(config.source))

	agent = config.agent(agent_index)
	if agent is None:
		return data

	data.available = True
	data.provider = agent.model.provider or UNKNOWN
	data.model_name = agent.model.name or UNKNOWN

	# Fixed order; empty prompts are not shown
	for kind in PromptKind:
		text = agent.prompt(kind)
		if text:
			data.prompts.append(
			    PromptEntry(kind=kind, title=kind.heading, text=text))

	return data


__all__ = [
    "ConfigDisplay",
    "PromptEntry",
    "build_config_display",
    "UNKNOWN",
    "NOT_AVAILABLE",
    "NO_PROMPTS",
]
