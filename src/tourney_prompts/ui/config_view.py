"""
Terminal view for player agent configs.

Renders ConfigDisplay data with Rich. Prompt text is always passed as
Text objects so that brackets in prompts are printed literally instead
of being read as console markup.
"""

from __future__ import annotations

from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich import box

from tourney_prompts.models.agent_record import AgentRecord, PromptKind
from tourney_prompts.models.display import (
    ConfigDisplay,
    NOT_AVAILABLE,
    UNKNOWN,
)


class ConfigView:
	"""Rich renderer for a player's configuration."""

	def __init__(self, console: Console | None = None):
		self.console = console or Console()

	def _render_header(self, data: ConfigDisplay, subtitle: str) -> Text:
		text = Text()
		text.append(data.player, style="bold cyan")
		text.append(f" - {subtitle}", style="bold")
		if data.agent_count > 1:
			text.append(
			    f"\nagent {data.agent_index + 1} of {data.agent_count}",
			    style="dim")
		if data.source:
			text.append(f"\nsource: {data.source}", style="dim")
		return text

	def _render_model_table(self, data: ConfigDisplay) -> RenderableType:
		"""Render the model information section."""
		if not data.available:
			return Panel(Text(NOT_AVAILABLE, style="yellow"),
			             title="Model Information", box=box.ROUNDED)

		table = Table(
		    title="Model Information",
		    box=box.ROUNDED,
		    show_header=False,
		    expand=True,
		    title_style="bold magenta",
		)
		table.add_column("Field", style="bold")
		table.add_column("Value")
		table.add_row("Provider", Text(data.provider))
		table.add_row("Model", Text(data.model_name))
		return table

	def _render_prompts(self, data: ConfigDisplay) -> RenderableType:
		"""Render one panel per prompt, or the placeholder message."""
		message = data.prompts_message
		if message:
			return Panel(Text(message, style="yellow"), title="Prompts",
			             box=box.ROUNDED)
		return Group(*[
		    Panel(Text(entry.text), title=entry.title, title_align="left",
		          box=box.ROUNDED, border_style="cyan")
		    for entry in data.prompts
		])

	def render(self, data: ConfigDisplay, include_model: bool = True,
	           include_prompts: bool = True) -> Group:
		"""Build the full renderable for a player."""
		subtitle = "AI Configuration" if include_prompts else "Model"
		parts: list[RenderableType] = [self._render_header(data, subtitle)]
		if include_model:
			parts.append(self._render_model_table(data))
		if include_prompts:
			parts.append(self._render_prompts(data))
		return Group(*parts)

	def print_config(self, data: ConfigDisplay, include_model: bool = True,
	                 include_prompts: bool = True) -> None:
		"""Print a player's configuration to the console."""
		self.console.print(
		    self.render(data, include_model=include_model,
		                include_prompts=include_prompts))

	def print_agents(self, agents: list[AgentRecord]) -> None:
		"""Print a one-row-per-agent summary of a parsed document."""
		if not agents:
			self.console.print("[yellow]No agents found[/yellow]")
			return
		table = Table(title="Agents", box=box.ROUNDED, title_style="bold cyan")
		table.add_column("#", justify="right", style="dim")
		table.add_column("Provider")
		table.add_column("Model")
		table.add_column("Prompts")
		for i, agent in enumerate(agents):
			kinds = ", ".join(k.value for k in PromptKind if k in agent.prompts)
			table.add_row(
			    str(i),
			    Text(agent.model.provider or UNKNOWN),
			    Text(agent.model.name or UNKNOWN),
			    kinds or "-",
			)
		self.console.print(table)

	def print_players(self, names: list[str]) -> None:
		"""Print the known players as a table."""
		if not names:
			self.console.print("[yellow]No player configs found[/yellow]")
			return
		table = Table(title="Players", box=box.ROUNDED,
		              title_style="bold cyan")
		table.add_column("#", justify="right", style="dim")
		table.add_column("Player")
		for i, name in enumerate(names, start=1):
			table.add_row(str(i), Text(name))
		self.console.print(table)


__all__ = ["ConfigView"]
