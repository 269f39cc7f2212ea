"""
Markdown export of player configs.

Provides functions for rendering ConfigDisplay data to markdown
and saving it to disk.
"""

from __future__ import annotations

from pathlib import Path
from string import Template

from tourney_prompts.models.display import ConfigDisplay

CONFIG_TEMPLATE = Template("""# Agent Configuration: ${player}

## Model Information

| Item     | Value         |
| -------- | ------------- |
| Provider | ${provider}   |
| Model    | ${model_name} |
| Source   | ${source}     |

## Prompts

${prompts}
""")


def _render_prompts_md(data: ConfigDisplay) -> str:
	message = data.prompts_message
	if message:
		return f"_{message}_"
	sections = []
	for entry in data.prompts:
		# Fence must outlast any backtick run inside the prompt
		fence = "```"
		while fence in entry.text:
			fence += "`"
		sections.append(f"### {entry.title}\n\n{fence}text\n{entry.text}\n"
		                f"{fence}")
	return "\n\n".join(sections)


def render_config_md(data: ConfigDisplay) -> str:
	"""
	Render a markdown document from ConfigDisplay data.

	Parameters:
		data: Display data for one agent of a player.

	Returns:
		Rendered markdown string.
	"""
	values = {
	    "player": data.player,
	    "provider": data.provider,
	    "model_name": data.model_name,
	    "source": data.source or "",
	    "prompts": _render_prompts_md(data),
	}
	return CONFIG_TEMPLATE.safe_substitute(**values)


def save_config_md(path: Path | str, content: str) -> None:
	"""
	Persist markdown content to disk, ensuring parent directories.

	Parameters:
		path: Destination file path.
		content: Markdown content to write.
	"""
	Path(path).parent.mkdir(parents=True, exist_ok=True)
	Path(path).write_text(content, encoding="utf-8")


__all__ = ["render_config_md", "save_config_md", "CONFIG_TEMPLATE"]
