"""
Agent config document parser.

Extracts agents from the player configuration documents shown on the
leaderboard. The documents use a small, indentation-based subset of YAML:

    agent:
      model:
        provider: "openai"
        name: gpt-4
      prompts:
        system_prompt: |
          You are a helpful agent.

Only these constructs are recognized. Everything else (unknown keys,
stray text, malformed lines) is skipped without error; callers rely on
getting a best-effort result for any document rather than an exception.

Block-literal prompts have no closing delimiter. A block ends at the
first non-blank line indented less than its content threshold, and that
line is then dispatched again as ordinary structure so that a marker
ending one block can also start the next section or agent.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum

from tourney_prompts.models.agent_record import AgentRecord, PromptKind
from tourney_prompts.utils.logging import get_logger

logger = get_logger(__name__)

COMMENT_PREFIX = "#"
AGENT_MARKER = "agent"
MODEL_MARKER = "model:"
PROMPTS_MARKER = "prompts:"
MODEL_KEYS = ("provider", "name")
QUOTE_CHARS = "'\""
# Content of a block must be indented this far past its opener.
BLOCK_INDENT_STEP = 2

BLOCK_OPENER_RE = re.compile(r"^([A-Za-z_][A-Za-z0-9_]*):\s*\|$")


class Section(Enum):
	"""Section of the current agent that property lines apply to."""

	NONE = "none"
	MODEL = "model"
	PROMPTS = "prompts"


@dataclass
class _ParseState:
	"""Fold state threaded through a single parse call."""

	agents: list[AgentRecord] = field(default_factory=list)
	section: Section = Section.NONE
	block_kind: PromptKind | None = None
	block_lines: list[str] = field(default_factory=list)
	base_indent: int = 0

	@property
	def agent(self) -> AgentRecord | None:
		return self.agents[-1] if self.agents else None

	@property
	def in_block(self) -> bool:
		return self.block_kind is not None


def indent_of(line: str) -> int:
	"""Count leading whitespace characters; a tab counts as one."""
	return len(line) - len(line.lstrip())


def _strip_quotes(value: str) -> str:
	return value.strip(QUOTE_CHARS)


def _collect_block_line(state: _ParseState, line: str) -> bool:
	"""
	Add a line to the active block.

	Returns:
		False when the line is under-indented and ends the block; the
		line is left for structural dispatch in that case.
	"""
	if not line.strip():
		state.block_lines.append("")
		return True
	if indent_of(line) >= state.base_indent:
		state.block_lines.append(line[state.base_indent:])
		return True
	return False


def _finish_block(state: _ParseState) -> None:
	"""Store the active block on the current agent and clear it."""
	agent = state.agent
	if state.block_kind is not None and agent is not None:
		agent.prompts[state.block_kind] = "\n".join(
		    state.block_lines).rstrip()
	state.block_kind = None
	state.block_lines = []
	state.base_indent = 0


def _apply_model_property(agent: AgentRecord, trimmed: str) -> None:
	key, sep, value = trimmed.partition(":")
	if not sep:
		return
	key = key.strip()
	if key in MODEL_KEYS:
		setattr(agent.model, key, _strip_quotes(value.strip()))


def _open_block(state: _ParseState, trimmed: str, indent: int) -> None:
	m = BLOCK_OPENER_RE.match(trimmed)
	if not m:
		return
	kind = PromptKind.from_document_key(m.group(1))
	if kind is None:
		return
	state.block_kind = kind
	state.block_lines = []
	state.base_indent = indent + BLOCK_INDENT_STEP


def _dispatch_line(state: _ParseState, line: str) -> None:
	"""Apply a line that is not block content to the parse state."""
	trimmed = line.strip()
	if not trimmed or trimmed.startswith(COMMENT_PREFIX):
		return

	if trimmed.startswith(AGENT_MARKER):
		state.agents.append(AgentRecord())
		state.section = Section.NONE
		return

	agent = state.agent
	if agent is None:
		return

	if trimmed == MODEL_MARKER:
		state.section = Section.MODEL
	elif trimmed == PROMPTS_MARKER:
		state.section = Section.PROMPTS
	elif state.section is Section.MODEL:
		_apply_model_property(agent, trimmed)
	elif state.section is Section.PROMPTS:
		_open_block(state, trimmed, indent_of(line))


def parse_agent_config(text: str) -> list[AgentRecord]:
	"""
	Parse a config document into agent records.

	Never raises: a document without an agent marker yields an empty
	list, and an agent without model or prompts sections is returned
	with those fields empty. Each call owns its state, so the function
	is safe to call concurrently and repeated calls on the same text
	return equal results.

	Parameters:
		text: Full document text.

	Returns:
		Agents in the order their markers appear.
	"""
	state = _ParseState()
	# Only "\n" separates lines; other line-break characters are content
	lines = [ln[:-1] if ln.endswith("\r") else ln for ln in text.split("\n")]
	for line in lines:
		if state.in_block:
			if _collect_block_line(state, line):
				continue
			# under-indented line closes the block, then falls through
			_finish_block(state)
		_dispatch_line(state, line)

	if state.in_block:
		_finish_block(state)

	logger.debug("parsed %d agent(s) from %d line(s)", len(state.agents),
	             len(lines))
	return state.agents


__all__ = [
    "parse_agent_config",
    "indent_of",
    "Section",
    "BLOCK_INDENT_STEP",
]
