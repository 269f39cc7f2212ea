"""
Show parameters model.

Validated CLI input for commands that look up a player's config.
"""

from __future__ import annotations

import re
from typing import Optional

from pydantic import BaseModel, Field, field_validator

PLAYER_RE = re.compile(r"^[A-Za-z0-9_.-]+$")


class ShowParams(BaseModel):
	"""Validated parameters for show/prompts/export."""

	player: str = Field(description="Player name")
	agent: Optional[int] = Field(default=None,
	                             description="Override agent index")
	config_dir: Optional[str] = Field(default=None,
	                                  description="Override config directory")
	index_file: Optional[str] = Field(default=None,
	                                  description="Override player index file")

	@field_validator("player")
	@classmethod
	def validate_player(cls, v: str) -> str:
		if not PLAYER_RE.match(v) or ".." in v:
			raise ValueError("player must be alnum/_.- only")
		return v

	@field_validator("agent")
	@classmethod
	def validate_agent(cls, v: Optional[int]) -> Optional[int]:
		if v is not None and v < 0:
			raise ValueError("agent must be >= 0")
		return v


__all__ = ["ShowParams"]
