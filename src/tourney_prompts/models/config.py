from __future__ import annotations

from pathlib import Path
from typing import Any, TYPE_CHECKING

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

if TYPE_CHECKING:
	from tourney_prompts.models.show_params import ShowParams

DEFAULT_SUFFIXES = [".yml", ".yaml"]


def load_env(env_file: str | Path | None = None) -> None:
	"""Load environment variables from an `.env` file if present."""
	env_path = Path(env_file) if env_file else Path(".env")
	if env_path.exists():
		load_dotenv(env_path)


class Config(BaseSettings):
	"""Runtime configuration loaded from environment variables."""

	model_config = SettingsConfigDict(env_prefix="",
	                                  case_sensitive=False,
	                                  populate_by_name=True)

	config_dir: str = Field(
	    "data/prompt_collection",
	    alias="CONFIG_DIR",
	    description="Directory holding player config documents",
	)
	player_index_file: str | None = Field(
	    default=None,
	    alias="PLAYER_INDEX_FILE",
	    description="Optional YAML mapping of player name to config file",
	)
	config_suffixes: Any = Field(
	    default_factory=lambda: list(DEFAULT_SUFFIXES),
	    alias="CONFIG_SUFFIXES",
	    description="File suffixes considered config documents",
	)
	agent_index: int = Field(
	    0,
	    alias="AGENT_INDEX",
	    description="Which agent of a document to display",
	)
	log_level: str = Field("warning", alias="LOG_LEVEL",
	                       description="Log level")

	@field_validator("config_suffixes", mode="before")
	@classmethod
	def split_suffixes(cls, v: Any) -> list[str]:
		"""Normalize suffixes to a list regardless of input format."""
		if v is None or v == "":
			return list(DEFAULT_SUFFIXES)
		if isinstance(v, (list, tuple)):
			items = [str(p) for p in v]
		else:
			# fallback: comma-separated string
			items = str(v).split(",")
		return [p.strip() for p in items if p.strip()]

	@field_validator("config_suffixes", mode="after")
	@classmethod
	def normalize_suffixes(cls, v: list[str]) -> list[str]:
		"""Lower-case suffixes and ensure a leading dot."""
		return [s.lower() if s.startswith(".") else f".{s.lower()}" for s in v]

	@field_validator("agent_index")
	@classmethod
	def validate_non_negative(cls, v: int) -> int:
		if v < 0:
			raise ValueError("agent_index must be >= 0")
		return v

	@property
	def config_path(self) -> Path:
		"""Return config_dir as Path."""
		return Path(self.config_dir)

	@property
	def player_index_path(self) -> Path | None:
		"""Return player_index_file as Path, if set."""
		return Path(self.player_index_file) if self.player_index_file else None

	def apply_overrides(self, params: "ShowParams") -> None:
		"""Apply CLI overrides from ShowParams onto this config.

		Only non-None fields in params are applied, preserving
		environment-based defaults for anything the user didn't set.

		Parameters:
			params: Validated show parameters with optional overrides.
		"""
		_OVERRIDES: list[tuple[str, str]] = [
			("agent", "agent_index"),
			("config_dir", "config_dir"),
			("index_file", "player_index_file"),
		]
		for param_field, config_field in _OVERRIDES:
			value = getattr(params, param_field)
			if value is not None:
				setattr(self, config_field, value)


__all__ = ["Config", "load_env", "DEFAULT_SUFFIXES"]
