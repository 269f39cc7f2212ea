"""
Player index loading.

The index is a YAML mapping from player name to config file name,
relative to the config directory:

    agrawalom: agrawalom_737988_25383356_config_v13.yml
    zhouevan: zhouevan_663610_25377311_congfig.yml

Lookups are case-insensitive. A broken index is logged and treated as
empty so that file discovery still works.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from tourney_prompts.utils.logging import get_logger

logger = get_logger(__name__)


class PlayerIndex:
	"""Case-insensitive player name to file name mapping."""

	def __init__(self, entries: dict[str, str] | None = None):
		self._entries: dict[str, str] = {
		    name.lower(): filename
		    for name, filename in (entries or {}).items()
		}

	def get(self, player: str) -> str | None:
		return self._entries.get(player.lower())

	def names(self) -> list[str]:
		"""Indexed player names, sorted."""
		return sorted(self._entries)

	def __len__(self) -> int:
		return len(self._entries)

	def __contains__(self, player: object) -> bool:
		return isinstance(player, str) and player.lower() in self._entries


def parse_player_index(text: str, origin: str = "<string>") -> PlayerIndex:
	"""
	Parse index YAML text into a PlayerIndex.

	Parameters:
		text: YAML document text.
		origin: Label used in log messages.

	Returns:
		PlayerIndex with every valid string entry; invalid entries are
		logged and skipped.
	"""
	try:
		data: Any = yaml.safe_load(text)
	except yaml.YAMLError as e:
		logger.warning("invalid player index %s: %s", origin, e)
		return PlayerIndex()

	if data is None:
		return PlayerIndex()
	if not isinstance(data, dict):
		logger.warning("player index %s is not a mapping", origin)
		return PlayerIndex()

	entries: dict[str, str] = {}
	for name, filename in data.items():
		if not isinstance(filename, str) or not filename.strip():
			logger.warning("skipping index entry %r in %s", name, origin)
			continue
		entries[str(name)] = filename.strip()
	return PlayerIndex(entries)


def load_player_index(path: str | Path | None) -> PlayerIndex:
	"""
	Load a player index file if it exists.

	Parameters:
		path: Path to the YAML index, or None.

	Returns:
		Parsed PlayerIndex; empty when path is None, missing or unreadable.
	"""
	if path is None:
		return PlayerIndex()
	p = Path(path)
	if not p.exists():
		logger.warning("player index not found: %s", p)
		return PlayerIndex()
	try:
		text = p.read_text(encoding="utf-8")
	except (OSError, UnicodeDecodeError) as e:
		logger.warning("could not read player index %s: %s", p, e)
		return PlayerIndex()
	return parse_player_index(text, origin=str(p))


__all__ = ["PlayerIndex", "parse_player_index", "load_player_index"]
