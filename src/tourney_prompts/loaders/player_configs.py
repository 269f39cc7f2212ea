"""
Player config loader.

Locates a player's agent config document in the config directory,
reads it, and parses it into a PlayerConfig.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

from tourney_prompts.core.config_parser import parse_agent_config
from tourney_prompts.loaders.player_index import PlayerIndex
from tourney_prompts.models.agent_record import PlayerConfig
from tourney_prompts.models.config import DEFAULT_SUFFIXES
from tourney_prompts.utils.logging import get_logger
from tourney_prompts.utils.paths import ensure_within

logger = get_logger(__name__)


def player_key_for(path: Path) -> str:
	"""
	Derive the player key from a config file name.

	Submissions are named ``<player>_<ids...>_config.yml``; the key is the
	lower-cased stem up to the first underscore.
	"""
	return path.stem.split("_", 1)[0].lower()


def discover_config_files(
    config_dir: str | Path,
    suffixes: Iterable[str] = DEFAULT_SUFFIXES,
) -> dict[str, Path]:
	"""
	Map player keys to config files found in a directory.

	Parameters:
		config_dir: Directory to scan (not recursive).
		suffixes: Accepted file suffixes, compared case-insensitively.

	Returns:
		Dict of player key to path; the first file in sorted order wins
		when a player has several. Empty if the directory is missing.
	"""
	base = Path(config_dir)
	if not base.is_dir():
		return {}
	accepted = {s.lower() for s in suffixes}
	found: dict[str, Path] = {}
	for p in sorted(base.iterdir()):
		if not p.is_file() or p.suffix.lower() not in accepted:
			continue
		key = player_key_for(p)
		if key and key not in found:
			found[key] = p
	return found


def _safe_candidate(base: Path, candidate: Path) -> Optional[Path]:
	try:
		return ensure_within(base, candidate)
	except ValueError as e:
		logger.warning("ignoring config path outside %s: %s", base, e)
		return None


def find_config_file(
    player: str,
    config_dir: str | Path,
    index: PlayerIndex | None = None,
    suffixes: Iterable[str] = DEFAULT_SUFFIXES,
) -> Optional[Path]:
	"""
	Find the config document for a player.

	An index entry takes precedence. The directory is scanned when the
	entry is absent or unusable (outside the config directory, missing).

	Parameters:
		player: Player name (case-insensitive).
		config_dir: Directory holding config documents.
		index: Optional explicit name to file mapping.
		suffixes: Accepted file suffixes for discovery.

	Returns:
		Path to the config file, or None if not found.
	"""
	base = Path(config_dir)
	if index is not None:
		filename = index.get(player)
		if filename:
			candidate = _safe_candidate(base, base / filename)
			if candidate is not None and candidate.is_file():
				return candidate
			if candidate is not None:
				logger.warning("indexed config for %s missing: %s", player,
				               candidate)

	path = discover_config_files(base, suffixes).get(player.lower())
	if path is None:
		return None
	return _safe_candidate(base, path)


def load_config_text(path: str | Path) -> Optional[str]:
	"""
	Read a config document.

	Parameters:
		path: Path to the document.

	Returns:
		The text, or None when the file cannot be read.
	"""
	try:
		return Path(path).read_text(encoding="utf-8")
	except (OSError, UnicodeDecodeError) as e:
		logger.error("Error loading config %s: %s", path, e)
		return None


def load_player_config(
    player: str,
    config_dir: str | Path,
    index: PlayerIndex | None = None,
    suffixes: Iterable[str] = DEFAULT_SUFFIXES,
) -> Optional[PlayerConfig]:
	"""
	Locate, read and parse a player's config document.

	Parameters:
		player: Player name (case-insensitive).
		config_dir: Directory holding config documents.
		index: Optional explicit name to file mapping.
		suffixes: Accepted file suffixes for discovery.

	Returns:
		PlayerConfig, or None when no readable document exists.
	"""
	path = find_config_file(player, config_dir, index=index,
	                        suffixes=suffixes)
	if path is None:
		logger.warning("No config file found for player: %s", player)
		return None

	text = load_config_text(path)
	if text is None:
		return None

	agents = parse_agent_config(text)
	logger.debug("parsed config for %s from %s: %d agent(s)", player, path,
	             len(agents))
	return PlayerConfig(player=player, source=path, agents=agents)


def list_players(
    config_dir: str | Path,
    index: PlayerIndex | None = None,
    suffixes: Iterable[str] = DEFAULT_SUFFIXES,
) -> list[str]:
	"""
	Sorted player keys that resolve to a config document.

	Index entries are listed only when their file can be found.
	"""
	names = set(discover_config_files(config_dir, suffixes))
	if index is not None:
		names.update(
		    name for name in index.names()
		    if find_config_file(name, config_dir, index=index,
		                        suffixes=suffixes) is not None)
	return sorted(names)


__all__ = [
    "player_key_for",
    "discover_config_files",
    "find_config_file",
    "load_config_text",
    "load_player_config",
    "list_players",
]
