"""File loading utilities.

This subpackage locates and reads player config documents.

Key modules:
    - player_index: YAML player name to file index
    - player_configs: Config discovery, reading and parsing
"""

from .player_index import PlayerIndex, load_player_index, parse_player_index
from .player_configs import (
    discover_config_files,
    find_config_file,
    list_players,
    load_config_text,
    load_player_config,
)

__all__ = [
    "PlayerIndex",
    "load_player_index",
    "parse_player_index",
    "discover_config_files",
    "find_config_file",
    "list_players",
    "load_config_text",
    "load_player_config",
]
