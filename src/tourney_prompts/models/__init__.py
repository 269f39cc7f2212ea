"""
Tourney Prompts models.

This subpackage contains Pydantic models for configuration, CLI
parameters, parsed agent records, and display data.

Key models:
    - Config: Application configuration loaded from environment
    - ShowParams: Validated CLI parameters for a player lookup
    - AgentRecord: One agent parsed from a config document
    - PlayerConfig: All agents parsed from a player's document
    - ConfigDisplay: Display-ready view of one agent
"""

from .agent_record import PromptKind, ModelInfo, AgentRecord, PlayerConfig
from .config import Config, load_env
from .show_params import ShowParams
from .display import (
    ConfigDisplay,
    PromptEntry,
    build_config_display,
    UNKNOWN,
    NOT_AVAILABLE,
    NO_PROMPTS,
)

__all__ = [
    "PromptKind",
    "ModelInfo",
    "AgentRecord",
    "PlayerConfig",
    "Config",
    "load_env",
    "ShowParams",
    "ConfigDisplay",
    "PromptEntry",
    "build_config_display",
    "UNKNOWN",
    "NOT_AVAILABLE",
    "NO_PROMPTS",
]
