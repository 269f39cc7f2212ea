"""Core parsing logic.

Key modules:
    - config_parser: agent config document parser via parse_agent_config()
"""

from tourney_prompts.core.config_parser import parse_agent_config

__all__ = ["parse_agent_config"]
