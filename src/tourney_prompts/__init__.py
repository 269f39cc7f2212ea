"""
Tourney Prompts - inspect the agent configs behind a tournament leaderboard.

Each leaderboard player submits a YAML-like config describing their agent's
model and prompts. This package finds, parses and displays those configs.

Main entry points:
    - tourney_prompts.main: CLI entrypoint
    - tourney_prompts.core.config_parser: parse_agent_config()
    - tourney_prompts.loaders.player_configs: load_player_config()
"""
