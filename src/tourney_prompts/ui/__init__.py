"""User interface components.

This subpackage provides terminal and file output for player configs.

Key modules:
    - config_view: Rich-based terminal rendering
    - export: Markdown rendering and persistence
"""

from tourney_prompts.ui.config_view import ConfigView
from tourney_prompts.ui.export import render_config_md, save_config_md

__all__ = [
    "ConfigView",
    "render_config_md",
    "save_config_md",
]
