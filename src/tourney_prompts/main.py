from __future__ import annotations

import sys
from pathlib import Path

import typer
from pydantic import TypeAdapter, ValidationError
from typer.main import get_command

from tourney_prompts.core.config_parser import parse_agent_config
from tourney_prompts.loaders.player_configs import (
    list_players,
    load_config_text,
    load_player_config,
)
from tourney_prompts.loaders.player_index import load_player_index
from tourney_prompts.models.agent_record import AgentRecord
from tourney_prompts.models.config import Config, load_env
from tourney_prompts.models.display import ConfigDisplay, build_config_display
from tourney_prompts.models.show_params import ShowParams
from tourney_prompts.ui.config_view import ConfigView
from tourney_prompts.ui.export import render_config_md, save_config_md
from tourney_prompts.utils.logging import configure_logging

cli = typer.Typer(add_completion=False, no_args_is_help=True)

_AGENTS_ADAPTER = TypeAdapter(list[AgentRecord])


@cli.callback()
def root() -> None:
	"""
	Root callback for the tourney-prompts CLI.

	Sets up the Typer application with no-args-is-help behavior.
	"""
	return None


def _format_errors(e: ValidationError) -> str:
	"""Join pydantic errors into one line, prefixed by the failing field."""
	return "; ".join(
	    f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
	    if err["loc"] else err["msg"] for err in e.errors())


def _load_config(config_dir: str | None = None,
                 index_file: str | None = None) -> Config:
	"""Load env/.env settings, apply directory overrides, set up logging."""
	load_env()
	try:
		config = Config()
	except ValidationError as e:
		typer.echo(f"Invalid settings: {_format_errors(e)}", err=True)
		raise typer.Exit(code=2) from e
	if config_dir is not None:
		config.config_dir = config_dir
	if index_file is not None:
		config.player_index_file = index_file
	configure_logging(config.log_level)
	return config


def _make_params(
    player: str,
    agent: int | None,
    config_dir: str | None,
    index_file: str | None,
) -> ShowParams:
	try:
		return ShowParams(player=player, agent=agent, config_dir=config_dir,
		                  index_file=index_file)
	except ValidationError as e:
		raise typer.BadParameter(_format_errors(e)) from e


def build_display(params: ShowParams) -> ConfigDisplay:
	"""
	Resolve settings and load the display data for a player.

	Parameters:
		params: Validated CLI parameters.

	Returns:
		ConfigDisplay for the selected agent; marked not available when
		the player's config cannot be found or read.
	"""
	config = _load_config()
	config.apply_overrides(params)
	index = load_player_index(config.player_index_path)
	player_config = load_player_config(
	    params.player,
	    config.config_path,
	    index=index,
	    suffixes=config.config_suffixes,
	)
	return build_config_display(params.player, player_config,
	                            agent_index=config.agent_index)


def show_impl(
    player: str,
    agent: int | None = None,
    config_dir: str | None = None,
    index_file: str | None = None,
    include_model: bool = True,
    include_prompts: bool = True,
) -> None:
	"""
	Print a player's model information and/or prompts.

	Parameters:
		player: Player name.
		agent: Override for which agent of the document to show.
		config_dir: Override for the config directory.
		index_file: Override for the player index file.
		include_model: Whether to print the model section.
		include_prompts: Whether to print the prompts section.
	"""
	params = _make_params(player, agent, config_dir, index_file)
	data = build_display(params)
	ConfigView().print_config(data, include_model=include_model,
	                          include_prompts=include_prompts)


def parse_impl(file: Path, as_json: bool = False) -> None:
	"""
	Parse a single config document and print its agents.

	Parameters:
		file: Path to the document.
		as_json: Print the records as JSON instead of a table.
	"""
	_load_config()
	if not file.is_file():
		typer.echo(f"File not found: {file}", err=True)
		raise typer.Exit(code=2)
	text = load_config_text(file)
	if text is None:
		typer.echo(f"Could not read: {file}", err=True)
		raise typer.Exit(code=2)
	agents = parse_agent_config(text)
	if as_json:
		typer.echo(_AGENTS_ADAPTER.dump_json(agents, indent=2).decode())
	else:
		ConfigView().print_agents(agents)


def players_impl(config_dir: str | None = None,
                 index_file: str | None = None) -> None:
	"""List players with a config document."""
	config = _load_config(config_dir, index_file)
	index = load_player_index(config.player_index_path)
	names = list_players(config.config_path, index=index,
	                     suffixes=config.config_suffixes)
	ConfigView().print_players(names)


def export_impl(
    player: str,
    output: Path,
    agent: int | None = None,
    config_dir: str | None = None,
    index_file: str | None = None,
) -> None:
	"""Write a player's configuration to a markdown file."""
	params = _make_params(player, agent, config_dir, index_file)
	data = build_display(params)
	save_config_md(output, render_config_md(data))
	typer.echo(f"Wrote {output}")


@cli.command()
def show(
    player: str,
    agent: int = typer.Option(None, "--agent",
                             help="Agent index to show (0-based)"),
    config_dir: str = typer.Option(None, "--config-dir",
                                   help="Override config directory"),
    index_file: str = typer.Option(None, "--index",
                                   help="Override player index file"),
) -> None:
	"""Show a player's model information and prompts."""
	show_impl(player, agent, config_dir, index_file)


@cli.command()
def prompts(
    player: str,
    agent: int = typer.Option(None, "--agent",
                             help="Agent index to show (0-based)"),
    config_dir: str = typer.Option(None, "--config-dir",
                                   help="Override config directory"),
    index_file: str = typer.Option(None, "--index",
                                   help="Override player index file"),
) -> None:
	"""Show only a player's prompts."""
	show_impl(player, agent, config_dir, index_file, include_model=False)


@cli.command()
def parse(
    file: Path,
    as_json: bool = typer.Option(False, "--json/--no-json",
                                 help="Print agents as JSON"),
) -> None:
	"""Parse a config document and list its agents."""
	parse_impl(file, as_json)


@cli.command()
def players(
    config_dir: str = typer.Option(None, "--config-dir",
                                   help="Override config directory"),
    index_file: str = typer.Option(None, "--index",
                                   help="Override player index file"),
) -> None:
	"""List players that have a config document."""
	players_impl(config_dir, index_file)


@cli.command()
def export(
    player: str,
    output: Path,
    agent: int = typer.Option(None, "--agent",
                             help="Agent index to show (0-based)"),
    config_dir: str = typer.Option(None, "--config-dir",
                                   help="Override config directory"),
    index_file: str = typer.Option(None, "--index",
                                   help="Override player index file"),
) -> None:
	"""Export a player's configuration to markdown."""
	export_impl(player, output, agent, config_dir, index_file)


def entrypoint(argv=None, *, standalone_mode: bool = True):
	"""
	Typer entrypoint that defaults to `show` when appropriate.

	Allows calling 'tourney-prompts <player>' without explicitly
	specifying the 'show' subcommand.

	Parameters:
		argv: Command-line arguments. Defaults to sys.argv[1:].
		standalone_mode: If True, Click handles exit codes.

	Returns:
		Result of the Click application main invocation.
	"""
	args = sys.argv[1:] if argv is None else list(argv)

	_click_app = get_command(cli)
	commands = getattr(_click_app, "commands", {}).keys()
	# default to show when first arg is not a command/option
	if args and not args[0].startswith("-") and args[0] not in commands:
		args = ["show"] + args
	return _click_app.main(
	    args=args,
	    prog_name="tourney-prompts",
	    standalone_mode=standalone_mode,
	)


if __name__ == "__main__":
	entrypoint()
