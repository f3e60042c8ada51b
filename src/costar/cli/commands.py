"""CLI commands for Costar."""

import logging
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import click
from rich.status import Status

from costar import __version__
from costar.cli.display import (
    console,
    display_best_centers,
    display_connectivity,
    display_degree_entries,
    display_not_found,
    display_path,
    display_separation_entries,
    error_console,
)
from costar.cli.repl import CommandLoop
from costar.cli.verbose import get_verbose_logger
from costar.core.config import (
    CostarConfig,
    get_config_display,
    get_config_path,
    get_setting_value,
    load_config,
    write_default_config,
)
from costar.core.constants import (
    EXIT_CONFIG_ERROR,
    EXIT_INTERNAL_ERROR,
    EXIT_SUCCESS,
    EXIT_USER_ERROR,
)
from costar.core.dataset import build_costar_graph, load_configured_dataset
from costar.core.exceptions import ConfigError, DatasetError, NotFoundError
from costar.core.queries import (
    best_centers,
    connectivity_info,
    find_path,
    list_by_degree_range,
    list_by_separation_range,
    set_center,
)
from costar.core.universe import Universe

logger = logging.getLogger(__name__)


def _configure_logging(debug: bool) -> None:
    """Configure logging levels based on debug flag."""
    if debug:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.WARNING)


def _load_config(ctx: click.Context) -> CostarConfig:
    """Load the configuration selected by the --config option."""
    try:
        return load_config(ctx.obj.get("config_path"))
    except ConfigError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(EXIT_CONFIG_ERROR)


def _load_universe(ctx: click.Context, data_dir: Path | None, center: str | None) -> Universe:
    """Load the dataset, build the co-star graph, and set the center.

    Exits with EXIT_CONFIG_ERROR when the configuration or dataset cannot
    be read, and EXIT_USER_ERROR when the center is not an actor.
    """
    config = _load_config(ctx)
    verbose = get_verbose_logger(ctx)

    try:
        with (
            verbose.step("load dataset") as step,
            Status("[bold blue]Loading dataset...[/bold blue]", console=console),
        ):
            dataset = load_configured_dataset(config, data_dir)
            graph = build_costar_graph(dataset)
            step.result = (
                f"{graph.num_vertices()} actors, {graph.num_edges() // 2} co-star links"
            )
    except DatasetError as e:
        logger.debug("Dataset loading failed", exc_info=True)
        error_console.print(f"[red]Error:[/red] {e}")
        error_console.print("[dim]Tip: point --data-dir at the folder holding the files.[/dim]")
        raise SystemExit(EXIT_CONFIG_ERROR)

    universe = Universe(graph=graph)
    center_name = center if center is not None else config.default_center
    try:
        set_center(universe, center_name)
    except NotFoundError as e:
        display_not_found(e.name, graph, note="Cannot use it as the center.")
        raise SystemExit(EXIT_USER_ERROR)
    return universe


def dataset_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Add the --data-dir and --center options shared by query commands."""
    func = click.option(
        "--center",
        "-c",
        "center",
        default=None,
        help="Center of the universe (default: default_center from config).",
    )(func)
    func = click.option(
        "--data-dir",
        type=click.Path(file_okay=False, path_type=Path),
        default=None,
        help="Directory holding actors.txt, movies.txt, and movie-actors.txt.",
    )(func)
    return func


def _run_query(name: str, query: Callable[[], None]) -> None:
    """Run a one-shot query body with the shared exit-code handling."""
    try:
        query()
        raise SystemExit(EXIT_SUCCESS)
    except SystemExit:
        raise
    except Exception:
        logger.exception("Unhandled exception in %s command", name)
        error_console.print("[red]Unexpected error[/red]")
        raise SystemExit(EXIT_INTERNAL_ERROR)


@click.group()
@click.option("--debug", "-d", is_flag=True, help="Enable debug logging output")
@click.option("--verbose", "-v", is_flag=True, help="Show timing of long operations on stderr")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to config.toml (default: ~/.config/costar/config.toml).",
)
@click.version_option(version=__version__, prog_name="costar")
@click.pass_context
def main(ctx: click.Context, debug: bool, verbose: bool, config_path: Path | None) -> None:
    """Costar - six degrees of Kevin Bacon.

    Explore how actors connect through the movies they appeared in.
    Shortest co-star chains are found with breadth-first search.

    Example: costar play --data-dir inputs
    """
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug
    ctx.obj["verbose"] = verbose
    ctx.obj["config_path"] = config_path
    _configure_logging(debug)


@main.command()
@dataset_options
@click.pass_context
def play(ctx: click.Context, data_dir: Path | None, center: str | None) -> None:
    """Play the Kevin Bacon game interactively.

    Reads commands from stdin; type 'h' for the command list and 'q' to quit.

    Examples:
        costar play
        costar play --center "Diane Keaton"
        printf 'p Diane Keaton\\nq\\n' | costar play
    """
    universe = _load_universe(ctx, data_dir, center)
    console.print(
        f"{universe.center} is now the center of the acting universe.", markup=False
    )

    loop = CommandLoop(universe, console=console, verbose=get_verbose_logger(ctx))
    try:
        loop.run(sys.stdin)
    except KeyboardInterrupt:
        console.print()
        console.print("Goodbye!")
    except Exception:
        logger.exception("Unhandled exception in play command")
        error_console.print("[red]Unexpected error[/red]")
        raise SystemExit(EXIT_INTERNAL_ERROR)
    raise SystemExit(EXIT_SUCCESS)


@main.command()
@click.argument("name")
@dataset_options
@click.pass_context
def path(ctx: click.Context, name: str, data_dir: Path | None, center: str | None) -> None:
    """Show the shortest co-star chain from NAME to the center.

    Examples:
        costar path "Diane Keaton"
        costar path "Diane Keaton" --center "Meryl Streep"
    """
    universe = _load_universe(ctx, data_dir, center)

    def query() -> None:
        try:
            result = find_path(universe, name)
        except NotFoundError as e:
            display_not_found(e.name, universe.graph)
            raise SystemExit(EXIT_USER_ERROR)
        display_path(result)

    _run_query("path", query)


@main.command()
@click.argument("low", type=int)
@click.argument("high", type=int)
@dataset_options
@click.pass_context
def degree(
    ctx: click.Context, low: int, high: int, data_dir: Path | None, center: str | None
) -> None:
    """List actors with between LOW and HIGH distinct co-stars.

    Example: costar degree 1 3
    """
    universe = _load_universe(ctx, data_dir, center)
    _run_query(
        "degree",
        lambda: display_degree_entries(list_by_degree_range(universe, low, high), low, high),
    )


@main.command()
@click.argument("low", type=int)
@click.argument("high", type=int)
@dataset_options
@click.pass_context
def separation(
    ctx: click.Context, low: int, high: int, data_dir: Path | None, center: str | None
) -> None:
    """List actors between LOW and HIGH links away from the center.

    Example: costar separation 2 3 --center "Kevin Bacon"
    """
    universe = _load_universe(ctx, data_dir, center)
    _run_query(
        "separation",
        lambda: display_separation_entries(
            list_by_separation_range(universe, low, high), low, high
        ),
    )


@main.command()
@click.argument("n", type=int, required=False)
@dataset_options
@click.pass_context
def centers(ctx: click.Context, n: int | None, data_dir: Path | None, center: str | None) -> None:
    """Rank the N best centers of the universe by average separation.

    Runs one breadth-first search per actor, so large datasets take a while.
    N defaults to best_centers_limit from the configuration.

    Example: costar centers 5
    """
    universe = _load_universe(ctx, data_dir, center)
    limit = n if n is not None else _load_config(ctx).best_centers_limit
    verbose = get_verbose_logger(ctx)

    def query() -> None:
        with (
            verbose.step("rank centers") as step,
            Status("[bold blue]Computing best centers...[/bold blue]", console=console),
        ):
            scores = best_centers(universe, limit)
            step.result = f"{len(scores)} ranked"
        display_best_centers(scores, limit)

    _run_query("centers", query)


@main.command()
@dataset_options
@click.pass_context
def info(ctx: click.Context, data_dir: Path | None, center: str | None) -> None:
    """Show how many actors the center reaches and the average separation.

    Example: costar info --center "Kevin Bacon"
    """
    universe = _load_universe(ctx, data_dir, center)
    _run_query("info", lambda: display_connectivity(connectivity_info(universe)))


@main.command(name="config")
@click.argument("key", required=False)
@click.option("--init", is_flag=True, help="Write a documented default config file.")
@click.pass_context
def config_cmd(ctx: click.Context, key: str | None, init: bool) -> None:
    """Show configuration, or a single KEY.

    Examples:
        costar config                   # Show all settings
        costar config default_center    # Show one setting
        costar config --init            # Write the default config file
    """
    config_path = ctx.obj.get("config_path")

    if init:
        written = write_default_config(config_path)
        console.print(f"[green]✓[/green] Wrote default configuration to {written}")
        raise SystemExit(EXIT_SUCCESS)

    config = _load_config(ctx)
    if key is None:
        console.print(f"[dim]{config_path or get_config_path()}[/dim]")
        console.print(get_config_display(config), markup=False)
        raise SystemExit(EXIT_SUCCESS)

    try:
        value = get_setting_value(config, key)
    except ConfigError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(EXIT_USER_ERROR)
    console.print(value, markup=False)
    raise SystemExit(EXIT_SUCCESS)


if __name__ == "__main__":
    main()
