"""Rendering of query results for the Costar CLI.

Every function prints to the module console unless another Rich console
is passed, so the interactive loop and one-shot commands share output.
Actor names and titles are escaped because they may contain brackets.
"""

from rich.console import Console
from rich.markup import escape

from costar.core.matching import format_actor_suggestions, fuzzy_find_actor
from costar.core.types import (
    CenterChange,
    CenterScore,
    ConnectivitySummary,
    DegreeEntry,
    Graph,
    PathResult,
    PathStatus,
    SeparationEntry,
    Titles,
)

console = Console()
error_console = Console(stderr=True)

HELP_TEXT = """\
Commands:
  p <name>        - find shortest path from <name> to current center
  u <name>        - change center of the universe
  d <low> <high>  - list actors with co-stars between <low> and <high>
  s <low> <high>  - list actors sorted by separation from center
  c <n>           - find the top <n> best 'centers of the universe'
  i               - show number of connected actors & average separation
  h               - show this help
  q               - quit"""


def format_titles(titles: frozenset[str]) -> str:
    """Format a set of shared titles in a stable, sorted order."""
    return "[" + ", ".join(sorted(titles)) + "]"


def display_path(result: PathResult, target_console: Console | None = None) -> None:
    """Display the co-star chain between an actor and the center.

    Args:
        result: Path query result.
        target_console: Optional Rich console (defaults to module console).
    """
    output_console = target_console if target_console is not None else console
    actor = escape(result.actor)

    if result.status is PathStatus.IS_CENTER:
        output_console.print(f"{actor} is the center of the universe.")
        return

    if result.status is PathStatus.NOT_CONNECTED:
        center = escape(str(result.center))
        output_console.print(f"[yellow]{actor} is not connected to {center}[/yellow]")
        return

    output_console.print(f"[bold]{actor}'s number is {result.distance}[/bold]")
    for step in result.steps:
        output_console.print(
            f"{escape(step.actor)} appeared in "
            f"[dim]{escape(format_titles(step.titles))}[/dim] with {escape(step.costar)}"
        )


def display_center_change(
    name: str, change: CenterChange, target_console: Console | None = None
) -> None:
    """Display the outcome of a center change."""
    output_console = target_console if target_console is not None else console
    if change is CenterChange.UNCHANGED:
        output_console.print(f"{escape(name)} is already the center of the universe.")
    else:
        output_console.print(
            f"[green]{escape(name)} is now the center of the acting universe.[/green]"
        )


def display_not_found(
    name: str,
    graph: Graph[str, Titles],
    note: str = "",
    target_console: Console | None = None,
) -> None:
    """Report an unknown actor, with close names when there are any.

    Args:
        name: The name that was not found.
        graph: Graph to draw suggestions from.
        note: Optional text appended to the error line.
        target_console: Optional Rich console (defaults to the error console).
    """
    output_console = target_console if target_console is not None else error_console
    message = f"[red]Error:[/red] {escape(name)} is not in the dataset."
    if note:
        message += f" {note}"
    output_console.print(message)

    result = fuzzy_find_actor(graph, name)
    suggestions = [result.match] if result.match is not None else result.suggestions
    if suggestions:
        output_console.print(escape(format_actor_suggestions(suggestions)))


def display_degree_entries(
    entries: list[DegreeEntry], low: int, high: int, target_console: Console | None = None
) -> None:
    """Display actors whose co-star count lies in a range."""
    output_console = target_console if target_console is not None else console
    if not entries:
        output_console.print(f"No actors found with degree between {low} and {high}.")
        return

    output_console.print(f"[bold]Actors with degree between {low} and {high}:[/bold]")
    for entry in entries:
        output_console.print(f"  {escape(entry.actor)} ({entry.degree} co-stars)")


def display_separation_entries(
    entries: list[SeparationEntry],
    low: int,
    high: int,
    target_console: Console | None = None,
) -> None:
    """Display actors whose separation from the center lies in a range."""
    output_console = target_console if target_console is not None else console
    if not entries:
        output_console.print(f"No actors found with separation between {low} and {high}.")
        return

    output_console.print(f"[bold]Actors with separation between {low} and {high}:[/bold]")
    for entry in entries:
        output_console.print(f"  {escape(entry.actor)} (Separation: {entry.separation})")


def display_best_centers(
    scores: list[CenterScore], n: int, target_console: Console | None = None
) -> None:
    """Display the best-ranked centers of the universe."""
    output_console = target_console if target_console is not None else console
    if not scores:
        output_console.print("No centers to rank.")
        return

    output_console.print(f"[bold]Top {n} best centers of the universe:[/bold]")
    for score in scores:
        output_console.print(
            f"  {escape(score.actor)} (Avg separation: {score.average_separation:.4f}, "
            f"reaches {score.reachable})"
        )


def display_connectivity(
    summary: ConnectivitySummary, target_console: Console | None = None
) -> None:
    """Display how many actors the center reaches and how closely."""
    output_console = target_console if target_console is not None else console
    center = escape(str(summary.center))
    output_console.print(f"{center} is connected to {summary.connected} actors.")
    output_console.print(f"Average separation: {summary.average_separation:.4f}")
    if summary.unreached:
        output_console.print(f"[dim]{summary.unreached} actors cannot reach {center}.[/dim]")


def display_help(target_console: Console | None = None) -> None:
    """Display the interactive command reference."""
    output_console = target_console if target_console is not None else console
    output_console.print(escape(HELP_TEXT))
