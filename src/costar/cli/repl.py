"""Interactive command loop for the Costar game.

Reads single-line commands such as "p Diane Keaton" or "d 1 5", validates
their arguments, and dispatches them to the query functions. Argument
errors are reported here; the queries only ever see well-formed input.
"""

import logging
from typing import TextIO

from rich.console import Console
from rich.markup import escape
from rich.status import Status

from costar.cli import display
from costar.cli.verbose import VerboseLogger
from costar.core.constants import PROMPT
from costar.core.exceptions import NotFoundError
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

INVALID_RANGE = "Invalid input. Please use two integers for <low> <high>."


def parse_command(line: str) -> tuple[str, str]:
    """Split a command line into its command word and the rest.

    Examples:
        >>> parse_command("p Diane Keaton")
        ('p', 'Diane Keaton')
        >>> parse_command("  i ")
        ('i', '')
    """
    parts = line.strip().split(maxsplit=1)
    if not parts:
        return "", ""
    cmd = parts[0]
    rest = parts[1].strip() if len(parts) > 1 else ""
    return cmd, rest


def parse_range(rest: str) -> tuple[int, int] | None:
    """Parse "<low> <high>" into two integers.

    Returns:
        The bounds, or None when there are not exactly two fields.

    Raises:
        ValueError: If either field is not an integer.
    """
    fields = rest.split()
    if len(fields) != 2:
        return None
    return int(fields[0]), int(fields[1])


class CommandLoop:
    """Read-dispatch loop over a Universe.

    Attributes:
        universe: Query state shared by every command in the session.
        console: Console receiving command output.
        verbose: Logger timing long-running commands.
    """

    def __init__(
        self,
        universe: Universe,
        console: Console | None = None,
        verbose: VerboseLogger | None = None,
    ) -> None:
        self.universe = universe
        self.console = console if console is not None else display.console
        self.verbose = verbose if verbose is not None else VerboseLogger(enabled=False)

    def run(self, stream: TextIO) -> None:
        """Prompt for and execute commands until "q" or end of input."""
        while True:
            self.console.print(f"\n{escape(PROMPT)}", end="")
            line = stream.readline()
            if not line:
                self.console.print()
                self.console.print("Goodbye!")
                return
            if not self.execute(line):
                return

    def execute(self, line: str) -> bool:
        """Execute one command line.

        Returns:
            False when the session should end, True otherwise.
        """
        cmd, rest = parse_command(line)
        logger.debug("Command %r with arguments %r", cmd, rest)

        if not cmd:
            self.console.print("Enter a command or type 'h' for help.")
        elif cmd == "q":
            self.console.print("Goodbye!")
            return False
        elif cmd == "h":
            display.display_help(self.console)
        elif cmd == "p":
            self._path(rest)
        elif cmd == "u":
            self._center(rest)
        elif cmd == "d":
            self._degree(rest)
        elif cmd == "s":
            self._separation(rest)
        elif cmd == "c":
            self._centers(rest)
        elif cmd == "i":
            display.display_connectivity(connectivity_info(self.universe), self.console)
        else:
            self.console.print("Unknown command. Enter 'h' to see available commands.")
        return True

    def _path(self, rest: str) -> None:
        if not rest:
            self.console.print("Usage: p <name>")
            return
        try:
            result = find_path(self.universe, rest)
        except NotFoundError as e:
            display.display_not_found(e.name, self.universe.graph, target_console=self.console)
            return
        display.display_path(result, self.console)

    def _center(self, rest: str) -> None:
        if not rest:
            self.console.print("Usage: u <actor name>")
            return
        try:
            change = set_center(self.universe, rest)
        except NotFoundError as e:
            display.display_not_found(
                e.name, self.universe.graph, note="Center not changed.", target_console=self.console
            )
            return
        display.display_center_change(rest, change, self.console)

    def _degree(self, rest: str) -> None:
        try:
            bounds = parse_range(rest)
        except ValueError:
            self.console.print(INVALID_RANGE)
            return
        if bounds is None:
            self.console.print("Usage: d <low> <high>")
            return
        low, high = bounds
        entries = list_by_degree_range(self.universe, low, high)
        display.display_degree_entries(entries, low, high, self.console)

    def _separation(self, rest: str) -> None:
        try:
            bounds = parse_range(rest)
        except ValueError:
            self.console.print(INVALID_RANGE)
            return
        if bounds is None:
            self.console.print("Usage: s <low> <high>")
            return
        low, high = bounds
        entries = list_by_separation_range(self.universe, low, high)
        display.display_separation_entries(entries, low, high, self.console)

    def _centers(self, rest: str) -> None:
        if not rest:
            self.console.print("Usage: c <n>")
            return
        try:
            n = int(rest)
        except ValueError:
            self.console.print("Invalid input. Please enter a number for <n>.")
            return

        with (
            self.verbose.step("rank centers") as step,
            Status("Computing best centers... This may take a while.", console=self.console),
        ):
            scores = best_centers(self.universe, n)
            step.result = f"{len(scores)} ranked"
        display.display_best_centers(scores, n, self.console)
