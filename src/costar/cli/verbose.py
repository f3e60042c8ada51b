"""Step timing for slow Costar commands.

Loading a large dataset and ranking every actor as a center can take a
while. With --verbose each such step reports on stderr when it started,
how long it took, and what it produced; query results on stdout are
untouched.
"""

import time
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import UTC, datetime

import click
from rich.console import Console
from rich.markup import escape

_verbose_console = Console(stderr=True, highlight=False)


@dataclass
class TimedStep:
    """A step being timed.

    Attributes:
        name: Step name shown in the log.
        result: Summary of what the step produced; set it inside the block.
    """

    name: str
    result: str | None = None
    started: float = field(default_factory=time.perf_counter, repr=False)

    @property
    def elapsed(self) -> float:
        return time.perf_counter() - self.started


class VerboseLogger:
    """Timestamped step log on stderr, silent unless enabled."""

    def __init__(self, enabled: bool = False, console: Console | None = None) -> None:
        self.enabled = enabled
        self._console = console if console is not None else _verbose_console

    def log(self, message: str) -> None:
        """Print a message prefixed with an HH:MM:SS timestamp."""
        if not self.enabled:
            return
        timestamp = datetime.now(UTC).strftime("%H:%M:%S")
        self._console.print(f"[dim][{timestamp}][/dim] {message}")

    @contextmanager
    def step(self, name: str) -> Iterator[TimedStep]:
        """Time the enclosed block as one named step.

        Logs "Starting" on entry and "Completed" with the duration and the
        step's result on exit. A block that raises is logged as "Failed"
        and the exception propagates.

        Example:
            with verbose.step("load dataset") as step:
                graph = build_costar_graph(dataset)
                step.result = f"{graph.num_vertices()} actors"
        """
        timed = TimedStep(name=name)
        self.log(f"Starting: {escape(name)}")
        try:
            yield timed
        except Exception:
            self.log(f"[red]Failed:[/red] {escape(name)} ({timed.elapsed:.2f}s)")
            raise

        summary = f"Completed: {escape(name)} ({timed.elapsed:.2f}s)"
        if timed.result:
            summary += f" - {escape(timed.result)}"
        self.log(summary)


def get_verbose_logger(ctx: click.Context) -> VerboseLogger:
    """Return the session's verbose logger, created once from --verbose.

    The logger is cached in ctx.obj so every command and the interactive
    loop share one instance.
    """
    if ctx.obj is None:
        return VerboseLogger(enabled=False)
    verbose = ctx.obj.get("verbose_logger")
    if verbose is None:
        verbose = VerboseLogger(enabled=ctx.obj.get("verbose", False))
        ctx.obj["verbose_logger"] = verbose
    return verbose
