"""Core data types for Costar.

The Graph protocol is the only contract the traversal code relies on;
any storage structure providing these methods can be searched.
Query results are immutable dataclasses.
"""

from collections.abc import Hashable, Sequence
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Protocol, TypeVar

V = TypeVar("V", bound=Hashable)
E = TypeVar("E")

# Edge label of the co-star graph: titles of the movies two actors share
Titles = set[str]


class Graph(Protocol[V, E]):
    """A mutable graph of vertices and labeled, directed edges.

    Undirected edges are a pair of directed edges carrying the same label,
    so both endpoints see each other through out_neighbors and in_neighbors.
    """

    def insert_vertex(self, v: V) -> None: ...

    def insert_directed(self, u: V, v: V, label: E) -> None: ...

    def insert_undirected(self, u: V, v: V, label: E) -> None: ...

    def has_vertex(self, v: V) -> bool: ...

    def vertices(self) -> Sequence[V]: ...

    def out_neighbors(self, v: V) -> Sequence[V]: ...

    def in_neighbors(self, v: V) -> Sequence[V]: ...

    def get_label(self, u: V, v: V) -> E | None: ...

    def out_degree(self, v: V) -> int: ...

    def in_degree(self, v: V) -> int: ...

    def num_vertices(self) -> int: ...

    def num_edges(self) -> int: ...


class TreeState(Enum):
    """Freshness of the cached BFS tree relative to the current center."""

    ABSENT = auto()  # Never built
    STALE = auto()  # Built for a previous center
    FRESH = auto()  # Built for the current center


class CenterChange(Enum):
    """Outcome of a center update."""

    CHANGED = auto()
    UNCHANGED = auto()  # Requested actor was already the center


class PathStatus(Enum):
    """How an actor relates to the current center."""

    IS_CENTER = auto()
    NOT_CONNECTED = auto()
    CONNECTED = auto()


@dataclass(frozen=True)
class PathStep:
    """One link of a co-star chain.

    Attributes:
        actor: Actor closer to the center.
        costar: Next actor along the chain.
        titles: Movies the two appeared in together.
    """

    actor: str
    costar: str
    titles: frozenset[str] = field(default_factory=frozenset)


@dataclass(frozen=True)
class PathResult:
    """Shortest co-star chain between the center and an actor.

    Attributes:
        actor: The actor the path was requested for.
        center: The center the path is measured from.
        status: Whether the actor is the center, unreachable, or connected.
        distance: Number of links in the chain (the actor's "number"),
            or None when not connected.
        steps: Chain links ordered from the center outward.
    """

    actor: str
    center: str | None
    status: PathStatus
    distance: int | None = None
    steps: tuple[PathStep, ...] = ()


@dataclass(frozen=True)
class DegreeEntry:
    """An actor with the number of distinct co-stars they have."""

    actor: str
    degree: int


@dataclass(frozen=True)
class SeparationEntry:
    """An actor with their separation from the current center."""

    actor: str
    separation: int


@dataclass(frozen=True)
class CenterScore:
    """A candidate center ranked by average separation.

    Attributes:
        actor: The candidate center.
        average_separation: Mean distance to every actor it reaches.
        reachable: Number of other actors reached from this candidate.
    """

    actor: str
    average_separation: float
    reachable: int


@dataclass(frozen=True)
class ConnectivitySummary:
    """How well the current center connects to the rest of the graph.

    Attributes:
        center: The current center.
        connected: Actors reachable from the center, excluding the center.
        average_separation: Mean separation of the reachable actors.
        unreached: Actors in the graph with no path to the center.
    """

    center: str | None
    connected: int
    average_separation: float
    unreached: int
