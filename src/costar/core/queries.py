"""Center-relative queries over the co-star graph.

Each function takes the Universe it operates on. Only set_center()
changes state; the tree-based queries rebuild the cached BFS tree on
demand and otherwise leave the universe untouched.
"""

import logging

from costar.core.exceptions import NotFoundError
from costar.core.graph_ops import average_separation, bfs, get_path, missing_vertices, tree_depths
from costar.core.types import (
    CenterChange,
    CenterScore,
    ConnectivitySummary,
    DegreeEntry,
    PathResult,
    PathStatus,
    PathStep,
    SeparationEntry,
)
from costar.core.universe import Universe

logger = logging.getLogger(__name__)


def set_center(universe: Universe, name: str) -> CenterChange:
    """Make `name` the new center of the universe.

    The BFS tree is not rebuilt here; the next query that needs it does so.

    Args:
        universe: The query state to update.
        name: Actor to use as the new center.

    Returns:
        CenterChange.UNCHANGED if `name` already is the center (state is
        left as is), CenterChange.CHANGED otherwise.

    Raises:
        NotFoundError: If `name` is not an actor in the graph.
    """
    if not universe.graph.has_vertex(name):
        raise NotFoundError(name)

    if name == universe.center:
        return CenterChange.UNCHANGED

    logger.debug("Center changed from %r to %r", universe.center, name)
    universe.center = name
    universe.mark_stale()
    return CenterChange.CHANGED


def find_path(universe: Universe, actor: str) -> PathResult:
    """Find the shortest co-star chain from the center to `actor`.

    Titles for each link come from the co-star graph, not the tree.

    Args:
        universe: The query state.
        actor: The actor to reach.

    Returns:
        PathResult describing the chain, or whether `actor` is the center
        or disconnected from it.

    Raises:
        NotFoundError: If `actor` is not in the graph at all.
    """
    if not universe.graph.has_vertex(actor):
        raise NotFoundError(actor)

    tree = universe.ensure_tree()
    center = universe.center

    if actor == center:
        return PathResult(actor=actor, center=center, status=PathStatus.IS_CENTER, distance=0)

    if not tree.has_vertex(actor):
        return PathResult(actor=actor, center=center, status=PathStatus.NOT_CONNECTED)

    path = get_path(tree, actor)
    steps = tuple(
        PathStep(
            actor=a,
            costar=b,
            titles=frozenset(universe.graph.get_label(a, b) or ()),
        )
        for a, b in zip(path, path[1:])
    )
    return PathResult(
        actor=actor,
        center=center,
        status=PathStatus.CONNECTED,
        distance=len(path) - 1,
        steps=steps,
    )


def list_by_degree_range(universe: Universe, low: int, high: int) -> list[DegreeEntry]:
    """List actors whose number of distinct co-stars lies in [low, high].

    Returns:
        Entries sorted by ascending degree. Actors with equal degree keep
        the graph's vertex order.
    """
    graph = universe.graph
    entries = [
        DegreeEntry(actor=actor, degree=degree)
        for actor in graph.vertices()
        if low <= (degree := graph.out_degree(actor)) <= high
    ]
    return sorted(entries, key=lambda e: e.degree)


def list_by_separation_range(universe: Universe, low: int, high: int) -> list[SeparationEntry]:
    """List actors whose separation from the center lies in [low, high].

    The center itself has separation 0 and is listed when `low` is 0.
    Actors not connected to the center are never listed.

    Returns:
        Entries sorted by ascending separation.
    """
    tree = universe.ensure_tree()
    depths = tree_depths(tree, universe.center)
    entries = [
        SeparationEntry(actor=actor, separation=separation)
        for actor, separation in depths.items()
        if low <= separation <= high
    ]
    return sorted(entries, key=lambda e: e.separation)


def best_centers(universe: Universe, n: int) -> list[CenterScore]:
    """Rank every actor as a candidate center by average separation.

    Builds an independent BFS tree per actor, so the cost is proportional
    to V * (V + E). The universe's own center and cached tree are not used.

    Actors who reach nobody score 0.0 and therefore rank first.

    Args:
        universe: The query state.
        n: Number of candidates to return.

    Returns:
        Up to `n` scores in ascending order of average separation, ties
        kept in the graph's vertex order. Empty when `n` is not positive.
    """
    if n <= 0:
        return []

    graph = universe.graph
    scores = []
    for actor in graph.vertices():
        tree = bfs(graph, actor)
        scores.append(
            CenterScore(
                actor=actor,
                average_separation=average_separation(tree, actor),
                reachable=tree.num_vertices() - 1,
            )
        )
    logger.debug("Scored %d candidate centers", len(scores))

    scores.sort(key=lambda s: s.average_separation)
    return scores[:n]


def connectivity_info(universe: Universe) -> ConnectivitySummary:
    """Summarize how many actors the center reaches and how closely."""
    tree = universe.ensure_tree()
    center = universe.center
    connected = sum(1 for v in tree.vertices() if v != center)
    return ConnectivitySummary(
        center=center,
        connected=connected,
        average_separation=average_separation(tree, center),
        unreached=len(missing_vertices(universe.graph, tree)),
    )
