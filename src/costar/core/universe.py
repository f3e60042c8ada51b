"""Center-of-the-universe state for Costar queries.

A Universe bundles the co-star graph with the current center and a
lazily rebuilt BFS tree rooted at that center. Query functions in
costar.core.queries take a Universe explicitly so every center change
and rebuild is visible at the call site.
"""

import logging
from dataclasses import dataclass, field

from costar.core.graph import AdjacencyMapGraph
from costar.core.graph_ops import bfs
from costar.core.types import Graph, Titles, TreeState

logger = logging.getLogger(__name__)


@dataclass
class Universe:
    """Mutable query state: graph, center, and cached BFS tree.

    Attributes:
        graph: The co-star graph (actors as vertices, shared titles as labels).
            Treated as read-only once queries start.
        center: The current center of the universe, or None if unset.
        tree: BFS tree rooted at the center it was last built for.
        tree_state: Freshness of `tree` relative to `center`.
    """

    graph: Graph[str, Titles]
    center: str | None = None
    tree: AdjacencyMapGraph[str, Titles] | None = field(default=None, repr=False)
    tree_state: TreeState = TreeState.ABSENT

    def mark_stale(self) -> None:
        """Invalidate the cached tree after a center change."""
        if self.tree_state is TreeState.FRESH:
            self.tree_state = TreeState.STALE

    def ensure_tree(self) -> AdjacencyMapGraph[str, Titles]:
        """Return a BFS tree rooted at the current center, rebuilding if needed.

        With no center set the tree is empty, which makes every actor
        unreachable rather than raising.
        """
        if self.tree is None or self.tree_state is not TreeState.FRESH:
            logger.debug("Building BFS tree from center %r", self.center)
            self.tree = bfs(self.graph, self.center)
            self.tree_state = TreeState.FRESH
            logger.debug(
                "BFS tree from %r reaches %d of %d actors",
                self.center,
                self.tree.num_vertices(),
                self.graph.num_vertices(),
            )
        return self.tree
