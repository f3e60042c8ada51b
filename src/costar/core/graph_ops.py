"""Breadth-first graph operations for Costar.

Pure functions over the Graph protocol. BFS trees are returned as new
graphs whose edges point from each child to its parent, so every vertex
except the root has exactly one outgoing edge.
This module must NOT import from cli/ - it's pure graph logic.
"""

from collections import deque

from costar.core.graph import AdjacencyMapGraph
from costar.core.types import E, Graph, V


def bfs(graph: Graph[V, E], source: V) -> AdjacencyMapGraph[V, E]:
    """Build a shortest-path tree rooted at a source vertex.

    Performs a level-order traversal from `source`. The first time a vertex
    is reached it is added to the tree with a single edge pointing back to
    the vertex it was reached from, labeled like the corresponding edge in
    `graph`. Each vertex is discovered once, so its depth in the tree equals
    its shortest-path distance from `source`.

    The order of siblings at the same depth follows the graph's neighbor
    iteration order and must not be relied upon.

    Args:
        graph: The graph to search.
        source: The root of the tree.

    Returns:
        A new graph holding the tree (child -> parent edges). Empty if
        `source` is not in `graph`.
    """
    tree: AdjacencyMapGraph[V, E] = AdjacencyMapGraph()

    if not graph.has_vertex(source):
        return tree

    tree.insert_vertex(source)
    visited: set[V] = {source}
    queue: deque[V] = deque([source])

    while queue:
        current = queue.popleft()

        for neighbor in graph.out_neighbors(current):
            if neighbor not in visited:
                visited.add(neighbor)
                tree.insert_vertex(neighbor)
                tree.insert_directed(neighbor, current, graph.get_label(current, neighbor))
                queue.append(neighbor)

    return tree


def get_path(tree: Graph[V, E], v: V) -> list[V]:
    """Reconstruct the root-to-vertex path in a BFS tree.

    Walks child -> parent edges from `v` until reaching the root (the
    only vertex without an outgoing edge), then reverses the walk.

    `tree` must be a BFS tree as produced by bfs(). On a graph with a
    cycle of single out-edges this never returns.

    Args:
        tree: A BFS tree.
        v: The vertex to reach.

    Returns:
        Vertices from the root to `v`, both included. Empty if `v` is
        not in the tree.
    """
    if not tree.has_vertex(v):
        return []

    path = [v]
    parents = tree.out_neighbors(v)
    while parents:
        current = parents[0]
        path.append(current)
        parents = tree.out_neighbors(current)

    path.reverse()
    return path


def missing_vertices(graph: Graph[V, E], subgraph: Graph[V, E]) -> set[V]:
    """Return the vertices of `graph` that are not in `subgraph`.

    Typically used with a BFS tree to find vertices the search never reached.
    """
    return {v for v in graph.vertices() if not subgraph.has_vertex(v)}


def tree_depths(tree: Graph[V, E], root: V) -> dict[V, int]:
    """Compute the depth of every vertex of a BFS tree.

    Tree edges point child -> parent, so the children of a vertex are its
    in-neighbors. Walks the tree top-down from `root` level by level.

    Args:
        tree: A BFS tree.
        root: The tree's root.

    Returns:
        Mapping of vertex to depth, with the root at 0. Empty if `root`
        is not in the tree.
    """
    if not tree.has_vertex(root):
        return {}

    depths: dict[V, int] = {root: 0}
    queue: deque[V] = deque([root])

    while queue:
        current = queue.popleft()
        child_depth = depths[current] + 1

        for child in tree.in_neighbors(current):
            if child not in depths:
                depths[child] = child_depth
                queue.append(child)

    return depths


def average_separation(tree: Graph[V, E], root: V) -> float:
    """Compute the mean depth of the non-root vertices of a BFS tree.

    Args:
        tree: A BFS tree.
        root: The tree's root.

    Returns:
        Average number of edges between `root` and every other vertex it
        reaches. 0.0 when the tree holds no vertex besides the root.
    """
    total = 0
    count = 0
    for vertex, depth in tree_depths(tree, root).items():
        if vertex != root:
            total += depth
            count += 1

    if count == 0:
        return 0.0
    return total / count
