"""Tests for graph operations module.

Tests bfs, get_path, missing_vertices, tree_depths, and average_separation.
NetworkX serves as an independent shortest-path oracle.
"""

import networkx as nx
import pytest

from costar.core.graph import AdjacencyMapGraph
from costar.core.graph_ops import (
    average_separation,
    bfs,
    get_path,
    missing_vertices,
    tree_depths,
)
from costar.core.types import Titles


def _from_networkx(nx_graph: nx.Graph) -> AdjacencyMapGraph[int, Titles]:
    graph: AdjacencyMapGraph[int, Titles] = AdjacencyMapGraph()
    for node in nx_graph.nodes:
        graph.insert_vertex(node)
    for u, v in nx_graph.edges:
        graph.insert_undirected(u, v, {f"{u}-{v}"})
    return graph


class TestBfsTree:
    """Tests for BFS tree construction."""

    def test_path_graph_tree_edges(self, path_graph: AdjacencyMapGraph[str, Titles]) -> None:
        """Tree edges point child -> parent: Bob -> Alice, Carol -> Bob."""
        tree = bfs(path_graph, "Alice")

        assert set(tree.vertices()) == {"Alice", "Bob", "Carol"}
        assert tree.out_neighbors("Bob") == ["Alice"]
        assert tree.out_neighbors("Carol") == ["Bob"]
        assert tree.out_neighbors("Alice") == [], "Root must have no outgoing edge"
        assert tree.num_edges() == 2

    def test_tree_edges_copy_source_labels(
        self, path_graph: AdjacencyMapGraph[str, Titles]
    ) -> None:
        """Each tree edge carries the label of the source-graph edge."""
        tree = bfs(path_graph, "Alice")

        assert tree.get_label("Bob", "Alice") == {"M1"}
        assert tree.get_label("Carol", "Bob") == {"M2"}

    def test_absent_source_returns_empty_tree(
        self, path_graph: AdjacencyMapGraph[str, Titles]
    ) -> None:
        """A source outside the graph yields no vertices and no edges."""
        tree = bfs(path_graph, "Nobody")

        assert tree.num_vertices() == 0
        assert tree.num_edges() == 0

    def test_isolated_source_returns_root_only(self) -> None:
        """A vertex without neighbors is a one-vertex tree."""
        graph: AdjacencyMapGraph[str, Titles] = AdjacencyMapGraph()
        graph.insert_vertex("Solo")

        tree = bfs(graph, "Solo")

        assert tree.vertices() == ["Solo"]
        assert tree.num_edges() == 0

    def test_unreachable_vertices_are_excluded(
        self, split_graph: AdjacencyMapGraph[str, Titles]
    ) -> None:
        """Only the source's component ends up in the tree."""
        tree = bfs(split_graph, "Alice")

        assert set(tree.vertices()) == {"Alice", "Bob", "Carol"}

    def test_does_not_mutate_source_graph(
        self, path_graph: AdjacencyMapGraph[str, Titles]
    ) -> None:
        """Building a tree leaves the searched graph untouched."""
        before = (path_graph.vertices(), path_graph.num_edges())

        bfs(path_graph, "Bob")

        assert (path_graph.vertices(), path_graph.num_edges()) == before

    def test_directed_edges_followed_forward_only(self) -> None:
        """Traversal uses out-neighbors, so A -> B does not reach A from B."""
        graph: AdjacencyMapGraph[str, str] = AdjacencyMapGraph()
        graph.insert_directed("A", "B", "x")

        assert set(bfs(graph, "A").vertices()) == {"A", "B"}
        assert bfs(graph, "B").vertices() == ["B"]

    def test_cycle_discovers_each_vertex_once(self) -> None:
        """In a cycle every non-root vertex still has exactly one parent."""
        graph: AdjacencyMapGraph[str, str] = AdjacencyMapGraph()
        for a, b in [("A", "B"), ("B", "C"), ("C", "D"), ("D", "A")]:
            graph.insert_undirected(a, b, f"{a}{b}")

        tree = bfs(graph, "A")

        for v in ["B", "C", "D"]:
            assert tree.out_degree(v) == 1, f"{v} should have exactly one parent"
        assert tree_depths(tree, "A") == {"A": 0, "B": 1, "D": 1, "C": 2}


class TestBfsShortestPaths:
    """BFS depths must match true shortest-path distances."""

    @pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
    def test_depths_match_networkx(self, seed: int) -> None:
        """Tree depth equals NetworkX shortest-path length for random graphs."""
        nx_graph = nx.gnp_random_graph(40, 0.08, seed=seed)
        graph = _from_networkx(nx_graph)

        tree = bfs(graph, 0)
        depths = tree_depths(tree, 0)
        expected = nx.single_source_shortest_path_length(nx_graph, 0)

        assert depths == expected

    @pytest.mark.parametrize("seed", [0, 7])
    def test_every_path_has_depth_plus_one_vertices(self, seed: int) -> None:
        """get_path length is depth + 1 and consecutive vertices are adjacent."""
        nx_graph = nx.gnp_random_graph(30, 0.1, seed=seed)
        graph = _from_networkx(nx_graph)
        tree = bfs(graph, 0)
        depths = tree_depths(tree, 0)

        for v, depth in depths.items():
            path = get_path(tree, v)
            assert path[0] == 0 and path[-1] == v
            assert len(path) == depth + 1
            for a, b in zip(path, path[1:]):
                assert graph.get_label(a, b) is not None, f"{a} and {b} are not adjacent"

    def test_missing_vertices_match_unreachable_nodes(self) -> None:
        """Vertices left out of the tree are exactly those without a path."""
        nx_graph = nx.Graph()
        nx_graph.add_edges_from([(0, 1), (1, 2), (3, 4)])
        nx_graph.add_node(5)
        graph = _from_networkx(nx_graph)

        tree = bfs(graph, 0)

        reachable = set(nx.node_connected_component(nx_graph, 0))
        assert missing_vertices(graph, tree) == set(nx_graph.nodes) - reachable


class TestGetPath:
    """Tests for path reconstruction."""

    def test_path_from_root_to_target(self, path_graph: AdjacencyMapGraph[str, Titles]) -> None:
        """Path runs root first, target last."""
        tree = bfs(path_graph, "Alice")

        assert get_path(tree, "Carol") == ["Alice", "Bob", "Carol"]

    def test_path_to_root_is_root_only(self, path_graph: AdjacencyMapGraph[str, Titles]) -> None:
        """The root's path is just the root."""
        tree = bfs(path_graph, "Alice")

        assert get_path(tree, "Alice") == ["Alice"]

    def test_vertex_not_in_tree_returns_empty(
        self, split_graph: AdjacencyMapGraph[str, Titles]
    ) -> None:
        """A vertex outside the tree has no path."""
        tree = bfs(split_graph, "Alice")

        assert get_path(tree, "Dave") == []
        assert get_path(tree, "Nobody") == []

    def test_path_in_empty_tree(self, path_graph: AdjacencyMapGraph[str, Titles]) -> None:
        """Every lookup in an empty tree returns an empty path."""
        tree = bfs(path_graph, "Nobody")

        assert get_path(tree, "Alice") == []


class TestMissingVertices:
    """Tests for the set difference utility."""

    def test_disjoint_and_covering(self, split_graph: AdjacencyMapGraph[str, Titles]) -> None:
        """Missing plus tree vertices cover the graph without overlap."""
        tree = bfs(split_graph, "Alice")

        missing = missing_vertices(split_graph, tree)

        assert missing == {"Dave", "Erin"}
        assert missing.isdisjoint(tree.vertices())
        assert missing | set(tree.vertices()) == set(split_graph.vertices())

    def test_empty_subgraph_misses_everything(
        self, path_graph: AdjacencyMapGraph[str, Titles]
    ) -> None:
        """Against an empty tree every vertex is missing."""
        tree = bfs(path_graph, "Nobody")

        assert missing_vertices(path_graph, tree) == {"Alice", "Bob", "Carol"}

    def test_full_subgraph_misses_nothing(
        self, path_graph: AdjacencyMapGraph[str, Titles]
    ) -> None:
        """A spanning tree leaves nothing missing."""
        assert missing_vertices(path_graph, bfs(path_graph, "Bob")) == set()


class TestAverageSeparation:
    """Tests for mean tree depth."""

    def test_path_graph_average(self, path_graph: AdjacencyMapGraph[str, Titles]) -> None:
        """Alice - Bob - Carol from Alice: (1 + 2) / 2 = 1.5."""
        tree = bfs(path_graph, "Alice")

        assert average_separation(tree, "Alice") == 1.5

    def test_star_hub_average_is_one(self, star_graph: AdjacencyMapGraph[str, Titles]) -> None:
        """Every leaf is one hop from the hub."""
        assert average_separation(bfs(star_graph, "H"), "H") == 1.0

    def test_star_leaf_average(self, star_graph: AdjacencyMapGraph[str, Titles]) -> None:
        """From a leaf: hub at 1, three other leaves at 2 -> 7 / 4."""
        assert average_separation(bfs(star_graph, "L1"), "L1") == pytest.approx(1.75)

    def test_root_only_tree_is_zero(self) -> None:
        """A tree with no vertex besides the root averages 0.0."""
        graph: AdjacencyMapGraph[str, Titles] = AdjacencyMapGraph()
        graph.insert_vertex("Solo")

        assert average_separation(bfs(graph, "Solo"), "Solo") == 0.0

    def test_empty_tree_is_zero(self, path_graph: AdjacencyMapGraph[str, Titles]) -> None:
        """An empty tree averages 0.0 instead of dividing by zero."""
        assert average_separation(bfs(path_graph, "Nobody"), "Nobody") == 0.0

    def test_matches_mean_of_depths(self) -> None:
        """Average equals the mean of the non-root depths."""
        nx_graph = nx.balanced_tree(2, 3)
        graph = _from_networkx(nx_graph)
        tree = bfs(graph, 0)
        depths = [d for v, d in tree_depths(tree, 0).items() if v != 0]

        assert average_separation(tree, 0) == pytest.approx(sum(depths) / len(depths))


class TestTreeDepths:
    """Tests for the forward tree traversal."""

    def test_depths_from_root(self, path_graph: AdjacencyMapGraph[str, Titles]) -> None:
        """Depths count edges from the root."""
        tree = bfs(path_graph, "Bob")

        assert tree_depths(tree, "Bob") == {"Bob": 0, "Alice": 1, "Carol": 1}

    def test_absent_root_gives_empty_map(
        self, path_graph: AdjacencyMapGraph[str, Titles]
    ) -> None:
        """No depths when the root is not in the tree."""
        assert tree_depths(bfs(path_graph, "Alice"), "Nobody") == {}
