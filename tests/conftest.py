"""Pytest configuration and shared fixtures.

Small hand-built co-star graphs with known distances, plus the sample
dataset under tests/fixtures/datasets.

Sample dataset layout (movie titles in parentheses):

    Kevin Bacon -(Apollo 13)- Tom Hanks -(Sleepless, You've Got Mail)- Meg Ryan
    Meg Ryan -(Hanging Up)- Diane Keaton -(The Godfather)- Al Pacino
    Ed Island -(untitled movie 16)- Fred Island
    Isolated Ian (alone in Solo Film, so not a vertex)
"""

from pathlib import Path

import pytest

from costar.core.dataset import build_costar_graph, load_dataset
from costar.core.graph import AdjacencyMapGraph
from costar.core.types import Titles
from costar.core.universe import Universe

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "datasets"


def make_graph(edges: list[tuple[str, str, str]], *isolated: str) -> AdjacencyMapGraph[str, Titles]:
    """Build an undirected co-star graph from (actor, actor, title) triples."""
    graph: AdjacencyMapGraph[str, Titles] = AdjacencyMapGraph()
    for name in isolated:
        graph.insert_vertex(name)
    for a, b, title in edges:
        titles = set(graph.get_label(a, b) or ())
        titles.add(title)
        graph.insert_undirected(a, b, titles)
    return graph


@pytest.fixture
def path_graph() -> AdjacencyMapGraph[str, Titles]:
    """Alice - Bob - Carol."""
    return make_graph([("Alice", "Bob", "M1"), ("Bob", "Carol", "M2")])


@pytest.fixture
def star_graph() -> AdjacencyMapGraph[str, Titles]:
    """Hub H with four leaves L1..L4."""
    return make_graph([("H", f"L{i}", f"Movie {i}") for i in range(1, 5)])


@pytest.fixture
def split_graph() -> AdjacencyMapGraph[str, Titles]:
    """Two components: Alice - Bob - Carol, and Dave - Erin."""
    return make_graph(
        [("Alice", "Bob", "M1"), ("Bob", "Carol", "M2"), ("Dave", "Erin", "M3")]
    )


@pytest.fixture
def dataset_dir() -> Path:
    """Directory holding the sample actors/movies/movie-actors files."""
    return FIXTURES_DIR


@pytest.fixture
def bacon_graph(dataset_dir: Path) -> AdjacencyMapGraph[str, Titles]:
    """Co-star graph built from the sample dataset."""
    dataset = load_dataset(
        dataset_dir / "actors.txt",
        dataset_dir / "movies.txt",
        dataset_dir / "movie-actors.txt",
    )
    return build_costar_graph(dataset)


@pytest.fixture
def bacon_universe(bacon_graph: AdjacencyMapGraph[str, Titles]) -> Universe:
    """Sample universe centered on Kevin Bacon."""
    return Universe(graph=bacon_graph, center="Kevin Bacon")
