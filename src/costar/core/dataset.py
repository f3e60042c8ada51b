"""Dataset loading for Costar.

Reads the pipe-delimited actor, movie, and cast files and builds the
co-star graph: actors are vertices, and two actors who appeared in the
same movie share an undirected edge labeled with every title they share.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from itertools import combinations
from pathlib import Path

from costar.core.config import CostarConfig, resolve_data_dir
from costar.core.constants import FIELD_SEPARATOR
from costar.core.exceptions import DatasetError
from costar.core.graph import AdjacencyMapGraph
from costar.core.types import Titles

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Dataset:
    """Raw records of the three dataset files.

    Attributes:
        actors: Actor ID to actor name.
        movies: Movie ID to movie title.
        casts: Movie ID to the IDs of its actors, in file order without repeats.
    """

    actors: Mapping[str, str] = field(default_factory=dict)
    movies: Mapping[str, str] = field(default_factory=dict)
    casts: Mapping[str, tuple[str, ...]] = field(default_factory=dict)


def read_pairs(path: Path) -> list[tuple[str, str]]:
    """Read "<key>|<value>" records from a dataset file.

    Blank lines, lines that do not split into exactly two fields, and
    lines with an empty field are skipped.

    Args:
        path: File to read.

    Returns:
        (key, value) pairs in file order.

    Raises:
        DatasetError: If the file cannot be read.
    """
    try:
        with open(path, encoding="utf-8") as f:
            lines = f.read().splitlines()
    except OSError as e:
        raise DatasetError(f"Cannot read dataset file {path}: {e}") from e

    pairs = []
    for lineno, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        parts = line.split(FIELD_SEPARATOR)
        if len(parts) != 2 or not all(parts):
            logger.debug("Skipping malformed line %d in %s: %r", lineno, path.name, line)
            continue
        pairs.append((parts[0], parts[1]))
    return pairs


def load_dataset(actors_path: Path, movies_path: Path, movie_actors_path: Path) -> Dataset:
    """Load the actor, movie, and cast files.

    Raises:
        DatasetError: If any file cannot be read.
    """
    actors = dict(read_pairs(actors_path))
    movies = dict(read_pairs(movies_path))

    casts: dict[str, dict[str, None]] = {}
    for movie_id, actor_id in read_pairs(movie_actors_path):
        casts.setdefault(movie_id, {})[actor_id] = None

    logger.debug(
        "Loaded %d actors, %d movies, %d casts", len(actors), len(movies), len(casts)
    )
    return Dataset(
        actors=actors,
        movies=movies,
        casts={movie_id: tuple(cast) for movie_id, cast in casts.items()},
    )


def load_configured_dataset(config: CostarConfig, data_dir: Path | None = None) -> Dataset:
    """Load the dataset files named by a configuration.

    Args:
        config: Configuration naming the data directory and files.
        data_dir: Optional directory override (e.g. from --data-dir).

    Raises:
        DatasetError: If any file cannot be read.
    """
    base = data_dir if data_dir is not None else resolve_data_dir(config)
    return load_dataset(
        base / config.actors_file,
        base / config.movies_file,
        base / config.movie_actors_file,
    )


def build_costar_graph(dataset: Dataset) -> AdjacencyMapGraph[str, Titles]:
    """Connect every pair of actors who appeared in the same movie.

    When a pair shares several movies the edge label collects all of
    their titles. Actors only become vertices through a co-star link, so
    an actor whose movies have no other known cast member is left out.

    Args:
        dataset: Loaded dataset records.

    Returns:
        Undirected co-star graph keyed by actor name.
    """
    graph: AdjacencyMapGraph[str, Titles] = AdjacencyMapGraph()

    for movie_id, cast in dataset.casts.items():
        title = dataset.movies.get(movie_id)
        if title is None:
            logger.warning("Movie %s has no title; using its ID", movie_id)
            title = movie_id

        names = []
        for actor_id in cast:
            name = dataset.actors.get(actor_id)
            if name is None:
                logger.warning("Skipping unknown actor %s in movie %s", actor_id, movie_id)
                continue
            names.append(name)

        for a, b in combinations(names, 2):
            if a == b:
                continue
            titles = set(graph.get_label(a, b) or ())
            titles.add(title)
            graph.insert_undirected(a, b, titles)

    logger.debug("Built co-star graph: %r", graph)
    return graph
