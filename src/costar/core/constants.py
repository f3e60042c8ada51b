"""Constants for Costar application.

Exit codes, dataset defaults, and matching thresholds.
"""

from typing import Final

# Exit codes (following Unix conventions)
EXIT_SUCCESS: Final[int] = 0
EXIT_USER_ERROR: Final[int] = 1
EXIT_INTERNAL_ERROR: Final[int] = 2
EXIT_CONFIG_ERROR: Final[int] = 3

# Dataset file layout: one "<id>|<value>" record per line
FIELD_SEPARATOR: Final[str] = "|"
DEFAULT_DATA_DIRNAME: Final[str] = "inputs"
DEFAULT_ACTORS_FILE: Final[str] = "actors.txt"
DEFAULT_MOVIES_FILE: Final[str] = "movies.txt"
DEFAULT_MOVIE_ACTORS_FILE: Final[str] = "movie-actors.txt"

# The traditional center of the acting universe
DEFAULT_CENTER: Final[str] = "Kevin Bacon"

# Default number of rows shown by `costar centers`
DEFAULT_BEST_CENTERS_LIMIT: Final[int] = 10

# RapidFuzz similarity threshold for actor name suggestions (0-100 scale)
ACTOR_MATCH_THRESHOLD: Final[int] = 70
MAX_SUGGESTIONS: Final[int] = 5

# Interactive loop prompt
PROMPT: Final[str] = "Kevin Bacon game > "
