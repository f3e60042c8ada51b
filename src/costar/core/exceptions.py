"""Custom exceptions for Costar.

All Costar-specific exceptions inherit from CostarError.
"""


class CostarError(Exception):
    """Base exception for Costar errors."""

    pass


class NotFoundError(CostarError):
    """A referenced actor is not a vertex of the graph.

    Raised when changing the center or requesting a path for a name
    that is absent from the dataset. An actor who is present but not
    connected to the center is a normal outcome, not this error.

    Attributes:
        name: The name that could not be found.
    """

    def __init__(self, name: str) -> None:
        super().__init__(f"{name} is not in the dataset.")
        self.name = name


class DatasetError(CostarError):
    """Error while reading the actor/movie dataset files.

    Raised when a dataset file is missing or cannot be read.
    """

    pass


class ConfigError(CostarError):
    """Error during configuration loading.

    Raised when the config file has invalid TOML syntax
    or contains values of the wrong type.
    """

    pass
