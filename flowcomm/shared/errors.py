from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Argument validation failures, each carrying its fixed user-facing message"""

    TOO_MANY_OUTPUTS = "Too many output arguments."
    NOT_ENOUGH_ARGUMENTS = "Not enough input arguments."
    INVALID_ARGUMENT_VALUE = "Non valid argument value."
    WRONG_ARGUMENT_TYPE = "Non valid argument type."
    INVALID_MATRIX = (
        "Non valid input adjacency matrix. Accepts symmetric real dense-type (n x n) matrices "
        "or sparse edges-list representation [num_edges x 3] array of edges list with edge "
        "endpoints and weight."
    )
    DANGLING_ARGUMENT = "Expected some argument value but empty found."
    UNKNOWN_ARGUMENT = "Unknown argument."

    @property
    def message(self) -> str:
        return self.value


class ArgumentError(ValueError):
    """
    Raised when the caller's arguments fail validation.

    Args:
        kind: Which validation rule failed
        position: Index of the offending argument (the matrix is position 0)
        detail: Optional diagnostic text, kept out of the user-facing message
    """

    def __init__(self, kind: ErrorKind, position: int, detail: Optional[str] = None):
        self.kind = kind
        self.position = position
        self.detail = detail
        super().__init__(f"Error at argument: {position}: {kind.message}")


class EngineError(RuntimeError):
    """Raised when the clustering engine fails after validation succeeded"""
