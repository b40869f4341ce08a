import logging
import numbers
from typing import Any, Dict, Optional, Sequence, Tuple

import numpy as np
from pydantic.dataclasses import dataclass

from flowcomm.shared.errors import ArgumentError, ErrorKind

logger = logging.getLogger(__name__)

# Outputs a caller may request: membership vector and codelength
MAX_OUTPUTS = 2

TWO_LEVEL_FLAG = "--two-level"


@dataclass(frozen=True)
class OptionSpec:
    """Validation range and engine flag for one recognized parameter"""

    name: str
    flag: str
    minimum: float
    maximum: Optional[float] = None
    separator: str = ""

    def accepts(self, value: float) -> bool:
        # NaN fails both comparisons and is rejected
        if not value >= self.minimum:
            return False
        return self.maximum is None or value <= self.maximum


OPTION_SPECS: Dict[str, OptionSpec] = {
    # Number of outer-most loops to run before picking the best solution
    "n": OptionSpec(name="N", flag="-N", minimum=0.0),
    # Probability of teleporting to a random node or link
    "p": OptionSpec(name="p", flag="-p", minimum=0.0, maximum=1.0),
    # Additional probability of teleporting to itself
    "y": OptionSpec(name="y", flag="-y", minimum=0.0, maximum=1.0),
    # Scales link flow to change the cost of moving between modules
    "markov-time": OptionSpec(name="markov-time", flag="--markov-time", minimum=0.0, separator=" "),
}


def format_value(value: float) -> str:
    """Render a numeric option the way the engine's command line expects it"""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


@dataclass(frozen=True)
class OptionEntry:
    """A validated (parameter, value) pair"""

    name: str
    value: float

    def to_token(self) -> str:
        spec = OPTION_SPECS[self.name.lower()]
        return f"{spec.flag}{spec.separator}{format_value(self.value)}"


@dataclass(frozen=True)
class InfomapOptions:
    """
    Engine configuration built from the caller's name/value pairs.

    Entries keep the order in which they were given; they are only turned into
    the engine's token syntax by ``to_args``.
    """

    entries: Tuple[OptionEntry, ...] = ()
    two_level: bool = True

    def get(self, name: str) -> Optional[float]:
        """Value of the last entry with this name, or None when not given"""
        value = None
        for entry in self.entries:
            if entry.name.lower() == name.lower():
                value = entry.value
        return value

    def to_args(self) -> str:
        tokens = [entry.to_token() for entry in self.entries]
        if self.two_level:
            tokens.append(TWO_LEVEL_FLAG)
        return " ".join(tokens)


def _as_real(value: Any) -> Optional[float]:
    """Return value as float if it is a real number, None otherwise"""
    if isinstance(value, np.ndarray):
        if value.size != 1 or value.dtype.kind not in "iuf":
            return None
        return float(value.reshape(-1)[0])
    if isinstance(value, (bool, np.bool_)):
        return None
    if isinstance(value, numbers.Real):
        return float(value)
    return None


def check_argument_counts(n_args: int, nargout: int) -> None:
    """
    Check the number of inputs and requested outputs

    Raises:
        ArgumentError: NOT_ENOUGH_ARGUMENTS when the matrix is missing,
            TOO_MANY_OUTPUTS when more than two outputs are requested
    """
    if n_args < 1:
        raise ArgumentError(ErrorKind.NOT_ENOUGH_ARGUMENTS, 0)
    if nargout > MAX_OUTPUTS:
        raise ArgumentError(ErrorKind.TOO_MANY_OUTPUTS, 0)


def parse_options(pairs: Sequence[Any], offset: int = 1) -> InfomapOptions:
    """
    Parse a flat ``name, value, name, value, ...`` sequence

    Args:
        pairs: The arguments following the matrix
        offset: Position of ``pairs[0]`` in the full argument list, used in errors

    Returns:
        Validated engine options

    Raises:
        ArgumentError: On the first invalid pair, carrying its position
    """
    entries = []
    index = 0
    while index < len(pairs):
        position = index + offset
        if index + 1 >= len(pairs):
            raise ArgumentError(ErrorKind.DANGLING_ARGUMENT, position)

        name, raw_value = pairs[index], pairs[index + 1]
        value = _as_real(raw_value)
        if not isinstance(name, str) or value is None:
            raise ArgumentError(ErrorKind.WRONG_ARGUMENT_TYPE, position)

        spec = OPTION_SPECS.get(name.lower())
        if spec is None:
            raise ArgumentError(ErrorKind.UNKNOWN_ARGUMENT, position, detail=name)
        if not spec.accepts(value):
            raise ArgumentError(ErrorKind.INVALID_ARGUMENT_VALUE, position + 1, detail=f"{spec.name}={value}")

        entries.append(OptionEntry(name=spec.name, value=value))
        index += 2

    options = InfomapOptions(entries=tuple(entries))
    logger.debug(f"Parsed engine options: {options.to_args()}")
    return options


def parse_arguments(args: Sequence[Any], nargout: int = MAX_OUTPUTS) -> InfomapOptions:
    """
    Validate argument counts and parse the options following the matrix

    Args:
        args: ``[matrix, name1, value1, ...]``
        nargout: Number of outputs the caller requests

    Returns:
        Validated engine options
    """
    check_argument_counts(len(args), nargout)
    return parse_options(list(args[1:]), offset=1)
