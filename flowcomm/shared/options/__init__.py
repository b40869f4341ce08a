"""Parsing of the caller's name/value pairs into engine options"""

from .parser import (
    InfomapOptions,
    OptionEntry,
    OptionSpec,
    OPTION_SPECS,
    check_argument_counts,
    parse_arguments,
    parse_options,
)

__all__ = [
    "InfomapOptions",
    "OptionEntry",
    "OptionSpec",
    "OPTION_SPECS",
    "check_argument_counts",
    "parse_arguments",
    "parse_options",
]
