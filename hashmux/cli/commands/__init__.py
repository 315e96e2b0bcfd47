"""
Click command implementations for hashmux CLI.

Each module corresponds to one hashmux command and is registered with
the main group by register_commands() in hashmux.cli.
"""

from .algorithms import list_algorithms
from .check import check
from .sums import sum_files
from .text import string

COMMANDS = [
    check,
    list_algorithms,
    string,
    sum_files,
]

__all__ = [
    "COMMANDS",
    "check",
    "list_algorithms",
    "string",
    "sum_files",
]
