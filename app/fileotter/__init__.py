"""fileotter - directory helpers and a shell-style glob engine."""

from fileotter.directory import Dir
from fileotter.globbing import GlobOptions, InvalidPatternError, glob, iglob

__version__ = "0.1.0"

__all__ = [
    "Dir",
    "GlobOptions",
    "InvalidPatternError",
    "__version__",
    "glob",
    "iglob",
]
