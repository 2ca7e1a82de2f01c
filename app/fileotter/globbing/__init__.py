"""Glob engine.

This package compiles shell-style glob patterns, walks directory trees
lazily, matches candidates against the compiled patterns, and aggregates
the results of several patterns into one ordered sequence.
"""

from fileotter.globbing.aggregator import aggregate
from fileotter.globbing.engine import Glob, GlobResult, glob, iglob
from fileotter.globbing.errors import (
    CycleDetected,
    FileOtterError,
    InvalidPatternError,
    TraversalWarning,
)
from fileotter.globbing.matcher import could_match_below, matches, names_directory
from fileotter.globbing.options import GlobOptions
from fileotter.globbing.pattern import Pattern, Segment, SegmentKind, compile_pattern
from fileotter.globbing.walker import Candidate, DirectoryWalker, walk

__all__ = [
    "Candidate",
    "CycleDetected",
    "DirectoryWalker",
    "FileOtterError",
    "Glob",
    "GlobOptions",
    "GlobResult",
    "InvalidPatternError",
    "Pattern",
    "Segment",
    "SegmentKind",
    "TraversalWarning",
    "aggregate",
    "compile_pattern",
    "could_match_below",
    "glob",
    "iglob",
    "matches",
    "names_directory",
    "walk",
]
