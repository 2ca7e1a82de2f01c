"""Directory operations.

This module provides the Dir facade, directory listing helpers,
working-directory switching and removal of directories.
"""

from fileotter.directory.dir import Dir, unlink
from fileotter.directory.listing import children, entries, exists, is_empty, iter_children
from fileotter.directory.operator import DirectoryOperator, RemovalResult, is_protected
from fileotter.directory.workdir import chdir, working_directory

__all__ = [
    "Dir",
    "DirectoryOperator",
    "RemovalResult",
    "chdir",
    "children",
    "entries",
    "exists",
    "is_empty",
    "is_protected",
    "iter_children",
    "unlink",
    "working_directory",
]
