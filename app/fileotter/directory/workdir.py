"""Changing and restoring the process working directory.

The working directory is process-wide state. Library code in fileotter
takes an explicit base directory instead of relying on it; these helpers
exist for callers that really need to switch it.
"""

import logging
import os
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

logger = logging.getLogger(__name__)


def chdir(path: Path | str) -> bool:
    """Change the process working directory.

    Args:
        path: Directory to switch to.

    Returns:
        True on success, False if the directory could not be entered.
    """
    try:
        os.chdir(path)
    except OSError as e:
        logger.warning("Cannot change directory to %s: %s", path, e)
        return False
    return True


@contextmanager
def working_directory(path: Path | str) -> Iterator[Path]:
    """Temporarily switch the working directory.

    The previous directory is restored on every exit path, including
    exceptions raised inside the block.

    Args:
        path: Directory to switch to.

    Yields:
        The directory switched to, as an absolute path.

    Raises:
        OSError: If the directory cannot be entered.
    """
    previous = Path.cwd()
    os.chdir(path)
    try:
        yield Path.cwd()
    finally:
        os.chdir(previous)
