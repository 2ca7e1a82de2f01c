"""Removal of directories and files.

Handles deletion with dry-run support and per-path failure isolation.
The filesystem root and the user's home directory are never removed.
"""

import logging
import shutil
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RemovalResult:
    """Result of a single removal.

    Attributes:
        path: Path that was operated on.
        success: Whether the removal completed (or would complete, in dry-run).
        error: Error message if the removal failed, None otherwise.
        dry_run: Whether this was a dry-run (nothing removed).
    """

    path: str
    success: bool
    error: str | None = None
    dry_run: bool = False


def is_protected(path: Path) -> bool:
    """Check if a path must never be removed.

    Args:
        path: Path to check.

    Returns:
        True for the filesystem root and the user's home directory.
        Symbolic links are never protected: removing one leaves its target.
    """
    if path.is_symlink():
        return False
    try:
        resolved = path.resolve()
    except (OSError, RuntimeError):
        return False
    return resolved == Path(resolved.anchor) or resolved == Path.home().resolve()


class DirectoryOperator:
    """Removes directories (recursively), files and symbolic links.

    Args:
        dry_run: If True, report what would be removed without removing.
    """

    def __init__(self, dry_run: bool = False) -> None:
        self._dry_run = dry_run

    def remove(self, paths: Iterable[Path | str]) -> list[RemovalResult]:
        """Remove multiple paths and return one result per path.

        Failures are isolated: one path failing does not stop the others.

        Args:
            paths: Paths to remove.

        Returns:
            List of RemovalResult in input order.
        """
        results: list[RemovalResult] = []

        for path in paths:
            target = Path(path)
            if is_protected(target):
                logger.warning("Refusing to remove protected path: %s", target)
                results.append(
                    RemovalResult(
                        path=str(target),
                        success=False,
                        error=f"Protected path cannot be removed: {target}",
                    )
                )
                continue

            results.append(self._remove_single(target))

        return results

    def _remove_single(self, target: Path) -> RemovalResult:
        """Remove a single path.

        Directories (but not symlinks to directories) are removed with
        shutil.rmtree; files, symlinks and dead symlinks with Path.unlink.
        """
        path = str(target)

        if not target.exists() and not target.is_symlink():
            return RemovalResult(path=path, success=False, error=f"Path does not exist: {path}")

        if self._dry_run:
            logger.info("Dry-run: would remove %s", path)
            return RemovalResult(path=path, success=True, dry_run=True)

        try:
            if target.is_dir() and not target.is_symlink():
                shutil.rmtree(target)
            else:
                target.unlink()
        except OSError as e:
            logger.warning("Failed to remove %s: %s", path, e)
            return RemovalResult(path=path, success=False, error=str(e))

        logger.debug("Removed %s", path)
        return RemovalResult(path=path, success=True)
