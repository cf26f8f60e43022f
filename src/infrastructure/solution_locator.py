"""Locate local solution directories for a problem slug."""

import re
from pathlib import Path

from loguru import logger

from domain.exceptions import ConfigurationError


def solution_directory_pattern(title_slug: str) -> re.Pattern[str]:
    """Optional numeric prefix, optional hyphen, then exactly the slug."""
    return re.compile(rf"\d*-?{re.escape(title_slug)}")


def matches_solution_directory(name: str, title_slug: str) -> bool:
    """
    Check whether a directory name belongs to a problem.

    The slug has to occupy the whole name after the optional prefix, so
    "18-4sum" matches "4sum" while "4sum-ii" does not.
    """
    return solution_directory_pattern(title_slug).fullmatch(name) is not None


class SolutionLocator:
    """Finds the solution directory for a problem under a root folder."""

    def __init__(self, root: Path | str):
        self.root = Path(root)
        if not self.root.is_dir():
            raise ConfigurationError(f"Solutions directory does not exist: {self.root}")

    def find_solution_directory(self, title_slug: str) -> str | None:
        """
        Return the name of the best matching directory.

        Only immediate children are scanned and symlinks are skipped. When
        several directories match, the one with the newest change time wins,
        ties broken by name.
        """
        candidates = [
            entry
            for entry in self.root.iterdir()
            if entry.is_dir()
            and not entry.is_symlink()
            and matches_solution_directory(entry.name, title_slug)
        ]

        if not candidates:
            logger.debug(f"No solution directory for {title_slug}")
            return None

        newest = sorted(candidates, key=lambda entry: (-self._change_time(entry), entry.name))[0]
        if len(candidates) > 1:
            logger.debug(
                f"{len(candidates)} solution directories match {title_slug}, using {newest.name}"
            )
        return newest.name

    def _change_time(self, path: Path) -> float:
        return path.stat().st_ctime
