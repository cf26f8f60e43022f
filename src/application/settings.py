"""Runtime configuration read from the environment."""

import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from dotenv import find_dotenv, load_dotenv
from loguru import logger

from domain.exceptions import ConfigurationError

DEFAULT_OUTPUT_FILE = "OUTPUT.md"
DEFAULT_LOG_LEVEL = "INFO"


def parse_flag(value: str | None) -> bool:
    """Interpret an environment flag such as ENABLE_SOLUTION_LINKS."""
    if value is None:
        return False
    return value.strip().lower() == "true"


@dataclass(frozen=True)
class Settings:
    """Configuration for a single report run."""

    leetcode_session: str
    csrf_token: str | None = None
    output_file: Path = Path(DEFAULT_OUTPUT_FILE)
    enable_solution_links: bool = False
    solutions_dir: Path | None = None
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(
        cls,
        env: Mapping[str, str] | None = None,
        **overrides: Any,
    ) -> "Settings":
        """
        Build settings from environment variables.

        When env is omitted, a .env file is loaded first and os.environ is used.
        Overrides that are None are ignored, so CLI flags can be passed as-is.

        Raises:
            ConfigurationError: If required values are missing or invalid
        """
        if env is None:
            load_dotenv(find_dotenv(usecwd=True))
            env = os.environ

        solutions_dir = env.get("SOLUTIONS_DIR") or None
        settings = cls(
            leetcode_session=(env.get("LEETCODE_SESSION") or "").strip(),
            csrf_token=env.get("LEETCODE_CSRF_TOKEN") or None,
            output_file=Path(env.get("OUTPUT_FILE") or DEFAULT_OUTPUT_FILE),
            enable_solution_links=parse_flag(env.get("ENABLE_SOLUTION_LINKS")),
            solutions_dir=Path(solutions_dir) if solutions_dir else None,
            log_level=(env.get("LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
        )

        changes = {key: value for key, value in overrides.items() if value is not None}
        if changes:
            settings = settings.with_overrides(**changes)

        settings.validate()
        return settings

    def with_overrides(self, **changes: Any) -> "Settings":
        for key in ("output_file", "solutions_dir"):
            if key in changes and changes[key] is not None:
                changes[key] = Path(changes[key])
        if "log_level" in changes:
            changes["log_level"] = str(changes["log_level"]).upper()
        return replace(self, **changes)

    def validate(self) -> None:
        if not self.leetcode_session:
            raise ConfigurationError("LEETCODE_SESSION environment variable is missing.")

        try:
            logger.level(self.log_level)
        except ValueError as e:
            raise ConfigurationError(f"Unknown LOG_LEVEL: {self.log_level}") from e

        if not self.enable_solution_links:
            return

        if self.solutions_dir is None:
            raise ConfigurationError("SOLUTIONS_DIR environment variable is missing.")
        if not self.solutions_dir.is_dir():
            raise ConfigurationError(
                f"SOLUTIONS_DIR does not point to a directory: {self.solutions_dir}"
            )
