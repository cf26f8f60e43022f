"""Protocol interfaces for infrastructure collaborators."""

from typing import Any, Protocol

from domain.models import Submission, Tag


class HTTPClientProtocol(Protocol):
    """Protocol for HTTP client."""

    async def post_json(
        self,
        url: str,
        payload: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        """POST JSON and return the decoded JSON object."""
        ...

    async def get_cookie(self, url: str, name: str) -> str | None:
        """Return a cookie set by GET url."""
        ...

    async def close(self) -> None:
        """Release the underlying session."""
        ...


class JudgeClientProtocol(Protocol):
    """Protocol for the remote judge client."""

    async def list_submissions(self, limit: int, offset: int) -> list[Submission]:
        """Return one page of the user's submissions, newest first."""
        ...

    async def get_problem_tags(self, title_slug: str) -> list[Tag]:
        """Return the topic tags of a problem."""
        ...


class SolutionLocatorProtocol(Protocol):
    """Protocol for resolving a local solution directory."""

    def find_solution_directory(self, title_slug: str) -> str | None:
        """Return the matching directory name or None."""
        ...


class ProgressReporterProtocol(Protocol):
    """Protocol for advisory progress reporting."""

    def start(self, total: int) -> None:
        ...

    def advance(self, steps: int = 1) -> None:
        ...

    def stop(self) -> None:
        ...
