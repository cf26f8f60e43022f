"""Ordered index keeping the most recent submission per problem."""

from collections.abc import Iterable, Iterator

from .submission import Submission


def is_newer(existing: Submission | None, candidate: Submission) -> bool:
    """
    Decide whether candidate should replace existing.

    Equal timestamps keep the existing (first seen) submission.
    """
    if existing is None:
        return True
    return existing.timestamp < candidate.timestamp


class LatestSubmissionIndex:
    """Mapping of title slug to its latest submission, in first-insertion order."""

    def __init__(self, submissions: Iterable[Submission] = ()):
        self._by_slug: dict[str, Submission] = {}
        for submission in submissions:
            self.offer(submission)

    def offer(self, submission: Submission) -> bool:
        """Insert submission, or replace the stored one if submission is newer."""
        existing = self._by_slug.get(submission.title_slug)
        if not is_newer(existing, submission):
            return False
        # Reassigning an existing key keeps its original position
        self._by_slug[submission.title_slug] = submission
        return True

    def get(self, title_slug: str) -> Submission | None:
        return self._by_slug.get(title_slug)

    def values(self) -> list[Submission]:
        return list(self._by_slug.values())

    def __len__(self) -> int:
        return len(self._by_slug)

    def __iter__(self) -> Iterator[Submission]:
        return iter(self._by_slug.values())

    def __contains__(self, title_slug: object) -> bool:
        return title_slug in self._by_slug
