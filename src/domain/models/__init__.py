"""Domain models package."""

from .latest import LatestSubmissionIndex, is_newer
from .submission import (
    ACCEPTED_STATUS,
    CategorizedEntry,
    Categorization,
    Problem,
    Submission,
    Tag,
    build_problem_url,
)

__all__ = [
    "ACCEPTED_STATUS",
    "CategorizedEntry",
    "Categorization",
    "LatestSubmissionIndex",
    "Problem",
    "Submission",
    "Tag",
    "build_problem_url",
    "is_newer",
]
