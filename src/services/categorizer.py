"""Service for grouping solved problems by topic tag."""

from collections.abc import Sequence

from loguru import logger

from domain.exceptions import CategorizationError
from domain.models import CategorizedEntry, Categorization, Submission
from infrastructure.interfaces import JudgeClientProtocol, ProgressReporterProtocol
from infrastructure.progress import NullProgress


class TagCategorizer:
    """Looks up tags for each problem and buckets problems by tag name."""

    def __init__(
        self,
        *,
        client: JudgeClientProtocol,
        progress: ProgressReporterProtocol | None = None,
    ):
        """Initialize service with dependencies."""
        self.client = client
        self.progress = progress or NullProgress()

    async def categorize_by_tags(self, submissions: Sequence[Submission]) -> Categorization:
        """
        Build a tag -> entries mapping.

        A problem with several tags is added to every one of their buckets.

        Raises:
            CategorizationError: If a tag lookup fails; no partial result is returned
        """
        categorized: Categorization = {}

        logger.info("Categorizing submissions by problem tags...")

        for submission in submissions:
            try:
                tags = await self.client.get_problem_tags(submission.title_slug)
            except Exception as e:
                logger.error(f"Error categorizing {submission.title_slug}: {e}")
                raise CategorizationError(submission.title_slug, str(e)) from e

            entry = CategorizedEntry.from_submission(submission)
            for tag in tags:
                categorized.setdefault(tag.name, []).append(entry)
                self.progress.advance(1)

        logger.info(f"Categorization complete. Total number of categories: {len(categorized)}")
        return categorized
