"""Service for collecting the user's accepted submissions."""

from loguru import logger

from domain.exceptions import FetchError
from domain.models import LatestSubmissionIndex, Submission
from infrastructure.interfaces import JudgeClientProtocol, ProgressReporterProtocol
from infrastructure.progress import NullProgress

PAGE_SIZE = 100


class SubmissionAggregator:
    """Pages through submissions and keeps the latest accepted one per problem."""

    def __init__(
        self,
        *,
        client: JudgeClientProtocol,
        progress: ProgressReporterProtocol | None = None,
        page_size: int = PAGE_SIZE,
    ):
        """Initialize service with dependencies."""
        if page_size <= 0:
            raise ValueError(f"page_size must be positive, got {page_size}")
        self.client = client
        self.progress = progress or NullProgress()
        self.page_size = page_size

    async def fetch_all_submissions(self) -> list[Submission]:
        """
        Fetch every submission page until an empty page is returned.

        Raises:
            FetchError: If any page request fails
        """
        offset = 0
        all_submissions: list[Submission] = []

        logger.info("Starting to fetch submissions...")

        while True:
            try:
                page = await self.client.list_submissions(limit=self.page_size, offset=offset)
            except Exception as e:
                logger.error(f"Error fetching submissions at offset {offset}: {e}")
                raise FetchError(offset, str(e)) from e

            if not page:
                logger.info("No more submissions to fetch.")
                break

            all_submissions.extend(page)
            offset += len(page)
            logger.info(
                f"Fetched {len(page)} submissions. Total so far: {len(all_submissions)}"
            )
            self.progress.advance(len(page))

        logger.info(f"Finished fetching submissions. Total fetched: {len(all_submissions)}")
        return all_submissions

    async def fetch_accepted_submissions(self) -> list[Submission]:
        """Return one accepted submission per problem, the most recent one."""
        all_submissions = await self.fetch_all_submissions()

        accepted = [submission for submission in all_submissions if submission.is_accepted]
        logger.info(f"Filtered accepted submissions. Total accepted: {len(accepted)}")

        unique = LatestSubmissionIndex(accepted).values()
        logger.info(
            f"Filtered unique accepted submissions. Total unique accepted: {len(unique)}"
        )
        return unique
