"""Coordinates fetching, categorizing and rendering the tag report."""

from pathlib import Path

from loguru import logger

from application.settings import Settings
from infrastructure.credential import LeetCodeCredential
from infrastructure.http_client import AsyncHTTPClient
from infrastructure.interfaces import HTTPClientProtocol, ProgressReporterProtocol
from infrastructure.leetcode_client import LeetCodeApiClient
from infrastructure.progress import NullProgress
from infrastructure.solution_locator import SolutionLocator
from services import (
    ReportGenerator,
    SubmissionAggregator,
    TagCategorizer,
    create_report_services,
)

INITIAL_PROGRESS_ESTIMATE = 2000


class ReportOrchestrator:
    """Runs the three report stages in order and writes the document."""

    def __init__(
        self,
        *,
        aggregator: SubmissionAggregator,
        categorizer: TagCategorizer,
        generator: ReportGenerator,
        output_file: Path | str,
        progress: ProgressReporterProtocol | None = None,
    ):
        self.aggregator = aggregator
        self.categorizer = categorizer
        self.generator = generator
        self.output_file = Path(output_file)
        self.progress = progress or NullProgress()

    async def run(self) -> Path:
        """
        Fetch, categorize, render and write the report.

        Stage errors propagate unchanged; nothing is written when a stage fails.
        """
        logger.info("Starting process to fetch, categorize, and generate markdown...")
        self.progress.start(INITIAL_PROGRESS_ESTIMATE)

        try:
            logger.info("Step 1: Fetching accepted submissions")
            submissions = await self.aggregator.fetch_accepted_submissions()

            logger.info("Step 2: Categorizing submissions by tag")
            categorized = await self.categorizer.categorize_by_tags(submissions)

            logger.info("Step 3: Generating markdown")
            markdown = self.generator.generate_markdown(categorized)

            logger.info("Step 4: Writing report")
            self.write_report(markdown)
        finally:
            self.progress.stop()

        logger.info(f"{self.output_file} has been updated successfully!")
        return self.output_file

    def write_report(self, markdown: str) -> None:
        self.output_file.parent.mkdir(parents=True, exist_ok=True)
        self.output_file.write_text(markdown, encoding="utf-8")


async def run_report(
    settings: Settings,
    *,
    progress: ProgressReporterProtocol | None = None,
    http_client: HTTPClientProtocol | None = None,
) -> Path:
    """Build every collaborator for one run, execute it, and release the HTTP session."""
    settings.validate()

    solution_locator = None
    if settings.enable_solution_links:
        solution_locator = SolutionLocator(settings.solutions_dir)

    http = http_client or AsyncHTTPClient()
    try:
        credential = await LeetCodeCredential(
            settings.leetcode_session, settings.csrf_token
        ).init(http)
        client = LeetCodeApiClient(http, credential)

        aggregator, categorizer, generator = create_report_services(
            client, solution_locator=solution_locator, progress=progress
        )
        orchestrator = ReportOrchestrator(
            aggregator=aggregator,
            categorizer=categorizer,
            generator=generator,
            output_file=settings.output_file,
            progress=progress,
        )
        return await orchestrator.run()
    finally:
        await http.close()
