"""Markdown rendering of categorized problems."""

from collections.abc import Mapping, Sequence

from loguru import logger

from domain.models import CategorizedEntry
from infrastructure.interfaces import ProgressReporterProtocol, SolutionLocatorProtocol
from infrastructure.progress import NullProgress

REPORT_TITLE = "Accepted LeetCode Problems by Tag"
TOPICS_HEADING = "LeetCode Topics"
MISSING_SOLUTION = "N/A"


class ReportGenerator:
    """Renders the tag report as a markdown document."""

    def __init__(
        self,
        *,
        solution_locator: SolutionLocatorProtocol | None = None,
        progress: ProgressReporterProtocol | None = None,
    ):
        """
        Initialize generator.

        Args:
            solution_locator: Enables the Solution column when provided
            progress: Advisory progress reporter
        """
        self.solution_locator = solution_locator
        self.progress = progress or NullProgress()

    @property
    def include_solutions(self) -> bool:
        return self.solution_locator is not None

    def generate_markdown(self, categorized: Mapping[str, Sequence[CategorizedEntry]]) -> str:
        """Render tags in name order, each as a table of problems sorted by slug."""
        logger.info("Generating markdown...")

        parts = [f"# {REPORT_TITLE}\n\n", f"## {TOPICS_HEADING}\n\n"]

        for tag in sorted(categorized):
            parts.append(self._render_section(tag, categorized[tag]))
            self.progress.advance(1)

        logger.info("Markdown generation complete.")
        return "".join(parts)

    def _render_section(self, tag: str, entries: Sequence[CategorizedEntry]) -> str:
        header = "| Problem |"
        alignment = "|:------:|"
        if self.include_solutions:
            header += " Solution |"
            alignment += ":----------:|"

        lines = [f"### {tag}\n", "\n", f"{header}\n", f"{alignment}\n"]
        for entry in sorted(entries, key=lambda item: item.title_slug):
            lines.append(f"{self._render_row(entry)}\n")
        lines.append("\n")
        return "".join(lines)

    def _render_row(self, entry: CategorizedEntry) -> str:
        row = f"| [{entry.title}]({entry.link}) |"
        if self.solution_locator is not None:
            directory = self.solution_locator.find_solution_directory(entry.title_slug)
            cell = f"[Solution]({directory})" if directory else MISSING_SOLUTION
            row += f" {cell} |"
        return row
