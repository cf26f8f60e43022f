from services.categorizer import TagCategorizer
from services.report import ReportGenerator
from services.submissions import PAGE_SIZE, SubmissionAggregator


def create_report_services(
    client,
    *,
    solution_locator=None,
    progress=None,
) -> tuple[SubmissionAggregator, TagCategorizer, ReportGenerator]:
    """Factory function to create the three pipeline stages sharing one client."""
    aggregator = SubmissionAggregator(client=client, progress=progress)
    categorizer = TagCategorizer(client=client, progress=progress)
    generator = ReportGenerator(solution_locator=solution_locator, progress=progress)
    return aggregator, categorizer, generator


__all__ = [
    "PAGE_SIZE",
    "ReportGenerator",
    "SubmissionAggregator",
    "TagCategorizer",
    "create_report_services",
]
