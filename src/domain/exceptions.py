"""Exception hierarchy for the tag report pipeline."""


class ReportError(Exception):
    """Base error for a report run."""

    pass


class ConfigurationError(ReportError):
    """Required configuration is missing or invalid."""

    pass


class LeetCodeAPIError(ReportError):
    """LeetCode could not be reached or answered with an error."""

    pass


class DecodingError(LeetCodeAPIError):
    """LeetCode returned a payload that does not match the expected schema."""

    def __init__(self, operation: str, reason: str):
        self.operation = operation
        self.reason = reason
        super().__init__(f"Malformed {operation} response: {reason}")


class FetchError(ReportError):
    """Paging through submissions failed."""

    def __init__(self, offset: int, reason: str | None = None):
        self.offset = offset
        message = f"Failed to fetch submissions at offset {offset}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class CategorizationError(ReportError):
    """Tag lookup for a problem failed."""

    def __init__(self, title_slug: str, reason: str | None = None):
        self.title_slug = title_slug
        message = f"Failed to categorize problem {title_slug}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
