"""Client for the LeetCode GraphQL API."""

from typing import Any

from loguru import logger
from pydantic import ValidationError

from domain.exceptions import DecodingError, LeetCodeAPIError
from domain.models import Problem, Submission, Tag
from infrastructure.credential import LEETCODE_BASE_URL, LeetCodeCredential
from infrastructure.errors import HTTPClientError
from infrastructure.interfaces import HTTPClientProtocol
from infrastructure.schemas import QuestionPayload, SubmissionListPayload

LEETCODE_GRAPHQL_URL = f"{LEETCODE_BASE_URL}/graphql"

# LeetCode answers at most this many submissions per submissionList request
SUBMISSION_CHUNK_SIZE = 20

SUBMISSION_LIST_QUERY = """
query submissionList($offset: Int!, $limit: Int!, $slug: String) {
  submissionList(offset: $offset, limit: $limit, questionSlug: $slug) {
    hasNext
    submissions {
      id
      title
      titleSlug
      statusDisplay
      timestamp
      lang
    }
  }
}
"""

QUESTION_TAGS_QUERY = """
query questionData($titleSlug: String!) {
  question(titleSlug: $titleSlug) {
    titleSlug
    title
    topicTags {
      name
      slug
    }
  }
}
"""


class LeetCodeApiClient:
    """Authenticated access to submissions and problem metadata."""

    def __init__(self, http_client: HTTPClientProtocol, credential: LeetCodeCredential):
        """
        Initialize client.

        Args:
            http_client: Async HTTP client
            credential: Initialized session credential
        """
        self.http_client = http_client
        self.credential = credential

    async def list_submissions(self, limit: int, offset: int) -> list[Submission]:
        """
        Fetch up to limit submissions starting at offset.

        Requests are made in chunks of SUBMISSION_CHUNK_SIZE following hasNext,
        so a short result only happens at the end of the history. An empty
        list means there are no more.
        """
        submissions: list[Submission] = []

        while len(submissions) < limit:
            chunk_limit = min(SUBMISSION_CHUNK_SIZE, limit - len(submissions))
            payload = await self._fetch_submission_chunk(chunk_limit, offset + len(submissions))
            submissions.extend(entry.to_domain() for entry in payload.submissions)

            if not payload.has_next or not payload.submissions:
                break

        return submissions[:limit]

    async def _fetch_submission_chunk(self, limit: int, offset: int) -> SubmissionListPayload:
        data = await self._query(
            "submissionList",
            SUBMISSION_LIST_QUERY,
            {"offset": offset, "limit": limit, "slug": None},
        )

        raw = data.get("submissionList")
        if raw is None:
            raise DecodingError("submissionList", "missing submissionList field")

        try:
            return SubmissionListPayload.model_validate(raw)
        except ValidationError as e:
            raise DecodingError("submissionList", str(e)) from e

    async def get_problem(self, title_slug: str) -> Problem:
        """Fetch problem metadata including topic tags."""
        data = await self._query(
            "question", QUESTION_TAGS_QUERY, {"titleSlug": title_slug}
        )

        raw = data.get("question")
        if raw is None:
            raise LeetCodeAPIError(f"LeetCode did not recognise problem slug {title_slug}")

        try:
            payload = QuestionPayload.model_validate(raw)
        except ValidationError as e:
            raise DecodingError("question", str(e)) from e

        return payload.to_domain()

    async def get_problem_tags(self, title_slug: str) -> list[Tag]:
        problem = await self.get_problem(title_slug)
        return list(problem.topic_tags)

    async def _query(
        self, operation: str, query: str, variables: dict[str, Any]
    ) -> dict[str, Any]:
        """Run a GraphQL query and return its data object."""
        logger.debug(f"GraphQL {operation} with {variables}")

        try:
            body = await self.http_client.post_json(
                LEETCODE_GRAPHQL_URL,
                {"operationName": operation, "query": query, "variables": variables},
                headers=self.credential.headers(),
            )
        except HTTPClientError as e:
            raise LeetCodeAPIError(f"{operation} request failed: {e}") from e

        errors = body.get("errors")
        if errors:
            messages = "; ".join(
                str(error.get("message", error)) if isinstance(error, dict) else str(error)
                for error in errors
            )
            raise LeetCodeAPIError(f"{operation} returned errors: {messages}")

        data = body.get("data")
        if not isinstance(data, dict):
            raise DecodingError(operation, "missing data object")
        return data
