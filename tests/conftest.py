"""Shared fixtures for the report pipeline tests."""

from typing import Any

import pytest

from domain.models import Submission
from infrastructure.errors import HTTPClientError


def make_submission(
    title_slug: str,
    timestamp: int,
    status_display: str = "Accepted",
    title: str | None = None,
) -> Submission:
    return Submission(
        title_slug=title_slug,
        title=title or title_slug.replace("-", " ").title(),
        status_display=status_display,
        timestamp=timestamp,
    )


def submission_payload(
    title_slug: str,
    timestamp: int | str,
    status_display: str = "Accepted",
    title: str | None = None,
) -> dict[str, Any]:
    return {
        "id": f"{title_slug}-{timestamp}",
        "title": title or title_slug.replace("-", " ").title(),
        "titleSlug": title_slug,
        "statusDisplay": status_display,
        "timestamp": str(timestamp),
        "lang": "python3",
    }


class FakeHTTPClient:
    """Answers GraphQL requests from canned submission pages and question tags."""

    def __init__(
        self,
        pages: list[list[dict[str, Any]]] | None = None,
        tags: dict[str, list[str]] | None = None,
        csrf_token: str | None = "csrf-from-site",
        max_page_size: int | None = None,
    ):
        self.submissions = [entry for page in pages or [] for entry in page]
        self.max_page_size = max_page_size
        self.tags = tags or {}
        self.csrf_token = csrf_token
        self.requests: list[dict[str, Any]] = []
        self.headers: list[dict[str, str] | None] = []
        self.closed = False
        self.fail_on: str | None = None

    async def post_json(self, url, payload, headers=None):
        self.requests.append(payload)
        self.headers.append(headers)
        operation = payload["operationName"]
        variables = payload["variables"]

        if self.fail_on == operation:
            raise HTTPClientError(url, "HTTP 500", status_code=500)

        if operation == "submissionList":
            offset = variables["offset"]
            limit = variables["limit"]
            if self.max_page_size is not None:
                limit = min(limit, self.max_page_size)
            page = self.submissions[offset : offset + limit]
            return {
                "data": {
                    "submissionList": {
                        "hasNext": offset + len(page) < len(self.submissions),
                        "submissions": page,
                    }
                }
            }

        if operation == "question":
            slug = variables["titleSlug"]
            if slug not in self.tags:
                return {"data": {"question": None}}
            return {
                "data": {
                    "question": {
                        "titleSlug": slug,
                        "title": slug.replace("-", " ").title(),
                        "topicTags": [
                            {"name": name, "slug": name.lower().replace(" ", "-")}
                            for name in self.tags[slug]
                        ],
                    }
                }
            }

        raise AssertionError(f"Unexpected operation {operation}")

    async def get_cookie(self, url, name):
        return self.csrf_token

    async def close(self):
        self.closed = True


@pytest.fixture
def fake_http():
    return FakeHTTPClient()
