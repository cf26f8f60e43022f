"""Pydantic schemas for LeetCode GraphQL payloads."""

from pydantic import BaseModel, Field

from domain.models import Problem, Submission, Tag


class SubmissionPayload(BaseModel):
    """One entry of submissionList.submissions."""

    title: str
    title_slug: str = Field(alias="titleSlug", min_length=1)
    status_display: str = Field(alias="statusDisplay")
    timestamp: int

    class Config:
        populate_by_name = True

    def to_domain(self) -> Submission:
        return Submission(
            title_slug=self.title_slug,
            title=self.title,
            status_display=self.status_display,
            timestamp=self.timestamp,
        )


class SubmissionListPayload(BaseModel):
    """Payload of the submissionList query."""

    has_next: bool = Field(default=False, alias="hasNext")
    submissions: list[SubmissionPayload] = Field(default_factory=list)

    class Config:
        populate_by_name = True


class TopicTagPayload(BaseModel):
    """Topic tag attached to a question."""

    name: str
    slug: str = ""

    def to_domain(self) -> Tag:
        return Tag(name=self.name, slug=self.slug)


class QuestionPayload(BaseModel):
    """Payload of the question query."""

    title_slug: str = Field(alias="titleSlug")
    title: str = ""
    topic_tags: list[TopicTagPayload] = Field(default_factory=list, alias="topicTags")

    class Config:
        populate_by_name = True

    def to_domain(self) -> Problem:
        return Problem(
            title_slug=self.title_slug,
            title=self.title,
            topic_tags=tuple(tag.to_domain() for tag in self.topic_tags),
        )
