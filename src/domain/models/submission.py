"""Value objects for LeetCode submissions and problem metadata."""

from dataclasses import dataclass, field

ACCEPTED_STATUS = "Accepted"
PROBLEM_URL_TEMPLATE = "https://leetcode.com/problems/{slug}/"


def build_problem_url(title_slug: str) -> str:
    """Build the canonical problem URL for a slug."""
    return PROBLEM_URL_TEMPLATE.format(slug=title_slug)


@dataclass(frozen=True)
class Submission:
    """A single submission attempt."""

    title_slug: str
    title: str
    status_display: str
    timestamp: int

    @property
    def is_accepted(self) -> bool:
        return self.status_display == ACCEPTED_STATUS


@dataclass(frozen=True)
class Tag:
    """Topic tag attached to a problem."""

    name: str
    slug: str = ""


@dataclass(frozen=True)
class Problem:
    """Problem metadata as returned by LeetCode."""

    title_slug: str
    title: str = ""
    topic_tags: tuple[Tag, ...] = field(default_factory=tuple)

    @property
    def tag_names(self) -> list[str]:
        return [tag.name for tag in self.topic_tags]


@dataclass(frozen=True)
class CategorizedEntry:
    """Tag-independent view of a solved problem, stored once per tag."""

    title: str
    link: str
    title_slug: str

    @classmethod
    def from_submission(cls, submission: Submission) -> "CategorizedEntry":
        return cls(
            title=submission.title,
            link=build_problem_url(submission.title_slug),
            title_slug=submission.title_slug,
        )


Categorization = dict[str, list[CategorizedEntry]]
