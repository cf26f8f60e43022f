"""LeetCode session credential."""

from loguru import logger

from domain.exceptions import ConfigurationError, LeetCodeAPIError
from infrastructure.errors import HTTPClientError
from infrastructure.interfaces import HTTPClientProtocol

LEETCODE_BASE_URL = "https://leetcode.com"
USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


class LeetCodeCredential:
    """Session cookie plus CSRF token used to authenticate GraphQL calls."""

    def __init__(self, session: str, csrf_token: str | None = None):
        if not session or not session.strip():
            raise ConfigurationError("LEETCODE_SESSION is empty")
        self.session = session.strip()
        self.csrf_token = csrf_token.strip() if csrf_token else None

    async def init(self, http_client: HTTPClientProtocol) -> "LeetCodeCredential":
        """Fetch a CSRF token from the site root when none was configured."""
        if self.csrf_token:
            return self

        logger.debug("No CSRF token configured, requesting one from LeetCode")
        try:
            token = await http_client.get_cookie(LEETCODE_BASE_URL, "csrftoken")
        except HTTPClientError as e:
            raise LeetCodeAPIError(f"Failed to obtain CSRF token: {e}") from e

        if not token:
            raise LeetCodeAPIError("LeetCode did not set a csrftoken cookie")

        self.csrf_token = token
        logger.debug(f"Obtained CSRF token: {token[:8]}...")
        return self

    def headers(self) -> dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "Origin": LEETCODE_BASE_URL,
            "Referer": LEETCODE_BASE_URL,
            "User-Agent": USER_AGENT,
        }
        cookies = [f"LEETCODE_SESSION={self.session}"]
        if self.csrf_token:
            headers["x-csrftoken"] = self.csrf_token
            cookies.append(f"csrftoken={self.csrf_token}")
        headers["Cookie"] = "; ".join(cookies)
        return headers

    def __repr__(self) -> str:
        return f"LeetCodeCredential(session='{self.session[:4]}...')"
