"""Async HTTP client built on curl_cffi."""

from typing import Any

from curl_cffi import CurlError
from curl_cffi.requests import AsyncSession
from loguru import logger

from infrastructure.errors import HTTPClientError


class AsyncHTTPClient:
    """Thin async wrapper over a curl_cffi session."""

    def __init__(self, timeout: float = 30.0, impersonate: str = "chrome"):
        """
        Initialize HTTP client.

        Args:
            timeout: Per-request timeout in seconds
            impersonate: Browser fingerprint passed to curl_cffi
        """
        self.timeout = timeout
        self.impersonate = impersonate
        self._session: AsyncSession | None = None

    @property
    def session(self) -> AsyncSession:
        if self._session is None:
            self._session = AsyncSession(impersonate=self.impersonate, timeout=self.timeout)
        return self._session

    async def post_json(
        self,
        url: str,
        payload: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        """POST a JSON body and decode the JSON response."""
        logger.debug(f"POST {url}")

        try:
            response = await self.session.post(url, json=payload, headers=headers)
        except CurlError as e:
            raise HTTPClientError(url, str(e)) from e

        if response.status_code >= 400:
            raise HTTPClientError(
                url, f"HTTP {response.status_code}", status_code=response.status_code
            )

        try:
            body = response.json()
        except ValueError as e:
            raise HTTPClientError(url, "Response is not valid JSON") from e

        if not isinstance(body, dict):
            raise HTTPClientError(url, "Response JSON is not an object")
        return body

    async def get_cookie(self, url: str, name: str) -> str | None:
        """GET url and return the named cookie set by the response, if any."""
        logger.debug(f"GET {url} for cookie {name}")

        try:
            response = await self.session.get(url)
        except CurlError as e:
            raise HTTPClientError(url, str(e)) from e

        if response.status_code >= 400:
            raise HTTPClientError(
                url, f"HTTP {response.status_code}", status_code=response.status_code
            )

        return response.cookies.get(name) or self.session.cookies.get(name)

    async def close(self) -> None:
        if self._session is not None:
            await self._session.close()
            self._session = None
            logger.debug("HTTP session closed")

    async def __aenter__(self) -> "AsyncHTTPClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()
