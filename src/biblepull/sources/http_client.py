"""HTTP fetching of passage pages."""

from __future__ import annotations

import logging
from types import TracebackType
from urllib.parse import urlencode

import requests

from ..errors import FetchError
from ..models.config import NetworkConfig

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; biblepull/1.0)"


class PassageHttpClient:
    """
    Fetches the print view of a passage page.

    A failed request is never retried: any transport error or non-success
    status becomes a ``FetchError``.

    Example:
        with PassageHttpClient() as client:
            lines = client.fetch("John 3:16", "NET")
    """

    def __init__(
        self,
        config: NetworkConfig | None = None,
        session: requests.Session | None = None,
    ) -> None:
        """
        Initialize the HTTP client.

        Args:
            config: Endpoint and timeout settings
            session: Optional pre-built session (mostly for tests)
        """
        self.config = config or NetworkConfig()
        self._owns_session = session is None
        self._session = session or requests.Session()
        self._session.headers["User-Agent"] = self.config.user_agent or DEFAULT_USER_AGENT

    def __enter__(self) -> PassageHttpClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_session:
            self._session.close()

    def build_url(self, reference: str, version: str) -> str:
        params = {"interface": "print", "version": version, "search": reference}
        return f"{self.config.base_url}?{urlencode(params)}"

    def describe(self, reference: str, version: str) -> str:
        return self.build_url(reference, version)

    def fetch(self, reference: str, version: str) -> list[str]:
        """
        Fetch the passage page and split it into lines.

        Args:
            reference: Passage reference, e.g. "John 3:16-21"
            version: Bible version code, e.g. "NET"

        Returns:
            Page lines, split on any line break

        Raises:
            FetchError: On network errors, timeouts or a non-success status
        """
        url = self.build_url(reference, version)
        logger.debug(f"Calling URL <{url}> ...")

        try:
            response = self._session.get(
                url,
                timeout=(self.config.connect_timeout, self.config.read_timeout),
            )
        except requests.RequestException as e:
            logger.debug(f"HTTP fetch error for {url}: {e}")
            raise FetchError(str(e)) from e

        if not response.ok:
            raise FetchError(response.reason or "HTTP error", response.status_code)

        # The site does not always declare a charset
        response.encoding = "utf-8"
        lines = response.text.splitlines()
        logger.debug(f"Fetched {len(lines)} lines from {url}")
        return lines

    def read_lines(self, reference: str, version: str) -> list[str]:
        return self.fetch(reference, version)
