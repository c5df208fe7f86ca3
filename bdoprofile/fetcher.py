"""HTTP fetching for the adventurer site."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional
from urllib.parse import quote, urlsplit, urlunsplit

from bs4 import BeautifulSoup
from curl_cffi import requests
from curl_cffi.requests import RequestsError

from .config import settings
from .errors import HttpStatusError, NetworkError


@dataclass
class FetchResult:
    """Represents a fetched page."""

    url: str
    html: str
    status_code: int = 200


class Fetcher:
    """Fetch pages with a browser identity and a fixed timeout.

    A single GET per call: no retries, no rendering. Transport failures raise
    ``NetworkError`` and any non-200 answer raises ``HttpStatusError``.
    """

    def __init__(
        self,
        timeout: Optional[int] = None,
        user_agent: Optional[str] = None,
        impersonate: Optional[str] = None,
    ) -> None:
        self.timeout = timeout or settings.timeout
        self.user_agent = user_agent or settings.user_agent
        self.impersonate = impersonate if impersonate is not None else settings.impersonate

    def fetch(self, url: str) -> FetchResult:
        """Fetch page source, raising on transport errors or bad status."""
        encoded_url = self._encode_url(url)
        try:
            response = self._request(encoded_url)
        except RequestsError as exc:
            raise NetworkError(f"request to {url} failed: {exc}") from exc

        if response.status_code != 200:
            raise HttpStatusError(response.status_code, getattr(response, "reason", "") or "")

        html = response.text
        if "<html" not in html.lower():
            print(f"[Fetcher] Warning: unusual response, missing <html> tag for {url}")

        return FetchResult(url=response.url or url, html=html, status_code=response.status_code)

    def fetch_document(self, url: str) -> BeautifulSoup:
        """Fetch ``url`` and parse it into a queryable document."""
        return BeautifulSoup(self.fetch(url).html, "lxml")

    # ------------------------------------------------------------------ #
    # Internal helpers
    # ------------------------------------------------------------------ #
    def _request(self, url: str) -> Any:
        headers: Dict[str, str] = {
            "Upgrade-Insecure-Requests": "1",
            "User-Agent": self.user_agent,
        }
        kwargs: Dict[str, Any] = {}
        if self.impersonate:
            kwargs["impersonate"] = self.impersonate
        return requests.get(
            url,
            headers=headers,
            timeout=self.timeout,
            allow_redirects=True,
            **kwargs,
        )

    @staticmethod
    def _encode_url(url: str) -> str:
        # Family names arrive with accents; curl wants them percent-encoded.
        parts = urlsplit(url)
        encoded_path = quote(parts.path, safe="/%")
        encoded_query = quote(parts.query, safe="=&%+")
        return urlunsplit((parts.scheme, parts.netloc, encoded_path, encoded_query, parts.fragment))
