"""
Page Fetching Module

Fetches a listings page over HTTP and parses it into a BeautifulSoup tree.
Extraction never touches the network; this module is the caller's side.
"""

from __future__ import annotations

import os
from datetime import date
from typing import Optional, Union

import httpx
from bs4 import BeautifulSoup

from .logging_utils import get_logger


DEFAULT_LISTING_BASE = "https://www.nycgovparks.org/events"
DEFAULT_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"
DEFAULT_TIMEOUT_SECONDS = 30.0


def build_listing_url(day: date, base_url: str = DEFAULT_LISTING_BASE) -> str:
    """
    URL of the listings page starting at a given day.

    The NYC Parks index is keyed by date as /events/f<YYYY-MM-DD>.
    """
    return f"{base_url.rstrip('/')}/f{day.isoformat()}"


def parse_document(markup: Union[str, bytes]) -> BeautifulSoup:
    """Parse raw HTML into a navigable tree."""
    return BeautifulSoup(markup, "lxml")


class PageFetcher:
    """
    Fetches listings pages with httpx.

    Errors (connection failures, non-2xx responses) are raised as
    httpx.HTTPError. There is no retry.
    """

    def __init__(
        self,
        timeout_seconds: Optional[float] = None,
        user_agent: Optional[str] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize the PageFetcher.

        Args:
            timeout_seconds: Request timeout. Defaults to SCRAPER_TIMEOUT_SECONDS or 30.
            user_agent: User-Agent header. Defaults to SCRAPER_USER_AGENT or a browser UA.
            transport: Optional httpx transport (used by tests).
        """
        self.logger = get_logger(__name__)
        self.timeout_seconds = (
            timeout_seconds
            if timeout_seconds is not None
            else float(os.getenv("SCRAPER_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS)))
        )
        self.user_agent = user_agent or os.getenv("SCRAPER_USER_AGENT", DEFAULT_USER_AGENT)
        self.http_client = httpx.Client(
            timeout=self.timeout_seconds,
            follow_redirects=True,
            headers={"User-Agent": self.user_agent},
            transport=transport,
        )

    def fetch(self, url: str) -> str:
        """Fetch the HTML of a page."""
        self.logger.info("Fetching %s", url)
        response = self.http_client.get(url)
        response.raise_for_status()
        self.logger.debug("Fetched %d bytes from %s", len(response.content), url)
        return response.text

    def fetch_document(self, url: str) -> BeautifulSoup:
        """Fetch a page and parse it."""
        return parse_document(self.fetch(url))

    def __call__(self, url: str) -> str:
        return self.fetch(url)

    def close(self):
        """Cleanup resources."""
        if getattr(self, "http_client", None) is not None:
            self.http_client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
