"""
Scraping Pipeline

Runs one listings page through:
1. Fetch (PageFetcher, or any url -> html callable)
2. Parse (BeautifulSoup + lxml)
3. Extract (EventRecordExtractor)

Only a single page is scraped per run.
"""

import time
from datetime import datetime, timezone
from typing import Callable, Optional

import pandas as pd

from .extractor import EventRecordExtractor
from .fetcher import PageFetcher, parse_document
from .logging_utils import get_logger
from .models import ListingSource, ScrapingResult, SourceStatus
from .table import empty_event_table

FetchFn = Callable[[str], str]


class ScrapingPipeline:
    """
    Scraping pipeline for a single listings page.

    Usage:
        with ScrapingPipeline() as pipeline:
            result, table = pipeline.run(source)
        print(f"Found {result.events_found} events")
    """

    def __init__(self, fetch: Optional[FetchFn] = None):
        """
        Initialize the scraping pipeline.

        Args:
            fetch: Callable returning the HTML of a URL. Defaults to a
                PageFetcher owned (and closed) by the pipeline.
        """
        self.logger = get_logger(__name__)
        self._owned_fetcher: Optional[PageFetcher] = None
        if fetch is None:
            self._owned_fetcher = PageFetcher()
            fetch = self._owned_fetcher
        self.fetch = fetch

    def run(self, source: ListingSource) -> tuple[ScrapingResult, pd.DataFrame]:
        """
        Scrape a listings page.

        Args:
            source: The page to scrape. Its status, last_scraped and
                last_error are updated in place.

        Returns:
            Tuple of (ScrapingResult, event table). The table is empty when
            the run failed.
        """
        start_time = time.time()
        result = ScrapingResult(source_url=source.url, success=False)

        try:
            self.logger.info("Stage 1: Fetching %s", source.url)
            html = self.fetch(source.url)

            self.logger.info("Stage 2: Parsing %d characters", len(html))
            document = parse_document(html)

            self.logger.info("Stage 3: Extracting events")
            extractor = EventRecordExtractor(source.selectors)
            table = extractor.extract(document)

        except Exception as e:
            result.error_message = str(e)
            result.duration_seconds = time.time() - start_time

            source.status = SourceStatus.ERROR
            source.last_error = str(e)

            self.logger.error("Scraping %s failed: %s", source.url, e)
            return result, empty_event_table()

        result.success = True
        result.events_found = len(table)
        result.duration_seconds = time.time() - start_time

        source.status = SourceStatus.ACTIVE
        source.last_scraped = datetime.now(timezone.utc)
        source.last_error = None

        self.logger.info("Complete: %d events from %s", result.events_found, source.name)
        return result, table

    def close(self):
        """Close the fetcher if the pipeline created it."""
        if self._owned_fetcher is not None:
            self._owned_fetcher.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
