#!/usr/bin/env python3
"""
Scrape Park Events

Scrapes one page of the NYC Parks event listings into a table and prints it.

Configuration (environment or .env):
    EVENTS_LISTING_DATE  Day of the listings page, YYYY-MM-DD (default 2020-10-12)
    EVENTS_LISTING_URL   Full page URL, overrides EVENTS_LISTING_DATE

Only the first page is scraped. Later pages live at <url>/p2, <url>/p3, ...
"""

import os
import sys
from datetime import date, datetime
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent))

import pandas as pd
from dotenv import load_dotenv

from events_scraper.fetcher import build_listing_url
from events_scraper.logging_utils import configure_logging
from events_scraper.models import ListingSource
from events_scraper.pipeline import ScrapingPipeline

# Load environment variables
load_dotenv()

DEFAULT_LISTING_DATE = "2020-10-12"


def _listing_source() -> ListingSource:
    url = os.getenv("EVENTS_LISTING_URL")
    if url:
        return ListingSource(name=url, url=url)
    day = date.fromisoformat(os.getenv("EVENTS_LISTING_DATE", DEFAULT_LISTING_DATE))
    return ListingSource(name=f"NYC Parks {day.isoformat()}", url=build_listing_url(day))


def scrape_events() -> int:
    """Scrape the configured listings page. Returns a process exit code."""
    configure_logging()
    source = _listing_source()

    print(f"\n{'='*60}")
    print(f"[scrape_events] Starting at {datetime.now().isoformat()}")
    print(f"    URL: {source.url}")
    print(f"{'='*60}\n")

    with ScrapingPipeline() as pipeline:
        result, table = pipeline.run(source)

    if not result.success:
        print(f"    ✗ Failed: {result.error_message}")
        return 1

    print(f"    ✓ Success: {result.events_found} events in {result.duration_seconds:.2f}s\n")
    with pd.option_context("display.max_colwidth", 60, "display.width", 200):
        print(table.to_string())
    return 0


if __name__ == "__main__":
    sys.exit(scrape_events())
