"""
Parks Events Scraper Package

Scrapes a listings page of park events into a four-column table.
"""

from .models import EventRecord, EventSelectors, ListingSource, ScrapingResult, SourceStatus
from .table import EVENT_COLUMNS, build_event_table, empty_event_table, table_records
from .fetcher import PageFetcher, build_listing_url, parse_document
from .extractor import EventRecordExtractor, extract, extract_record
from .pipeline import ScrapingPipeline

__all__ = [
    "EventRecord",
    "EventSelectors",
    "ListingSource",
    "ScrapingResult",
    "SourceStatus",
    "EVENT_COLUMNS",
    "build_event_table",
    "empty_event_table",
    "table_records",
    "PageFetcher",
    "build_listing_url",
    "parse_document",
    "EventRecordExtractor",
    "extract",
    "extract_record",
    "ScrapingPipeline",
]
