"""
Event Record Extraction

Turns a parsed listings page into an event table.

Each element matching the event selector becomes exactly one row:
- title: text of the first link inside the first title element
- description: text of the first description element
- start_date / street_address: content of the hidden meta elements
  whose itemprop is startDate / streetAddress

Missing pieces become empty strings. When the same itemprop appears more
than once inside an event, the last one in document order wins.
"""

from typing import Optional, Union

import pandas as pd
from bs4 import BeautifulSoup, Tag

from .fetcher import parse_document
from .logging_utils import get_logger, is_debug
from .models import EventRecord, EventSelectors
from .table import build_event_table


def _text_of(element: Optional[Tag]) -> str:
    if element is None:
        return ""
    return element.get_text()


def extract_title(node: Tag, selectors: EventSelectors) -> str:
    """Text of the link nested in the title element, or "" if either is missing."""
    title_element = node.select_one(selectors.title)
    if title_element is None:
        return ""
    return _text_of(title_element.select_one(selectors.title_link))


def extract_metadata(node: Tag, selectors: EventSelectors) -> tuple[str, str]:
    """
    Scan the meta elements of an event for its start date and street address.

    Returns:
        (start_date, street_address), each "" when no matching element exists.
    """
    start_date = ""
    street_address = ""
    for meta in node.select(selectors.metadata):
        itemprop = meta.get("itemprop")
        content = meta.get("content") or ""
        if itemprop == selectors.start_date_prop:
            start_date = content
        if itemprop == selectors.street_address_prop:
            street_address = content
    return start_date, street_address


def extract_record(node: Tag, selectors: Optional[EventSelectors] = None) -> EventRecord:
    """Build the record for a single event element."""
    selectors = selectors or EventSelectors()
    start_date, street_address = extract_metadata(node, selectors)
    return EventRecord(
        title=extract_title(node, selectors),
        description=_text_of(node.select_one(selectors.description)),
        start_date=start_date,
        street_address=street_address,
    )


class EventRecordExtractor:
    """
    Extracts event records from a listings page.

    Usage:
        extractor = EventRecordExtractor()
        table = extractor.extract(parse_document(html))
        print(table)
    """

    def __init__(self, selectors: Optional[EventSelectors] = None):
        self.logger = get_logger(__name__)
        self.selectors = selectors or EventSelectors()

    def extract(self, document: Union[BeautifulSoup, Tag, str, bytes]) -> pd.DataFrame:
        """
        Extract one row per event element, in document order.

        Args:
            document: A parsed tree, or raw HTML which is parsed first.

        Returns:
            Event table (see table.build_event_table). Zero rows if the page
            has no event elements.
        """
        if isinstance(document, (str, bytes)):
            document = parse_document(document)

        nodes = document.select(self.selectors.event)
        records = [extract_record(node, self.selectors) for node in nodes]

        self.logger.info("Extracted %d events", len(records))
        if is_debug():
            for record in records[:3]:
                self.logger.debug("Event: %s | %s | %s", record.title, record.start_date, record.street_address)

        return build_event_table(records)


def extract(
    document: Union[BeautifulSoup, Tag, str, bytes],
    selectors: Optional[EventSelectors] = None,
) -> pd.DataFrame:
    """Shortcut for EventRecordExtractor(selectors).extract(document)."""
    return EventRecordExtractor(selectors).extract(document)
