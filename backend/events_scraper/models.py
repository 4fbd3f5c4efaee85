"""
Pydantic Models for the events scraper

Defines the scraped event record, the selectors used to find its fields,
listing sources, and scraping results.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class SourceStatus(str, Enum):
    """Status of a listings source."""
    ACTIVE = "active"
    ERROR = "error"
    PENDING = "pending"


class EventRecord(BaseModel):
    """
    One event scraped from a listings page.

    Every field is a string. Missing data is the empty string, never None.
    """
    title: str = Field(default="", description="Text of the link inside the event title")
    description: str = Field(default="", description="Text of the description element")
    start_date: str = Field(default="", description="content of the itemprop=startDate meta element")
    street_address: str = Field(default="", description="content of the itemprop=streetAddress meta element")

    @field_validator("title", "description", "start_date", "street_address", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        return "" if value is None else value

    def as_row(self) -> tuple[str, str, str, str]:
        """Field values in table column order."""
        return (self.title, self.description, self.start_date, self.street_address)


class EventSelectors(BaseModel):
    """CSS selectors and itemprop tokens used to locate event fields."""
    event: str = Field(default=".event", description="One element per event")
    title: str = Field(default=".event-title", description="Title container inside an event")
    title_link: str = Field(default="a", description="Link inside the title container holding the title text")
    description: str = Field(default=".description", description="Description element inside an event")
    metadata: str = Field(default="meta", description="Tag name of hidden itemprop/content elements")
    start_date_prop: str = Field(default="startDate")
    street_address_prop: str = Field(default="streetAddress")


class ListingSource(BaseModel):
    """A single listings page to scrape."""
    name: str = Field(..., description="Human-readable name, e.g. 'NYC Parks 2020-10-12'")
    url: str = Field(..., description="URL of the listings page")
    selectors: EventSelectors = Field(default_factory=EventSelectors)
    status: SourceStatus = Field(default=SourceStatus.PENDING)
    last_scraped: Optional[datetime] = Field(None)
    last_error: Optional[str] = Field(None)


class ScrapingResult(BaseModel):
    """Result of scraping one listings page."""
    source_url: str
    success: bool
    events_found: int = 0
    error_message: Optional[str] = None
    duration_seconds: float = 0.0
