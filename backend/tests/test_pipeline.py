import httpx

from events_scraper.fetcher import PageFetcher
from events_scraper.models import EventSelectors, ListingSource, SourceStatus
from events_scraper.pipeline import ScrapingPipeline
from events_scraper.table import EVENT_COLUMNS

LISTING_HTML = (
    "<html><body>"
    '<div class="event">'
    '<h3 class="event-title"><a href="/e/1">Fall Festival</a></h3>'
    '<span class="description">Family fun in the park</span>'
    '<meta itemprop="startDate" content="2020-10-12">'
    '<meta itemprop="streetAddress" content="5th Ave">'
    "</div>"
    '<div class="event"><h3 class="event-title"><a href="/e/2">Story Time</a></h3></div>'
    "</body></html>"
)


def _source(**overrides):
    source = {"name": "NYC Parks 2020-10-12", "url": "https://www.nycgovparks.org/events/f2020-10-12"}
    source.update(overrides)
    return ListingSource(**source)


def test_run_extracts_events():
    source = _source()
    pipeline = ScrapingPipeline(fetch=lambda url: LISTING_HTML)

    result, table = pipeline.run(source)

    assert result.success is True
    assert result.events_found == 2
    assert result.error_message is None
    assert result.source_url == source.url
    assert table["title"].tolist() == ["Fall Festival", "Story Time"]
    assert source.status == SourceStatus.ACTIVE
    assert source.last_scraped is not None


def test_run_passes_source_url_to_fetch():
    requested = []

    def fetch(url):
        requested.append(url)
        return LISTING_HTML

    ScrapingPipeline(fetch=fetch).run(_source(url="https://example.org/events/f2020-10-13"))

    assert requested == ["https://example.org/events/f2020-10-13"]


def test_run_uses_source_selectors():
    html = '<ul><li class="item"><p class="name"><a href="#">Yoga</a></p></li></ul>'
    source = _source(selectors=EventSelectors(event=".item", title=".name"))

    result, table = ScrapingPipeline(fetch=lambda url: html).run(source)

    assert result.events_found == 1
    assert table.loc[0, "title"] == "Yoga"


def test_run_failure_records_error():
    def fetch(url):
        raise httpx.ConnectError("connection refused")

    source = _source()
    result, table = ScrapingPipeline(fetch=fetch).run(source)

    assert result.success is False
    assert result.events_found == 0
    assert "connection refused" in result.error_message
    assert len(table) == 0
    assert list(table.columns) == list(EVENT_COLUMNS)
    assert source.status == SourceStatus.ERROR
    assert source.last_error == "connection refused"


def test_run_with_page_fetcher():
    transport = httpx.MockTransport(lambda request: httpx.Response(200, text=LISTING_HTML))

    with PageFetcher(transport=transport) as fetcher:
        result, table = ScrapingPipeline(fetch=fetcher).run(_source())

    assert result.success is True
    assert table.iloc[0].tolist() == ["Fall Festival", "Family fun in the park", "2020-10-12", "5th Ave"]
    assert table.iloc[1].tolist() == ["Story Time", "", "", ""]


def test_page_with_no_events_is_success():
    result, table = ScrapingPipeline(fetch=lambda url: "<html><body></body></html>").run(_source())

    assert result.success is True
    assert result.events_found == 0
    assert len(table) == 0


def test_default_fetcher_closed_on_exit():
    with ScrapingPipeline() as pipeline:
        fetcher = pipeline._owned_fetcher
        assert fetcher is not None
        assert pipeline.fetch is fetcher

    assert fetcher.http_client.is_closed
