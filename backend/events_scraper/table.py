"""
Event table helpers.

An event table is a pandas DataFrame with exactly four string columns,
one row per event in the order the events appeared on the page.
"""

from typing import Iterable

import pandas as pd

from .models import EventRecord

EVENT_COLUMNS = ("title", "description", "start_date", "street_address")


def empty_event_table() -> pd.DataFrame:
    """A table with the event columns and no rows."""
    return build_event_table([])


def build_event_table(records: Iterable[EventRecord]) -> pd.DataFrame:
    """
    Build an event table from records, keeping their order.

    Args:
        records: EventRecord objects in document order.

    Returns:
        DataFrame with EVENT_COLUMNS as string columns and a RangeIndex.
    """
    rows = [record.as_row() for record in records]
    table = pd.DataFrame(rows, columns=list(EVENT_COLUMNS))
    return table.astype("string")


def table_records(table: pd.DataFrame) -> list[EventRecord]:
    """Turn an event table back into EventRecord objects in row order."""
    columns = table.loc[:, list(EVENT_COLUMNS)].fillna("")
    return [
        EventRecord(**dict(zip(EVENT_COLUMNS, row)))
        for row in columns.itertuples(index=False, name=None)
    ]
