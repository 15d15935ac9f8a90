"""ETL package - project decoded council events into the entity store."""

from etl.dispatch import Dispatcher, Outcome
from etl.sync import index_events, index_feed

__all__ = [
    "Dispatcher",
    "Outcome",
    "index_events",
    "index_feed",
]
