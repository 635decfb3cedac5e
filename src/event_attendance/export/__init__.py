"""CSV export: delimiter-aware escaping, flat and grouped layouts, delivery sinks."""

from .csv_writer import (
    Column,
    csv_escape,
    default_group_key,
    describe_group,
    format_timestamp,
    group_rows,
    serialize_flat,
    serialize_grouped,
    with_bom,
)
from .sink import FileSink, Sink

__all__ = [
    "Column",
    "FileSink",
    "Sink",
    "csv_escape",
    "default_group_key",
    "describe_group",
    "format_timestamp",
    "group_rows",
    "serialize_flat",
    "serialize_grouped",
    "with_bom",
]
