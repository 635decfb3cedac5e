from __future__ import annotations

import io
from datetime import datetime
from typing import Any, Callable, Iterable, Mapping, Optional, Sequence, Tuple

from ..core.constants import DEFAULT_CSV_DELIMITER, GROUP_HEADER_SEPARATOR, UNGROUPED_KEY, UTF8_BOM
from ..core.exceptions import ContractError

Row = Mapping[str, Any]
Column = Tuple[str, str]  # (key, label)
GroupKey = Callable[[Row], Any]
GroupDescriber = Callable[[str, Sequence[Row]], Sequence[Any]]

_LINE_BREAKS = ("\n", "\r")


def _check_delimiter(delimiter: str) -> str:
    if not isinstance(delimiter, str) or len(delimiter) != 1:
        raise ContractError(f"CSV delimiter must be a single character, got {delimiter!r}")
    if delimiter == '"' or delimiter in _LINE_BREAKS:
        raise ContractError(f"CSV delimiter cannot be {delimiter!r}")
    return delimiter


def _check_columns(columns: Sequence[Column]) -> list[Column]:
    columns = list(columns)
    if not columns:
        raise ContractError("CSV export needs at least one column")
    return columns


def csv_escape(value: Any, delimiter: str = DEFAULT_CSV_DELIMITER) -> str:
    """Render one field; quote it only when it holds the delimiter, a quote or a line break."""

    # Written by hand rather than with csv.writer, which quotes a lone empty field as "".
    if value is None:
        return ""
    text = str(value)
    if delimiter in text or '"' in text or "\n" in text or "\r" in text:
        return '"' + text.replace('"', '""') + '"'
    return text


def _join(values: Iterable[Any], delimiter: str) -> str:
    return delimiter.join(csv_escape(v, delimiter) for v in values)


def _header_line(columns: Sequence[Column], delimiter: str) -> str:
    return _join((label for _, label in columns), delimiter)


def _row_line(row: Row, columns: Sequence[Column], delimiter: str) -> str:
    return _join((row.get(key) for key, _ in columns), delimiter)


def serialize_flat(
    rows: Iterable[Row],
    columns: Sequence[Column],
    *,
    delimiter: str = DEFAULT_CSV_DELIMITER,
) -> str:
    """Header line plus one line per row, each terminated by a single newline."""

    delimiter = _check_delimiter(delimiter)
    columns = _check_columns(columns)

    out = io.StringIO()
    out.write(_header_line(columns, delimiter) + "\n")
    for row in rows:
        out.write(_row_line(row, columns, delimiter) + "\n")
    return out.getvalue()


def default_group_key(row: Row) -> str:
    """Event id, falling back to event name, falling back to the ungrouped sentinel."""

    for field in ("event_id", "event_name"):
        value = row.get(field)
        if value not in (None, ""):
            return str(value)
    return UNGROUPED_KEY


def describe_group(key: str, rows: Sequence[Row]) -> Sequence[Any]:
    """Group key and row count; callers pass their own describer for labelled headers."""
    return (key, len(rows))


def group_rows(rows: Iterable[Row], key: GroupKey) -> list[tuple[str, list[Row]]]:
    """Partition rows by key, groups in first-seen order, rows in input order."""

    groups: dict[str, list[Row]] = {}
    for row in rows:
        try:
            group = key(row)
        except Exception as exc:  # noqa: BLE001
            raise ContractError(f"Group key could not be evaluated for row {row!r}") from exc
        groups.setdefault(str(group), []).append(row)
    return list(groups.items())


def serialize_grouped(
    rows: Iterable[Row],
    columns: Sequence[Column],
    *,
    delimiter: str = DEFAULT_CSV_DELIMITER,
    group_key: GroupKey = default_group_key,
    order_key: Optional[Callable[[Row], Any]] = None,
    descending: bool = False,
    describe: GroupDescriber = describe_group,
) -> str:
    """One section per group: summary line, column header, data lines, blank line.

    `order_key` (optional) sorts the rows before partitioning; the sort is stable, so
    callers can layer several orderings by sorting in passes beforehand.
    """

    delimiter = _check_delimiter(delimiter)
    columns = _check_columns(columns)
    if delimiter in GROUP_HEADER_SEPARATOR:
        raise ContractError(f"Delimiter {delimiter!r} clashes with the group header separator")

    rows = list(rows)
    if order_key is not None:
        rows = sorted(rows, key=order_key, reverse=descending)

    header = _header_line(columns, delimiter)
    if not rows:
        return header + "\n"

    out = io.StringIO()
    for key, members in group_rows(rows, group_key):
        summary = describe(key, members)
        out.write(GROUP_HEADER_SEPARATOR.join(csv_escape(part, delimiter) for part in summary) + "\n")
        out.write(header + "\n")
        for row in members:
            out.write(_row_line(row, columns, delimiter) + "\n")
        out.write("\n")
    return out.getvalue()


def with_bom(text: str) -> str:
    """Prefix a UTF-8 byte-order mark so spreadsheet importers detect the encoding."""
    return UTF8_BOM + text


def format_timestamp(value: Any) -> str:
    """'2026-02-02T20:22:34.000Z' -> '2026-02-02 20:22' (display only)."""

    if value is None or value == "":
        return ""
    if isinstance(value, datetime):
        return value.strftime("%Y-%m-%d %H:%M")
    return str(value).replace("T", " ", 1)[:16]
