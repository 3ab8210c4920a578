"""Record reader for semicolon-delimited chat exports (core domain).

Each export line looks like ``"<author>";"<date>";"<content>"``. The export
is terminated by an empty line or the end of input.
"""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Iterator, List, Sequence

from core.config import DEFAULT_DATE_FORMATS
from core.errors import FormatError, ParseError
from core.models import ChatMessage

DELIMITER = ";"
QUOTE = '"'
MIN_FIELDS = 3


def unquote_field(raw: str, row: int) -> str:
    """Trim surrounding double quotes from a field.

    A field that opens a quote without closing it (or the reverse) means the
    line was cut or the content itself held a delimiter.
    """

    starts = raw.startswith(QUOTE)
    ends = raw.endswith(QUOTE) and len(raw) > 1
    if starts != ends:
        raise FormatError(f"unbalanced quotes in field {raw!r}", row=row)
    return raw.strip(QUOTE)


def line_author(line: str) -> str:
    """Return the first field with its quotes trimmed, without validating the rest."""

    return line.split(DELIMITER, 1)[0].strip(QUOTE)


def split_line(line: str, row: int) -> List[str]:
    """Split one line into its first three unquoted fields.

    Anything after the third field is dropped unchecked.
    """

    fields = line.split(DELIMITER)
    if len(fields) < MIN_FIELDS:
        raise FormatError(f"expected at least {MIN_FIELDS} fields, got {len(fields)}", row=row)
    return [unquote_field(value, row) for value in fields[:MIN_FIELDS]]


def parse_timestamp(value: str, row: int, date_formats: Sequence[str] = DEFAULT_DATE_FORMATS) -> datetime:
    """Parse an export timestamp, trying ISO 8601 before the listed formats.

    Timezone-aware values keep their wall-clock time and drop the offset so
    that all timestamps of a run compare against each other.
    """

    text = value.strip()
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        parsed = None
    if parsed is None:
        for fmt in date_formats:
            try:
                parsed = datetime.strptime(text, fmt)
                break
            except ValueError:
                continue
    if parsed is None:
        raise ParseError(f"unparseable date {value!r}", row=row, value=value)
    return parsed.replace(tzinfo=None)


def read_messages(
    lines: Iterable[str],
    bot_handle: str,
    date_formats: Sequence[str] = DEFAULT_DATE_FORMATS,
) -> Iterator[ChatMessage]:
    """Yield messages written by ``bot_handle``.

    Rows are numbered from 0 over every source line, including the ones
    skipped for another author. Reading stops at the first empty line.
    Lines from other authors are skipped on their first field alone, so
    continuation lines of multi-line posts never reach the format checks.
    """

    for row, raw_line in enumerate(lines):
        line = raw_line.rstrip("\r\n")
        if line == "":
            return
        if line_author(line) != bot_handle:
            continue
        fields = split_line(line, row)
        author = fields[0]
        yield ChatMessage(
            row=row,
            author=author,
            timestamp=parse_timestamp(fields[1], row, date_formats),
            content=fields[2],
        )
