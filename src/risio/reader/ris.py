"""RIS format parser.

RIS specification: Two-letter tags, "TY  - " starts record, "ER  - " ends it.
Reference: https://refdb.sourceforge.net/manual-0.9.6/sect1-ris-format.html
"""

from collections.abc import Iterable, Iterator

from risio.errors import MalformedLineError, UnterminatedRecordError
from risio.models import END_TAG, TYPE_TAG, Document, Field, Record
from risio.reader.base import (
    LENIENT_TAG_PATTERN,
    UTF8_BOM,
    ParserConfig,
    get_tag_pattern,
    split_lines,
    strip_terminator,
)

__all__ = ["iter_records", "parse", "parse_lines"]


def iter_records(
    lines: Iterable[str],
    config: ParserConfig | None = None,
) -> Iterator[Record]:
    """Parse RIS lines lazily, yielding each record once its ``ER`` is seen.

    Parameters
    ----------
    lines : Iterable[str]
        Physical lines; a trailing ``\\n`` or ``\\r\\n`` on each is ignored.
    config : ParserConfig | None, optional
        Parser configuration, by default lenient.

    Yields
    ------
    Record
        Completed records in input order.

    Raises
    ------
    MalformedLineError
        A line is neither a tag line nor a continuation of an open field,
        or in strict mode a tag line deviates from the ``"  - "`` separator.
    UnterminatedRecordError
        A record is not closed by ``ER`` before a new ``TY`` or end of input.
    """
    if config is None:
        config = ParserConfig()
    pattern = get_tag_pattern(config.mode)

    fields: list[Field] = []
    record_start: int | None = None
    seen_type = False
    current_tag: str | None = None
    value_lines: list[str] = []
    pending_blanks: list[str] = []
    line_num = 0

    for line_num, raw_line in enumerate(lines, start=1):
        line = strip_terminator(raw_line)
        if line_num == 1:
            line = line.removeprefix(UTF8_BOM)

        match = pattern.match(line)

        if match is None:
            if not line.strip():
                # Blank lines only count once a later continuation follows
                if current_tag is not None:
                    pending_blanks.append(line)
                continue
            if config.strict and LENIENT_TAG_PATTERN.match(line):
                raise MalformedLineError(line_num, line, "Non-canonical separator")
            if current_tag is None:
                raise MalformedLineError(line_num, line)
            value_lines.extend(pending_blanks)
            value_lines.append(line)
            pending_blanks = []
            continue

        pending_blanks = []
        if current_tag is not None:
            fields.append(Field(current_tag, "\n".join(value_lines)))
            current_tag = None
            value_lines = []

        tag, value = match.group(1), match.group(2) or ""

        if record_start is None:
            if tag == END_TAG:
                if not config.allow_empty_records:
                    raise MalformedLineError(line_num, line, "ER without an open record")
                yield Record([Field(tag, value)])
                continue
            if config.strict and tag != TYPE_TAG:
                raise MalformedLineError(line_num, line, "Record does not start with TY")
            record_start = line_num
            seen_type = False
        elif tag == TYPE_TAG and seen_type:
            raise UnterminatedRecordError(line_num, record_start)

        if tag == END_TAG:
            if config.strict and value.strip():
                raise MalformedLineError(line_num, line, "ER carries a value")
            fields.append(Field(tag, value))
            yield Record(fields)
            fields = []
            record_start = None
            continue

        if tag == TYPE_TAG:
            seen_type = True
        current_tag = tag
        value_lines = [value]

    if record_start is not None:
        raise UnterminatedRecordError(line_num, record_start)


def parse_lines(
    lines: Iterable[str],
    config: ParserConfig | None = None,
) -> Document:
    """Parse RIS lines into a document.

    The whole input is consumed before the document is returned, so a
    failure never exposes a partial result.

    Parameters
    ----------
    lines : Iterable[str]
        Physical lines, with or without terminators.
    config : ParserConfig | None, optional
        Parser configuration, by default lenient.

    Returns
    -------
    Document
        Parsed records in input order.
    """
    return Document(list(iter_records(lines, config)))


def parse(text: str, config: ParserConfig | None = None) -> Document:
    """Parse complete RIS text into a document.

    Parameters
    ----------
    text : str
        RIS content with ``\\n`` or ``\\r\\n`` line endings.
    config : ParserConfig | None, optional
        Parser configuration, by default lenient.

    Returns
    -------
    Document
        Parsed records in input order.

    Raises
    ------
    FormatError
        If the input violates the RIS grammar.

    Examples
    --------
        >>> doc = parse("TY  - JOUR\\nAU  - Doe, Jane\\nER  - \\n")
        >>> doc[0].get_all("AU")
        ['Doe, Jane']
    """
    return parse_lines(split_lines(text), config)
