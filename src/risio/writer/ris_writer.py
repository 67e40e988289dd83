"""RIS format writer.

Each field is emitted as ``TAG  - value``; embedded newlines become
continuation lines and records are separated by one blank line. The writer
projects the document faithfully: it never adds a missing ``ER``.
"""

import io
from collections.abc import Iterator
from dataclasses import dataclass
from typing import IO

from risio.errors import RISIOError
from risio.models import Document, Record

__all__ = ["WriterConfig", "format_record", "iter_lines", "write", "write_to"]

SEPARATOR = "  - "
LINE_ENDINGS = ("\n", "\r\n")


@dataclass
class WriterConfig:
    """Configuration for RIS output.

    Attributes
    ----------
    line_ending : str
        Line terminator, '\\n' (default) or '\\r\\n'.
    """

    line_ending: str = "\n"

    def __post_init__(self) -> None:
        """Validate."""
        if self.line_ending not in LINE_ENDINGS:
            raise ValueError(f"line_ending must be one of {LINE_ENDINGS!r}, got {self.line_ending!r}")


def format_record(record: Record) -> list[str]:
    """Format one record as RIS lines.

    Parameters
    ----------
    record : Record
        Record to format.

    Returns
    -------
    list[str]
        Lines without terminators.
    """
    lines: list[str] = []
    for field in record:
        first, *rest = field.value.split("\n")
        lines.append(f"{field.tag}{SEPARATOR}{first}")
        lines.extend(rest)
    return lines


def iter_lines(document: Document) -> Iterator[str]:
    """Yield the RIS lines of a document, records separated by a blank line.

    Parameters
    ----------
    document : Document
        Document to format.

    Yields
    ------
    str
        Output lines without terminators.
    """
    for i, record in enumerate(document):
        if i > 0:
            yield ""
        yield from format_record(record)


def write(document: Document, config: WriterConfig | None = None) -> str:
    """Serialize a document to RIS text.

    Parameters
    ----------
    document : Document
        Document to serialize.
    config : WriterConfig | None, optional
        Writer configuration, by default '\\n' line endings.

    Returns
    -------
    str
        RIS text with every line terminated; empty for an empty document.
    """
    if config is None:
        config = WriterConfig()
    eol = config.line_ending
    return "".join(line + eol for line in iter_lines(document))


def write_to(
    document: Document,
    sink: IO[str] | IO[bytes],
    config: WriterConfig | None = None,
) -> None:
    """Serialize a document to a writable stream.

    Text streams (``io.TextIOBase``) receive ``str``; any other sink is
    treated as binary and receives UTF-8 bytes.

    Parameters
    ----------
    document : Document
        Document to serialize.
    sink : IO[str] | IO[bytes]
        Destination stream. It is not closed.
    config : WriterConfig | None, optional
        Writer configuration.

    Raises
    ------
    RISIOError
        If the sink fails; the ``OSError`` is chained as ``__cause__``.
    """
    text = write(document, config)
    try:
        if isinstance(sink, io.TextIOBase):
            sink.write(text)
        else:
            sink.write(text.encode("utf-8"))
        if hasattr(sink, "flush"):
            sink.flush()
    except OSError as e:
        name = getattr(sink, "name", None)
        raise RISIOError(
            f"Failed to write RIS output: {e}", path=str(name) if name is not None else None
        ) from e
