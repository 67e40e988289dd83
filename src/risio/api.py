"""Public API for reading and writing RIS files.

This module provides the file and stream layer around the pure parser and
writer:
- Parsing files and open streams into a Document
- Writing a Document to a RIS file
- Exporting records to JSONL format
"""

import json
import logging
from pathlib import Path
from typing import IO

from risio.errors import RISIOError
from risio.models import Document
from risio.reader import ParserConfig, parse
from risio.reader.base import decode_bytes
from risio.writer import WriterConfig, write_to

__all__ = [
    "parse_file",
    "read",
    "write_file",
    "write_jsonl",
]

logger = logging.getLogger(__name__)


def read(
    stream: IO[str] | IO[bytes],
    config: ParserConfig | None = None,
) -> Document:
    """Parse RIS content from an open stream.

    Parameters
    ----------
    stream : IO[str] | IO[bytes]
        Readable text or binary stream. Binary content is decoded as UTF-8.
        The stream is not closed.
    config : ParserConfig | None, optional
        Parser configuration.

    Returns
    -------
    Document
        Parsed records.

    Raises
    ------
    FormatError
        If the content is not valid RIS or not valid UTF-8.
    RISIOError
        If reading from the stream fails.
    """
    try:
        content = stream.read()
    except OSError as e:
        raise RISIOError(f"Failed to read RIS input: {e}") from e

    if isinstance(content, bytes):
        content = decode_bytes(content)

    return parse(content, config)


def parse_file(
    path: str | Path,
    config: ParserConfig | None = None,
) -> Document:
    """Parse a RIS file.

    Parameters
    ----------
    path : str | Path
        Path to the RIS file.
    config : ParserConfig | None, optional
        Parser configuration.

    Returns
    -------
    Document
        Parsed records.

    Raises
    ------
    FormatError
        If the file is not valid RIS.
    RISIOError
        If the file cannot be read.

    Examples
    --------
        >>> from risio import parse_file
        >>> doc = parse_file("references.ris")
        >>> for record in doc:
        ...     print(record.get("TI"))
    """
    file_path = Path(path)

    try:
        with file_path.open("rb") as f:
            document = read(f, config)
    except OSError as e:
        raise RISIOError(f"Failed to read {file_path}: {e}", path=str(file_path)) from e

    logger.debug("Parsed %d records from %s", len(document), file_path)
    return document


def write_file(
    document: Document,
    path: str | Path,
    config: WriterConfig | None = None,
) -> None:
    """Write a document to a RIS file (UTF-8).

    Parameters
    ----------
    document : Document
        Document to write.
    path : str | Path
        Output file path. Parent directories are created.
    config : WriterConfig | None, optional
        Writer configuration.

    Raises
    ------
    RISIOError
        If the file cannot be written.
    """
    file_path = Path(path)

    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        with file_path.open("wb") as f:
            write_to(document, f, config)
    except OSError as e:
        raise RISIOError(f"Failed to write {file_path}: {e}", path=str(file_path)) from e

    logger.debug("Wrote %d records to %s", len(document), file_path)


def write_jsonl(
    document: Document,
    path: str | Path,
    *,
    sort_keys: bool = True,
) -> None:
    """Write records to JSONL file (one JSON object per line).

    Output is deterministic with consistent field ordering and UTF-8 encoding.

    Parameters
    ----------
    document : Document
        Records to write.
    path : str | Path
        Output file path.
    sort_keys : bool, optional
        Whether to sort dictionary keys for deterministic output,
        by default True.

    Raises
    ------
    RISIOError
        If the file cannot be written.
    """
    file_path = Path(path)

    try:
        with file_path.open("w", encoding="utf-8", newline="\n") as f:
            for record in document:
                json_str = json.dumps(
                    record.to_dict(),
                    ensure_ascii=False,
                    sort_keys=sort_keys,
                )
                f.write(json_str + "\n")
    except OSError as e:
        raise RISIOError(f"Failed to write {file_path}: {e}", path=str(file_path)) from e

    logger.debug("Exported %d records to %s", len(document), file_path)
