"""Parse and write RIS bibliographic citation files.

This package provides:
- Data models (risio.models) — Document, Record, Field and tag tables
- Reading (risio.reader) — RIS text to Document
- Writing (risio.writer) — Document to RIS text
- Errors (risio.errors) — structural and I/O failures
- CLI (risio.cli) — command-line interface
- Public API (risio.api) — file and stream helpers
"""

__version__ = "0.1.0"
__license__ = "MIT"

from risio.api import parse_file, read, write_file, write_jsonl
from risio.errors import (
    FormatError,
    MalformedLineError,
    RISError,
    RISIOError,
    UnterminatedRecordError,
)
from risio.models import Document, Field, PublicationDate, Record
from risio.reader import ParserConfig, iter_records, parse, parse_lines
from risio.writer import WriterConfig, iter_lines, write, write_to

__all__ = [
    "__version__",
    "__license__",
    "Document",
    "Record",
    "Field",
    "PublicationDate",
    "ParserConfig",
    "WriterConfig",
    "parse",
    "parse_lines",
    "iter_records",
    "write",
    "write_to",
    "iter_lines",
    "parse_file",
    "read",
    "write_file",
    "write_jsonl",
    "RISError",
    "FormatError",
    "MalformedLineError",
    "UnterminatedRecordError",
    "RISIOError",
]
