"""RIS text reading.

Main entry points:
- parse: Parse a complete string
- parse_lines: Parse an iterable of lines
- iter_records: Stream records one at a time
"""

from risio.reader.base import PARSE_MODES, ParserConfig
from risio.reader.ris import iter_records, parse, parse_lines

__all__ = [
    "PARSE_MODES",
    "ParserConfig",
    "iter_records",
    "parse",
    "parse_lines",
]
