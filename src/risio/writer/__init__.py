"""RIS text writing."""

from risio.writer.ris_writer import WriterConfig, format_record, iter_lines, write, write_to

__all__ = [
    "WriterConfig",
    "format_record",
    "iter_lines",
    "write",
    "write_to",
]
