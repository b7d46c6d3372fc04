"""Persistence subpackage.

Textures are stored as a single comma-terminated line of unsigned decimal
integers: width, height, then the row-major samples. See
:mod:`physical_texture.storage.csv_format` for the reader / writer and
:mod:`physical_texture.storage.config` for the record options.
"""

from .config import CsvFormat, DEFAULT_FORMAT, LENIENT_FORMAT
from .csv_format import format_record, parse_record, read_texture, write_texture

__all__ = [
    "CsvFormat",
    "DEFAULT_FORMAT",
    "LENIENT_FORMAT",
    "format_record",
    "parse_record",
    "read_texture",
    "write_texture",
]
