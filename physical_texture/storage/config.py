"""Options for the comma-terminated texture record."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CsvFormat:
    """Text record options.

    Attributes:
        delimiter (str): Field terminator written after every field.
        encoding (str): Text encoding used when opening paths.
        strict (bool): If True, a record whose data-field count differs from
            ``width * height`` is rejected. If False, missing samples are
            left at zero and surplus fields are ignored (both with a warning).
    """

    delimiter: str = ","
    encoding: str = "ascii"
    strict: bool = True

    def __post_init__(self) -> None:
        if len(self.delimiter) != 1:
            raise ValueError(f"delimiter must be one character, got {self.delimiter!r}")
        if self.delimiter.isdigit() or self.delimiter.isspace():
            raise ValueError(
                f"delimiter cannot be a digit or whitespace, got {self.delimiter!r}"
            )


DEFAULT_FORMAT = CsvFormat()
LENIENT_FORMAT = CsvFormat(strict=False)
