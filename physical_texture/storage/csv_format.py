"""Comma-terminated text record for textures.

A record holds exactly one texture::

    <width>,<height>,<v0>,<v1>,...,<vN-1>,

Every field, including the last, is followed by the delimiter; no newline is
written. All fields are unsigned base-10 integers. The reader is a little more
forgiving than the writer: whitespace around fields is ignored and the final
delimiter is optional.

``format_record`` / ``parse_record`` are pure string functions;
``write_texture`` / ``read_texture`` wrap them with file handling.
"""

import logging
import os
from contextlib import contextmanager
from typing import Iterator, List, TextIO

import numpy as np

from physical_texture.errors import MalformedTextureError, ResourceOpenError
from physical_texture.storage.config import DEFAULT_FORMAT, CsvFormat
from physical_texture.texture import Texture, allocate_samples
from physical_texture.types import MAX_DIMENSION, MAX_U32, PathOrStream
from physical_texture.utils.validation import is_unsigned_decimal

logger = logging.getLogger(__name__)


def _is_stream(target: PathOrStream) -> bool:
    return hasattr(target, "read") or hasattr(target, "write")


def _describe(target: PathOrStream) -> str:
    if _is_stream(target):
        return str(getattr(target, "name", "<stream>"))
    return os.fspath(target)  # type: ignore[arg-type]


@contextmanager
def _open_text(target: PathOrStream, mode: str, fmt: CsvFormat) -> Iterator[TextIO]:
    """Yield a text stream for ``target``.

    Paths are opened (``"w"`` truncates) and closed on exit; streams passed in
    by the caller are yielded as-is and left open.
    """
    if _is_stream(target):
        yield target  # type: ignore[misc]
        return
    path = os.fspath(target)  # type: ignore[arg-type]
    action = "writing" if "w" in mode else "reading"
    try:
        f = open(path, mode, encoding=fmt.encoding, newline="")
    except OSError as e:
        raise ResourceOpenError(
            e.errno, f"Texture file unable to be opened for {action}", path
        ) from e
    with f:
        yield f


# -------- Serialization --------


def format_record(texture: Texture, fmt: CsvFormat = DEFAULT_FORMAT) -> str:
    """Return the text record for ``texture``.

    Raises:
        TextureReleasedError: If the texture was released.
    """
    d = fmt.delimiter
    samples = texture.samples()
    fields = [f"{texture.width}{d}{texture.height}{d}"]
    fields.extend(f"{v}{d}" for v in samples.tolist())
    return "".join(fields)


def write_texture(
    texture: Texture,
    destination: PathOrStream,
    fmt: CsvFormat = DEFAULT_FORMAT,
) -> None:
    """Write ``texture`` to ``destination``, replacing any existing content.

    Args:
        texture (Texture): Texture to serialize; must not be released.
        destination (PathOrStream): File path, or an open text stream that is
            written to and left open.
        fmt (CsvFormat): Record options.

    Raises:
        ResourceOpenError: If the path cannot be opened for writing.
        TextureReleasedError: If the texture was released.
    """
    record = format_record(texture, fmt)
    with _open_text(destination, "w", fmt) as f:
        f.write(record)
    logger.debug(
        "Wrote %dx%d texture to %s",
        texture.width,
        texture.height,
        _describe(destination),
    )


# -------- Deserialization --------


def _split_fields(text: str, fmt: CsvFormat, origin: str) -> List[str]:
    tokens = [token.strip() for token in text.split(fmt.delimiter)]
    # The final delimiter leaves one empty trailing token.
    if tokens and tokens[-1] == "":
        tokens.pop()
    for index, token in enumerate(tokens):
        if token == "":
            raise MalformedTextureError(f"{origin}: empty field at position {index}")
    return tokens


def _parse_uint(token: str, upper: int, what: str, origin: str) -> int:
    if not is_unsigned_decimal(token):
        raise MalformedTextureError(
            f"{origin}: {what} is not an unsigned decimal integer: {token!r}"
        )
    value = int(token)
    if value > upper:
        raise MalformedTextureError(f"{origin}: {what} {value} exceeds {upper}")
    return value


def parse_record(
    text: str,
    fmt: CsvFormat = DEFAULT_FORMAT,
    origin: str = "<string>",
) -> Texture:
    """Parse a text record into a new texture.

    Args:
        text (str): Record contents.
        fmt (CsvFormat): Record options; ``fmt.strict`` controls how a
            data-field count mismatch is handled.
        origin (str): Label used in error and log messages.

    Returns:
        Texture: Newly allocated texture.

    Raises:
        MalformedTextureError: On a missing header, a non-numeric or
            out-of-range field, or (strict mode) a field count that differs
            from ``width * height``.
        AllocationError: If storage cannot be obtained.
    """
    tokens = _split_fields(text, fmt, origin)
    if len(tokens) < 2:
        raise MalformedTextureError(f"{origin}: missing width/height header")

    width = _parse_uint(tokens[0], MAX_DIMENSION, "width", origin)
    height = _parse_uint(tokens[1], MAX_DIMENSION, "height", origin)
    expected = width * height
    data = tokens[2:]

    if len(data) != expected:
        problem = (
            f"{origin}: {width}x{height} texture declares {expected} samples, "
            f"found {len(data)}"
        )
        if fmt.strict:
            raise MalformedTextureError(problem)
        if len(data) < expected:
            logger.warning("%s; missing samples left at 0", problem)
        else:
            logger.warning("%s; surplus fields ignored", problem)
        data = data[:expected]

    for index, token in enumerate(data):
        _parse_uint(token, MAX_U32, f"sample {index}", origin)

    values = allocate_samples(expected)
    if data:
        values[: len(data)] = np.fromiter(
            (int(token) for token in data), dtype=np.uint32, count=len(data)
        )
    return Texture(width, height, values)


def read_texture(source: PathOrStream, fmt: CsvFormat = DEFAULT_FORMAT) -> Texture:
    """Read a texture record from ``source``.

    Args:
        source (PathOrStream): File path, or an open text stream that is read
            to the end and left open.
        fmt (CsvFormat): Record options.

    Raises:
        ResourceOpenError: If the path cannot be opened for reading.
        MalformedTextureError: If the record cannot be parsed.
        AllocationError: If storage cannot be obtained.
    """
    origin = _describe(source)
    with _open_text(source, "r", fmt) as f:
        try:
            text = f.read()
        except UnicodeDecodeError as e:
            raise MalformedTextureError(
                f"{origin}: not a {fmt.encoding} text record"
            ) from e
    texture = parse_record(text, fmt, origin)
    logger.debug("Read %dx%d texture from %s", texture.width, texture.height, origin)
    return texture
