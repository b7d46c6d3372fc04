"""Range and shape checks shared by construction and parsing.

Functions here raise on the first violation and are called before any
sample buffer is allocated. ``check_dimensions`` also normalizes the sides
to Python ints.
"""

import operator
from typing import Tuple

import numpy as np

from physical_texture.errors import DimensionError
from physical_texture.types import MAX_DIMENSION, MAX_U32


def check_dimensions(width: int, height: int) -> Tuple[int, int]:
    """Return ``(width, height)`` as Python ints within the 16-bit range.

    numpy integer scalars are accepted and converted, so products of the
    returned sides never overflow.

    Raises:
        TypeError: If a side is not an integer (floats and bools included).
        DimensionError: If a side lies outside ``[0, MAX_DIMENSION]``.
    """
    sides = []
    for name, value in (("width", width), ("height", height)):
        if isinstance(value, (bool, np.bool_)):
            raise TypeError(f"{name} must be an integer, got {value!r}")
        try:
            side = operator.index(value)
        except TypeError as e:
            raise TypeError(f"{name} must be an integer, got {value!r}") from e
        if not 0 <= side <= MAX_DIMENSION:
            raise DimensionError(f"{name} must be in [0, {MAX_DIMENSION}], got {side}")
        sides.append(int(side))
    return sides[0], sides[1]


def check_length(width: int, height: int, length: int) -> None:
    """Raise ``ValueError`` if ``length`` differs from ``width * height``."""
    if length != width * height:
        raise ValueError(
            f"Expected {width * height} samples for a {width}x{height} texture, "
            f"got {length}"
        )


def check_u32_range(values: np.ndarray) -> None:
    """Raise ``ValueError`` if any element falls outside ``[0, MAX_U32]``."""
    if values.size == 0:
        return
    lo, hi = int(values.min()), int(values.max())
    if lo < 0 or hi > MAX_U32:
        raise ValueError(f"Values must be in [0, {MAX_U32}], got range [{lo}, {hi}]")


def is_unsigned_decimal(token: str) -> bool:
    """Return True for a non-empty run of ASCII digits (no sign, no spaces)."""
    return token.isascii() and token.isdigit()
