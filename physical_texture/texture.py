"""Physical texture entity.

A :class:`Texture` is a 2D grid of scalar physical-property samples
(roughness, height, ...) held as a flat, row-major ``uint32`` buffer. Sample
``(row, col)`` lives at index ``row * width + col``.

Design notes:

* Normalized float input in ``[0.0, 1.0]`` is rescaled to the full unsigned
    32-bit range with ``trunc(f * MAX_U32)``, computed in float64 so that
    ``0.5`` and ``0.25`` land exactly on ``MAX_U32 // 2`` and
    ``MAX_U32 // 4``.
* Each texture owns its buffer exclusively. Constructors copy their source;
    nothing is shared between instances.
* ``release()`` drops the buffer and is idempotent. A released texture keeps
    its ``width`` / ``height`` but reports ``has_data == False``, and any
    operation needing samples raises
    :class:`~physical_texture.errors.TextureReleasedError`.

See :mod:`physical_texture.storage` for the on-disk record.
"""

import logging
from dataclasses import dataclass
from types import TracebackType
from typing import Any, Iterator, Optional, Tuple, Type

import numpy as np
from pyrsistent import PMap, pmap

from physical_texture.errors import AllocationError, TextureReleasedError
from physical_texture.types import (
    MAX_U32,
    FloatSource,
    IntSource,
    UInt32Array,
)
from physical_texture.utils.validation import (
    check_dimensions,
    check_length,
    check_u32_range,
)

logger = logging.getLogger(__name__)

_U32_MODULUS = float(MAX_U32) + 1.0


def allocate_samples(count: int) -> UInt32Array:
    """Return a zero-initialized ``uint32`` buffer of ``count`` samples.

    Raises:
        AllocationError: If the buffer cannot be obtained.
    """
    try:
        return np.zeros(count, dtype=np.uint32)
    except MemoryError as e:
        raise AllocationError(
            f"Memory allocation failed for {count} texture samples"
        ) from e


@dataclass(eq=False)
class Texture:
    """Grid of unsigned 32-bit physical-property samples.

    Prefer the :meth:`from_floats` / :meth:`from_ints` constructors or
    :func:`physical_texture.storage.read_texture`; direct construction
    validates but does not copy ``values``.

    Attributes:
        width (int): Number of columns, ``0..MAX_DIMENSION``.
        height (int): Number of rows, ``0..MAX_DIMENSION``.
        values (UInt32Array | None): Flat row-major samples of length
            ``width * height``; ``None`` once released.
    """

    width: int
    height: int
    values: Optional[UInt32Array]

    def __post_init__(self) -> None:
        self.width, self.height = check_dimensions(self.width, self.height)
        if self.values is None:
            return
        if self.values.dtype != np.uint32 or self.values.ndim != 1:
            raise ValueError(
                f"values must be a 1-D uint32 array, got {self.values.dtype} "
                f"with {self.values.ndim} dimension(s)"
            )
        check_length(self.width, self.height, len(self.values))

    # -------- Construction --------

    @classmethod
    def from_floats(cls, width: int, height: int, source: FloatSource) -> "Texture":
        """Build a texture from normalized samples in ``[0.0, 1.0]``.

        Each sample is stored as ``trunc(f * MAX_U32)``. Inputs outside the
        normalized range are not clamped: they truncate toward zero and wrap
        modulo 2**32, and a warning is logged.

        Args:
            width (int): Number of columns.
            height (int): Number of rows.
            source (FloatSource): ``width * height`` samples, row-major.

        Returns:
            Texture: Newly allocated texture.

        Raises:
            DimensionError: If ``width`` or ``height`` is out of range.
            ValueError: On a length mismatch or a non-finite sample.
            AllocationError: If storage cannot be obtained.
        """
        width, height = check_dimensions(width, height)
        floats = np.asarray(source, dtype=np.float64).reshape(-1)
        check_length(width, height, floats.size)
        if not np.all(np.isfinite(floats)):
            raise ValueError("Normalized samples must be finite")

        out_of_range = int(np.count_nonzero((floats < 0.0) | (floats > 1.0)))
        if out_of_range:
            logger.warning(
                "%d of %d samples lie outside [0.0, 1.0]; results wrap modulo 2**32",
                out_of_range,
                floats.size,
            )

        values = allocate_samples(floats.size)
        scaled = np.mod(np.trunc(floats * float(MAX_U32)), _U32_MODULUS)
        values[:] = scaled.astype(np.uint32)
        logger.debug("Built %dx%d texture from normalized floats", width, height)
        return cls(width, height, values)

    @classmethod
    def from_ints(cls, width: int, height: int, source: IntSource) -> "Texture":
        """Build a texture by copying raw unsigned 32-bit samples verbatim.

        Raises:
            DimensionError: If ``width`` or ``height`` is out of range.
            ValueError: On a length mismatch, a non-integer source, or a
                sample outside ``[0, MAX_U32]``.
            AllocationError: If storage cannot be obtained.
        """
        width, height = check_dimensions(width, height)
        ints = np.asarray(source).reshape(-1)
        check_length(width, height, ints.size)
        if ints.size and ints.dtype.kind not in "iuO":
            raise ValueError(f"Integer samples expected, got dtype {ints.dtype}")
        check_u32_range(ints)

        values = allocate_samples(ints.size)
        values[:] = ints.astype(np.uint32)
        logger.debug("Built %dx%d texture from raw integers", width, height)
        return cls(width, height, values)

    # -------- Lifecycle --------

    def release(self) -> None:
        """Drop the sample buffer. Safe to call more than once."""
        self.values = None

    def __enter__(self) -> "Texture":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.release()

    # -------- Accessors --------

    @property
    def has_data(self) -> bool:
        """True while the texture still holds its sample buffer."""
        return self.values is not None

    @property
    def size(self) -> int:
        return self.width * self.height

    @property
    def shape(self) -> Tuple[int, int]:
        """``(height, width)``, the row-major shape of the grid."""
        return (self.height, self.width)

    def samples(self) -> UInt32Array:
        """Return the live sample buffer.

        Raises:
            TextureReleasedError: If the texture was released.
        """
        if self.values is None:
            raise TextureReleasedError(
                f"{self.width}x{self.height} texture has been released"
            )
        return self.values

    def __iter__(self) -> Iterator[int]:
        return (int(v) for v in self.samples())

    @property
    def description(self) -> PMap[str, Any]:
        """Compact summary for diagnostics.

        Includes ``min`` / ``max`` only for a live, non-empty texture.

        Returns:
            PMap[str, Any]: Persistent map of summary fields.
        """
        description: PMap[str, Any] = pmap(
            {
                "width": self.width,
                "height": self.height,
                "size": self.size,
                "has_data": self.has_data,
            }
        )
        if self.values is not None and self.values.size:
            description = description.update(
                {"min": int(self.values.min()), "max": int(self.values.max())}
            )
        return description


def release_texture(texture: Texture) -> None:
    """Release ``texture``'s sample buffer (no-op if already released)."""
    texture.release()
