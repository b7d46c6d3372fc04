"""Common constants and type aliases.

``MAX_U32`` is both the upper bound of a stored sample and the scale factor
used when converting normalized floats. ``MAX_DIMENSION`` bounds ``width`` and
``height`` to the unsigned 16-bit range of the on-disk record.
"""

import os
from typing import Sequence, TextIO, Union

import numpy as np
import numpy.typing as npt

MAX_U32 = 4294967295
MAX_DIMENSION = 65535

# Type aliases for clarity
UInt32Array = npt.NDArray[np.uint32]
FloatArray = npt.NDArray[np.float32 | np.float64]

FloatSource = Union[Sequence[float], FloatArray]
IntSource = Union[Sequence[int], npt.NDArray[np.integer]]

PathLike = Union[str, "os.PathLike[str]"]
PathOrStream = Union[PathLike, TextIO]
