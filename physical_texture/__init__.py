"""physical_texture
=================

Physical textures: 2D grids of scalar physical-property samples (roughness,
height, ...) stored as unsigned 32-bit integers. Unlike graphical textures
there is a single channel and no image format; normalized float input in
``[0.0, 1.0]`` is rescaled to the full ``uint32`` range.

Typical use::

    from physical_texture import Texture, read_texture, write_texture

    with Texture.from_floats(2, 2, [0.0, 1.0, 0.5, 0.25]) as tex:
        write_texture(tex, "roughness.csv")

    loaded = read_texture("roughness.csv")
    loaded.values  # array([0, 4294967295, 2147483647, 1073741823], dtype=uint32)
"""

from .errors import (
    AllocationError,
    DimensionError,
    MalformedTextureError,
    ResourceOpenError,
    TextureError,
    TextureReleasedError,
)
from .storage import (
    CsvFormat,
    DEFAULT_FORMAT,
    LENIENT_FORMAT,
    format_record,
    parse_record,
    read_texture,
    write_texture,
)
from .texture import Texture, release_texture
from .types import MAX_DIMENSION, MAX_U32

__all__ = [
    "AllocationError",
    "CsvFormat",
    "DEFAULT_FORMAT",
    "DimensionError",
    "LENIENT_FORMAT",
    "MAX_DIMENSION",
    "MAX_U32",
    "MalformedTextureError",
    "ResourceOpenError",
    "Texture",
    "TextureError",
    "TextureReleasedError",
    "format_record",
    "parse_record",
    "read_texture",
    "release_texture",
    "write_texture",
]
