"""Error taxonomy.

Every failure raised by the package derives from :class:`TextureError` and
also from the closest builtin, so callers may catch either
``TextureError`` or e.g. ``OSError`` / ``ValueError``.
"""


class TextureError(Exception):
    """Base class for all texture errors."""


class AllocationError(TextureError, MemoryError):
    """Storage for the requested number of samples could not be obtained."""


class ResourceOpenError(TextureError, OSError):
    """A path could not be opened for the requested mode."""


class MalformedTextureError(TextureError, ValueError):
    """A serialized record could not be parsed into a texture."""


class DimensionError(TextureError, ValueError):
    """Width or height lies outside ``[0, MAX_DIMENSION]``."""


class TextureReleasedError(TextureError, ValueError):
    """Sample data was accessed after the texture was released."""
