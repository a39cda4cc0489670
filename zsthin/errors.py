class ThinningError(ValueError):
    """Base class for precondition failures reported by the thinning core."""


class DimensionMismatchError(ThinningError):
    pass


class UnsupportedElementTypeError(ThinningError, TypeError):
    pass


class InvalidBackgroundError(ThinningError):
    pass


class BufferAliasError(ThinningError):
    pass
