class TileCodingError(Exception):
    """Base class for errors raised by tilecoding."""


class InvalidNumTilingsError(TileCodingError, ValueError):
    """
    Raised when a tiler is built with an unusable tiling count.
    - num_tilings: the rejected value
    - reason: "not an integer", "too small" or "not a power of two"
    """
    def __init__(self, num_tilings, reason):
        self.num_tilings = num_tilings
        self.reason = reason
        super().__init__(f"invalid number of tilings {num_tilings!r}: {reason}")


class InvalidCapacityError(TileCodingError, ValueError):
    """Raised when an IndexingTiler gets a bad capacity or offset."""


class IndexOverflowError(TileCodingError):
    """
    Reported (not raised) by IndexingTiler.check_error() once more distinct
    tiles were seen than the index capacity allows. From then on indices alias.
    """
    def __init__(self, capacity):
        self.capacity = capacity
        super().__init__(
            f"more than {capacity} tile indices were used, so indices are being reused"
        )
