from typing import Protocol, Sequence

import numpy as np


class Tiler(Protocol):
    """
    Anything that maps a real vector to a fixed number of 64-bit tile ids.

    The input length is not checked, but every call on the same tiler is
    expected to pass vectors of the same length. Equal inputs must give
    equal outputs for the lifetime of the tiler.
    """

    def tile(self, data: Sequence[float]) -> np.ndarray:
        ...
