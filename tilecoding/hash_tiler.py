import logging

import numpy as np
import xxhash

from .errors import InvalidNumTilingsError

logger = logging.getLogger(__name__)


def _check_num_tilings(num_tilings, power_of_two):
    if isinstance(num_tilings, bool) or not isinstance(num_tilings, (int, np.integer)):
        raise InvalidNumTilingsError(num_tilings, "not an integer")
    if num_tilings < 1:
        raise InvalidNumTilingsError(num_tilings, "too small")
    if power_of_two and num_tilings & (num_tilings - 1):
        raise InvalidNumTilingsError(num_tilings, "not a power of two")


def draw_seed(rng=None):
    """Draw a 64-bit hash seed from rng (a fresh generator when None)."""
    if rng is None:
        rng = np.random.default_rng()
    return int(rng.integers(np.iinfo(np.uint64).max, dtype=np.uint64, endpoint=True))


class HashTiler:
    """
    Hashed multi-tiling coarse coding (CMAC) for continuous states.
    - num_tilings: number of staggered tilings, also the number of ids per call.
      Inputs are quantized at 1/num_tilings, so a tile is one unit wide.
    - seed: 64-bit seed for the tile hash; drawn from rng when not given
    - rng: numpy Generator used to draw the seed (fresh one when None)
    - power_of_two: reject tiling counts that are not a power of two
    Returns one uint64 tile id per tiling. Ids are only comparable between
    calls on the same instance.
    """
    def __init__(self, num_tilings, seed=None, rng=None, power_of_two=False):
        _check_num_tilings(num_tilings, power_of_two)
        self._num_tilings = int(num_tilings)
        self._seed = draw_seed(rng) if seed is None else int(seed)
        self._tiling_ids = np.arange(self._num_tilings, dtype=np.int64)
        logger.debug("HashTiler created with %d tilings", self._num_tilings)

    @property
    def num_tilings(self):
        return self._num_tilings

    @property
    def seed(self):
        return self._seed

    def __repr__(self):
        return f"HashTiler(num_tilings={self._num_tilings})"

    def cells(self, data):
        """
        Lattice coordinates of the active tile in every tiling.

        Row t holds, per input dimension, the coordinate of the tile that
        contains the quantized input in tiling t, followed by t itself.
        """
        n = self._num_tilings
        x = np.ravel(np.asarray(data, dtype=np.float64))
        q = np.floor(x * n).astype(np.int64)

        # origin of tiling t along dimension i sits at t * (1 + 2i)
        displacement = 1 + 2 * np.arange(q.size, dtype=np.int64)
        origins = np.outer(self._tiling_ids, displacement)

        cells = np.empty((n, q.size + 1), dtype="<i8")
        # np.mod is a floor modulo, so this also snaps negative q down
        cells[:, :-1] = q - np.mod(q - origins, n)
        cells[:, -1] = self._tiling_ids
        return cells

    def tile(self, data, out=None):
        """
        Return the tile ids of every tiling for data.

        out, when given, must be a uint64 array of length num_tilings; it is
        filled in place and returned. Sharing one out buffer between threads
        is not safe.
        """
        if out is None:
            out = np.empty(self._num_tilings, dtype=np.uint64)
        elif not isinstance(out, np.ndarray):
            raise ValueError(f"out must be a numpy array, got {type(out).__name__}")
        elif out.dtype != np.uint64 or out.shape != (self._num_tilings,):
            raise ValueError(
                f"out must be a uint64 array of shape ({self._num_tilings},), "
                f"got {out.dtype} {out.shape}"
            )

        cells = self.cells(data)
        raw = memoryview(cells.tobytes())
        width = cells.shape[1] * cells.itemsize
        for t in range(self._num_tilings):
            out[t] = xxhash.xxh64_intdigest(raw[t * width:(t + 1) * width], seed=self._seed)
        return out
