import logging
from concurrent.futures import ThreadPoolExecutor
from itertools import combinations

import numpy as np

from .hash_tiler import HashTiler

logger = logging.getLogger(__name__)


class AggregateTiler:
    """
    Runs several tilers on the same input and concatenates their ids,
    in the order the tilers were given. Children are shared, not copied.
    """
    def __init__(self, tilers):
        self._tilers = tuple(tilers)
        logger.debug("AggregateTiler created with %d tilers", len(self._tilers))

    @property
    def tilers(self):
        return self._tilers

    def __len__(self):
        return len(self._tilers)

    def tile(self, data, parallel=False, max_workers=None):
        """
        Concatenated ids of every child tiler.

        With parallel=True the children run on a thread pool; the output
        order is still the child order. Nested AggregateTilers get the same
        parallel and max_workers settings.
        """
        if not self._tilers:
            return np.empty(0, dtype=np.uint64)

        def run(til):
            if isinstance(til, AggregateTiler):
                return til.tile(data, parallel=parallel, max_workers=max_workers)
            return til.tile(data)

        if parallel:
            with ThreadPoolExecutor(max_workers=max_workers) as executor:
                parts = list(executor.map(run, self._tilers))
        else:
            parts = [run(til) for til in self._tilers]
        return np.concatenate(parts)


class SingleTiler:
    """Tiles a single input dimension with its own tiler."""
    def __init__(self, index, tiler):
        self.index = index
        self.tiler = tiler

    def tile(self, data):
        return self.tiler.tile([data[self.index]])


class PairTiler:
    """Tiles two input dimensions jointly with their own tiler."""
    def __init__(self, first, second, tiler):
        self.first = first
        self.second = second
        self.tiler = tiler

    def tile(self, data):
        return self.tiler.tile([data[self.first], data[self.second]])


def _check_num_dims(num_dims):
    if num_dims < 0:
        raise ValueError(f"num_dims must be non-negative, got {num_dims}")


def singles_tiler(num_dims, num_tilings, rng=None, power_of_two=False):
    """One independently seeded HashTiler per input dimension."""
    _check_num_dims(num_dims)
    if rng is None:
        rng = np.random.default_rng()
    tilers = [
        SingleTiler(i, HashTiler(num_tilings, rng=rng, power_of_two=power_of_two))
        for i in range(num_dims)
    ]
    return AggregateTiler(tilers)


def pairs_tiler(num_dims, num_tilings, rng=None, power_of_two=False):
    """
    One independently seeded HashTiler per unordered pair of input dimensions,
    ordered (0, 1), (0, 2), ..., (1, 2), ... for num_dims * (num_dims - 1) / 2
    tilers in total.
    """
    _check_num_dims(num_dims)
    if rng is None:
        rng = np.random.default_rng()
    tilers = [
        PairTiler(i, j, HashTiler(num_tilings, rng=rng, power_of_two=power_of_two))
        for i, j in combinations(range(num_dims), 2)
    ]
    return AggregateTiler(tilers)
