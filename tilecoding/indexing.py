import logging
import threading

import numpy as np

from .errors import IndexOverflowError, InvalidCapacityError

logger = logging.getLogger(__name__)

# capacity value for an IndexingTiler that never runs out of indices
UNLIMITED_INDICES = None


class IndexingTiler:
    """
    Turns the tile ids of another tiler into small integer indices, e.g.
    for indexing a weight table.
    - tiler: anything with tile(data) returning tile ids
    - capacity: number of indices available, or UNLIMITED_INDICES
    - offset: first index handed out
    Ids get indices offset, offset + 1, ... in order of first appearance.
    Once capacity is used up, check_error() reports it and allocation
    restarts at offset, so new ids share indices with old ones. Old
    entries are never evicted.
    """
    def __init__(self, tiler, capacity, offset=0):
        if capacity is not UNLIMITED_INDICES and (
            isinstance(capacity, bool) or not isinstance(capacity, (int, np.integer)) or capacity < 1
        ):
            raise InvalidCapacityError(
                f"capacity must be a positive integer or UNLIMITED_INDICES, got {capacity!r}"
            )
        if isinstance(offset, bool) or not isinstance(offset, (int, np.integer)) or offset < 0:
            raise InvalidCapacityError(f"offset must be a non-negative integer, got {offset!r}")

        self.tiler = tiler
        self._capacity = capacity
        self._offset = int(offset)
        self._indices = {}
        self._next = self._offset
        self._error = None
        self._lock = threading.Lock()
        logger.debug("IndexingTiler created with capacity=%s offset=%d", capacity, self._offset)

    @property
    def capacity(self):
        return self._capacity

    @property
    def offset(self):
        return self._offset

    def __len__(self):
        return len(self._indices)

    def tile(self, data):
        """Indices for the tile ids of data, one per id, in the same order."""
        hashes = np.asarray(self.tiler.tile(data), dtype=np.uint64)
        out = np.empty(len(hashes), dtype=np.int64)
        with self._lock:
            for i, h in enumerate(hashes.tolist()):
                idx = self._indices.get(h)
                if idx is None:
                    idx = self._allocate()
                    self._indices[h] = idx
                out[i] = idx
        return out

    def _allocate(self):
        if self._capacity is not UNLIMITED_INDICES and self._next >= self._offset + self._capacity:
            if self._error is None:
                logger.warning(
                    "IndexingTiler ran out of its %d indices; indices will be reused",
                    self._capacity,
                )
                self._error = IndexOverflowError(self._capacity)
            self._next = self._offset
        idx = self._next
        self._next += 1
        return idx

    def check_error(self):
        """The IndexOverflowError once capacity was exceeded, otherwise None."""
        return self._error


def indexing_tiler(tiler, capacity):
    return IndexingTiler(tiler, capacity)


def indexing_tiler_with_offset(tiler, offset, capacity):
    return IndexingTiler(tiler, capacity, offset=offset)
