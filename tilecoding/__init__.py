"""
Hashed tile coding (CMAC) for linear function approximation.

    from tilecoding import HashTiler, IndexingTiler, UNLIMITED_INDICES

    it = IndexingTiler(HashTiler(8), UNLIMITED_INDICES)
    features = it.tile([0.3, 1.7])   # 8 small integer indices
"""

from .aggregate import AggregateTiler, PairTiler, SingleTiler, pairs_tiler, singles_tiler
from .capacity import max_indices, max_indices_for_ranges
from .errors import IndexOverflowError, InvalidCapacityError, InvalidNumTilingsError, TileCodingError
from .hash_tiler import HashTiler, draw_seed
from .indexing import UNLIMITED_INDICES, IndexingTiler, indexing_tiler, indexing_tiler_with_offset
from .log import setup_logging
from .tiler import Tiler

__all__ = [
    "AggregateTiler",
    "HashTiler",
    "IndexOverflowError",
    "IndexingTiler",
    "InvalidCapacityError",
    "InvalidNumTilingsError",
    "PairTiler",
    "SingleTiler",
    "TileCodingError",
    "Tiler",
    "UNLIMITED_INDICES",
    "draw_seed",
    "indexing_tiler",
    "indexing_tiler_with_offset",
    "max_indices",
    "max_indices_for_ranges",
    "pairs_tiler",
    "setup_logging",
    "singles_tiler",
]
