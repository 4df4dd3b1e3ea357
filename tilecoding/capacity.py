from math import prod


def max_indices_for_ranges(ranges, num_tilings):
    """
    Upper bound on the number of distinct tiles num_tilings tilings can
    produce when dimension i spans ranges[i] tile widths. The +1 per
    dimension covers the tiles straddling the edges of the range.
    """
    return num_tilings * prod(r + 1 for r in ranges)


def max_indices(max_range, num_dims, num_tilings):
    """max_indices_for_ranges where every dimension spans max_range."""
    return max_indices_for_ranges([max_range] * num_dims, num_tilings)
