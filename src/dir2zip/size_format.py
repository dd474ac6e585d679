"""Human-readable formatting of archive sizes."""

import sys

from humanfriendly import round_number

KB = 1000
MB = 1000 * KB
GB = 1000 * MB


def _round(value: float) -> str:
    return round_number(value + sys.float_info.epsilon)


def format_size(num_bytes: int) -> str:
    """Format a byte count using decimal (base-1000) units.

    Values are rounded half-up to two decimal places with trailing zeros dropped.
    Machine epsilon is added before rounding so that halves which binary floats
    store just below .5 (1.005, 2.675) still round up. Values that fall exactly on
    a unit boundary (1000, 1000000, 1000000000) are reported as a raw byte count,
    not as "1 KB" and so on.

    Args:
        num_bytes: Size in bytes.

    Returns:
        The formatted size, e.g. "999 bytes", "1.5 KB", "2.5 MB" or "3 GB".

    Example:
        >>> format_size(999)
        '999 bytes'
        >>> format_size(1500)
        '1.5 KB'
        >>> format_size(2500000)
        '2.5 MB'
        >>> format_size(3000000000)
        '3 GB'
        >>> format_size(1005)
        '1.01 KB'
        >>> format_size(1000)
        '1000 bytes'
    """
    if KB < num_bytes < MB:
        return f"{_round(num_bytes / KB)} KB"
    if MB < num_bytes < GB:
        return f"{_round(num_bytes / MB)} MB"
    if num_bytes > GB:
        return f"{_round(num_bytes / GB)} GB"
    return f"{num_bytes} bytes"
