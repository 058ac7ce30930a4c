"""String helpers."""

from __future__ import annotations

__all__ = ["longest_common_substring"]


def longest_common_substring(a: str, b: str) -> int:
    """Return the length of the longest substring shared by ``a`` and ``b``.

    Dynamic programming over common suffixes, keeping one row at a time.

    Args:
        a: First string
        b: Second string

    Returns:
        Length of the longest common substring (0 if either is empty)
    """
    if not a or not b:
        return 0

    longest = 0
    previous = [0] * (len(b) + 1)

    for ch_a in a:
        current = [0] * (len(b) + 1)
        for j, ch_b in enumerate(b, start=1):
            if ch_a == ch_b:
                current[j] = previous[j - 1] + 1
                if current[j] > longest:
                    longest = current[j]
        previous = current

    return longest
