"""Character-level edit distance."""
from __future__ import annotations

from typing import List


def levenshtein(a: str, b: str) -> int:
    """Classic Levenshtein distance between two strings.

    Counts the minimum number of single-character insertions, deletions
    and substitutions needed to turn ``a`` into ``b``.

    Args:
        a: Source string (normally already normalized)
        b: Target string (normally already normalized)

    Returns:
        Edit distance; 0 for identical strings, ``max(len(a), len(b))``
        when one of them is empty
    """
    m, n = len(a), len(b)
    dp: List[List[int]] = [[0] * (n + 1) for _ in range(m + 1)]

    for i in range(m + 1):
        dp[i][0] = i
    for j in range(n + 1):
        dp[0][j] = j

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            dp[i][j] = min(
                dp[i - 1][j] + 1,  # deletion
                dp[i][j - 1] + 1,  # insertion
                dp[i - 1][j - 1] + cost,  # match / substitution
            )

    return dp[m][n]
