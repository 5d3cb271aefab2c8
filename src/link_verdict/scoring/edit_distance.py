"""Levenshtein edit distance."""

from __future__ import annotations


def edit_distance(a: str, b: str) -> int:
    """Minimum number of single-character insertions, deletions or substitutions turning ``a`` into ``b``."""

    if not a:
        return len(b)
    if not b:
        return len(a)
    m, n = len(a), len(b)
    table = [[0] * (n + 1) for _ in range(m + 1)]
    for i in range(m + 1):
        table[i][0] = i
    for j in range(n + 1):
        table[0][j] = j
    for i in range(1, m + 1):
        for j in range(1, n + 1):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            table[i][j] = min(
                table[i - 1][j] + 1,
                table[i][j - 1] + 1,
                table[i - 1][j - 1] + cost,
            )
    return table[m][n]
