# CountdownTimeline
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Natural-breaks partitioning of 1-D values (Fisher-Jenks)."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

import numpy as np

__all__ = ["Partitioner", "natural_breaks"]


class Partitioner(Protocol):
    """Return ``k`` ascending centroids for ascending ``sorted_values``."""

    def __call__(self, sorted_values: Sequence[float], k: int) -> Sequence[float]: ...


def natural_breaks(sorted_values: Sequence[float], k: int) -> list[float]:
    """Optimal ``k``-class partition of ``sorted_values``; returns class means.

    Classes are contiguous runs of the sorted input chosen to minimise the
    total within-class sum of squared deviations (Fisher's exact dynamic
    programme). When there are no more distinct values than ``k`` each distinct
    value is its own class.
    """

    values = np.asarray(sorted_values, dtype=float)
    values = np.sort(values[np.isfinite(values)])
    if values.size == 0 or k <= 0:
        return []

    distinct = np.unique(values)
    if distinct.size <= k:
        return [float(v) for v in distinct]

    # Shift to the first value so the prefix sums of squares stay well
    # conditioned for epoch-second magnitudes.
    origin = values[0]
    shifted = values - origin
    n = shifted.size
    s1 = np.concatenate(([0.0], np.cumsum(shifted)))
    s2 = np.concatenate(([0.0], np.cumsum(shifted * shifted)))

    cost = np.full((k + 1, n + 1), np.inf)
    split = np.zeros((k + 1, n + 1), dtype=int)
    cost[0, 0] = 0.0
    for c in range(1, k + 1):
        for j in range(c, n + 1):
            starts = np.arange(c - 1, j)
            counts = j - starts
            totals = s1[j] - s1[starts]
            within = (s2[j] - s2[starts]) - totals * totals / counts
            candidates = cost[c - 1, starts] + within
            best = int(np.argmin(candidates))
            cost[c, j] = candidates[best]
            split[c, j] = starts[best]

    bounds: list[tuple[int, int]] = []
    end = n
    for c in range(k, 0, -1):
        start = int(split[c, end])
        bounds.append((start, end))
        end = start
    bounds.reverse()
    return [float(origin + shifted[lo:hi].mean()) for lo, hi in bounds]
