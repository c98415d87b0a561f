"""Window over a sequence and the small statistics used by the models."""

import itertools
import math


class Range:
    """Read-only view of ``size`` elements of ``data`` starting at ``start``."""

    def __init__(self, data, start, size):
        self._data = data
        self._start = start
        self._size = size

    def __iter__(self):
        return itertools.islice(self._data, self._start, self._start + self._size)

    def __len__(self):
        return self._size

    def __getitem__(self, index):
        if not 0 <= index < self._size:
            raise IndexError("Range index out of range")
        return self._data[self._start + index]


def _length(values):
    n = len(values)
    if n == 0:
        raise ValueError("statistic of an empty sequence")
    return n


def mean(values):
    n = _length(values)
    return math.fsum(values) / n


def sum_count(values):
    """Sum of the values and the number of strictly positive ones."""
    total = 0.0
    positive = 0
    for v in values:
        total += v
        if v > 0:
            positive += 1
    return total, positive


def mean_count(values):
    n = _length(values)
    total, positive = sum_count(values)
    return total / n, positive


def sd(values):
    """Population standard deviation."""
    n = _length(values)
    m = mean(values)
    squares = math.fsum(v * v for v in values)
    return math.sqrt(max(squares / n - m * m, 0.0))