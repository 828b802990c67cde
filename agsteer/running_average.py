"""Running average over a fixed-size circular buffer of samples."""

from __future__ import annotations

import math

_NAN = float("nan")


class RunningAverage:
    """Keep the last *size* samples and report statistics over them.

    The buffer can be narrowed to its first ``partial`` slots with
    :meth:`set_partial`; changing it clears all samples.
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._size = size
        self._partial = size
        self._array = [0.0] * size
        self._count = 0
        self._index = 0
        self._sum = 0.0
        self._min = _NAN
        self._max = _NAN
        self.clear()

    def clear(self) -> None:
        """Forget every sample."""
        self._count = 0
        self._index = 0
        self._sum = 0.0
        self._min = _NAN
        self._max = _NAN
        self._array = [0.0] * self._size

    def add(self, value: float) -> None:
        """Add a sample, overwriting the oldest one once the buffer is full."""
        if self._size == 0:
            return
        value = float(value)
        self._sum -= self._array[self._index]
        self._array[self._index] = value
        self._sum += value
        self._index += 1
        if self._index == self._partial:
            self._index = 0

        if self._count == 0:
            self._min = self._max = value
        elif value < self._min:
            self._min = value
        elif value > self._max:
            self._max = value

        if self._count < self._partial:
            self._count += 1

    def fill(self, value: float, number: int) -> None:
        """Clear, then add *value* *number* times (at most the partial size)."""
        self.clear()
        for _ in range(min(number, self._partial)):
            self.add(value)

    def value(self, position: int) -> float:
        """Sample at *position*, counted from the oldest; NaN if absent."""
        if self._count == 0 or not 0 <= position < self._count:
            return _NAN
        pos = position + self._index
        if pos >= self._count:
            pos -= self._count
        return self._array[pos]

    def average(self) -> float:
        """Average of the stored samples, recomputed from the buffer."""
        if self._count == 0:
            return _NAN
        self._sum = sum(self._array[: self._count])
        return self._sum / self._count

    def fast_average(self) -> float:
        """Average from the running sum, without walking the buffer."""
        if self._count == 0:
            return _NAN
        return self._sum / self._count

    def standard_deviation(self) -> float:
        """Sample standard deviation; NaN with fewer than two samples."""
        if self._count <= 1:
            return _NAN
        mean = self.fast_average()
        squares = sum((x - mean) ** 2 for x in self._array[: self._count])
        return math.sqrt(squares / (self._count - 1))

    def standard_error(self) -> float:
        """Standard error of the mean; NaN with fewer than two samples."""
        deviation = self.standard_deviation()
        if math.isnan(deviation):
            return _NAN
        n = self._count if self._count >= 30 else self._count - 1
        return deviation / math.sqrt(n)

    def minimum(self) -> float:
        """Smallest sample added since the last clear."""
        return self._min

    def maximum(self) -> float:
        """Largest sample added since the last clear."""
        return self._max

    def min_in_buffer(self) -> float:
        """Smallest sample still in the buffer."""
        if self._count == 0:
            return _NAN
        return min(self._array[: self._count])

    def max_in_buffer(self) -> float:
        """Largest sample still in the buffer."""
        if self._count == 0:
            return _NAN
        return max(self._array[: self._count])

    def is_full(self) -> bool:
        """True when every slot of the buffer holds a sample."""
        return self._count == self._size

    def element(self, index: int) -> float:
        """Raw buffer slot *index*; NaN while the buffer is empty."""
        if self._count == 0:
            return _NAN
        return self._array[index]

    def size(self) -> int:
        """Capacity of the buffer."""
        return self._size

    def count(self) -> int:
        """Number of samples held."""
        return self._count

    def __len__(self) -> int:
        return self._count

    def partial(self) -> int:
        """Number of buffer slots in use."""
        return self._partial

    def set_partial(self, partial: int = 0) -> None:
        """Use only the first *partial* slots (0 means all) and clear."""
        self._partial = partial
        if partial <= 0 or partial > self._size:
            self._partial = self._size
        self.clear()

    def _recent_slots(self, count: int) -> list[int]:
        idx = self._index
        slots = []
        for _ in range(count):
            if idx == 0:
                idx = self._size
            idx -= 1
            slots.append(idx)
        return slots

    def average_last(self, count: int) -> float:
        """Average of the *count* most recent samples."""
        cnt = min(count, self._count)
        if cnt <= 0:
            return _NAN
        return sum(self._array[i] for i in self._recent_slots(cnt)) / cnt

    def min_in_buffer_last(self, count: int) -> float:
        """Smallest of the *count* most recent samples."""
        cnt = min(count, self._count)
        if cnt <= 0:
            return _NAN
        return min(self._array[i] for i in self._recent_slots(cnt))

    def max_in_buffer_last(self, count: int) -> float:
        """Largest of the *count* most recent samples."""
        cnt = min(count, self._count)
        if cnt <= 0:
            return _NAN
        return max(self._array[i] for i in self._recent_slots(cnt))

    def average_subset(self, start: int, count: int) -> float:
        """Average of *count* slots starting *start* after the write position."""
        if self._count == 0:
            return _NAN
        cnt = min(self._count, count)
        if cnt <= 0:
            return _NAN
        total = sum(
            self._array[(self._index + start + i) % self._partial] for i in range(cnt)
        )
        return total / cnt