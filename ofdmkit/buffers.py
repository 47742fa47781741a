"""Fixed-length sample buffers used by the modem."""

from __future__ import annotations

from typing import Any, Callable, Iterator


class CircularBuffer:
    """A ring of samples that overwrites the oldest entry on every push.

    ``n`` counts the samples pushed so far. ``phase`` is free for callers
    that run periodic work over the buffer.
    """

    def __init__(self, length: int, sample_rate: int = 0, dtype: Callable[[Any], Any] = float) -> None:
        if length < 1:
            raise ValueError(f"buffer length must be positive, got {length}")
        self.length = length
        self.sample_rate = sample_rate
        self.dtype = dtype
        self.insertion_index = 0
        self.phase = 0
        self.n = 0
        self.buffer = [dtype(0)] * length

    def push(self, value: Any) -> None:
        """Store ``value`` in place of the oldest sample."""
        self.buffer[self.insertion_index] = self.dtype(value)
        self.insertion_index = (self.insertion_index + 1) % self.length
        self.n += 1

    def __len__(self) -> int:
        return self.length

    def __iter__(self) -> Iterator[Any]:
        """Samples from the oldest to the newest."""
        yield from self.buffer[self.insertion_index:]
        yield from self.buffer[: self.insertion_index]


class OverlapSaveBuffer:
    """A zero-initialised ring of real samples for overlap-save filtering."""

    def __init__(self, length: int) -> None:
        if length < 1:
            raise ValueError(f"buffer length must be positive, got {length}")
        self.length = length
        self.insertion_index = 0
        self.n = 0
        self.buffer = [0.0] * length

    def push(self, value: float) -> None:
        """Store ``value`` in place of the oldest sample."""
        self.buffer[self.insertion_index] = float(value)
        self.insertion_index = (self.insertion_index + 1) % self.length
        self.n += 1

    def __len__(self) -> int:
        return self.length

    def __iter__(self) -> Iterator[float]:
        yield from self.buffer[self.insertion_index:]
        yield from self.buffer[: self.insertion_index]