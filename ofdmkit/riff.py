"""The 44-byte RIFF/WAVE header of a PCM audio file."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum


class RiffType(IntEnum):
    PCM = 1


_LAYOUT = struct.Struct("<4sI4s4sIHHIIHH4sI")


@dataclass
class RiffHeader:
    """Fields of a canonical WAVE header, stored little endian."""

    riff: bytes = b"RIFF"
    size: int = 0
    format: bytes = b"WAVE"
    chunk: bytes = b"fmt "
    length: int = 16
    type: int = RiffType.PCM
    channels: int = 1
    sample_rate: int = 0
    data_rate: int = 0
    block_size: int = 0
    bits_per_sample: int = 0
    data: bytes = b"data"
    chunk_size: int = 0

    SIZE = _LAYOUT.size

    def pack(self) -> bytes:
        """Serialise the header to its 44 wire bytes."""
        try:
            return _LAYOUT.pack(
                self.riff,
                self.size,
                self.format,
                self.chunk,
                self.length,
                self.type,
                self.channels,
                self.sample_rate,
                self.data_rate,
                self.block_size,
                self.bits_per_sample,
                self.data,
                self.chunk_size,
            )
        except struct.error as exc:
            raise ValueError(f"header field out of range: {exc}") from exc

    @classmethod
    def unpack(cls, data: bytes) -> "RiffHeader":
        """Parse a header from the first 44 bytes of ``data``."""
        if len(data) < _LAYOUT.size:
            raise ValueError(f"need {_LAYOUT.size} bytes for a RIFF header, got {len(data)}")
        fields = _LAYOUT.unpack_from(data)
        return cls(*fields)