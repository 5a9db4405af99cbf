"""WAV and RF64 header writing for 16-bit mono PCM."""

from __future__ import annotations

import struct
from typing import BinaryIO

HEADER_BYTES = 44

_CHANNELS = 1
_BITS_PER_SAMPLE = 16
_BLOCK_ALIGN = _CHANNELS * _BITS_PER_SAMPLE // 8
_U32 = 0xFFFFFFFF
_U64 = 0xFFFFFFFFFFFFFFFF


def _check_u32(name: str, value: int) -> None:
    if not 0 <= value <= _U32:
        raise ValueError(f"{name} must fit in 32 bits: {value}")


def _fmt_chunk(sample_rate: int) -> bytes:
    return b"fmt " + struct.pack(
        "<IHHIIHH",
        16,
        1,
        _CHANNELS,
        sample_rate,
        (sample_rate * _BLOCK_ALIGN) & _U32,
        _BLOCK_ALIGN,
        _BITS_PER_SAMPLE,
    )


def reserve_header(fp: BinaryIO) -> None:
    """Write a zero-filled placeholder for the standard WAV header."""
    fp.write(bytes(HEADER_BYTES))


def write_header(fp: BinaryIO, sample_rate: int, samples: int) -> None:
    """Rewind and write a canonical 44-byte RIFF/WAVE header."""
    _check_u32("sample_rate", sample_rate)
    _check_u32("samples", samples)
    data_size = (samples * _BLOCK_ALIGN) & _U32
    header = (
        b"RIFF"
        + struct.pack("<I", (36 + data_size) & _U32)
        + b"WAVE"
        + _fmt_chunk(sample_rate)
        + b"data"
        + struct.pack("<I", data_size)
    )
    fp.seek(0)
    fp.write(header)


def write_header64(fp: BinaryIO, sample_rate: int, samples: int) -> None:
    """Rewind and write an RF64 header with a ds64 chunk for large outputs."""
    _check_u32("sample_rate", sample_rate)
    if not 0 <= samples <= _U64:
        raise ValueError(f"samples must fit in 64 bits: {samples}")
    data_size64 = (samples * _BLOCK_ALIGN) & _U64
    header = (
        b"RF64"
        + struct.pack("<I", _U32)
        + b"WAVE"
        + b"ds64"
        + struct.pack(
            "<IQQQI",
            28,
            (36 + 28 + data_size64) & _U64,
            data_size64,
            samples,
            0,
        )
        + _fmt_chunk(sample_rate)
        + b"data"
        + struct.pack("<I", _U32)
    )
    fp.seek(0)
    fp.write(header)