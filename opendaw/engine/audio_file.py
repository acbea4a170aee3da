"""WAV loading into normalised float sample buffers."""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass, field
from typing import BinaryIO

__all__ = ["AudioBuffer", "load_wav", "load_wav_from_reader"]

_FORMAT_PCM = 0x0001
_FORMAT_IEEE_FLOAT = 0x0003
_FORMAT_EXTENSIBLE = 0xFFFE

_INT24_MAX = 8_388_607.0
_INT16_MAX = 32767.0
_INT32_MAX = 2147483647.0


@dataclass
class AudioBuffer:
    """Interleaved samples in -1.0..1.0 with their format."""

    samples: list[float] = field(default_factory=list)
    sample_rate: int = 44100
    channels: int = 2


@dataclass(frozen=True)
class _WavFormat:
    sample_format: int
    channels: int
    sample_rate: int
    block_align: int
    bits_per_sample: int


def _parse_fmt(body: bytes) -> _WavFormat:
    if len(body) < 16:
        raise ValueError("fmt chunk is too short")
    tag, channels, sample_rate, _byte_rate, block_align, bits = struct.unpack_from(
        "<HHIIHH", body
    )
    if tag == _FORMAT_EXTENSIBLE:
        if len(body) < 26:
            raise ValueError("extensible fmt chunk is too short")
        (tag,) = struct.unpack_from("<H", body, 24)
    if tag not in (_FORMAT_PCM, _FORMAT_IEEE_FLOAT):
        raise ValueError(f"Unsupported WAV format tag: {tag:#06x}")
    if channels == 0:
        raise ValueError("WAV file declares zero channels")
    if bits == 0:
        raise ValueError("WAV file declares zero bits per sample")
    bytes_per_sample = (bits + 7) // 8
    if block_align != channels * bytes_per_sample:
        raise ValueError("inconsistent block alignment in fmt chunk")
    return _WavFormat(tag, channels, sample_rate, block_align, bits)


def _read_chunks(data: bytes) -> tuple[_WavFormat, bytes]:
    if len(data) < 12 or data[0:4] != b"RIFF" or data[8:12] != b"WAVE":
        raise ValueError("not a RIFF WAVE file")

    offset = 12
    fmt: _WavFormat | None = None
    while offset + 8 <= len(data):
        chunk_id, size = struct.unpack_from("<4sI", data, offset)
        offset += 8
        body = data[offset : offset + size]
        if chunk_id == b"fmt ":
            fmt = _parse_fmt(body)
        elif chunk_id == b"data":
            if fmt is None:
                raise ValueError("data chunk found before fmt chunk")
            if len(body) < size:
                raise ValueError("data chunk is truncated")
            return fmt, body
        offset += size + (size & 1)
    raise ValueError("no data chunk found")


def _decode_int(fmt: _WavFormat, body: bytes, count: int) -> list[float]:
    bits = fmt.bits_per_sample
    if bits == 8:
        return [(byte - 128.0) / 128.0 for byte in body[:count]]
    if bits == 16:
        return [s / _INT16_MAX for s in struct.unpack_from(f"<{count}h", body)]
    if bits == 24:
        return [
            int.from_bytes(body[i : i + 3], "little", signed=True) / _INT24_MAX
            for i in range(0, count * 3, 3)
        ]
    if bits == 32:
        return [s / _INT32_MAX for s in struct.unpack_from(f"<{count}i", body)]
    raise ValueError(f"Unsupported integer bit depth: {bits}")


def _decode(data: bytes) -> AudioBuffer:
    fmt, body = _read_chunks(data)
    frames = len(body) // fmt.block_align
    count = frames * fmt.channels

    if fmt.sample_format == _FORMAT_PCM:
        samples = _decode_int(fmt, body, count)
    else:
        if fmt.bits_per_sample != 32:
            raise ValueError(f"Unsupported float bit depth: {fmt.bits_per_sample}")
        samples = list(struct.unpack_from(f"<{count}f", body))

    return AudioBuffer(samples=samples, sample_rate=fmt.sample_rate, channels=fmt.channels)


def load_wav(path: str | os.PathLike[str]) -> AudioBuffer:
    """Load a WAV file from ``path`` and normalise its samples."""
    with open(path, "rb") as handle:
        return load_wav_from_reader(handle)


def load_wav_from_reader(reader: BinaryIO) -> AudioBuffer:
    """Load WAV data from a binary stream and normalise its samples."""
    return _decode(reader.read())