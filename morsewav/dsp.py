"""Tone and silence synthesis as 16-bit little-endian PCM."""

from __future__ import annotations

import enum
import math
import struct
from dataclasses import dataclass
from itertools import islice
from typing import BinaryIO, Iterator

RAMP_MS = 5.0
BUFSIZE = 4096
INT16_MAX = 32767


class DspFilter(enum.IntEnum):
    """Optional smoothing applied to generated tones."""

    NONE = 0
    HANN3 = 1  # 3-tap Hann window: 0.25 0.5 0.25


def write_silence(fp: BinaryIO, samples: int) -> int:
    """Write the given number of zero samples; return the count written."""
    remaining = samples
    while remaining > 0:
        chunk = min(remaining, BUFSIZE)
        fp.write(bytes(2 * chunk))
        remaining -= chunk
    return samples


@dataclass
class Oscillator:
    """Sine oscillator whose phase carries over between tones."""

    phase_inc: float
    phase: float = 0.0

    def tone_samples(
        self, samples: int, vol: float, sample_rate: int, filter: DspFilter = DspFilter.NONE
    ) -> Iterator[int]:
        """Yield int16 samples of a raised-cosine enveloped tone, advancing the phase."""
        ramp_samples = int(RAMP_MS / 1000.0 * sample_rate)
        ramp = samples // 2 if ramp_samples * 2 > samples else ramp_samples
        if samples < 2:
            ramp = 0

        two_pi = 2 * math.pi
        prev1 = prev2 = 0.0
        for idx in range(samples):
            env = 1.0
            if idx < ramp:
                env = 0.5 * (1 - math.cos(math.pi * idx / ramp))
            elif idx >= samples - ramp:
                env = 0.5 * (1 - math.cos(math.pi * (samples - idx - 1) / ramp))

            raw = math.sin(self.phase) * vol * env
            self.phase += self.phase_inc
            if self.phase >= two_pi:
                self.phase -= two_pi

            if filter == DspFilter.HANN3:
                out = 0.25 * prev2 + 0.5 * prev1 + 0.25 * raw
            else:
                out = raw
            prev2, prev1 = prev1, raw

            yield int(out * INT16_MAX)

    def write_tone(
        self,
        fp: BinaryIO,
        samples: int,
        vol: float,
        sample_rate: int,
        filter: DspFilter = DspFilter.NONE,
    ) -> int:
        """Write a tone to a binary stream; return the number of samples written."""
        stream = self.tone_samples(samples, vol, sample_rate, filter)
        while True:
            chunk = list(islice(stream, BUFSIZE))
            if not chunk:
                break
            fp.write(struct.pack(f"<{len(chunk)}h", *chunk))
        return samples