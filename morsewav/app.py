"""The morsewav command: render text as Morse code audio."""

from __future__ import annotations

import math
import os
import signal
import subprocess
import sys
from typing import BinaryIO

from morsewav import wav
from morsewav.cli import Params, UsageError, parse_args, usage
from morsewav.dsp import Oscillator, write_silence
from morsewav.morse import (
    DASH_UNITS,
    GAP_CHAR_UNITS,
    GAP_SYM_UNITS,
    GAP_WORD_UNITS,
    morse_lookup,
)
from morsewav.progress import Progress

VERSION = "0.1"
MORSE_DOT_FACTOR = 1.2
_U32 = 0xFFFFFFFF


def read_text(params: Params) -> str:
    """Return the text to encode: the literal text, or the input file's contents."""
    if params.text is not None:
        return params.text
    if params.infile == "-":
        data = sys.stdin.buffer.read()
    else:
        with open(params.infile, "rb") as handle:
            data = handle.read()
    return data.decode("latin-1")


def play_file(path: str) -> None:
    """Play a WAV file with the system player, waiting until it finishes."""
    if sys.platform.startswith("win"):
        quoted = path.replace("'", "''")
        cmd = ["powershell", "-c", f"(New-Object Media.SoundPlayer '{quoted}').PlaySync()"]
    elif sys.platform == "darwin":
        cmd = ["afplay", path]
    else:
        cmd = ["aplay", "--", path]

    try:
        proc = subprocess.Popen(
            cmd, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL
        )
    except OSError:
        return

    # Ctrl+C should stop the player only, not this process.
    try:
        previous = signal.signal(signal.SIGINT, signal.SIG_IGN)
    except ValueError:
        previous = None
    try:
        proc.wait()
    finally:
        if previous is not None:
            signal.signal(signal.SIGINT, previous)


def _synthesize(fp: BinaryIO, text: str, params: Params, progress: Progress) -> int:
    """Write the Morse audio for text to fp; return the number of samples."""
    rate = params.sample_rate
    dot_sec = params.dot_ms / 1000.0 if params.dot_ms > 0 else MORSE_DOT_FACTOR / params.wpm
    dot = int(dot_sec * rate + 0.5)
    osc = Oscillator(phase_inc=2 * math.pi * params.freq / rate)

    total = 0
    for pos, ch in enumerate(text, start=1):
        if ch == " ":
            total += write_silence(fp, int(dot * GAP_WORD_UNITS * params.farns))
        else:
            code = morse_lookup(ch)
            if code is None:
                continue
            for symbol in code:
                length = dot if symbol == "." else dot * DASH_UNITS
                total += osc.write_tone(fp, length, params.vol, rate, params.filter)
                total += write_silence(fp, dot)
            gap = int(dot * (GAP_CHAR_UNITS - GAP_SYM_UNITS) * params.farns)
            total += write_silence(fp, gap)
        progress.update(pos)
    progress.finish()
    return total


def _write_wav(text: str, params: Params) -> int:
    with open(params.outfile, "wb") as fp:
        wav.reserve_header(fp)
        progress = Progress(len(text), params.quiet)
        total = _synthesize(fp, text, params, progress)
        if total > _U32:
            if not params.quiet:
                print("[INFO] Using RF64 header for large file (>4 GiB)", file=sys.stderr)
            wav.write_header64(fp, params.sample_rate, total)
        else:
            wav.write_header(fp, params.sample_rate, total)
    return total


def main(argv: list[str] | None = None) -> int:
    """Run the command line; return the process exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    prog = sys.argv[0] if sys.argv and sys.argv[0] else "morsewav"
    try:
        params = parse_args(args)
    except UsageError as exc:
        message = str(exc)
        if message:
            print(message, file=sys.stderr)
        sys.stderr.write(usage(prog))
        return 1

    if params.version:
        print(f"morsewav {VERSION}")
        return 0

    try:
        text = read_text(params)
    except OSError as exc:
        print(f"read: {exc}", file=sys.stderr)
        return 1

    if params.raw:
        out = sys.stdout.buffer
        _synthesize(out, text, params, Progress(len(text), quiet=True))
        out.flush()
        return 0

    try:
        total = _write_wav(text, params)
    except OSError as exc:
        print(f"fopen: {exc}", file=sys.stderr)
        return 1

    print(f"Wrote {params.outfile} ({total / params.sample_rate:.2f} s)")
    if params.play:
        play_file(params.outfile)
        if not params.keep:
            try:
                os.remove(params.outfile)
            except OSError as exc:
                if not params.quiet:
                    print(f"remove: {exc}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())