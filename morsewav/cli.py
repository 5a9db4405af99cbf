"""Command-line option parsing for the Morse code WAV generator."""

from __future__ import annotations

import re
from dataclasses import dataclass

from morsewav.dsp import DspFilter

DEF_FREQ = 750.0
DEF_WPM = 15.0
DEF_SR = 16000
DEF_VOL = 1.0
DEF_OUTFILE = "morse.wav"

# long name -> (short letter, takes an argument)
_LONG_OPTS: dict[str, tuple[str, bool]] = {
    "outfile": ("o", True),
    "raw": ("R", False),
    "freq": ("f", True),
    "wpm": ("w", True),
    "rate": ("r", True),
    "vol": ("v", True),
    "input": ("i", True),
    "dot": ("d", True),
    "play": ("P", False),
    "quiet": ("q", False),
    "filter": ("F", True),
    "farns": ("a", True),
    "keep": ("k", False),
    "version": ("V", False),
    "help": ("h", False),
}
_SHORT_WITH_ARG = frozenset("ofwrvidFa")
_SHORT_FLAGS = frozenset("RPkqhV")

_FLOAT_PREFIX = re.compile(
    r"\s*[+-]?(?:inf(?:inity)?|nan|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)",
    re.IGNORECASE,
)
_INT_PREFIX = re.compile(r"\s*([+-]?)(\d+)")


class UsageError(Exception):
    """Raised when the command line is invalid or help was requested."""


@dataclass
class Params:
    """Settings for one synthesis run."""

    text: str | None = None
    infile: str | None = None
    outfile: str = DEF_OUTFILE
    freq: float = DEF_FREQ
    wpm: float = DEF_WPM
    vol: float = DEF_VOL
    dot_ms: float = 0.0
    farns: float = 1.0
    sample_rate: int = DEF_SR
    filter: DspFilter = DspFilter.NONE
    raw: bool = False
    play: bool = False
    keep: bool = False
    quiet: bool = False
    version: bool = False


def _to_float(text: str) -> float:
    """Parse the leading number of a string, 0.0 if there is none."""
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(0)) if match else 0.0


def _to_unsigned(text: str) -> int:
    """Parse the leading decimal integer of a string as a 32-bit unsigned value."""
    match = _INT_PREFIX.match(text)
    if not match:
        return 0
    value = int(match.group(2))
    if match.group(1) == "-":
        value = -value
    return value % (1 << 32)


def _resolve_long(name: str) -> tuple[str, bool]:
    if name in _LONG_OPTS:
        return _LONG_OPTS[name]
    candidates = [key for key in _LONG_OPTS if key.startswith(name)]
    if len(candidates) == 1:
        return _LONG_OPTS[candidates[0]]
    if not candidates:
        raise UsageError(f"unrecognized option '--{name}'")
    raise UsageError(f"option '--{name}' is ambiguous")


def _scan(argv: list[str]) -> tuple[list[tuple[str, str | None]], list[str]]:
    """Split arguments into (option, value) pairs and positional operands."""
    options: list[tuple[str, str | None]] = []
    operands: list[str] = []
    args = iter(argv)
    for arg in args:
        if arg == "--":
            operands.extend(args)
            break
        if arg.startswith("--"):
            name, eq, value = arg[2:].partition("=")
            letter, needs_arg = _resolve_long(name)
            if needs_arg:
                if not eq:
                    value = next(args, None)
                    if value is None:
                        raise UsageError(f"option '--{name}' requires an argument")
                options.append((letter, value))
            else:
                if eq:
                    raise UsageError(f"option '--{name}' doesn't allow an argument")
                options.append((letter, None))
        elif arg.startswith("-") and arg != "-":
            cluster = arg[1:]
            for pos, letter in enumerate(cluster):
                if letter in _SHORT_WITH_ARG:
                    value = cluster[pos + 1:]
                    if not value:
                        value = next(args, None)
                        if value is None:
                            raise UsageError(f"option requires an argument -- '{letter}'")
                    options.append((letter, value))
                    break
                if letter in _SHORT_FLAGS:
                    options.append((letter, None))
                else:
                    raise UsageError(f"invalid option -- '{letter}'")
        else:
            operands.append(arg)
    return options, operands


def parse_args(argv: list[str]) -> Params:
    """Parse command-line arguments (without the program name) into Params."""
    params = Params()
    options, operands = _scan(list(argv))

    for letter, value in options:
        if letter == "o":
            params.outfile = value
            if value == "-":
                params.raw = True
        elif letter == "R":
            params.outfile = "-"
            params.raw = True
        elif letter == "f":
            params.freq = _to_float(value)
        elif letter == "w":
            params.wpm = _to_float(value)
        elif letter == "r":
            params.sample_rate = _to_unsigned(value)
        elif letter == "v":
            params.vol = _to_float(value)
        elif letter == "i":
            params.infile = value
        elif letter == "d":
            params.dot_ms = _to_float(value)
        elif letter == "P":
            params.play = True
        elif letter == "k":
            params.keep = True
        elif letter == "q":
            params.quiet = True
        elif letter == "F":
            name = value.lower()
            if name == "none":
                params.filter = DspFilter.NONE
            elif name == "hann3":
                params.filter = DspFilter.HANN3
            else:
                raise UsageError(f"Unknown filter: {value}")
        elif letter == "a":
            params.farns = max(_to_float(value), 1.0)
        elif letter == "V":
            params.version = True
        else:
            raise UsageError("")

    if operands:
        params.text = operands[0]

    if params.filter == DspFilter.NONE and params.sample_rate < 12000:
        params.filter = DspFilter.HANN3

    if not params.version and params.text is None and params.infile is None:
        raise UsageError("no text or input file given")
    if (
        params.freq <= 0
        or params.wpm <= 0
        or params.sample_rate < 4000
        or params.vol <= 0
        or params.vol > 1
    ):
        raise UsageError("parameter out of range")
    return params


def usage(prog: str) -> str:
    """Return the help text for the given program name."""
    return (
        f'Usage: {prog} "TEXT" [options]\n'
        "Options:\n"
        f"  -o, --outfile <file>   output WAV file (default {DEF_OUTFILE}) or '-' for stdout raw\n"
        "  -R                     shorthand for -o - (raw PCM)\n"
        f"  -f, --freq <Hz>        tone frequency (default {DEF_FREQ:.0f})\n"
        f"  -w, --wpm <N>          speed in words per minute (default {DEF_WPM:.0f})\n"
        f"  -r, --rate <Hz>        sample rate (default {DEF_SR})\n"
        f"  -v, --vol <0..1>       volume (default {DEF_VOL:.1f})\n"
        "  -i, --input <file>     read text from file or '-' (stdin)\n"
        "  -d, --dot <ms>         dot duration in milliseconds (overrides -w)\n"
        "  -P, --play             play result via system player\n"
        "  -k, --keep             keep output file after --play\n"
        "  -q, --quiet            suppress progress/info output\n"
        "  -F, --filter=<name>    audio filter: none | hann3 (default auto)\n"
        "  -a, --farns=<N>        Farnsworth timing multiplier (>=1.0)\n"
        "  -V, --version          show program version\n"
        "  -h, --help             show this help\n"
    )