# morsewav

Turn text into Morse code audio. By default the output is a 16-bit mono WAV
file. If the audio grows past 4 GiB of samples, the file gets an RF64 header
instead. The output can also be raw little-endian PCM with no header, written
to standard output.

## Installation

```
pip install .
```

The package needs only the standard library. To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```
morsewav "CQ CQ DE TEST" -o cq.wav
morsewav -i message.txt -w 20 -f 600
morsewav "HELLO" -R > hello.pcm
morsewav "SOS" --play
```

The first positional argument is the text to encode. If there is no text, use
`-i` to name an input file, or `-i -` to read standard input. File contents are
read as bytes and decoded as Latin-1.

After writing a WAV file, the command prints `Wrote <file> (<seconds> s)`. When
standard error is a terminal and `-q` is not given, a progress line with an ETA
is shown while the audio is rendered. In raw mode nothing is printed apart from
the PCM data.

### Options

| Option | Meaning | Default |
| --- | --- | --- |
| `-o`, `--outfile <file>` | Output WAV file. `-` writes raw PCM to stdout. | `morse.wav` |
| `-R`, `--raw` | Shorthand for `-o -`. | |
| `-f`, `--freq <Hz>` | Tone frequency. Must be greater than 0. | 750 |
| `-w`, `--wpm <N>` | Speed in words per minute. A dot lasts 1.2 / WPM seconds. | 15 |
| `-r`, `--rate <Hz>` | Sample rate. Must be at least 4000. | 16000 |
| `-v`, `--vol <0..1>` | Volume, greater than 0 and at most 1. | 1.0 |
| `-i`, `--input <file>` | Read text from a file. `-` reads stdin. | |
| `-d`, `--dot <ms>` | Dot length in milliseconds. Overrides `-w`. | |
| `-P`, `--play` | Play the result, then delete it unless `-k` is given. | |
| `-k`, `--keep` | Keep the file after `--play`. | |
| `-q`, `--quiet` | Suppress the progress line and info messages. | |
| `-F`, `--filter <name>` | `none` or `hann3`, case-insensitive. `hann3` is chosen automatically below 12000 Hz. | auto |
| `-a`, `--farns <N>` | Farnsworth multiplier for the gaps between characters and words. Values below 1.0 are raised to 1.0. | 1.0 |
| `-V`, `--version` | Print the version and exit. | |
| `-h`, `--help` | Show help. | |

Short options can be grouped, for example `-qP`. A long option may be
shortened to any prefix that is unique. If an option is invalid, a required
value is missing or a value is out of range, the command prints the usage text
to standard error and exits with status 1.

### Encoding

Letters, digits and common punctuation are encoded. Letters are not
case-sensitive. Other characters are skipped without a gap. Timing follows the
standard unit scheme:

- a dot is 1 unit and a dash is 3 units;
- there is 1 unit between the symbols of a character;
- there are 3 units between characters and 7 units for a space;
- the gaps between characters and words are stretched by the Farnsworth
  multiplier.

Each tone fades in and out over a raised-cosine ramp of up to 5 ms, which
avoids clicks. The oscillator's phase carries over from one tone to the next.

### Playback

`--play` plays the file with the system player: `aplay` on Linux and other
Unix systems, `afplay` on macOS and PowerShell's `Media.SoundPlayer` on
Windows. While the player runs, Ctrl+C stops only the player. If the player
cannot be started, playback is skipped without an error. `--play` has no
effect in raw mode.

## Library use

```python
import io

from morsewav.morse import morse_lookup
from morsewav.dsp import DspFilter, Oscillator, write_silence
from morsewav.wav import reserve_header, write_header
from morsewav.cli import parse_args

morse_lookup("a")  # ".-"

buf = io.BytesIO()
reserve_header(buf)
osc = Oscillator(phase_inc=2 * 3.141592653589793 * 750 / 16000)
count = osc.write_tone(buf, 1280, 0.8, 16000, DspFilter.NONE)
count += write_silence(buf, 1280)
write_header(buf, 16000, count)

params = parse_args(["HELLO", "-w", "20"])
```

Modules:

- `morsewav.morse` holds the code table and timing units, and `morse_lookup(ch)`.
- `morsewav.dsp` provides `write_silence`, `Oscillator` (`tone_samples`, `write_tone`)
  and the `DspFilter` enum.
- `morsewav.wav` writes headers with `reserve_header`, `write_header` and
  `write_header64` (RF64).
- `morsewav.progress` contains `Progress`, the terminal progress line.
- `morsewav.cli` has `parse_args`, `Params`, `UsageError` and `usage`.
- `morsewav.app` provides `main`, `read_text` and `play_file`.