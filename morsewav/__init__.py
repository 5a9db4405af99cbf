"""Render text as Morse code audio in 16-bit mono WAV/RF64 or raw PCM."""

__version__ = "0.1.0"