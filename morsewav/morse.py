"""International Morse code table and timing units."""

from __future__ import annotations

DOT_UNITS = 1
DASH_UNITS = 3
DIT_UNITS = DOT_UNITS
DAH_UNITS = DASH_UNITS

GAP_SYM_UNITS = 1
GAP_CHAR_UNITS = 3
GAP_WORD_UNITS = 7

MORSE_TABLE: dict[str, str] = {
    "A": ".-", "B": "-...", "C": "-.-.", "D": "-..", "E": ".",
    "F": "..-.", "G": "--.", "H": "....", "I": "..", "J": ".---",
    "K": "-.-", "L": ".-..", "M": "--", "N": "-.", "O": "---",
    "P": ".--.", "Q": "--.-", "R": ".-.", "S": "...", "T": "-",
    "U": "..-", "V": "...-", "W": ".--", "X": "-..-", "Y": "-.--",
    "Z": "--..",
    "0": "-----", "1": ".----", "2": "..---", "3": "...--",
    "4": "....-", "5": ".....", "6": "-....", "7": "--...",
    "8": "---..", "9": "----.",
    ".": ".-.-.-", ",": "--..--", "?": "..--..", "/": "-..-.",
    "-": "-....-", "(": "-.--.", ")": "-.--.-", "'": ".----.",
    '"': ".-..-.", ":": "---...", ";": "-.-.-.", "=": "-...-",
    "+": ".-.-.", "@": ".--.-.",
}


def morse_lookup(ch: str) -> str | None:
    """Return the dot/dash code for a character, case-insensitively, or None."""
    if len(ch) != 1:
        return None
    return MORSE_TABLE.get(ch.upper())