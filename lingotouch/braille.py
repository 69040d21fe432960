# braille.py

import string
from types import MappingProxyType

# Grade 1 letters plus the space cell.
GLYPH_TABLE = MappingProxyType({
    'a': '⠁', 'b': '⠃', 'c': '⠉', 'd': '⠙', 'e': '⠑',
    'f': '⠋', 'g': '⠛', 'h': '⠓', 'i': '⠊', 'j': '⠚',
    'k': '⠅', 'l': '⠇', 'm': '⠍', 'n': '⠝', 'o': '⠕',
    'p': '⠏', 'q': '⠟', 'r': '⠗', 's': '⠎', 't': '⠞',
    'u': '⠥', 'v': '⠧', 'w': '⠺', 'x': '⠭', 'y': '⠽',
    'z': '⠵', ' ': ' ',
})

# ASCII-only folding; str.lower() would also fold 'İ' or the Kelvin sign into table letters.
_ASCII_FOLD = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def transcode(text: str) -> str:
    """
    Convert text to braille cells.
    Characters without a cell (digits, punctuation, other scripts) are dropped.
    """
    return ''.join(GLYPH_TABLE.get(char, '') for char in text.translate(_ASCII_FOLD))
