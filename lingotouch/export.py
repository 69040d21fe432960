# export.py

from collections import namedtuple

BRAILLE_FILENAME = 'braille.txt'
BRAILLE_MIMETYPE = 'text/plain; charset=utf-8'

BrailleExport = namedtuple('BrailleExport', ['content', 'filename', 'mimetype'])


def export_braille(braille, filename=BRAILLE_FILENAME):
    """Package a braille string as a downloadable UTF-8 text file."""
    return BrailleExport(braille.encode('utf-8'), filename, BRAILLE_MIMETYPE)
