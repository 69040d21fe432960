# lingotouch/__init__.py

from lingotouch.braille import GLYPH_TABLE, transcode

__all__ = ['GLYPH_TABLE', 'transcode']
