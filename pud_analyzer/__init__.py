# pud_analyzer/__init__.py
"""Warcraft II PUD map decoder and preview renderer."""
from .chunks import DecodeError, InvalidFormatError, TruncatedChunkError, Unit
from .constants import Era, SizeClass
from .map_description import MapDescription
from .parser import PudFileParser, decode, decode_file
from .render import PixelBuffer, RenderOptions, render
from .stats import MapStats, summarize

__version__ = '0.1.0'

__all__ = [
    'DecodeError',
    'InvalidFormatError',
    'TruncatedChunkError',
    'Unit',
    'Era',
    'SizeClass',
    'MapDescription',
    'PudFileParser',
    'decode',
    'decode_file',
    'PixelBuffer',
    'RenderOptions',
    'render',
    'MapStats',
    'summarize',
]
