# pud_analyzer/parser/__init__.py
"""PUD file parser module."""
from .file_parser import PudFileParser, decode, decode_file

__all__ = [
    'PudFileParser',
    'decode',
    'decode_file',
]
