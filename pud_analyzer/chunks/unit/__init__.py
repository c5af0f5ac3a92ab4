# pud_analyzer/chunks/unit/__init__.py
"""UNIT (Unit placement) chunk parser."""
from .parser import UnitChunk
from .entry import Unit

__all__ = ['UnitChunk', 'Unit']
