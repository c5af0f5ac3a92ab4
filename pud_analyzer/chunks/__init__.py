# pud_analyzer/chunks/__init__.py
"""PUD chunk parsers package."""
from .base import BaseChunk, DecodeError, InvalidFormatError, TruncatedChunkError
from .type import TypeChunk
from .ver import VerChunk
from .desc import DescChunk
from .era import EraChunk
from .dim import DimChunk
from .mtxm import MtxmChunk
from .unit import UnitChunk, Unit

__all__ = [
    'BaseChunk',
    'DecodeError',
    'InvalidFormatError',
    'TruncatedChunkError',
    'TypeChunk',
    'VerChunk',
    'DescChunk',
    'EraChunk',
    'DimChunk',
    'MtxmChunk',
    'UnitChunk',
    'Unit',
]
