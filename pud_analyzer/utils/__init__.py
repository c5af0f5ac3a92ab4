# pud_analyzer/utils/__init__.py
"""Utility helpers."""
from .logging import setup_logging

__all__ = ['setup_logging']
