"""
Symbol values and nm type classification.
"""

from .symbol_type import SymbolType
from .symbol import Symbol

__all__ = [
    'SymbolType',
    'Symbol',
]
