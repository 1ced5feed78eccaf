"""
nm output parsing into SymbolTable snapshots.
"""

from .nm_line_parser import SymbolLineParser
from .symbol_table import SymbolTable, ReadResult, ReadStatus, read_symbols

__all__ = ['SymbolLineParser', 'SymbolTable', 'ReadResult', 'ReadStatus', 'read_symbols']
