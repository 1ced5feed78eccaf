"""
SymbolTable snapshot built from a complete nm run.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from ..demanglers import get_demangler
from ..symbols import Symbol
from .nm_line_parser import SymbolLineParser
from .. import config, logger


class SymbolTable:
    """
    Ordered, read-only collection of symbols.

    A table is never modified after it is built. Reading new nm output
    produces a new table which replaces the old one as a whole.
    """

    def __init__(self, symbols: Sequence[Symbol] = ()):
        self._symbols = tuple(symbols)

    @classmethod
    def build(cls, lines: Iterable[Union[str, bytes]], parser: SymbolLineParser) -> 'ReadResult':
        """
        Parse all lines and return the resulting snapshot.

        Malformed lines are dropped. All names go to the demangler in one
        batch before the symbols are built. The symbols are stable-sorted by
        size in descending order so equally sized symbols keep their nm order.

        Args:
            lines: Raw nm output lines
            parser: Line parser to apply to each line
        """
        fields: List[Tuple[str, int, str]] = []
        first_line: Optional[str] = None
        line_count = 0

        for raw_line in lines:
            line_count += 1
            if first_line is None and not parser.is_blank(raw_line):
                first_line = parser.strip_line(raw_line)
            line_fields = parser.split_fields(raw_line)
            if line_fields is not None:
                fields.append(line_fields)

        if fields:
            parser.demangler.demangle_all([parser.mangled_part(raw_name) for _, _, raw_name in fields])

        symbols: List[Symbol] = []
        for type_char, size, raw_name in fields:
            symbol = parser.make_symbol(type_char, size, raw_name)
            if symbol is not None:
                symbols.append(symbol)

        symbols.sort(key=lambda s: s.size, reverse=True)
        table = cls(symbols)

        logger.info(f"Read {len(table)} symbols from {line_count} lines")
        return ReadResult(table, first_line or '')

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self._symbols)

    def __len__(self) -> int:
        return len(self._symbols)

    def __getitem__(self, index):
        return self._symbols[index]

    def is_empty(self) -> bool:
        return not self._symbols

    def total_size(self) -> int:
        """Sum of all symbol sizes, regardless of any filter."""
        return sum(s.size for s in self._symbols)

    def __repr__(self) -> str:
        return f"SymbolTable({len(self._symbols)} symbols)"


class ReadStatus(Enum):
    SUCCESS = "success"
    EMPTY = "empty"


class ReadResult:
    """
    Outcome of reading nm output.

    An empty table is not an error of the engine itself, but callers should
    show the diagnostic message which includes the first line nm printed.
    """

    def __init__(self, table: SymbolTable, first_line: str = '', timestamp: Optional[str] = None):
        if not isinstance(table, SymbolTable):
            raise TypeError(f"table must be SymbolTable, got {type(table)}")

        self.table = table
        self.first_line = first_line
        self.timestamp = timestamp or datetime.now().isoformat()

        if table.is_empty():
            self.status = ReadStatus.EMPTY
            self.message = "Failed to read symbols."
            if first_line:
                self.message += f"\n{first_line}"
            logger.warning(f"No symbols read, first line: {first_line!r}")
        else:
            self.status = ReadStatus.SUCCESS
            self.message = f"Read {len(table)} symbols"

    @property
    def is_empty(self) -> bool:
        return self.status == ReadStatus.EMPTY

    def to_dict(self) -> Dict[str, Any]:
        result_dict = {
            'status': self.status.value,
            'message': self.message,
            'timestamp': self.timestamp,
            'symbols': len(self.table),
            'total_size': self.table.total_size()
        }

        if self.is_empty:
            result_dict['first_line'] = self.first_line

        return result_dict

    def __repr__(self) -> str:
        return f"ReadResult(status={self.status.value}, message={self.message[:50]}...)"


def read_symbols(output: Union[str, bytes, Iterable[Union[str, bytes]]],
                 demangler=None, radix: Optional[int] = None) -> ReadResult:
    """
    Read nm output into a new SymbolTable snapshot.

    Args:
        output: Whole nm output as text or bytes, or an iterable of lines
        demangler: Demangler to use, defaults to the configured one
        radix: Number base of the address and size columns
    """
    if demangler is None:
        demangler = get_demangler()
    if radix is None:
        radix = config.DEFAULT_RADIX

    if isinstance(output, bytes):
        output = output.decode('utf-8', errors='replace')
    if isinstance(output, str):
        output = output.splitlines()

    parser = SymbolLineParser(demangler, radix=radix)
    return SymbolTable.build(output, parser)
