"""
Statistics over a SymbolTable for the current filter settings.
"""

from typing import Any, Dict, List

from ..parsers.symbol_table import SymbolTable
from ..symbols import Symbol, SymbolType
from .filter_state import FilterState
from .formatting import stat_row, symbol_row
from .statistic import Statistic
from .. import logger


class Aggregation:
    """
    Result of one aggregation pass.

    stats_rows holds the grand total (type '_') and every bucket with at
    least one symbol, sorted by size in descending order. symbol_rows holds
    the symbols that passed the filter, in table order.
    """

    def __init__(self, stats_rows: List[Statistic], symbol_rows: List[Symbol], total: Statistic):
        self.stats_rows = stats_rows
        self.symbol_rows = symbol_rows
        self.total = total

    def is_empty(self) -> bool:
        return not self.symbol_rows

    def to_dict(self) -> Dict[str, Any]:
        # percentages are relative to the total and only exist with symbols
        if self.is_empty():
            return {'total': self.total.to_dict(), 'stats': [], 'symbols': []}

        return {
            'total': self.total.to_dict(),
            'stats': [stat_row(stat, self.total) for stat in self.stats_rows],
            'symbols': [symbol_row(symbol, self.total) for symbol in self.symbol_rows]
        }

    def __repr__(self) -> str:
        return f"Aggregation({len(self.stats_rows)} stats, {len(self.symbol_rows)} symbols)"


def _new_buckets() -> Dict[str, Statistic]:
    buckets = {letter: Statistic(letter) for letter in SymbolType.LETTERS}
    buckets[SymbolType.UNKNOWN] = Statistic(SymbolType.UNKNOWN)
    return buckets


def aggregate(table: SymbolTable, filter_state: FilterState) -> Aggregation:
    """
    Build the statistics and symbol rows for a table.

    Nothing is cached, every call starts from fresh buckets.

    Args:
        table: Symbols sorted by size in descending order
        filter_state: Pattern, type and visibility settings
    """
    buckets = _new_buckets()
    total = Statistic(SymbolType.TOTAL)
    symbol_rows: List[Symbol] = []

    for symbol in table:
        if not filter_state.accepts(symbol):
            continue
        symbol_rows.append(symbol)
        total.add(symbol.size)
        buckets[symbol.bucket].add(symbol.size)

    stats_rows: List[Statistic] = []
    if symbol_rows:
        stats_rows.append(total)
    stats_rows.extend(stat for stat in buckets.values() if stat.symbols > 0)

    # stable, so the total stays ahead of a bucket of equal size
    stats_rows.sort(key=lambda stat: stat.size, reverse=True)

    logger.debug(f"Aggregated {len(symbol_rows)} of {len(table)} symbols with {filter_state}")
    return Aggregation(stats_rows, symbol_rows, total)
