"""
Display values for statistics and symbol rows.
"""

import math
from typing import Any, Dict, Optional

from ..symbols import Symbol, SymbolType
from .statistic import Statistic


def percent(value: int, reference: int) -> Optional[int]:
    """
    Share of value in reference as a whole percentage.

    Rounds half away from zero. Returns None if reference is zero since the
    share is undefined then.
    """
    if reference == 0:
        return None
    share = 100.0 * value / reference
    return int(math.copysign(math.floor(abs(share) + 0.5), share))


def format_value(value: int, reference: int) -> str:
    """Format as '<value> (<percent>%)', or just the value without a reference."""
    share = percent(value, reference)
    if share is None:
        return f"{value}"
    return f"{value} ({share}%)"


def stat_row(stat: Statistic, total: Statistic) -> Dict[str, Any]:
    return {
        'type': stat.type,
        'description': SymbolType.describe(stat.type),
        'size': stat.size,
        'symbols': stat.symbols,
        'size_text': format_value(stat.size, total.size),
        'symbols_text': format_value(stat.symbols, total.symbols)
    }


def symbol_row(symbol: Symbol, total: Statistic) -> Dict[str, Any]:
    return {
        'type': symbol.type,
        'description': SymbolType.describe(symbol.type),
        'size': symbol.size,
        'size_text': format_value(symbol.size, total.size),
        'name': symbol.name
    }
