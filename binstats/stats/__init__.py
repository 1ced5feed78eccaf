"""
Per-type statistics and filtered symbol lists.
"""

from .statistic import Statistic
from .filter_state import FilterState
from .aggregator import Aggregation, aggregate
from .formatting import percent, format_value, stat_row, symbol_row

__all__ = ['Statistic', 'FilterState', 'Aggregation', 'aggregate',
           'percent', 'format_value', 'stat_row', 'symbol_row']
