from typing import Any, Dict


class Statistic:
    """Running size and symbol count for one type bucket."""

    def __init__(self, type: str, size: int = 0, symbols: int = 0):
        self.type = type
        self.size = size
        self.symbols = symbols

    def add(self, size: int):
        """Count one symbol. Zero sizes are counted but add no bytes."""
        self.symbols += 1
        if size > 0:
            self.size += size

    def to_dict(self) -> Dict[str, Any]:
        return {
            'type': self.type,
            'size': self.size,
            'symbols': self.symbols
        }

    def __eq__(self, other) -> bool:
        if not isinstance(other, Statistic):
            return NotImplemented
        return (self.type, self.size, self.symbols) == (other.type, other.size, other.symbols)

    def __repr__(self) -> str:
        return f"Statistic({self.type}: {self.size} bytes, {self.symbols} symbols)"
