"""
Symbol value parsed from one nm output line.
"""

from typing import Any, Dict

from .symbol_type import SymbolType


class Symbol:
    """
    A single symbol with its type character, size in bytes and display name.

    Instances are immutable once constructed.
    """

    __slots__ = ('_type', '_size', '_name')

    def __init__(self, type: str, size: int, name: str):
        if not SymbolType.is_valid(type):
            raise ValueError(f"Invalid symbol type: {type!r}")
        if size < 0:
            raise ValueError(f"Symbol size must not be negative, got {size}")
        if not name:
            raise ValueError("Symbol name must not be empty")

        object.__setattr__(self, '_type', type)
        object.__setattr__(self, '_size', int(size))
        object.__setattr__(self, '_name', name)

    def __setattr__(self, key, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    @property
    def type(self) -> str:
        return self._type

    @property
    def size(self) -> int:
        return self._size

    @property
    def name(self) -> str:
        return self._name

    @property
    def bucket(self) -> str:
        return SymbolType.bucket_key(self._type)

    @property
    def is_local(self) -> bool:
        return SymbolType.is_local(self._type)

    @property
    def is_global(self) -> bool:
        return SymbolType.is_global(self._type)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'type': self._type,
            'size': self._size,
            'name': self._name
        }

    def __eq__(self, other) -> bool:
        if not isinstance(other, Symbol):
            return NotImplemented
        return (self._type, self._size, self._name) == (other._type, other._size, other._name)

    def __hash__(self) -> int:
        return hash((self._type, self._size, self._name))

    def __repr__(self) -> str:
        return f"Symbol({self._type}: {self._name} ({self._size} bytes))"
