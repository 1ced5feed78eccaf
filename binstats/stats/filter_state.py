"""
Filter settings applied when building statistics.
"""

from typing import Any, Dict, Iterable, Optional, Union

from ..matching import name_matches
from ..symbols import Symbol, SymbolType


class FilterState:
    """
    Name pattern plus type and visibility switches.

    Every type letter, the unknown type and both visibilities are enabled by
    default, and the empty pattern accepts every name.
    """

    def __init__(
        self,
        pattern: str = '',
        disabled_types: Optional[Iterable[str]] = None,
        local_visible: bool = True,
        global_visible: bool = True
    ):
        self.pattern = pattern or ''
        self.type_enabled: Dict[str, bool] = {letter: True for letter in SymbolType.LETTERS}
        self.unknown_enabled = True
        self.local_visible = local_visible
        self.global_visible = global_visible

        for type_char in disabled_types or ():
            self.set_type_enabled(type_char, False)

    def set_type_enabled(self, type_char: str, enabled: bool):
        """
        Enable or disable a type bucket.

        Args:
            type_char: Type letter in either case, or '?' for unknown types

        Raises:
            ValueError: If type_char is not a valid type character
        """
        if not SymbolType.is_valid(type_char):
            raise ValueError(f"Invalid symbol type: {type_char!r}")

        key = SymbolType.bucket_key(type_char)
        if key == SymbolType.UNKNOWN:
            self.unknown_enabled = enabled
        else:
            self.type_enabled[key] = enabled

    def is_type_enabled(self, type_char: str) -> bool:
        key = SymbolType.bucket_key(type_char)
        if key == SymbolType.UNKNOWN:
            return self.unknown_enabled
        return self.type_enabled[key]

    def matches_name(self, symbol: Symbol) -> bool:
        return name_matches(symbol.name, self.pattern)

    def accepts_type(self, symbol: Symbol) -> bool:
        """Type and visibility check. Unknown types have no visibility."""
        if not self.is_type_enabled(symbol.bucket):
            return False
        if symbol.bucket == SymbolType.UNKNOWN:
            return True
        if symbol.is_local and not self.local_visible:
            return False
        if symbol.is_global and not self.global_visible:
            return False
        return True

    def accepts(self, symbol: Symbol) -> bool:
        return self.matches_name(symbol) and self.accepts_type(symbol)

    def disabled_types(self):
        disabled = [letter for letter in SymbolType.LETTERS if not self.type_enabled[letter]]
        if not self.unknown_enabled:
            disabled.append(SymbolType.UNKNOWN)
        return disabled

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FilterState':
        """
        Create filter settings from request data.

        'disabled' may be a list of type characters or a comma separated
        string. 'local' and 'global' accept booleans or '0'/'1' style strings.
        """
        disabled: Union[str, Iterable[str]] = data.get('disabled') or []
        if isinstance(disabled, str):
            disabled = [part.strip() for part in disabled.split(',') if part.strip()]

        return cls(
            pattern=data.get('pattern', ''),
            disabled_types=disabled,
            local_visible=_to_bool(data.get('local', True)),
            global_visible=_to_bool(data.get('global', True))
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'pattern': self.pattern,
            'disabled': self.disabled_types(),
            'local': self.local_visible,
            'global': self.global_visible
        }

    def __repr__(self) -> str:
        return f"FilterState(pattern={self.pattern!r}, disabled={self.disabled_types()})"


def _to_bool(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() not in ('0', 'false', 'no', 'off', '')
    return bool(value)
