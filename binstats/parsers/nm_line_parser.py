"""
Parser for single lines of `nm -S -f bsd -t d` output.
"""

import string
from typing import Optional, Tuple, Union

from ..demanglers.base_demangler import BaseDemangler
from ..symbols import Symbol, SymbolType
from .. import logger


# Digit values for radix up to 36, ASCII only like strtoll
_DIGIT_VALUES = {ch: i for i, ch in enumerate(string.digits + string.ascii_lowercase)}
_DIGIT_VALUES.update({ch: i for i, ch in enumerate(string.digits + string.ascii_uppercase)})


class SymbolLineParser:
    """
    Turns one nm output line into a Symbol.

    Line format: <address> <size> <type> <name>. The name is everything after
    the type character and may contain spaces. Lines that do not fit this
    shape are dropped by returning None.
    """

    # Markers GCC appends to clones of a function, e.g. foo.constprop.0
    COMPILER_SUFFIX_MARKERS = (
        'constprop.',
        'lto_priv.',
        'isra.',
        'part.',
    )

    # The mangled symbol starts after the last of these
    PREFIX_SEPARATORS = '.$'

    def __init__(self, demangler: BaseDemangler, radix: int = 10):
        if radix < 2 or radix > 36:
            raise ValueError(f"radix must be between 2 and 36, got {radix}")
        self.demangler = demangler
        self.radix = radix

    @staticmethod
    def strip_line(raw_line: Union[str, bytes]) -> str:
        """Decode a raw line and remove the trailing line break."""
        if isinstance(raw_line, bytes):
            raw_line = raw_line.decode('utf-8', errors='replace')
        return raw_line.rstrip('\r\n')

    @staticmethod
    def is_blank(raw_line: Union[str, bytes]) -> bool:
        return SymbolLineParser.strip_line(raw_line) == ''

    def _scan_int(self, line: str, pos: int) -> Tuple[int, int, bool]:
        """
        Read an integer starting at pos.

        Leading blanks and a sign are accepted. Returns the value, the
        position after the last digit and whether any digit was read.
        """
        length = len(line)
        start = pos
        while pos < length and line[pos] in ' \t':
            pos += 1

        negative = False
        if pos < length and line[pos] in '+-':
            negative = line[pos] == '-'
            pos += 1

        value = 0
        digits = 0
        while pos < length:
            digit = _DIGIT_VALUES.get(line[pos], self.radix)
            if digit >= self.radix:
                break
            value = value * self.radix + digit
            digits += 1
            pos += 1

        if digits == 0:
            return 0, start, False
        return (-value if negative else value), pos, True

    def _scan_field(self, line: str, pos: int) -> Optional[Tuple[int, int]]:
        """Read a numeric field and step over the separator that follows it."""
        value, pos, has_digits = self._scan_int(line, pos)
        following = line[pos] if pos < len(line) else ''
        if (not has_digits or value == 0) and following != ' ':
            return None
        return value, pos + 1

    def split_compiler_suffix(self, name: str) -> Tuple[str, str]:
        """
        Split a compiler clone marker off a raw name.

        Returns (name without suffix, suffix). A marker only counts when a
        '.' or '$' precedes it, so GCC statics like depart.3 stay whole. The
        suffix starts with that separator. Without a marker it is empty.
        """
        best = -1
        for marker in self.COMPILER_SUFFIX_MARKERS:
            index = name.find(marker, 1)
            while index > 0 and name[index - 1] not in self.PREFIX_SEPARATORS:
                index = name.find(marker, index + 1)
            if index > 0 and (best < 0 or index < best):
                best = index
        if best < 0:
            return name, ''
        return name[:best - 1], name[best - 1:]

    def split_prefix(self, name: str) -> Tuple[str, str]:
        """
        Split a raw name into (prefix, mangled symbol).

        The prefix runs up to and including the last '.' or '$'.
        """
        last = max(name.rfind(sep) for sep in self.PREFIX_SEPARATORS)
        if last < 0:
            return '', name
        return name[:last + 1], name[last + 1:]

    def mangled_part(self, raw_name: str) -> str:
        """The part of a raw name that is handed to the demangler."""
        name, _ = self.split_compiler_suffix(raw_name)
        return self.split_prefix(name)[1]

    def resolve_name(self, raw_name: str) -> str:
        """Demangle a raw symbol name, keeping prefix and compiler suffix."""
        name, suffix = self.split_compiler_suffix(raw_name)
        prefix, mangled = self.split_prefix(name)

        demangled, success = self.demangler.demangle(mangled)
        if success:
            return prefix + demangled + suffix
        return name + suffix

    def split_fields(self, raw_line: Union[str, bytes]) -> Optional[Tuple[str, int, str]]:
        """
        Check the line shape without demangling.

        Returns:
            (type, size, raw name), or None for empty and malformed lines
        """
        line = self.strip_line(raw_line)
        if not line:
            return None

        field = self._scan_field(line, 0)
        if field is None:
            logger.debug(f"Skipping line with invalid address: {line!r}")
            return None
        _, pos = field

        field = self._scan_field(line, pos)
        if field is None or field[0] < 0:
            logger.debug(f"Skipping line with invalid size: {line!r}")
            return None
        size, pos = field

        type_char = line[pos] if pos < len(line) else ''
        if not SymbolType.is_valid(type_char) or line[pos + 1:pos + 2] != ' ':
            logger.debug(f"Skipping line with invalid type: {line!r}")
            return None

        return type_char, size, line[pos + 2:]

    def make_symbol(self, type_char: str, size: int, raw_name: str) -> Optional[Symbol]:
        name = self.resolve_name(raw_name)
        if not name:
            logger.debug(f"Skipping {type_char} symbol of size {size} without name")
            return None
        return Symbol(type_char, size, name)

    def parse(self, raw_line: Union[str, bytes]) -> Optional[Symbol]:
        """
        Parse one line of nm output.

        Returns:
            Symbol, or None for empty and malformed lines
        """
        fields = self.split_fields(raw_line)
        if fields is None:
            return None
        return self.make_symbol(*fields)
