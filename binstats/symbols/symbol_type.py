"""
Symbol type characters as reported by nm.

Uppercase letters are global (external) symbols, lowercase letters are local
(static) symbols. See https://sourceware.org/binutils/docs/binutils/nm.html
"""

import string


class SymbolType:
    """Enum-like class for nm symbol type characters."""
    UNKNOWN = '?'
    TOTAL = '_'
    LETTERS = string.ascii_uppercase

    DESCRIPTIONS = {
        'A': "absolute value",
        'B': "uninitialized data (BSS)",
        'C': "uninitialized data (common)",
        'D': "initialized data",
        'G': "initialized data (small)",
        'I': "indirect function",
        'P': "stack unwind",
        'R': "read only data",
        'S': "uninitialized data (small)",
        'T': "code",
        'U': "unique global",
        'V': "weak object",
        'W': "weak object (untagged)",
    }

    @staticmethod
    def is_letter(type_char: str) -> bool:
        return len(type_char) == 1 and type_char in string.ascii_letters

    @staticmethod
    def is_valid(type_char: str) -> bool:
        """True for an ASCII letter or the unknown marker."""
        return SymbolType.is_letter(type_char) or type_char == SymbolType.UNKNOWN

    @staticmethod
    def is_local(type_char: str) -> bool:
        return SymbolType.is_letter(type_char) and type_char.islower()

    @staticmethod
    def is_global(type_char: str) -> bool:
        return SymbolType.is_letter(type_char) and type_char.isupper()

    @staticmethod
    def bucket_key(type_char: str) -> str:
        """Statistics bucket for a type: the uppercase letter, otherwise unknown."""
        if SymbolType.is_letter(type_char):
            return type_char.upper()
        return SymbolType.UNKNOWN

    @staticmethod
    def describe(type_char: str) -> str:
        """
        Human readable name of a type character.

        Letters nm documents without a name are shown as the letter itself.
        """
        if SymbolType.is_letter(type_char):
            letter = type_char.upper()
            return SymbolType.DESCRIPTIONS.get(letter, letter)
        if type_char == SymbolType.TOTAL:
            return "total"
        return "unknown"

    @staticmethod
    def all_descriptions():
        """Description for every bucket key, letters first."""
        result = [{'type': letter, 'description': SymbolType.describe(letter)}
                  for letter in SymbolType.LETTERS]
        result.append({'type': SymbolType.UNKNOWN, 'description': SymbolType.describe(SymbolType.UNKNOWN)})
        return result
