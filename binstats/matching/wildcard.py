"""
Wildcard pattern matching for symbol names.

Pattern dialect:
    *   matches any character 0 to unlimited times
    ?   matches any character exactly once
    #   matches any digit exactly once
Any other character must appear literally in the text. There is no escape
character. A match always covers the whole text.
"""

from typing import Optional

WILDCARDS = '*?#'
DIGITS = '0123456789'


def _token_matches(token: str, char: str) -> bool:
    """Match a single non-star pattern token against one text character."""
    if token == '?':
        return True
    if token == '#':
        return char in DIGITS
    return token == char


def matches(text: Optional[str], pattern: Optional[str]) -> bool:
    """
    Return True if the whole of text matches pattern.

    The walk keeps the position right after the most recent run of stars
    (star_pat) and the text position that run is currently anchored at
    (star_text). When a token fails to match, the star swallows one more
    character and the tokens after it are retried from there. Earlier stars
    never need to be revisited: any text a later star could skip is also
    reachable by extending the most recent one.

    Args:
        text: Text to test, None never matches
        pattern: Wildcard pattern, None never matches
    """
    if text is None or pattern is None:
        return False

    text_len = len(text)
    pat_len = len(pattern)
    t = 0
    p = 0
    star_pat = -1
    star_text = 0

    while t < text_len:
        if p < pat_len and pattern[p] == '*':
            # consecutive stars behave like a single one
            while p < pat_len and pattern[p] == '*':
                p += 1
            if p == pat_len:
                return True
            star_pat = p
            star_text = t
        elif p < pat_len and _token_matches(pattern[p], text[t]):
            t += 1
            p += 1
        elif star_pat >= 0:
            star_text += 1
            t = star_text
            p = star_pat
        else:
            return False

    # text is exhausted, only stars may remain
    while p < pat_len and pattern[p] == '*':
        p += 1
    return p == pat_len


def has_wildcards(pattern: Optional[str]) -> bool:
    """Return True if pattern contains any of the wildcard characters."""
    if not pattern:
        return False
    return any(char in WILDCARDS for char in pattern)


def name_matches(name: str, pattern: Optional[str]) -> bool:
    """
    Apply a user supplied name filter.

    An empty pattern accepts every name. A pattern without wildcards is a
    plain substring search, so "foo" finds any name containing foo while
    "foo*" only finds names starting with it.
    """
    if not pattern:
        return True
    if not has_wildcards(pattern):
        return name is not None and pattern in name
    return matches(name, pattern)
