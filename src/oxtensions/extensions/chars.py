"""Single-character predicates.

Python has no character type, so each helper takes a one-character string
and raises ValueError for anything else.
"""

_VOWELS = frozenset("aeiouAEIOU")
_NEWLINES = frozenset("\r\n")


def _require_char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def is_vowel(c: str) -> bool:
    return _require_char(c) in _VOWELS


def is_consonant(c: str) -> bool:
    # ASCII letters only
    return is_ascii_letter(c) and c not in _VOWELS


def is_ascii_letter(c: str) -> bool:
    return _require_char(c).isascii() and c.isalpha()


def is_ascii_digit(c: str) -> bool:
    return "0" <= _require_char(c) <= "9"


def is_ascii_letter_or_digit(c: str) -> bool:
    return is_ascii_letter(c) or is_ascii_digit(c)


def is_whitespace(c: str) -> bool:
    return _require_char(c).isspace()


def is_newline(c: str) -> bool:
    return _require_char(c) in _NEWLINES


def is_uppercase(c: str) -> bool:
    return _require_char(c).isupper()


def is_lowercase(c: str) -> bool:
    return _require_char(c).islower()
