"""String helpers.

Every function accepts ``None`` where a string is expected and treats it
like an empty string, returning an empty result rather than raising.
"""

import base64
import binascii
import os
import re
import unicodedata
import uuid
from decimal import Decimal, InvalidOperation
from typing import List, Optional

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$", re.IGNORECASE)
_URL_RE = re.compile(r"^https?://[^\s/$.?#].[^\s]*$", re.IGNORECASE)
_PHONE_RE = re.compile(r"^\+?[0-9\s\-\(\)]{7,20}$")
_HTML_TAG_RE = re.compile(r"<[^>]*>")
_INT_RE = re.compile(r"^\s*[+-]?\d+\s*$")
_DECIMAL_RE = re.compile(r"^\s*[+-]?(\d{1,3}(,\d{3})+|\d+)?(\.\d+)?\s*$")
_TITLE_WORD_RE = re.compile(r"[^\W\d_]+('[^\W\d_]+)?")

_WORD_SEPARATORS = frozenset(" _-")

# code points without an NFD decomposition
_SUPPLEMENTAL_CHAR_MAP = str.maketrans({
    "ı": "i",
    "ø": "o", "Ø": "O",
    "ð": "d", "Ð": "D",
    "þ": "t", "Þ": "T",
    "ß": "s",
    "æ": "e", "Æ": "E",
})

_INT32_MIN, _INT32_MAX = -(2**31), 2**31 - 1


def is_null_or_empty(value: Optional[str]) -> bool:
    return not value


def is_null_or_whitespace(value: Optional[str]) -> bool:
    return value is None or value.strip() == ""


def to_slug(value: Optional[str]) -> str:
    """URL slug: accents removed, lower case, runs of other characters as one hyphen.

    >>> to_slug("  Héllo, Wörld! ")
    'hello-world'
    """
    if is_null_or_whitespace(value):
        return ""
    parts: List[str] = []
    last_was_hyphen = False
    for char in remove_accents(value):
        if char.isalnum():
            parts.append(char.lower())
            last_was_hyphen = False
        elif not last_was_hyphen and parts:
            parts.append("-")
            last_was_hyphen = True
    if parts and parts[-1] == "-":
        parts.pop()
    return "".join(parts)


def truncate(value: Optional[str], max_length: int, suffix: str = "...") -> str:
    """Cut `value` to at most `max_length` characters, suffix included."""
    if max_length < 0:
        raise ValueError("max_length must be non-negative")
    if not value:
        return ""
    if len(value) <= max_length:
        return value
    cut_length = max_length - len(suffix)
    if cut_length <= 0:
        return suffix[:max_length]
    return value[:cut_length] + suffix


def to_title_case(value: Optional[str]) -> str:
    if is_null_or_whitespace(value):
        return ""
    return _TITLE_WORD_RE.sub(lambda m: m.group(0).capitalize(), value.lower())


def to_pascal_case(value: Optional[str]) -> str:
    if is_null_or_whitespace(value):
        return ""
    return _build_word_case(value, capitalize_first=True)


def to_camel_case(value: Optional[str]) -> str:
    if is_null_or_whitespace(value):
        return ""
    return _build_word_case(value, capitalize_first=False)


def to_snake_case(value: Optional[str]) -> str:
    if is_null_or_whitespace(value):
        return ""
    return _build_delimited_case(value, "_")


def to_kebab_case(value: Optional[str]) -> str:
    if is_null_or_whitespace(value):
        return ""
    return _build_delimited_case(value, "-")


def remove_accents(value: Optional[str]) -> str:
    """Strip diacritics: "Crème Brûlée" -> "Creme Brulee"."""
    if not value:
        return ""
    mapped = value.translate(_SUPPLEMENTAL_CHAR_MAP)
    decomposed = unicodedata.normalize("NFD", mapped)
    stripped = "".join(c for c in decomposed if unicodedata.category(c) != "Mn")
    return unicodedata.normalize("NFC", stripped)


def contains_ignore_case(value: Optional[str], substring: Optional[str]) -> bool:
    if value is None or substring is None:
        return False
    return substring.casefold() in value.casefold()


def to_int_or_default(value: Optional[str], default: int = 0) -> int:
    """Parse a 32-bit integer, falling back to `default`."""
    if is_null_or_whitespace(value) or not _INT_RE.match(value):
        return default
    result = int(value)
    if not _INT32_MIN <= result <= _INT32_MAX:
        return default
    return result


def to_decimal_or_default(value: Optional[str], default: Decimal = Decimal(0)) -> Decimal:
    """Parse an invariant-culture number ("1,234.5"), falling back to `default`."""
    if is_null_or_whitespace(value) or not _DECIMAL_RE.match(value):
        return default
    try:
        return Decimal(value.strip().replace(",", ""))
    except InvalidOperation:
        return default


def to_uuid_or_default(value: Optional[str]) -> uuid.UUID:
    """Parse a UUID, returning the nil UUID on failure."""
    if is_null_or_whitespace(value):
        return uuid.UUID(int=0)
    try:
        return uuid.UUID(value.strip())
    except ValueError:
        return uuid.UUID(int=0)


def mask(value: Optional[str], visible_start: int, visible_end: int, mask_char: str = "*") -> str:
    """Hide the middle of `value`: mask("4111111111111111", 4, 4) -> "4111********1111"."""
    if not value:
        return ""
    if visible_start < 0:
        raise ValueError("visible_start must be non-negative")
    if visible_end < 0:
        raise ValueError("visible_end must be non-negative")
    length = len(value)
    if visible_start + visible_end >= length:
        return value
    hidden = length - visible_start - visible_end
    return value[:visible_start] + mask_char * hidden + value[length - visible_end:]


def is_valid_email(value: Optional[str]) -> bool:
    return not is_null_or_whitespace(value) and bool(_EMAIL_RE.match(value))


def is_valid_url(value: Optional[str]) -> bool:
    return not is_null_or_whitespace(value) and bool(_URL_RE.match(value))


def is_valid_phone_number(value: Optional[str]) -> bool:
    return not is_null_or_whitespace(value) and bool(_PHONE_RE.match(value))


def repeat(value: Optional[str], count: int) -> str:
    if count < 0:
        raise ValueError("count must be non-negative")
    if not value:
        return ""
    return value * count


def reverse_words(value: Optional[str]) -> str:
    if is_null_or_whitespace(value):
        return ""
    return " ".join(reversed([w for w in value.split(" ") if w]))


def reverse(value: Optional[str]) -> str:
    if not value:
        return ""
    return value[::-1]


def count_occurrences(value: Optional[str], substring: Optional[str]) -> int:
    """Count non-overlapping, case-sensitive occurrences of `substring`."""
    if not value or not substring:
        return 0
    return value.count(substring)


def left(value: Optional[str], length: int) -> str:
    if not value:
        return ""
    return value[:max(length, 0)]


def right(value: Optional[str], length: int) -> str:
    if not value:
        return ""
    if length <= 0:
        return ""
    return value[-length:]


def remove_html_tags(value: Optional[str]) -> str:
    if not value:
        return ""
    return _HTML_TAG_RE.sub("", value)


def to_base64(value: Optional[str]) -> str:
    if not value:
        return ""
    return base64.b64encode(value.encode("utf-8")).decode("ascii")


def from_base64(value: Optional[str]) -> str:
    """Decode UTF-8 text from base64; malformed input yields ""."""
    if is_null_or_whitespace(value):
        return ""
    try:
        return base64.b64decode(value.strip(), validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError):
        return ""


def split_and_trim(value: Optional[str], separator: str) -> List[str]:
    """Split on `separator`, trimming entries and dropping empty ones."""
    if is_null_or_whitespace(value):
        return []
    return [part.strip() for part in value.split(separator) if part.strip()]


def contains_any(value: Optional[str], *values: str) -> bool:
    if not value or not values:
        return False
    return any(v in value for v in values)


def if_null_or_empty(value: Optional[str], fallback: str) -> str:
    return fallback if not value else value


def if_null_or_whitespace(value: Optional[str], fallback: str) -> str:
    return fallback if is_null_or_whitespace(value) else value


def combine_with(value: str, *parts: str) -> str:
    """Join path segments with the platform separator."""
    return os.path.join(value, *parts)


def _build_word_case(value: str, capitalize_first: bool) -> str:
    out: List[str] = []
    new_word = True
    is_first = True
    for char in value:
        if char in _WORD_SEPARATORS:
            new_word = True
            continue
        if new_word:
            cap = capitalize_first or not is_first
            out.append(char.upper() if cap else char.lower())
            new_word = False
            is_first = False
        else:
            out.append(char.lower())
    return "".join(out)


def _build_delimited_case(value: str, delimiter: str) -> str:
    out: List[str] = []
    for char in value:
        if char in _WORD_SEPARATORS:
            if out and out[-1] != delimiter:
                out.append(delimiter)
            continue
        if char.isupper() and out and out[-1] != delimiter:
            out.append(delimiter)
        out.append(char.lower())
    return "".join(out)
