"""Locale-aware string collation.

    >>> compare("Résumé", "resume", FRENCH)
    0
    >>> sort_strings(["côte", "coast", "cote"], FRENCH)
    ['coast', 'côte', 'cote']

compare() builds two keys on every call. When the same strings are compared
repeatedly (sorting, indexing), create the keys once with create_key() or
sort_key() and compare those instead.

Errors:
  - InvalidArgumentError: a string or locale argument is None or mistyped
  - UnsupportedLocaleError: the locale has no registered rule set
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, List, Tuple

from . import rules
from .errors import InvalidArgumentError, UnsupportedLocaleError
from .keys import CollationKey, compare_keys, encode
from .locales import FRENCH, SPANISH, Locale, coerce_locale
from .normalize import normalize

__all__ = [
    "FRENCH",
    "SPANISH",
    "Locale",
    "CollationKey",
    "is_supported",
    "compare",
    "create_key",
    "sort_key",
    "sort_strings",
    "supported_locales",
]


def _require_str(value: Any, what: str) -> str:
    if value is None:
        raise InvalidArgumentError(f"{what} must not be None")
    if not isinstance(value, str):
        raise InvalidArgumentError(f"{what} must be str, got {type(value).__name__}")
    return value


def _supported_locale(locale: Any) -> Locale:
    loc = coerce_locale(locale)
    if not rules.is_supported(loc):
        raise UnsupportedLocaleError(loc)
    return loc


def _make_key(text: str, locale: Locale) -> CollationKey:
    return CollationKey(text, encode(normalize(text, locale)))


def is_supported(locale: Locale | str) -> bool:
    return rules.is_supported(coerce_locale(locale))


def create_key(text: str, locale: Locale | str) -> CollationKey:
    """Return a reusable key for `text`; the key keeps the original string."""
    _require_str(text, "string")
    return _make_key(text, _supported_locale(locale))


def compare(s1: str, s2: str, locale: Locale | str) -> int:
    """Return negative, zero or positive as s1 sorts before, with or after s2."""
    _require_str(s1, "first string")
    _require_str(s2, "second string")
    loc = _supported_locale(locale)
    return compare_keys(_make_key(s1, loc), _make_key(s2, loc))


def sort_key(locale: Locale | str) -> Callable[[str], CollationKey]:
    """Return a key function for sorted()/list.sort() under `locale`."""
    loc = _supported_locale(locale)

    def key(text: str) -> CollationKey:
        return _make_key(_require_str(text, "string"), loc)

    return key


def sort_strings(strings: Iterable[str], locale: Locale | str) -> List[str]:
    """Stable sort by collation key: strings with equal keys keep input order."""
    if strings is None:
        raise InvalidArgumentError("strings must not be None")
    return sorted(strings, key=sort_key(locale))


def supported_locales() -> Tuple[Locale, ...]:
    return rules.supported_locales()
