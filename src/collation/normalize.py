"""Canonical form of a string under a locale's collation rules.

Steps, in this order:
  1. locale-sensitive lowercasing
  2. every substitution rule of the locale, in table order, each replacing
     all non-overlapping occurrences left to right

Pure function of (text, locale).
"""

from __future__ import annotations

from typing import Dict

from .locales import Locale
from .rules import rules_for

_DOTTED_I = {"I": "ı", "İ": "i"}

# Applied before str.lower(). Only languages whose case mapping differs from
# the default need an entry here.
_LOWER_PREMAP: Dict[str, Dict[int, str]] = {
    "tr": str.maketrans(_DOTTED_I),
    "az": str.maketrans(_DOTTED_I),
}


def lower(text: str, locale: Locale) -> str:
    premap = _LOWER_PREMAP.get(locale.language)
    if premap is not None:
        text = text.translate(premap)
    return text.lower()


def normalize(text: str, locale: Locale) -> str:
    """Return the canonical form; raises UnsupportedLocaleError for unknown locales."""
    rules = rules_for(locale)
    out = lower(text, locale)
    for rule in rules:
        out = rule.apply(out)
    return out
