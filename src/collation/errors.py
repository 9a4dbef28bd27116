from __future__ import annotations

from typing import Any


class CollationError(Exception):
    pass


class InvalidArgumentError(CollationError, TypeError):
    """A required string or locale argument is None or of the wrong type."""


class UnsupportedLocaleError(CollationError, ValueError):
    """The locale has no registered rule set."""

    def __init__(self, locale: Any):
        self.locale = locale
        tag = getattr(locale, "tag", locale)
        super().__init__(f"Unsupported locale: {tag}")


class RuleTableError(CollationError):
    """The shipped rule data is malformed or does not match its pin."""
