"""Locale identifiers.

A Locale is an opaque, hashable value. Two locales are the same only when
every field matches exactly; there is no fallback from "fr-CA" to "fr", and
"sr-Latn" or "de-DE-1996" never equal a two-field locale.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidArgumentError


def _is_script(subtag: str) -> bool:
    return len(subtag) == 4 and subtag.isalpha()


def _is_region(subtag: str) -> bool:
    return (len(subtag) == 2 and subtag.isalpha()) or (len(subtag) == 3 and subtag.isdigit())


@dataclass(frozen=True)
class Locale:
    language: str
    region: str = ""
    script: str = ""
    variant: str = ""

    def __post_init__(self) -> None:
        for name in ("language", "region", "script", "variant"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise InvalidArgumentError(f"locale {name} must be a str, got {type(value).__name__}")
        # Same field canonicalization as platform locale types: "FR" == "fr".
        object.__setattr__(self, "language", self.language.lower())
        object.__setattr__(self, "region", self.region.upper())
        object.__setattr__(self, "script", self.script.title())

    @staticmethod
    def from_tag(tag: str) -> "Locale":
        """Parse "es", "fr-CA", "fr_CA", "sr-Latn", "zh-Hant-TW" or "de-DE-1996".

        Subtags after the language are read in order as an optional script,
        an optional region, then everything else as the variant. Only a
        blank tag is rejected; any other string yields a Locale, which is
        simply unsupported when no rule set matches it.
        """
        if not isinstance(tag, str):
            raise InvalidArgumentError(f"locale tag must be str, got {type(tag).__name__}")
        subtags = [s for s in tag.strip().replace("_", "-").split("-") if s]
        if not subtags:
            raise InvalidArgumentError("locale tag must not be empty")

        language, rest = subtags[0], subtags[1:]
        script = region = ""
        if rest and _is_script(rest[0]):
            script = rest.pop(0)
        if rest and _is_region(rest[0]):
            region = rest.pop(0)
        return Locale(language, region=region, script=script, variant="-".join(rest))

    @property
    def tag(self) -> str:
        return "-".join(s for s in (self.language, self.script, self.region, self.variant) if s)

    def __str__(self) -> str:
        return self.tag


FRENCH = Locale("fr")
SPANISH = Locale("es")


def coerce_locale(locale: Locale | str | None) -> Locale:
    """Accept a Locale or a tag string; anything else is an invalid argument."""
    if locale is None:
        raise InvalidArgumentError("locale must not be None")
    if isinstance(locale, Locale):
        return locale
    if isinstance(locale, str):
        return Locale.from_tag(locale)
    raise InvalidArgumentError(f"expected Locale or str, got {type(locale).__name__}")
