from __future__ import annotations

import argparse
import os
import sys

from . import rules
from .api import compare, create_key, sort_strings
from .errors import InvalidArgumentError, UnsupportedLocaleError
from .locales import coerce_locale

EXIT_OK = 0
EXIT_BAD_INPUT = 2

DEFAULT_LOCALE = "fr"


def default_locale() -> str:
    v = os.environ.get("COLLATION_LOCALE")
    if v is None or not v.strip():
        return DEFAULT_LOCALE
    return v.strip()


def _sign(n: int) -> int:
    return (n > 0) - (n < 0)


def cmd_compare(args: argparse.Namespace) -> int:
    print(_sign(compare(args.s1, args.s2, args.locale)))
    return EXIT_OK


def cmd_sort(args: argparse.Namespace) -> int:
    collated = sort_strings(args.words, args.locale)
    if args.show_default:
        print("default: " + " ".join(sorted(args.words)))
        print("collated: " + " ".join(collated))
        return EXIT_OK
    for w in collated:
        print(w)
    return EXIT_OK


def cmd_key(args: argparse.Namespace) -> int:
    print(create_key(args.text, args.locale).key_bytes.hex())
    return EXIT_OK


def cmd_locales(args: argparse.Namespace) -> int:
    for loc in rules.supported_locales():
        print(f"{loc.tag}\t{rules.table_digest(loc)}")
    return EXIT_OK


def cmd_rules(args: argparse.Namespace) -> int:
    for rule in rules.rules_for(coerce_locale(args.locale)):
        print(f"{rule.pattern} -> {rule.replacement}")
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="collation", description="Locale-aware string collation.")
    sub = p.add_subparsers(dest="cmd", required=True)

    locale_help = "Locale tag, e.g. fr or es (default: $COLLATION_LOCALE or fr)."

    p_cmp = sub.add_parser("compare", help="Print -1, 0 or 1 for the collation order of two strings.")
    p_cmp.add_argument("s1")
    p_cmp.add_argument("s2")
    p_cmp.add_argument("--locale", default=default_locale(), help=locale_help)
    p_cmp.set_defaults(fn=cmd_compare)

    p_sort = sub.add_parser("sort", help="Sort words by collation key (stable).")
    p_sort.add_argument("words", nargs="+")
    p_sort.add_argument("--locale", default=default_locale(), help=locale_help)
    p_sort.add_argument(
        "--show-default",
        action="store_true",
        help="Also print the plain code point sort for comparison.",
    )
    p_sort.set_defaults(fn=cmd_sort)

    p_key = sub.add_parser("key", help="Print the collation key bytes as hex.")
    p_key.add_argument("text")
    p_key.add_argument("--locale", default=default_locale(), help=locale_help)
    p_key.set_defaults(fn=cmd_key)

    p_loc = sub.add_parser("locales", help="List supported locales with their rule table digest.")
    p_loc.set_defaults(fn=cmd_locales)

    p_rules = sub.add_parser("rules", help="Print a locale's substitution rules in table order.")
    p_rules.add_argument("--locale", default=default_locale(), help=locale_help)
    p_rules.set_defaults(fn=cmd_rules)

    return p


def run(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return args.fn(args)
    except (InvalidArgumentError, UnsupportedLocaleError) as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT


def main() -> None:
    raise SystemExit(run())


if __name__ == "__main__":
    main()
