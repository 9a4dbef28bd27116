"""Per-locale substitution rule tables.

The shipped tables live in data/rules.json and are loaded exactly once:
  - raw bytes (LF line endings) checked against the pinned SHA-256 in data/RULES_SHA256
  - schema-first validation using a Draft 2020-12 validator
  - published as a read-only mapping; there is no registration API

Rule order is part of the table. Normalization applies rules in the order
they appear in the file.
"""

from __future__ import annotations

import hashlib
import json
import threading
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple

from jsonschema import Draft202012Validator

from .errors import RuleTableError, UnsupportedLocaleError
from .locales import Locale

DATA_DIR = Path(__file__).parent / "data"
RULES_PATH = DATA_DIR / "rules.json"
SCHEMA_PATH = DATA_DIR / "rules.schema.json"
PIN_PATH = DATA_DIR / "RULES_SHA256"


@dataclass(frozen=True)
class SubstitutionRule:
    pattern: str
    replacement: str

    def apply(self, text: str) -> str:
        return text.replace(self.pattern, self.replacement)


RuleTable = Mapping[Locale, Tuple[SubstitutionRule, ...]]

_TABLE: Optional[RuleTable] = None
_TABLE_LOCK = threading.Lock()


def canon_json_bytes(obj: Any) -> bytes:
    """Deterministic JSON bytes: sorted keys, compact separators, UTF-8."""
    s = json.dumps(obj, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return s.encode("utf-8")


def sha256_prefixed(data: bytes, prefix: str = "sha256") -> str:
    return f"{prefix}:{hashlib.sha256(data).hexdigest()}"


def _check_pin(raw: bytes) -> None:
    # Pinned over LF line endings; a CRLF checkout hashes the same.
    pinned = PIN_PATH.read_text(encoding="utf-8").strip()
    actual = hashlib.sha256(raw.replace(b"\r\n", b"\n")).hexdigest()
    if pinned != actual:
        raise RuleTableError(
            "rule table hash pin mismatch\n"
            f"  pinned:  {pinned}\n"
            f"  actual:  {actual}\n"
            f"  table:   {RULES_PATH}"
        )


def validate_or_raise(doc: Any) -> None:
    """Validate a rule document against the table schema plus semantic checks."""
    schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
    v = Draft202012Validator(schema)

    errs = sorted(v.iter_errors(doc), key=lambda e: [str(p) for p in e.path])
    if errs:
        msg = "; ".join([f"{list(e.path)}: {e.message}" for e in errs[:5]])
        raise RuleTableError(msg)

    seen_locales = set()
    for entry in doc["locales"]:
        tag = entry["locale"]
        if tag in seen_locales:
            raise RuleTableError(f"duplicate locale entry: {tag}")
        seen_locales.add(tag)

        patterns = [pattern for pattern, _ in entry["rules"]]
        dupes = sorted({p for p in patterns if patterns.count(p) > 1})
        if dupes:
            raise RuleTableError(f"duplicate patterns for {tag}: {dupes}")


def build_table(doc: Dict[str, Any]) -> RuleTable:
    validate_or_raise(doc)
    table: Dict[Locale, Tuple[SubstitutionRule, ...]] = {}
    for entry in doc["locales"]:
        table[Locale.from_tag(entry["locale"])] = tuple(
            SubstitutionRule(pattern, replacement) for pattern, replacement in entry["rules"]
        )
    return MappingProxyType(table)


def _load_table() -> RuleTable:
    raw = RULES_PATH.read_bytes()
    _check_pin(raw)
    return build_table(json.loads(raw.decode("utf-8")))


def rule_table() -> RuleTable:
    """Return the process-wide rule table, loading it on first use."""
    global _TABLE
    table = _TABLE
    if table is None:
        with _TABLE_LOCK:
            if _TABLE is None:
                _TABLE = _load_table()
            table = _TABLE
    return table


def is_supported(locale: Any) -> bool:
    # Unhashable or foreign values are simply not registered.
    try:
        return locale in rule_table()
    except TypeError:
        return False


def rules_for(locale: Locale) -> Tuple[SubstitutionRule, ...]:
    try:
        return rule_table()[locale]
    except (KeyError, TypeError):
        raise UnsupportedLocaleError(locale) from None


def supported_locales() -> Tuple[Locale, ...]:
    return tuple(rule_table())


def _rules_payload(rules: Tuple[SubstitutionRule, ...]) -> List[List[str]]:
    return [[r.pattern, r.replacement] for r in rules]


def table_digest(locale: Optional[Locale] = None) -> str:
    """Fingerprint of one locale's rules, or of the whole table.

    Format: "sha256:<64-hex>" over canonical JSON bytes.
    """
    if locale is not None:
        return sha256_prefixed(canon_json_bytes(_rules_payload(rules_for(locale))))
    payload = [[loc.tag, _rules_payload(rules)] for loc, rules in rule_table().items()]
    return sha256_prefixed(canon_json_bytes(payload))
