"""Tag dictionary core — validation, indexing, and the two lookups.

A TagDict is built once from a literal (code, name) list and then only
read.  Both lookups are a single dict probe:

    name_for(code)  — Decoder side: numeric DTAG → element name
    code_for(name)  — Encoder side: element name → numeric DTAG

A miss returns None.  Deciding what a miss means (literal-name fallback,
or a stream fault) is the caller's business.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Optional, Tuple

from ._errors import (
    ERR_BAD_CODE,
    ERR_BAD_ENTRY,
    ERR_BAD_NAME,
    ERR_DUP_CODE,
    ERR_DUP_NAME,
    DictError,
    choose_reported_error,
)

Entry = Tuple[int, str]


# ── Entry checks ──────────────────────────────────────────────
# Names end up as element names in text renderings, so only ASCII
# letters are allowed.  str.isalpha() alone would accept "Ñame".

def _valid_name(name: Any) -> bool:
    return isinstance(name, str) and name.isascii() and name.isalpha()


def _valid_code(code: Any) -> bool:
    # bool is a subclass of int; True must not pass as DTAG 1.
    if isinstance(code, bool) or not isinstance(code, int):
        return False
    return code >= 0


def _check_entries(entries: List[Any]) -> None:
    """Scan every entry and raise DictError for the worst violation found.

    The whole list is scanned before raising; entries with a bad shape,
    code, or name are left out of the uniqueness checks.
    """
    found: Dict[str, str] = {}
    seen_codes: Dict[int, int] = {}
    seen_names: Dict[str, int] = {}

    for idx, entry in enumerate(entries):
        if not isinstance(entry, tuple) or len(entry) != 2:
            found.setdefault(ERR_BAD_ENTRY,
                             "entry {} is not a (code, name) pair".format(idx))
            continue
        code, name = entry
        ok = True
        if not _valid_code(code):
            found.setdefault(ERR_BAD_CODE,
                             "entry {}: bad code {!r}".format(idx, code))
            ok = False
        if not _valid_name(name):
            found.setdefault(ERR_BAD_NAME,
                             "entry {}: bad name {!r}".format(idx, name))
            ok = False
        if not ok:
            continue

        if code in seen_codes:
            found.setdefault(ERR_DUP_CODE,
                             "code {} used by entries {} and {}".format(
                                 code, seen_codes[code], idx))
        else:
            seen_codes[code] = idx
        if name in seen_names:
            found.setdefault(ERR_DUP_NAME,
                             "name {!r} used by entries {} and {}".format(
                                 name, seen_names[name], idx))
        else:
            seen_names[name] = idx

    if found:
        err = choose_reported_error(list(found))
        raise DictError(err, found[err])


# ── TagDict ──────────────────────────────────────────────────

class TagDict:
    """Immutable bidirectional DTAG table.

    The constructor validates like build() does; both indexes are
    read-only mapping views.
    """

    __slots__ = ("_entries", "_by_code", "_by_name")

    def __init__(self, entries: Iterable[Any]) -> None:
        items = tuple(entries)
        _check_entries(list(items))
        object.__setattr__(self, "_entries", items)
        object.__setattr__(self, "_by_code",
                           MappingProxyType({c: n for c, n in items}))
        object.__setattr__(self, "_by_name",
                           MappingProxyType({n: c for c, n in items}))

    def __setattr__(self, attr: str, value: Any) -> None:
        raise AttributeError("TagDict is read-only")

    def __delattr__(self, attr: str) -> None:
        raise AttributeError("TagDict is read-only")

    def name_for(self, code: Any) -> Optional[str]:
        """Return the element name for a DTAG, or None if it isn't assigned."""
        if isinstance(code, bool) or not isinstance(code, int):
            return None
        return self._by_code.get(code)

    def code_for(self, name: Any) -> Optional[int]:
        """Return the DTAG for an element name, or None.

        Matching is exact and case-sensitive: "name" is not "Name".
        """
        if not isinstance(name, str):
            return None
        return self._by_name.get(name)

    # Test support.  Codec components only need the two lookups above.

    def __len__(self) -> int:
        return len(self._entries)

    def entries(self) -> Tuple[Entry, ...]:
        return self._entries

    def __repr__(self) -> str:
        return "TagDict({} entries)".format(len(self._entries))


def build(entries: Iterable[Any]) -> TagDict:
    """Validate a literal entry list and return a TagDict.

    Raises DictError if any entry is malformed or if codes or names
    collide.  Input order is kept for entries().
    """
    return TagDict(entries)
