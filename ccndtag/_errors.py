"""Error codes, exception class, and precedence logic for malformed tables.

A lookup miss is not an error and never raises; everything here is about
an entry list that cannot be turned into a dictionary at all.
"""

from __future__ import annotations

from typing import List

# ── Error codes (ordered by precedence) ──────────────────────

ERR_BAD_ENTRY: str = "ERR_BAD_ENTRY"    # entry is not a (code, name) pair
ERR_BAD_CODE: str = "ERR_BAD_CODE"      # code is not a non-negative int
ERR_BAD_NAME: str = "ERR_BAD_NAME"      # name empty or not ASCII letters
ERR_DUP_CODE: str = "ERR_DUP_CODE"      # two entries share a code
ERR_DUP_NAME: str = "ERR_DUP_NAME"      # two entries share a name

# Precedence: index 0 wins.  Shape problems outrank uniqueness problems.
PRECEDENCE: List[str] = [
    ERR_BAD_ENTRY,
    ERR_BAD_CODE,
    ERR_BAD_NAME,
    ERR_DUP_CODE,
    ERR_DUP_NAME,
]

_PREC_INDEX = {code: idx for idx, code in enumerate(PRECEDENCE)}


class DictError(Exception):
    """A table failed validation; `.code` names the worst fault found.

    The message points at the offending entry indexes.  Raised only while
    a table is being built, never by a lookup.
    """

    def __init__(self, code: str, msg: str = "") -> None:
        self.code = code
        super().__init__(msg if msg else "malformed tag table ({})".format(code))


def choose_reported_error(errors: List[str]) -> str:
    """Pick which of the faults collected over a table scan gets reported.

    Validation records at most one message per ERR_* code and keeps going
    to the end of the entry list; this ranks what it collected by
    PRECEDENCE.  Codes not in PRECEDENCE rank last.
    """
    ranked = sorted(errors, key=lambda e: _PREC_INDEX.get(e, len(PRECEDENCE)))
    return ranked[0]
