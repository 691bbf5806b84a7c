"""DTAG golden-vector suite.

Runs every vector in conformance/dtag_vectors.json against the shared
table.  The vector file is maintained by hand, separately from
_constants.py, so a mistyped code or name in either one shows up here.

Usage:
    python tests/test_conformance.py [--vectors FILE]
    python -m pytest tests/test_conformance.py -v
    DTAG_VECTORS=path/to/dtag_vectors.json python tests/test_conformance.py
"""

from __future__ import annotations

import argparse
import json
import os
import sys
import unittest
from typing import Any, Dict, List, Optional, Tuple

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from ccndtag import DTAG_DICT, __table_version__

# ── Locate vector data ────────────────────────────────────────

_VECTORS_FILE: Optional[str] = os.environ.get("DTAG_VECTORS", None)


def _find_vectors_file() -> str:
    if _VECTORS_FILE:
        return _VECTORS_FILE
    candidates = [
        os.path.join(os.path.dirname(__file__), "..", "conformance"),
        os.path.join(os.path.dirname(__file__), "conformance"),
    ]
    for d in candidates:
        path = os.path.join(d, "dtag_vectors.json")
        if os.path.isfile(path):
            return path
    raise FileNotFoundError(
        "Cannot find dtag_vectors.json. Set DTAG_VECTORS or --vectors."
    )


def _load_data() -> Tuple[List[dict], str]:
    """Load vectors.  Returns (vectors, table_version)."""
    with open(_find_vectors_file(), "r", encoding="utf-8") as f:
        data = json.load(f)
    return data["vectors"], data["table_version"]


def _run_vector(vec: dict) -> Dict[str, Any]:
    """Execute one vector.  Returns {"got": value-or-None}."""
    op = vec["op"]
    if op == "name_for":
        return {"got": DTAG_DICT.name_for(vec["input"])}
    elif op == "code_for":
        return {"got": DTAG_DICT.code_for(vec["input"])}
    else:
        return {"got": "UNKNOWN_OP"}


# ── unittest integration ──────────────────────────────────────

class ConformanceTests(unittest.TestCase):
    """Dynamically generated: one test method per vector."""

    def test_table_version_matches(self):
        _vecs, version = _load_data()
        self.assertEqual(version, __table_version__)

    def test_every_entry_covered(self):
        """Both directions of every table entry have a hit vector."""
        vecs, _version = _load_data()
        names = {v["input"] for v in vecs
                 if v["op"] == "code_for" and v["expect"] is not None}
        codes = {v["input"] for v in vecs
                 if v["op"] == "name_for" and v["expect"] is not None}
        for code, name in DTAG_DICT.entries():
            self.assertIn(code, codes)
            self.assertIn(name, names)


def _make_test(vec: dict):
    def test_fn(self: unittest.TestCase) -> None:
        got = _run_vector(vec)["got"]
        self.assertEqual(got, vec["expect"],
                         "{}: got {!r} expected {!r}".format(
                             vec["test_id"], got, vec["expect"]))
    return test_fn


def _method_name(test_id: str) -> str:
    return "test_" + test_id.replace("-", "_")


# Attach test methods at import time.
try:
    _vectors, _version = _load_data()
    for _vec in _vectors:
        _fn = _make_test(_vec)
        _fn.__name__ = _method_name(_vec["test_id"])
        _fn.__qualname__ = "ConformanceTests." + _fn.__name__
        setattr(ConformanceTests, _fn.__name__, _fn)
except FileNotFoundError:
    pass


# ── Standalone CLI runner ─────────────────────────────────────

def main() -> None:
    global _VECTORS_FILE

    parser = argparse.ArgumentParser(description="ccndtag golden-vector runner")
    parser.add_argument("--vectors", default=None,
                        help="Path to dtag_vectors.json")
    args, _remaining = parser.parse_known_args()

    if args.vectors:
        _VECTORS_FILE = args.vectors
        os.environ["DTAG_VECTORS"] = args.vectors

    vectors, version = _load_data()

    passed = 0
    failed = 0
    failures: List[Tuple[str, Any, Any]] = []

    for vec in vectors:
        got = _run_vector(vec)["got"]
        if got == vec["expect"]:
            passed += 1
        else:
            failed += 1
            failures.append((vec["test_id"], got, vec["expect"]))

    total = passed + failed
    print("DTAG VECTORS (table {}): {}/{} PASS".format(version, passed, total))
    for tid, got, exp in failures:
        print("  FAIL {}: got={!r} expected={!r}".format(tid, got, exp))

    sys.exit(1 if failed else 0)


if __name__ == "__main__":
    main()
