#!/usr/bin/env python3
# tools/invariants_runner.py
#
# Randomized invariant checks for the DTAG table.
#
# This runner:
# - probes the shared table with random codes and names (hits and misses)
# - checks round trip, exact-match misses, and rebuild determinism
# - repeats the same probe sequence from several threads and compares
# - corrupts random copies of the table and checks the DictError code
#
# Exit code:
#   0 -> all checks passed
#   1 -> invariant violation

import os, sys, random, string, threading
from typing import Any, List, Optional, Tuple

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
sys.path.insert(0, ROOT)

import ccndtag
from ccndtag import DTAG_DICT, DTAG_ENTRIES, DictError, build

SEED = int(os.environ.get("DTAG_SEED", "1337"))
TRIALS = int(os.environ.get("DTAG_TRIALS", "2000"))
THREADS = int(os.environ.get("DTAG_THREADS", "8"))
MAX_NAME = int(os.environ.get("DTAG_GEN_MAX_NAME", "32"))

random.seed(SEED)

CODES = [c for c, _ in DTAG_ENTRIES]
NAMES = [n for _, n in DTAG_ENTRIES]

def fail(msg: str, ctx: Any = None) -> None:
    print("INVARIANT FAIL:", msg)
    if ctx is not None:
        print("CTX:", repr(ctx)[:2000])
    raise SystemExit(1)

def rand_name() -> str:
    r = random.random()
    if r < 0.30:
        return random.choice(NAMES)
    if r < 0.50:
        # near miss: flip the case of one letter
        n = random.choice(NAMES)
        i = random.randrange(len(n))
        return n[:i] + n[i].swapcase() + n[i + 1:]
    if r < 0.65:
        n = random.choice(NAMES)
        return n[:random.randrange(len(n))]
    if r < 0.75:
        return chr(random.randint(0xA0, 0x10FFF)) + random.choice(NAMES)
    k = random.randint(0, MAX_NAME)
    return "".join(random.choice(string.ascii_letters) for _ in range(k))

def rand_code() -> int:
    r = random.random()
    if r < 0.40:
        return random.choice(CODES)
    if r < 0.70:
        return random.randint(-4, 80)
    return random.randint(-(2**40), 2**40)

def probe_sequence(n: int) -> List[Tuple[str, Any]]:
    ops = []
    for _ in range(n):
        if random.random() < 0.5:
            ops.append(("name_for", rand_code()))
        else:
            ops.append(("code_for", rand_name()))
    return ops

def run_ops(d: ccndtag.TagDict, ops: List[Tuple[str, Any]]) -> List[Optional[Any]]:
    return [getattr(d, op)(arg) for op, arg in ops]

def check_lookup(op: str, arg: Any, got: Any) -> None:
    if op == "name_for":
        want = dict(DTAG_ENTRIES).get(arg)
    else:
        want = {n: c for c, n in DTAG_ENTRIES}.get(arg)
    if got != want:
        fail("{}({!r}) = {!r}, expected {!r}".format(op, arg, got, want))

def corrupt(entries: List[Tuple[int, str]]) -> Tuple[List[Any], str]:
    """Break one thing in a copy of the table.  Returns (entries, expected code)."""
    out: List[Any] = list(entries)
    i, j = random.sample(range(len(out)), 2)
    kind = random.choice(["dup_code", "dup_name", "bad_code", "bad_name", "bad_entry"])
    if kind == "dup_code":
        out[j] = (out[i][0], out[j][1])
        return out, ccndtag.ERR_DUP_CODE
    if kind == "dup_name":
        out[j] = (out[j][0], out[i][1])
        return out, ccndtag.ERR_DUP_NAME
    if kind == "bad_code":
        out[j] = (random.choice([-1, "14", 1.5, None, True]), out[j][1])
        return out, ccndtag.ERR_BAD_CODE
    if kind == "bad_name":
        out[j] = (out[j][0], random.choice(["", "Name1", "Näme", "Key Name"]))
        return out, ccndtag.ERR_BAD_NAME
    out[j] = out[j][:1]
    return out, ccndtag.ERR_BAD_ENTRY

def main() -> int:
    # (1) round trip over every entry
    for code, name in DTAG_ENTRIES:
        if DTAG_DICT.name_for(code) != name or DTAG_DICT.code_for(name) != code:
            fail("round trip", (code, name))

    # (2) random probes agree with a plain-dict reference
    ops = probe_sequence(TRIALS)
    sequential = run_ops(DTAG_DICT, ops)
    for (op, arg), got in zip(ops, sequential):
        check_lookup(op, arg, got)

    # (3) rebuild determinism
    if run_ops(build(DTAG_ENTRIES), ops) != sequential:
        fail("rebuild determinism")

    # (4) concurrent readers see exactly the sequential results
    results: List[Optional[List[Any]]] = [None] * THREADS
    barrier = threading.Barrier(THREADS)

    def reader(slot: int) -> None:
        barrier.wait()
        results[slot] = run_ops(DTAG_DICT, ops)

    threads = [threading.Thread(target=reader, args=(i,)) for i in range(THREADS)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    for slot, got in enumerate(results):
        if got != sequential:
            fail("concurrent read mismatch", {"thread": slot})

    # (5) corrupted tables are rejected with the right code
    for t in range(TRIALS // 10):
        bad, want = corrupt(list(DTAG_ENTRIES))
        try:
            build(bad)
        except DictError as e:
            if e.code != want:
                fail("corruption reported {} expected {}".format(e.code, want), {"trial": t})
        else:
            fail("corrupted table accepted", {"trial": t})

    print(f"OK: invariants passed for TRIALS={TRIALS} THREADS={THREADS} seed={SEED}")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
