#!/usr/bin/env python3
"""Scanner Integrity Fuzzer (Atheris).

Targets: hashtaglex.syntax.scanner, hashtaglex.syntax.synthesizer,
hashtaglex.matcher.HashtagPattern
Checks scan invariants on arbitrary text (lone surrogates included) and the
synthesize-then-scan round trip for every recovered hashtag text.
"""

from __future__ import annotations

import atexit
import json
import logging
import os
import sys

# --- PEP 695 Type Aliases ---
type FuzzStats = dict[str, int | str | float]

_fuzz_stats: FuzzStats = {"status": "incomplete", "iterations": 0, "findings": 0}

# RSS is sampled every this many iterations.
_MEMORY_SAMPLE_INTERVAL = 100

def _emit_final_report() -> None:
    report = json.dumps(_fuzz_stats)
    print(f"\n[SUMMARY-JSON-BEGIN]{report}[SUMMARY-JSON-END]", file=sys.stderr)

atexit.register(_emit_final_report)

try:
    import atheris
    import psutil
except ImportError:
    sys.exit(1)

_process = psutil.Process(os.getpid())

logging.getLogger("hashtaglex").setLevel(logging.CRITICAL)

with atheris.instrument_imports(include=["hashtaglex"]):
    from hashtaglex import (
        ANGLE_TERMINATED_CONFIG,
        DEFAULT_CONFIG,
        DOUBLING_CONFIG,
        LEGACY_CONFIG,
        HashtagConfig,
        HashtagPattern,
        create_hashtag,
        find_all,
        find_first,
    )

_CONFIGS = (
    DEFAULT_CONFIG,
    LEGACY_CONFIG,
    DOUBLING_CONFIG,
    ANGLE_TERMINATED_CONFIG,
    HashtagConfig(escaped_angle_opens_wrapped=True),
)


def _finding(msg: str) -> None:
    raise RuntimeError(msg)


def test_one_input(data: bytes) -> None:
    """Atheris entry point: Test scanning, synthesis and cursor agreement."""
    _fuzz_stats["iterations"] = int(_fuzz_stats["iterations"]) + 1
    _fuzz_stats["status"] = "running"

    if int(_fuzz_stats["iterations"]) % _MEMORY_SAMPLE_INTERVAL == 0:
        rss_mb = round(_process.memory_info().rss / (1024 * 1024), 2)
        _fuzz_stats["memory_peak_mb"] = max(float(_fuzz_stats.get("memory_peak_mb", 0.0)), rss_mb)

    fdp = atheris.FuzzedDataProvider(data)

    try:
        config = _CONFIGS[fdp.ConsumeIntInRange(0, len(_CONFIGS) - 1)]
        text = fdp.ConsumeUnicode(1024)

        # 1. Scan invariants
        matches = find_all(text, config=config)
        previous_end = 0
        for m in matches:
            if m.start < previous_end or m.end <= m.start:
                _finding(f"Overlapping or empty span {m.span} after {previous_end}")
            if m.raw != text[m.start : m.end]:
                _finding(f"raw {m.raw!r} does not slice text at {m.span}")
            if not m.text:
                _finding(f"Empty hashtag text at {m.span}")
            previous_end = m.end

        # 2. find_first is the head of find_all
        first = find_first(text, config=config)
        if first != (matches[0] if matches else None):
            _finding(f"find_first {first!r} disagrees with find_all")

        # 3. A global pattern visits the same hashtags
        pattern = HashtagPattern(global_=True, config=config)
        visited = [r.index for r in iter(lambda: pattern.exec(text), None)]
        if visited != [m.start for m in matches]:
            _finding(f"Global exec visited {visited}, expected {[m.start for m in matches]}")

        # 4. Round trip of every recovered text
        for m in matches:
            created = create_hashtag(m.text, config=config)
            again = find_first(created, config=config)
            if again is None or again.text != m.text or again.end != len(created):
                _finding(f"Round trip failed for {m.text!r}: {created!r} -> {again!r}")

    except Exception:
        _fuzz_stats["findings"] = int(_fuzz_stats["findings"]) + 1
        raise

if __name__ == "__main__":
    atheris.Setup(sys.argv, test_one_input)
    atheris.Fuzz()
