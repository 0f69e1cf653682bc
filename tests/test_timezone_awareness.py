from __future__ import annotations

import re
from datetime import timezone
from pathlib import Path

import pytest

from time_ms_conversions import epoch_ms_to_utc, parse_dt_str_to_utc

PACKAGE_DIR = Path(__file__).resolve().parent.parent / "src" / "time_ms_conversions"

# Calls that yield naive datetimes from the clock or from an epoch value.
NAIVE_CLOCK_CALLS = re.compile(r"datetime\.(utcnow|utcfromtimestamp)\(|datetime\.now\(\s*\)")


@pytest.mark.parametrize("py_file", sorted(PACKAGE_DIR.rglob("*.py")), ids=lambda p: p.name)
def test_package_reads_clock_with_timezone(py_file):
    hits = [
        f"{py_file.name}:{i}: {line.strip()}"
        for i, line in enumerate(py_file.read_text(encoding="utf-8").splitlines(), start=1)
        if NAIVE_CLOCK_CALLS.search(line)
    ]
    assert not hits, "naive clock reads:\n" + "\n".join(hits)


def test_utc_results_are_timezone_aware():
    assert epoch_ms_to_utc(-1).tzinfo is timezone.utc
    assert parse_dt_str_to_utc("2022-01-02 03:04:05").tzinfo is timezone.utc
    assert parse_dt_str_to_utc("2022-01-02 03:04:05-05:00").tzinfo is timezone.utc
