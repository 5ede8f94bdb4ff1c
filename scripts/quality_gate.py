"""Run lint, format, type and test checks and report results as JSON.

Usage:
    python scripts/quality_gate.py              # run all, JSON output
    python scripts/quality_gate.py --skip-tests # skip pytest (fast)
    python scripts/quality_gate.py --fix        # auto-fix ruff issues first
"""

from __future__ import annotations

import argparse
import json
import re
import subprocess
import sys
import time
from collections.abc import Callable
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent

MYPY_TARGETS = [
    "anki_connect/api.py",
    "anki_connect/casing.py",
    "anki_connect/dispatcher.py",
    "anki_connect/formatters.py",
    "anki_connect/models.py",
    "anki_connect/exceptions.py",
    "anki_connect/_utils.py",
    "anki_connect/types.py",
    "anki_connect/registry.py",
    "anki_connect/notes_file.py",
]


def _run(*args: str) -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, "-m", *args],
        capture_output=True,
        text=True,
        cwd=str(ROOT),
        timeout=300,
    )


def _check(args: list[str], count: Callable[[str], dict]) -> dict:
    """Run one tool; *count* turns its combined output into summary fields."""
    t0 = time.monotonic()
    r = _run(*args)
    text = r.stdout + r.stderr
    result: dict = {"status": "pass" if r.returncode == 0 else "fail"}
    result.update(count(text))
    result["duration_s"] = round(time.monotonic() - t0, 1)
    if r.returncode != 0:
        result["output"] = text.strip()[-2000:]
    return result


def _count_lines(pattern: str) -> Callable[[str], dict]:
    def count(text: str) -> dict:
        return {"errors": sum(1 for line in text.splitlines() if re.search(pattern, line))}

    return count


def _pytest_summary(text: str) -> dict:
    passed = failed = 0
    for line in reversed(text.strip().splitlines()):
        m_passed = re.search(r"(\d+)\s+passed", line)
        m_failed = re.search(r"(\d+)\s+failed", line)
        if m_passed or m_failed:
            passed = int(m_passed.group(1)) if m_passed else 0
            failed = int(m_failed.group(1)) if m_failed else 0
            break
    return {"passed": passed, "failed": failed}


def main() -> None:
    parser = argparse.ArgumentParser(description="Run all quality checks")
    parser.add_argument("--skip-tests", action="store_true", help="Skip pytest")
    parser.add_argument("--fix", action="store_true", help="Auto-fix ruff issues first")
    args = parser.parse_args()

    t0 = time.monotonic()
    if args.fix:
        _run("ruff", "check", "--fix", ".")

    checks: dict[str, dict] = {}
    print("Running ruff lint...", file=sys.stderr)
    checks["ruff_lint"] = _check(["ruff", "check", "."], _count_lines(r"^\S+:\d+:\d+:"))
    print("Running ruff format...", file=sys.stderr)
    checks["ruff_format"] = _check(
        ["ruff", "format", "--check", "."], _count_lines(r"^Would reformat")
    )
    print("Running mypy...", file=sys.stderr)
    checks["mypy"] = _check(["mypy", *MYPY_TARGETS], _count_lines(r": error:"))
    if args.skip_tests:
        checks["pytest"] = {"status": "skip", "reason": "--skip-tests"}
    else:
        print("Running pytest...", file=sys.stderr)
        checks["pytest"] = _check(
            ["pytest", "tests/", "-q", "--no-header", "--tb=short"], _pytest_summary
        )

    overall = "pass" if all(c["status"] in ("pass", "skip") for c in checks.values()) else "fail"
    print(
        json.dumps(
            {
                "overall": overall,
                "checks": checks,
                "total_duration_s": round(time.monotonic() - t0, 1),
            },
            indent=2,
        )
    )
    sys.exit(0 if overall == "pass" else 1)


if __name__ == "__main__":
    main()
