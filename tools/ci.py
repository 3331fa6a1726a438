#!/usr/bin/env python3
# Copyright 2026 Yangen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run the CI checks locally: format, lint, type check, tests, doctests and build.

Pass step names to run a subset, e.g. ``tools/ci.py Lint Tests``.
"""

import pathlib
import subprocess
import sys
import time

from yachalk import chalk

# ###############
# Public Interface
# ###############

SOURCES = ["src/", "tests/", "tools/"]

STEPS: list[tuple[str, list[str]]] = [
    ("Format", ["uv", "run", "ruff", "format", "--check", *SOURCES]),
    ("Lint", ["uv", "run", "ruff", "check", *SOURCES]),
    ("Types", ["uv", "run", "ty", "check", "src/"]),
    ("Tests", ["uv", "run", "pytest", "--cov=yangen", "--cov-report=term-missing"]),
    ("Doctests", ["uv", "run", "pytest", "--doctest-modules", "src/yangen/codegen/naming.py"]),
    ("Build", ["uv", "build"]),
]


def main(argv: list[str]) -> int:
    """Run the selected CI steps (all by default) and print a summary."""
    selected = [(name, cmd) for name, cmd in STEPS if not argv or name in argv]
    unknown = sorted(set(argv) - {name for name, _ in STEPS})
    if unknown:
        print(chalk.red(f"Unknown step(s): {', '.join(unknown)}"))
        return 2

    results = [_run_step(name, cmd) for name, cmd in selected]
    _print_banner("Summary")
    for name, passed, elapsed in results:
        colour = chalk.green if passed else chalk.red
        print(colour(f"  {'PASS' if passed else 'FAIL'}  {name} ({elapsed:.1f}s)"))
    print()
    return 0 if all(passed for _, passed, _ in results) else 1


# ################
# Implementation
# ################

_REPO_ROOT = pathlib.Path(__file__).resolve().parent.parent


def _run_step(name: str, cmd: list[str]) -> tuple[str, bool, float]:
    _print_banner(name)
    start = time.monotonic()
    proc = subprocess.run(cmd, cwd=_REPO_ROOT)
    return name, proc.returncode == 0, time.monotonic() - start


def _print_banner(title: str) -> None:
    sep = chalk.blue("=" * 60)
    print(f"\n{sep}")
    print(chalk.blue(f"  {title}"))
    print(sep)


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
