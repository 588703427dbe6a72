#!/usr/bin/env python3
from __future__ import annotations

import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]


def run(cmd: list[str]) -> int:
    print("$", " ".join(cmd))
    return subprocess.run(cmd, cwd=ROOT, check=False).returncode


def main() -> int:
    verbosity = ["-v"] if "-v" in sys.argv[1:] else []
    code = run([sys.executable, "-m", "unittest", "discover", "-s", "tests", "-p", "test_*.py", *verbosity])
    if code != 0:
        print("\n❌ dev_check failed")
        return code

    code = run([sys.executable, "-m", "app.perfectgrid.main", "--rows", "1", "1", "1", "1", "1", "--width", "800", "--gap", "0"])
    if code != 0:
        print("\n❌ CLI smoke run failed")
        return code

    print("\n✅ dev_check passed")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
