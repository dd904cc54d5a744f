#!/usr/bin/env python
"""
Local CI gate for TernaryTreeLib
================================

Runs the same checks as the CI workflow, in the same order, from the
project root:

1. The package imports and reports the version declared in setup.py
2. The fast test suite passes (``run_tests.py``)
3. flake8 finds no syntax errors or undefined names in the package or tests
4. setup.py builds an sdist and a wheel (``python -m build``)

The tools come with the development extra: ``pip install -e .[dev]``.

Usage:
    python scripts/test-ci.py            # Every check
    python scripts/test-ci.py --no-build # Skip the package build
"""

import argparse
import re
import subprocess
import sys
import tempfile
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent

# Errors that break CI: syntax errors, invalid comparisons, undefined names
FLAKE8_SELECT = "E9,F63,F7,F82"


def run_check(description, cmd):
    """Run one gate command from the project root.

    Returns:
        Completed process; ``returncode`` 0 means the check passed
    """
    print(f"\n[Check] {description}")
    print(f"  Command: {' '.join(cmd)}")

    result = subprocess.run(cmd, cwd=PROJECT_ROOT, capture_output=True, text=True)

    if result.returncode == 0:
        print("  PASSED")
    else:
        print("  FAILED")
        output = (result.stdout + result.stderr).strip()
        if output:
            print("  " + output[-1500:].replace("\n", "\n  "))

    return result


def declared_version():
    """Version string passed to setup() in setup.py, or None."""
    text = (PROJECT_ROOT / "setup.py").read_text()
    match = re.search(r'version\s*=\s*["\']([^"\']+)["\']', text)
    return match.group(1) if match else None


def check_import():
    result = run_check(
        "Package imports",
        [sys.executable, "-c", "import ternarytreelib; print(ternarytreelib.__version__)"],
    )
    if result.returncode != 0:
        print("  Fix: every module under ternarytreelib/ must import cleanly")
        return False

    imported = result.stdout.strip()
    expected = declared_version()
    if imported != expected:
        print(f"  FAILED - ternarytreelib.__version__ is {imported!r}, "
              f"setup.py declares {expected!r}")
        return False

    return True


def check_tests():
    result = run_check("Fast test suite", [sys.executable, "run_tests.py"])
    if result.returncode != 0:
        print("  Fix: run 'python run_tests.py' and debug the failures")
    return result.returncode == 0


def check_flake8():
    result = run_check(
        "flake8 (syntax errors and undefined names)",
        [sys.executable, "-m", "flake8", "ternarytreelib", "tests",
         "--count", f"--select={FLAKE8_SELECT}", "--show-source", "--statistics"],
    )
    if result.returncode != 0:
        print("  Fix: install the dev extra, then fix the reported lines")
    return result.returncode == 0


def check_build():
    with tempfile.TemporaryDirectory() as outdir:
        result = run_check(
            "Build sdist and wheel from setup.py",
            [sys.executable, "-m", "build", "--sdist", "--wheel", "--outdir", outdir],
        )
        if result.returncode != 0:
            print("  Fix: install the dev extra (it provides 'build') and check setup.py")
            return False

        built = sorted(path.name for path in Path(outdir).iterdir())

    print(f"  Built: {', '.join(built)}")
    return any(name.endswith(".whl") for name in built)


def main():
    parser = argparse.ArgumentParser(description="Run the CI checks locally")
    parser.add_argument("--no-build", action="store_true",
                        help="Skip building the sdist and wheel")
    args = parser.parse_args()

    print("=" * 60)
    print("TERNARYTREELIB CI GATE")
    print("=" * 60)

    checks = [check_import, check_tests, check_flake8]
    if not args.no_build:
        checks.append(check_build)

    failed = [check.__name__ for check in checks if not check()]

    print("\n" + "=" * 60)
    if failed:
        print(f"FAILURE: {len(failed)} of {len(checks)} checks failed "
              f"({', '.join(failed)})")
    else:
        print(f"SUCCESS: all {len(checks)} checks passed")
    print("=" * 60)

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
