#!/usr/bin/env python3
"""
Run the nameparts CI steps locally in the ACTIVE virtual environment.

Steps:
  1) uv sync --all-extras [--frozen if uv.lock exists]
  2) black --check on the package, tests and scripts
  3) mypy on the package
  4) pytest with coverage
  5) optional tokenizer timing (--perf)
"""

import argparse
import os
import shutil
import subprocess
import sys
from pathlib import Path

PACKAGE = "nameparts"
LINE_LENGTH = "120"


def repo_root() -> Path:
    here = Path(__file__).resolve().parent
    for d in [here] + list(here.parents):
        if (d / "pyproject.toml").exists():
            return d
    return here


REPO = repo_root()


def uv_exe() -> list[str]:
    uv_path = shutil.which("uv")
    if uv_path:
        return [uv_path]
    print("ERROR: 'uv' not found. Install uv first.", file=sys.stderr)
    sys.exit(2)


def run(cmd: list[str], *, env: dict[str, str] | None = None) -> None:
    print(">>>", " ".join(cmd))
    subprocess.run(cmd, check=True, cwd=str(REPO), env=env)


def uv_run(args: list[str], *, env: dict[str, str] | None = None) -> None:
    run(uv_exe() + ["run", "--active"] + args, env=env)


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--perf", action="store_true", help="also time the tokenizer")
    parser.add_argument("--skip-sync", action="store_true", help="do not sync dependencies first")
    args = parser.parse_args()

    if not args.skip_sync:
        sync_args = ["sync", "--active", "--all-extras"]
        if (REPO / "uv.lock").exists():
            sync_args.append("--frozen")
        run(uv_exe() + sync_args)

    uv_run(["black", PACKAGE, "tests", "scripts", "--check", "--line-length", LINE_LENGTH])
    uv_run(["mypy", PACKAGE, "--ignore-missing-imports"])

    env = os.environ.copy()
    env["PYTHONPATH"] = str(REPO)
    uv_run(
        [
            "pytest",
            "tests/",
            f"--cov={PACKAGE}",
            "--cov-report=term-missing",
            "--cov-fail-under=80",
        ],
        env=env,
    )

    if args.perf:
        uv_run(["python", "-m", f"{PACKAGE}.name_parts"], env=env)

    print("\nALL CHECKS PASSED")


if __name__ == "__main__":
    try:
        main()
    except subprocess.CalledProcessError as e:
        print(f"\nCommand failed with exit code {e.returncode}", file=sys.stderr)
        sys.exit(e.returncode)
