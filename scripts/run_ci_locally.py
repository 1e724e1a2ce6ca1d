#!/usr/bin/env python3
"""
Run CI steps locally using the ACTIVE virtual environment.

Order (matches CI):
  1) uv sync --all-extras [--frozen if uv.lock exists]  (ACTIVE venv)
  2) black checks via uvx --from black==24.8.0 ...
  3) mypy on the petrovich package and scripts
  4) pytest tests/ with coverage and PYTHONPATH=.

Commands always run from the repo root (the directory holding pyproject.toml).
"""

import os
import sys
import shutil
import subprocess
from pathlib import Path

PACKAGE = "petrovich"
BLACK_VERSION = "24.8.0"
LINE_LENGTH = "120"
COVERAGE_FLOOR = "80"


def which(cmd: str) -> str | None:
    return shutil.which(cmd)


def uv_exe() -> list[str]:
    uv_path = which("uv")
    if uv_path:
        return [uv_path]
    try:
        import uv  # noqa: F401
    except ImportError:
        print("ERROR: 'uv' not found. Install uv first.", file=sys.stderr)
        sys.exit(2)
    return [sys.executable, "-m", "uv"]


def repo_root() -> Path:
    here = Path(__file__).resolve().parent
    for d in [here] + list(here.parents):
        if (d / "pyproject.toml").exists():
            return d
    return here


REPO = repo_root()


def run(cmd: list[str], *, env: dict[str, str] | None = None) -> None:
    print(">>>", " ".join(cmd))
    subprocess.run(cmd, check=True, cwd=str(REPO), env=env)


def script_paths() -> list[str]:
    return [str(p.relative_to(REPO)) for p in sorted((REPO / "scripts").glob("*.py"))]


def run_black_on(paths: list[str]) -> None:
    uvx_path = which("uvx")
    if uvx_path:
        run([uvx_path, "--from", f"black=={BLACK_VERSION}", "black", *paths, "--check", "--line-length", LINE_LENGTH])
        return
    run([sys.executable, "-m", "black", *paths, "--check", "--line-length", LINE_LENGTH])


def main() -> None:
    # 1) Sync deps into ACTIVE venv
    sync_args = ["sync", "--active", "--all-extras"]
    if (REPO / "uv.lock").exists():
        sync_args.append("--frozen")
    run(uv_exe() + sync_args)

    # 2) Black checks
    run_black_on([PACKAGE, "tests", *script_paths()])

    # 3) mypy
    run(uv_exe() + ["run", "--active", "mypy", PACKAGE, *script_paths(), "--ignore-missing-imports"])

    # 4) pytest with coverage, PYTHONPATH=.
    env = os.environ.copy()
    env["PYTHONPATH"] = str(REPO)
    run(
        uv_exe()
        + [
            "run",
            "--active",
            "pytest",
            "tests/",
            f"--cov={PACKAGE}",
            "--cov-report=term-missing",
            f"--cov-fail-under={COVERAGE_FLOOR}",
        ],
        env=env,
    )

    print("\nALL CHECKS PASSED")


if __name__ == "__main__":
    try:
        main()
    except subprocess.CalledProcessError as e:
        print(f"\nCommand failed with exit code {e.returncode}", file=sys.stderr)
        sys.exit(e.returncode)
