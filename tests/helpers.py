"""Shared test helpers."""

import subprocess
from pathlib import Path


def git(cwd: Path, *args: str) -> str:
    """Run a git command for test setup."""
    result = subprocess.run(
        ["git", *args], cwd=cwd, capture_output=True, text=True, check=True
    )
    return result.stdout.strip()
