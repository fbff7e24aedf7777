"""Configuration for chart-checker: .env loading and project root resolution.

Project root, first wins:
  1. --root on the command line.
  2. CHART_CHECKER_ROOT from the environment (or a loaded .env).
  3. The current working directory.

.env lookup: --env-file if given, otherwise the nearest .env walking up
from cwd. The walk stops at .git so a .env outside the repo is never read.
Variables already in os.environ are never overwritten. A relative
CHART_CHECKER_ROOT read from a .env is relative to that file's directory.
"""

import os
from pathlib import Path

ROOT_ENV_VAR = 'CHART_CHECKER_ROOT'


def find_dotenv(start: Path) -> Path | None:
    """Return the nearest .env at or above start, stopping at a .git boundary."""
    for directory in (start.resolve(), *start.resolve().parents):
        candidate = directory / '.env'
        if candidate.is_file():
            return candidate
        # .git is a dir in a normal clone and a file in a worktree
        if (directory / '.git').exists():
            return None
    return None


def parse_dotenv(text: str) -> dict[str, str]:
    """Parse KEY=value lines; values may be wrapped in single or double quotes."""
    values: dict[str, str] = {}
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, value = line.partition('=')
        key = key.strip()
        if key:
            values[key] = value.strip().strip('"').strip("'")
    return values


def load_env(env_file: str | None = None) -> tuple[Path | None, set[str]]:
    """Load a .env into os.environ for keys not already set.

    A relative CHART_CHECKER_ROOT is taken relative to the .env's directory.
    Returns the path that was read (or None) and the keys it actually set.
    """
    path = Path(env_file) if env_file else find_dotenv(Path.cwd())
    if path is None or not path.is_file():
        return None, set()

    applied: set[str] = set()
    for key, value in parse_dotenv(path.read_text(encoding='utf-8')).items():
        if key in os.environ:
            continue
        if key == ROOT_ENV_VAR and value:
            value = str(path.resolve().parent / value)
        os.environ[key] = value
        applied.add(key)
    return path, applied


def resolve_root(cli_root: str | None = None) -> Path:
    if cli_root:
        return Path(cli_root)
    configured = os.environ.get(ROOT_ENV_VAR)
    if configured:
        return Path(configured)
    return Path.cwd()
