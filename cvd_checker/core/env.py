"""Environment and .env configuration for cvd-tool.

Load order (first wins):
  1. Existing OS environment variables, never overwritten.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Recognised variables:
  CVD_LARGE_TEXT_PT       size in pt from which any text counts as large (default 18)
  CVD_BOLD_LARGE_TEXT_PT  size in pt from which bold text counts as large (default 14)
  CVD_BODY_FONT_PX        body font size used for em/rem/% sizes (default 16)
"""

import os
from pathlib import Path

from cvd_checker.core.policy import ThresholdPolicy

LARGE_TEXT_PT = 'CVD_LARGE_TEXT_PT'
BOLD_LARGE_TEXT_PT = 'CVD_BOLD_LARGE_TEXT_PT'
BODY_FONT_PX = 'CVD_BODY_FONT_PX'


def _find_dotenv(start: Path) -> Path | None:
    """Walk up from start, return first .env found, stop at .git boundary."""
    current = start.resolve()
    while True:
        candidate = current / '.env'
        if candidate.is_file():
            return candidate
        # .git can be a dir (normal clone) or a file (worktree)
        if (current / '.git').exists():
            return None
        if current.parent == current:
            return None
        current = current.parent


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Parse KEY=value lines. Quotes and a leading `export` are stripped."""
    result: dict[str, str] = {}
    for line in path.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, raw_value = line.partition('=')
        key = key.strip()
        if key.startswith('export '):
            key = key[len('export ') :].strip()
        value = raw_value.strip().strip('"').strip("'")
        if key:
            result[key] = value
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Load .env into os.environ for keys not already set.

    Returns the path that was loaded, or None if no .env was found/used.
    """
    if env_file:
        path = Path(env_file)
        if not path.is_file():
            return None
    else:
        path = _find_dotenv(Path.cwd())
        if path is None:
            return None

    for key, value in _parse_dotenv(path).items():
        if key not in os.environ:
            os.environ[key] = value
    return path


def env_float(name: str, default: float) -> float:
    """Read a float from the environment. Unset or empty gives the default."""
    raw = os.environ.get(name, '').strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f'{name}={raw!r} is not a number') from None


def policy_from_env(
    large_pt: float | None = None,
    bold_large_pt: float | None = None,
    body_font_px: float | None = None,
) -> ThresholdPolicy:
    """Build a ThresholdPolicy. Explicit arguments beat environment variables."""
    defaults = ThresholdPolicy()
    return ThresholdPolicy(
        large_pt=large_pt if large_pt is not None else env_float(LARGE_TEXT_PT, defaults.large_pt),
        bold_large_pt=(
            bold_large_pt if bold_large_pt is not None else env_float(BOLD_LARGE_TEXT_PT, defaults.bold_large_pt)
        ),
        body_font_px=body_font_px if body_font_px is not None else env_float(BODY_FONT_PX, defaults.body_font_px),
    )
