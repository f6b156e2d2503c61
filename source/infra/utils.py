from __future__ import annotations

import os
from pathlib import Path
from typing import Any


def env_or(name: str, default: Any) -> Any:
    value = os.getenv(name)
    return value if (value is not None and str(value).strip() != "") else default


def as_bool(value: Any, default: bool = False) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in {"1", "true", "yes", "on", "y"}


def parse_list(raw: Any) -> list[str]:
    """Accept a YAML list or a ``,``/``;`` separated string; drop blanks and duplicates."""
    if not raw:
        return []
    parts = raw if isinstance(raw, (list, tuple)) else str(raw).replace(",", ";").split(";")
    out: list[str] = []
    seen: set[str] = set()
    for part in parts:
        item = str(part).strip()
        if not item or item in seen:
            continue
        seen.add(item)
        out.append(item)
    return out


def expand_glob(base_dir: Path, pattern: str) -> list[str]:
    """
    Expand ``pattern`` the way a POSIX shell in ``base_dir`` would: matches
    come back sorted, absolute patterns keep absolute matches, relative ones
    stay relative, and a pattern with no match is passed through unchanged.
    """
    path = Path(pattern)
    if path.is_absolute():
        anchor = Path(path.anchor)
        found = (str(match) for match in anchor.glob(str(path.relative_to(anchor))) if match.is_file())
    else:
        found = (match.relative_to(base_dir).as_posix() for match in base_dir.glob(pattern) if match.is_file())
    return sorted(found) or [pattern]
