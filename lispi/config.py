from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List


_DEFAULT_RECURSION_LIMIT = 10_000
_DEFAULT_LOG_LEVEL = 'WARNING'


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    return [Path(p.strip()) for p in raw.split(os.pathsep) if p.strip()]


def get_import_roots() -> List[Path]:
    """Extra directories searched by (import "file") after the working directory."""
    return paths_from_env('LISPI_PATH', [])


def get_recursion_limit() -> int:
    raw = os.environ.get('LISPI_RECURSION_LIMIT')
    if not raw:
        return _DEFAULT_RECURSION_LIMIT
    try:
        limit = int(raw)
    except ValueError:
        return _DEFAULT_RECURSION_LIMIT
    return limit if limit > 0 else _DEFAULT_RECURSION_LIMIT


def get_log_level() -> str:
    return os.environ.get('LISPI_LOG_LEVEL', _DEFAULT_LOG_LEVEL).upper()
