from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional

from lispi.config import get_import_roots
from lispi.errors import LispiImportError

logger = logging.getLogger(__name__)


# Map an (import "file") argument onto a file underneath a set of roots

def resolve_module(filename: str) -> Optional[Path]:
    path = Path(filename)
    if path.is_absolute():
        return path if path.is_file() else None
    for root in [Path.cwd(), *get_import_roots()]:
        candidate = root / path
        if candidate.is_file():
            return candidate
    return None


def read_module(filename: str) -> str:
    p = resolve_module(filename)
    if p is None:
        raise LispiImportError(f"Can't find file '{filename}' in the working directory or LISPI_PATH")
    logger.debug("importing %s from %s", filename, p)
    try:
        return p.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise LispiImportError(f"Can't read file {filename}, error: {e}") from e
