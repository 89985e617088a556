"""JSON file helpers shared by the stores and the switch operation."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from ccswitch.errors import FileAccessError, ParseError

logger = logging.getLogger(__name__)


def dumps(data: Any) -> str:
    """Serialize the way every ccswitch file is written: 2-space indent."""
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


def read_json(path: Path) -> Any:
    """Parse a JSON file.

    Raises FileAccessError if the file can't be read and ParseError if its
    content is not valid JSON.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise FileAccessError(f"Cannot read {path}: {e.strerror or e}") from e

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseError(f"Invalid JSON in {path}: {e}") from e


def write_json(path: Path, data: Any) -> None:
    """Overwrite path with data, creating parent directories as needed."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(dumps(data), encoding="utf-8")
    except OSError as e:
        raise FileAccessError(f"Cannot write {path}: {e.strerror or e}") from e
    logger.debug("wrote %s", path)


def ensure_json_file(path: Path, default: Any) -> None:
    """Create path holding default if it does not exist yet."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        exists = path.exists()
    except OSError as e:
        raise FileAccessError(f"Cannot access {path.parent}: {e.strerror or e}") from e

    if not exists:
        logger.debug("initializing %s", path)
        write_json(path, default)
