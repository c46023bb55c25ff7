"""
common/io_utils.py
------------------
Logging and JSON file helpers shared by the roomscan stages
(capture, spatial, design_request) and the CLI.
"""

import os
import json
import logging
from pathlib import Path
from typing import Any, Dict, Union, Optional


LOGGER_NAME = "roomscan"

# log() level tags → logging levels; "OK" marks a finished step
LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "OK": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


# -------------------------------------------------------
# Logging utilities
# -------------------------------------------------------

def resolve_log_level(level: Union[int, str]) -> int:
    """Accepts a logging constant or a name such as "debug"; unknown names → INFO."""
    if isinstance(level, int):
        return level
    return LEVELS.get(str(level).strip().upper(), logging.INFO)


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[str] = None
) -> None:
    """Configure root logging to stderr, plus `log_file` when given."""
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(
        level=resolve_log_level(level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


def log(message: str, level: str = "INFO") -> None:
    """Emit `message` on the roomscan logger using a LEVELS tag."""
    logging.getLogger(LOGGER_NAME).log(LEVELS.get(level, logging.INFO), message)


# -------------------------------------------------------
# JSON / file utilities
# -------------------------------------------------------

def read_json(filepath: Union[str, Path]) -> Dict[str, Any]:
    if not os.path.exists(filepath):
        raise FileNotFoundError(f"JSON file not found: {filepath}")
    with open(filepath, "r", encoding="utf-8") as f:
        return json.load(f)


def write_json(
    data: Dict[str, Any],
    filepath: Union[str, Path],
    pretty: bool = True
) -> str:
    """Write UTF-8 JSON, creating parent directories; returns the path written."""
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2 if pretty else None, ensure_ascii=False)
    return str(path)


def write_outputs(outputs: Dict[str, Dict[str, Any]], out_dir: Union[str, Path]) -> Dict[str, str]:
    """Write each named document to `<out_dir>/<name>.json`; returns name → path."""
    written = {name: write_json(doc, Path(out_dir) / f"{name}.json") for name, doc in outputs.items()}
    log(f"💾 Wrote {len(written)} file(s) to {out_dir}", "OK")
    return written
