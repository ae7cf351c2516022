import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional, TextIO

import requests

from .errors import InputError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def _fetch(url: str, timeout: float) -> str:
    headers = {"Accept": "application/json"}
    try:
        response = requests.get(url, headers=headers, timeout=timeout)
    except requests.RequestException as exc:
        raise InputError(f"Failed to fetch {url}: {exc}") from exc

    if response.status_code >= 400:
        raise InputError(f"Fetching {url} failed with status {response.status_code}.")
    return response.text


def _read_path(source: str) -> str:
    path = Path(source)
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise InputError(f"Cannot read {path}: {exc.strerror or exc}") from exc


def load_json(source: str, *, timeout: float = DEFAULT_TIMEOUT, stdin: Optional[TextIO] = None) -> Any:
    """Load a JSON value from a file path, ``-`` (stdin) or an http(s) URL."""
    if source == "-":
        text = (stdin or sys.stdin).read()
        origin = "<stdin>"
    elif _is_url(source):
        text = _fetch(source, timeout)
        origin = source
    else:
        text = _read_path(source)
        origin = source

    logger.debug("Read %d characters from %s.", len(text), origin)
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise InputError(f"{origin} is not valid JSON: {exc}") from exc
