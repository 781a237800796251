from __future__ import annotations

import re
import secrets
import time
from typing import Callable, Optional

ALLOWED_EXTENSIONS = frozenset({"jpg", "jpeg", "png", "gif", "webp", "svg"})
DEFAULT_PLACEHOLDER = "file"
DEFAULT_MAX_BASE_LENGTH = 100
SUFFIX_RANGE = 10**9

# Anything outside the allow-list is dropped, separators and control bytes included.
_DISALLOWED_CHARS = re.compile(r"[^A-Za-z0-9_@\- ]")
_WHITESPACE_RUN = re.compile(r"\s+")
_PATH_SEPARATORS = re.compile(r"[/\\]")


def _millis() -> int:
    return time.time_ns() // 1_000_000


def _random_suffix() -> int:
    return secrets.randbelow(SUFFIX_RANGE)


def split_extension(name: str) -> tuple[str, str]:
    """Split on the last dot; the extension is lower-cased and empty when absent."""
    base, dot, ext = name.rpartition(".")
    if not dot:
        return name, ""
    return base, ext.lower()


def clean_base(base: str, max_length: int = DEFAULT_MAX_BASE_LENGTH) -> str:
    base = _DISALLOWED_CHARS.sub("", base).strip()
    base = _WHITESPACE_RUN.sub("-", base).strip("-")
    return base[:max_length].rstrip("-")


def sanitize_filename(
    original_name: Optional[str],
    *,
    clock: Optional[Callable[[], int]] = None,
    suffix: Optional[Callable[[], int]] = None,
    placeholder: str = DEFAULT_PLACEHOLDER,
    max_base_length: int = DEFAULT_MAX_BASE_LENGTH,
    allowed_extensions: frozenset[str] = ALLOWED_EXTENSIONS,
) -> str:
    """
    Map an untrusted client filename to a safe, unique stored filename.

    Output shape is ``<base>-<millis>-<suffix>[.<ext>]``. Only the last path
    component of the input is considered, the extension is kept (lower-cased)
    only when it is a known image extension, and the base is reduced to
    ASCII letters, digits, ``-``, ``_`` and ``@``. Empty or missing names fall
    back to ``placeholder``. Never raises for any input.

    Args:
        original_name: Filename as sent by the client (may be None)
        clock: Callable returning milliseconds since the epoch
        suffix: Callable returning the disambiguating integer
        placeholder: Base name used when nothing usable remains

    Returns:
        Stored filename string
    """
    name = original_name if isinstance(original_name, str) else ""
    name = _PATH_SEPARATORS.split(name)[-1].strip()

    base, ext = split_extension(name)
    if ext not in allowed_extensions:
        ext = ""

    safe_placeholder = clean_base(placeholder, max_base_length) or DEFAULT_PLACEHOLDER
    base = clean_base(base, max_base_length) or safe_placeholder

    stamp = int((clock or _millis)())
    token = int((suffix or _random_suffix)())
    stored = f"{base}-{abs(stamp)}-{abs(token)}"
    return f"{stored}.{ext}" if ext else stored
