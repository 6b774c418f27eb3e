from __future__ import annotations

import base64
import logging
import secrets
import warnings
from collections.abc import Callable
from pathlib import Path

from .date.clock import now_ms
from .local_paths import PathTraversalError, require_under
from .settings import get_settings

log = logging.getLogger(__name__)


# Random bytes -> text, matching the encodings callers pass by name.
ENCODERS: dict[str, Callable[[bytes], str]] = {
    "hex": bytes.hex,
    "base64": lambda b: base64.b64encode(b).decode("ascii"),
    "base64url": lambda b: base64.urlsafe_b64encode(b).decode("ascii").rstrip("="),
}


def random_file_name(
    original_name: str,
    length: int = 32,
    extension: str | None = None,
    encoding: str = "hex",
) -> str:
    """Return "<epoch ms><length random bytes, encoded><ext>".

    ext is the last suffix of original_name (".gz" for "a.tar.gz", nothing for
    "Makefile" or ".gitignore") unless extension overrides it. encoding is one
    of hex (default), base64 or base64url.
    """
    try:
        encode = ENCODERS[encoding]
    except KeyError:
        raise ValueError(f"Unsupported encoding: {encoding} (expected one of: {', '.join(ENCODERS)})") from None
    ext = extension if extension is not None else Path(original_name).suffix
    return f"{now_ms()}{encode(secrets.token_bytes(length))}{ext}"


def name_file_random(
    original_name: str,
    length: int = 32,
    extension: str | None = None,
    encoding: str = "hex",
) -> str:
    warnings.warn("name_file_random() is deprecated; use random_file_name()", DeprecationWarning, stacklevel=2)
    return random_file_name(original_name, length, extension, encoding)


def create_file(file: str | Path, data: str | bytes, path: str | Path | None = None) -> Path:
    """Write data to file, relative to the base directory path.

    The base directory defaults to UTILKIT_FILES_DIR, else the current
    directory. Missing parent directories are created and an existing file is
    overwritten. Raises PathTraversalError if file resolves outside the base.
    """
    base = Path(path) if path is not None else (get_settings().files_dir or Path.cwd())
    base = base.expanduser().resolve()

    try:
        target = require_under(base / file, base)
    except PathTraversalError:
        log.warning("rejected write outside %s: %s", base, file)
        raise

    target.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(data, str):
        target.write_text(data, encoding="utf-8")
    else:
        target.write_bytes(bytes(data))
    log.debug("wrote %d bytes to %s", target.stat().st_size, target)
    return target
