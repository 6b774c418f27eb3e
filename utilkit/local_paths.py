from __future__ import annotations

from pathlib import Path


class PathTraversalError(ValueError):
    """A path resolved outside the directory it was meant to stay in."""


def _normalize(path: Path, *, resolve_symlinks: bool) -> Path:
    p = path.expanduser()
    return p.resolve() if resolve_symlinks else p.absolute()


def is_under(path: Path, root: Path, *, resolve_symlinks: bool = True) -> bool:
    """Return True if path is root itself or lies below it.

    With resolve_symlinks=False the comparison is lexical, so a symlink under
    root is accepted even if it points elsewhere.
    """
    p = _normalize(Path(path), resolve_symlinks=resolve_symlinks)
    r = _normalize(Path(root), resolve_symlinks=resolve_symlinks)
    return p.is_relative_to(r)


def require_under(
    path: Path,
    root: Path,
    *,
    hint: str | None = None,
    resolve_symlinks: bool = True,
) -> Path:
    """Return the normalized path, raising PathTraversalError unless it is under root."""
    p = _normalize(Path(path), resolve_symlinks=resolve_symlinks)
    r = _normalize(Path(root), resolve_symlinks=resolve_symlinks)

    if not p.is_relative_to(r):
        msg = f"Path traversal detected: {p} is outside {r}"
        if hint:
            msg += "\n" + str(hint)
        raise PathTraversalError(msg)

    return p
