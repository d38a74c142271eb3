"""Lexical handling of remote paths, which always use forward slashes."""

from __future__ import annotations

_SEP = "/"
_CURRENT = "."
_PARENT = ".."


def _lexically_normal(path: str) -> str:
    """Collapse separators and resolve ``.`` and ``..`` without touching any filesystem."""
    if not path:
        return ""
    absolute = path.startswith(_SEP)
    components = [part for part in path.split(_SEP) if part]
    trailing = path.endswith(_SEP) and bool(components)

    stack: list[str] = []
    last_index = len(components) - 1
    for index, part in enumerate(components):
        is_last = index == last_index
        if part == _CURRENT:
            if is_last:
                trailing = True
            continue
        if part == _PARENT:
            if stack and stack[-1] != _PARENT:
                stack.pop()
                if is_last:
                    trailing = True
            elif not absolute:
                stack.append(part)
            elif is_last:
                trailing = True
            continue
        stack.append(part)

    if stack and stack[-1] == _PARENT:
        trailing = False

    result = (_SEP if absolute else "") + _SEP.join(stack)
    if stack and trailing:
        result += _SEP
    return result or _CURRENT


def _append(base: str, tail: str) -> str:
    """Join two paths the way a path ``/`` operator does."""
    if tail.startswith(_SEP) or not base:
        return tail
    if base.endswith(_SEP):
        return base + tail
    return base + _SEP + tail


def normalize_remote(path: str) -> str:
    """Normalized form of ``path``; an empty result becomes ``"."``."""
    normal = _lexically_normal(path)
    return normal if normal else _CURRENT


def resolve_remote_path(cwd: str, path: str) -> str:
    """Resolve ``path`` against the remote working directory ``cwd``.

    An empty ``path`` yields ``cwd`` unchanged; an absolute one ignores ``cwd``.
    """
    if not path:
        return cwd
    combined = path if path.startswith(_SEP) else _append(cwd, path)
    return normalize_remote(combined)


def join_remote_path(remote_root: str, relative: str) -> str:
    """Place the relative path ``relative`` beneath ``remote_root``."""
    if not relative or relative == _CURRENT:
        return remote_root
    return normalize_remote(_append(remote_root, relative))


def remote_parent_directory(remote_path: str) -> str | None:
    """Directory that must exist before ``remote_path`` can be created.

    Returns ``None`` when the path lies directly in the current directory.
    """
    slash = remote_path.rfind(_SEP)
    if slash < 0:
        return None
    head = remote_path[:slash].rstrip(_SEP)
    if not head:
        head = _SEP if remote_path.startswith(_SEP) else ""
    if not head or head == _CURRENT:
        return None
    return head