"""Path manipulation helpers for slash- or backslash-separated paths."""

from __future__ import annotations

_SEPARATORS = "/\\"


def is_absolute(path):
    """Return True if the path starts with a slash or backslash."""
    return path[:1] in ("/", "\\") and path != ""


def is_relative(path):
    """Return True if the path does not start with a separator."""
    return not is_absolute(path)


def _filename_start(path: str) -> int:
    n = len(path.rstrip(_SEPARATORS))
    while n > 0 and path[n - 1] not in _SEPARATORS:
        n -= 1
    return n


def get_filename(path):
    """Return the last component of a path, trailing separators included."""
    return path[_filename_start(path):]


def remove_filename(path):
    """Return the path with its last component removed."""
    return path[:_filename_start(path)]


def truncate(path, max_len):
    """Return the path limited to at most max_len characters."""
    return path[:max_len]


def _collapse_separators(path: str) -> str:
    out: list[str] = []
    for ch in path:
        if ch in _SEPARATORS:
            if not out or out[-1] != "/":
                out.append("/")
            elif out and out[-1] == "/" and not _last_was_separator(out):
                out.append("/")
        else:
            out.append(ch)
    return "".join(out)


def _last_was_separator(out: list[str]) -> bool:
    return bool(out) and out[-1] == "/"


def canonicalize(path):
    """Simplify a path: unify separators and resolve '.' and '..' elements."""
    parts = _collapse_separators(path).split("/")
    last = len(parts) - 1
    trailing_slash = parts[-1] == ""
    out: list[str] = []

    for t, token in enumerate(parts):
        at_end = t == last
        slash_follows = not at_end
        slash_then_end = t == last - 1 and trailing_slash
        k = len(out)

        if token == ".":
            if k == 0:
                if at_end:
                    out.append(".")
                elif slash_then_end:
                    out.extend("./")
            elif k > 1 and at_end:
                out.pop()
        elif token == "..":
            if k == 0:
                out.extend("..")
                if slash_follows:
                    out.append("/")
            elif k > 1:
                prev = next(
                    (pos for pos in range(k - 2, -1, -1) if out[pos] == "/"),
                    None,
                )
                if prev is not None:
                    if out[prev + 1:prev + 3] == [".", "."]:
                        out.extend("..")
                        first = None
                    else:
                        first = out[0]
                        del out[prev:]
                    if not out and first == "/":
                        out.append("/")
                    elif slash_follows:
                        out.append("/")
                elif k == 3 and out[:2] == [".", "."]:
                    out.extend("..")
                    if slash_follows:
                        out.append("/")
                elif at_end:
                    out = ["."]
                elif slash_then_end:
                    out = [".", "/"]
                else:
                    out = []
        else:
            out.extend(token)
            if slash_follows:
                out.append("/")

    return "".join(out)


def add_slash(path, max_len):
    """Append a slash unless the path already ends with a separator."""
    if not path:
        return "/" if max_len >= 1 else path
    if path[-1] not in _SEPARATORS and max_len >= len(path) + 1:
        return path + "/"
    return path


def remove_slash(path):
    """Remove trailing separators, keeping a leading one."""
    head = path[:1] if is_absolute(path) else ""
    body = path[len(head):]
    return head + body.rstrip(_SEPARATORS)


def combine(path, more, max_len):
    """Join two paths with a slash, keeping the result within max_len."""
    if path:
        path = add_slash(path, max_len)
    more = more.lstrip(_SEPARATORS)
    if len(path) < max_len:
        path += more[:max_len - len(path)]
    return path


def match(path, pattern):
    """Case-insensitive match against a pattern using '?' and '*' wildcards."""
    i = j = 0
    while j < len(pattern):
        wanted = pattern[j]
        if wanted == "?":
            if i >= len(path):
                return False
            i += 1
            j += 1
        elif wanted == "*":
            if i >= len(path):
                j += 1
            elif match(path[i:], pattern[j + 1:]):
                return True
            else:
                i += 1
        else:
            if i >= len(path) or path[i].lower() != wanted.lower():
                return False
            i += 1
            j += 1
    return i >= len(path)