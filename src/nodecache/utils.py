"""Path utilities, mask parsing, Ant-style glob matching."""

from __future__ import annotations

import posixpath
import re
from dataclasses import dataclass, field

# =============================================================================
# Default Excludes (VCS metadata and editor droppings)
# =============================================================================

DEFAULT_EXCLUDES = (
    "**/*~",
    "**/#*#",
    "**/.#*",
    "**/%*%",
    "**/._*",
    "**/CVS",
    "**/CVS/**",
    "**/.cvsignore",
    "**/SCCS",
    "**/SCCS/**",
    "**/vssver.scc",
    "**/.svn",
    "**/.svn/**",
    "**/.DS_Store",
    "**/.git",
    "**/.git/**",
    "**/.gitattributes",
    "**/.gitignore",
    "**/.gitmodules",
    "**/.hg",
    "**/.hg/**",
    "**/.hgignore",
    "**/.hgsub",
    "**/.hgsubstate",
    "**/.hgtags",
    "**/.bzr",
    "**/.bzr/**",
    "**/.bzrignore",
)

_MASK_SEPARATORS = re.compile(r"[,;]")


# =============================================================================
# Path Utilities
# =============================================================================


def normalize_path(path: str) -> str:
    """Normalize a POSIX path, keeping it absolute.

    - Ensures leading /
    - Resolves .. and . references (never above /)
    - Removes double slashes
    - Removes trailing slash (except for root)

    Examples:
        normalize_path("foo.txt") -> "/foo.txt"
        normalize_path("/foo//bar.txt") -> "/foo/bar.txt"
        normalize_path("/foo/../bar.txt") -> "/bar.txt"
        normalize_path("/../foo") -> "/foo"
        normalize_path("") -> "/"
    """
    if not path:
        return "/"

    path = path.strip().replace("\\", "/")

    if not path.startswith("/"):
        path = "/" + path

    path = posixpath.normpath(path)

    # normpath keeps a leading "//" as-is on POSIX
    if path.startswith("//"):
        path = "/" + path.lstrip("/")

    return path


def split_segments(path: str) -> tuple[str, ...]:
    """Split a relative path into normalized segments.

    Examples:
        split_segments("a/b") -> ("a", "b")
        split_segments("a/./b/../c/") -> ("a", "c")
        split_segments("") -> ()
    """
    normalized = normalize_path(path)
    if normalized == "/":
        return ()
    return tuple(normalized.lstrip("/").split("/"))


def join_path(base: str, *parts: str) -> str:
    """Join relative *parts* under *base* with POSIX separators.

    Empty parts are skipped, so ``join_path("/home", "")`` is ``"/home"``.
    """
    result = base.replace("\\", "/")
    for part in parts:
        if not part:
            continue
        part = part.replace("\\", "/").lstrip("/")
        result = f"{result.rstrip('/')}/{part}" if result else part
    return result


# =============================================================================
# Masks and Globs
# =============================================================================


def split_masks(mask: str | None) -> list[str]:
    """Split a comma/semicolon separated mask into its glob alternatives.

    Examples:
        split_masks("*.txt, *.log") -> ["*.txt", "*.log"]
        split_masks("a/**;b/") -> ["a/**", "b/"]
        split_masks("") -> []
    """
    if not mask:
        return []
    return [p.strip() for p in _MASK_SEPARATORS.split(mask) if p.strip()]


def _segment_regex(segment: str) -> str:
    out: list[str] = []
    for ch in segment:
        if ch == "*":
            out.append("[^/]*")
        elif ch == "?":
            out.append("[^/]")
        else:
            out.append(re.escape(ch))
    return "".join(out)


def compile_glob(pattern: str) -> re.Pattern[str]:
    """Compile an Ant-style glob into a regex over relative POSIX paths.

    ``*`` and ``?`` stay within one segment, ``**`` spans any number of
    segments (including none), and a trailing ``/`` means ``/**``.
    """
    pattern = pattern.strip().replace("\\", "/").lstrip("/")
    if pattern.endswith("/"):
        pattern += "**"

    parts = [p for p in pattern.split("/") if p]
    regex = ""
    for i, part in enumerate(parts):
        last = i == len(parts) - 1
        if part == "**":
            if last:
                # "a/**" also matches "a" itself
                regex = regex[:-1] + "(?:/.*)?" if regex.endswith("/") else regex + ".*"
            else:
                regex += "(?:.*/)?"
            continue
        regex += _segment_regex(part)
        if not last:
            regex += "/"

    return re.compile(f"^{regex}$")


@dataclass
class FileFilter:
    """Include/exclude filter over paths relative to a transfer root.

    An empty include mask matches everything.
    """

    includes: str = ""
    excludes: str = ""
    use_default_excludes: bool = True
    _include: list[re.Pattern[str]] = field(init=False, repr=False)
    _exclude: list[re.Pattern[str]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._include = [compile_glob(p) for p in split_masks(self.includes) or ["**"]]
        exclude = split_masks(self.excludes)
        if self.use_default_excludes:
            exclude.extend(DEFAULT_EXCLUDES)
        self._exclude = [compile_glob(p) for p in exclude]

    def is_excluded(self, rel_path: str) -> bool:
        """True if *rel_path* (file or directory) matches an exclude pattern."""
        return any(p.match(rel_path) for p in self._exclude)

    def accepts(self, rel_path: str) -> bool:
        """True if the file at *rel_path* should be transferred."""
        if self.is_excluded(rel_path):
            return False
        return any(p.match(rel_path) for p in self._include)
