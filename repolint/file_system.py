"""Filesystem access scoped to a target directory.

Rules and axioms never touch the disk directly. They receive a FileSystem
whose `target_dir` and `filter_paths` are set by the linter before a run.

Glob patterns are matched against paths relative to `target_dir` using `/`
separators:

- `*` and `?` never cross a directory boundary
- `**` matches any number of directories
- `{a,b}` expands to alternatives
- a leading `!` excludes whatever the pattern matches
"""

from __future__ import annotations

import re
from functools import lru_cache
from pathlib import Path
from typing import Iterable, Iterator, Literal

EntryKind = Literal["file", "dir"]

# Directories never reported by find_* (the git object store is huge)
IGNORED_DIRS = {".git"}

_BINARY_SNIFF_BYTES = 8000


def _split_alternatives(body: str) -> list[str]:
    """Split brace contents on top-level commas."""
    parts: list[str] = []
    depth = 0
    current = ""
    for ch in body:
        if ch == "," and depth == 0:
            parts.append(current)
            current = ""
            continue
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
        current += ch
    parts.append(current)
    return parts


def _translate(pattern: str) -> str:
    out: list[str] = []
    i = 0
    n = len(pattern)
    while i < n:
        ch = pattern[i]
        if ch == "*":
            if pattern.startswith("**", i):
                if pattern.startswith("**/", i):
                    out.append("(?:.*/)?")
                    i += 3
                else:
                    out.append(".*")
                    i += 2
                continue
            out.append("[^/]*")
        elif ch == "?":
            out.append("[^/]")
        elif ch == "[":
            end = pattern.find("]", i + 1)
            if end == -1:
                out.append(re.escape(ch))
            else:
                body = pattern[i + 1 : end]
                if body.startswith("!"):
                    body = "^" + body[1:]
                out.append(f"[{body}]")
                i = end
        elif ch == "{":
            depth = 0
            end = -1
            for j in range(i, n):
                if pattern[j] == "{":
                    depth += 1
                elif pattern[j] == "}":
                    depth -= 1
                    if depth == 0:
                        end = j
                        break
            if end == -1:
                out.append(re.escape(ch))
            else:
                alternatives = _split_alternatives(pattern[i + 1 : end])
                out.append("(?:" + "|".join(_translate(a) for a in alternatives) + ")")
                i = end
        else:
            out.append(re.escape(ch))
        i += 1
    return "".join(out)


@lru_cache(maxsize=512)
def compile_glob(pattern: str, nocase: bool = False) -> re.Pattern[str]:
    """Compile a glob pattern into an anchored regular expression."""
    if pattern.startswith("./"):
        pattern = pattern[2:]
    flags = re.IGNORECASE if nocase else 0
    return re.compile(r"\A" + _translate(pattern) + r"\Z", flags)


def _as_list(globs: str | Iterable[str]) -> list[str]:
    if isinstance(globs, str):
        return [globs]
    return [str(g) for g in globs]


class FileSystem:
    """Read-only view of the tree under `target_dir`."""

    def __init__(self, target_dir: Path | str = ".", filter_paths: Iterable[str] | None = None):
        self.target_dir = Path(target_dir)
        self.filter_paths: list[str] = list(filter_paths or [])
        self._listing: tuple[Path, list[tuple[str, EntryKind]]] | None = None

    def __repr__(self) -> str:
        return f"FileSystem(target_dir={str(self.target_dir)!r}, filter_paths={self.filter_paths!r})"

    # ------------------------------------------------------------------
    # Scoping
    # ------------------------------------------------------------------

    def should_include(self, rel_path: str) -> bool:
        """Whether `rel_path` falls inside the configured filter paths."""
        if not self.filter_paths:
            return True
        rel_path = rel_path.strip("/")
        for filter_path in self.filter_paths:
            cleaned = filter_path.strip().removeprefix("./").strip("/")
            if not cleaned:
                return True
            if rel_path == cleaned or rel_path.startswith(cleaned + "/"):
                return True
            if compile_glob(cleaned).match(rel_path):
                return True
        return False

    def refresh(self) -> None:
        """Forget the cached tree listing so the next lookup walks the disk again."""
        self._listing = None

    def _walk(self) -> Iterator[tuple[str, EntryKind]]:
        root = self.target_dir
        if not root.is_dir():
            return
        for path in sorted(root.rglob("*")):
            rel = path.relative_to(root)
            if rel.parts and rel.parts[0] in IGNORED_DIRS:
                continue
            if path.is_dir():
                yield rel.as_posix(), "dir"
            elif path.is_file():
                yield rel.as_posix(), "file"
            # Dangling symlinks are neither

    def _entries(self) -> list[tuple[str, EntryKind]]:
        """Sorted listing of the tree, walked once per `target_dir`."""
        if self._listing is None or self._listing[0] != self.target_dir:
            self._listing = (self.target_dir, list(self._walk()))
        return self._listing[1]

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def find_all(
        self,
        globs: str | Iterable[str],
        nocase: bool = False,
        *,
        kind: EntryKind | None = None,
    ) -> list[str]:
        """All relative paths matching any positive glob and no `!` glob."""
        patterns = _as_list(globs)
        include = [compile_glob(p, nocase) for p in patterns if not p.startswith("!")]
        exclude = [compile_glob(p[1:], nocase) for p in patterns if p.startswith("!")]
        if not include:
            return []

        found: list[str] = []
        for rel, entry_kind in self._entries():
            if kind is not None and entry_kind != kind:
                continue
            if not any(rx.match(rel) for rx in include):
                continue
            if any(rx.match(rel) for rx in exclude):
                continue
            if not self.should_include(rel):
                continue
            found.append(rel)
        return found

    def find_first(
        self,
        globs: str | Iterable[str],
        nocase: bool = False,
        *,
        kind: EntryKind | None = None,
    ) -> str | None:
        """First match, trying globs in the order given."""
        patterns = _as_list(globs)
        negated = [p for p in patterns if p.startswith("!")]
        for pattern in patterns:
            if pattern.startswith("!"):
                continue
            matches = self.find_all([pattern, *negated], nocase, kind=kind)
            if matches:
                return matches[0]
        return None

    def find_all_files(self, globs: str | Iterable[str], nocase: bool = False) -> list[str]:
        return self.find_all(globs, nocase, kind="file")

    def find_first_file(self, globs: str | Iterable[str], nocase: bool = False) -> str | None:
        return self.find_first(globs, nocase, kind="file")

    def find_all_dirs(self, globs: str | Iterable[str], nocase: bool = False) -> list[str]:
        return self.find_all(globs, nocase, kind="dir")

    def find_first_dir(self, globs: str | Iterable[str], nocase: bool = False) -> str | None:
        return self.find_first(globs, nocase, kind="dir")

    # ------------------------------------------------------------------
    # Content
    # ------------------------------------------------------------------

    def resolve(self, rel_path: str) -> Path:
        return self.target_dir / rel_path

    def file_exists(self, rel_path: str) -> bool:
        return self.resolve(rel_path).exists()

    def is_binary_file(self, rel_path: str) -> bool:
        """Heuristic: a NUL byte in the leading chunk means binary."""
        path = self.resolve(rel_path)
        if not path.is_file():
            return False
        with path.open("rb") as f:
            chunk = f.read(_BINARY_SNIFF_BYTES)
        return b"\0" in chunk

    def get_file_contents(self, rel_path: str) -> str | None:
        """Text content of a file, or None if it is missing."""
        path = self.resolve(rel_path)
        if not path.is_file():
            return None
        return path.read_text(encoding="utf-8", errors="replace")

    def get_file_lines(self, rel_path: str, line_count: int) -> str | None:
        """The first `line_count` lines of a file joined with newlines."""
        path = self.resolve(rel_path)
        if not path.is_file():
            return None
        lines: list[str] = []
        with path.open("r", encoding="utf-8", errors="replace") as f:
            for line in f:
                if len(lines) >= line_count:
                    break
                lines.append(line.rstrip("\r\n"))
        return "\n".join(lines)
