"""Programming languages detected from file extensions."""

from __future__ import annotations

from collections import defaultdict
from pathlib import PurePosixPath

from ..file_system import FileSystem
from .registry import register_axiom

# Dependency and build output trees are not the project's own code
VENDORED_GLOBS = [
    "!**/node_modules/**",
    "!**/vendor/**",
    "!**/third_party/**",
    "!**/dist/**",
    "!**/build/**",
    "!**/.venv/**",
]

EXTENSION_LANGUAGES: dict[str, str] = {
    ".c": "c",
    ".h": "c",
    ".cc": "c++",
    ".cpp": "c++",
    ".cxx": "c++",
    ".hpp": "c++",
    ".cs": "c#",
    ".clj": "clojure",
    ".css": "css",
    ".dart": "dart",
    ".ex": "elixir",
    ".exs": "elixir",
    ".erl": "erlang",
    ".go": "go",
    ".groovy": "groovy",
    ".hs": "haskell",
    ".html": "html",
    ".java": "java",
    ".js": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".jsx": "javascript",
    ".kt": "kotlin",
    ".kts": "kotlin",
    ".lua": "lua",
    ".m": "objective-c",
    ".php": "php",
    ".pl": "perl",
    ".py": "python",
    ".r": "r",
    ".rb": "ruby",
    ".rs": "rust",
    ".scala": "scala",
    ".sh": "shell",
    ".bash": "shell",
    ".swift": "swift",
    ".ts": "typescript",
    ".tsx": "typescript",
}


@register_axiom("linguist")
def linguist(fs: FileSystem) -> list[str]:
    """Languages ordered by total file size, largest first."""
    sizes: dict[str, int] = defaultdict(int)
    for rel_path in fs.find_all_files(["**/*", *VENDORED_GLOBS]):
        language = EXTENSION_LANGUAGES.get(PurePosixPath(rel_path).suffix.lower())
        if language is None:
            continue
        sizes[language] += fs.resolve(rel_path).stat().st_size
    return sorted(sizes, key=lambda lang: (-sizes[lang], lang))
