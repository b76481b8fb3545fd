"""License detection from well-known license file phrases.

Returns SPDX identifiers for every license recognised in the repository's
top-level license files.
"""

from __future__ import annotations

import re

from ..file_system import FileSystem
from .registry import register_axiom

LICENSE_FILE_GLOBS = ["LICENSE*", "LICENCE*", "COPYING*", "UNLICENSE"]

# Checked in order; more specific texts come before the ones they contain.
LICENSE_SIGNATURES: list[tuple[str, list[str]]] = [
    ("AGPL-3.0", [r"GNU AFFERO GENERAL PUBLIC LICENSE", r"Version 3"]),
    ("LGPL-3.0", [r"GNU LESSER GENERAL PUBLIC LICENSE", r"Version 3"]),
    ("LGPL-2.1", [r"GNU LESSER GENERAL PUBLIC LICENSE", r"Version 2\.1"]),
    ("GPL-3.0", [r"GNU GENERAL PUBLIC LICENSE", r"Version 3"]),
    ("GPL-2.0", [r"GNU GENERAL PUBLIC LICENSE", r"Version 2"]),
    ("Apache-2.0", [r"Apache License", r"Version 2\.0"]),
    ("MPL-2.0", [r"Mozilla Public License,? (Version|v\.?) ?2\.0"]),
    ("EPL-2.0", [r"Eclipse Public License.{0,10}2\.0"]),
    ("Unlicense", [r"free and unencumbered software released into the public domain"]),
    ("CC0-1.0", [r"CC0 1\.0 Universal"]),
    ("ISC", [r"Permission to use, copy, modify, and(/or)? distribute this software for any"]),
    ("MIT", [r"Permission is hereby granted, free of charge"]),
    ("BSD-3-Clause", [r"Redistribution and use in source and binary forms", r"Neither the name"]),
    ("BSD-2-Clause", [r"Redistribution and use in source and binary forms"]),
]

_COMPILED = [
    (spdx, [re.compile(p, re.IGNORECASE | re.DOTALL) for p in patterns])
    for spdx, patterns in LICENSE_SIGNATURES
]


def detect_license(text: str) -> str | None:
    """SPDX id of the first signature fully present in `text`."""
    normalized = " ".join(text.split())
    for spdx, patterns in _COMPILED:
        if all(p.search(normalized) for p in patterns):
            return spdx
    return None


@register_axiom("licensee")
def licensee(fs: FileSystem) -> list[str]:
    licenses: list[str] = []
    for rel_path in fs.find_all_files(LICENSE_FILE_GLOBS, nocase=True):
        if fs.is_binary_file(rel_path):
            continue
        spdx = detect_license(fs.get_file_contents(rel_path) or "")
        if spdx and spdx not in licenses:
            licenses.append(spdx)
    return licenses
