"""Package ecosystems detected from manifest files."""

from __future__ import annotations

from ..file_system import FileSystem
from .registry import register_axiom

# (manifest globs, packager) in reporting order
PACKAGER_MANIFESTS: list[tuple[list[str], str]] = [
    (["package.json"], "npm"),
    (["Gemfile", "*.gemspec"], "rubygems"),
    (["setup.py", "setup.cfg", "pyproject.toml", "requirements*.txt", "Pipfile"], "pypi"),
    (["pom.xml"], "maven"),
    (["build.gradle", "build.gradle.kts"], "gradle"),
    (["Cargo.toml"], "cargo"),
    (["go.mod"], "go"),
    (["composer.json"], "composer"),
    (["*.csproj", "*.nuspec", "packages.config"], "nuget"),
    (["Podfile", "*.podspec"], "cocoapods"),
    (["mix.exs"], "hex"),
    (["pubspec.yaml"], "pub"),
]


@register_axiom("packagers")
def packagers(fs: FileSystem) -> list[str]:
    found: list[str] = []
    for globs, name in PACKAGER_MANIFESTS:
        if fs.find_first_file(globs) is not None:
            found.append(name)
    return found
