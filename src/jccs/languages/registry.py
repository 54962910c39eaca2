from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class LanguageSpec:
    name: str
    extensions: tuple[str, ...]


JAVA = LanguageSpec("java", (".java",))
DEFAULT_EXTENSION = JAVA.extensions[0]


def matches_extension(path: Path, extension: str = DEFAULT_EXTENSION) -> bool:
    """
    Case-insensitive filename suffix check.

    Compares the whole file name rather than `Path.suffix`, so `Foo.JAVA`
    matches and a bare `.java` file name does too.
    """

    return path.name.lower().endswith(extension.lower())
