from __future__ import annotations

from pathlib import Path

DOCUMENTED = "\n".join(
    [
        "package com.example;",
        "",
        "import java.util.List;",
        "",
        "/**",
        " * Holds things.",
        " */",
        "public class Documented {",
        "}",
        "",
    ]
)

UNDOCUMENTED = "\n".join(
    [
        "package com.example;",
        "",
        "public class Undocumented {",
        "}",
        "",
    ]
)


def write_file(root: Path, relpath: str, content: str) -> Path:
    path = root / relpath
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path
