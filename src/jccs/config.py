from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass

from jccs.languages.registry import DEFAULT_EXTENSION


class ConfigError(ValueError):
    """Raised when scan settings supplied on the command line are invalid."""


DEFAULT_MAX_WORKERS = 32


@dataclass(frozen=True, slots=True)
class ScanConfig:
    extension: str = DEFAULT_EXTENSION
    workers: int = 1
    skip_dirs: frozenset[str] = frozenset()
    follow_symlinks: bool = True


def resolve_worker_count(
    raw_value: str | None,
    *,
    default: int = 1,
    max_workers: int = DEFAULT_MAX_WORKERS,
) -> int:
    """
    Resolve a worker count from a CLI-style string.

    - None/"" fall back to the default
    - "auto" uses twice the CPU count
    - Values above `max_workers` are clamped
    """

    if raw_value is None:
        return min(max(1, default), max_workers)

    normalized = raw_value.strip().lower()
    if not normalized:
        return min(max(1, default), max_workers)
    if normalized == "auto":
        cpu = os.cpu_count() or 1
        return min(cpu * 2, max_workers)

    try:
        workers = int(normalized)
    except ValueError as exc:
        raise ConfigError(f"`workers` must be a positive integer or 'auto', got {raw_value!r}.") from exc

    if workers <= 0:
        raise ConfigError("`workers` must be > 0.")
    return min(workers, max_workers)


def _normalize_extension(value: str) -> str:
    normalized = value.strip().lower()
    if not normalized.startswith(".") or len(normalized) < 2:
        raise ConfigError(f"`extension` must look like '.java', got {value!r}.")
    if "/" in normalized or "\\" in normalized:
        raise ConfigError("`extension` must not contain path separators.")
    return normalized


def build_config(
    *,
    extension: str = DEFAULT_EXTENSION,
    workers: str | None = None,
    skip_dirs: Iterable[str] = (),
    follow_symlinks: bool = True,
) -> ScanConfig:
    names: set[str] = set()
    for name in skip_dirs:
        cleaned = name.strip()
        if not cleaned:
            raise ConfigError("`skip-dir` must not be empty.")
        names.add(cleaned)

    return ScanConfig(
        extension=_normalize_extension(extension),
        workers=resolve_worker_count(workers),
        skip_dirs=frozenset(names),
        follow_symlinks=follow_symlinks,
    )
