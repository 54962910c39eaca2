from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Iterator
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path

from jccs.config import ScanConfig
from jccs.engine.classifier import classify_lines
from jccs.engine.types import FileResult
from jccs.languages.registry import matches_extension

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ScanTarget:
    scan_path: Path
    config: ScanConfig


@dataclass(frozen=True, slots=True)
class ScanFailure:
    path: Path
    error: OSError


def prepare_target(scan_path: Path, config: ScanConfig | None = None) -> ScanTarget:
    return ScanTarget(scan_path=scan_path, config=config if config is not None else ScanConfig())


def discover_files(target: ScanTarget) -> list[Path]:
    """
    Collect every regular file under the scan path that matches the extension.

    Directory symlinks are followed when enabled; each real directory is walked
    once, which also breaks symlink cycles.
    """

    scan_path = target.scan_path
    config = target.config

    if scan_path.is_file():
        return [scan_path] if matches_extension(scan_path, config.extension) else []

    files: list[Path] = []
    seen_dirs: set[str] = set()
    walker = os.walk(scan_path, topdown=True, onerror=_log_walk_error, followlinks=config.follow_symlinks)
    for dirpath, dirnames, filenames in walker:
        real = os.path.realpath(dirpath)
        if real in seen_dirs:
            logger.debug("skipping already visited directory %s", dirpath)
            dirnames[:] = []
            continue
        seen_dirs.add(real)

        dirnames[:] = sorted(d for d in dirnames if d not in config.skip_dirs)
        base = Path(dirpath)

        for filename in sorted(filenames):
            path = base / filename
            if not matches_extension(path, config.extension):
                continue
            if not path.is_file():
                logger.debug("skipping non-regular file %s", path)
                continue
            files.append(path)

    return files


def scan_file(path: Path) -> FileResult:
    """Classify one file; raises `OSError` when it cannot be read."""

    # Universal newlines: `\n`, `\r\n` and `\r` all end a line.
    with path.open("r", encoding="utf-8", errors="replace") as handle:
        return classify_lines(handle, path=path)


def scan_files(paths: Iterable[Path], *, workers: int = 1) -> Iterator[FileResult | ScanFailure]:
    """
    Scan files, optionally in parallel.

    Results are yielded in input order regardless of `workers`, so serial and
    parallel runs report identically.
    """

    path_list = list(paths)
    if workers <= 1 or len(path_list) <= 1:
        for path in path_list:
            yield _scan_or_failure(path)
        return

    max_workers = min(workers, len(path_list))
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        yield from executor.map(_scan_or_failure, path_list)


def _scan_or_failure(path: Path) -> FileResult | ScanFailure:
    try:
        return scan_file(path)
    except OSError as exc:
        return ScanFailure(path=path, error=exc)


def _log_walk_error(exc: OSError) -> None:
    logger.warning("cannot list %s: %s", exc.filename, exc.strerror or exc)
