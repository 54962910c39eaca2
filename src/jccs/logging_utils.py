from __future__ import annotations

import logging
import sys


def configure_logging(*, verbose: bool, quiet: bool) -> None:
    """
    Configure process-wide logging for the CLI.

    - Default: INFO
    - --verbose: DEBUG
    - --quiet: WARNING

    Logs go to stderr next to the diagnostics; stdout only carries the summary
    line (or the JSON document).
    """

    if verbose and quiet:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    fmt = "jccs: %(message)s"
    if verbose:
        fmt = "jccs [%(levelname)s] %(name)s: %(message)s"

    logging.basicConfig(level=level, format=fmt, stream=sys.stderr, force=True)
