from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from jccs import __version__
from jccs.audit import AuditResult
from jccs.engine.types import Diagnostic
from jccs.utils import safe_relpath

REPORT_SCHEMA_VERSION = 1


def render_json(result: AuditResult, *, root: Path) -> str:
    totals = result.totals
    payload = {
        "schema_version": REPORT_SCHEMA_VERSION,
        "tool": {"name": "jccs", "version": __version__},
        "root": str(root),
        "extension": result.target.config.extension,
        "files_processed": totals.files_processed,
        "files_with_error": totals.files_with_error,
        "files_unreadable": totals.files_unreadable,
        "total_diagnostics": totals.total_diagnostics,
        "percent": totals.percent,
        "diagnostics": [_diagnostic_to_dict(d, root=root) for d in result.diagnostics],
        "unreadable": [
            {"path": safe_relpath(failure.path, root), "error": failure.error.strerror or str(failure.error)}
            for failure in result.unreadable
        ],
    }
    return json.dumps(payload, indent=2, sort_keys=False)


def _diagnostic_to_dict(d: Diagnostic, *, root: Path) -> dict[str, Any]:
    return {
        "path": safe_relpath(d.path, root),
        "line": d.line,
        "message": d.message,
    }
